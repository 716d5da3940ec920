"""
Measurement core for AreaScope: geometry engine, measurement model and formatter.
"""
