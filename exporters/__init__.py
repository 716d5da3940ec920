"""
Exporters for AreaScope measurement data.
"""
