"""
Importers for AreaScope measurement data.
"""
