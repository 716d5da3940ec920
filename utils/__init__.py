# utils/__init__.py
"""
Utility modules for AreaScope.
"""

from .logger import get_logger, setup_logging
from .validators import (
    normalize_vertex,
    normalize_ring,
    normalize_polyline,
    validate_radius,
    validate_metric,
    validate_coordinates_for_geometry
)

# Export measurement utilities
from .measurements import (
    calculate_distance_planar,
    calculate_distance_geographic,
    calculate_area_planar,
    calculate_area_geographic,
    calculate_perimeter_planar,
    calculate_perimeter_geographic,
    convert_distance,
    convert_area,
    format_distance,
    format_area
)

# Export projection adapter
from .projection import (
    project_vertex,
    project_vertices,
    unproject_vertex,
    unproject_vertices
)

__all__ = [
    # Logger
    'get_logger',
    'setup_logging',
    # Validators
    'normalize_vertex',
    'normalize_ring',
    'normalize_polyline',
    'validate_radius',
    'validate_metric',
    'validate_coordinates_for_geometry',
    # Measurements
    'calculate_distance_planar',
    'calculate_distance_geographic',
    'calculate_area_planar',
    'calculate_area_geographic',
    'calculate_perimeter_planar',
    'calculate_perimeter_geographic',
    'convert_distance',
    'convert_area',
    'format_distance',
    'format_area',
    # Projection
    'project_vertex',
    'project_vertices',
    'unproject_vertex',
    'unproject_vertices'
]
