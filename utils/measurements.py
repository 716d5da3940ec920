"""
Measurement utilities for calculating distances, areas, and perimeters.
Supports both planar (raw Cartesian units) and geodesic (geographic) calculations.

Geodesic values are computed on a sphere of the spherical Mercator radius,
not on the WGS84 ellipsoid, so that areas agree with what a web map shows.
"""

from math import hypot
from typing import List, Sequence

from pyproj import Geod

from constants import (
    EARTH_RADIUS_M,
    SQUARE_METERS_PER_HECTARE,
    SQUARE_METERS_PER_SQUARE_KILOMETER,
    ACRES_PER_HECTARE,
    METERS_PER_KILOMETER,
    DEFAULT_PRECISION
)
from core.geometry_types import Vertex

# Sphere used for geodesic calculations (Karney's algorithm via pyproj)
geod = Geod(a=EARTH_RADIUS_M, b=EARTH_RADIUS_M)


def _open_ring(coords: Sequence[Vertex]) -> List[Vertex]:
    # Drop a duplicate closing point so the closing edge is not counted twice
    working_coords = list(coords)
    if len(working_coords) >= 3 and working_coords[0] == working_coords[-1]:
        working_coords = working_coords[:-1]
    return working_coords


def calculate_distance_planar(coords: Sequence[Vertex]) -> float:
    """
    Calculate distance along a path of planar coordinates.

    Args:
        coords: List of (x, y) tuples in linear units

    Returns:
        float: Total distance in the same linear units
    """
    if len(coords) < 2:
        return 0.0

    total_distance = 0.0
    for i in range(len(coords) - 1):
        x1, y1 = coords[i]
        x2, y2 = coords[i + 1]
        total_distance += hypot(x2 - x1, y2 - y1)

    return total_distance


def calculate_distance_geographic(coords: Sequence[Vertex]) -> float:
    """
    Calculate geodesic distance for geographic coordinates.

    Args:
        coords: List of (lon, lat) tuples in decimal degrees

    Returns:
        float: Total distance in meters
    """
    if len(coords) < 2:
        return 0.0

    total_distance = 0.0
    for i in range(len(coords) - 1):
        lon1, lat1 = coords[i]
        lon2, lat2 = coords[i + 1]
        # geod.inv returns (forward_azimuth, back_azimuth, distance)
        _, _, distance = geod.inv(lon1, lat1, lon2, lat2)
        total_distance += distance

    return total_distance


def calculate_signed_area_planar(coords: Sequence[Vertex]) -> float:
    """
    Signed shoelace area; positive for counter-clockwise rings.

    Args:
        coords: List of (x, y) tuples, implicitly closed

    Returns:
        float: Signed area in square units
    """
    working_coords = _open_ring(coords)
    if len(working_coords) < 3:
        return 0.0

    area = 0.0
    n = len(working_coords)
    for i in range(n):
        j = (i + 1) % n
        area += working_coords[i][0] * working_coords[j][1]
        area -= working_coords[j][0] * working_coords[i][1]

    return area / 2.0


def calculate_area_planar(coords: Sequence[Vertex]) -> float:
    """
    Calculate area for planar coordinates using the Shoelace formula.

    Args:
        coords: List of (x, y) tuples in linear units

    Returns:
        float: Area in square units
    """
    return abs(calculate_signed_area_planar(coords))


def calculate_area_geographic(coords: Sequence[Vertex]) -> float:
    """
    Calculate geodesic area for geographic coordinates.

    Args:
        coords: List of (lon, lat) tuples in decimal degrees

    Returns:
        float: Area in square meters
    """
    working_coords = _open_ring(coords)
    if len(working_coords) < 3:
        return 0.0

    lons = [coord[0] for coord in working_coords]
    lats = [coord[1] for coord in working_coords]

    # polygon_area_perimeter returns (signed area, perimeter)
    area, _ = geod.polygon_area_perimeter(lons, lats)

    return abs(area)


def calculate_perimeter_planar(coords: Sequence[Vertex]) -> float:
    """
    Calculate perimeter for a planar polygon.

    Args:
        coords: List of (x, y) tuples in linear units

    Returns:
        float: Perimeter in linear units
    """
    working_coords = _open_ring(coords)
    if len(working_coords) < 3:
        return 0.0

    closed_coords = working_coords + [working_coords[0]]
    return calculate_distance_planar(closed_coords)


def calculate_perimeter_geographic(coords: Sequence[Vertex]) -> float:
    """
    Calculate geodesic perimeter for geographic polygon.

    Args:
        coords: List of (lon, lat) tuples in decimal degrees

    Returns:
        float: Perimeter in meters
    """
    working_coords = _open_ring(coords)
    if len(working_coords) < 3:
        return 0.0

    lons = [coord[0] for coord in working_coords]
    lats = [coord[1] for coord in working_coords]

    # Closes the polygon itself, no need to append the first point
    _, perimeter = geod.polygon_area_perimeter(lons, lats)

    return abs(perimeter)


# Unit conversion functions

DISTANCE_CONVERSIONS = {
    "m": 1.0,
    "km": 1.0 / METERS_PER_KILOMETER,
    "ft": 3.28084,
    "mi": 0.000621371
}

AREA_CONVERSIONS = {
    "m2": 1.0,
    "km2": 1.0 / SQUARE_METERS_PER_SQUARE_KILOMETER,
    "ha": 1.0 / SQUARE_METERS_PER_HECTARE,
    "ft2": 10.7639,
    "ac": ACRES_PER_HECTARE / SQUARE_METERS_PER_HECTARE
}

AREA_LABELS = {
    "m2": "m²",
    "km2": "km²",
    "ha": "ha",
    "ft2": "ft²",
    "ac": "acres"
}


def convert_distance(value_meters: float, to_unit: str = "m") -> float:
    """
    Convert distance from meters to specified unit.

    Args:
        value_meters: Distance in meters
        to_unit: Target unit ('m', 'km', 'ft', 'mi')

    Returns:
        float: Converted distance
    """
    return value_meters * DISTANCE_CONVERSIONS.get(to_unit, 1.0)


def convert_area(value_m2: float, to_unit: str = "m2") -> float:
    """
    Convert area from square meters to specified unit.

    Args:
        value_m2: Area in square meters
        to_unit: Target unit ('m2', 'km2', 'ha', 'ft2', 'ac')

    Returns:
        float: Converted area
    """
    return value_m2 * AREA_CONVERSIONS.get(to_unit, 1.0)


def format_distance(value_meters: float, unit: str = "m", precision: int = DEFAULT_PRECISION) -> str:
    """
    Format distance with a fixed precision and unit label.

    Args:
        value_meters: Distance in meters
        unit: Preferred display unit
        precision: Decimal places

    Returns:
        str: Formatted distance string, e.g. "1.25 km"
    """
    if unit not in DISTANCE_CONVERSIONS:
        unit = "m"
    value = convert_distance(value_meters, unit)
    return f"{value:,.{precision}f} {unit}"


def format_area(value_m2: float, unit: str = "m2", precision: int = DEFAULT_PRECISION) -> str:
    """
    Format area with a fixed precision and unit label.

    Args:
        value_m2: Area in square meters
        unit: Preferred display unit
        precision: Decimal places

    Returns:
        str: Formatted area string, e.g. "3.20 ha"
    """
    if unit not in AREA_CONVERSIONS:
        unit = "m2"
    value = convert_area(value_m2, unit)
    return f"{value:,.{precision}f} {AREA_LABELS[unit]}"
