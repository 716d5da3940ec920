# utils/validators.py
"""
Validation utilities for AreaScope.
Checks drawn vertices, rings, polylines, radii and numeric metrics before
anything is measured.
"""

import math
from typing import List, Tuple, Optional

from constants import (
    MIN_RING_VERTICES,
    MIN_POLYLINE_VERTICES,
    WEB_MERCATOR_LIMIT
)
from core.exceptions import InvalidGeometryError, InvalidInputError
from core.geometry_types import Vertex, MeasurementType


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_numeric(value, min_val: float = None, max_val: float = None) -> Tuple[bool, Optional[float]]:
    """
    Validate a numeric value with optional range checking.

    Args:
        value: Value to validate (int or float)
        min_val: Minimum allowed value (optional)
        max_val: Maximum allowed value (optional)

    Returns:
        Tuple of (is_valid, parsed_value)
    """
    if not _is_number(value):
        return False, None

    parsed = float(value)
    if not math.isfinite(parsed):
        return False, None

    if min_val is not None and parsed < min_val:
        return False, None

    if max_val is not None and parsed > max_val:
        return False, None

    return True, parsed


def validate_decimal_degrees(value, is_longitude: bool = False) -> Tuple[bool, Optional[float]]:
    """
    Validate decimal degrees coordinate.

    Args:
        value: Value to validate
        is_longitude: True if this is longitude (-180 to 180), False for latitude (-90 to 90)

    Returns:
        Tuple of (is_valid, parsed_value)
    """
    limit = 180.0 if is_longitude else 90.0
    return validate_numeric(value, -limit, limit)


def validate_web_mercator(value) -> Tuple[bool, Optional[float]]:
    """
    Validate Web Mercator coordinate.
    Web Mercator coordinates are in meters, approximately ±20,037,508.

    Returns:
        Tuple of (is_valid, parsed_value)
    """
    return validate_numeric(value, -WEB_MERCATOR_LIMIT, WEB_MERCATOR_LIMIT)


def normalize_vertex(vertex, geographic: bool = False, geometry_type: str = "vertex") -> Vertex:
    """
    Check a single vertex and return it as a tuple of floats.

    Raises:
        InvalidGeometryError: If the vertex is malformed, non-finite or,
            in geographic mode, outside the longitude/latitude range.
    """
    if not isinstance(vertex, (list, tuple)) or len(vertex) != 2:
        raise InvalidGeometryError(
            geometry_type, f"each vertex must be an (x, y) pair, got {vertex!r}"
        )

    x_ok, x = validate_numeric(vertex[0])
    y_ok, y = validate_numeric(vertex[1])
    if not (x_ok and y_ok):
        raise InvalidGeometryError(
            geometry_type, f"vertex values must be finite numbers, got {vertex!r}"
        )

    if geographic:
        if not validate_decimal_degrees(x, is_longitude=True)[0]:
            raise InvalidGeometryError(
                geometry_type, f"longitude {x} outside [-180, 180]"
            )
        if not validate_decimal_degrees(y, is_longitude=False)[0]:
            raise InvalidGeometryError(
                geometry_type, f"latitude {y} outside [-90, 90]"
            )

    return (x, y)


def normalize_ring(coords, geographic: bool = False) -> List[Vertex]:
    """
    Validate a polygon ring and return it without a duplicate closing vertex.

    The ring is always treated as implicitly closed; a caller-supplied
    closing vertex (first == last) is dropped so it is not counted twice.

    Raises:
        InvalidGeometryError: If fewer than 3 distinct vertices remain.
    """
    if coords is None:
        raise InvalidGeometryError("polygon", "no vertices given")

    ring = [normalize_vertex(v, geographic, "polygon") for v in coords]

    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]

    distinct = len(set(ring))
    if distinct < MIN_RING_VERTICES:
        raise InvalidGeometryError(
            "polygon",
            f"a ring needs at least {MIN_RING_VERTICES} distinct vertices, got {distinct}"
        )

    return ring


def normalize_polyline(coords, geographic: bool = False) -> List[Vertex]:
    """
    Validate an open polyline.

    Raises:
        InvalidGeometryError: If fewer than 2 vertices are given.
    """
    if coords is None:
        raise InvalidGeometryError("line", "no vertices given")

    points = [normalize_vertex(v, geographic, "line") for v in coords]

    if len(points) < MIN_POLYLINE_VERTICES:
        raise InvalidGeometryError(
            "line",
            f"a polyline needs at least {MIN_POLYLINE_VERTICES} vertices, got {len(points)}"
        )

    return points


def validate_radius(radius) -> float:
    """
    Raises:
        InvalidGeometryError: If radius is not a finite number greater than zero.
    """
    is_valid, parsed = validate_numeric(radius)
    if not is_valid or parsed <= 0:
        raise InvalidGeometryError(
            "circle", f"radius must be a finite number greater than 0, got {radius!r}"
        )
    return parsed


def validate_metric(value, field_name: str = "value") -> float:
    """
    Check a metric passed to the formatter.

    Raises:
        InvalidInputError: On negative, non-finite or non-numeric input.
    """
    if not _is_number(value):
        raise InvalidInputError(field_name, value, "must be a number")

    parsed = float(value)
    if not math.isfinite(parsed):
        raise InvalidInputError(field_name, value, "must be finite")
    if parsed < 0:
        raise InvalidInputError(field_name, value, "must not be negative")

    return parsed


def validate_coordinates_for_geometry(coords: list, geom_type: str) -> Tuple[bool, Optional[str]]:
    """
    Validate that coordinates list is appropriate for the geometry type.

    Non-raising variant for the drawing UI, which uses it to decide whether
    a drawing interaction may complete.

    Args:
        coords: List of coordinate tuples
        geom_type: "polygon" or "line"

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not coords:
        return False, "Empty coordinate list"

    try:
        normalized_type = MeasurementType(str(geom_type).strip().lower())
    except ValueError:
        return False, f"Invalid geometry type: {geom_type}"

    try:
        if normalized_type == MeasurementType.POLYGON:
            normalize_ring(coords)
        elif normalized_type == MeasurementType.LINE:
            normalize_polyline(coords)
        elif len(coords) != 1:
            return False, f"A circle needs exactly 1 center coordinate, got {len(coords)}"
        else:
            normalize_vertex(coords[0], geometry_type="circle")
    except InvalidGeometryError as e:
        return False, e.reason

    return True, None
