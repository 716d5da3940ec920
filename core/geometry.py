# core/geometry.py
"""
Geometry engine: converts drawn vertices or circle parameters into area,
perimeter and length.

All functions are pure. Geographic mode expects (lon, lat) degrees and
returns meters / square meters measured on the spherical Mercator sphere;
planar mode works in whatever linear units the vertices are given in.
"""

import math
from typing import NamedTuple, Sequence

from core.geometry_types import CoordinateMode, Vertex
from utils.measurements import (
    calculate_area_geographic,
    calculate_area_planar,
    calculate_distance_geographic,
    calculate_distance_planar,
    calculate_perimeter_geographic,
    calculate_perimeter_planar
)
from utils.projection import (
    project_vertex,
    project_vertices,
    unproject_vertex,
    unproject_vertices
)
from utils.validators import (
    normalize_polyline,
    normalize_ring,
    normalize_vertex,
    validate_radius
)

__all__ = [
    "PolygonMetrics",
    "CircleMetrics",
    "compute_polygon_metrics",
    "compute_circle_metrics",
    "compute_polyline_length",
    "interior_point",
    "geographic_interior_point",
    "project_vertex",
    "project_vertices",
    "unproject_vertex",
    "unproject_vertices",
]


class PolygonMetrics(NamedTuple):
    area: float
    perimeter: float
    center_point: Vertex


class CircleMetrics(NamedTuple):
    area: float
    perimeter: float


def interior_point(ring: Sequence[Vertex]) -> Vertex:
    """
    Return a point strictly inside a simple ring, suitable for placing a label.

    A horizontal scan line is intersected with the ring edges and the
    midpoint of the widest inside interval is returned. The scan line sits
    halfway between the two adjacent distinct vertex heights nearest the
    middle of the bounding box, so it never runs through a vertex or along
    a horizontal edge. This is not the centroid.

    Args:
        ring: Implicitly closed list of (x, y) vertices

    Returns:
        (x, y) interior point
    """
    xs = [v[0] for v in ring]
    levels = sorted({v[1] for v in ring})
    min_x, max_x = min(xs), max(xs)
    mid_y = (levels[0] + levels[-1]) / 2.0

    if len(levels) < 2:
        # zero height
        return ((min_x + max_x) / 2.0, mid_y)

    scan_y = min(
        ((low + high) / 2.0 for low, high in zip(levels, levels[1:])),
        key=lambda y: abs(y - mid_y)
    )

    crossings = []
    n = len(ring)
    for i in range(n):
        (x1, y1), (x2, y2) = ring[i], ring[(i + 1) % n]
        if (y1 < scan_y < y2) or (y2 < scan_y < y1):
            t = (scan_y - y1) / (y2 - y1)
            crossings.append(x1 + t * (x2 - x1))

    crossings.sort()
    best_width = 0.0
    best_x = None
    for start, end in zip(crossings[0::2], crossings[1::2]):
        if end - start > best_width:
            best_width = end - start
            best_x = (start + end) / 2.0

    if best_x is None:
        # collinear ring
        return ((min_x + max_x) / 2.0, mid_y)

    return (best_x, scan_y)


def _unwrap_longitudes(ring: Sequence[Vertex]) -> list:
    """Shift western longitudes by 360 when the ring spans the antimeridian."""
    lons = [v[0] for v in ring]
    if max(lons) - min(lons) <= 180.0:
        return list(ring)
    return [(lon + 360.0 if lon < 0 else lon, lat) for lon, lat in ring]


def geographic_interior_point(ring: Sequence[Vertex]) -> Vertex:
    """interior_point for (lon, lat) rings, including ones crossing ±180°."""
    lon, lat = interior_point(_unwrap_longitudes(ring))
    if lon > 180.0:
        lon -= 360.0
    return (lon, lat)


def compute_polygon_metrics(ring: Sequence[Vertex], mode=CoordinateMode.GEOGRAPHIC) -> PolygonMetrics:
    """
    Compute area, perimeter and an interior point for a polygon ring.

    Args:
        ring: At least 3 distinct vertices; closure is implicit
        mode: CoordinateMode (or its string value)

    Returns:
        PolygonMetrics(area, perimeter, center_point)

    Raises:
        InvalidGeometryError: If fewer than 3 distinct vertices are given
    """
    mode = CoordinateMode.parse(mode)
    geographic = mode is CoordinateMode.GEOGRAPHIC
    working = normalize_ring(ring, geographic=geographic)

    if geographic:
        area = calculate_area_geographic(working)
        perimeter = calculate_perimeter_geographic(working)
        center = geographic_interior_point(working)
    else:
        area = calculate_area_planar(working)
        perimeter = calculate_perimeter_planar(working)
        center = interior_point(working)

    return PolygonMetrics(area, perimeter, center)


def compute_circle_metrics(center: Vertex, radius: float) -> CircleMetrics:
    """
    Compute area (π·r²) and circumference (2π·r) of a circle.

    The radius is already a linear length, so the same formula applies in
    both coordinate modes; no spherical correction is made.

    Raises:
        InvalidGeometryError: If the center is malformed or radius <= 0
    """
    normalize_vertex(center, geometry_type="circle")
    radius = validate_radius(radius)
    return CircleMetrics(math.pi * radius * radius, 2.0 * math.pi * radius)


def compute_polyline_length(points: Sequence[Vertex], mode=CoordinateMode.GEOGRAPHIC) -> float:
    """
    Sum of the distances between consecutive vertices of an open polyline.

    Raises:
        InvalidGeometryError: If fewer than 2 vertices are given
    """
    mode = CoordinateMode.parse(mode)
    geographic = mode is CoordinateMode.GEOGRAPHIC
    working = normalize_polyline(points, geographic=geographic)

    if geographic:
        return calculate_distance_geographic(working)
    return calculate_distance_planar(working)
