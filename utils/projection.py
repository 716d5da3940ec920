# utils/projection.py
"""
Boundary adapter between the map's projected coordinates (Web Mercator)
and longitude/latitude.

Drawing surfaces hand over vertices in EPSG:3857; metrics are only ever
computed on EPSG:4326 longitude/latitude.
"""

import math
from functools import lru_cache
from typing import List, Sequence

from pyproj import Transformer
from pyproj.exceptions import ProjError

from constants import WGS84_EPSG, WEB_MERCATOR_EPSG
from core.exceptions import CoordinateTransformError
from core.geometry_types import Vertex
from utils.logger import get_logger
from utils.validators import normalize_vertex, validate_web_mercator

logger = get_logger(__name__)

GEOGRAPHIC_CRS = f"EPSG:{WGS84_EPSG}"
PROJECTED_CRS = f"EPSG:{WEB_MERCATOR_EPSG}"


@lru_cache(maxsize=None)
def _get_transformer(from_crs: str, to_crs: str) -> Transformer:
    return Transformer.from_crs(from_crs, to_crs, always_xy=True)


def _transform(vertices: Sequence[Vertex], from_crs: str, to_crs: str) -> List[Vertex]:
    transformer = _get_transformer(from_crs, to_crs)
    transformed = []
    try:
        for x, y in vertices:
            tx, ty = transformer.transform(x, y)
            if not (math.isfinite(tx) and math.isfinite(ty)):
                raise CoordinateTransformError(
                    from_crs, to_crs, f"({x}, {y}) has no finite image"
                )
            transformed.append((tx, ty))
    except ProjError as e:
        logger.error(f"Coordinate transformation failed: {e}")
        raise CoordinateTransformError(from_crs, to_crs, str(e))

    logger.debug(f"Transformed {len(transformed)} coordinates from {from_crs} to {to_crs}")
    return transformed


def project_vertices(vertices: Sequence[Vertex]) -> List[Vertex]:
    """
    Convert (lon, lat) vertices to Web Mercator (x, y) meters.

    Raises:
        InvalidGeometryError: If a vertex is outside the lon/lat range
        CoordinateTransformError: If a vertex cannot be projected (e.g. a pole)
    """
    checked = [normalize_vertex(v, geographic=True) for v in vertices]
    return _transform(checked, GEOGRAPHIC_CRS, PROJECTED_CRS)


def unproject_vertices(vertices: Sequence[Vertex]) -> List[Vertex]:
    """
    Convert Web Mercator (x, y) vertices to (lon, lat) degrees.

    Raises:
        CoordinateTransformError: If a vertex is outside the Web Mercator extent
    """
    checked = []
    for vertex in vertices:
        x, y = normalize_vertex(vertex)
        if not (validate_web_mercator(x)[0] and validate_web_mercator(y)[0]):
            raise CoordinateTransformError(
                PROJECTED_CRS, GEOGRAPHIC_CRS, f"({x}, {y}) outside the Web Mercator extent"
            )
        checked.append((x, y))
    return _transform(checked, PROJECTED_CRS, GEOGRAPHIC_CRS)


def project_vertex(vertex: Vertex) -> Vertex:
    """Convert one (lon, lat) vertex to Web Mercator."""
    return project_vertices([vertex])[0]


def unproject_vertex(vertex: Vertex) -> Vertex:
    """Convert one Web Mercator vertex to (lon, lat)."""
    return unproject_vertices([vertex])[0]
