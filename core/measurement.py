# core/measurement.py
"""
Measurement model.

A Measurement is created once, when a drawing interaction completes, from
the final vertices of the shape. Its geometry and metrics are read-only;
only the freeform metadata (name, notes, tags, favorite flag) may change
afterwards.

Each variant populates its own metrics; the rest stay None so that "not
applicable" is never confused with "zero-sized":

    polygon  -> coordinates, area, perimeter, center_point
    circle   -> center_point, radius, area, perimeter
    line     -> coordinates, distance
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Sequence

from core.exceptions import InvalidGeometryError
from core.geometry import (
    compute_circle_metrics,
    compute_polygon_metrics,
    compute_polyline_length
)
from core.geometry_types import CoordinateMode, MeasurementType, Vertex
from utils.logger import get_logger
from utils.validators import normalize_polyline, normalize_ring, normalize_vertex

logger = get_logger(__name__)


def _normalize_tags(tags: Optional[Iterable[str]]) -> set:
    if tags is None:
        return set()
    if isinstance(tags, str):
        tags = [tags]
    return {str(t).strip() for t in tags if t is not None and str(t).strip()}


class Measurement:
    """
    Base class for the three measurement variants.

    Not instantiated directly; use PolygonMeasurement, CircleMeasurement,
    LineMeasurement or the create_* factories.
    """

    TYPE: MeasurementType = None

    def __init__(
        self,
        mode=CoordinateMode.GEOGRAPHIC,
        location: Optional[str] = None,
        name: str = "",
        notes: str = "",
        tags: Optional[Iterable[str]] = None,
        is_favorite: bool = False,
        measurement_id: Optional[str] = None,
        created_at: Optional[datetime] = None
    ):
        if self.TYPE is None:
            raise TypeError("Measurement is abstract; use a concrete variant")

        self._mode = CoordinateMode.parse(mode)
        self._location = location or None
        self._id = str(measurement_id) if measurement_id else str(uuid.uuid4())
        self._created_at = created_at or datetime.now(timezone.utc)

        self.name = name or ""
        self.notes = notes or ""
        self._tags = _normalize_tags(tags)
        self.is_favorite = bool(is_favorite)

    # Identity and provenance (read-only)

    @property
    def id(self) -> str:
        return self._id

    @property
    def type(self) -> MeasurementType:
        return self.TYPE

    @property
    def mode(self) -> CoordinateMode:
        return self._mode

    @property
    def location(self) -> Optional[str]:
        return self._location

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # Metrics; variants override the ones they define

    @property
    def area(self) -> Optional[float]:
        return None

    @property
    def perimeter(self) -> Optional[float]:
        return None

    @property
    def distance(self) -> Optional[float]:
        return None

    @property
    def radius(self) -> Optional[float]:
        return None

    @property
    def center_point(self) -> Optional[Vertex]:
        return None

    @property
    def coordinates(self) -> Optional[tuple]:
        return None

    # Metadata

    @property
    def tags(self) -> frozenset:
        return frozenset(self._tags)

    @tags.setter
    def tags(self, value: Optional[Iterable[str]]):
        self._tags = _normalize_tags(value)

    @property
    def display_name(self) -> str:
        return self.name or f"{self.TYPE.value} measurement"

    def add_tag(self, tag: str) -> bool:
        """Add a tag; returns False if it was empty or already present."""
        cleaned = _normalize_tags([tag])
        if not cleaned or cleaned <= self._tags:
            return False
        self._tags |= cleaned
        return True

    def remove_tag(self, tag: str) -> bool:
        tag = str(tag).strip()
        if tag in self._tags:
            self._tags.discard(tag)
            return True
        return False

    def update_metadata(self, name=None, notes=None, tags=None, is_favorite=None) -> None:
        """Update any subset of the freeform metadata fields."""
        if name is not None:
            self.name = name
        if notes is not None:
            self.notes = notes
        if tags is not None:
            self.tags = tags
        if is_favorite is not None:
            self.is_favorite = bool(is_favorite)

    def to_record(self) -> Dict:
        """
        Serialize to the persistence field set.

        Absent metrics are written as None; coordinates become lists of [x, y].
        """
        coordinates = self.coordinates
        center = self.center_point
        return {
            "id": self.id,
            "type": self.TYPE.value,
            "mode": self.mode.value,
            "area": self.area,
            "perimeter": self.perimeter,
            "distance": self.distance,
            "radius": self.radius,
            "coordinates": [list(v) for v in coordinates] if coordinates is not None else None,
            "center_point": list(center) if center is not None else None,
            "location": self.location,
            "name": self.name,
            "notes": self.notes,
            "tags": sorted(self._tags),
            "is_favorite": self.is_favorite,
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id} mode={self.mode.value}>"


class PolygonMeasurement(Measurement):
    TYPE = MeasurementType.POLYGON

    def __init__(self, ring: Sequence[Vertex], mode=CoordinateMode.GEOGRAPHIC, location=None, **metadata):
        mode = CoordinateMode.parse(mode)
        # validate and compute before any state is set
        coordinates = tuple(normalize_ring(ring, mode is CoordinateMode.GEOGRAPHIC))
        metrics = compute_polygon_metrics(coordinates, mode)
        self._coordinates = coordinates
        self._area = metrics.area
        self._perimeter = metrics.perimeter
        self._center_point = metrics.center_point
        super().__init__(mode, location, **metadata)

    @property
    def coordinates(self) -> tuple:
        return self._coordinates

    @property
    def area(self) -> float:
        return self._area

    @property
    def perimeter(self) -> float:
        return self._perimeter

    @property
    def center_point(self) -> Vertex:
        return self._center_point


class CircleMeasurement(Measurement):
    TYPE = MeasurementType.CIRCLE

    def __init__(self, center: Vertex, radius: float, mode=CoordinateMode.GEOGRAPHIC, location=None, **metadata):
        mode = CoordinateMode.parse(mode)
        center = normalize_vertex(center, mode is CoordinateMode.GEOGRAPHIC, "circle")
        metrics = compute_circle_metrics(center, radius)
        self._center_point = center
        self._radius = float(radius)
        self._area = metrics.area
        self._perimeter = metrics.perimeter
        super().__init__(mode, location, **metadata)

    @property
    def center_point(self) -> Vertex:
        return self._center_point

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def area(self) -> float:
        return self._area

    @property
    def perimeter(self) -> float:
        return self._perimeter


class LineMeasurement(Measurement):
    TYPE = MeasurementType.LINE

    def __init__(self, points: Sequence[Vertex], mode=CoordinateMode.GEOGRAPHIC, location=None, **metadata):
        mode = CoordinateMode.parse(mode)
        coordinates = tuple(normalize_polyline(points, mode is CoordinateMode.GEOGRAPHIC))
        self._distance = compute_polyline_length(coordinates, mode)
        self._coordinates = coordinates
        super().__init__(mode, location, **metadata)

    @property
    def coordinates(self) -> tuple:
        return self._coordinates

    @property
    def distance(self) -> float:
        return self._distance


def create_polygon_measurement(ring, mode=CoordinateMode.GEOGRAPHIC, location=None, **metadata) -> PolygonMeasurement:
    measurement = PolygonMeasurement(ring, mode, location, **metadata)
    logger.debug(f"Created polygon measurement {measurement.id}: area={measurement.area:.3f}")
    return measurement


def create_circle_measurement(center, radius, mode=CoordinateMode.GEOGRAPHIC, location=None, **metadata) -> CircleMeasurement:
    measurement = CircleMeasurement(center, radius, mode, location, **metadata)
    logger.debug(f"Created circle measurement {measurement.id}: radius={measurement.radius:.3f}")
    return measurement


def create_line_measurement(points, mode=CoordinateMode.GEOGRAPHIC, location=None, **metadata) -> LineMeasurement:
    measurement = LineMeasurement(points, mode, location, **metadata)
    logger.debug(f"Created line measurement {measurement.id}: distance={measurement.distance:.3f}")
    return measurement


def measurement_from_record(record: Dict) -> Measurement:
    """
    Rebuild a Measurement from a record produced by to_record().

    Metrics are recomputed from the stored geometry; stored numbers are
    ignored. Identity, creation time and metadata are restored.

    Raises:
        InvalidGeometryError: If the record's geometry is missing or invalid
        ValueError: If the type or mode is unknown
    """
    try:
        measurement_type = MeasurementType(str(record.get("type", "")).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown measurement type: {record.get('type')!r}")

    created_at = record.get("created_at")
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at) if created_at else None
    elif created_at is not None and not isinstance(created_at, datetime):
        raise ValueError(f"created_at must be an ISO 8601 string, got {created_at!r}")

    metadata = {
        "name": record.get("name") or "",
        "notes": record.get("notes") or "",
        "tags": record.get("tags") or [],
        "is_favorite": bool(record.get("is_favorite")),
        "measurement_id": record.get("id"),
        "created_at": created_at or None,
    }
    mode = record.get("mode") or CoordinateMode.GEOGRAPHIC
    location = record.get("location")

    if measurement_type is MeasurementType.POLYGON:
        return PolygonMeasurement(record.get("coordinates"), mode, location, **metadata)

    if measurement_type is MeasurementType.CIRCLE:
        center = record.get("center_point")
        if center is None:
            raise InvalidGeometryError("circle", "record has no center_point")
        return CircleMeasurement(center, record.get("radius"), mode, location, **metadata)

    return LineMeasurement(record.get("coordinates"), mode, location, **metadata)
