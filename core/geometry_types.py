# core/geometry_types.py
"""
Shared type definitions for the measurement core.
"""

from enum import Enum
from typing import Tuple

# (x, y); (longitude, latitude) in geographic mode
Vertex = Tuple[float, float]


class CoordinateMode(Enum):
    """Coordinate interpretation used by the geometry engine."""
    GEOGRAPHIC = "geographic"
    PLANAR = "planar"

    @classmethod
    def parse(cls, value) -> "CoordinateMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown coordinate mode '{value}'. Valid modes are: "
                f"{[m.value for m in cls]}"
            )


class MeasurementType(Enum):
    """Kind of drawn shape; the value is the persisted type string."""
    POLYGON = "polygon"
    CIRCLE = "circle"
    LINE = "line"
