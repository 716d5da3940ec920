# controllers/measurement_controller.py
"""
Controller for completed drawing interactions.
Turns the final vertices of a drawn shape into a Measurement and records it.
"""

import math
from typing import Dict, List, Optional, Tuple

from constants import DEFAULT_PRECISION
from controllers.history_controller import MeasurementHistory
from core.formatter import compare_area, describe_area, describe_distance, describe_measurement
from core.geometry_types import CoordinateMode, MeasurementType
from core.measurement import (
    Measurement,
    create_circle_measurement,
    create_line_measurement,
    create_polygon_measurement
)
from utils.error_handler import declined_as_result
from utils.logger import get_logger
from utils.projection import unproject_vertices

logger = get_logger(__name__)


class MeasurementController:
    """
    Drawing-interaction handle passed to the map UI.

    The UI calls one of the complete_* methods when the user finishes a
    shape. Vertices may arrive as lon/lat or, with projected=True, in the
    map's Web Mercator coordinates; they are converted before any metric
    is computed. Failed calls raise and leave the history untouched;
    finish_drawing is the non-raising variant for draw-end events.
    """

    def __init__(
        self,
        mode: CoordinateMode = CoordinateMode.GEOGRAPHIC,
        history: Optional[MeasurementHistory] = None,
        use_metric: bool = True,
        precision: int = DEFAULT_PRECISION
    ):
        """
        Args:
            mode: Coordinate mode for incoming vertices
            history: Session history to append to (a new one if None)
            use_metric: True for metric units, False for imperial
            precision: Decimal places for display strings
        """
        self.mode = CoordinateMode.parse(mode)
        self.history = history if history is not None else MeasurementHistory()
        self.use_metric = use_metric
        self.precision = precision
        self.location: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Dict, **kwargs) -> "MeasurementController":
        return cls(
            use_metric=settings.get("use_metric", True),
            precision=settings.get("precision", DEFAULT_PRECISION),
            **kwargs
        )

    def set_units(self, use_metric: bool):
        """Set unit preference."""
        self.use_metric = use_metric

    def set_location(self, location: Optional[str]):
        """Label attached to subsequent measurements (from location search)."""
        self.location = location or None

    def _to_lon_lat(self, vertices, projected: bool) -> List[Tuple[float, float]]:
        if projected and self.mode is not CoordinateMode.GEOGRAPHIC:
            raise ValueError("Projected input is only supported in geographic mode")
        return unproject_vertices(vertices) if projected else vertices

    def _record(self, measurement: Measurement) -> Measurement:
        self.history.add(measurement)
        logger.info(
            f"Measurement complete ({measurement.type.value}): "
            f"{describe_measurement(measurement, self.use_metric, self.precision)}"
        )
        return measurement

    def complete_polygon(self, vertices, projected: bool = False) -> Measurement:
        ring = self._to_lon_lat(vertices, projected)
        return self._record(create_polygon_measurement(ring, self.mode, self.location))

    def complete_circle(self, center, radius: float, projected: bool = False) -> Measurement:
        """
        With projected=True both center and radius are in Web Mercator
        units; the radius is scaled by cos(latitude) to ground meters.
        """
        if projected:
            center = self._to_lon_lat([center], projected)[0]
            if isinstance(radius, (int, float)) and not isinstance(radius, bool):
                radius = radius * math.cos(math.radians(center[1]))
        return self._record(create_circle_measurement(center, radius, self.mode, self.location))

    def complete_line(self, vertices, projected: bool = False) -> Measurement:
        points = self._to_lon_lat(vertices, projected)
        return self._record(create_line_measurement(points, self.mode, self.location))

    @declined_as_result("completing a drawing")
    def finish_drawing(self, geometry_type, *args, **kwargs) -> Tuple[Optional[Measurement], Optional[Dict]]:
        """
        Draw-end entry point for the map UI; never raises for bad shapes.

        Args:
            geometry_type: MeasurementType or its value ("polygon", "circle", "line")
            *args, **kwargs: Passed to the matching complete_* method

        Returns:
            (measurement, None) on success, or (None, error_info) when the
            shape is declined; error_info is the dict from get_error_message
        """
        complete = {
            MeasurementType.POLYGON: self.complete_polygon,
            MeasurementType.CIRCLE: self.complete_circle,
            MeasurementType.LINE: self.complete_line,
        }[MeasurementType(geometry_type)]
        return complete(*args, **kwargs)

    def delete(self, index: int) -> Measurement:
        return self.history.remove(index)

    def clear(self) -> None:
        self.history.clear()

    def get_formatted_measurements(self, measurement: Measurement) -> Dict[str, str]:
        """
        Get all measurements formatted with units.

        Returns:
            Dict with 'area', 'perimeter', 'distance', 'radius' keys;
            "--" where the metric does not apply
        """
        def fmt_distance(value):
            if value is None:
                return "--"
            return describe_distance(value, self.use_metric, self.precision)

        result = {
            "area": "--",
            "perimeter": fmt_distance(measurement.perimeter),
            "distance": fmt_distance(measurement.distance),
            "radius": fmt_distance(measurement.radius),
        }
        if measurement.area is not None:
            result["area"] = describe_area(measurement.area, self.use_metric, self.precision)
        return result

    def get_comparisons(self, measurement: Measurement) -> Optional[Dict[str, float]]:
        """Size comparisons for shapes with an area, None for lines."""
        if measurement.area is None:
            return None
        return compare_area(measurement.area)

