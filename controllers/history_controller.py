# controllers/history_controller.py
"""
Session history of completed measurements.
"""

from typing import Iterator, List, Optional

from core.geometry_types import MeasurementType
from core.measurement import Measurement
from utils.logger import get_logger

logger = get_logger(__name__)


class MeasurementHistory:
    """
    Append-ordered list of the measurements taken in one session.

    Deleting removes an entry by position; the measurements themselves are
    never modified here.
    """

    def __init__(self, measurements: Optional[List[Measurement]] = None):
        self._measurements: List[Measurement] = []
        for measurement in measurements or []:
            self.add(measurement)

    def add(self, measurement: Measurement) -> int:
        """
        Append a measurement.

        Returns:
            Position of the new entry
        """
        if not isinstance(measurement, Measurement):
            raise TypeError(f"Expected a Measurement, got {type(measurement).__name__}")
        self._measurements.append(measurement)
        logger.debug(f"History: added {measurement.type.value} {measurement.id}")
        return len(self._measurements) - 1

    def remove(self, index: int) -> Measurement:
        """
        Remove the entry at a position.

        Raises:
            IndexError: If there is no entry at that position
        """
        if not -len(self._measurements) <= index < len(self._measurements):
            raise IndexError(f"No measurement at position {index}")
        measurement = self._measurements.pop(index)
        logger.debug(f"History: removed {measurement.id}")
        return measurement

    def remove_by_id(self, measurement_id: str) -> Optional[Measurement]:
        for index, measurement in enumerate(self._measurements):
            if measurement.id == measurement_id:
                return self.remove(index)
        return None

    def clear(self) -> None:
        count = len(self._measurements)
        self._measurements.clear()
        logger.debug(f"History: cleared {count} measurements")

    def get(self, index: int) -> Measurement:
        return self._measurements[index]

    def find(self, measurement_id: str) -> Optional[Measurement]:
        for measurement in self._measurements:
            if measurement.id == measurement_id:
                return measurement
        return None

    @property
    def latest(self) -> Optional[Measurement]:
        return self._measurements[-1] if self._measurements else None

    def favorites(self) -> List[Measurement]:
        return [m for m in self._measurements if m.is_favorite]

    def total_area(self) -> float:
        """Sum of areas in m² over polygons and circles."""
        return sum(m.area for m in self._measurements if m.area is not None)

    def total_distance(self) -> float:
        """Sum of line distances in meters."""
        return sum(m.distance for m in self._measurements if m.distance is not None)

    def types(self) -> set:
        return {m.type for m in self._measurements}

    def count(self, measurement_type: MeasurementType = None) -> int:
        if measurement_type is None:
            return len(self._measurements)
        return sum(1 for m in self._measurements if m.type is measurement_type)

    def to_list(self) -> List[Measurement]:
        return list(self._measurements)

    def __len__(self) -> int:
        return len(self._measurements)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(list(self._measurements))

    def __getitem__(self, index: int) -> Measurement:
        return self._measurements[index]
