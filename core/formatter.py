# core/formatter.py
"""
Unit and comparison formatter.

Converts raw SI metrics (square meters, meters) into human units and into
illustrative size comparisons. The comparison reference sizes are rough
approximations meant for display, not for surveying.

Numeric functions return full precision; rounding is left to the caller.
The describe_* helpers are the only ones that produce display strings.
"""

from typing import Dict

from constants import (
    ACRES_PER_HECTARE,
    CENTRAL_PARK_HA,
    CITY_BLOCK_HA,
    DEFAULT_PRECISION,
    FOOTBALL_FIELD_M2,
    METERS_PER_KILOMETER,
    SQUARE_METERS_PER_HECTARE,
    SQUARE_METERS_PER_SQUARE_KILOMETER
)
from core.geometry_types import MeasurementType
from utils.measurements import format_area, format_distance
from utils.validators import validate_metric


def to_hectares(area_m2: float) -> float:
    return validate_metric(area_m2, "area_m2") / SQUARE_METERS_PER_HECTARE


def to_acres(area_m2: float) -> float:
    return to_hectares(area_m2) * ACRES_PER_HECTARE


def to_square_kilometers(area_m2: float) -> float:
    return validate_metric(area_m2, "area_m2") / SQUARE_METERS_PER_SQUARE_KILOMETER


def to_kilometers(meters: float) -> float:
    return validate_metric(meters, "meters") / METERS_PER_KILOMETER


def football_fields(area_m2: float) -> float:
    """Number of (American) football fields, at ~5351 m² each."""
    return validate_metric(area_m2, "area_m2") / FOOTBALL_FIELD_M2


def city_blocks(area_m2: float) -> float:
    """Number of NYC city blocks, at ~2 ha each."""
    return to_hectares(area_m2) / CITY_BLOCK_HA


def central_parks(area_m2: float) -> float:
    """Fraction of New York's Central Park (~341 ha)."""
    return to_hectares(area_m2) / CENTRAL_PARK_HA


def compare_area(area_m2: float) -> Dict[str, float]:
    """
    All size comparisons for an area.

    Returns:
        Dict with 'football_fields', 'city_blocks' and 'central_parks' keys
    """
    return {
        "football_fields": football_fields(area_m2),
        "city_blocks": city_blocks(area_m2),
        "central_parks": central_parks(area_m2),
    }


def describe_area(area_m2: float, use_metric: bool = True, precision: int = DEFAULT_PRECISION) -> str:
    """Display string in hectares (metric) or acres (imperial)."""
    validate_metric(area_m2, "area_m2")
    return format_area(area_m2, "ha" if use_metric else "ac", precision)


def describe_distance(meters: float, use_metric: bool = True, precision: int = DEFAULT_PRECISION) -> str:
    """Display string in kilometers (metric) or miles (imperial)."""
    validate_metric(meters, "meters")
    return format_distance(meters, "km" if use_metric else "mi", precision)


def describe_measurement(measurement, use_metric: bool = True, precision: int = DEFAULT_PRECISION) -> str:
    """
    One-line summary as shown in history lists and completion notices,
    e.g. "Area: 1.25 ha" or "Distance: 3.40 km".
    """
    if measurement.type is MeasurementType.LINE:
        return f"Distance: {describe_distance(measurement.distance, use_metric, precision)}"
    if measurement.type is MeasurementType.CIRCLE:
        return f"Circle area: {describe_area(measurement.area, use_metric, precision)}"
    return f"Area: {describe_area(measurement.area, use_metric, precision)}"
