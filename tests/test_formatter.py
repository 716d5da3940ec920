# tests/test_formatter.py
"""
Unit tests for unit conversion and size comparisons.
"""

import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.exceptions import InvalidInputError
from core.formatter import (
    central_parks,
    city_blocks,
    compare_area,
    describe_area,
    describe_distance,
    describe_measurement,
    football_fields,
    to_acres,
    to_hectares,
    to_kilometers,
    to_square_kilometers
)
from core.geometry_types import CoordinateMode
from core.measurement import (
    create_circle_measurement,
    create_line_measurement,
    create_polygon_measurement
)
from utils.measurements import convert_area, convert_distance, format_area, format_distance


class TestUnitConversion(unittest.TestCase):

    def test_hectares(self):
        self.assertEqual(to_hectares(10000), 1.0)
        self.assertEqual(to_hectares(0), 0.0)

    def test_acres(self):
        self.assertAlmostEqual(to_acres(10000), 2.471)

    def test_square_kilometers(self):
        self.assertEqual(to_square_kilometers(1000000), 1.0)

    def test_kilometers(self):
        self.assertEqual(to_kilometers(1000), 1.0)

    def test_full_precision(self):
        self.assertAlmostEqual(to_hectares(12345.678), 1.2345678, places=12)


class TestComparisons(unittest.TestCase):

    def test_reference_sizes(self):
        self.assertAlmostEqual(football_fields(5351), 1.0)
        self.assertAlmostEqual(city_blocks(20000), 1.0)
        self.assertAlmostEqual(central_parks(3410000), 1.0)

    def test_monotonic(self):
        areas = [0, 1, 500, 5351, 20000, 1e6, 3.41e6, 1e9]
        for func in (football_fields, city_blocks, central_parks):
            with self.subTest(func=func.__name__):
                values = [func(a) for a in areas]
                self.assertEqual(values, sorted(values))
                self.assertLess(values[0], values[-1])

    def test_compare_area(self):
        result = compare_area(10700)
        self.assertEqual(set(result), {"football_fields", "city_blocks", "central_parks"})
        self.assertAlmostEqual(result["football_fields"], 10700 / 5351)


class TestInvalidInput(unittest.TestCase):

    def test_rejects_bad_values(self):
        bad_values = (-1, -0.001, float("nan"), float("inf"), float("-inf"), None, "100", True)
        funcs = (to_hectares, to_acres, to_square_kilometers, to_kilometers,
                 football_fields, city_blocks, central_parks, compare_area)
        for func in funcs:
            for value in bad_values:
                with self.subTest(func=func.__name__, value=value):
                    with self.assertRaises(InvalidInputError):
                        func(value)

    def test_error_carries_field(self):
        with self.assertRaises(InvalidInputError) as ctx:
            to_kilometers(-5)
        self.assertEqual(ctx.exception.field_name, "meters")
        self.assertEqual(ctx.exception.value, -5)


class TestDisplayStrings(unittest.TestCase):

    def test_describe_area(self):
        self.assertEqual(describe_area(12500), "1.25 ha")
        self.assertEqual(describe_area(10000, use_metric=False), "2.47 acres")
        self.assertEqual(describe_area(12500, precision=3), "1.250 ha")

    def test_describe_distance(self):
        self.assertEqual(describe_distance(3400), "3.40 km")
        self.assertEqual(describe_distance(1609.344, use_metric=False), "1.00 mi")

    def test_describe_rejects_negative(self):
        with self.assertRaises(InvalidInputError):
            describe_area(-1)

    def test_describe_measurement(self):
        planar = CoordinateMode.PLANAR
        polygon = create_polygon_measurement([(0, 0), (100, 0), (100, 100), (0, 100)], planar)
        circle = create_circle_measurement((0, 0), 100, planar)
        line = create_line_measurement([(0, 0), (3000, 4000)], planar)

        self.assertEqual(describe_measurement(polygon), "Area: 1.00 ha")
        self.assertEqual(describe_measurement(circle), "Circle area: 3.14 ha")
        self.assertEqual(describe_measurement(line), "Distance: 5.00 km")

    def test_low_level_formatting(self):
        self.assertEqual(convert_distance(1500, "km"), 1.5)
        self.assertEqual(convert_area(20000, "ha"), 2.0)
        self.assertEqual(format_distance(1234567, "m"), "1,234,567.00 m")
        self.assertEqual(format_area(2500, "m2", precision=0), "2,500 m²")
        self.assertEqual(format_area(2500, "unknown", precision=0), "2,500 m²")


if __name__ == '__main__':
    unittest.main()
