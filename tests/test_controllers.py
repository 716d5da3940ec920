# tests/test_controllers.py
"""
Unit tests for the measurement controller and session history.
"""

import logging
import math
import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from controllers import MeasurementController, MeasurementHistory
from core.exceptions import InvalidGeometryError
from core.geometry import compute_polygon_metrics
from core.geometry_types import CoordinateMode, MeasurementType
from core.measurement import create_circle_measurement, create_line_measurement, create_polygon_measurement
from utils.projection import project_vertex, project_vertices

PLANAR = CoordinateMode.PLANAR
SQUARE = [(0, 0), (100, 0), (100, 100), (0, 100)]


class TestMeasurementHistory(unittest.TestCase):

    def setUp(self):
        self.history = MeasurementHistory()
        self.polygon = create_polygon_measurement(SQUARE, PLANAR)
        self.circle = create_circle_measurement((0, 0), 10, PLANAR)
        self.line = create_line_measurement([(0, 0), (300, 400)], PLANAR)
        for m in (self.polygon, self.circle, self.line):
            self.history.add(m)

    def test_append_order(self):
        self.assertEqual(list(self.history), [self.polygon, self.circle, self.line])
        self.assertIs(self.history.latest, self.line)
        self.assertEqual(len(self.history), 3)

    def test_remove_by_position(self):
        removed = self.history.remove(1)
        self.assertIs(removed, self.circle)
        self.assertEqual(list(self.history), [self.polygon, self.line])
        self.assertEqual(removed.area, math.pi * 100)

    def test_remove_bad_position(self):
        with self.assertRaises(IndexError):
            self.history.remove(3)
        self.assertEqual(len(self.history), 3)

    def test_remove_by_id(self):
        self.assertIs(self.history.remove_by_id(self.line.id), self.line)
        self.assertIsNone(self.history.remove_by_id("missing"))

    def test_find_and_get(self):
        self.assertIs(self.history.find(self.circle.id), self.circle)
        self.assertIs(self.history.get(0), self.polygon)
        self.assertIs(self.history[-1], self.line)

    def test_totals(self):
        self.assertAlmostEqual(self.history.total_area(), 10000 + math.pi * 100)
        self.assertEqual(self.history.total_distance(), 500.0)
        self.assertEqual(self.history.types(), set(MeasurementType))
        self.assertEqual(self.history.count(MeasurementType.LINE), 1)

    def test_favorites(self):
        self.circle.is_favorite = True
        self.assertEqual(self.history.favorites(), [self.circle])

    def test_clear(self):
        self.history.clear()
        self.assertEqual(len(self.history), 0)
        self.assertIsNone(self.history.latest)
        self.assertEqual(self.history.total_area(), 0)

    def test_rejects_non_measurements(self):
        with self.assertRaises(TypeError):
            self.history.add({"type": "polygon"})


class TestMeasurementController(unittest.TestCase):

    def setUp(self):
        self.controller = MeasurementController(mode=PLANAR)

    def test_complete_polygon_records_history(self):
        self.controller.set_location("Central Park, New York")
        m = self.controller.complete_polygon(SQUARE)
        self.assertEqual(m.area, 10000.0)
        self.assertEqual(m.location, "Central Park, New York")
        self.assertIs(self.controller.history.latest, m)

    def test_failed_completion_leaves_history_untouched(self):
        self.controller.complete_line([(0, 0), (1, 0)])
        with self.assertRaises(InvalidGeometryError):
            self.controller.complete_polygon([(0, 0), (1, 1)])
        with self.assertRaises(InvalidGeometryError):
            self.controller.complete_circle((0, 0), -5)
        self.assertEqual(len(self.controller.history), 1)

    def test_formatted_measurements(self):
        line = self.controller.complete_line([(0, 0), (3000, 4000)])
        formatted = self.controller.get_formatted_measurements(line)
        self.assertEqual(formatted, {
            "area": "--",
            "perimeter": "--",
            "distance": "5.00 km",
            "radius": "--",
        })

        self.controller.set_units(False)
        polygon = self.controller.complete_polygon(SQUARE)
        formatted = self.controller.get_formatted_measurements(polygon)
        self.assertEqual(formatted["area"], "2.47 acres")
        self.assertEqual(formatted["perimeter"], "0.25 mi")

    def test_comparisons(self):
        polygon = self.controller.complete_polygon(SQUARE)
        line = self.controller.complete_line([(0, 0), (1, 0)])
        self.assertAlmostEqual(self.controller.get_comparisons(polygon)["city_blocks"], 0.5)
        self.assertIsNone(self.controller.get_comparisons(line))

    def test_delete_and_clear(self):
        first = self.controller.complete_line([(0, 0), (1, 0)])
        self.controller.complete_line([(0, 0), (2, 0)])
        self.assertIs(self.controller.delete(0), first)
        self.controller.clear()
        self.assertEqual(len(self.controller.history), 0)

    def test_shared_history(self):
        history = MeasurementHistory()
        MeasurementController(mode=PLANAR, history=history).complete_line([(0, 0), (1, 0)])
        self.assertEqual(len(history), 1)

    def test_projected_input_requires_geographic_mode(self):
        with self.assertRaises(ValueError):
            self.controller.complete_polygon(SQUARE, projected=True)

    def test_finish_drawing(self):
        m, error = self.controller.finish_drawing("polygon", SQUARE)
        self.assertIsNone(error)
        self.assertEqual(m.area, 10000.0)

        line, error = self.controller.finish_drawing(MeasurementType.LINE, [(0, 0), (3, 4)])
        self.assertIsNone(error)
        self.assertEqual(line.distance, 5.0)
        self.assertEqual(len(self.controller.history), 2)

    def test_finish_drawing_declines_bad_shapes(self):
        logging.disable(logging.CRITICAL)
        try:
            m, error = self.controller.finish_drawing("circle", (0, 0), 0)
        finally:
            logging.disable(logging.NOTSET)
        self.assertIsNone(m)
        self.assertEqual(error["title"], "Shape Cannot Be Measured")
        self.assertIn("radius", error["details"])
        self.assertEqual(len(self.controller.history), 0)

    def test_finish_drawing_raises_on_misuse(self):
        with self.assertRaises(ValueError):
            self.controller.finish_drawing("hexagon", SQUARE)
        with self.assertRaises(ValueError):
            self.controller.finish_drawing("line", [(0, 0), (1, 0)], projected=True)

    def test_from_settings(self):
        controller = MeasurementController.from_settings({"use_metric": False, "precision": 3})
        self.assertFalse(controller.use_metric)
        self.assertEqual(controller.precision, 3)
        self.assertIs(controller.mode, CoordinateMode.GEOGRAPHIC)


class TestProjectedDrawing(unittest.TestCase):
    """Vertices drawn on a Web Mercator map are measured on lon/lat."""

    def setUp(self):
        self.controller = MeasurementController()

    def test_projected_polygon(self):
        ring = [(-0.13, 51.50), (-0.12, 51.50), (-0.12, 51.51), (-0.13, 51.51)]
        m = self.controller.complete_polygon(project_vertices(ring), projected=True)
        expected = compute_polygon_metrics(ring).area
        self.assertAlmostEqual(m.area / expected, 1.0, places=6)
        lon, lat = m.coordinates[0]
        self.assertAlmostEqual(lon, -0.13, places=9)
        self.assertAlmostEqual(lat, 51.50, places=9)

    def test_projected_circle_radius_is_ground_meters(self):
        center = project_vertex((0, 60))
        m = self.controller.complete_circle(center, 2000, projected=True)
        self.assertAlmostEqual(m.radius, 1000.0, places=6)
        self.assertAlmostEqual(m.center_point[1], 60.0, places=9)


if __name__ == '__main__':
    unittest.main()
