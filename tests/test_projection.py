# tests/test_projection.py
"""
Unit tests for the Web Mercator boundary adapter.
"""

import math
import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from constants import EARTH_RADIUS_M, WEB_MERCATOR_LIMIT
from core.exceptions import CoordinateTransformError, InvalidGeometryError
from core.geometry import compute_polygon_metrics
from utils.projection import (
    project_vertex,
    project_vertices,
    unproject_vertex,
    unproject_vertices
)


class TestProjectVertex(unittest.TestCase):

    def test_origin(self):
        x, y = project_vertex((0, 0))
        self.assertAlmostEqual(x, 0.0, delta=1e-6)
        self.assertAlmostEqual(y, 0.0, delta=1e-6)

    def test_antimeridian(self):
        x, _ = project_vertex((180, 0))
        self.assertAlmostEqual(x, WEB_MERCATOR_LIMIT, delta=1e-3)

    def test_latitude_45(self):
        _, y = project_vertex((0, 45))
        expected = EARTH_RADIUS_M * math.log(math.tan(math.pi / 4 + math.radians(45) / 2))
        self.assertAlmostEqual(y, expected, delta=1e-2)

    def test_invalid_longitude(self):
        with self.assertRaises(InvalidGeometryError):
            project_vertex((200, 0))

    def test_pole_cannot_be_projected(self):
        with self.assertRaises(CoordinateTransformError):
            project_vertex((0, 90))


class TestUnprojectVertex(unittest.TestCase):

    def test_origin(self):
        lon, lat = unproject_vertex((0, 0))
        self.assertAlmostEqual(lon, 0.0, delta=1e-9)
        self.assertAlmostEqual(lat, 0.0, delta=1e-9)

    def test_inverse_of_project(self):
        paris = (2.3522, 48.8566)
        lon, lat = unproject_vertex(project_vertex(paris))
        self.assertAlmostEqual(lon, paris[0], places=9)
        self.assertAlmostEqual(lat, paris[1], places=9)

    def test_outside_extent(self):
        with self.assertRaises(CoordinateTransformError):
            unproject_vertex((3.0e7, 0))

    def test_malformed(self):
        with self.assertRaises(InvalidGeometryError):
            unproject_vertex(("a", 0))


class TestBulkConversion(unittest.TestCase):

    def test_metrics_use_unprojected_ring(self):
        ring = [(10.0, 50.0), (10.01, 50.0), (10.01, 50.01), (10.0, 50.01)]
        projected = project_vertices(ring)
        self.assertEqual(len(projected), 4)

        recovered = unproject_vertices(projected)
        area = compute_polygon_metrics(ring).area
        recovered_area = compute_polygon_metrics(recovered).area
        self.assertAlmostEqual(recovered_area / area, 1.0, places=6)

        # A shoelace area on Mercator meters is inflated by ~1/cos²(lat)
        mercator_area = compute_polygon_metrics(projected, "planar").area
        self.assertGreater(mercator_area, area * 2)


if __name__ == '__main__':
    unittest.main()
