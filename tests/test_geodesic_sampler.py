import math
import unittest

import numpy as np

from geopath.sphere.geodesic import sample, sample_geo
from geopath.sphere.transform import to_sphere_vector
from geopath.sphere.vectors import GeoPoint, SphereVector, angle_between, cross

LONDON = GeoPoint(51.5074, -0.1278)
NEW_YORK = GeoPoint(40.7128, -74.006)
BEIJING = GeoPoint(39.9042, 116.4074)


class GeodesicSamplerTests(unittest.TestCase):
    def test_point_count_and_exact_endpoints(self) -> None:
        start = to_sphere_vector(LONDON)
        end = to_sphere_vector(NEW_YORK)
        for n in (1, 4, 37, 200):
            points = sample(start, end, n)
            self.assertEqual(len(points), n + 1)
            np.testing.assert_allclose(points[0].as_array(), start.as_array(), atol=1e-15)
            np.testing.assert_allclose(points[-1].as_array(), end.as_array(), atol=1e-12)

    def test_spacing_is_uniform(self) -> None:
        start = to_sphere_vector(BEIJING)
        end = to_sphere_vector(NEW_YORK)
        n = 50
        points = sample(start, end, n)
        total = angle_between(start, end)
        steps = [angle_between(a, b) for a, b in zip(points, points[1:])]
        for step in steps:
            self.assertAlmostEqual(step, total / n, places=10)

    def test_points_stay_on_the_great_circle(self) -> None:
        start = to_sphere_vector(LONDON)
        end = to_sphere_vector(BEIJING)
        normal = np.array(cross(start, end))
        normal /= np.linalg.norm(normal)
        for point in sample(start, end, 25):
            self.assertAlmostEqual(point.norm(), 1.0, places=12)
            self.assertAlmostEqual(float(np.dot(normal, point.as_array())), 0.0, places=12)

    def test_sampling_is_deterministic(self) -> None:
        start = to_sphere_vector(LONDON)
        end = to_sphere_vector(NEW_YORK)
        self.assertEqual(sample(start, end, 30), sample(start, end, 30))

    def test_identical_endpoints_give_zero_length_arc(self) -> None:
        start = to_sphere_vector(LONDON)
        points = sample(start, start, 10)
        self.assertEqual(len(points), 11)
        for point in points:
            self.assertEqual(point, start)
            self.assertFalse(any(math.isnan(c) for c in (point.x, point.y, point.z)))

    def test_antipodal_endpoints_give_a_half_circle(self) -> None:
        start = SphereVector(1.0, 0.0, 0.0)
        end = -start
        points = sample(start, end, 8)
        np.testing.assert_allclose(points[-1].as_array(), end.as_array(), atol=1e-12)
        for a, b in zip(points, points[1:]):
            self.assertAlmostEqual(angle_between(a, b), math.pi / 8, places=12)
        self.assertEqual(points, sample(start, end, 8))

    def test_nearly_antipodal_endpoints_are_reached(self) -> None:
        start = to_sphere_vector(GeoPoint(10.0, 20.0))
        end = to_sphere_vector(GeoPoint(-10.0, -159.998))
        points = sample(start, end, 10)
        self.assertLess(angle_between(points[-1], end), 1e-10)
        total = angle_between(start, end)
        for a, b in zip(points, points[1:]):
            self.assertAlmostEqual(angle_between(a, b), total / 10, places=10)

    def test_invalid_sample_count(self) -> None:
        start = to_sphere_vector(LONDON)
        end = to_sphere_vector(NEW_YORK)
        for bad in (0, -3, 2.5, True):
            with self.assertRaises(ValueError):
                sample(start, end, bad)  # type: ignore[arg-type]

    def test_sample_geo_returns_geo_points(self) -> None:
        points = sample_geo(LONDON, NEW_YORK, 4)
        self.assertEqual(len(points), 5)
        self.assertAlmostEqual(points[0].latitude_deg, LONDON.latitude_deg, places=9)
        self.assertAlmostEqual(points[-1].longitude_deg, NEW_YORK.longitude_deg, places=9)
        # the great circle bulges north of both endpoints
        self.assertGreater(points[2].latitude_deg, NEW_YORK.latitude_deg)


if __name__ == "__main__":
    unittest.main()
