import unittest

from geopath.render.antimeridian import crosses_antimeridian, find_crossings, split_antimeridian


def max_jump(path) -> float:
    return max((abs(b[0] - a[0]) for a, b in zip(path, path[1:])), default=0.0)


class AntimeridianSplitterTests(unittest.TestCase):
    def test_pairwise_crossing_test(self) -> None:
        self.assertTrue(crosses_antimeridian(179.0, -179.0))
        self.assertTrue(crosses_antimeridian(-170.0, 175.0))
        self.assertFalse(crosses_antimeridian(-1.0, 1.0))
        self.assertFalse(crosses_antimeridian(10.0, 20.0))
        # touching the line is a tie, not a crossing
        self.assertFalse(crosses_antimeridian(-180.0, 179.0))

    def test_no_wrap_returns_input_as_single_path(self) -> None:
        points = [(-10.0, 50.0), (-5.0, 51.0), (0.0, 51.5), (5.0, 51.0)]
        self.assertEqual(split_antimeridian(points), [points])
        self.assertEqual(find_crossings(points), [])

    def test_prime_meridian_is_not_split(self) -> None:
        points = [(-0.5, 10.0), (0.25, 10.0), (1.0, 10.0)]
        self.assertEqual(len(split_antimeridian(points)), 1)

    def test_single_crossing_splits_in_two(self) -> None:
        points = [(170.0, 40.0), (175.0, 45.0), (179.5, 48.0), (-176.0, 50.0), (-170.0, 52.0)]
        self.assertEqual(find_crossings(points), [2])
        pieces = split_antimeridian(points)
        self.assertEqual(pieces, [points[:3], points[3:]])
        for piece in pieces:
            self.assertLess(max_jump(piece), 180.0)

    def test_short_side_is_dropped(self) -> None:
        points = [(179.0, 0.0), (-179.0, 0.0), (-178.0, 0.0)]
        self.assertEqual(split_antimeridian(points), [[(-179.0, 0.0), (-178.0, 0.0)]])

    def test_multiple_crossings(self) -> None:
        points = [
            (170.0, 70.0),
            (178.0, 72.0),
            (-178.0, 74.0),
            (-175.0, 75.0),
            (179.0, 76.0),
            (175.0, 77.0),
        ]
        self.assertEqual(find_crossings(points), [1, 3])
        pieces = split_antimeridian(points)
        self.assertEqual(len(pieces), 3)
        self.assertEqual(sum(len(p) for p in pieces), len(points))
        for piece in pieces:
            self.assertLess(max_jump(piece), 180.0)

    def test_first_only_keeps_legacy_single_split(self) -> None:
        points = [
            (170.0, 70.0),
            (178.0, 72.0),
            (-178.0, 74.0),
            (-175.0, 75.0),
            (179.0, 76.0),
            (175.0, 77.0),
        ]
        pieces = split_antimeridian(points, first_only=True)
        self.assertEqual(pieces, [points[:2], points[2:]])

    def test_touching_the_boundary_does_not_split(self) -> None:
        points = [(178.0, 10.0), (180.0, 11.0), (178.5, 12.0)]
        self.assertEqual(split_antimeridian(points), [points])
        west = [(-178.0, 10.0), (-180.0, 11.0), (-178.5, 12.0)]
        self.assertEqual(split_antimeridian(west), [west])

    def test_boundary_point_takes_the_side_of_the_path(self) -> None:
        points = [(178.0, 10.0), (-180.0, 11.0), (178.5, 12.0)]
        pieces = split_antimeridian(points)
        self.assertEqual(pieces, [[(178.0, 10.0), (180.0, 11.0), (178.5, 12.0)]])

    def test_crossing_through_a_boundary_point(self) -> None:
        points = [(-178.0, 10.0), (-179.0, 11.0), (180.0, 12.0), (179.0, 13.0), (178.0, 14.0)]
        pieces = split_antimeridian(points)
        self.assertEqual(
            pieces,
            [
                [(-178.0, 10.0), (-179.0, 11.0), (-180.0, 12.0)],
                [(179.0, 13.0), (178.0, 14.0)],
            ],
        )

    def test_near_boundary_longitudes_are_snapped_like_exact_ones(self) -> None:
        points = [(179.0, 10.0), (-179.99999999999977, 11.0), (179.5, 12.0)]
        self.assertEqual(split_antimeridian(points), [[(179.0, 10.0), (180.0, 11.0), (179.5, 12.0)]])

    def test_path_of_boundary_points_only_keeps_one_sign(self) -> None:
        points = [(-179.99999999999977, 70.0), (180.0, 71.0), (-180.0, 72.0)]
        self.assertEqual(split_antimeridian(points), [[(-180.0, 70.0), (-180.0, 71.0), (-180.0, 72.0)]])

    def test_half_turn_step_between_boundary_points_is_cut(self) -> None:
        points = [(0.0, 80.0), (0.0, 90.0), (180.0, 80.0)]
        self.assertEqual(split_antimeridian(points), [[(0.0, 80.0), (0.0, 90.0)]])
        self.assertEqual(split_antimeridian([(0.0, 0.0), (180.0, 0.0)]), [])

    def test_short_input_yields_nothing(self) -> None:
        self.assertEqual(split_antimeridian([]), [])
        self.assertEqual(split_antimeridian([(10.0, 10.0)]), [])


if __name__ == "__main__":
    unittest.main()
