"""Tests for nearest matching in LUV space."""

import numpy as np
import pytest

from MunsellColor.ColorMath.NearestMatch import FindNearestExhaustive, NearestMatcher
from MunsellColor.ColorMath.Notation import ParseMunsell


class TestNearestMatcher:
    def test_exact_coordinate_matches_itself(self, table):
        for index in range(0, len(table), 97):
            assert table.matcher.nearest(table.luv[index]) == index

    def test_same_as_exhaustive_scan(self, table):
        rng = np.random.default_rng(0)
        coords = rng.uniform([0, -60, -60], [100, 60, 60], size=(300, 3))
        indices = table.matcher.query(coords)
        for coord, index in zip(coords, indices):
            assert index == FindNearestExhaustive(table.luv, coord)

    def test_ties_resolve_to_lowest_index(self):
        points = np.array([[2.0, 0, 0], [5.0, 5, 5], [0.0, 0, 0]])
        matcher = NearestMatcher(points)
        assert matcher.nearest([1.0, 0, 0]) == 0
        assert FindNearestExhaustive(points, [1.0, 0, 0]) == 0

        reversed_matcher = NearestMatcher(points[::-1])
        assert reversed_matcher.nearest([1.0, 0, 0]) == 0

    def test_many_equidistant_points(self):
        # the corners of a cube around the origin are all equally far away
        corners = np.array([[x, y, z] for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)], dtype=float)
        order = np.array([5, 2, 7, 0, 3, 6, 1, 4])
        matcher = NearestMatcher(corners[order])
        assert matcher.nearest([0, 0, 0]) == 0

    def test_repeated_queries_are_deterministic(self, table):
        coord = np.array([42.0, 3.3, -7.1])
        first = table.nearest(coord)
        for _ in range(20):
            assert table.nearest(coord) == first

    def test_batch_query(self, table, synthetic_luv):
        names = ["5PB 2/4", "N 5/0", "10RP 9/10"]
        coords = np.array([synthetic_luv(ParseMunsell(n)) for n in names])
        assert [str(n) for n in table.nearest_many(coords)] == names

    def test_single_coordinate_query_returns_array(self, table):
        assert table.matcher.query(np.zeros(3)).shape == (1,)

    def test_points_are_read_only(self, table):
        with pytest.raises(ValueError):
            table.matcher.points[0, 0] = 1.0
        with pytest.raises(ValueError):
            table.luv[0, 0] = 1.0

    @pytest.mark.parametrize("coord", [[1.0, 2.0], [[1.0, 2.0, 3.0, 4.0]], [np.nan, 0, 0], [np.inf, 0, 0]])
    def test_bad_query(self, table, coord):
        with pytest.raises(ValueError):
            table.matcher.query(coord)

    def test_needs_points(self):
        with pytest.raises(ValueError):
            NearestMatcher(np.zeros((0, 3)))
        with pytest.raises(ValueError):
            NearestMatcher(np.zeros((4, 2)))
