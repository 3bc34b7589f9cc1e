"""Tests for the vectorized MunsellSpace helpers."""

import numpy as np
import pytest

from MunsellColor import MunsellSpace
from MunsellColor.ColorMath.Notation import FormatMunsell, ParseMunsell
from MunsellColor.Utils.CustomTypes import MunsellResult
from MunsellColor.Utils.Errors import FormatError, MunsellBatchError, OutOfGamutError


class TestParsing:
    def test_parse_results(self, space):
        results = space.parse(["5PB 2/4", "5PB 2-4"])
        assert all(isinstance(r, MunsellResult) for r in results)
        assert results[0].notation == ParseMunsell("5PB 2/4")
        assert isinstance(results[1].error, FormatError)
        assert "FormatError" in str(results[1])

    def test_format(self, space):
        assert space.format(["5.0PB  2.0/4", ParseMunsell("N 5/0")]) == ["5PB 2/4", "N 5/0"]


class TestHVC:
    def test_to_hvc(self, space):
        np.testing.assert_array_equal(space.to_hvc(["5PB 2/4", "N 5/0"]), [[75, 2, 4], [0, 5, 0]])

    def test_from_hvc(self, space):
        results = space.from_hvc(["5PB", "N", "5PB"], [2, 5, 2], [4, 0, 12])
        assert [r.ok for r in results] == [True, True, False]
        assert str(results[0]) == "5PB 2/4"
        assert isinstance(results[2].error, OutOfGamutError)

    def test_from_hvc_fixed(self, space):
        assert [FormatMunsell(n) for n in space.from_hvc(["5PB"], [2], [12], fix=True, strict=True)] == ["5PB 2/10"]

    def test_from_hvc_bad_numbers_fail_per_element(self, space):
        results = space.from_hvc(["5PB", "5PB", "5PB"], ["abc", float("nan"), 2], [4, 4, None], fix=True)
        assert [type(r.error) for r in results] == [FormatError, FormatError, FormatError]
        assert space.from_hvc(["5PB"], ["2"], ["4"], strict=True) == [ParseMunsell("5PB 2/4")]

    def test_from_hvc_bad_hue(self, space):
        with pytest.raises(MunsellBatchError):
            space.from_hvc(["5XX"], [2], [4], strict=True)


class TestCoordinates:
    def test_nearest(self, space, synthetic_luv):
        luv = synthetic_luv(ParseMunsell("5Y 7/8")) + [0.3, -0.2, 0.1]
        assert [FormatMunsell(n) for n in space.nearest(luv)] == ["5Y 7/8"]

    def test_to_luv(self, space, synthetic_luv):
        luv = space.to_luv(["5PB 2/4", "5PB 2/12"])
        np.testing.assert_allclose(luv[0], synthetic_luv(ParseMunsell("5PB 2/4")))
        assert np.all(np.isnan(luv[1]))

    def test_to_luv_strict(self, space):
        with pytest.raises(MunsellBatchError):
            space.to_luv(["5PB 2/12"], strict=True)

    def test_to_rgb(self, space, table):
        rgb = space.to_rgb(["N 10/0", "5PB 2/12"], strict=False)
        np.testing.assert_allclose(rgb[0], table.lookup("N 10/0").rgb)
        assert np.all(np.isnan(rgb[1]))

    def test_to_hex(self, space):
        assert space.to_hex(["N 10/0", "N 0/0", "bad"]) == ["#FFFFFF", "#000000", None]

    def test_rgb_round_trip_through_table(self, space, table):
        rgb = table.lookup("N 10/0").rgb
        assert [FormatMunsell(n) for n in space.rgb_to_munsell(rgb)] == ["N 10/0"]

    def test_rgb_outside_range_warns(self, table):
        space = MunsellSpace(table, warn=True)
        with pytest.warns(UserWarning):
            space.rgb_to_munsell([1.5, 0.5, 0.5])
