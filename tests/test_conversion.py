"""Tests for the LUV / sRGB transforms."""

import numpy as np
import pytest

from MunsellColor.ColorMath import Conversion


class TestLuvRGB:
    def test_white_and_black(self):
        np.testing.assert_allclose(Conversion.LuvToRGB([100, 0, 0]), [1, 1, 1], atol=1e-3)
        np.testing.assert_allclose(Conversion.LuvToRGB([0, 0, 0]), [0, 0, 0], atol=1e-6)

    def test_round_trip(self):
        rgb = np.array([[0.2, 0.4, 0.6], [0.9, 0.1, 0.3], [0.5, 0.5, 0.5]])
        np.testing.assert_allclose(Conversion.LuvToRGB(Conversion.RGBToLuv(rgb)), rgb, atol=1e-9)

    def test_grey_has_no_chroma(self):
        luv = Conversion.RGBToLuv([0.5, 0.5, 0.5])
        assert luv[0] == pytest.approx(53.39, abs=0.05)
        np.testing.assert_allclose(luv[1:], [0, 0], atol=1e-9)

    def test_clipping(self):
        outside = np.array([50, 200, 0])
        assert not Conversion.IsDisplayable(Conversion.LuvToRGB(outside, clip=False))
        rgb = Conversion.LuvToRGB(outside)
        assert np.all((rgb >= 0) & (rgb <= 1))

    def test_clipping_warns(self):
        with pytest.warns(UserWarning, match="Clipping"):
            Conversion.LuvToRGB([50, 200, 0], warn=True)

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            Conversion.LuvToRGB([1, 2])


class TestHex:
    def test_hex_codes(self):
        assert Conversion.LuvToHex(np.array([[100, 0, 0], [0, 0, 0]])) == ["#FFFFFF", "#000000"]

    def test_hex_to_luv(self):
        luv = Conversion.HexToLuv(["#FFFFFF", "#000000"])
        np.testing.assert_allclose(luv, [[100, 0, 0], [0, 0, 0]], atol=1e-2)

    def test_hex_round_trip(self):
        codes = ["#336699", "#808080", "#E63319"]
        assert Conversion.LuvToHex(Conversion.HexToLuv(codes)) == codes


class TestRenotationTransforms:
    def test_neutrals(self):
        luv = Conversion.NeutralLuv(np.arange(11))
        assert luv.shape == (11, 3)
        assert luv[0, 0] == pytest.approx(0)
        assert np.all(np.diff(luv[:, 0]) > 0)
        assert luv[10, 0] > 100
        np.testing.assert_array_equal(luv[:, 1:], 0)

    def test_illuminant_c_white_maps_to_neutral(self):
        xyY = np.array([[Conversion.ILLUMINANT_C[0], Conversion.ILLUMINANT_C[1], 0.5]])
        luv = Conversion.xyYToLuv(xyY)
        np.testing.assert_allclose(luv[0, 1:], [0, 0], atol=1e-3)
        assert luv[0, 0] == pytest.approx(76.07, abs=0.05)

    def test_black(self):
        np.testing.assert_allclose(Conversion.xyYToLuv(np.array([[0.31, 0.32, 0.0]])), [[0, 0, 0]], atol=1e-9)
