"""
Colorimetric transforms between the Munsell renotation data (xyY, illuminant C), CIE LUV and sRGB.
All LUV / sRGB values are relative to D65.
"""
import warnings
from typing import List

import numpy as np
import numpy.typing as npt

import colour
from colour.colorimetry import luminance_ASTMD1535
from colour.notation import HEX_to_RGB

CIE_1931 = "CIE 1931 2 Degree Standard Observer"
D65: npt.NDArray = colour.CCS_ILLUMINANTS[CIE_1931]["D65"]
ILLUMINANT_C: npt.NDArray = colour.CCS_ILLUMINANTS[CIE_1931]["C"]

RGB_TOLERANCE = 1e-6

# sRGB with matrices derived from its primaries, forward and inverse are exact inverses
SRGB = colour.RGB_COLOURSPACES["sRGB"].copy()
SRGB.use_derived_transformation_matrices(True)


def _AsRows(array) -> npt.NDArray:
    array = np.asarray(array, dtype=float)
    if array.shape[-1] != 3:
        raise ValueError(f"Expected colours with 3 components, got shape {array.shape}")
    return array


def xyYToLuv(xyY: npt.NDArray, illuminant: npt.NDArray = ILLUMINANT_C) -> npt.NDArray:
    """
    Nx3 xyY (Y in [0, 1]) under `illuminant` to Nx3 LUV under D65, Bradford adapted.

    :param xyY: Nx3 Array of xyY coordinates
    :param illuminant: chromaticity of the illuminant the xyY values were measured under
    """
    XYZ = colour.xyY_to_XYZ(_AsRows(xyY))
    if not np.allclose(illuminant, D65):
        XYZ = colour.chromatic_adaptation(XYZ, colour.xy_to_XYZ(illuminant), colour.xy_to_XYZ(D65),
                                          method="Von Kries", transform="Bradford")
    # black has undefined chromaticity
    return np.nan_to_num(colour.XYZ_to_Luv(XYZ, illuminant=D65))


def NeutralLuv(values: npt.NDArray) -> npt.NDArray:
    """
    LUV coordinates of the neutral greys N v/0 for the given Munsell values (ASTM D1535).

    :param values: array of Munsell values in [0, 10]
    """
    Y = luminance_ASTMD1535(np.asarray(values, dtype=float)) / 100
    XYZ = np.outer(Y, colour.xy_to_XYZ(D65))
    luv = np.nan_to_num(colour.XYZ_to_Luv(XYZ, illuminant=D65))
    luv[:, 1:] = 0
    return luv


def IsDisplayable(rgb: npt.NDArray, tolerance: float = RGB_TOLERANCE) -> npt.NDArray:
    """Boolean mask of the sRGB rows that are inside [0, 1]."""
    rgb = _AsRows(rgb)
    return np.all((rgb >= -tolerance) & (rgb <= 1 + tolerance), axis=-1)


def LuvToRGB(luv: npt.NDArray, clip: bool = True, warn: bool = False) -> npt.NDArray:
    """
    LUV to gamma encoded sRGB. Values outside of [0, 1] are clipped unless `clip` is False.

    :param luv: Nx3 (or 3) Array of LUV coordinates
    :param clip: clip to [0, 1]
    :param warn: warn when clipping changed a value
    """
    XYZ = np.nan_to_num(colour.Luv_to_XYZ(_AsRows(luv), illuminant=D65))
    rgb = colour.XYZ_to_RGB(XYZ, SRGB, apply_cctf_encoding=True)
    if clip:
        if warn and not np.all(IsDisplayable(rgb)):
            warnings.warn("RGB values outside of [0, 1]. Clipping.")
        rgb = np.clip(rgb, 0, 1)
    return rgb


def RGBToLuv(rgb: npt.NDArray) -> npt.NDArray:
    """Gamma encoded sRGB in [0, 1] to LUV."""
    XYZ = colour.RGB_to_XYZ(_AsRows(rgb), SRGB, apply_cctf_decoding=True)
    return np.nan_to_num(colour.XYZ_to_Luv(XYZ, illuminant=D65))


def LuvToHex(luv: npt.NDArray) -> List[str]:
    """Hex codes ("#RRGGBB") of LUV coordinates, clipped to the sRGB gamut."""
    rgb = np.atleast_2d(LuvToRGB(luv, clip=True))
    return ["#{:02X}{:02X}{:02X}".format(*row) for row in np.round(rgb * 255).astype(int)]


def HexToLuv(codes: List[str]) -> npt.NDArray:
    """Nx3 LUV coordinates of hex codes."""
    rgb = np.array([HEX_to_RGB(code) for code in codes], dtype=float).reshape(-1, 3)
    return RGBToLuv(rgb)
