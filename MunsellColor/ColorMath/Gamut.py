"""
Correction of Munsell colours that have no entry in the reference table.

Two ways of fixing a colour:
    FixByNearest approximates the LUV coordinate the colour would have and returns the nearest table entry.
    FixByChroma keeps hue and value and lowers chroma until the colour exists (the classic munsell fix).
"""
import math

import numpy as np
import numpy.typing as npt

from MunsellColor.ColorMath import Conversion
from MunsellColor.MunsellTable import MunsellTable
from MunsellColor.Utils.CustomTypes import FixStrategy, MunsellNotation, HUE_CIRCLE, MAX_VALUE
from MunsellColor.Utils.Errors import FormatError


def _Lerp(a: npt.NDArray, b: npt.NDArray, t: float) -> npt.NDArray:
    return a + (b - a) * t


def _Bracket(points: npt.NDArray, x: float):
    """Indices of the points around x and the weight of the upper one. x must be inside the range."""
    upper = int(np.searchsorted(points, x, side="left"))
    if points[upper] == x:
        return upper, upper, 0.0
    lower = upper - 1
    return lower, upper, (x - points[lower]) / (points[upper] - points[lower])


def NeutralLuvAt(table: MunsellTable, value: float) -> npt.NDArray:
    """
    LUV of the grey with the given value, interpolated over the neutral entries of the table.
    Tables without neutrals use the ASTM D1535 greys.
    """
    values, luv = table.neutral_ray()
    if len(values) == 0:
        return Conversion.NeutralLuv([value])[0]
    return np.array([np.interp(value, values, luv[:, axis]) for axis in range(3)])


def _ChromaRayLuv(table: MunsellTable, hue_position: float, value: float, chroma: float) -> npt.NDArray:
    chromas, luv = table.chroma_ray(hue_position, value)
    grey = NeutralLuvAt(table, value)
    positive = chromas > 0
    chromas = np.concatenate([[0.0], chromas[positive]])
    luv = np.vstack([grey, luv[positive]])
    if len(chromas) == 1:
        return grey
    if chroma <= chromas[-1]:
        return np.array([np.interp(chroma, chromas, luv[:, axis]) for axis in range(3)])
    # extend the last segment of the ray past the most saturated entry
    t = (chroma - chromas[-2]) / (chromas[-1] - chromas[-2])
    return _Lerp(luv[-2], luv[-1], t)


def _HueSliceLuv(table: MunsellTable, hue_position: float, value: float, chroma: float) -> npt.NDArray:
    values = np.array(table.values_for(hue_position), dtype=float)
    clamped = float(np.clip(value, values[0], values[-1]))
    lower, upper, t = _Bracket(values, clamped)
    luv = _Lerp(_ChromaRayLuv(table, hue_position, values[lower], chroma),
                _ChromaRayLuv(table, hue_position, values[upper], chroma), t)
    if clamped != value:
        # outside the values of this hue, shift the lightness along the grey axis
        luv[0] += NeutralLuvAt(table, value)[0] - NeutralLuvAt(table, clamped)[0]
    return luv


def ApproximateLuv(table: MunsellTable, notation: MunsellNotation) -> npt.NDArray:
    """
    Approximate the LUV coordinate of any notation from the hue x value x chroma structure of the table.

    Value is clamped to [0, 10] and negative chroma to 0. Between table hues, values and chromas the
    coordinate is linearly interpolated; past the highest chroma of a hue and value it is extrapolated
    along the last chroma step.

    :param table: the reference table
    :param notation: the colour to place, need not be in the table
    """
    value = float(np.clip(notation.value, 0, MAX_VALUE))
    chroma = max(float(notation.chroma), 0.0)
    if notation.is_neutral or chroma == 0 or len(table.hue_positions) == 0:
        return NeutralLuvAt(table, value)

    hues = table.hue_positions
    position = notation.hue_position
    upper = int(np.searchsorted(hues, position, side="left"))
    if upper < len(hues) and hues[upper] == position:
        return _HueSliceLuv(table, position, value, chroma)

    # neighbouring hues on the circle, wrapping past 10RP
    lower_hue = hues[upper - 1] if upper > 0 else hues[-1]
    upper_hue = hues[upper] if upper < len(hues) else hues[0]
    span = (upper_hue - lower_hue) % HUE_CIRCLE or HUE_CIRCLE
    t = ((position - lower_hue) % HUE_CIRCLE) / span
    return _Lerp(_HueSliceLuv(table, lower_hue, value, chroma),
                 _HueSliceLuv(table, upper_hue, value, chroma), t)


def FixByNearest(table: MunsellTable, notation: MunsellNotation) -> MunsellNotation:
    """The table entry nearest to where the notation would sit in LUV space."""
    if notation in table:
        return notation
    return table.nearest(ApproximateLuv(table, notation))


def FixByChroma(table: MunsellTable, notation: MunsellNotation) -> MunsellNotation:
    """
    Keep the hue, round the value to a whole step inside [0, 10] and reduce chroma by 2 until the
    colour is in the table. Ends on the grey of that value, or the nearest entry if the grey is missing.
    """
    if notation in table:
        return notation
    value = float(min(max(round(notation.value), 0), MAX_VALUE))
    if not notation.is_neutral:
        chroma = 2 * math.floor(max(notation.chroma, 0) / 2)
        while chroma > 0:
            candidate = MunsellNotation(notation.hue_number, notation.hue_family, value, chroma)
            if candidate in table:
                return candidate
            chroma -= 2
    grey = MunsellNotation(0, None, value, 0)
    if grey in table:
        return grey
    return FixByNearest(table, grey)


def FixNotation(table: MunsellTable, notation: MunsellNotation,
                strategy: FixStrategy = FixStrategy.NEAREST) -> MunsellNotation:
    """Correct a notation to a colour in the table with the given strategy."""
    if not all(math.isfinite(x) for x in (notation.hue_number, notation.value, notation.chroma)):
        raise FormatError(str(notation), "hue, value and chroma must be finite")
    if strategy == FixStrategy.NEAREST:
        return FixByNearest(table, notation)
    elif strategy == FixStrategy.CHROMA:
        return FixByChroma(table, notation)
    else:
        raise NotImplementedError(f"Unknown fix strategy {strategy}")
