from dataclasses import replace

from MunsellColor.ColorMath.Notation import NotationFromHuePosition
from MunsellColor.Utils.CustomTypes import MunsellNotation, HUE_STEP_SIZE, HUE_STEPS

CHROMA_STEP = 2


# None of these check the gamut, the results can be colours that do not exist.

def Lighter(notation: MunsellNotation, steps: int = 1) -> MunsellNotation:
    return replace(notation, value=notation.value + steps)


def Darker(notation: MunsellNotation, steps: int = 1) -> MunsellNotation:
    return replace(notation, value=notation.value - steps)


def Saturate(notation: MunsellNotation, steps: int = 1) -> MunsellNotation:
    return replace(notation, chroma=notation.chroma + CHROMA_STEP * steps)


def Desaturate(notation: MunsellNotation, steps: int = 1) -> MunsellNotation:
    return replace(notation, chroma=notation.chroma - CHROMA_STEP * steps)


def RotateHue(notation: MunsellNotation, steps: int = 1) -> MunsellNotation:
    """
    Move the hue by `steps` positions of the 40 step hue circle, towards R-Y-G-B-P for positive steps
    and the other way round for negative ones. Greys have no hue and are returned unchanged.
    """
    if notation.is_neutral:
        return notation
    return NotationFromHuePosition(notation.hue_position + steps * HUE_STEP_SIZE, notation.value, notation.chroma)


def ComplementHue(notation: MunsellNotation) -> MunsellNotation:
    """The hue on the opposite side of the hue circle, (h + 20) mod 40."""
    return RotateHue(notation, HUE_STEPS // 2)
