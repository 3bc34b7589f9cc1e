"""
Parsing and formatting of Munsell notation strings, plus the hue circle bookkeeping.
Notation is "<hue number><hue family> <value>/<chroma>", i.e. "5PB 2/4", or "N <value>/0" for greys.
"""
import math
import re
from typing import List, Tuple

import numpy as np

from MunsellColor.Utils.CustomTypes import HueFamily, MunsellNotation, HUE_CIRCLE, HUE_STEP_SIZE, HUE_STEPS
from MunsellColor.Utils.Errors import FormatError

NEUTRAL = "N"

_HUE_RE = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)([A-Z]+)$")


def ParseNumber(token, name: str, text: str) -> float:
    """A finite number from a string or number, FormatError otherwise."""
    try:
        number = float(token)
    except (TypeError, ValueError):
        raise FormatError(text, f"{name} {token!r} is not a number") from None
    if not math.isfinite(number):
        raise FormatError(text, f"{name} {token!r} is not a number")
    return number


def _FormatNumber(number: float) -> str:
    number = float(number)
    if number.is_integer():
        return str(int(number))
    # positional, the hue pattern has no exponents
    return np.format_float_positional(number, trim="-")


def ParseHue(token: str, text: str | None = None) -> Tuple[float, HueFamily | None]:
    """Parse a hue token such as "2.5GY", "10RP" or "N".

    :param token: the hue token
    :param text: full notation, only used in error messages
    """
    text = token if text is None else text
    if token == NEUTRAL:
        return 0.0, None
    match = _HUE_RE.match(token)
    if match is None:
        raise FormatError(text, f"hue {token!r} is not <number><family>")
    number_str, family_str = match.groups()
    if family_str not in HueFamily.__members__:
        raise FormatError(text, f"unknown hue family {family_str!r}")
    number = float(number_str)
    if number > 10:
        raise FormatError(text, f"hue number {number_str} is outside [0, 10]")
    return number, HueFamily[family_str]


def ParseMunsell(text: str) -> MunsellNotation:
    """
    Parse a Munsell notation string into a MunsellNotation.

    :param text: notation such as "5PB 2/4" or "N 5/0"
    :raises FormatError: if the string is not exactly a hue, a value and a chroma
    """
    if not isinstance(text, str):
        raise FormatError(text, "expected a string")
    parts = text.strip().split("/")
    if len(parts) != 2:
        raise FormatError(text, "expected exactly one '/' between value and chroma")
    head, chroma_str = parts
    tokens = head.split()
    if len(tokens) != 2:
        raise FormatError(text, "expected '<hue> <value>' before the '/'")
    if chroma_str == "" or chroma_str != chroma_str.strip():
        raise FormatError(text, "missing chroma after the '/'")

    hue_token, value_str = tokens
    hue_number, hue_family = ParseHue(hue_token, text)
    value = ParseNumber(value_str, "value", text)
    chroma = ParseNumber(chroma_str, "chroma", text)
    return MunsellNotation(hue_number, hue_family, value, chroma)


def FormatHue(notation: MunsellNotation) -> str:
    if notation.hue_family is None:
        return NEUTRAL
    return f"{_FormatNumber(notation.hue_number)}{notation.hue_family}"


def FormatMunsell(notation: MunsellNotation) -> str:
    """Canonical string of a notation, the inverse of ParseMunsell."""
    return f"{FormatHue(notation)} {_FormatNumber(notation.value)}/{_FormatNumber(notation.chroma)}"


def NotationFromHuePosition(position: float, value: float, chroma: float) -> MunsellNotation:
    """
    Build a notation from a position on the continuous hue circle. Positions wrap modulo 100,
    so 0 and 100 are both 10RP.
    """
    position = position % HUE_CIRCLE
    if position == 0:
        position = HUE_CIRCLE
    family_index = math.ceil(position / 10) - 1
    hue_number = round(position - family_index * 10, 10)
    return MunsellNotation(hue_number, HueFamily(family_index), value, chroma)


def NotationFromHueIndex(index: int, value: float, chroma: float) -> MunsellNotation:
    """Build a notation from its index (modulo 40) on the 40 step hue circle."""
    return NotationFromHuePosition(((index % HUE_STEPS) + 1) * HUE_STEP_SIZE, value, chroma)


def StandardHues() -> List[str]:
    """The 40 standard hues in circle order, 2.5R first and 10RP last."""
    return [FormatHue(NotationFromHueIndex(i, 0, 0)) for i in range(HUE_STEPS)]
