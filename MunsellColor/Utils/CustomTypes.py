import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy.typing as npt


class HueFamily(Enum):
    """
    The ten Munsell hue families, in hue circle order starting at red.
    Each family spans ten hue numbers, and four standard subdivisions (2.5, 5, 7.5, 10).
    """
    R = 0
    YR = 1
    Y = 2
    GY = 3
    G = 4
    BG = 5
    B = 6
    PB = 7
    P = 8
    RP = 9

    def __str__(self):
        return self.name


class FixStrategy(Enum):
    """How a notation without a table entry is corrected.
        NEAREST: approximate the LUV coordinate of the notation and take the nearest table entry.
        CHROMA: keep hue and value, lower the chroma until the notation is in the table.
    """
    NEAREST = "nearest"
    CHROMA = "chroma"

    def __str__(self):
        return self.value


HUE_STEPS = 40
HUE_STEP_SIZE = 2.5
HUE_CIRCLE = 100.0  # 10 families x 10 hue numbers
MAX_VALUE = 10.0


@dataclass(frozen=True)
class MunsellNotation:
    """
    A Munsell colour, i.e. "5PB 2/4".
        hue_number (float): position inside the hue family, in (0, 10]. 0 for neutrals.
        hue_family (HueFamily | None): the hue family, None for the neutral axis (N).
        value (float): lightness, [0, 10] for a valid colour.
        chroma (float): saturation, a non-negative even number for a valid colour.

    The object does not clamp anything, so arithmetic can produce invalid colours,
    use `is_valid` to check.
    """
    hue_number: float
    hue_family: Optional[HueFamily]
    value: float
    chroma: float

    def __post_init__(self):
        if self.hue_family is None:
            object.__setattr__(self, "hue_number", 0.0)
        elif self.hue_number == 0:
            # 0Y is written 10YR
            previous = HueFamily((self.hue_family.value - 1) % len(HueFamily))
            object.__setattr__(self, "hue_number", 10.0)
            object.__setattr__(self, "hue_family", previous)

    @property
    def is_neutral(self) -> bool:
        return self.hue_family is None

    @property
    def hue_position(self) -> float:
        """Position on the continuous hue circle, in (0, 100]. 0 for neutrals."""
        if self.hue_family is None:
            return 0.0
        return self.hue_family.value * 10 + self.hue_number

    @property
    def hue_index(self) -> Optional[float]:
        """Index on the 40 step hue circle, 2.5R is 0 and 10RP is 39. None for neutrals."""
        if self.hue_family is None:
            return None
        return self.hue_position / HUE_STEP_SIZE - 1

    @property
    def is_valid(self) -> bool:
        if not (0 <= self.value <= MAX_VALUE):
            return False
        if self.chroma < 0 or not float(self.chroma).is_integer() or self.chroma % 2 != 0:
            return False
        if self.hue_family is None:
            return self.chroma == 0
        return 0 < self.hue_number <= 10 and math.isfinite(self.hue_number)

    def __str__(self):
        from MunsellColor.ColorMath.Notation import FormatMunsell
        return FormatMunsell(self)


@dataclass(frozen=True)
class TableEntry:
    """
    A row of the reference table.
        notation (MunsellNotation): the Munsell colour.
        luv (npt.NDArray): CIE LUV coordinate of the colour.
        rgb (npt.NDArray): sRGB coordinate of the colour, clipped to [0, 1].
    """
    notation: MunsellNotation
    luv: npt.NDArray = field(compare=False)
    rgb: npt.NDArray = field(compare=False)


@dataclass(frozen=True)
class MunsellResult:
    """
    Outcome of one element of a vectorized operation. Exactly one of notation / error is set.
    """
    notation: Optional[MunsellNotation] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> MunsellNotation:
        if self.error is not None:
            raise self.error
        return self.notation

    def __str__(self):
        return str(self.notation) if self.ok else f"<{type(self.error).__name__}: {self.error}>"
