import warnings
from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np
import numpy.typing as npt

from MunsellColor.MunsellTable import MunsellTable
from MunsellColor.ColorMath import Arithmetic, Conversion
from MunsellColor.ColorMath.Gamut import FixNotation
from MunsellColor.ColorMath.Notation import FormatMunsell, ParseMunsell, ParseHue, ParseNumber
from MunsellColor.ColorMath.Sequence import GenerateSequence
from MunsellColor.Utils.CustomTypes import FixStrategy, MunsellNotation, MunsellResult
from MunsellColor.Utils.Errors import MunsellBatchError, MunsellError, OutOfGamutError

Colors = Sequence[str | MunsellNotation] | str | MunsellNotation


def _AsList(colors: Colors) -> List[str | MunsellNotation]:
    if isinstance(colors, (str, MunsellNotation)):
        return [colors]
    return list(colors)


def _ParseOne(color: str | MunsellNotation) -> MunsellNotation:
    if isinstance(color, MunsellNotation):
        return color
    return ParseMunsell(color)


def Collect(results: List[MunsellResult], strict: bool):
    """
    Per element results, or with `strict` the plain notations, raising MunsellBatchError
    with every failure if any element failed.
    """
    if not strict:
        return results
    errors = [(i, r.error) for i, r in enumerate(results) if not r.ok]
    if errors:
        raise MunsellBatchError(errors)
    return [r.notation for r in results]


class MunsellSpace:
    """
    Vectorized Munsell colour operations over a reference table.

    Every operation taking colours accepts strings or MunsellNotation (or a single one of either) and
    returns one MunsellResult per input, in order. A failing element does not stop the others; pass
    strict=True to get plain notations instead and a MunsellBatchError if anything failed.
    """

    def __init__(self, table: Optional[MunsellTable] = None,
                 fix_strategy: FixStrategy | str = FixStrategy.NEAREST,
                 warn: bool = True):
        """
        Parameters:
            table (MunsellTable, optional): reference table, defaults to the shared renotation table
            fix_strategy (FixStrategy or str): how fix=True corrects colours missing from the table
            warn (bool): warn when colours are corrected or RGB values clipped
        """
        if table is None:
            from MunsellColor.Utils.IO import BuildRenotationTable
            table = BuildRenotationTable()
        if isinstance(fix_strategy, str):
            fix_strategy = FixStrategy(fix_strategy.lower())
        self.table = table
        self.fix_strategy = fix_strategy
        self.warn = warn

    def _map(self, colors: Colors, operation: Callable[[MunsellNotation], MunsellNotation]) -> List[MunsellResult]:
        results = []
        for color in _AsList(colors):
            try:
                results.append(MunsellResult(notation=operation(_ParseOne(color))))
            except MunsellError as e:
                results.append(MunsellResult(error=e))
        return results

    def _gamut_results(self, candidates: List[MunsellResult], fix: bool,
                       strategy: Optional[FixStrategy | str]) -> List[MunsellResult]:
        if isinstance(strategy, str):
            strategy = FixStrategy(strategy.lower())
        strategy = strategy or self.fix_strategy
        results, fixed = [], []
        for result in candidates:
            if not result.ok:
                results.append(result)
                continue
            notation = result.notation
            if not notation.is_neutral and notation.chroma == 0:
                # no chroma, the hue is meaningless: 5PB 5/0 is N 5/0
                notation = MunsellNotation(0.0, None, notation.value, 0.0)
            if notation in self.table:
                results.append(MunsellResult(notation=notation))
            elif not fix:
                results.append(MunsellResult(error=OutOfGamutError(result.notation)))
            else:
                try:
                    corrected = FixNotation(self.table, notation, strategy)
                except MunsellError as e:
                    results.append(MunsellResult(error=e))
                    continue
                fixed.append(f"{result.notation} -> {corrected}")
                results.append(MunsellResult(notation=corrected))
        if fixed and self.warn:
            warnings.warn(f"Fixed {len(fixed)} colour(s) outside of the table: {', '.join(fixed)}")
        return results

    def parse(self, colors: Colors, strict: bool = False):
        """Parse notation strings, FormatError per malformed element."""
        return Collect(self._map(colors, lambda n: n), strict)

    def format(self, colors: Colors) -> List[str]:
        return [FormatMunsell(_ParseOne(color)) for color in _AsList(colors)]

    def in_gamut(self, colors: Colors, fix: bool = False, strategy: Optional[FixStrategy | str] = None,
                 strict: bool = False):
        """
        Check that colours are in the reference table.

        Parameters:
            colors: the colours to check
            fix (bool): correct colours that are not in the table instead of failing with OutOfGamutError
            strategy (FixStrategy or str, optional): overrides the fix strategy of this space
            strict (bool): all-or-nothing mode
        """
        return Collect(self._gamut_results(self.parse(colors), fix, strategy), strict)

    def check(self, colors: Colors, strict: bool = False):
        """Parse and check table membership without correcting anything."""
        return self.in_gamut(colors, fix=False, strict=strict)

    def nearest(self, coords: npt.NDArray) -> List[MunsellNotation]:
        """Nearest table colour of each LUV coordinate (3 or Nx3)."""
        return self.table.nearest_many(coords)

    def lighter(self, colors: Colors, steps: int = 1, strict: bool = False):
        return Collect(self._map(colors, lambda n: Arithmetic.Lighter(n, steps)), strict)

    def darker(self, colors: Colors, steps: int = 1, strict: bool = False):
        return Collect(self._map(colors, lambda n: Arithmetic.Darker(n, steps)), strict)

    def saturate(self, colors: Colors, steps: int = 1, strict: bool = False):
        return Collect(self._map(colors, lambda n: Arithmetic.Saturate(n, steps)), strict)

    def desaturate(self, colors: Colors, steps: int = 1, strict: bool = False):
        return Collect(self._map(colors, lambda n: Arithmetic.Desaturate(n, steps)), strict)

    def complement(self, colors: Colors, fix: bool = False, strategy: Optional[FixStrategy | str] = None,
                   strict: bool = False):
        """
        Colours with the same value and chroma on the opposite side of the hue circle. The complements
        are checked against the table, use fix=True to correct those that do not exist.
        """
        return Collect(self._gamut_results(self._map(colors, Arithmetic.ComplementHue), fix, strategy), strict)

    def rotate_hue(self, colors: Colors, steps: int = 1, fix: bool = False,
                   strategy: Optional[FixStrategy | str] = None, strict: bool = False):
        """Move hues `steps` positions of the 40 step circle (R to Y to G ... for positive steps)."""
        rotated = self._map(colors, lambda n: Arithmetic.RotateHue(n, steps))
        return Collect(self._gamut_results(rotated, fix, strategy), strict)

    def seq(self, start: str | MunsellNotation, end: str | MunsellNotation, n: int) -> List[MunsellNotation]:
        """
        n colours from start to end, evenly spaced in LUV and matched to the table.
        Raises FormatError / NotInTableError for bad endpoints, they are never corrected.
        """
        return GenerateSequence(self.table, _ParseOne(start), _ParseOne(end), n)

    def to_luv(self, colors: Colors, fix: bool = False, strict: bool = False) -> npt.NDArray:
        """Nx3 LUV of the colours, rows of NaN for colours that failed unless strict."""
        results = self.in_gamut(colors, fix=fix)
        Collect(results, strict)
        luv = np.full((len(results), 3), np.nan)
        for i, result in enumerate(results):
            if result.ok:
                luv[i] = self.table.luv_of(result.notation)
        return luv

    def to_rgb(self, colors: Colors, fix: bool = False, strict: bool = False) -> npt.NDArray:
        """Nx3 sRGB in [0, 1] of the colours, rows of NaN for colours that failed unless strict."""
        results = self.in_gamut(colors, fix=fix)
        Collect(results, strict)
        rgb = np.full((len(results), 3), np.nan)
        for i, result in enumerate(results):
            if result.ok:
                rgb[i] = self.table.lookup(result.notation).rgb
        return rgb

    def to_hex(self, colors: Colors, fix: bool = False, strict: bool = False) -> List[Optional[str]]:
        """Hex codes of the colours, None for colours that failed unless strict."""
        luv = self.to_luv(colors, fix=fix, strict=strict)
        ok = ~np.isnan(luv[:, 0])
        codes = iter(Conversion.LuvToHex(luv[ok])) if ok.any() else iter([])
        return [next(codes) if good else None for good in ok]

    def rgb_to_munsell(self, rgb: npt.NDArray) -> List[MunsellNotation]:
        """Nearest table colour of each sRGB colour (3 or Nx3, in [0, 1])."""
        rgb = np.atleast_2d(np.asarray(rgb, dtype=float))
        if self.warn and not np.all(Conversion.IsDisplayable(rgb)):
            warnings.warn("RGB values outside of [0, 1]. Clipping.")
        return self.nearest(Conversion.RGBToLuv(np.clip(rgb, 0, 1)))

    def hex_to_munsell(self, codes: Iterable[str] | str) -> List[MunsellNotation]:
        codes = [codes] if isinstance(codes, str) else list(codes)
        return self.nearest(Conversion.HexToLuv(codes))

    def to_hvc(self, colors: Colors) -> npt.NDArray:
        """
        Nx3 array of (hue position, value, chroma), hue position in (0, 100] and 0 for greys.
        Raises FormatError for malformed colours.
        """
        notations = [_ParseOne(color) for color in _AsList(colors)]
        return np.array([[n.hue_position, n.value, n.chroma] for n in notations], dtype=float).reshape(-1, 3)

    def from_hvc(self, hues: Iterable[str], values: Iterable[float], chromas: Iterable[float],
                 fix: bool = False, strict: bool = False):
        """Build colours from parallel hue tokens ("5PB", "N"), values and chromas, then check the gamut."""
        candidates = []
        for hue, value, chroma in zip(hues, values, chromas, strict=True):
            try:
                text = f"{hue} {value}/{chroma}"
                hue_number, hue_family = ParseHue(str(hue), text)
                value = ParseNumber(value, "value", text)
                chroma = ParseNumber(chroma, "chroma", text)
                candidates.append(MunsellResult(notation=MunsellNotation(hue_number, hue_family, value, chroma)))
            except MunsellError as e:
                candidates.append(MunsellResult(error=e))
        return Collect(self._gamut_results(candidates, fix, None), strict)
