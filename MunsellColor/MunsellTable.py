from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from MunsellColor.ColorMath.NearestMatch import NearestMatcher, DEFAULT_TIE_TOLERANCE
from MunsellColor.ColorMath.Notation import ParseMunsell
from MunsellColor.ColorMath import Conversion
from MunsellColor.Utils.CustomTypes import MunsellNotation, TableEntry
from MunsellColor.Utils.Errors import NotInTableError


def _AsNotation(color: MunsellNotation | str) -> MunsellNotation:
    if isinstance(color, MunsellNotation):
        return color
    return ParseMunsell(color)


class MunsellTable:
    """
    The immutable reference table of Munsell colours and their LUV coordinates.

    Entries keep the order they are given in; that order decides ties in nearest matching.
    Besides exact lookup and nearest matching the table exposes its hue x value x chroma
    structure, which gamut correction uses to approximate coordinates of missing colours.
    """

    def __init__(self, notations: Sequence[MunsellNotation | str], luv: npt.NDArray,
                 rgb: npt.NDArray | None = None, tie_tolerance: float = DEFAULT_TIE_TOLERANCE):
        """
        Parameters:
            notations (Sequence[MunsellNotation | str]): the colours of the table, in order
            luv (npt.NDArray): Nx3 LUV coordinates, one row per notation
            rgb (npt.NDArray, optional): Nx3 sRGB coordinates, computed from luv if not given
            tie_tolerance (float): distance tolerance under which nearest matches count as ties
        """
        notations = [_AsNotation(n) for n in notations]
        luv = np.array(luv, dtype=float).reshape(-1, 3)
        if len(notations) != luv.shape[0]:
            raise ValueError(f"Got {len(notations)} notations but {luv.shape[0]} LUV coordinates")
        rgb = Conversion.LuvToRGB(luv, clip=True) if rgb is None else np.clip(np.array(rgb, dtype=float), 0, 1)
        rgb = rgb.reshape(-1, 3)
        if rgb.shape != luv.shape:
            raise ValueError(f"Got {rgb.shape[0]} RGB coordinates for {luv.shape[0]} colours")

        self._index: Dict[MunsellNotation, int] = {}
        for i, notation in enumerate(notations):
            if not notation.is_valid:
                raise ValueError(f"{notation} is not a valid Munsell colour")
            if notation in self._index:
                raise ValueError(f"{notation} appears more than once in the table")
            self._index[notation] = i

        luv.setflags(write=False)
        rgb.setflags(write=False)
        self.notations: Tuple[MunsellNotation, ...] = tuple(notations)
        self.luv = luv
        self.rgb = rgb
        self.matcher = NearestMatcher(luv, tie_tolerance)

        # (hue position, value) -> chroma ray, hue position -> values
        rays: Dict[Tuple[float, float], List[Tuple[float, int]]] = {}
        neutrals: List[Tuple[float, int]] = []
        for i, notation in enumerate(notations):
            if notation.is_neutral:
                neutrals.append((notation.value, i))
            else:
                rays.setdefault((notation.hue_position, notation.value), []).append((notation.chroma, i))
        self._rays = {key: sorted(ray) for key, ray in rays.items()}
        self._neutrals = sorted(neutrals)
        values: Dict[float, set] = {}
        for hue, value in self._rays:
            values.setdefault(hue, set()).add(value)
        self._values = {hue: sorted(vals) for hue, vals in values.items()}
        self.hue_positions: npt.NDArray = np.array(sorted(self._values), dtype=float)

    def __len__(self) -> int:
        return len(self.notations)

    def __iter__(self) -> Iterator[TableEntry]:
        return (self.entry(i) for i in range(len(self)))

    def __contains__(self, color) -> bool:
        if isinstance(color, str):
            color = ParseMunsell(color)
        return color in self._index

    def entry(self, index: int) -> TableEntry:
        return TableEntry(self.notations[index], self.luv[index], self.rgb[index])

    def index_of(self, color: MunsellNotation | str) -> int:
        """Table index of an exact entry, raises NotInTableError if it is missing."""
        notation = _AsNotation(color)
        try:
            return self._index[notation]
        except KeyError:
            raise NotInTableError(notation) from None

    def lookup(self, color: MunsellNotation | str) -> TableEntry:
        return self.entry(self.index_of(color))

    def luv_of(self, color: MunsellNotation | str) -> npt.NDArray:
        return self.luv[self.index_of(color)]

    def nearest(self, coord: npt.NDArray) -> MunsellNotation:
        """The notation of the table entry closest to a LUV coordinate."""
        return self.notations[self.matcher.nearest(coord)]

    def nearest_many(self, coords: npt.NDArray) -> List[MunsellNotation]:
        return [self.notations[i] for i in self.matcher.query(coords)]

    def values_for(self, hue_position: float) -> List[float]:
        """Munsell values that have chromatic entries for a hue."""
        return self._values.get(hue_position, [])

    def chroma_ray(self, hue_position: float, value: float) -> Tuple[npt.NDArray, npt.NDArray]:
        """
        Chromas (ascending) and matching LUV rows of all entries with the given hue and value.
        Returns empty arrays if there are none.
        """
        ray = self._rays.get((hue_position, value), [])
        chromas = np.array([c for c, _ in ray], dtype=float)
        return chromas, self.luv[[i for _, i in ray]].reshape(-1, 3)

    def neutral_ray(self) -> Tuple[npt.NDArray, npt.NDArray]:
        """Values (ascending) and LUV rows of the neutral entries."""
        values = np.array([v for v, _ in self._neutrals], dtype=float)
        return values, self.luv[[i for _, i in self._neutrals]].reshape(-1, 3)
