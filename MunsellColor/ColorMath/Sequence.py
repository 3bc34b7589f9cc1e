from typing import List

import numpy as np
import numpy.typing as npt

from MunsellColor.MunsellTable import MunsellTable
from MunsellColor.Utils.CustomTypes import MunsellNotation


def InterpolateLuv(start: npt.NDArray, end: npt.NDArray, n: int) -> npt.NDArray:
    """
    n evenly spaced LUV coordinates from start to end inclusive, each axis interpolated on its own.
    Returns an nx3 Array.
    """
    if n < 2:
        raise ValueError(f"A sequence needs at least 2 colours, got n={n}")
    return np.column_stack([np.linspace(start[axis], end[axis], n) for axis in range(3)])


def GenerateSequence(table: MunsellTable, start: MunsellNotation, end: MunsellNotation, n: int) -> List[MunsellNotation]:
    """
    Sequence of n table colours from start to end: evenly spaced points on the LUV line between them,
    each matched to its nearest table entry. Neighbouring colours can repeat when the table is coarser
    than the spacing.

    :param table: the reference table
    :param start: first colour, must be in the table
    :param end: last colour, must be in the table
    :param n: number of colours, at least 2
    :raises NotInTableError: if start or end is missing from the table
    """
    luv = InterpolateLuv(table.luv_of(start), table.luv_of(end), n)
    interior = table.nearest_many(luv[1:-1]) if n > 2 else []
    return [start] + interior + [end]
