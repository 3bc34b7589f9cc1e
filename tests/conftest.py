"""Shared fixtures: a small synthetic reference table with a simple LUV layout.

Every colour sits at L = 10 * value and (U, V) = 4 * chroma * (cos, sin) of its hue angle,
so distances between colours are easy to reason about.
"""
import math

import numpy as np
import pytest

from MunsellColor import MunsellSpace, MunsellTable
from MunsellColor.ColorMath.Notation import FormatMunsell, NotationFromHueIndex
from MunsellColor.Utils.CustomTypes import HueFamily, MunsellNotation


def SyntheticLuv(notation: MunsellNotation) -> np.ndarray:
    angle = 2 * math.pi * notation.hue_position / 100
    radius = 4 * notation.chroma
    return np.array([10 * notation.value, radius * math.cos(angle), radius * math.sin(angle)])


def SyntheticNotations():
    notations = [MunsellNotation(0, None, v, 0) for v in range(11)]
    for index in range(40):
        for value in range(1, 10):
            for chroma in range(2, 11, 2):
                notations.append(NotationFromHueIndex(index, value, chroma))
    # 5R reaches further at the middle values
    for value in range(2, 6):
        for chroma in range(12, 17, 2):
            notations.append(MunsellNotation(5, HueFamily.R, value, chroma))
    return notations


@pytest.fixture(scope="session")
def table() -> MunsellTable:
    notations = SyntheticNotations()
    return MunsellTable(notations, np.array([SyntheticLuv(n) for n in notations]))


@pytest.fixture
def space(table) -> MunsellSpace:
    return MunsellSpace(table, warn=False)


@pytest.fixture
def table_names(table):
    return [FormatMunsell(n) for n in table.notations]


@pytest.fixture
def synthetic_luv():
    return SyntheticLuv
