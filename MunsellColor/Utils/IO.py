import logging
from functools import lru_cache
from typing import Dict, List

import numpy as np
import pandas as pd
from tqdm import tqdm
from colour.notation.datasets.munsell import MUNSELL_COLOURS_ALL, MUNSELL_COLOURS_1929, MUNSELL_COLOURS_REAL

from MunsellColor.ColorMath import Conversion
from MunsellColor.ColorMath.Notation import FormatMunsell, ParseHue
from MunsellColor.MunsellTable import MunsellTable
from MunsellColor.Utils.CustomTypes import MunsellNotation

logger = logging.getLogger(__name__)

RENOTATION_DATASETS: Dict[str, tuple] = {
    "all": MUNSELL_COLOURS_ALL,
    "1929": MUNSELL_COLOURS_1929,
    "real": MUNSELL_COLOURS_REAL,
}

NEUTRAL_VALUES = np.arange(0, 11, dtype=float)
TABLE_COLUMNS = ["name", "L", "U", "V"]


@lru_cache(maxsize=None)
def BuildRenotationTable(dataset: str = "all", displayable_only: bool = True, verbose: bool = False) -> MunsellTable:
    """
    Build the reference table from the Munsell renotation data shipped with colour-science.

    Only whole values (1 to 9) and even chromas are kept, the greys N 0/0 to N 10/0 come first.
    The table is built once per argument set and shared, it is never modified.

    Args:
        dataset (str): "all" (includes extrapolated colours), "real" or "1929"
        displayable_only (bool): keep only colours inside the sRGB gamut
        verbose (bool): show progress

    Returns:
        MunsellTable: the reference table
    """
    if dataset not in RENOTATION_DATASETS:
        raise ValueError(f"Unknown renotation dataset {dataset!r}, choose from {list(RENOTATION_DATASETS)}")

    notations: List[MunsellNotation] = []
    xyY: List[np.ndarray] = []
    seen = set()
    for (hue, value, chroma), coords in tqdm(RENOTATION_DATASETS[dataset], disable=not verbose,
                                             desc=f"Munsell {dataset}"):
        value, chroma = float(value), float(chroma)
        if not value.is_integer() or not chroma.is_integer() or chroma % 2 != 0:
            continue
        hue_number, hue_family = ParseHue(hue)
        notation = MunsellNotation(hue_number, hue_family, value, chroma)
        if notation in seen:
            logger.debug(f"Skipping duplicate renotation entry {FormatMunsell(notation)}")
            continue
        seen.add(notation)
        notations.append(notation)
        xyY.append(np.asarray(coords, dtype=float))

    xyY_array = np.array(xyY).reshape(-1, 3)
    xyY_array[:, 2] /= 100
    luv = Conversion.xyYToLuv(xyY_array)
    if displayable_only:
        mask = Conversion.IsDisplayable(Conversion.LuvToRGB(luv, clip=False))
        notations = [n for n, keep in zip(notations, mask) if keep]
        luv = luv[mask]

    greys = [MunsellNotation(0, None, v, 0) for v in NEUTRAL_VALUES]
    table = MunsellTable(greys + notations, np.vstack([Conversion.NeutralLuv(NEUTRAL_VALUES), luv]))
    logger.debug(f"Built Munsell table from {dataset!r} renotation data with {len(table)} colours")
    return table


def LoadMunsellTable(filename: str) -> MunsellTable:
    """
    Load a reference table from a CSV file with columns name, L, U, V (and optionally R, G, B).
    Args:
        filename (str): path of the CSV file
    """
    frame = pd.read_csv(filename)
    missing = [column for column in TABLE_COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(f"Table file {filename} is missing columns {missing}")
    rgb = frame[["R", "G", "B"]].to_numpy(dtype=float) if {"R", "G", "B"} <= set(frame.columns) else None
    table = MunsellTable(frame["name"].tolist(), frame[["L", "U", "V"]].to_numpy(dtype=float), rgb)
    logger.debug(f"Loaded Munsell table with {len(table)} colours from {filename}")
    return table


def SaveMunsellTable(table: MunsellTable, filename: str):
    """Write a reference table as CSV, readable by LoadMunsellTable."""
    frame = pd.DataFrame({
        "name": [FormatMunsell(n) for n in table.notations],
        "L": table.luv[:, 0], "U": table.luv[:, 1], "V": table.luv[:, 2],
        "R": table.rgb[:, 0], "G": table.rgb[:, 1], "B": table.rgb[:, 2],
    })
    frame.to_csv(filename, index=False)
