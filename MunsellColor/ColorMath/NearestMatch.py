import numpy as np
import numpy.typing as npt
from scipy.spatial import cKDTree

DEFAULT_TIE_TOLERANCE = 1e-9


def _AsQuery(coords) -> npt.NDArray:
    coords = np.atleast_2d(np.asarray(coords, dtype=float))
    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError(f"Expected Nx3 LUV coordinates, got shape {coords.shape}")
    if not np.all(np.isfinite(coords)):
        raise ValueError("LUV coordinates must be finite")
    return coords


def FindNearestExhaustive(points: npt.NDArray, coord: npt.NDArray,
                          tie_tolerance: float = DEFAULT_TIE_TOLERANCE) -> int:
    """
    Index of the point closest to `coord` by scanning every point.
    Equidistant points resolve to the lowest index.

    :param points: Nx3 Array of LUV coordinates
    :param coord: LUV coordinate to match
    :param tie_tolerance: distances within this (relative to the minimum) count as equal
    """
    distances = np.linalg.norm(np.asarray(points, dtype=float) - _AsQuery(coord)[0], axis=1)
    best = distances.min()
    return int(np.flatnonzero(distances <= best + tie_tolerance * max(1.0, best))[0])


class NearestMatcher:
    """
    Nearest neighbour search in LUV space over a fixed set of points.

    The k-d tree is built once and only read afterwards, so a matcher can be shared freely.
    Results are the same as FindNearestExhaustive, including the lowest index tie-break.
    """

    def __init__(self, points: npt.NDArray, tie_tolerance: float = DEFAULT_TIE_TOLERANCE):
        points = np.array(points, dtype=float)
        if points.ndim != 2 or points.shape[1] != 3 or points.shape[0] == 0:
            raise ValueError(f"Expected a non-empty Nx3 array of LUV coordinates, got shape {points.shape}")
        points.setflags(write=False)
        self.points = points
        self.tie_tolerance = tie_tolerance
        self.tree = cKDTree(points)

    def __len__(self):
        return self.points.shape[0]

    def query(self, coords: npt.NDArray) -> npt.NDArray:
        """
        Indices of the nearest points for an Nx3 (or 3) array of coordinates.

        :param coords: LUV coordinates to match
        """
        coords = _AsQuery(coords)
        distances, indices = self.tree.query(coords, k=1)
        radii = distances + self.tie_tolerance * np.maximum(1.0, distances)
        # the tree returns any of several equidistant points, gather them all and keep the first
        candidates = self.tree.query_ball_point(coords, radii)
        return np.array([min(found) if len(found) else index for found, index in zip(candidates, indices)],
                        dtype=int)

    def nearest(self, coord: npt.NDArray) -> int:
        """Index of the nearest point to a single coordinate."""
        return int(self.query(coord)[0])
