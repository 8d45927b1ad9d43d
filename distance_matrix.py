import logging

import networkx as nx
import numpy as np

logger = logging.getLogger(__name__)


class DistanceMatrix:
    """
    Symmetric V x V matrix of non-negative distances between cities.

    The underlying array is float64 and read-only. Entry (i, j) is the exact
    distance used by the solver; display rounding lives in `rounded()` and
    never feeds back into `values`.
    """

    __slots__ = ("values",)

    def __init__(self, values: np.ndarray):
        values = np.array(values, dtype=float)
        _check_matrix(values)
        values.setflags(write=False)
        self.values = values

    @classmethod
    def from_points(cls, points) -> "DistanceMatrix":
        """
        Build the Euclidean distance matrix of 2D points.

        Parameters:
            points: sequence of V (x, y) pairs, V >= 1.

        Returns:
            DistanceMatrix with unrounded pairwise distances.
        """
        coords = np.asarray(points, dtype=float)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("points must be a sequence of (x, y) pairs")
        if coords.shape[0] < 1:
            raise ValueError("at least one point is required")
        if not np.all(np.isfinite(coords)):
            raise ValueError("point coordinates must be finite")

        diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
        values = np.hypot(diff[..., 0], diff[..., 1])
        logger.debug("Built %dx%d distance matrix from points", len(coords), len(coords))
        return cls(values)

    @classmethod
    def from_array(cls, matrix) -> "DistanceMatrix":
        return cls(matrix)

    @classmethod
    def from_graph(cls, G: nx.Graph) -> "DistanceMatrix":
        """
        Build the matrix from a complete graph whose nodes are 0..V-1.
        Edge weights are read from the 'weight' attribute.
        """
        nodes = sorted(G.nodes())
        if nodes != list(range(len(nodes))):
            raise ValueError("graph nodes must be indexed from 0 to n-1")
        n = len(nodes)
        values = np.zeros((n, n), dtype=float)
        for i in range(n):
            for j in range(i + 1, n):
                weights = [G[u][v].get("weight", 1.0) for u, v in ((i, j), (j, i)) if G.has_edge(u, v)]
                if not weights:
                    raise ValueError(f"graph is not complete: edge {i}-{j} missing")
                if len(weights) == 2 and weights[0] != weights[1]:
                    raise ValueError(f"edge {i}-{j} has different weights in each direction")
                weight = weights[0]
                values[i, j] = values[j, i] = float(weight)
        return cls(values)

    def __len__(self):
        return self.values.shape[0]

    def distance(self, i: int, j: int) -> float:
        return float(self.values[i, j])

    def rounded(self) -> np.ndarray:
        """Integer-valued display weights (round half to even)."""
        return np.round(self.values)


def _check_matrix(values: np.ndarray):
    if values.ndim != 2 or values.shape[0] != values.shape[1]:
        raise ValueError("distance matrix must be square")
    if values.shape[0] < 1:
        raise ValueError("distance matrix must have at least one city")
    if not np.all(np.isfinite(values)):
        raise ValueError("distances must be finite")
    if np.any(values < 0):
        raise ValueError("distances must be non-negative")
    if np.any(np.diag(values) != 0):
        raise ValueError("distance from a city to itself must be 0")
    if not np.array_equal(values, values.T):
        raise ValueError("distance matrix must be symmetric")
