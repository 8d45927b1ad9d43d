import logging
import math
from typing import List, Optional, Tuple

import networkx as nx
import numpy as np

from distance_matrix import DistanceMatrix
from subset_index import SubsetIndex, combinations, full_mask, members, without_city
from utils import MAXIMUM_EXACT_CITIES

logger = logging.getLogger(__name__)


class InvariantViolation(RuntimeError):
    """A subset/rank lookup fell outside the tables built for it."""


# =========================
# DP layers
# =========================

class Layer:
    """
    Shortest-path table for one subset cardinality.

    Row = rank of the subset within its cardinality group.
    Column = rank of the destination among the subset's members, lowest bit first.
    Unwritten cells hold NaN.
    """

    __slots__ = ("cardinality", "table")

    def __init__(self, cardinality: int, rows: int):
        self.cardinality = cardinality
        self.table = np.full((rows, cardinality), np.nan, dtype=float)

    @property
    def rows(self) -> int:
        return self.table.shape[0]

    @property
    def cells(self) -> int:
        return self.table.size

    def read(self, row: int, col: int) -> float:
        if not (0 <= row < self.table.shape[0] and 0 <= col < self.cardinality):
            raise InvariantViolation(
                f"cell ({row}, {col}) outside layer {self.cardinality} of shape {self.table.shape}"
            )
        return self.table[row, col]

    def write(self, row: int, col: int, value: float):
        if not np.isnan(self.table[row, col]):
            raise InvariantViolation(f"cell ({row}, {col}) of layer {self.cardinality} written twice")
        self.table[row, col] = value

    def is_complete(self) -> bool:
        return not np.isnan(self.table).any()


class LayerBuffer:
    """
    Rolling two-generation store of DP layers.

    advance() drops the previous layer, demotes the current one and
    allocates a fresh current layer, so at most two layers are alive.
    """

    def __init__(self):
        self.current: Optional[Layer] = None
        self.previous: Optional[Layer] = None
        self.allocations: List[Tuple[int, int, int]] = []  # (cardinality, rows, cells)
        self.peak_live_layers = 0

    @property
    def live_layers(self) -> int:
        return (self.current is not None) + (self.previous is not None)

    def advance(self, cardinality: int, rows: int) -> Layer:
        self.previous = self.current
        self.current = Layer(cardinality, rows)
        self.allocations.append((cardinality, rows, self.current.cells))
        self.peak_live_layers = max(self.peak_live_layers, self.live_layers)
        return self.current


# =========================
# Solver
# =========================

class HeldKarpEngine:
    """
    Exact TSP tour length by the Held-Karp dynamic program.

    City 0 is the fixed origin. cost(x, j) is the shortest path leaving the
    origin, visiting exactly the non-source cities in mask x, and ending at
    city j + 1. Cardinalities are processed in increasing order and only
    the two most recent layers are kept.
    """

    def __init__(self, distances: DistanceMatrix, index: Optional[SubsetIndex] = None):
        self.distances = distances
        self.n_cities = len(distances)
        if index is None:
            index = SubsetIndex.for_cities(self.n_cities)
        if index.n_cities != self.n_cities:
            raise ValueError(
                f"subset index built for {index.n_cities} cities, matrix has {self.n_cities}"
            )
        self.index = index
        self.buffer: Optional[LayerBuffer] = None

    def solve(self) -> float:
        V = self.n_cities
        if V > MAXIMUM_EXACT_CITIES:
            logger.warning("Solving %d cities exactly; this needs O(2^%d) memory", V, V - 1)
        logger.debug("Held-Karp on %d cities, %d layers", V, V - 1)

        self.buffer = LayerBuffer()
        if V == 1:
            return 0.0

        d = self.distances.values
        n = V - 1

        # paths from the source to each single city; singleton {j} has rank j
        base = self.buffer.advance(1, combinations(n, 1))
        for j in range(n):
            base.write(self.index.rank(1 << j), 0, d[0, j + 1])

        for m in range(2, n + 1):
            self._check_complete(self.buffer.current)
            layer = self.buffer.advance(m, combinations(n, m))
            logger.debug("Layer %d: %d subsets x %d destinations", m, layer.rows, m)
            self._fill_layer(layer, self.buffer.previous, d)

        last = self.buffer.current
        self._check_complete(last)
        if self.index.rank(full_mask(n)) != 0:
            raise InvariantViolation("full subset is not alone in its cardinality group")

        # close the tour back to the source
        best = math.inf
        for j in range(n):
            best = min(best, last.read(0, j) + d[j + 1, 0])

        logger.debug("Optimal tour length %r", float(best))
        return float(best)

    def _fill_layer(self, layer: Layer, previous: Layer, d: np.ndarray):
        group = self.index.group(layer.cardinality)
        if len(group) != layer.rows:
            raise InvariantViolation(
                f"group {layer.cardinality} has {len(group)} subsets, layer has {layer.rows} rows"
            )
        for row, x in enumerate(group):
            x = int(x)
            in_x = list(members(x))
            for col, j in enumerate(in_x):
                prev_row = self.index.rank(without_city(x, j))
                z = math.inf
                countk = 0
                for k in in_x:
                    if k == j:
                        continue
                    # countk is the rank of k among x without j
                    z = min(z, previous.read(prev_row, countk) + d[k + 1, j + 1])
                    countk += 1
                layer.write(row, col, z)

    @staticmethod
    def _check_complete(layer: Layer):
        if not layer.is_complete():
            raise InvariantViolation(f"layer {layer.cardinality} has unwritten cells")


def held_karp(points) -> float:
    """Optimal round-trip length through 2D points."""
    return HeldKarpEngine(DistanceMatrix.from_points(points)).solve()


def tsp_dp(G: nx.Graph) -> float:
    """
    Optimal tour length of a complete weighted graph.

    Input requirement:
      - G is COMPLETE
      - nodes are 0..n-1, node 0 is the starting point
    """
    if 0 not in G:
        raise ValueError("Graph must contain node 0 for the starting point.")
    return HeldKarpEngine(DistanceMatrix.from_graph(G)).solve()
