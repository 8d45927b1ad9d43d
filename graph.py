import math

import networkx as nx
import numpy as np


class Edge:
    """Weighted edge v-w, ordered by weight."""

    __slots__ = ("v", "w", "weight")

    def __init__(self, v: int, w: int, weight: float):
        if v < 0:
            raise IndexError(f"vertex {v} is negative")
        if w < 0:
            raise IndexError(f"vertex {w} is negative")
        if math.isnan(weight):
            raise ValueError("edge weight is NaN")
        self.v = int(v)
        self.w = int(w)
        self.weight = float(weight)

    @property
    def either(self) -> int:
        return self.v

    def other(self, vertex: int) -> int:
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError("Illegal endpoint")

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __repr__(self):
        return f"Edge({self.v}, {self.w}, {self.weight})"

    def __str__(self):
        return f"{self.v}-{self.w} {self.weight:g}"


class EdgeWeightedGraph:
    """
    Edge-weighted graph on vertices 0..V-1 with adjacency-matrix semantics:
    at most one edge per ordered pair (v, w), the first one added is kept.

    Used for loading and printing graphs. The solver reads a DistanceMatrix
    and never looks at these weights.
    """

    def __init__(self, V: int):
        if V < 0:
            raise ValueError("Number of vertices must be nonnegative")
        self.V = V
        self.G = nx.DiGraph()
        self.G.add_nodes_from(range(V))

    @property
    def E(self) -> int:
        return self.G.number_of_edges()

    @classmethod
    def from_edge_list(cls, V: int, edge_list) -> "EdgeWeightedGraph":
        """Build from (u, v, weight) triples with 0-indexed vertices."""
        graph = cls(V)
        for u, v, weight in edge_list:
            graph.add_edge(Edge(u, v, weight))
        return graph

    @classmethod
    def from_points(cls, points) -> "EdgeWeightedGraph":
        """
        Complete display graph of 2D points, one edge per ordered pair.
        Weights are Euclidean distances rounded to integers.
        """
        coords = np.asarray(points, dtype=float)
        graph = cls(len(coords))
        for i in range(len(coords)):
            for j in range(len(coords)):
                w = math.hypot(coords[i, 0] - coords[j, 0], coords[i, 1] - coords[j, 1])
                graph.add_edge(Edge(i, j, round(w)))
        return graph

    def _validate_vertex(self, v: int):
        if v < 0 or v >= self.V:
            raise IndexError(f"vertex {v} is not between 0 and {self.V - 1}")

    def add_edge(self, e: Edge):
        v = e.either
        w = e.other(v)
        self._validate_vertex(v)
        self._validate_vertex(w)
        if not self.G.has_edge(v, w):
            self.G.add_edge(v, w, weight=e.weight, edge=e)

    def edges(self, v: int):
        """Edges leaving v, by increasing other endpoint."""
        self._validate_vertex(v)
        for w in sorted(self.G.successors(v)):
            yield self.G[v][w]["edge"]

    def all_edges(self):
        for v in range(self.V):
            yield from self.edges(v)

    def __str__(self):
        lines = [f"{self.V} {self.E}"]
        for v in range(self.V):
            lines.append(f"{v}: " + " ".join(str(e) for e in self.edges(v)))
        return "\n".join(lines)
