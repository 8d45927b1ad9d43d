import math

import networkx as nx
import numpy as np
import pytest

from distance_matrix import DistanceMatrix


def test_from_points_is_exact_euclidean():
    D = DistanceMatrix.from_points([(0, 0), (3, 4), (1, 1)])
    assert len(D) == 3
    assert D.distance(0, 1) == 5.0
    assert D.distance(0, 2) == pytest.approx(math.sqrt(2))
    assert D.distance(1, 2) == pytest.approx(math.hypot(2, 3))


def test_symmetric_with_zero_diagonal(random_points):
    D = DistanceMatrix.from_points(random_points(7))
    assert np.array_equal(D.values, D.values.T)
    assert np.all(np.diag(D.values) == 0)


def test_values_are_read_only():
    D = DistanceMatrix.from_points([(0, 0), (1, 0)])
    with pytest.raises(ValueError):
        D.values[0, 1] = 3.0


def test_single_point():
    D = DistanceMatrix.from_points([(2.5, -1)])
    assert len(D) == 1
    assert D.distance(0, 0) == 0.0


@pytest.mark.parametrize("points", [
    [],
    [(0, 0, 0)],
    [(0, float("nan"))],
    [(0, 0), (float("inf"), 1)],
])
def test_from_points_rejects_malformed_input(points):
    with pytest.raises(ValueError):
        DistanceMatrix.from_points(points)


@pytest.mark.parametrize("matrix", [
    [[0, 1, 2], [1, 0, 3]],
    [[0, -1], [-1, 0]],
    [[0, float("inf")], [float("inf"), 0]],
    [[1, 1], [1, 0]],
    [[0, 1], [2, 0]],
])
def test_from_array_rejects_invalid_matrix(matrix):
    with pytest.raises(ValueError):
        DistanceMatrix.from_array(matrix)


def test_from_graph_reads_weights():
    G = nx.Graph()
    G.add_weighted_edges_from([(0, 1, 2.0), (1, 2, 3.0), (0, 2, 4.0)])
    D = DistanceMatrix.from_graph(G)
    assert D.distance(2, 0) == 4.0
    assert D.distance(1, 2) == 3.0


def test_from_graph_requires_complete_graph():
    G = nx.Graph()
    G.add_weighted_edges_from([(0, 1, 2.0), (1, 2, 3.0)])
    with pytest.raises(ValueError, match="not complete"):
        DistanceMatrix.from_graph(G)


def test_rounded_does_not_touch_values():
    D = DistanceMatrix.from_points([(0, 0), (1, 1)])
    assert D.rounded()[0, 1] == 1.0
    assert D.distance(0, 1) == pytest.approx(math.sqrt(2))


def test_from_array_rejects_near_symmetric_matrix():
    with pytest.raises(ValueError, match="symmetric"):
        DistanceMatrix.from_array([[0, 1e6], [1e6 + 5, 0]])


def test_from_graph_rejects_conflicting_directions():
    G = nx.DiGraph()
    G.add_weighted_edges_from([(0, 1, 2.0), (1, 0, 2.5)])
    with pytest.raises(ValueError, match="different weights"):
        DistanceMatrix.from_graph(G)


def test_from_graph_accepts_matching_directions():
    G = nx.DiGraph()
    G.add_weighted_edges_from([(0, 1, 2.0), (1, 0, 2.0)])
    assert DistanceMatrix.from_graph(G).distance(1, 0) == 2.0
