import itertools
import math
from typing import List, Tuple

from distance_matrix import DistanceMatrix


def tour_length(distances: DistanceMatrix, tour) -> float:
    """
    Length of a closed tour given as a sequence of city indices.
    The tour may or may not repeat its first city at the end.
    """
    tour = list(tour)
    if len(tour) > 1 and tour[0] == tour[-1]:
        tour = tour[:-1]
    d = distances.values
    result = 0.0
    for i in range(len(tour)):
        result += d[tour[i - 1], tour[i]]
    return float(result)


def brute_force_tsp(distances: DistanceMatrix) -> Tuple[List[int], float]:
    """
    Exact TSP by enumerating all (V-1)! orders of the non-source cities.

    Returns:
        tour: [0, ..., 0]
        length: its round-trip length
    """
    n = len(distances)
    if n == 1:
        return [0, 0], 0.0

    best_order = None
    best_length = math.inf
    for order in itertools.permutations(range(1, n)):
        length = tour_length(distances, (0,) + order)
        if length < best_length:
            best_order = order
            best_length = length
    return [0] + list(best_order) + [0], best_length
