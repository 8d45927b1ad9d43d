"""
Shortest round trip through a set of cities.

Usage:
    python tsp.py datafile.txt
    python tsp.py inputs/

Output:
    Length of the shortest round trip tour visiting every city precisely
    once, followed by the number of milliseconds elapsed.
"""
import argparse
import logging
import math
import sys
import time

from brute_force import brute_force_tsp
from distance_matrix import DistanceMatrix
from graph import EdgeWeightedGraph
from held_karp import HeldKarpEngine
from tsp_utils import (draw_graph, input_file_to_graph, input_file_to_points, is_valid_input,
                       write_result_to_out)
from utils import BRUTE_FORCE_LIMIT, input_path_to_file_paths

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Exact TSP tour length by Held-Karp dynamic programming")
    parser.add_argument("path", help="points file, or a directory of points files")
    parser.add_argument("--edges", metavar="FILE", help="edge list file to load and print as a graph")
    parser.add_argument("--brute-force", action="store_true",
                        help=f"cross-check against full enumeration (at most {BRUTE_FORCE_LIMIT} cities)")
    parser.add_argument("--draw", action="store_true", help="plot the cities and their display graph")
    parser.add_argument("--write", action="store_true", help="write the result to the outputs directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def solve_file(file, args) -> bool:
    """Solve one points file and print its result. Returns False on invalid input or a failed cross-check."""
    is_valid, message = is_valid_input(file)
    if not is_valid:
        logger.error("%s: invalid input: %s", file, message.strip().replace("\n", "; "))
        return False

    start = time.perf_counter()
    points = input_file_to_points(file)
    distances = DistanceMatrix.from_points(points)
    length = HeldKarpEngine(distances).solve()
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    print(length)
    print(elapsed_ms)

    ok = True
    if args.brute_force:
        if len(points) > BRUTE_FORCE_LIMIT:
            logger.warning("%s: %d cities, skipping brute force check", file, len(points))
        else:
            tour, expected = brute_force_tsp(distances)
            if not math.isclose(length, expected, rel_tol=1e-9, abs_tol=1e-9):
                logger.error("%s: Held-Karp gave %r, enumeration gave %r via %s", file, length, expected, tour)
                ok = False
            else:
                logger.info("%s: brute force agrees, tour %s", file, tour)

    if args.write:
        out_file = write_result_to_out(length, elapsed_ms, file)
        logger.info("Wrote %s", out_file)

    if args.draw:
        draw_graph(points, EdgeWeightedGraph.from_points(points))

    return ok


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')

    status = 0
    if args.edges:
        try:
            print(input_file_to_graph(args.edges))
        except (OSError, ValueError, IndexError) as e:
            logger.error("%s: %s", args.edges, e)
            status = 1

    for file in input_path_to_file_paths(args.path):
        try:
            if not solve_file(file, args):
                status = 1
        except (OSError, ValueError) as e:
            logger.error("%s: %s", file, e)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
