import math
import os

import matplotlib.pyplot as plt
import networkx as nx

from graph import EdgeWeightedGraph
from utils import *


def points_parser(input_data):
    """
    Parsing a points file:
        V
        x y      (V lines)
    """
    if not input_data or len(input_data[0]) != 1:
        raise ValueError("first line must hold the number of cities")
    number_of_cities = int(input_data[0][0])
    if number_of_cities < 1:
        raise ValueError("number of cities must be at least 1")
    lines = input_data[1:]
    if len(lines) < number_of_cities:
        raise ValueError(f"expected {number_of_cities} points, found {len(lines)}")
    points = []
    for line in lines[:number_of_cities]:
        if len(line) != 2:
            raise ValueError(f"point line must hold two coordinates: {' '.join(line)}")
        x, y = float(line[0]), float(line[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"point coordinates must be finite: {x} {y}")
        points.append((x, y))
    return number_of_cities, points


def edge_list_parser(input_data):
    """
    Parsing an edge list file:
        V E
        u v weight   (E lines, vertices 1-indexed)
    """
    if not input_data or len(input_data[0]) != 2:
        raise ValueError("first line must hold the number of vertices and edges")
    number_of_vertices, number_of_edges = int(input_data[0][0]), int(input_data[0][1])
    lines = input_data[1:]
    if len(lines) < number_of_edges:
        raise ValueError(f"expected {number_of_edges} edges, found {len(lines)}")
    edge_list = []
    for line in lines[:number_of_edges]:
        if len(line) != 3:
            raise ValueError(f"edge line must hold u v weight: {' '.join(line)}")
        u, v, w = int(line[0]) - 1, int(line[1]) - 1, float(line[2])
        if not math.isfinite(w) or w < 0:
            raise ValueError(f"edge weight must be finite and non-negative: {w}")
        edge_list.append((u, v, w))
    return number_of_vertices, edge_list


def input_file_to_points(file):
    """
    Read the cities of a TSP instance from a points file.

    Returns:
        list: V (x, y) tuples, city 0 first.
    """
    _, points = points_parser(read_file(file))
    return points


def input_file_to_graph(file):
    """
    Read an edge list file into an EdgeWeightedGraph.
    Raises IndexError when a vertex label is outside 1..V.
    """
    number_of_vertices, edge_list = edge_list_parser(read_file(file))
    return EdgeWeightedGraph.from_edge_list(number_of_vertices, edge_list)


def is_valid_input(file: str) -> tuple:
    """
    Check if the given points file is valid.
    Coincident points are allowed and the city count is not capped here.

    Parameters:
        file (str): Path to the input file.

    Returns:
        tuple: A tuple containing:
            - is_valid (bool): Whether the input file is valid.
            - message (str): A log message providing details about the validation result.
    """
    is_valid = True
    message = ''

    try:
        input_data = read_file(file)
    except OSError as e:
        return False, f"Cannot read file: {e}\n"

    try:
        number_of_cities, _ = points_parser(input_data)
    except ValueError as e:
        return False, f"Cannot parse data: {e}\n"

    if len(input_data) - 1 != number_of_cities:
        is_valid = False
        message += 'number of points not equal to number of cities\n'

    return is_valid, message


def write_result_to_out(length, elapsed_ms, in_file):
    out_dir = os.path.join(os.getcwd(), OUTPUT_FILE_DIRECTORY)
    if not os.path.exists(out_dir):
        os.makedirs(out_dir)
    file_name = os.path.splitext(os.path.basename(in_file))[0] + OUTPUT_FILE_EXTENSION
    out_file_path = os.path.join(out_dir, file_name)
    data = [str(round(length, MAXIMUM_FLOAT_DIGITS)), str(round(elapsed_ms, MAXIMUM_FLOAT_DIGITS))]
    write_to_file(out_file_path, '\n'.join(data) + '\n')
    return out_file_path


def draw_graph(points, graph=None, with_weight=True):
    """Draw the cities at their coordinates, with the display graph's edges if given"""
    G = nx.Graph()
    G.add_nodes_from(range(len(points)))
    if graph is not None:
        for e in graph.all_edges():
            if e.v != e.w:
                G.add_edge(e.v, e.w, weight=e.weight)
    pos = {i: (x, y) for i, (x, y) in enumerate(points)}
    nx.draw(G, pos, with_labels=True, node_color='skyblue', node_size=600, font_size=10)

    if with_weight and graph is not None:
        # Draw edge labels
        edge_labels = nx.get_edge_attributes(G, 'weight')
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels)

    plt.show()
