import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def unit_square():
    return [(0, 0), (0, 1), (1, 1), (1, 0)]


@pytest.fixture
def random_points():
    def make(n, seed=0):
        rng = np.random.default_rng(seed)
        return [tuple(p) for p in rng.uniform(0, 100, size=(n, 2))]
    return make


@pytest.fixture
def points_file(tmp_path):
    def write(points, name="cities.txt", count=None):
        path = tmp_path / name
        lines = [str(len(points) if count is None else count)]
        lines += [f"{x} {y}" for x, y in points]
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return write
