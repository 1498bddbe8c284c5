import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


def _random_unit_points(n, seed, max_abs_y=None):
    rng = np.random.default_rng(seed)
    pts = rng.normal(size=(n, 3))
    pts /= np.linalg.norm(pts, axis=1, keepdims=True)
    if max_abs_y is not None:
        pts = pts[np.abs(pts[:, 1]) <= max_abs_y]
    return pts


@pytest.fixture
def unit_points():
    """A fixed cloud of base points anywhere on S²."""
    return _random_unit_points(200, seed=7)


@pytest.fixture
def regular_points():
    """Base points kept away from the north pole so rings stay moderate in size."""
    pts = _random_unit_points(400, seed=11, max_abs_y=0.9)
    axes = np.array([
        [1.0, 0.0, 0.0],
        [-1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, 0.0, -1.0],
        [0.0, -1.0, 0.0],
    ])
    return np.vstack([axes, pts])
