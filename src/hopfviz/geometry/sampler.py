# src/hopfviz/geometry/sampler.py
"""
Discretized Hopf fibers.

The fiber over a base point is walked once around its great circle on S³ and
each sample is stereographically projected into R³, giving a closed polyline
of ``divisions + 1`` vertices (first and last coincide).
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

from hopfviz.core import constants
from hopfviz.geometry.hopf import hopf_params

__all__ = [
    "fiber_polyline",
    "sample_fiber",
]


# numpy error model: an exact hit on the projection pole gives inf/nan, not ZeroDivisionError
@njit(cache=True, error_model="numpy")
def _project_fiber(alpha: float, beta: float, angle_sum: float, divisions: int) -> np.ndarray:
    """Sample and project one fiber.

    Parameters
    ----------
    alpha, beta : float
        Hopf coordinates of the base point, alpha² + beta² = 1.
    angle_sum : float
        Phase atan2(-x, z) of the base point.
    divisions : int
        Number of segments; the output has ``divisions + 1`` rows.

    Returns
    -------
    out : (divisions + 1, 3) ndarray
        Projected vertices. Rows grow without bound as
        ``alpha * sin(theta) -> 1``, which is the projection pole.
    """
    out = np.empty((divisions + 1, 3), dtype=np.float64)
    for i in range(divisions + 1):
        theta = 2.0 * math.pi * i / divisions
        phi = angle_sum - theta

        proj = 0.5 / (1.0 - alpha * math.sin(theta))
        out[i, 0] = -beta * math.cos(phi) * proj
        out[i, 1] = alpha * math.cos(theta) * proj
        out[i, 2] = -beta * math.sin(phi) * proj
    return out


def _check_divisions(divisions) -> int:
    if isinstance(divisions, bool) or int(divisions) != divisions:
        raise ValueError(f"divisions must be an integer, got {divisions!r}")
    divisions = int(divisions)
    if divisions < 1:
        raise ValueError(f"divisions must be >= 1, got {divisions}")
    return divisions


def fiber_polyline(point=constants.DEFAULT_POINT, divisions: int = constants.DEFAULT_DIVISIONS) -> np.ndarray:
    """
    Closed polyline of the projected fiber over ``point``.

    Args:
        point: Base point on S² (renormalized).
        divisions (int): Number of segments, at least 1.

    Returns:
        np.ndarray: Array of shape ``(divisions + 1, 3)``; row 0 equals row -1.
    """
    divisions = _check_divisions(divisions)
    alpha, beta, angle_sum = hopf_params(point)
    return _project_fiber(alpha, beta, angle_sum, divisions)


def sample_fiber(point=constants.DEFAULT_POINT, divisions: int = constants.DEFAULT_DIVISIONS) -> np.ndarray:
    """
    Flat vertex buffer ``[x0, y0, z0, x1, ...]`` of length ``3 * (divisions + 1)``.

    Same vertices as :func:`fiber_polyline`, laid out for direct upload as a
    line-strip position attribute.
    """
    return fiber_polyline(point, divisions).reshape(-1)
