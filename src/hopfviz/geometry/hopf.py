# src/hopfviz/geometry/hopf.py
"""
Shared Hopf-map quantities for a base point on S².

A base point p = (x, y, z) lifts to the fiber

    (a, b, c, d) = (alpha sin t, -beta cos(s - t), alpha cos t, -beta sin(s - t))

on S³, with alpha = sqrt((1 + y) / 2), beta = sqrt((1 - y) / 2) and the phase
s = atan2(-x, z). Every component (sampler, ring fitter, color mapper) starts
from these numbers.

Input policy: points are renormalized onto S². Zero-length, non-finite or
wrongly shaped inputs raise InvalidPointError. The same policy applies to all
public operations.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

import numpy as np

from hopfviz.core.errors import InvalidPointError
from hopfviz.core.logging import logger

__all__ = [
    "HopfParams",
    "as_unit_point",
    "azimuth",
    "hopf_params",
    "unit_point_tuple",
]

# Renormalization is silent below this deviation from unit length
_UNIT_TOLERANCE = 1e-9


class HopfParams(NamedTuple):
    alpha: float
    beta: float
    angle_sum: float


def as_unit_point(point) -> np.ndarray:
    """
    Return ``point`` as a float64 unit 3-vector.

    Raises:
        InvalidPointError: If the input is not a finite, non-zero 3-vector.
    """
    try:
        p = np.asarray(point, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidPointError(f"Base point must be a 3-vector, got {point!r}") from exc
    if p.shape != (3,):
        raise InvalidPointError(f"Base point must have 3 components, got {p.shape[0]}")
    if not np.all(np.isfinite(p)):
        raise InvalidPointError(f"Base point must be finite, got {tuple(p)}")

    norm = math.sqrt(float(np.dot(p, p)))
    if norm == 0.0:
        raise InvalidPointError("Base point must be non-zero")
    if abs(norm - 1.0) > _UNIT_TOLERANCE:
        logger.debug(f"Renormalizing base point {tuple(p)} (|p|={norm:.6g})")
    return p / norm


def azimuth(x: float, z: float) -> float:
    """
    atan2(x, z) with a fixed value at the poles.

    When both arguments are zero the result is 0.0, whatever the signs of
    the zeros. IEEE atan2 would return one of ±0 or ±pi there.
    """
    if x == 0.0 and z == 0.0:
        return 0.0
    return math.atan2(x, z)


def hopf_params(point) -> HopfParams:
    """Compute (alpha, beta, angle_sum) for a base point."""
    x, y, z = as_unit_point(point)
    # Clamp against rounding so both radicands stay non-negative
    y = min(1.0, max(-1.0, float(y)))
    alpha = math.sqrt((1.0 + y) / 2.0)
    beta = math.sqrt((1.0 - y) / 2.0)
    return HopfParams(alpha, beta, azimuth(-float(x), float(z)))


def unit_point_tuple(point) -> Tuple[float, float, float]:
    x, y, z = as_unit_point(point)
    return (float(x), float(y), float(z))
