# src/hopfviz/geometry/ring.py
"""
Closed-form ring fitting for projected Hopf fibers.

Stereographic projection maps every fiber (a great circle of S³) to a circle
in R³, or to a line when the circle passes through the projection pole. The
circle is recovered exactly from three fiber points:

* L (theta = 90°) and R (theta = -90°) lie on the xz-plane at the two
  extremes of the projection factor 1 / (1 ∓ alpha), so they are the ends of
  a diameter;
* O (theta = 0°) is any third point in the circle's plane.

No iterative fitting is involved. The fit breaks down only when alpha is
within POLE_EPSILON of ±1 (base point at the north pole), where L runs off to
infinity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from hopfviz.core import constants
from hopfviz.core.errors import DegenerateFiberError
from hopfviz.core.logging import logger
from hopfviz.geometry.hopf import hopf_params, unit_point_tuple
from hopfviz.geometry.rotation import quat_rotate, shortest_arc

__all__ = [
    "FiberRing",
    "fit_fiber_ring",
    "ring_segments",
    "ring_vertices",
]


@dataclass(frozen=True)
class FiberRing:
    """A projected fiber as an oriented circle.

    ``orientation`` is the (w, x, y, z) quaternion rotating REFERENCE_AXIS
    onto ``normal``; a ring primitive built in the xy-plane, rotated by it
    and translated to ``center`` reproduces the fiber.
    """
    center: np.ndarray
    radius: float
    normal: np.ndarray
    orientation: np.ndarray
    segments: int

    def as_dict(self) -> dict:
        return {
            "center": [float(c) for c in self.center],
            "radius": float(self.radius),
            "normal": [float(c) for c in self.normal],
            "orientation": [float(c) for c in self.orientation],
            "segments": int(self.segments),
        }


def ring_segments(radius: float) -> int:
    """Tessellation hint: 64 segments per unit radius, clamped to [16, 256]."""
    segments = math.ceil(radius * constants.SEGMENTS_PER_UNIT)
    return int(min(max(constants.MIN_SEGMENTS, segments), constants.MAX_SEGMENTS))


def fit_fiber_ring(point) -> FiberRing:
    """
    Exact circle traced by the projected fiber over ``point``.

    Raises:
        DegenerateFiberError: If the base point is within POLE_EPSILON (in
            alpha) of a pole, or the computed geometry is not finite.
        InvalidPointError: If ``point`` cannot be normalized.
    """
    alpha, beta, angle_sum = hopf_params(point)
    eps = constants.POLE_EPSILON
    if abs(1.0 - alpha) < eps or abs(1.0 + alpha) < eps:
        logger.debug(f"Rejecting ring fit at alpha={alpha:.12f}")
        raise DegenerateFiberError(unit_point_tuple(point), alpha)

    scale = constants.SCALE
    sin_s = math.sin(angle_sum)
    cos_s = math.cos(angle_sum)

    left = np.array([-beta * sin_s, 0.0, beta * cos_s]) * (scale / (1.0 - alpha))
    right = np.array([beta * sin_s, 0.0, -beta * cos_s]) * (scale / (1.0 + alpha))
    other = np.array([-beta * cos_s, alpha, -beta * sin_s]) * scale

    center = 0.5 * (left + right)
    to_right = right - center
    to_other = other - center

    radius = float(np.linalg.norm(to_right))
    normal = np.cross(to_other, to_right)
    normal_len = float(np.linalg.norm(normal))

    if not (np.all(np.isfinite(center)) and math.isfinite(radius) and radius > 0.0
            and math.isfinite(normal_len) and normal_len > 0.0):
        raise DegenerateFiberError(
            unit_point_tuple(point), alpha,
            message=f"Ring fit produced no finite circle (radius={radius}, |n|={normal_len})",
        )
    normal = normal / normal_len

    return FiberRing(
        center=center,
        radius=radius,
        normal=normal,
        orientation=shortest_arc(constants.REFERENCE_AXIS, normal),
        segments=ring_segments(radius),
    )


def ring_vertices(ring: FiberRing, segments: Optional[int] = None) -> np.ndarray:
    """
    Tessellate a ring into a closed polyline of ``segments + 1`` vertices.

    The circle is laid out in the xy-plane, rotated by ``ring.orientation``
    and moved to ``ring.center``. Defaults to the ring's own segment hint.
    """
    n = ring.segments if segments is None else int(segments)
    if n < 3:
        raise ValueError(f"A ring needs at least 3 segments, got {n}")
    t = np.linspace(0.0, 2.0 * np.pi, n + 1)
    local = np.stack([np.cos(t), np.sin(t), np.zeros_like(t)], axis=-1) * ring.radius
    return quat_rotate(ring.orientation, local) + ring.center
