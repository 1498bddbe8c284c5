# src/hopfviz/geometry/rotation.py
"""
Quaternion helpers for orienting ring primitives.

Quaternions are float64 arrays in (w, x, y, z) order.
"""

import numpy as np

__all__ = [
    "shortest_arc",
    "quat_mul",
    "quat_conj",
    "quat_rotate",
    "quat_to_matrix",
]

# Below this value of 1 + u·v the two vectors count as antiparallel
_ANTIPARALLEL_TOL = 1e-12


def _unit(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v)
    if norm == 0.0 or not np.isfinite(norm):
        raise ValueError(f"Cannot normalize vector {v}")
    return v / norm


def shortest_arc(u, v) -> np.ndarray:
    """
    Unit quaternion of the smallest rotation taking direction ``u`` onto ``v``.

    Uses q = (1 + u·v, u × v), normalized, which keeps full precision for
    small angles. When u and v are (nearly) opposite that expression vanishes,
    so the result is a half turn about an axis perpendicular to u, chosen
    from the coordinate axis least aligned with u.
    """
    u = _unit(u)
    v = _unit(v)

    w = 1.0 + float(np.dot(u, v))
    if w < _ANTIPARALLEL_TOL:
        basis = np.zeros(3)
        basis[int(np.argmin(np.abs(u)))] = 1.0
        axis = _unit(np.cross(u, basis))
        return np.array([0.0, axis[0], axis[1], axis[2]])

    xyz = np.cross(u, v)
    q = np.array([w, xyz[0], xyz[1], xyz[2]])
    return q / np.linalg.norm(q)


def quat_mul(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Hamilton product q1 * q2."""
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
    return np.array([w, x, y, z])


def quat_conj(q: np.ndarray) -> np.ndarray:
    return np.array([q[0], -q[1], -q[2], -q[3]])


def quat_rotate(q: np.ndarray, vectors) -> np.ndarray:
    """
    Rotate a vector, or an (n, 3) array of vectors, by unit quaternion ``q``.
    """
    vectors = np.asarray(vectors, dtype=np.float64)
    return vectors @ quat_to_matrix(q).T


def quat_to_matrix(q: np.ndarray) -> np.ndarray:
    """3x3 rotation matrix of a unit quaternion."""
    w, x, y, z = q
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ])
