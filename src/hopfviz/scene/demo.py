# src/hopfviz/scene/demo.py
"""Base-point layouts for demonstration figures."""

from typing import List, Tuple

import numpy as np

from hopfviz.core.enums import DemoLayout

__all__ = [
    "SOUTHERN_BAND_Y",
    "demo_points",
]

Vec3 = Tuple[float, float, float]

# Height of the second band in the BANDS layout (latitude -60°)
SOUTHERN_BAND_Y = -np.sqrt(3.0) / 2.0


def _circle(count: int, y: float) -> List[Vec3]:
    r = np.sqrt(1.0 - y * y)
    theta = 2.0 * np.pi * np.arange(count) / count
    return [(float(r * np.cos(t)), float(y), float(r * np.sin(t))) for t in theta]


def demo_points(layout=DemoLayout.EQUATOR, count: int = 32) -> List[Vec3]:
    """
    Base points for a demo scene.

    EQUATOR gives ``count`` evenly spaced points on the equator, whose fibers
    form nested linked rings (a torus). BANDS interleaves the equator with a
    second ring at latitude -60°, giving two linked tori.
    """
    layout = DemoLayout(layout)
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    equator = _circle(count, 0.0)
    if layout is DemoLayout.EQUATOR:
        return equator

    band = _circle(count, SOUTHERN_BAND_Y)
    points: List[Vec3] = []
    for a, b in zip(equator, band):
        points.extend((a, b))
    return points
