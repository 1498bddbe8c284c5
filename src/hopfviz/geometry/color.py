# src/hopfviz/geometry/color.py
"""
Deterministic base-point coloring.

Hue follows the azimuth of the base point, lightness its height. The extra
``2 * lightness`` in the hue makes fibers at different heights but equal
azimuth land on different hues.
"""

from __future__ import annotations

import colorsys
import math
from typing import NamedTuple, Tuple

from hopfviz.core import constants
from hopfviz.geometry.hopf import as_unit_point, azimuth

__all__ = [
    "HSLColor",
    "map_color",
]


class HSLColor(NamedTuple):
    h: float
    s: float
    l: float

    def to_rgb(self) -> Tuple[float, float, float]:
        """Standard HSL -> RGB, components in [0, 1]."""
        # colorsys orders the arguments hue, lightness, saturation
        return colorsys.hls_to_rgb(self.h, self.l, self.s)

    def to_hex(self) -> str:
        r, g, b = self.to_rgb()
        return "#{:02x}{:02x}{:02x}".format(*(int(round(c * 255)) for c in (r, g, b)))


def _frac(x: float) -> float:
    f = x - math.floor(x)
    # x just below an integer can round up to exactly 1.0
    return 0.0 if f >= 1.0 else f


def map_color(point) -> HSLColor:
    """Color of the fiber over ``point``: hue in [0, 1), s = 0.7, l in [0.35, 0.65]."""
    x, y, z = as_unit_point(point)
    lightness = constants.LIGHTNESS_GAIN * float(y) + constants.LIGHTNESS_OFFSET
    lightness = min(max(lightness, 0.35), 0.65)
    hue = _frac(azimuth(float(x), float(z)) / (2.0 * math.pi) + 0.5 + 2.0 * lightness)
    return HSLColor(hue, constants.SATURATION, lightness)
