"""
hopfviz: geometry of the Hopf fibration for interactive visualization.

Exports:
    - sample_fiber / fiber_polyline: Discretized, projected fiber over a base point.
    - fit_fiber_ring / ring_vertices: Exact circle traced by a fiber.
    - map_color: Deterministic base-point coloring.
    - DegenerateFiberError, InvalidPointError: Package errors.
"""

from hopfviz.core.errors import DegenerateFiberError, HopfvizError, InvalidPointError
from hopfviz.geometry.color import HSLColor, map_color
from hopfviz.geometry.ring import FiberRing, fit_fiber_ring, ring_vertices
from hopfviz.geometry.sampler import fiber_polyline, sample_fiber

__version__ = "0.3.0"

__all__ = [
    "DegenerateFiberError",
    "FiberRing",
    "HSLColor",
    "HopfvizError",
    "InvalidPointError",
    "fiber_polyline",
    "fit_fiber_ring",
    "map_color",
    "ring_vertices",
    "sample_fiber",
]
