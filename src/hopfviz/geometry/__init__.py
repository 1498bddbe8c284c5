from hopfviz.geometry.color import HSLColor, map_color
from hopfviz.geometry.hopf import HopfParams, as_unit_point, azimuth, hopf_params
from hopfviz.geometry.ring import FiberRing, fit_fiber_ring, ring_segments, ring_vertices
from hopfviz.geometry.rotation import quat_rotate, shortest_arc
from hopfviz.geometry.sampler import fiber_polyline, sample_fiber

__all__ = [
    "FiberRing",
    "HSLColor",
    "HopfParams",
    "as_unit_point",
    "azimuth",
    "fiber_polyline",
    "fit_fiber_ring",
    "hopf_params",
    "map_color",
    "quat_rotate",
    "ring_segments",
    "ring_vertices",
    "sample_fiber",
    "shortest_arc",
]
