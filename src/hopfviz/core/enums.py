# hopfviz/core/enums.py

from enum import Enum

class ConstantCategory(str, Enum):
    PROJECTION = "projection"
    TESSELLATION = "tessellation"
    COLOR = "color"
    NUMERICS = "numerics"

class DemoLayout(str, Enum):
    EQUATOR = "equator"
    BANDS = "bands"

__all__ = [
    "ConstantCategory",
    "DemoLayout",
]
