"""
Numerical constants for the hopfviz geometry pipeline.

This file is the single source of truth for every tolerance, scale and
tessellation bound used by the sampler, the ring fitter and the color mapper.

Exports:
    - ConstantInfo: Pydantic model for constant metadata.
    - CONSTANTS: The canonical list of all constants.
    - CONSTANTS_DICT: Dictionary mapping constant names to ConstantInfo objects.
    - VALUES: Dictionary mapping names to numeric values.
    - All constant names available as module attributes.
"""

from typing import List, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from hopfviz.core.enums import ConstantCategory

__all__ = [
    "ConstantInfo",
    "CONSTANTS",
    "CONSTANTS_DICT",
    "VALUES",
    "get_constants_by_category",
    "SCALE",
    "POLE_EPSILON",
    "DEFAULT_DIVISIONS",
    "DEFAULT_POINT",
    "SEGMENTS_PER_UNIT",
    "MIN_SEGMENTS",
    "MAX_SEGMENTS",
    "SATURATION",
    "LIGHTNESS_GAIN",
    "LIGHTNESS_OFFSET",
    "REFERENCE_AXIS",
    "CLOSURE_TOLERANCE",
]


class ConstantInfo(BaseModel):
    """Metadata and value for a single constant."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical name (used as key)")
    value: float = Field(..., description="Numeric value")
    description: str = Field("", description="What the value controls")
    category: ConstantCategory = Field(..., description="Category/role")
    latex: Optional[str] = Field(None, description="LaTeX representation")


CONSTANTS: List[ConstantInfo] = [
    ConstantInfo(
        name="SCALE",
        value=0.5,
        description="Stereographic projection scale; projected fibers pass through the unit 2-sphere at half size",
        category=ConstantCategory.PROJECTION,
        latex=r"s",
    ),
    ConstantInfo(
        name="POLE_EPSILON",
        value=1e-6,
        description="Ring fitting is refused when |1 - alpha| or |1 + alpha| falls below this",
        category=ConstantCategory.NUMERICS,
        latex=r"\varepsilon",
    ),
    ConstantInfo(
        name="DEFAULT_DIVISIONS",
        value=256,
        description="Default number of polyline segments per sampled fiber",
        category=ConstantCategory.TESSELLATION,
    ),
    ConstantInfo(
        name="SEGMENTS_PER_UNIT",
        value=64,
        description="Ring tessellation density: segments per unit of radius",
        category=ConstantCategory.TESSELLATION,
    ),
    ConstantInfo(
        name="MIN_SEGMENTS",
        value=16,
        description="Lower bound on ring tessellation",
        category=ConstantCategory.TESSELLATION,
    ),
    ConstantInfo(
        name="MAX_SEGMENTS",
        value=256,
        description="Upper bound on ring tessellation",
        category=ConstantCategory.TESSELLATION,
    ),
    ConstantInfo(
        name="SATURATION",
        value=0.7,
        description="Fixed HSL saturation of fiber colors",
        category=ConstantCategory.COLOR,
    ),
    ConstantInfo(
        name="LIGHTNESS_GAIN",
        value=0.15,
        description="Lightness slope with respect to the base point's y coordinate",
        category=ConstantCategory.COLOR,
    ),
    ConstantInfo(
        name="LIGHTNESS_OFFSET",
        value=0.5,
        description="Lightness at the equator",
        category=ConstantCategory.COLOR,
    ),
    ConstantInfo(
        name="CLOSURE_TOLERANCE",
        value=1e-9,
        description="Maximum gap between the first and last vertex of a sampled fiber",
        category=ConstantCategory.NUMERICS,
    ),
]

CONSTANTS_DICT: Dict[str, ConstantInfo] = {c.name: c for c in CONSTANTS}
VALUES: Dict[str, float] = {c.name: c.value for c in CONSTANTS}


def get_constants_by_category(category: ConstantCategory) -> List[ConstantInfo]:
    """Return all constants in the given category."""
    return [c for c in CONSTANTS if c.category == category]


# --- Module attributes ---
SCALE: float = VALUES["SCALE"]
POLE_EPSILON: float = VALUES["POLE_EPSILON"]
DEFAULT_DIVISIONS: int = int(VALUES["DEFAULT_DIVISIONS"])
SEGMENTS_PER_UNIT: int = int(VALUES["SEGMENTS_PER_UNIT"])
MIN_SEGMENTS: int = int(VALUES["MIN_SEGMENTS"])
MAX_SEGMENTS: int = int(VALUES["MAX_SEGMENTS"])
SATURATION: float = VALUES["SATURATION"]
LIGHTNESS_GAIN: float = VALUES["LIGHTNESS_GAIN"]
LIGHTNESS_OFFSET: float = VALUES["LIGHTNESS_OFFSET"]
CLOSURE_TOLERANCE: float = VALUES["CLOSURE_TOLERANCE"]

# Not numeric scalars, kept out of the registry
DEFAULT_POINT: Tuple[float, float, float] = (1.0, 0.0, 0.0)
# Ring primitives are built in the xy-plane, so their local normal is +z
REFERENCE_AXIS: Tuple[float, float, float] = (0.0, 0.0, 1.0)
