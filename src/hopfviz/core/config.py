"""
Validated configuration structures.

Exports:
    - FiberConfig: Base point and sampling resolution for a single fiber.
    - RenderConfig: Everything the static scene renderer needs.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hopfviz.core import constants
from hopfviz.core.enums import DemoLayout
from hopfviz.core.validators import positive_value, unit_point

__all__ = [
    "FiberConfig",
    "RenderConfig",
]

Vec3 = Tuple[float, float, float]


class FiberConfig(BaseModel):
    """Which fiber to build and how finely to sample it."""
    model_config = ConfigDict(frozen=True)

    point: Vec3 = Field(constants.DEFAULT_POINT, description="Base point on S² (renormalized)")
    divisions: int = Field(constants.DEFAULT_DIVISIONS, ge=1, description="Polyline segments")

    @field_validator("point", mode="before")
    @classmethod
    def normalize_point(cls, v):
        return unit_point(cls, v)


class RenderConfig(BaseModel):
    """Options for `hopfviz render`, usually read from YAML."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    layout: DemoLayout = Field(DemoLayout.EQUATOR, description="Demo base-point layout")
    count: int = Field(32, ge=1, description="Number of base points per band")
    points: Optional[List[Vec3]] = Field(None, description="Explicit base points; overrides layout")
    divisions: int = Field(constants.DEFAULT_DIVISIONS, ge=1, description="Preview polyline segments")
    line_width: float = Field(1.5, description="Matplotlib line width for rings")
    figsize: Tuple[float, float] = Field((12.0, 6.0), description="Figure size in inches")
    dpi: int = Field(150, ge=1)
    elevation: float = Field(25.0, description="Camera elevation in degrees")
    azimuth: float = Field(-60.0, description="Camera azimuth in degrees")
    extent: float = Field(2.0, description="Half-width of the fiber view box")
    show_inset: bool = Field(True, description="Draw the S² base-point inset")
    filename: str = Field("hopf_fibration.png")

    @field_validator("line_width", "extent")
    @classmethod
    def check_positive(cls, v):
        return positive_value(cls, v)

    @field_validator("points", mode="before")
    @classmethod
    def normalize_points(cls, v):
        if v is None:
            return v
        return [unit_point(cls, p) for p in v]
