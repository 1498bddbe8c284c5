# src/hopfviz/scene/state.py
"""
Caller-owned selection state for an interactive Hopf fibration view.

The geometry core is stateless; whatever the surrounding application tracks
(the currently targeted base point, whether the live preview is shown, the
fibers committed so far) is held in an immutable VisualizationState. Every
transition returns a new state, so concurrent input sources only need to
serialize the assignment of the returned value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np

from hopfviz.core import constants
from hopfviz.core.logging import logger
from hopfviz.geometry.color import HSLColor, map_color
from hopfviz.geometry.hopf import unit_point_tuple
from hopfviz.geometry.ring import FiberRing, fit_fiber_ring
from hopfviz.geometry.sampler import fiber_polyline

__all__ = [
    "CommittedFiber",
    "PreviewFiber",
    "VisualizationState",
    "select_point",
    "commit_selection",
    "set_mobile_flag",
    "preview",
    "build_state",
]

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class PreviewFiber:
    point: Vec3
    color: HSLColor
    vertices: np.ndarray
    visible: bool


@dataclass(frozen=True)
class CommittedFiber:
    point: Vec3
    color: HSLColor
    ring: FiberRing


@dataclass(frozen=True)
class VisualizationState:
    """Selection, preview visibility and committed fibers."""
    selected: Optional[Vec3] = None
    show_preview: bool = True
    divisions: int = constants.DEFAULT_DIVISIONS
    committed: Tuple[CommittedFiber, ...] = ()

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    @property
    def preview_visible(self) -> bool:
        return self.has_selection and self.show_preview


def select_point(state: VisualizationState, point) -> VisualizationState:
    """Target a new base point, or clear the selection with ``None``."""
    if point is None:
        return replace(state, selected=None)
    return replace(state, selected=unit_point_tuple(point))


def set_mobile_flag(state: VisualizationState, flag: bool) -> VisualizationState:
    """Touch devices have no hover, so the live preview is hidden for them."""
    return replace(state, show_preview=not flag)


def preview(state: VisualizationState) -> Optional[PreviewFiber]:
    """Color and polyline of the fiber over the current selection."""
    if not state.has_selection:
        return None
    return PreviewFiber(
        point=state.selected,
        color=map_color(state.selected),
        vertices=fiber_polyline(state.selected, state.divisions),
        visible=state.show_preview,
    )


def commit_selection(state: VisualizationState) -> VisualizationState:
    """
    Add the fiber over the current selection as a permanent ring.

    Without a selection the state is returned unchanged.

    Raises:
        DegenerateFiberError: If the selection sits on the north pole.
    """
    if not state.has_selection:
        return state
    fiber = CommittedFiber(
        point=state.selected,
        color=map_color(state.selected),
        ring=fit_fiber_ring(state.selected),
    )
    logger.debug(f"Committed fiber #{len(state.committed) + 1} over {state.selected}")
    return replace(state, committed=state.committed + (fiber,))


def build_state(points, divisions: int = constants.DEFAULT_DIVISIONS) -> VisualizationState:
    """Select and commit each point in turn; the last one stays selected."""
    state = VisualizationState(divisions=divisions)
    for p in points:
        state = commit_selection(select_point(state, p))
    return state
