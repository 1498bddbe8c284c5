from hopfviz.scene.demo import demo_points
from hopfviz.scene.state import (
    CommittedFiber,
    PreviewFiber,
    VisualizationState,
    build_state,
    commit_selection,
    preview,
    select_point,
    set_mobile_flag,
)

__all__ = [
    "CommittedFiber",
    "PreviewFiber",
    "VisualizationState",
    "build_state",
    "commit_selection",
    "demo_points",
    "preview",
    "select_point",
    "set_mobile_flag",
]
