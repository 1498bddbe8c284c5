# src/hopfviz/scene/render.py
"""
Static matplotlib rendering of a VisualizationState.

Left panel: committed fibers as tessellated rings, plus the live preview
polyline when visible. Right panel: the base sphere S² with each committed
base point drawn in its fiber's color.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from hopfviz.core.config import RenderConfig
from hopfviz.core.logging import logger
from hopfviz.geometry.ring import ring_vertices
from hopfviz.scene.state import VisualizationState, preview

__all__ = [
    "draw_fibers",
    "draw_inset",
    "render_scene",
]


def draw_fibers(ax, state: VisualizationState, config: RenderConfig) -> int:
    """Plot rings and preview on a 3D axis. Returns the number of curves drawn."""
    drawn = 0
    for fiber in state.committed:
        verts = ring_vertices(fiber.ring)
        ax.plot(verts[:, 0], verts[:, 1], verts[:, 2],
                color=fiber.color.to_rgb(), lw=config.line_width)
        drawn += 1

    live = preview(state)
    if live is not None and live.visible:
        verts = live.vertices
        # The preview may run off towards the projection pole; clip for display
        mask = np.all(np.abs(verts) <= 4.0 * config.extent, axis=1)
        ax.plot(verts[mask, 0], verts[mask, 1], verts[mask, 2],
                color=live.color.to_rgb(), lw=config.line_width, ls="--")
        drawn += 1

    e = config.extent
    ax.set_xlim(-e, e)
    ax.set_ylim(-e, e)
    ax.set_zlim(-e, e)
    ax.set_box_aspect((1, 1, 1))
    ax.view_init(elev=config.elevation, azim=config.azimuth)
    ax.set_axis_off()
    return drawn


def draw_inset(ax, state: VisualizationState, config: RenderConfig) -> None:
    """Plot S² with its coordinate axes and the committed base points."""
    u, v = np.mgrid[0:2 * np.pi:48j, 0:np.pi:24j]
    ax.plot_surface(np.cos(u) * np.sin(v), np.sin(u) * np.sin(v), np.cos(v),
                    color="#444444", alpha=0.25, linewidth=0)

    for axis in np.eye(3) * 0.5:
        ax.plot([0, axis[0]], [0, axis[1]], [0, axis[2]], color="#888888", lw=1.5)

    if state.committed:
        pts = np.array([f.point for f in state.committed])
        colors = [f.color.to_rgb() for f in state.committed]
        ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], c=colors, s=18, depthshade=False)

    ax.set_xlim(-1, 1)
    ax.set_ylim(-1, 1)
    ax.set_zlim(-1, 1)
    ax.set_box_aspect((1, 1, 1))
    ax.view_init(elev=config.elevation, azim=config.azimuth)
    ax.set_axis_off()


def render_scene(state: VisualizationState, path, config: RenderConfig = None) -> Path:
    """
    Render ``state`` to an image file and return its path.

    The format follows the file suffix (png, pdf, svg, ...).
    """
    config = config or RenderConfig()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=config.figsize)
    try:
        if config.show_inset:
            ax_main = fig.add_subplot(1, 2, 1, projection="3d")
            ax_inset = fig.add_subplot(1, 2, 2, projection="3d")
            draw_inset(ax_inset, state, config)
        else:
            ax_main = fig.add_subplot(1, 1, 1, projection="3d")
        drawn = draw_fibers(ax_main, state, config)
        fig.savefig(path, dpi=config.dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info(f"Rendered {drawn} fibers to {path}")
    return path
