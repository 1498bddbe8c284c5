"""Tests for hopfviz.scene.render (Agg backend, see conftest)."""

import matplotlib.pyplot as plt

from hopfviz.core.config import RenderConfig
from hopfviz.scene.demo import demo_points
from hopfviz.scene.render import draw_fibers, render_scene
from hopfviz.scene.state import VisualizationState, build_state, set_mobile_flag

SMALL = dict(dpi=30, figsize=(3.0, 2.0))


def test_render_scene_writes_png(tmp_path):
    state = build_state(demo_points("bands", 3), divisions=16)
    target = render_scene(state, tmp_path / "nested" / "scene.png", RenderConfig(**SMALL))
    assert target.exists()
    assert target.stat().st_size > 0


def test_render_without_inset(tmp_path):
    state = build_state(demo_points("equator", 2), divisions=16)
    target = render_scene(state, tmp_path / "scene.png", RenderConfig(show_inset=False, **SMALL))
    assert target.exists()


def test_empty_state_renders(tmp_path):
    target = render_scene(VisualizationState(), tmp_path / "empty.png", RenderConfig(**SMALL))
    assert target.exists()


def test_preview_is_drawn_only_when_visible():
    state = build_state(demo_points("equator", 4), divisions=16)
    cfg = RenderConfig(**SMALL)

    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    assert draw_fibers(ax, state, cfg) == 5
    plt.close(fig)

    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    assert draw_fibers(ax, set_mobile_flag(state, True), cfg) == 4
    plt.close(fig)
