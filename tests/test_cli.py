"""Tests for the hopfviz command-line interface."""

import json
from pathlib import Path

import numpy as np
import pytest
from typer.testing import CliRunner

from hopfviz.cli.main import app

runner = CliRunner()
DEFAULT_RENDER_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "default_render.yml"


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "hopfviz version" in result.output


def test_sample_prints_vertices():
    result = runner.invoke(app, ["fiber", "sample", "--point", "0,0,1", "-n", "4"])
    assert result.exit_code == 0, result.output
    assert "0.353553" in result.output


def test_sample_writes_npy(tmp_path):
    target = tmp_path / "fiber.npy"
    result = runner.invoke(app, ["fiber", "sample", "--point=-1,0,0", "-n", "8", "-o", str(target)])
    assert result.exit_code == 0, result.output
    verts = np.load(target)
    assert verts.shape == (9, 3)


def test_sample_writes_csv(tmp_path):
    target = tmp_path / "fiber.csv"
    result = runner.invoke(app, ["fiber", "sample", "-n", "4", "-o", str(target)])
    assert result.exit_code == 0, result.output
    verts = np.loadtxt(target, delimiter=",", skiprows=1)
    assert verts.shape == (5, 3)


def test_fit_json():
    result = runner.invoke(app, ["fiber", "fit", "--point", "0,0,1", "--json"])
    assert result.exit_code == 0, result.output
    ring = json.loads(result.output)
    assert ring["radius"] == pytest.approx(np.sqrt(0.5))
    assert ring["segments"] == 46


def test_fit_human_readable():
    result = runner.invoke(app, ["fiber", "fit", "--point", "1,0,0"])
    assert result.exit_code == 0, result.output
    assert "radius" in result.output
    assert "0.707107" in result.output


def test_fit_north_pole_fails_cleanly():
    result = runner.invoke(app, ["fiber", "fit", "--point", "0,1,0"])
    assert result.exit_code == 1
    assert "degenerate" in result.output


def test_color():
    result = runner.invoke(app, ["fiber", "color", "--point", "1,0,0"])
    assert result.exit_code == 0, result.output
    assert "h=0.750000" in result.output


@pytest.mark.parametrize("bad", ["1,2", "a,b,c", "0,0,0"])
def test_bad_point_is_a_usage_error(bad):
    result = runner.invoke(app, ["fiber", "color", "--point", bad])
    assert result.exit_code == 2


def test_demo_table():
    result = runner.invoke(app, ["fiber", "demo", "--layout", "bands", "--count", "3"])
    assert result.exit_code == 0, result.output
    assert "bands" in result.output


def test_constants_list_and_show():
    result = runner.invoke(app, ["constants", "list"])
    assert result.exit_code == 0
    assert "POLE_EPSILON" in result.output

    result = runner.invoke(app, ["constants", "show", "SCALE", "--format", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["value"] == 0.5

    result = runner.invoke(app, ["constants", "show", "NOPE"])
    assert result.exit_code == 1


def test_render_writes_image(tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(app, [
        "render",
        "--config", str(DEFAULT_RENDER_CONFIG),
        "--output", str(out),
        "--set", "layout=equator",
        "--set", "count=3",
        "--set", "divisions=16",
        "--set", "dpi=30",
        "--set", "figsize=[3, 2]",
    ])
    assert result.exit_code == 0, result.output
    image = out / "hopf_fibration.png"
    assert image.exists()
    assert image.stat().st_size > 0


def test_render_dry_run_writes_nothing(tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(app, [
        "render", "--config", str(DEFAULT_RENDER_CONFIG), "--output", str(out), "--dry-run",
    ])
    assert result.exit_code == 0, result.output
    assert "DRY RUN" in result.output
    assert not out.exists()


def test_render_rejects_invalid_config(tmp_path):
    result = runner.invoke(app, [
        "render", "--config", str(DEFAULT_RENDER_CONFIG), "--output", str(tmp_path),
        "--set", "count=0",
    ])
    assert result.exit_code == 1


def test_render_missing_config_is_a_usage_error(tmp_path):
    result = runner.invoke(app, ["render", "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code == 2
