"""
Scene rendering command.
"""
import typer
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console

from hopfviz.cli.common import resolve_config_path, resolve_output_path
from hopfviz.core.config import RenderConfig
from hopfviz.core.errors import HopfvizError
from hopfviz.core.logging import logger
from hopfviz.core.utils import load_config

console = Console()


def render(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file path (default: auto-detect)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory (default: timestamped under ./outputs)"),
    overrides: Optional[List[str]] = typer.Option(None, "--set", "-s", help="Override a config key, e.g. --set count=8"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be done without executing"),
):
    """Render committed fibers for a demo layout to an image."""
    config_path = resolve_config_path(config, "render")
    try:
        raw, _ = load_config(config_path, overrides)
        cfg = RenderConfig(**raw)
    except (HopfvizError, ValidationError) as e:
        console.print(f"[bold red]✗ Invalid configuration {config_path}: {e}[/bold red]")
        raise typer.Exit(1)

    console.print("[bold green]Rendering Hopf fibration[/bold green]")
    console.print(f"Config: {config_path}")
    if dry_run:
        console.print(f"Layout: {cfg.layout.value} x {cfg.count}, file: {cfg.filename}")
        console.print("[yellow]DRY RUN - not executing[/yellow]")
        return

    output_path = resolve_output_path(output, "render")

    # Deferred so that the other commands never import matplotlib
    from hopfviz.scene.demo import demo_points
    from hopfviz.scene.render import render_scene
    from hopfviz.scene.state import build_state

    points = cfg.points if cfg.points is not None else demo_points(cfg.layout, cfg.count)
    logger.info(f"Building {len(points)} fibers ({cfg.divisions} divisions)")
    try:
        state = build_state(points, divisions=cfg.divisions)
        target = render_scene(state, output_path / cfg.filename, cfg)
    except HopfvizError as e:
        console.print(f"[bold red]✗ Error rendering: {e}[/bold red]")
        raise typer.Exit(1)

    console.print(f"[bold green]✓ Wrote {target}[/bold green]")
