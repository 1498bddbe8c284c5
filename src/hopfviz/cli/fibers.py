"""
Single-fiber commands: sample, fit, color and demo listings.
"""
import json
from pathlib import Path
from typing import Optional

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from hopfviz.cli.common import parse_point
from hopfviz.core import constants
from hopfviz.core.config import FiberConfig
from hopfviz.core.enums import DemoLayout
from hopfviz.core.errors import DegenerateFiberError
from hopfviz.core.logging import logger
from hopfviz.geometry.color import map_color
from hopfviz.geometry.ring import fit_fiber_ring
from hopfviz.geometry.sampler import fiber_polyline
from hopfviz.scene.demo import demo_points

console = Console()
fibers_app = typer.Typer(help="Compute fibers over individual base points")

POINT_HELP = "Base point on S² as 'x,y,z' (renormalized)"
DEFAULT_POINT_STR = ",".join(str(c) for c in constants.DEFAULT_POINT)


@fibers_app.command("sample")
def sample(
    point: str = typer.Option(DEFAULT_POINT_STR, "--point", "-p", help=POINT_HELP),
    divisions: int = typer.Option(constants.DEFAULT_DIVISIONS, "--divisions", "-n", min=1, help="Polyline segments"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write vertices to .npy or .csv instead of printing"),
):
    """Sample the projected fiber as a closed polyline."""
    cfg = FiberConfig(point=parse_point(point), divisions=divisions)
    p = cfg.point
    verts = fiber_polyline(p, cfg.divisions)
    logger.debug(f"Sampled {len(verts)} vertices over {p}")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        if output.suffix == ".npy":
            np.save(output, verts)
        else:
            np.savetxt(output, verts, delimiter=",", header="x,y,z", comments="")
        console.print(f"[green]Wrote {len(verts)} vertices to {output}[/green]")
        return

    table = Table(title=f"Fiber over ({p[0]:.4f}, {p[1]:.4f}, {p[2]:.4f})")
    table.add_column("i", justify="right", style="dim")
    for axis in ("x", "y", "z"):
        table.add_column(axis, justify="right", style="cyan")
    for i, (x, y, z) in enumerate(verts):
        table.add_row(str(i), f"{x:.6f}", f"{y:.6f}", f"{z:.6f}")
    console.print(table)


@fibers_app.command("fit")
def fit(
    point: str = typer.Option(DEFAULT_POINT_STR, "--point", "-p", help=POINT_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the ring as JSON"),
):
    """Fit the exact ring traced by the fiber."""
    p = parse_point(point)
    try:
        ring = fit_fiber_ring(p)
    except DegenerateFiberError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(ring.as_dict(), indent=2))
        return

    c, n, q = ring.center, ring.normal, ring.orientation
    console.print(f"[bold cyan]center[/bold cyan]:      ({c[0]:.6f}, {c[1]:.6f}, {c[2]:.6f})")
    console.print(f"[bold cyan]radius[/bold cyan]:      {ring.radius:.6f}")
    console.print(f"[bold cyan]normal[/bold cyan]:      ({n[0]:.6f}, {n[1]:.6f}, {n[2]:.6f})")
    console.print(f"[bold cyan]orientation[/bold cyan]: (w={q[0]:.6f}, x={q[1]:.6f}, y={q[2]:.6f}, z={q[3]:.6f})")
    console.print(f"[bold cyan]segments[/bold cyan]:    {ring.segments}")


@fibers_app.command("color")
def color(
    point: str = typer.Option(DEFAULT_POINT_STR, "--point", "-p", help=POINT_HELP),
):
    """Show the fiber color for a base point."""
    col = map_color(parse_point(point))
    r, g, b = col.to_rgb()
    console.print(
        f"h={col.h:.6f} s={col.s:.2f} l={col.l:.6f} "
        f"rgb=({r:.4f}, {g:.4f}, {b:.4f}) [{col.to_hex()}]{col.to_hex()}[/]"
    )


@fibers_app.command("demo")
def demo(
    layout: DemoLayout = typer.Option(DemoLayout.EQUATOR, "--layout", "-l", help="Base-point layout"),
    count: int = typer.Option(32, "--count", "-c", min=1, help="Points per band"),
):
    """List demo base points with their colors and rings."""
    table = Table(title=f"Demo layout: {layout.value}")
    table.add_column("point", style="cyan")
    table.add_column("color")
    table.add_column("radius", justify="right")
    table.add_column("segments", justify="right")

    for p in demo_points(layout, count):
        col = map_color(p)
        ring = fit_fiber_ring(p)
        table.add_row(
            f"({p[0]:+.3f}, {p[1]:+.3f}, {p[2]:+.3f})",
            f"[{col.to_hex()}]{col.to_hex()}[/]",
            f"{ring.radius:.4f}",
            str(ring.segments),
        )
    console.print(table)
