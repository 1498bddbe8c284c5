# hopfviz/cli/constants.py
import json

import typer
from rich import print

from hopfviz.core.constants import CONSTANTS_DICT
from hopfviz.core.validators import asdict

constants_app = typer.Typer(help="View the numerical constants of the geometry pipeline.")

@constants_app.command("list")
def list_constants():
    """List all constants (names, values and descriptions)."""
    for name, const in CONSTANTS_DICT.items():
        print(f"[bold cyan]{name}[/bold cyan] = {const.value:g}: {const.description}")

@constants_app.command("show")
def show_constant(
    name: str = typer.Argument(..., help="Constant name"),
    format: str = typer.Option("plain", help="Output format: plain|json|md")
):
    """Show all metadata for a constant."""
    const = CONSTANTS_DICT.get(name)
    if not const:
        print(f"[red]Constant not found:[/red] {name}")
        raise typer.Exit(1)
    if format == "json":
        typer.echo(json.dumps(asdict(const), indent=2))
    elif format == "md":
        print(
            f"## {const.name}\n\n"
            f"{const.description}\n\n"
            f"- **Value:** {const.value:g}\n"
            f"- **Category:** {const.category.value}\n"
        )
    else:
        print(str(const))
