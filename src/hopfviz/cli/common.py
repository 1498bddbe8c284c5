"""
Common CLI options and utilities shared across all hopfviz commands.
"""
import typer
from pathlib import Path
from typing import List, Optional, Tuple

from hopfviz.core.errors import InvalidPointError
from hopfviz.geometry.hopf import unit_point_tuple


def parse_point(point_str: str) -> Tuple[float, float, float]:
    """Parse 'x,y,z' into a unit 3-tuple (renormalized)."""
    parts = [p for p in point_str.replace(" ", "").split(",") if p]
    if len(parts) != 3:
        raise typer.BadParameter(f"Point must look like 'x,y,z', got: {point_str}")
    try:
        coords = [float(p) for p in parts]
    except ValueError:
        raise typer.BadParameter(f"Point components must be numbers, got: {point_str}")
    try:
        return unit_point_tuple(coords)
    except InvalidPointError as exc:
        raise typer.BadParameter(str(exc))


def resolve_config_path(config: Optional[Path], command_name: str, search_dirs: List[Path] = None) -> Path:
    """
    Resolve configuration file path with smart defaults.

    Args:
        config: Explicit config path from user
        command_name: Name of the calling command
        search_dirs: Additional directories to search (default: common locations)

    Returns:
        Path to configuration file

    Raises:
        typer.BadParameter: If config file not found
    """
    if config and config.exists():
        return config.resolve()

    if search_dirs is None:
        search_dirs = [
            Path.cwd() / "configs",
            Path(__file__).parent.parent.parent.parent / "configs",  # Project root configs
        ]

    default_names = [
        f"default_{command_name}.yml",
        f"default_{command_name}.yaml",
        f"{command_name}.yml",
        f"{command_name}.yaml",
    ]

    # An explicit path that does not exist is an error, not a hint
    if config:
        raise typer.BadParameter(f"Configuration file not found: {config}")

    for search_dir in search_dirs:
        if not search_dir.exists():
            continue
        for name in default_names:
            candidate = search_dir / name
            if candidate.exists():
                return candidate.resolve()

    raise typer.BadParameter(
        f"No configuration file found for '{command_name}'. "
        f"Searched: {search_dirs} for files like: {default_names}"
    )


def resolve_output_path(output: Optional[Path], command_name: str) -> Path:
    """
    Resolve output directory with smart defaults.

    Returns:
        Path to output directory (created if necessary)
    """
    if output:
        output.mkdir(parents=True, exist_ok=True)
        return output.resolve()

    from hopfviz.core.utils import make_output_dir
    return make_output_dir(command_name, base_output_dir=Path.cwd() / "outputs")
