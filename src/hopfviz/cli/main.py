# src/hopfviz/cli/main.py
import typer

from hopfviz.cli.constants import constants_app
from hopfviz.cli.fibers import fibers_app
from hopfviz.cli.render import render
from hopfviz.core.logging import set_console_level, setup_json_logfile, setup_logfile

app = typer.Typer(
    help="hopfviz: Hopf fibration geometry CLI",
    context_settings={"help_option_names": ["-h", "--help"]}
)

# Add sub-commands
app.add_typer(constants_app, name="constants")
app.add_typer(fibers_app, name="fiber")
app.command("render")(render)

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: str = typer.Option(None, "--log-file", help="Also log to this file (rotated)"),
    log_json: str = typer.Option(None, "--log-json", help="Also log JSON records to this file"),
    version: bool = typer.Option(False, "--version", help="Show version and exit")
):
    """
    hopfviz: fibers of the Hopf map S³ -> S², projected into R³.

    Use 'hopfviz COMMAND --help' to see options for specific commands.
    """
    if version:
        from hopfviz import __version__
        typer.echo(f"hopfviz version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    set_console_level("DEBUG" if verbose else "INFO")
    if log_file:
        setup_logfile(log_file, level="DEBUG" if verbose else "INFO")
    if log_json:
        setup_json_logfile(log_json, level="DEBUG" if verbose else "INFO")

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

if __name__ == "__main__":
    app()
