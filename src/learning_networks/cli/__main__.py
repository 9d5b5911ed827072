"""Command line entry point for learning-networks.

    lnet grid ranges.json -n 5 -o grid.json
    lnet -v grid ranges.json
    lnet version
"""

import logging
import sys

import typer

from .sampling import grid_command

app = typer.Typer(
    name="lnet",
    help="Expand hyperparameter ranges into grids",
    no_args_is_help=True,
)

app.command("grid")(grid_command)


@app.command("version")
def version_command():
    """Print the installed learning-networks version."""
    from .. import __version__
    typer.echo(f"learning-networks {__version__}")


@app.callback()
def configure(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Log progress (-vv for debug output)"),
):
    """Hyperparameter range tools for learning networks."""
    if verbose:
        level = logging.DEBUG if verbose > 1 else logging.INFO
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def cli_main():
    """Run the lnet application."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nInterrupted", err=True)
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
