"""
mvnlaunch CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer

from mvnlaunch import __version__
from mvnlaunch.cli import show

app = typer.Typer(
    name="mvnlaunch",
    help="Assemble Maven launch arguments",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    mvnlaunch - Maven launch argument assembly.

    Computes the launcher class, classpath, Maven arguments and JVM
    arguments for a Maven run, including .mvn/jvm.config handling for
    Maven 3.3 and later.
    """
    setup_logging(debug)

    ctx.obj = {"debug": debug}


@app.command(name="version")
def version() -> None:
    """Print the mvnlaunch version."""
    typer.echo(f"mvnlaunch {__version__}")


app.command(name="show")(show.show)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
