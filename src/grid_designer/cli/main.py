"""grid-designer CLI entry point: Click group with subcommands."""

import logging

import click

from grid_designer import __version__


@click.group()
@click.version_option(version=__version__, prog_name="grid-designer")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """grid-designer - design responsive grid systems and generate SCSS."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from grid_designer.cli.generate import export, scss, url  # noqa: E402
from grid_designer.cli.inspect import inspect  # noqa: E402
from grid_designer.cli.serve import serve  # noqa: E402
from grid_designer.cli.validate import validate  # noqa: E402

cli.add_command(scss)
cli.add_command(inspect)
cli.add_command(validate)
cli.add_command(export)
cli.add_command(url)
cli.add_command(serve)
