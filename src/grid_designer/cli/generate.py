"""CLI commands producing artifacts: SCSS, design tool layouts, share links."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from grid_designer.errors import PreconditionError
from grid_designer.location import QUERY_KEY, update_query
from grid_designer.model.enums import LayoutTool
from grid_designer.cli.snapshot import load_grid_system


@click.command()
@click.argument("snapshot", type=click.Path(exists=True), required=False)
@click.option("-o", "--output", type=click.Path(), default=None, help="Write SCSS to this file")
def scss(snapshot: str | None, output: str | None) -> None:
    """Generate the SCSS grid for SNAPSHOT (default grid system if omitted)."""
    grid_system = load_grid_system(snapshot)
    text = grid_system.to_scss()
    if output is None:
        click.echo(text, nl=False)
        return
    Path(output).write_text(text, encoding="utf-8")
    click.echo(f"Wrote {output} ({len(grid_system)} breakpoint(s))")


@click.command()
@click.argument("snapshot", type=click.Path(exists=True), required=False)
@click.option("--width", required=True, type=click.IntRange(min=0), help="Artboard width in px")
@click.option(
    "--tool",
    type=click.Choice([t.value for t in LayoutTool]),
    default=LayoutTool.SKETCH.value,
    help="Design tool to export for",
)
def export(snapshot: str | None, width: int, tool: str) -> None:
    """Print the design tool layout grid for an artboard WIDTH pixels wide."""
    grid_system = load_grid_system(snapshot)
    try:
        layout = grid_system.compute_external_layout(width, tool)
    except PreconditionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    if layout is None:
        click.echo(f"Error: no breakpoint matches width {width}", err=True)
        sys.exit(1)
    click.echo(json.dumps(layout.to_json(), indent=2))


@click.command()
@click.argument("snapshot", type=click.Path(exists=True), required=False)
@click.option("--query", default="", help="Existing query string to update")
@click.option("--key", default=QUERY_KEY, show_default=True, help="Query parameter name")
def url(snapshot: str | None, query: str, key: str) -> None:
    """Print the shareable query string for SNAPSHOT."""
    grid_system = load_grid_system(snapshot)
    click.echo(update_query(query, grid_system, key))
