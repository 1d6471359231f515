"""CLI command: grid-designer inspect -- display a grid system's breakpoints."""

from __future__ import annotations

import click

from grid_designer.cli.snapshot import load_grid_system
from grid_designer.scss import media_query_variables


@click.command()
@click.argument("snapshot", type=click.Path(exists=True), required=False)
def inspect(snapshot: str | None) -> None:
    """Display the breakpoints of SNAPSHOT (default grid system if omitted).

    Shows each range with its preferences and demo offsets, followed by the
    media query markers the SCSS generator would emit.
    """
    grid_system = load_grid_system(snapshot)

    click.echo(f"Breakpoints: {len(grid_system)}")
    click.echo()

    for preferences in grid_system:
        parts = [f"  {preferences.breakpoint_range.label:<12}"]
        parts.append(f"columns={preferences.columns}")
        parts.append(f"gutter={preferences.gutter}")
        parts.append(f"margin={preferences.margin}")
        parts.append(f"scale={preferences.scale:g}")
        if preferences.content_max_width is not None:
            parts.append(f"max={preferences.content_max_width}")
        click.echo("  ".join(parts))
        demo = ", ".join(
            f"{element}={offset.start}-{offset.end}"
            for element, offset in preferences.demo.items()
        )
        click.echo(f"    demo: {demo}")
    click.echo()

    markers = media_query_variables(grid_system)
    click.echo(f"Media queries: {len(markers)}")
    for marker in markers:
        click.echo(f"  ${marker.name}  min-width {marker.min_width}px")
