"""CLI command: grid-designer validate -- check a snapshot file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from grid_designer.errors import GridDesignerError, ValidationError
from grid_designer.cli.snapshot import read_snapshot
from grid_designer.model.grid_system import GridSystem
from grid_designer.validation import Severity


@click.command()
@click.argument("snapshot", type=click.Path(exists=True))
def validate(snapshot: str) -> None:
    """Validate a grid system snapshot file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    path = Path(snapshot)
    data = read_snapshot(snapshot)

    try:
        diagnostics = GridSystem.from_json(data).diagnostics()
    except ValidationError as exc:
        diagnostics = exc.diagnostics
    except GridDesignerError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not diagnostics:
        click.echo(f"OK: {path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
