"""Loading grid systems from snapshot files for CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from grid_designer.errors import GridDesignerError
from grid_designer.model.grid_system import GridSystem


def read_snapshot(path: str) -> dict:
    """Read a snapshot JSON file; exits with code 1 if it is not UTF-8 JSON."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        click.echo(f"Error: {Path(path).name} is not UTF-8 text: {exc}", err=True)
        sys.exit(1)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {Path(path).name}: {exc}", err=True)
        sys.exit(1)


def load_grid_system(path: str | None) -> GridSystem:
    """Build the grid system stored at *path*, or the default one."""
    if path is None:
        return GridSystem.default()
    try:
        return GridSystem.from_json(read_snapshot(path))
    except GridDesignerError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
