"""Event types emitted by the grid system store."""

from __future__ import annotations

from dataclasses import dataclass

from grid_designer.model.grid_system import GridSystem


@dataclass(frozen=True)
class GridSystemChanged:
    operation: str
    previous: GridSystem
    current: GridSystem


@dataclass(frozen=True)
class EditRejected:
    operation: str
    error: str
