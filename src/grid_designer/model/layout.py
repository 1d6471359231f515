"""Design tool layout grids exported from a single grid preferences entry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


def round_half_up(value: float) -> int:
    """Round like design tools do: halves go up, not to even."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class SketchLayoutSettings:
    """Sketch layout settings: explicit column width, gutters between columns only."""

    total_width: int
    number_of_columns: int
    gutter_width: int
    column_width: int
    offset: int = 0
    gutter_on_outside: bool = False

    def to_json(self) -> dict[str, Any]:
        return {
            "columns": {
                "totalWidth": self.total_width,
                "offset": self.offset,
                "numberOfColumns": self.number_of_columns,
                "gutterOnOutside": self.gutter_on_outside,
                "gutterWidth": self.gutter_width,
                "columnWidth": self.column_width,
            }
        }


@dataclass(frozen=True)
class FigmaLayoutGrid:
    """Figma layout grid: stretch columns whose width follows the frame."""

    count: int
    margin: int
    gutter: int
    type: str = "Stretch"

    def to_json(self) -> dict[str, Any]:
        return {
            "columns": {
                "count": self.count,
                "type": self.type,
                "margin": self.margin,
                "gutter": self.gutter,
            }
        }


ExternalLayout = SketchLayoutSettings | FigmaLayoutGrid
