"""Breakpoint range: a closed interval of viewport widths."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from grid_designer.model.enums import RangeEdge, coerce
from grid_designer.validation.rules import RANGE_RULES, VIEWPORT_WIDTH_MIN
from grid_designer.validation.validator import validate_or_raise

INFINITY = math.inf


@dataclass(frozen=True)
class BreakpointRange:
    """Viewport widths ``[min_width, max_width]``, both ends inclusive.

    ``max_width`` is ``math.inf`` for the range that extends to every wider
    viewport.
    """

    min_width: int
    max_width: int | float = INFINITY

    def __post_init__(self) -> None:
        validate_or_raise(self, RANGE_RULES)

    @property
    def is_from_start(self) -> bool:
        return self.min_width == VIEWPORT_WIDTH_MIN

    @property
    def is_to_end(self) -> bool:
        return self.max_width == INFINITY

    @property
    def range_symbol(self) -> str:
        return "+" if self.is_to_end else "–"

    @property
    def label(self) -> str:
        """Human-readable form, e.g. ``720 – 1023`` or ``1600 +``."""
        if self.is_to_end:
            return f"{self.min_width} {self.range_symbol}"
        return f"{self.min_width} {self.range_symbol} {self.max_width}"

    def matches(self, viewport_width: int | float) -> bool:
        return self.min_width <= viewport_width <= self.max_width

    def with_bound(self, edge: RangeEdge | str, value: int | float) -> BreakpointRange:
        """Return a new range with one bound replaced."""
        return replace(self, **{coerce(RangeEdge, edge).value: value})

    # --- serialisation --------------------------------------------------------

    def to_json(self) -> dict[str, int]:
        if self.is_to_end:
            return {"minWidth": self.min_width}
        return {"minWidth": self.min_width, "maxWidth": self.max_width}  # type: ignore[dict-item]

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> BreakpointRange:
        max_width = data.get("maxWidth")
        return cls(
            min_width=data["minWidth"],
            max_width=INFINITY if max_width is None else max_width,
        )
