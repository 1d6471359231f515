"""Grid preferences: the layout settings attached to one breakpoint range."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, replace
from typing import Any, Iterator

from grid_designer.errors import PreconditionError, ValidationError
from grid_designer.model.breakpoint_range import BreakpointRange
from grid_designer.model.enums import (
    DemoElement,
    LayoutTool,
    OffsetEdge,
    PreferenceField,
    RangeEdge,
    coerce,
)
from grid_designer.model.layout import (
    ExternalLayout,
    FigmaLayoutGrid,
    SketchLayoutSettings,
    round_half_up,
)
from grid_designer.validation.diagnostic import Diagnostic, Severity
from grid_designer.validation.rules import PREFERENCES_RULES
from grid_designer.validation.validator import validate_or_raise


def new_id() -> str:
    """Generate an opaque, session-unique preferences id."""
    return uuid.uuid4().hex


def malformed_snapshot(exc: Exception, what: str) -> ValidationError:
    """Wrap a lookup/type failure while decoding a snapshot."""
    return ValidationError(
        [
            Diagnostic(
                rule="check_snapshot",
                severity=Severity.ERROR,
                message=f"Malformed {what} snapshot: {exc.__class__.__name__}: {exc}",
            )
        ]
    )


@dataclass(frozen=True)
class DemoOffset:
    """Column lines a demo element spans: ``grid-column: start / end``."""

    start: int
    end: int

    def to_json(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class DemoLayout:
    """Column offsets of the three demo elements rendered in the preview."""

    heading1: DemoOffset
    heading2: DemoOffset
    paragraph: DemoOffset

    def items(self) -> Iterator[tuple[DemoElement, DemoOffset]]:
        for element in DemoElement:
            yield element, getattr(self, element.value)

    def get(self, element: DemoElement | str) -> DemoOffset:
        return getattr(self, coerce(DemoElement, element).value)

    def with_offset(
        self, element: DemoElement | str, edge: OffsetEdge | str, value: int
    ) -> DemoLayout:
        element = coerce(DemoElement, element)
        edge = coerce(OffsetEdge, edge)
        offset = replace(getattr(self, element.value), **{edge.value: value})
        return replace(self, **{element.value: offset})

    def to_json(self) -> dict[str, dict[str, int]]:
        return {element.value: offset.to_json() for element, offset in self.items()}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> DemoLayout:
        return cls(
            **{
                element.value: DemoOffset(
                    start=data[element.value]["start"], end=data[element.value]["end"]
                )
                for element in DemoElement
            }
        )


@dataclass(frozen=True)
class GridPreferences:
    """Layout preferences for one breakpoint range of a grid system.

    Instances are immutable; every ``with_*`` method returns a new, fully
    re-validated instance carrying the same ``id``.
    """

    id: str
    breakpoint_range: BreakpointRange
    columns: int
    gutter: int
    margin: int
    scale: float
    demo: DemoLayout
    content_max_width: int | None = None

    def __post_init__(self) -> None:
        validate_or_raise(self, PREFERENCES_RULES)

    # --- field access ---------------------------------------------------------

    def value_of(self, name: PreferenceField | str) -> Any:
        return getattr(self, coerce(PreferenceField, name).value)

    def tracked_values(self) -> tuple[Any, ...]:
        """Scalar fields that drive the generated SCSS, in emission order."""
        return tuple(getattr(self, f.value) for f in PreferenceField)

    # --- copy-on-write edits --------------------------------------------------

    def with_field(self, name: PreferenceField | str, value: Any) -> GridPreferences:
        return replace(self, **{coerce(PreferenceField, name).value: value})

    def with_range(self, edge: RangeEdge | str, value: int | float) -> GridPreferences:
        return replace(self, breakpoint_range=self.breakpoint_range.with_bound(edge, value))

    def with_demo_offset(
        self, element: DemoElement | str, edge: OffsetEdge | str, value: int
    ) -> GridPreferences:
        return replace(self, demo=self.demo.with_offset(element, edge, value))

    # --- design tool export ---------------------------------------------------

    def _container_width(self, artboard_width: int) -> int:
        if not self.breakpoint_range.matches(artboard_width):
            raise PreconditionError(
                f"Artboard width {artboard_width} is outside range "
                f"{self.breakpoint_range.label}",
                entry_id=self.id,
            )
        if self.scale != 1:
            raise PreconditionError(
                f"Layouts can only be exported at scale 1, not {self.scale}",
                entry_id=self.id,
            )
        max_width = math.inf if self.content_max_width is None else self.content_max_width
        return min(artboard_width, max_width) - self.margin * 2

    def to_sketch_layout_settings(self, artboard_width: int) -> SketchLayoutSettings:
        container_width = self._container_width(artboard_width)
        total_gutter_width = (self.columns - 1) * self.gutter
        return SketchLayoutSettings(
            total_width=container_width,
            number_of_columns=self.columns,
            gutter_width=self.gutter,
            column_width=round_half_up((container_width - total_gutter_width) / self.columns),
        )

    def to_figma_layout_grid(self, artboard_width: int) -> FigmaLayoutGrid:
        container_width = self._container_width(artboard_width)
        return FigmaLayoutGrid(
            count=self.columns,
            margin=round_half_up((artboard_width - container_width) / 2),
            gutter=self.gutter,
        )

    def compute_external_layout(
        self, artboard_width: int, tool: LayoutTool | str
    ) -> ExternalLayout:
        """Column/gutter/margin breakdown of this entry for a design tool artboard."""
        if coerce(LayoutTool, tool) is LayoutTool.SKETCH:
            return self.to_sketch_layout_settings(artboard_width)
        return self.to_figma_layout_grid(artboard_width)

    # --- serialisation --------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "breakpointRange": self.breakpoint_range.to_json(),
        }
        if self.content_max_width is not None:
            data["contentMaxWidth"] = self.content_max_width
        data.update(
            columns=self.columns,
            gutter=self.gutter,
            margin=self.margin,
            scale=self.scale,
            demo=self.demo.to_json(),
        )
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GridPreferences:
        """Build from a snapshot entry, minting an id when the entry has none."""
        try:
            return cls(
                id=data.get("id") or new_id(),
                breakpoint_range=BreakpointRange.from_json(data["breakpointRange"]),
                content_max_width=data.get("contentMaxWidth"),
                columns=data["columns"],
                gutter=data["gutter"],
                margin=data["margin"],
                scale=data["scale"],
                demo=DemoLayout.from_json(data["demo"]),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise malformed_snapshot(exc, "preferences") from exc
