"""Grid system: an ordered, gap-free partition of the viewport-width axis.

Every edit returns a new GridSystem; construction re-runs the structural
rules (coverage from 0 to infinity, contiguity, unique ids), so an invalid
edit raises before any new state exists.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterator

from grid_designer.errors import UnknownEntryError
from grid_designer.model.breakpoint_range import INFINITY, BreakpointRange
from grid_designer.model.defaults import DEFAULT_SNAPSHOT
from grid_designer.model.enums import (
    DemoElement,
    LayoutTool,
    OffsetEdge,
    PreferenceField,
    RangeEdge,
    coerce,
)
from grid_designer.model.layout import ExternalLayout
from grid_designer.model.preferences import GridPreferences, malformed_snapshot, new_id
from grid_designer.validation.diagnostic import Diagnostic
from grid_designer.validation.rules import GRID_SYSTEM_RULES
from grid_designer.validation.validator import validate, validate_or_raise

# Width of the finite slice the previous last entry keeps when a breakpoint is added.
BREAKPOINT_SLICE_WIDTH = 240


@dataclass(frozen=True)
class GridSystem:
    """Grid preferences ordered by ascending ``min_width``."""

    preferences_list: tuple[GridPreferences, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences_list", tuple(self.preferences_list))
        validate_or_raise(self, GRID_SYSTEM_RULES)

    def __len__(self) -> int:
        return len(self.preferences_list)

    def __iter__(self) -> Iterator[GridPreferences]:
        return iter(self.preferences_list)

    def diagnostics(self) -> list[Diagnostic]:
        """Non-fatal findings (warnings, info) about this grid system."""
        return validate(self, GRID_SYSTEM_RULES)

    # --- queries --------------------------------------------------------------

    def find_by_id(self, preferences_id: str) -> GridPreferences | None:
        for preferences in self.preferences_list:
            if preferences.id == preferences_id:
                return preferences
        return None

    def index_of(self, preferences_id: str) -> int:
        for index, preferences in enumerate(self.preferences_list):
            if preferences.id == preferences_id:
                return index
        return -1

    def match_for(self, viewport_width: int | float) -> GridPreferences | None:
        """Return the entry whose range contains *viewport_width*."""
        for preferences in self.preferences_list:
            if preferences.breakpoint_range.matches(viewport_width):
                return preferences
        return None

    def adjacent_narrower(self, preferences_id: str) -> GridPreferences | None:
        index = self._require_index(preferences_id)
        if index == 0:
            return None
        return self.preferences_list[index - 1]

    def adjacent_wider(self, preferences_id: str) -> GridPreferences | None:
        index = self._require_index(preferences_id)
        if index + 1 >= len(self.preferences_list):
            return None
        return self.preferences_list[index + 1]

    def _require_index(self, preferences_id: str) -> int:
        index = self.index_of(preferences_id)
        if index == -1:
            raise UnknownEntryError(
                f"No grid preferences with id {preferences_id!r}", entry_id=preferences_id
            )
        return index

    def _replacing(self, replacements: dict[int, GridPreferences]) -> GridSystem:
        return GridSystem(
            tuple(replacements.get(i, p) for i, p in enumerate(self.preferences_list))
        )

    # --- edits ----------------------------------------------------------------

    def resize_breakpoint(
        self, preferences_id: str, edge: RangeEdge | str, value: int
    ) -> GridSystem:
        """Move the boundary shared by an entry and its neighbor on *edge*.

        Moving ``min_width`` of entry N sets ``max_width`` of entry N-1 to
        ``value - 1``; moving ``max_width`` sets ``min_width`` of entry N+1 to
        ``value + 1``. The unbounded ends have no neighbor, so moving them
        breaks coverage and is rejected.
        """
        index = self._require_index(preferences_id)
        edge = coerce(RangeEdge, edge)
        replacements = {index: self.preferences_list[index].with_range(edge, value)}

        if edge is RangeEdge.MIN_WIDTH:
            neighbor_index, neighbor_value = index - 1, value - 1
        else:
            neighbor_index, neighbor_value = index + 1, value + 1
        if 0 <= neighbor_index < len(self.preferences_list):
            neighbor = self.preferences_list[neighbor_index]
            replacements[neighbor_index] = neighbor.with_range(edge.opposite, neighbor_value)

        return self._replacing(replacements)

    def update_field(
        self, preferences_id: str, name: PreferenceField | str, value: Any
    ) -> GridSystem:
        index = self._require_index(preferences_id)
        return self._replacing({index: self.preferences_list[index].with_field(name, value)})

    def update_demo_offset(
        self,
        preferences_id: str,
        element: DemoElement | str,
        edge: OffsetEdge | str,
        value: int,
    ) -> GridSystem:
        index = self._require_index(preferences_id)
        updated = self.preferences_list[index].with_demo_offset(element, edge, value)
        return self._replacing({index: updated})

    def add_breakpoint(self) -> GridSystem:
        """Split a new unbounded entry off the widest one.

        An empty grid system is seeded with the default narrowest entry,
        stretched to cover every width.
        """
        if not self.preferences_list:
            template = dict(DEFAULT_SNAPSHOT["preferences"][0])
            template["breakpointRange"] = {"minWidth": 0}
            return GridSystem((GridPreferences.from_json(template),))

        last = self.preferences_list[-1]
        shrunk = last.with_range(
            RangeEdge.MAX_WIDTH,
            last.breakpoint_range.min_width + BREAKPOINT_SLICE_WIDTH - 1,
        )
        added = replace(
            shrunk,
            id=new_id(),
            breakpoint_range=BreakpointRange(shrunk.breakpoint_range.max_width + 1, INFINITY),
        )
        return GridSystem(self.preferences_list[:-1] + (shrunk, added))

    def remove_breakpoint(self, preferences_id: str) -> GridSystem:
        """Remove an entry; a neighbor (the wider one if any) absorbs its span."""
        index = self._require_index(preferences_id)
        removed = self.preferences_list[index]
        entries = list(self.preferences_list)
        del entries[index]

        if index < len(entries):
            # the wider neighbor slid into the removed slot
            entries[index] = entries[index].with_range(
                RangeEdge.MIN_WIDTH, removed.breakpoint_range.min_width
            )
        elif index > 0:
            entries[index - 1] = entries[index - 1].with_range(
                RangeEdge.MAX_WIDTH, removed.breakpoint_range.max_width
            )
        return GridSystem(tuple(entries))

    # --- outputs --------------------------------------------------------------

    def to_scss(self) -> str:
        from grid_designer.scss import generate_scss

        return generate_scss(self)

    def compute_external_layout(
        self, artboard_width: int, tool: LayoutTool | str
    ) -> ExternalLayout | None:
        """Design tool layout of the entry matching *artboard_width*, if any."""
        matched = self.match_for(artboard_width)
        if matched is None:
            return None
        return matched.compute_external_layout(artboard_width, tool)

    # --- serialisation --------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        return {"preferences": [p.to_json() for p in self.preferences_list]}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GridSystem:
        try:
            entries = data["preferences"]
            return cls(tuple(GridPreferences.from_json(entry) for entry in entries))
        except (KeyError, TypeError) as exc:
            raise malformed_snapshot(exc, "grid system") from exc

    @classmethod
    def default(cls) -> GridSystem:
        return cls.from_json(DEFAULT_SNAPSHOT)
