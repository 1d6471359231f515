"""Grid system store: holds the current grid system and applies edits to it.

The store owns no editing logic of its own; every mutation is one of the
pure GridSystem edits, and the resulting value replaces the current state
wholesale. A rejected edit leaves the state untouched and propagates.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from grid_designer.errors import GridDesignerError, PreconditionError
from grid_designer.events import EditRejected, EventBus, GridSystemChanged
from grid_designer.location import QUERY_KEY, parse_grid_system, update_query
from grid_designer.model.enums import DemoElement, OffsetEdge, PreferenceField, RangeEdge
from grid_designer.model.grid_system import GridSystem

logger = logging.getLogger(__name__)

Edit = Callable[[GridSystem], GridSystem]


class GridSystemStore:
    """Single owner of the current GridSystem value."""

    def __init__(self, initial: GridSystem | None = None, bus: EventBus | None = None) -> None:
        self._state = initial if initial is not None else GridSystem.default()
        self.bus = bus or EventBus()

    @classmethod
    def from_query(
        cls, query: str, key: str = QUERY_KEY, bus: EventBus | None = None
    ) -> GridSystemStore:
        """Start from the grid system shared in *query*, or the default one.

        An undecodable shared grid system falls back to the default.
        """
        try:
            initial = parse_grid_system(query, key)
        except GridDesignerError as exc:
            logger.warning("Ignoring invalid %r query parameter: %s", key, exc)
            initial = None
        return cls(initial, bus)

    @property
    def state(self) -> GridSystem:
        return self._state

    def _apply(self, operation: str, edit: Edit) -> GridSystem:
        previous = self._state
        try:
            current = edit(previous)
        except GridDesignerError as exc:
            logger.warning("Rejected %s: %s", operation, exc)
            self.bus.emit(EditRejected(operation=operation, error=str(exc)))
            raise
        self._state = current
        logger.info("Applied %s (%d entries)", operation, len(current))
        self.bus.emit(GridSystemChanged(operation=operation, previous=previous, current=current))
        return current

    # --- edits ----------------------------------------------------------------

    def resize_breakpoint(
        self, preferences_id: str, edge: RangeEdge | str, value: int
    ) -> GridSystem:
        return self._apply(
            "resize_breakpoint",
            lambda gs: gs.resize_breakpoint(preferences_id, edge, value),
        )

    def update_field(
        self, preferences_id: str, name: PreferenceField | str, value: Any
    ) -> GridSystem:
        return self._apply(
            "update_field",
            lambda gs: gs.update_field(preferences_id, name, value),
        )

    def update_demo_offset(
        self,
        preferences_id: str,
        element: DemoElement | str,
        edge: OffsetEdge | str,
        value: int,
    ) -> GridSystem:
        return self._apply(
            "update_demo_offset",
            lambda gs: gs.update_demo_offset(preferences_id, element, edge, value),
        )

    def add_breakpoint(self) -> GridSystem:
        return self._apply("add_breakpoint", lambda gs: gs.add_breakpoint())

    def remove_breakpoint(self, preferences_id: str) -> GridSystem:
        return self._apply(
            "remove_breakpoint", lambda gs: gs.remove_breakpoint(preferences_id)
        )

    def reset(self) -> GridSystem:
        return self._apply("reset", lambda gs: GridSystem.default())

    def load(self, grid_system: GridSystem) -> GridSystem:
        """Replace the state with an already-validated grid system."""
        return self._apply("load", lambda gs: grid_system)

    # --- JSON edits -----------------------------------------------------------

    def apply_edit(self, payload: dict[str, Any]) -> GridSystem:
        """Apply an edit described as JSON, e.g.

        ``{"op": "resize_breakpoint", "id": "...", "edge": "min_width", "value": 800}``
        """
        op = payload.get("op")
        try:
            if op == "resize_breakpoint":
                return self.resize_breakpoint(payload["id"], payload["edge"], payload["value"])
            if op == "update_field":
                return self.update_field(payload["id"], payload["field"], payload.get("value"))
            if op == "update_demo_offset":
                return self.update_demo_offset(
                    payload["id"], payload["element"], payload["edge"], payload["value"]
                )
            if op == "add_breakpoint":
                return self.add_breakpoint()
            if op == "remove_breakpoint":
                return self.remove_breakpoint(payload["id"])
            if op == "reset":
                return self.reset()
        except KeyError as exc:
            raise PreconditionError(f"Edit {op!r} is missing {exc.args[0]!r}") from None
        raise PreconditionError(f"Unknown edit operation {op!r}")


class LocationSync:
    """Keeps a shareable query string in step with a store.

    The query is written from the store state on creation, then rewritten
    from the latest state on each change, so the last write wins.
    """

    def __init__(self, store: GridSystemStore, query: str = "", key: str = QUERY_KEY) -> None:
        self.key = key
        self.query = update_query(query.lstrip("?"), store.state, key)
        self._unsubscribe = store.bus.subscribe(GridSystemChanged, self._on_change)

    def _on_change(self, event: GridSystemChanged) -> None:
        self.query = update_query(self.query, event.current, self.key)
        logger.debug("Query string updated (%d chars)", len(self.query))

    def close(self) -> None:
        self._unsubscribe()
