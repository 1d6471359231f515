"""Event system: bus and event types for grid system edits."""

from grid_designer.events.bus import EventBus
from grid_designer.events.types import EditRejected, GridSystemChanged

__all__ = [
    "EventBus",
    "EditRejected",
    "GridSystemChanged",
]
