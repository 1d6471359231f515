"""Grid designer model layer -- public type re-exports."""

from grid_designer.model.breakpoint_range import INFINITY, BreakpointRange
from grid_designer.model.defaults import DEFAULT_SNAPSHOT
from grid_designer.model.enums import (
    DemoElement,
    LayoutTool,
    OffsetEdge,
    PreferenceField,
    RangeEdge,
)
from grid_designer.model.grid_system import BREAKPOINT_SLICE_WIDTH, GridSystem
from grid_designer.model.layout import FigmaLayoutGrid, SketchLayoutSettings
from grid_designer.model.preferences import DemoLayout, DemoOffset, GridPreferences, new_id

__all__ = [
    # range
    "INFINITY",
    "BreakpointRange",
    # enums
    "RangeEdge",
    "PreferenceField",
    "DemoElement",
    "OffsetEdge",
    "LayoutTool",
    # preferences
    "DemoOffset",
    "DemoLayout",
    "GridPreferences",
    "new_id",
    # layout export
    "SketchLayoutSettings",
    "FigmaLayoutGrid",
    # grid system
    "BREAKPOINT_SLICE_WIDTH",
    "GridSystem",
    "DEFAULT_SNAPSHOT",
]
