from __future__ import annotations

import pytest

from grid_designer.model import (
    INFINITY,
    BreakpointRange,
    DemoLayout,
    DemoOffset,
    GridPreferences,
    GridSystem,
)


def _demo(end: int = 2) -> DemoLayout:
    offset = DemoOffset(start=1, end=end)
    return DemoLayout(heading1=offset, heading2=offset, paragraph=offset)


@pytest.fixture
def make_preferences():
    """Factory for a valid GridPreferences entry; keyword arguments override fields."""

    def _make(
        min_width: int = 0,
        max_width: int | float = INFINITY,
        id: str | None = None,
        **overrides,
    ) -> GridPreferences:
        fields = dict(
            id=id if id is not None else f"p{min_width}",
            breakpoint_range=BreakpointRange(min_width, max_width),
            columns=4,
            gutter=16,
            margin=16,
            scale=1,
            demo=_demo(),
        )
        fields.update(overrides)
        return GridPreferences(**fields)

    return _make


@pytest.fixture
def make_grid_system(make_preferences):
    """Factory for a grid system whose entries start at the given widths.

    ``make_grid_system(0, 720, 1024)`` gives ``[0,719], [720,1023], [1024,inf)``;
    ``overrides`` maps an entry index to field overrides for that entry.
    """

    def _make(*min_widths: int, overrides: dict[int, dict] | None = None) -> GridSystem:
        overrides = overrides or {}
        entries = []
        for index, min_width in enumerate(min_widths):
            if index + 1 < len(min_widths):
                max_width = min_widths[index + 1] - 1
            else:
                max_width = INFINITY
            entries.append(make_preferences(min_width, max_width, **overrides.get(index, {})))
        return GridSystem(tuple(entries))

    return _make


@pytest.fixture
def default_system() -> GridSystem:
    return GridSystem.default()
