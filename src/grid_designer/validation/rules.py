"""Validation rules for breakpoint ranges, grid preferences, and grid systems.

Each rule is a function taking the subject and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from grid_designer.validation.diagnostic import Diagnostic, Severity

if TYPE_CHECKING:
    from grid_designer.model.breakpoint_range import BreakpointRange
    from grid_designer.model.grid_system import GridSystem
    from grid_designer.model.preferences import GridPreferences


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

VIEWPORT_WIDTH_MIN = 0
VIEWPORT_WIDTH_MAX = 9999

CONTENT_MAX_WIDTH_MIN = 128
CONTENT_MAX_WIDTH_MAX = 1920

COLUMNS_MIN = 1
COLUMNS_MAX = 12

GUTTER_MIN = 0
GUTTER_MAX = 256

MARGIN_MIN = 0
MARGIN_MAX = 256

SCALE_MIN = 1
SCALE_MAX = 2

OFFSET_POSITION_MIN = COLUMNS_MIN


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _bounded_int(
    rule: str,
    value: object,
    low: int,
    high: int,
    field: str,
    entry_id: str | None = None,
) -> list[Diagnostic]:
    if _is_int(value) and low <= value <= high:  # type: ignore[operator]
        return []
    return [
        Diagnostic(
            rule=rule,
            severity=Severity.ERROR,
            message=f"{field} must be an integer between {low} and {high}, got {value!r}.",
            entry_id=entry_id,
            field=field,
        )
    ]


# ---------------------------------------------------------------------------
# Breakpoint range rules
# ---------------------------------------------------------------------------


def check_min_width(breakpoint_range: BreakpointRange) -> list[Diagnostic]:
    """min_width is a viewport width that leaves room for a wider bound."""
    return _bounded_int(
        "check_min_width",
        breakpoint_range.min_width,
        VIEWPORT_WIDTH_MIN,
        VIEWPORT_WIDTH_MAX - 1,
        "min_width",
    )


def check_max_width(breakpoint_range: BreakpointRange) -> list[Diagnostic]:
    """max_width is either unbounded or a viewport width above the minimum."""
    if breakpoint_range.max_width == math.inf:
        return []
    return _bounded_int(
        "check_max_width",
        breakpoint_range.max_width,
        VIEWPORT_WIDTH_MIN + 1,
        VIEWPORT_WIDTH_MAX,
        "max_width",
    )


def check_range_order(breakpoint_range: BreakpointRange) -> list[Diagnostic]:
    """min_width must be strictly below max_width."""
    low, high = breakpoint_range.min_width, breakpoint_range.max_width
    if not (_is_int(low) and (high == math.inf or _is_int(high))):
        return []  # the bound rules report the type problem
    if low < high:
        return []
    return [
        Diagnostic(
            rule="check_range_order",
            severity=Severity.ERROR,
            message=f"min_width ({low}) must be less than max_width ({high}).",
            field="max_width",
        )
    ]


# ---------------------------------------------------------------------------
# Grid preferences rules
# ---------------------------------------------------------------------------


def check_id(preferences: GridPreferences) -> list[Diagnostic]:
    if isinstance(preferences.id, str) and preferences.id:
        return []
    return [
        Diagnostic(
            rule="check_id",
            severity=Severity.ERROR,
            message="Preferences id must be a non-empty string.",
            field="id",
        )
    ]


def check_content_max_width(preferences: GridPreferences) -> list[Diagnostic]:
    """Content max width is optional; when set it must be within bounds."""
    if preferences.content_max_width is None:
        return []
    return _bounded_int(
        "check_content_max_width",
        preferences.content_max_width,
        CONTENT_MAX_WIDTH_MIN,
        CONTENT_MAX_WIDTH_MAX,
        "content_max_width",
        preferences.id,
    )


def check_columns(preferences: GridPreferences) -> list[Diagnostic]:
    return _bounded_int(
        "check_columns", preferences.columns, COLUMNS_MIN, COLUMNS_MAX,
        "columns", preferences.id,
    )


def check_gutter(preferences: GridPreferences) -> list[Diagnostic]:
    return _bounded_int(
        "check_gutter", preferences.gutter, GUTTER_MIN, GUTTER_MAX,
        "gutter", preferences.id,
    )


def check_margin(preferences: GridPreferences) -> list[Diagnostic]:
    return _bounded_int(
        "check_margin", preferences.margin, MARGIN_MIN, MARGIN_MAX,
        "margin", preferences.id,
    )


def check_scale(preferences: GridPreferences) -> list[Diagnostic]:
    """Scale is a finite number between 1 and 2 (100% - 200% root font size)."""
    scale = preferences.scale
    if _is_number(scale) and SCALE_MIN <= scale <= SCALE_MAX:
        return []
    return [
        Diagnostic(
            rule="check_scale",
            severity=Severity.ERROR,
            message=f"scale must be a number between {SCALE_MIN} and {SCALE_MAX}, got {scale!r}.",
            entry_id=preferences.id,
            field="scale",
        )
    ]


def check_demo_offsets(preferences: GridPreferences) -> list[Diagnostic]:
    """Every demo element spans 1 <= start < end <= columns + 1."""
    columns = preferences.columns
    if not (_is_int(columns) and COLUMNS_MIN <= columns <= COLUMNS_MAX):
        columns = COLUMNS_MAX  # check_columns reports the columns problem
    diagnostics: list[Diagnostic] = []
    for element, offset in preferences.demo.items():
        bound_errors = [
            d
            for edge in ("start", "end")
            for d in _bounded_int(
                "check_demo_offsets",
                getattr(offset, edge),
                OFFSET_POSITION_MIN,
                columns + 1,
                f"demo.{element}.{edge}",
                preferences.id,
            )
        ]
        if bound_errors:
            diagnostics.extend(bound_errors)
            continue
        if not offset.start < offset.end:
            diagnostics.append(
                Diagnostic(
                    rule="check_demo_offsets",
                    severity=Severity.ERROR,
                    message=(
                        f"demo.{element} start ({offset.start}) must be less "
                        f"than end ({offset.end})."
                    ),
                    entry_id=preferences.id,
                    field=f"demo.{element}",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Grid system structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_starts_at_zero(grid_system: GridSystem) -> list[Diagnostic]:
    """The narrowest entry must start at viewport width 0."""
    if not grid_system.preferences_list:
        return []
    head = grid_system.preferences_list[0]
    if head.breakpoint_range.is_from_start:
        return []
    return [
        Diagnostic(
            rule="check_starts_at_zero",
            severity=Severity.ERROR,
            message=(
                f"First entry starts at {head.breakpoint_range.min_width}; "
                f"it must start at {VIEWPORT_WIDTH_MIN}."
            ),
            entry_id=head.id,
            field="min_width",
        )
    ]


def check_ends_unbounded(grid_system: GridSystem) -> list[Diagnostic]:
    """The widest entry must extend to infinity."""
    if not grid_system.preferences_list:
        return []
    tail = grid_system.preferences_list[-1]
    if tail.breakpoint_range.is_to_end:
        return []
    return [
        Diagnostic(
            rule="check_ends_unbounded",
            severity=Severity.ERROR,
            message=(
                f"Last entry ends at {tail.breakpoint_range.max_width}; "
                "it must have no maximum width."
            ),
            entry_id=tail.id,
            field="max_width",
        )
    ]


def check_contiguous(grid_system: GridSystem) -> list[Diagnostic]:
    """Adjacent ranges neither overlap nor leave a gap."""
    diagnostics: list[Diagnostic] = []
    entries = grid_system.preferences_list
    for narrower, wider in zip(entries, entries[1:]):
        expected = narrower.breakpoint_range.max_width + 1
        if wider.breakpoint_range.min_width == expected:
            continue
        kind = "overlaps" if wider.breakpoint_range.min_width < expected else "leaves a gap after"
        diagnostics.append(
            Diagnostic(
                rule="check_contiguous",
                severity=Severity.ERROR,
                message=(
                    f"Entry '{wider.id}' ({wider.breakpoint_range.label}) {kind} "
                    f"entry '{narrower.id}' ({narrower.breakpoint_range.label})."
                ),
                entry_id=wider.id,
                field="min_width",
                fix=f"Set min_width to {expected}.",
            )
        )
    return diagnostics


def check_unique_ids(grid_system: GridSystem) -> list[Diagnostic]:
    seen: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for preferences in grid_system.preferences_list:
        if preferences.id in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_unique_ids",
                    severity=Severity.ERROR,
                    message=f"Duplicate preferences id '{preferences.id}'.",
                    entry_id=preferences.id,
                    field="id",
                )
            )
        seen.add(preferences.id)
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_redundant_breakpoint(grid_system: GridSystem) -> list[Diagnostic]:
    """Adjacent entries with identical settings add a breakpoint that does nothing."""
    diagnostics: list[Diagnostic] = []
    entries = grid_system.preferences_list
    for narrower, wider in zip(entries, entries[1:]):
        if narrower.tracked_values() == wider.tracked_values() and narrower.demo == wider.demo:
            diagnostics.append(
                Diagnostic(
                    rule="check_redundant_breakpoint",
                    severity=Severity.WARNING,
                    message=(
                        f"Entry '{wider.id}' ({wider.breakpoint_range.label}) has the "
                        "same settings as its narrower neighbor."
                    ),
                    entry_id=wider.id,
                    fix="Remove the breakpoint or change one of its settings.",
                )
            )
    return diagnostics


def check_scale_blocks_export(grid_system: GridSystem) -> list[Diagnostic]:
    """Entries with a scaled root font size cannot be exported to design tools."""
    return [
        Diagnostic(
            rule="check_scale_blocks_export",
            severity=Severity.INFO,
            message=(
                f"Entry '{p.id}' ({p.breakpoint_range.label}) uses scale {p.scale}; "
                "design tool layouts are only available at scale 1."
            ),
            entry_id=p.id,
            field="scale",
        )
        for p in grid_system.preferences_list
        if p.scale != 1
    ]


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------

RANGE_RULES = [
    check_min_width,
    check_max_width,
    check_range_order,
]

PREFERENCES_RULES = [
    check_id,
    check_content_max_width,
    check_columns,
    check_gutter,
    check_margin,
    check_scale,
    check_demo_offsets,
]

GRID_SYSTEM_RULES = [
    check_starts_at_zero,
    check_ends_unbounded,
    check_contiguous,
    check_unique_ids,
    check_redundant_breakpoint,
    check_scale_blocks_export,
]
