"""SCSS generation: compiles a grid system into media-query-gated source.

Values are deduplicated per property: each property gets one variable per
run of consecutive entries sharing its value. A breakpoint marker
(``$mq1``, ``$mq2``, ...) exists wherever at least one property changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from grid_designer.model.enums import PreferenceField
from grid_designer.model.grid_system import GridSystem
from grid_designer.scss.ast import (
    Comment,
    Declaration,
    MediaQueryVariable,
    Node,
    Rule,
    VariableDeclaration,
    render,
)
from grid_designer.scss.units import EM_FUNCTION, REM_FUNCTION, format_number, percentage, rem

logger = logging.getLogger(__name__)

ROOT = "root"

# Variable name and value formatter per tracked property, in emission order.
_VARIABLES: dict[PreferenceField, tuple[str, Callable[[Any], str]]] = {
    PreferenceField.CONTENT_MAX_WIDTH: (
        "grid-max-width",
        lambda v: "none" if v is None else rem(v),
    ),
    PreferenceField.COLUMNS: ("grid-columns", format_number),
    PreferenceField.GUTTER: ("grid-gutter", rem),
    PreferenceField.MARGIN: ("grid-margin", rem),
    PreferenceField.SCALE: ("root-font-size", percentage),
}

_PROPERTIES_ORDER = [
    "box-sizing",
    "display",
    "flex-wrap",
    "max-width",
    "margin-right",
    "margin-left",
    "padding-right",
    "padding-left",
]


def _sort_declarations(declarations: list[Declaration]) -> list[Declaration]:
    return sorted(declarations, key=lambda d: _PROPERTIES_ORDER.index(d.name))


def _range_key_order(range_key: str) -> int:
    if range_key == ROOT:
        return 0
    return int(range_key.removeprefix("mq"))


def _media_rule(range_key: str, children: list[Node]) -> Rule:
    return Rule(f"@media #{{${range_key}}}", tuple(children))


def _range_selector(range_key: str, name: str) -> str:
    """Class selector for *name*, prefixed with the marker outside the root range."""
    if range_key == ROOT:
        return f".col.-{name}"
    return f".col.-{range_key}\\:{name}"


# ---------------------------------------------------------------------------
# Change points and runs
# ---------------------------------------------------------------------------


def media_query_variables(grid_system: GridSystem) -> list[MediaQueryVariable]:
    """One marker per boundary where any tracked property changes."""
    markers: list[MediaQueryVariable] = []
    entries = grid_system.preferences_list
    for narrower, current in zip(entries, entries[1:]):
        if narrower.tracked_values() != current.tracked_values():
            markers.append(
                MediaQueryVariable(
                    name=f"mq{len(markers) + 1}",
                    min_width=current.breakpoint_range.min_width,
                )
            )
    return markers


@dataclass(frozen=True)
class GridVariables:
    """Per-property variable declarations keyed by range key (``root``, ``mq1``...)."""

    by_field: Mapping[PreferenceField, Mapping[str, VariableDeclaration]]

    def get(self, field: PreferenceField, range_key: str) -> VariableDeclaration | None:
        return self.by_field[field].get(range_key)

    def keys(self, *fields: PreferenceField) -> list[str]:
        """Range keys used by any of *fields*, root first then by marker number."""
        found = {key for field in fields for key in self.by_field[field]}
        return sorted(found, key=_range_key_order)

    def flattened(self) -> list[VariableDeclaration]:
        return [decl for field in _VARIABLES for decl in self.by_field[field].values()]


def grid_variables(
    grid_system: GridSystem, markers: list[MediaQueryVariable]
) -> GridVariables:
    """Compress each tracked property into one variable per run of equal values."""
    marker_names = {marker.min_width: marker.name for marker in markers}
    by_field: dict[PreferenceField, dict[str, VariableDeclaration]] = {}

    for field, (variable_name, format_value) in _VARIABLES.items():
        runs: dict[str, VariableDeclaration] = {}
        last: Any = None
        for preferences in grid_system.preferences_list:
            value = preferences.value_of(field)
            if runs and value == last:
                continue
            last = value
            range_key = marker_names.get(preferences.breakpoint_range.min_width, ROOT)
            prefix = "" if range_key == ROOT else f"{range_key}\\:"
            runs[range_key] = VariableDeclaration(f"{prefix}{variable_name}", format_value(value))
        by_field[field] = runs

    return GridVariables(by_field=by_field)


# ---------------------------------------------------------------------------
# Structural rules
# ---------------------------------------------------------------------------


def _html_rule(variables: GridVariables) -> Rule:
    children: list[Node] = []
    for range_key in variables.keys(PreferenceField.SCALE):
        scale = variables.get(PreferenceField.SCALE, range_key)
        range_children: list[Node] = []
        if scale:
            range_children.append(Declaration("font-size", scale.reference))
        if range_key == ROOT:
            children.extend(range_children)
        else:
            children.extend(["", _media_rule(range_key, range_children)])
    return Rule("html", tuple(children))


def _container_rule(variables: GridVariables) -> Rule:
    children: list[Node] = [
        Declaration("box-sizing", "border-box"),
        Declaration("margin-right", "auto"),
        Declaration("margin-left", "auto"),
    ]
    fields = (PreferenceField.CONTENT_MAX_WIDTH, PreferenceField.MARGIN)
    for range_key in variables.keys(*fields):
        max_width = variables.get(PreferenceField.CONTENT_MAX_WIDTH, range_key)
        margin = variables.get(PreferenceField.MARGIN, range_key)
        range_children: list[Declaration] = []
        if max_width:
            range_children.append(Declaration("max-width", max_width.reference))
        if margin:
            range_children.append(Declaration("padding-right", margin.reference))
            range_children.append(Declaration("padding-left", margin.reference))
        if range_key == ROOT:
            children = _sort_declarations(children + range_children)  # type: ignore[operator]
        else:
            children.extend(["", _media_rule(range_key, list(range_children))])
    return Rule(".container", tuple(children))


def _gutter_rule(
    selector: str,
    base: list[Declaration],
    variables: GridVariables,
    declare: Callable[[str], list[Declaration]],
) -> Rule:
    children: list[Node] = list(base)
    for range_key in variables.keys(PreferenceField.GUTTER):
        gutter = variables.get(PreferenceField.GUTTER, range_key)
        range_children: list[Node] = list(declare(gutter.reference)) if gutter else []
        if range_key == ROOT:
            children.extend(range_children)
        else:
            children.extend(["", _media_rule(range_key, range_children)])
    return Rule(selector, tuple(children))


def _row_rule(variables: GridVariables) -> Rule:
    return _gutter_rule(
        ".row",
        [Declaration("display", "flex"), Declaration("flex-wrap", "wrap")],
        variables,
        lambda ref: [
            Declaration("margin-right", f"{ref} / 2 * -1"),
            Declaration("margin-left", f"{ref} / 2 * -1"),
        ],
    )


def _col_rule(variables: GridVariables) -> Rule:
    return _gutter_rule(
        ".col",
        [Declaration("box-sizing", "border-box")],
        variables,
        lambda ref: [
            Declaration("padding-right", f"{ref} / 2"),
            Declaration("padding-left", f"{ref} / 2"),
        ],
    )


def _fraction_rules(variables: GridVariables, prefix: str, property_name: str) -> list[Rule]:
    """One ``@for`` nest per columns run, producing a rule for every fraction."""
    rules: list[Rule] = []
    runs = variables.by_field[PreferenceField.COLUMNS]
    for range_key in variables.keys(PreferenceField.COLUMNS):
        columns = runs[range_key]
        selector = _range_selector(range_key, f"{prefix}#{{$numerator}}of#{{$denominator}}")
        declarations: list[Node] = [
            Declaration(property_name, "percentage($numerator / $denominator)")
        ]
        body = declarations if range_key == ROOT else [_media_rule(range_key, declarations)]
        rules.append(
            Rule(
                f"@for $denominator from 1 through {columns.reference}",
                (
                    Rule(
                        "@for $numerator from 1 through $denominator",
                        (Rule(selector, tuple(body)),),
                    ),
                ),
            )
        )
    return rules


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def generate_scss(grid_system: GridSystem) -> str:
    """Return the SCSS source for *grid_system*.

    Output is deterministic for a given grid system (ids do not appear in it).
    """
    markers = media_query_variables(grid_system)
    variables = grid_variables(grid_system, markers)
    logger.debug(
        "Generating SCSS for %d entries with %d media query marker(s)",
        len(grid_system),
        len(markers),
    )

    col_span_rules = "\n\n".join(str(r) for r in _fraction_rules(variables, "s", "width"))
    col_offset_rules = "\n\n".join(
        str(r) for r in _fraction_rules(variables, "o", "margin-left")
    )

    nodes: list[Node] = [
        Comment("Unit"),
        EM_FUNCTION,
        "",
        REM_FUNCTION,
        "",
        Comment("Media Query"),
        *markers,
        "",
        Comment("Grid"),
        *variables.flattened(),
        "",
        Comment("Base"),
        _html_rule(variables),
        "",
        Comment("Component"),
        _container_rule(variables),
        "",
        _row_rule(variables),
        "",
        _col_rule(variables),
        "",
        col_span_rules,
        "",
        col_offset_rules,
        "",
    ]
    return render(nodes)
