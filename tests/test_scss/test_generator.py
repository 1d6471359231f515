"""Tests for SCSS generation: markers, variable compression and output."""

import pytest

from grid_designer.model import GridSystem
from grid_designer.scss import generate_scss, grid_variables, media_query_variables
from grid_designer.model.enums import PreferenceField


@pytest.fixture
def two_entries(make_grid_system):
    """[0,719] 4 columns, [720,inf) 8 columns capped at 720px."""
    return make_grid_system(0, 720, overrides={1: {"content_max_width": 720, "columns": 8}})


def _strings(nodes) -> list[str]:
    return [str(n) for n in nodes]


# ---------------------------------------------------------------------------
# Media query markers
# ---------------------------------------------------------------------------


class TestMediaQueryVariables:
    def test_empty(self):
        assert media_query_variables(GridSystem()) == []

    def test_single_entry(self, make_grid_system):
        assert media_query_variables(make_grid_system(0)) == []

    def test_identical_entries(self, make_grid_system):
        assert media_query_variables(make_grid_system(0, 720)) == []

    def test_demo_only_change_has_no_marker(self, make_grid_system):
        gs = make_grid_system(0, 720).update_demo_offset("p720", "paragraph", "end", 4)
        assert media_query_variables(gs) == []

    def test_different_entries(self, two_entries):
        assert _strings(media_query_variables(two_entries)) == [
            '$mq1: "(min-width: #{em(720)})";'
        ]

    def test_single_marker_when_only_columns_change(self, make_grid_system):
        gs = make_grid_system(0, 720, overrides={1: {"columns": 8}})
        markers = media_query_variables(gs)
        assert [(m.name, m.min_width) for m in markers] == [("mq1", 720)]

    def test_numbering_skips_unchanged_boundaries(self, make_grid_system):
        gs = make_grid_system(
            0, 720, 1024, overrides={1: {"columns": 8}, 2: {"columns": 8}}
        )
        markers = media_query_variables(gs)
        assert [(m.name, m.min_width) for m in markers] == [("mq1", 720)]

    def test_default_system(self, default_system):
        markers = media_query_variables(default_system)
        assert [m.min_width for m in markers] == [720, 1024, 1280, 1600]
        assert [m.name for m in markers] == ["mq1", "mq2", "mq3", "mq4"]


# ---------------------------------------------------------------------------
# Grid variables
# ---------------------------------------------------------------------------


class TestGridVariables:
    def test_flattened(self, two_entries):
        variables = grid_variables(two_entries, media_query_variables(two_entries))
        assert _strings(variables.flattened()) == [
            "$grid-max-width: none;",
            "$mq1\\:grid-max-width: rem(720);",
            "$grid-columns: 4;",
            "$mq1\\:grid-columns: 8;",
            "$grid-gutter: rem(16);",
            "$grid-margin: rem(16);",
            "$root-font-size: percentage(1);",
        ]

    def test_columns_only_change(self, make_grid_system):
        gs = make_grid_system(0, 720, overrides={1: {"columns": 8}})
        variables = grid_variables(gs, media_query_variables(gs))
        assert _strings(variables.flattened()) == [
            "$grid-max-width: none;",
            "$grid-columns: 4;",
            "$mq1\\:grid-columns: 8;",
            "$grid-gutter: rem(16);",
            "$grid-margin: rem(16);",
            "$root-font-size: percentage(1);",
        ]

    def test_runs_keyed_by_marker(self, make_grid_system):
        gs = make_grid_system(
            0, 720, 1024, overrides={1: {"columns": 8}, 2: {"columns": 8, "gutter": 32}}
        )
        variables = grid_variables(gs, media_query_variables(gs))
        assert variables.keys(PreferenceField.COLUMNS) == ["root", "mq1"]
        assert variables.keys(PreferenceField.GUTTER) == ["root", "mq2"]
        assert str(variables.get(PreferenceField.GUTTER, "mq2")) == "$mq2\\:grid-gutter: rem(32);"
        assert variables.get(PreferenceField.GUTTER, "mq1") is None

    def test_keys_union_sorted_by_marker(self, default_system):
        variables = grid_variables(default_system, media_query_variables(default_system))
        keys = variables.keys(PreferenceField.CONTENT_MAX_WIDTH, PreferenceField.MARGIN)
        assert keys == ["root", "mq1", "mq2", "mq3"]

    def test_default_scale(self, default_system):
        variables = grid_variables(default_system, media_query_variables(default_system))
        scale = variables.get(PreferenceField.SCALE, "mq4")
        assert str(scale) == "$mq4\\:root-font-size: percentage(1.25);"


# ---------------------------------------------------------------------------
# Full output
# ---------------------------------------------------------------------------


class TestGenerateScss:
    def test_section_order(self, default_system):
        scss = generate_scss(default_system)
        headings = [line for line in scss.splitlines() if line.startswith("// ")]
        assert headings == ["// Unit", "// Media Query", "// Grid", "// Base", "// Component"]

    def test_defines_unit_functions(self, default_system):
        scss = generate_scss(default_system)
        assert "@function em($px, $context: 16) {" in scss
        assert "@function rem($px) {" in scss

    def test_ends_with_newline(self, default_system):
        assert generate_scss(default_system).endswith("}\n")

    def test_ids_do_not_affect_output(self):
        assert generate_scss(GridSystem.default()) == generate_scss(GridSystem.default())

    def test_container(self, two_entries):
        expected = (
            ".container {\n"
            "  box-sizing: border-box;\n"
            "  max-width: $grid-max-width;\n"
            "  margin-right: auto;\n"
            "  margin-left: auto;\n"
            "  padding-right: $grid-margin;\n"
            "  padding-left: $grid-margin;\n"
            "\n"
            "  @media #{$mq1} {\n"
            "    max-width: $mq1\\:grid-max-width;\n"
            "  }\n"
            "}"
        )
        assert expected in generate_scss(two_entries)

    def test_row_and_col(self, make_grid_system):
        scss = generate_scss(make_grid_system(0))
        assert (
            ".row {\n"
            "  display: flex;\n"
            "  flex-wrap: wrap;\n"
            "  margin-right: $grid-gutter / 2 * -1;\n"
            "  margin-left: $grid-gutter / 2 * -1;\n"
            "}"
        ) in scss
        assert (
            ".col {\n"
            "  box-sizing: border-box;\n"
            "  padding-right: $grid-gutter / 2;\n"
            "  padding-left: $grid-gutter / 2;\n"
            "}"
        ) in scss

    def test_html_font_size(self, default_system):
        scss = generate_scss(default_system)
        assert (
            "html {\n"
            "  font-size: $root-font-size;\n"
            "\n"
            "  @media #{$mq4} {\n"
            "    font-size: $mq4\\:root-font-size;\n"
            "  }\n"
            "}"
        ) in scss

    def test_span_loops(self, two_entries):
        scss = generate_scss(two_entries)
        assert (
            "@for $denominator from 1 through $grid-columns {\n"
            "  @for $numerator from 1 through $denominator {\n"
            "    .col.-s#{$numerator}of#{$denominator} {\n"
            "      width: percentage($numerator / $denominator);\n"
            "    }\n"
            "  }\n"
            "}"
        ) in scss
        assert (
            "@for $denominator from 1 through $mq1\\:grid-columns {\n"
            "  @for $numerator from 1 through $denominator {\n"
            "    .col.-mq1\\:s#{$numerator}of#{$denominator} {\n"
            "      @media #{$mq1} {\n"
            "        width: percentage($numerator / $denominator);\n"
            "      }\n"
            "    }\n"
            "  }\n"
            "}"
        ) in scss

    def test_offset_loops(self, two_entries):
        scss = generate_scss(two_entries)
        assert ".col.-o#{$numerator}of#{$denominator} {" in scss
        assert ".col.-mq1\\:o#{$numerator}of#{$denominator} {" in scss
        assert "margin-left: percentage($numerator / $denominator);" in scss

    def test_empty_system(self):
        scss = generate_scss(GridSystem())
        assert "html {}" in scss
        assert "@for" not in scss

    def test_one_loop_nest_per_columns_run(self, default_system):
        scss = generate_scss(default_system)
        assert scss.count("@for $denominator from 1 through") == 6

    def test_default_system_full_output(self, default_system):
        assert generate_scss(default_system) == DEFAULT_SCSS


def _loops(prefix: str, property_name: str) -> str:
    nests = []
    for columns, selector in [
        ("$grid-columns", f".col.-{prefix}"),
        ("$mq1\\:grid-columns", f".col.-mq1\\:{prefix}"),
        ("$mq2\\:grid-columns", f".col.-mq2\\:{prefix}"),
    ]:
        declaration = f"{property_name}: percentage($numerator / $denominator);"
        if columns == "$grid-columns":
            body = f"      {declaration}\n"
        else:
            media = columns.split("\\")[0]
            body = (
                f"      @media #{{{media}}} {{\n"
                f"        {declaration}\n"
                "      }\n"
            )
        nests.append(
            f"@for $denominator from 1 through {columns} {{\n"
            "  @for $numerator from 1 through $denominator {\n"
            f"    {selector}#{{$numerator}}of#{{$denominator}} {{\n"
            f"{body}"
            "    }\n"
            "  }\n"
            "}"
        )
    return "\n\n".join(nests)


DEFAULT_SCSS = (
    r"""// Unit
@function em($px, $context: 16) {
  @return ($px / $context * 1em);
}

@function rem($px) {
  @return ($px / 16 * 1rem);
}

// Media Query
$mq1: "(min-width: #{em(720)})";
$mq2: "(min-width: #{em(1024)})";
$mq3: "(min-width: #{em(1280)})";
$mq4: "(min-width: #{em(1600)})";

// Grid
$grid-max-width: none;
$mq1\:grid-max-width: rem(720);
$mq2\:grid-max-width: rem(1024);
$mq3\:grid-max-width: rem(1280);
$grid-columns: 4;
$mq1\:grid-columns: 8;
$mq2\:grid-columns: 12;
$grid-gutter: rem(16);
$mq2\:grid-gutter: rem(32);
$grid-margin: rem(16);
$mq3\:grid-margin: rem(32);
$root-font-size: percentage(1);
$mq4\:root-font-size: percentage(1.25);

// Base
html {
  font-size: $root-font-size;

  @media #{$mq4} {
    font-size: $mq4\:root-font-size;
  }
}

// Component
.container {
  box-sizing: border-box;
  max-width: $grid-max-width;
  margin-right: auto;
  margin-left: auto;
  padding-right: $grid-margin;
  padding-left: $grid-margin;

  @media #{$mq1} {
    max-width: $mq1\:grid-max-width;
  }

  @media #{$mq2} {
    max-width: $mq2\:grid-max-width;
  }

  @media #{$mq3} {
    max-width: $mq3\:grid-max-width;
    padding-right: $mq3\:grid-margin;
    padding-left: $mq3\:grid-margin;
  }
}

.row {
  display: flex;
  flex-wrap: wrap;
  margin-right: $grid-gutter / 2 * -1;
  margin-left: $grid-gutter / 2 * -1;

  @media #{$mq2} {
    margin-right: $mq2\:grid-gutter / 2 * -1;
    margin-left: $mq2\:grid-gutter / 2 * -1;
  }
}

.col {
  box-sizing: border-box;
  padding-right: $grid-gutter / 2;
  padding-left: $grid-gutter / 2;

  @media #{$mq2} {
    padding-right: $mq2\:grid-gutter / 2;
    padding-left: $mq2\:grid-gutter / 2;
  }
}

"""
    + _loops("s", "width")
    + "\n\n"
    + _loops("o", "margin-left")
    + "\n"
)
