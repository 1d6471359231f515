"""SCSS unit helpers: the function calls written into generated source.

The generated stylesheet defines ``em()`` and ``rem()`` itself (16px base);
``percentage()`` is the Sass built-in.
"""

from __future__ import annotations

BASE_FONT_SIZE = 16

EM_FUNCTION = """@function em($px, $context: 16) {
  @return ($px / $context * 1em);
}"""

REM_FUNCTION = """@function rem($px) {
  @return ($px / 16 * 1rem);
}"""


def format_number(value: int | float) -> str:
    """Render a number the way it is written in SCSS: ``1`` not ``1.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rem(px: int | float) -> str:
    return f"rem({format_number(px)})"


def em(px: int | float) -> str:
    return f"em({format_number(px)})"


def percentage(value: int | float) -> str:
    return f"percentage({format_number(value)})"
