"""Names used to address parts of a grid system in edit operations."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from grid_designer.errors import PreconditionError

E = TypeVar("E", bound=StrEnum)


class RangeEdge(StrEnum):
    MIN_WIDTH = "min_width"
    MAX_WIDTH = "max_width"

    @property
    def opposite(self) -> RangeEdge:
        if self is RangeEdge.MIN_WIDTH:
            return RangeEdge.MAX_WIDTH
        return RangeEdge.MIN_WIDTH


class PreferenceField(StrEnum):
    """Scalar preference fields, in the order the SCSS variables are emitted."""

    CONTENT_MAX_WIDTH = "content_max_width"
    COLUMNS = "columns"
    GUTTER = "gutter"
    MARGIN = "margin"
    SCALE = "scale"


class DemoElement(StrEnum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    PARAGRAPH = "paragraph"


class OffsetEdge(StrEnum):
    START = "start"
    END = "end"


class LayoutTool(StrEnum):
    SKETCH = "sketch"
    FIGMA = "figma"


def coerce(enum_cls: type[E], value: object) -> E:
    """Convert *value* to a member of *enum_cls*, raising PreconditionError otherwise."""
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise PreconditionError(
            f"Unknown {enum_cls.__name__} {value!r}; expected one of: {choices}"
        ) from None
