"""SCSS syntax tree: Declaration, VariableDeclaration, Comment, and Rule dataclasses.

Every node renders itself with ``str()``; a Rule indents its children by two
spaces per nesting level. Plain strings are allowed as children and are
emitted verbatim (an empty string is a blank line).
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_designer.scss.units import em, format_number

INDENT = " " * 2


def _value(value: str | int | float) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


@dataclass(frozen=True)
class Declaration:
    """A property declaration: ``name: value;``."""

    name: str
    value: str | int | float

    def __str__(self) -> str:
        return f"{self.name}: {_value(self.value)};"


@dataclass(frozen=True)
class VariableDeclaration:
    """A Sass variable: ``$name: value;``."""

    name: str
    value: str | int | float

    @property
    def reference(self) -> str:
        return f"${self.name}"

    def __str__(self) -> str:
        return f"${self.name}: {_value(self.value)};"


@dataclass(frozen=True)
class MediaQueryVariable:
    """A breakpoint marker holding a ``min-width`` media query."""

    name: str  # "mq1", "mq2", ...
    min_width: int

    @property
    def reference(self) -> str:
        return f"${self.name}"

    def __str__(self) -> str:
        return f'${self.name}: "(min-width: #{{{em(self.min_width)}}})";'


@dataclass(frozen=True)
class Comment:
    text: str

    def __str__(self) -> str:
        return f"// {self.text}"


@dataclass(frozen=True)
class Rule:
    """A selector or at-rule with a block of children."""

    selector: str
    children: tuple[Node, ...] = ()

    def __str__(self) -> str:
        out = f"{self.selector} {{"
        if self.children:
            out += "\n"
            out += "\n".join(_indent(str(child)) for child in self.children)
            out += "\n"
        return out + "}"


Node = Declaration | VariableDeclaration | MediaQueryVariable | Comment | Rule | str


def _indent(text: str) -> str:
    return "\n".join(f"{INDENT}{line}" if line else line for line in text.split("\n"))


def render(nodes: list[Node]) -> str:
    """Join top-level nodes, one per line."""
    return "\n".join(str(node) for node in nodes)
