from grid_designer.scss.ast import (
    Comment,
    Declaration,
    MediaQueryVariable,
    Rule,
    VariableDeclaration,
)
from grid_designer.scss.generator import (
    GridVariables,
    generate_scss,
    grid_variables,
    media_query_variables,
)

__all__ = [
    "generate_scss",
    "media_query_variables",
    "grid_variables",
    "GridVariables",
    "Comment",
    "Declaration",
    "MediaQueryVariable",
    "Rule",
    "VariableDeclaration",
]
