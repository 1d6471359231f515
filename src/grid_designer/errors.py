"""Error hierarchy for the grid designer domain."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_designer.validation.diagnostic import Diagnostic


class GridDesignerError(Exception):
    """Base error for all grid_designer errors."""


class ValidationError(GridDesignerError):
    """Raised when constructed data would violate an invariant.

    Carries the ERROR-severity diagnostics that caused the rejection.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


class PreconditionError(GridDesignerError):
    """A caller broke an operation's contract (unknown id, bad arguments)."""

    def __init__(self, message: str, *, entry_id: str | None = None) -> None:
        super().__init__(message)
        self.entry_id = entry_id


class UnknownEntryError(PreconditionError):
    """An operation named a preferences id that is not in the grid system."""
