"""Diagnostic model: structured validation messages for grid systems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a range, preferences, or grid system.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        entry_id: The preferences entry involved, if applicable.
        field: The offending field name, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    entry_id: str | None = None
    field: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_json(self) -> dict[str, str]:
        data = {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.entry_id:
            data["entryId"] = self.entry_id
        if self.field:
            data["field"] = self.field
        if self.fix:
            data["fix"] = self.fix
        return data

    def __str__(self) -> str:
        location = ""
        if self.entry_id:
            location = f" [entry={self.entry_id}]"
        elif self.field:
            location = f" [field={self.field}]"
        return f"{self.severity.value}{location}: {self.message}"
