from grid_designer.errors import ValidationError
from grid_designer.validation.diagnostic import Diagnostic, Severity
from grid_designer.validation.rules import (
    GRID_SYSTEM_RULES,
    PREFERENCES_RULES,
    RANGE_RULES,
)
from grid_designer.validation.validator import validate, validate_or_raise

__all__ = [
    "Diagnostic",
    "Severity",
    "ValidationError",
    "validate",
    "validate_or_raise",
    "RANGE_RULES",
    "PREFERENCES_RULES",
    "GRID_SYSTEM_RULES",
]
