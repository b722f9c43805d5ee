# backend/mailcheck/verifier/__init__.py

from .checks import (
    CHECK_TEMPLATE,
    CheckId,
    CheckItem,
    CheckOutcome,
    ValidationReport,
    initial_checks,
)
from .syntax_engine import validate_email_format

__all__ = [
    "CHECK_TEMPLATE",
    "CheckId",
    "CheckItem",
    "CheckOutcome",
    "ValidationReport",
    "initial_checks",
    "validate_email_format",
]
