"""Custom exceptions for openresult.

Expected failures are carried as :class:`~openresult.error.Error` values.
The exceptions here only signal caller mistakes at the construction
boundary of a result.
"""

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Types of contract violations raised by openresult."""

    INVALID_ARGUMENT = "invalid_argument"


class OpenResultError(Exception):
    """Base exception for all openresult errors.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum, fixed per subclass
        details: Optional dict with additional error context
    """

    error_type = ErrorType.INVALID_ARGUMENT

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(OpenResultError, ValueError):
    """Raised when a factory receives a missing or wrongly typed argument."""

    error_type = ErrorType.INVALID_ARGUMENT

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs):
        details = {"argument": argument} if argument else {}
        details.update(kwargs)
        super().__init__(message, details)
