"""openresult - Explicit success/failure values instead of exceptions"""

__version__ = "0.1.0"

from .error import Error
from .exceptions import ErrorType, InvalidArgumentError, OpenResultError
from .result import Result, ValueResult

__all__ = [
    # Values
    "Error",
    "Result",
    "ValueResult",
    # Exceptions
    "OpenResultError",
    "ErrorType",
    "InvalidArgumentError",
]
