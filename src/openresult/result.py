"""Result types for explicit error handling.

A :class:`Result` reports success or failure of an operation with no
payload. A :class:`ValueResult` additionally carries a value on success.
Failures always carry an :class:`~openresult.error.Error`.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Tuple, TypeVar, overload

from .error import Error
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


def _require_error(error: Any, factory: str) -> Error:
    """Validate the error handed to a failure factory."""
    if error is None:
        message = (
            f"{factory} was called with a None error. "
            "Every failure must provide a non-None Error instance."
        )
        logger.debug(message)
        raise InvalidArgumentError(message, argument="error")
    if not isinstance(error, Error):
        message = (
            f"{factory} expects an Error instance, "
            f"got {type(error).__name__}."
        )
        logger.debug(message)
        raise InvalidArgumentError(message, argument="error")
    return error


@dataclass(frozen=True)
class Result:
    """Outcome of an operation that returns nothing on success.

    Use :meth:`success` and :meth:`failure` to build instances.

    Attributes:
        error: The failure reason, ``None`` on success
    """

    error: Optional[Error] = None

    def __post_init__(self):
        if self.error is not None:
            _require_error(self.error, "Result")

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def succeeded(self) -> bool:
        return self.is_success

    def failed(self) -> bool:
        return self.is_failure

    def failed_with(self) -> Tuple[bool, Optional[Error]]:
        """Return the failure flag together with the error (``None`` on success)."""
        return self.is_failure, self.error

    @overload
    @classmethod
    def success(cls) -> "Result": ...

    @overload
    @classmethod
    def success(cls, value: T) -> "ValueResult[T]": ...

    @classmethod
    def success(cls, value: Any = _MISSING) -> Any:
        """Create a successful result.

        Args:
            value: Optional payload. When given, the call is delegated to
                   :meth:`ValueResult.success` and a ``ValueResult`` is returned.

        Raises:
            InvalidArgumentError: If ``value`` is passed explicitly as ``None``.
        """
        if value is _MISSING:
            return cls()
        return ValueResult.success(value)

    @classmethod
    def failure(cls, error: Error) -> "Result":
        """Create a failed result holding ``error``.

        Raises:
            InvalidArgumentError: If ``error`` is ``None`` or not an Error.
        """
        return cls(_require_error(error, "Result.failure"))


@dataclass(frozen=True)
class ValueResult(Generic[T]):
    """Outcome of an operation that returns a value of type ``T`` on success.

    A success always holds a non-None value and no error; a failure always
    holds an error and no value. The payload is left out of the hash, so
    results holding unhashable values can still be hashed.

    Attributes:
        value: The payload, ``None`` on failure
        error: The failure reason, ``None`` on success
    """

    value: Optional[T] = field(default=None, hash=False)
    error: Optional[Error] = None

    def __post_init__(self):
        if self.error is None:
            if self.value is None:
                message = "ValueResult needs either a non-None value or an Error."
                logger.debug(message)
                raise InvalidArgumentError(message, argument="value")
        else:
            _require_error(self.error, "ValueResult")
            if self.value is not None:
                message = "A failed ValueResult cannot also hold a value."
                logger.debug(message)
                raise InvalidArgumentError(message, argument="value")

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def succeeded(self) -> bool:
        return self.is_success

    def succeeded_with(self) -> Tuple[bool, Optional[T]]:
        """Return the success flag together with the value (``None`` on failure)."""
        return self.is_success, self.value

    def failed(self) -> bool:
        return self.is_failure

    def failed_with(self) -> Tuple[bool, Optional[Error]]:
        """Return the failure flag together with the error (``None`` on success)."""
        return self.is_failure, self.error

    @classmethod
    def success(cls, value: T) -> "ValueResult[T]":
        """Create a successful result holding ``value``.

        Raises:
            InvalidArgumentError: If ``value`` is ``None``.
        """
        if value is None:
            message = (
                "ValueResult.success was called with a None value. "
                "Every successful result must provide a non-None value."
            )
            logger.debug(message)
            raise InvalidArgumentError(message, argument="value")
        return cls(value=value)

    @classmethod
    def failure(cls, error: Error) -> "ValueResult[T]":
        """Create a failed result holding ``error`` and no value.

        Raises:
            InvalidArgumentError: If ``error`` is ``None`` or not an Error.
        """
        return cls(error=_require_error(error, "ValueResult.failure"))
