"""Immutable, chainable failure descriptor."""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True, eq=False)
class Error:
    """Describes why an operation failed.

    Equality and hashing walk the cause chain with a loop, so long chains
    compare without hitting the recursion limit.

    Attributes:
        message: Human-readable description
        code: Optional identifier for programmatic matching
        exception: Optional exception that triggered this error
        inner_error: Optional underlying cause
    """

    message: str = ""
    code: Optional[str] = None
    exception: Optional[BaseException] = None
    inner_error: Optional["Error"] = None

    def __str__(self) -> str:
        if self.code is not None:
            return f"[{self.code}] {self.message}"
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        for left, right in zip_longest(self.chain(), other.chain()):
            if left is None or right is None:
                return False
            if left is right:
                return True
            if left._link() != right._link():
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple(e._link() for e in self.chain()))

    def __repr__(self) -> str:
        links = list(self.chain())
        head = "".join(
            f"Error(message={e.message!r}, code={e.code!r}, "
            f"exception={e.exception!r}, inner_error="
            for e in links
        )
        return head + "None" + ")" * len(links)

    def _link(self) -> tuple:
        return self.message, self.code, self.exception

    @property
    def root(self) -> "Error":
        """Deepest error in the cause chain, or ``self`` if there is none."""
        current = self
        while current.inner_error is not None:
            current = current.inner_error
        return current

    def chain(self) -> Iterator["Error"]:
        """Iterate from this error down to its root cause."""
        current: Optional[Error] = self
        while current is not None:
            yield current
            current = current.inner_error

    def is_exceptional(self) -> bool:
        return self.exception is not None

    def is_exceptional_with(self) -> Tuple[bool, Optional[BaseException]]:
        """Return the exceptional flag together with the captured exception."""
        return self.exception is not None, self.exception
