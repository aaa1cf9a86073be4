"""
Parse results for untyped JSON input.

Parsing a section or column never coerces: it either produces a value
or a MalformedDocumentError describing the failed shape check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from chuk_tab.errors import MalformedDocumentError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a JSON shape check: exactly one of value or error is set."""

    value: T | None = None
    error: MalformedDocumentError | None = None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> ParseResult[T]:
        return cls(error=MalformedDocumentError(message))

    @property
    def is_ok(self) -> bool:
        """Return True if parsing succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the parsed value, raising the parse error on failure."""
        if self.error is not None:
            raise self.error
        return cast(T, self.value)

    def __bool__(self) -> bool:
        """Boolean conversion returns is_ok."""
        return self.is_ok
