"""Result type returned by every data access call.

Store operations never raise for expected conditions. They return either
``Ok(data)`` or ``Err(error)``; ``data`` and ``error`` are readable on both
variants so callers can inspect a result without narrowing it first.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

# PostgREST reports "zero rows for a single-object request" with these codes.
NO_ROWS_CODES = frozenset({"PGRST116", "204"})


class StoreErrorKind(str, Enum):
    """Classification of a failed store call."""

    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class StoreError:
    """Error surfaced by the remote store, carried as data."""

    kind: StoreErrorKind
    message: str
    code: str | None = None
    details: Any = None

    @classmethod
    def not_found(cls, message: str = "No rows found") -> "StoreError":
        """Build the distinguished "no rows" error."""
        return cls(kind=StoreErrorKind.NOT_FOUND, message=message, code="PGRST116")

    @property
    def is_not_found(self) -> bool:
        return self.kind is StoreErrorKind.NOT_FOUND


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful store call."""

    data: T

    @property
    def error(self) -> None:
        return None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed store call."""

    error: StoreError

    @property
    def data(self) -> None:
        return None

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
