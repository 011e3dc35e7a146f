"""Error kinds raised by the lending services.

Every error carries an ``ErrorKind`` so callers can branch on the kind
instead of the concrete class, and an optional ``cause`` holding the
underlying exception.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    REFERENCE_NOT_FOUND = "reference_not_found"
    BOOK_IS_BUSY = "book_is_busy"
    STORE_FAILURE = "store_failure"


class LendingError(Exception):
    """Base class for all service errors."""

    kind: ErrorKind = ErrorKind.STORE_FAILURE
    default_message = "lending operation failed"

    def __init__(self, message: str | None = None, *, cause: BaseException | None = None) -> None:
        super().__init__(message or self.default_message)
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LendingError):
            return self.kind == other.kind
        if isinstance(other, ErrorKind):
            return self.kind == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


class NotFoundError(LendingError):
    """The targeted record does not exist or is soft-deleted."""

    kind = ErrorKind.NOT_FOUND
    default_message = "record not found"


class ReferencedEntityNotFoundError(LendingError):
    """A foreign-key field does not resolve to an active record."""

    kind = ErrorKind.REFERENCE_NOT_FOUND
    default_message = "referenced record not found"
    entity: str = "record"


class CategoryNotFoundError(ReferencedEntityNotFoundError):
    default_message = "referenced category not found"
    entity = "category"


class BookNotFoundError(ReferencedEntityNotFoundError):
    default_message = "referenced book not found"
    entity = "book"


class UserNotFoundError(ReferencedEntityNotFoundError):
    default_message = "referenced user not found"
    entity = "user"


class BookIsBusyError(LendingError):
    """The book already has an active lendbook."""

    kind = ErrorKind.BOOK_IS_BUSY
    default_message = "book is busy"


class StoreError(LendingError):
    """Any other persistence failure, wrapped with its cause."""

    kind = ErrorKind.STORE_FAILURE
    default_message = "store operation failed"
