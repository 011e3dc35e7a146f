"""Lendbook CRUD service enforcing the one-active-loan-per-book rule."""

from collections.abc import Callable
from typing import TypeVar

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.lending.core.errors import BookNotFoundError, StoreError, UserNotFoundError
from src.lending.core.services.base import EntityService
from src.lending.core.services.validation import ensure_book_available, ensure_exists
from src.lending.entities.core.user import UserRepository
from src.lending.entities.service.book import BookRepository
from src.lending.entities.service.lendbook import Lendbook, LendbookRepository

ResultT = TypeVar("ResultT")


class LendbookService(EntityService[Lendbook]):
    """CRUD facade over lendbooks.

    Writes are checked in this order: the referenced book exists, the
    referenced user exists, and no other active lendbook holds the book.
    The record being updated never counts against itself, so re-saving a
    lendbook on its own book succeeds.

    The in-service busy check fails fast; the partial unique index on
    ``lendbooktable.book_id`` is what serialises concurrent writers. An
    integrity error from the store is re-checked and reported as
    ``BookIsBusyError`` when another loan won the race.
    """

    entity_name = "lendbook"
    repository_class = LendbookRepository

    def __init__(self, db_session: Session) -> None:
        super().__init__(db_session)
        self._lendbooks: LendbookRepository = self._repository  # type: ignore[assignment]
        self._books = BookRepository(db_session)
        self._users = UserRepository(db_session)

    def _check_references(self, lendbook: Lendbook) -> None:
        ensure_exists(self._books, lendbook.book_id, BookNotFoundError)
        ensure_exists(self._users, lendbook.user_id, UserNotFoundError)
        ensure_book_available(self._lendbooks, lendbook.book_id, exclude_id=lendbook.id)

    def _validate_create(self, entity: Lendbook) -> None:
        self._check_references(entity)

    def _validate_update(self, entity: Lendbook) -> None:
        self._check_references(entity)

    def _guarded_write(self, write: Callable[[Lendbook], ResultT], lendbook: Lendbook) -> ResultT:
        try:
            return write(lendbook)
        except IntegrityError as e:
            self._db_session.rollback()
            logger.warning("Integrity error writing lendbook {}; re-checking book {}", lendbook.id, lendbook.book_id)
            ensure_book_available(self._lendbooks, lendbook.book_id, exclude_id=lendbook.id)
            raise StoreError(f"lendbook write failed for book {lendbook.book_id}", cause=e) from e

    def _insert(self, entity: Lendbook) -> Lendbook:
        return self._guarded_write(super()._insert, entity)

    def _overwrite(self, entity: Lendbook) -> Lendbook | None:
        return self._guarded_write(super()._overwrite, entity)

    def find_by_book(self, book_id: str) -> Lendbook | None:
        """Return the active lendbook holding ``book_id``, if any."""
        with self._unit_of_work("find_by_book"):
            holder = self._lendbooks.get_active_by_book(book_id)
        return holder
