"""Tests for the error hierarchy and store failure wrapping."""

import pytest
from sqlalchemy.exc import OperationalError

from src.lending.core.errors import (
    BookIsBusyError,
    BookNotFoundError,
    CategoryNotFoundError,
    ErrorKind,
    LendingError,
    NotFoundError,
    ReferencedEntityNotFoundError,
    StoreError,
    UserNotFoundError,
)
from src.lending.core.services import BookService, LendbookService
from src.lending.entities import Book, Lendbook


class TestErrorKinds:
    @pytest.mark.parametrize(
        "error_class,kind",
        [
            (NotFoundError, ErrorKind.NOT_FOUND),
            (CategoryNotFoundError, ErrorKind.REFERENCE_NOT_FOUND),
            (BookNotFoundError, ErrorKind.REFERENCE_NOT_FOUND),
            (UserNotFoundError, ErrorKind.REFERENCE_NOT_FOUND),
            (BookIsBusyError, ErrorKind.BOOK_IS_BUSY),
            (StoreError, ErrorKind.STORE_FAILURE),
        ],
    )
    def test_kind(self, error_class, kind):
        error = error_class()

        assert error.kind is kind
        assert isinstance(error, LendingError)
        assert str(error) == error_class.default_message

    def test_reference_errors_share_base(self):
        assert issubclass(BookNotFoundError, ReferencedEntityNotFoundError)
        assert BookNotFoundError().entity == "book"
        assert CategoryNotFoundError().entity == "category"

    def test_equality_by_kind(self):
        assert BookNotFoundError("a") == UserNotFoundError("b")
        assert NotFoundError() != BookIsBusyError()
        assert BookIsBusyError() == ErrorKind.BOOK_IS_BUSY

    def test_cause_is_kept(self):
        cause = RuntimeError("disk full")

        error = StoreError("write failed", cause=cause)

        assert error.cause is cause
        assert str(error) == "write failed"


class TestStoreFailures:
    def test_database_error_wrapped(self, monkeypatch: pytest.MonkeyPatch, book_service: BookService):
        def broken_list_all():
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(book_service._repository, "list_all", broken_list_all)

        with pytest.raises(StoreError) as exc_info:
            book_service.find_all()

        assert exc_info.value.kind is ErrorKind.STORE_FAILURE
        assert isinstance(exc_info.value.cause, OperationalError)

    def test_failed_write_rolls_back(
        self, lendbook_service: LendbookService, book_service: BookService, book: Book, fake_id: str
    ):
        with pytest.raises(BookNotFoundError):
            lendbook_service.create(Lendbook(book_id=fake_id, user_id=fake_id))

        assert book_service.find(book.id) == book
        assert lendbook_service.find_all() == []
