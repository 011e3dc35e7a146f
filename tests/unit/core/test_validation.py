"""Tests for the shared pre-write checks."""

import pytest
from sqlmodel import Session

from src.lending.core.errors import BookIsBusyError, CategoryNotFoundError, UserNotFoundError
from src.lending.core.services.validation import ensure_book_available, ensure_exists
from src.lending.entities import (
    Book,
    Category,
    CategoryRepository,
    Lendbook,
    LendbookRepository,
    User,
    UserRepository,
)


def test_ensure_exists_returns_entity(session: Session, category: Category):
    found = ensure_exists(CategoryRepository(session), category.id, CategoryNotFoundError)

    assert found == category


def test_ensure_exists_raises_given_error(session: Session, fake_id: str):
    with pytest.raises(UserNotFoundError, match=f"referenced user not found: {fake_id}"):
        ensure_exists(UserRepository(session), fake_id, UserNotFoundError)


def test_ensure_book_available(session: Session, book: Book, user: User):
    lendbooks = LendbookRepository(session)
    ensure_book_available(lendbooks, book.id)

    loan = lendbooks.create(Lendbook(book_id=book.id, user_id=user.id))

    with pytest.raises(BookIsBusyError, match=loan.id):
        ensure_book_available(lendbooks, book.id)
    ensure_book_available(lendbooks, book.id, exclude_id=loan.id)
