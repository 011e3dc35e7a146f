from __future__ import annotations

import pytest
from sqlmodel import Session

from src.lending.core.services import (
    BookService,
    CategoryService,
    LendbookService,
    UserService,
)
from src.lending.entities import Book, Category, User

__all__ = [
    "book",
    "book_service",
    "category",
    "category_service",
    "lendbook_service",
    "other_book",
    "other_user",
    "user",
    "user_service",
]


@pytest.fixture
def category_service(session: Session) -> CategoryService:
    return CategoryService(session)


@pytest.fixture
def user_service(session: Session) -> UserService:
    return UserService(session)


@pytest.fixture
def book_service(session: Session) -> BookService:
    return BookService(session)


@pytest.fixture
def lendbook_service(session: Session) -> LendbookService:
    return LendbookService(session)


@pytest.fixture
def category(category_service: CategoryService) -> Category:
    return category_service.create(Category(name="English"))


@pytest.fixture
def user(user_service: UserService) -> User:
    return user_service.create(User(name="Ada Lovelace", email="ada@example.com"))


@pytest.fixture
def other_user(user_service: UserService) -> User:
    return user_service.create(User(name="Alan Turing", email="alan@example.com"))


@pytest.fixture
def book(book_service: BookService, category: Category) -> Book:
    return book_service.create(
        Book(name="Grammar Basics", description="An English primer", category_id=category.id)
    )


@pytest.fixture
def other_book(book_service: BookService, category: Category) -> Book:
    return book_service.create(
        Book(name="Calculus", description="Limits and series", category_id=category.id)
    )
