"""Unit tests for BookService."""

import pytest

from src.lending.core.errors import CategoryNotFoundError, ErrorKind, NotFoundError
from src.lending.core.services import BookService, CategoryService
from src.lending.entities import Book, Category


class TestBookService:
    """Book CRUD and category checks."""

    def test_create_and_find(self, book_service: BookService, category: Category):
        created = book_service.create(
            Book(name="Dune", description="Sand and spice", category_id=category.id)
        )

        found = book_service.find(created.id)

        assert found == created
        assert found.category_id == category.id

    def test_create_requires_category(self, book_service: BookService, fake_id: str):
        with pytest.raises(CategoryNotFoundError) as exc_info:
            book_service.create(Book(name="Orphan", category_id=fake_id))

        assert exc_info.value.kind is ErrorKind.REFERENCE_NOT_FOUND
        assert fake_id in str(exc_info.value)
        assert book_service.find_all() == []

    def test_create_rejects_deleted_category(
        self, book_service: BookService, category_service: CategoryService
    ):
        retired = category_service.create(Category(name="Retired"))
        category_service.delete(retired.id)

        with pytest.raises(CategoryNotFoundError):
            book_service.create(Book(name="Late", category_id=retired.id))

    def test_update_overwrites_fields(
        self, book_service: BookService, category_service: CategoryService, book: Book
    ):
        science = category_service.create(Category(name="Science"))

        updated = book_service.update(
            Book(id=book.id, name="Physics", description="", category_id=science.id)
        )

        assert updated.name == "Physics"
        assert updated.description == ""
        assert updated.category_id == science.id
        assert book_service.find(book.id) == updated

    def test_update_unknown_book(self, book_service: BookService, category: Category, fake_id: str):
        with pytest.raises(NotFoundError):
            book_service.update(Book(id=fake_id, name="Ghost", category_id=category.id))

    def test_update_missing_before_category(self, book_service: BookService, fake_id: str):
        # Both the book and its category are unknown; the book is reported.
        with pytest.raises(NotFoundError):
            book_service.update(Book(id=fake_id, name="Ghost", category_id=fake_id))

    def test_update_with_unknown_category(
        self, book_service: BookService, book: Book, fake_id: str
    ):
        with pytest.raises(CategoryNotFoundError):
            book_service.update(book.model_copy(update={"category_id": fake_id}))

        assert book_service.find(book.id).category_id == book.category_id

    def test_delete_is_soft(self, book_service: BookService, book: Book):
        book_service.delete(book.id)

        with pytest.raises(NotFoundError):
            book_service.find(book.id)
        assert book not in book_service.find_all()

    def test_delete_unknown(self, book_service: BookService, fake_id: str):
        with pytest.raises(NotFoundError):
            book_service.delete(fake_id)

    def test_find_all(self, book_service: BookService, book: Book, other_book: Book):
        assert book_service.find_all() == [book, other_book]
