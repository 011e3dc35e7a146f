"""Book repository."""

from src.lending.entities.core._repository import SoftDeleteRepository

from .entity import Book
from .table import BookTable


class BookRepository(SoftDeleteRepository[Book, BookTable]):
    """Data-access layer for books."""

    entity_class = Book
    table_class = BookTable
    updatable_fields = ("name", "description", "category_id")
