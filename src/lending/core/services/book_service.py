"""Book CRUD service."""

from sqlmodel import Session

from src.lending.core.errors import CategoryNotFoundError
from src.lending.core.services.base import EntityService
from src.lending.core.services.validation import ensure_exists
from src.lending.entities.service.book import Book, BookRepository
from src.lending.entities.service.category import CategoryRepository


class BookService(EntityService[Book]):
    """CRUD facade over books.

    A book must be filed under an active category, both when it is
    created and whenever it is updated.
    """

    entity_name = "book"
    repository_class = BookRepository

    def __init__(self, db_session: Session) -> None:
        super().__init__(db_session)
        self._categories = CategoryRepository(db_session)

    def _check_category(self, book: Book) -> None:
        ensure_exists(self._categories, book.category_id, CategoryNotFoundError)

    def _validate_create(self, entity: Book) -> None:
        self._check_category(entity)

    def _validate_update(self, entity: Book) -> None:
        self._check_category(entity)
