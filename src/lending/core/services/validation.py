"""Checks shared by the services before they write."""

from typing import Any, TypeVar

from src.lending.core.errors import BookIsBusyError, LendingError
from src.lending.entities.core._base import Entity
from src.lending.entities.core._repository import SoftDeleteRepository
from src.lending.entities.service.lendbook import LendbookRepository

EntityT = TypeVar("EntityT", bound=Entity)


def ensure_exists(
    repository: SoftDeleteRepository[EntityT, Any],
    entity_id: str,
    error: type[LendingError],
) -> EntityT:
    """Return the active entity with ``entity_id`` or raise ``error``."""
    entity = repository.get(entity_id)
    if entity is None:
        raise error(f"{error.default_message}: {entity_id}")
    return entity


def ensure_book_available(
    lendbooks: LendbookRepository, book_id: str, exclude_id: str | None = None
) -> None:
    """Raise BookIsBusyError when another active lendbook holds ``book_id``."""
    holder = lendbooks.get_active_by_book(book_id, exclude_id=exclude_id)
    if holder is not None:
        raise BookIsBusyError(f"book {book_id} is lent by lendbook {holder.id}")
