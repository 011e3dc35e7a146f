"""Lendbook repository."""

from sqlmodel import select

from src.lending.entities.core._repository import SoftDeleteRepository

from .entity import Lendbook
from .table import LendbookTable


class LendbookRepository(SoftDeleteRepository[Lendbook, LendbookTable]):
    """Data-access layer for lendbooks."""

    entity_class = Lendbook
    table_class = LendbookTable
    updatable_fields = ("book_id", "user_id")

    def get_active_by_book(
        self, book_id: str, exclude_id: str | None = None
    ) -> Lendbook | None:
        """Return the active lendbook on ``book_id``, skipping ``exclude_id``."""
        statement = select(LendbookTable).where(
            LendbookTable.book_id == book_id,
            LendbookTable.deleted_at.is_(None),  # type: ignore[union-attr]
        )
        if exclude_id is not None:
            statement = statement.where(LendbookTable.id != exclude_id)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
