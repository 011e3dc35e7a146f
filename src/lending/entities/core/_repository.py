"""Shared data-access behaviour for soft-deletable entities."""

from typing import Generic, TypeVar

from sqlmodel import Session, select

from src.lending.entities.core._base import Entity, EntityTable, utc_now

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class SoftDeleteRepository(Generic[EntityT, TableT]):
    """Data-access layer mapping a domain entity onto its table.

    Rows whose ``deleted_at`` is set are invisible to every read. The
    repository flushes but never commits; the caller owns the transaction.
    Subclasses set ``entity_class``, ``table_class`` and ``updatable_fields``.
    """

    entity_class: type[EntityT]
    table_class: type[TableT]
    updatable_fields: tuple[str, ...] = ()

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_class.model_validate(row, from_attributes=True)

    def _get_row(self, entity_id: str) -> TableT | None:
        statement = select(self.table_class).where(
            self.table_class.id == entity_id,
            self.table_class.deleted_at.is_(None),  # type: ignore[union-attr]
        )
        return self._session.exec(statement).first()

    def get(self, entity_id: str) -> EntityT | None:
        row = self._get_row(entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, entity_id: str) -> bool:
        return self._get_row(entity_id) is not None

    def list_all(self) -> list[EntityT]:
        """Return active rows ordered by ``created_at``.

        Rows sharing a timestamp are ordered by ``id``, not by insertion.
        """
        statement = (
            select(self.table_class)
            .where(self.table_class.deleted_at.is_(None))  # type: ignore[union-attr]
            .order_by(self.table_class.created_at, self.table_class.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def create(self, entity: EntityT) -> EntityT:
        row = self.table_class.model_validate(entity, from_attributes=True)
        row.deleted_at = None
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity: EntityT) -> EntityT | None:
        """Overwrite the updatable fields of an active row.

        Returns None when the row does not exist or is soft-deleted.
        """
        row = self._get_row(entity.id)
        if row is None:
            return None
        for field_name in self.updatable_fields:
            setattr(row, field_name, getattr(entity, field_name))
        row.updated_at = utc_now()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        """Soft-delete an active row. Returns False when there is none."""
        row = self._get_row(entity_id)
        if row is None:
            return False
        now = utc_now()
        row.deleted_at = now
        row.updated_at = now
        self._session.add(row)
        self._session.flush()
        return True
