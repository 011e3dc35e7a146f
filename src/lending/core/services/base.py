"""Transaction handling and CRUD plumbing shared by the entity services."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.lending.core.errors import LendingError, NotFoundError, StoreError
from src.lending.entities.core._base import Entity, new_id, utc_now
from src.lending.entities.core._repository import SoftDeleteRepository

EntityT = TypeVar("EntityT", bound=Entity)


class EntityService(Generic[EntityT]):
    """CRUD facade over one entity type.

    Each public method runs as one unit of work on the injected session:
    it commits on success and rolls back before re-raising on failure.
    Subclasses hook cross-entity checks into ``_validate_create`` and
    ``_validate_update``.
    """

    entity_name: ClassVar[str] = "record"
    repository_class: ClassVar[type[SoftDeleteRepository[Any, Any]]]

    def __init__(self, db_session: Session) -> None:
        self._db_session = db_session
        self._repository: SoftDeleteRepository[EntityT, Any] = self.repository_class(db_session)

    @contextmanager
    def _unit_of_work(self, operation: str) -> Iterator[None]:
        try:
            yield
            self._db_session.commit()
        except StoreError as e:
            self._db_session.rollback()
            logger.error(
                "Database transaction failed",
                extra={
                    "operation": f"{self.entity_name}.{operation}",
                    "error_type": type(e.cause).__name__,
                    "error_message": str(e.cause or e),
                },
            )
            raise
        except LendingError as e:
            self._db_session.rollback()
            logger.warning(
                "{} {} rejected: {} ({})", self.entity_name, operation, e, e.kind.value
            )
            raise
        except SQLAlchemyError as e:
            self._db_session.rollback()
            logger.error(
                "Database transaction failed",
                extra={
                    "operation": f"{self.entity_name}.{operation}",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise StoreError(f"{self.entity_name} {operation} failed", cause=e) from e

    def _validate_create(self, entity: EntityT) -> None:
        """Check references before insert. No-op by default."""

    def _validate_update(self, entity: EntityT) -> None:
        """Check references before update. No-op by default."""

    def _not_found(self, entity_id: str) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} not found: {entity_id}")

    def _insert(self, entity: EntityT) -> EntityT:
        return self._repository.create(entity)

    def _overwrite(self, entity: EntityT) -> EntityT | None:
        return self._repository.update(entity)

    def create(self, entity: EntityT) -> EntityT:
        """Persist ``entity`` as a new record with a fresh identifier."""
        now = utc_now()
        fresh = entity.model_copy(
            update={"id": new_id(), "created_at": now, "updated_at": now, "deleted_at": None}
        )
        with self._unit_of_work("create"):
            self._validate_create(fresh)
            created = self._insert(fresh)
        logger.info("Created {} {}", self.entity_name, created.id)
        return created

    def update(self, entity: EntityT) -> EntityT:
        """Replace the updatable fields of an existing record."""
        with self._unit_of_work("update"):
            if not self._repository.exists(entity.id):
                raise self._not_found(entity.id)
            self._validate_update(entity)
            updated = self._overwrite(entity)
            if updated is None:
                raise self._not_found(entity.id)
        logger.info("Updated {} {}", self.entity_name, updated.id)
        return updated

    def find(self, entity_id: str) -> EntityT:
        with self._unit_of_work("find"):
            entity = self._repository.get(entity_id)
            if entity is None:
                raise self._not_found(entity_id)
        return entity

    def find_all(self) -> list[EntityT]:
        with self._unit_of_work("find_all"):
            entities = self._repository.list_all()
        return entities

    def delete(self, entity_id: str) -> None:
        """Soft-delete the record; it stays in the table with ``deleted_at`` set."""
        with self._unit_of_work("delete"):
            if not self._repository.delete(entity_id):
                raise self._not_found(entity_id)
        logger.info("Deleted {} {}", self.entity_name, entity_id)
