import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class InvalidIdentifierError(ValueError):
    """Raised when a textual identifier is not a valid UUID."""


def utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


def new_id() -> str:
    """Generate a fresh entity identifier."""
    return str(uuid.uuid4())


def parse_id(value: str) -> str:
    """Validate a textual identifier and return its canonical form.

    Args:
        value: UUID text, with or without hyphens or braces.

    Returns:
        The lower-case hyphenated UUID string.

    Raises:
        InvalidIdentifierError: If ``value`` is not a UUID.
    """
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError) as e:
        raise InvalidIdentifierError(f"Invalid identifier: {value!r}") from e


def must_parse_id(value: str) -> str:
    """Parse a fixed identifier known to be valid, e.g. in fixtures."""
    return parse_id(value)


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)
    deleted_at: datetime | None = PydanticField(
        default=None, description="Soft-delete marker; set when the entity is retired"
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class EntityTable(SQLModel, table=False):
    """Base table with UUID primary key, timestamps and soft-delete column."""

    id: str = Field(
        primary_key=True,
        default_factory=new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
    deleted_at: datetime | None = Field(default=None, index=True)
