"""Lendbook database table model."""

from sqlalchemy import Index, text
from sqlmodel import Field

from src.lending.entities.core._base import EntityTable

ACTIVE_BOOK_INDEX = "uq_lendbook_active_book"


class LendbookTable(EntityTable, table=True):
    """Database persistence model for lendbooks.

    The partial unique index allows one active loan per book; soft-deleted
    rows are outside the index.
    """

    __table_args__ = (
        Index(
            ACTIVE_BOOK_INDEX,
            "book_id",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    book_id: str = Field(foreign_key="booktable.id", index=True)
    user_id: str = Field(foreign_key="usertable.id", index=True)
