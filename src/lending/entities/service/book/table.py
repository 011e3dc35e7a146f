"""Book database table model."""

from sqlmodel import Field

from src.lending.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    name: str = ""
    description: str = ""
    category_id: str = Field(foreign_key="categorytable.id", index=True)
