"""User database table model."""

from src.lending.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    name: str = ""
    email: str | None = None
