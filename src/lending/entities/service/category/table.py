"""Category database table model."""

from src.lending.entities.core._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    name: str = ""
