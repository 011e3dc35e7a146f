"""Entity: Category."""

from typing import Any

from pydantic import Field

from src.lending.entities.core._base import Entity


class Category(Entity):
    """Shelf category a book belongs to."""

    name: str = Field(default="", description="Name")

    def __eq__(self, other: Any) -> bool:
        """Compare categories by business attributes, ignoring timestamps."""
        if not isinstance(other, Category):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))
