"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.lending.entities.core._base import Entity


class Book(Entity):
    """Book entity representing a title in the library catalogue.

    This is the domain model that contains business logic and validation.
    It inherits from Entity to get auto-generated UUID identifiers.
    """

    name: str = Field(default="", description="Name")
    description: str = Field(default="", description="Description")
    category_id: str = Field(description="Identifier of the category the book is filed under")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.category_id == other.category_id
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.category_id,
        ))
