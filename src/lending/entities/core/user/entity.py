"""User domain entity."""

from typing import Any

from pydantic import Field

from src.lending.entities.core._base import Entity


class User(Entity):
    """Library member who can borrow books.

    It inherits from Entity to get auto-generated UUID identifiers.
    """

    name: str = Field(default="", description="User's display name")
    email: str | None = Field(default=None, description="User's email address")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.email))
