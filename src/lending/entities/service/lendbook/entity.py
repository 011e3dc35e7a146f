"""Entity: Lendbook."""

from typing import Any

from pydantic import Field

from src.lending.entities.core._base import Entity


class Lendbook(Entity):
    """A loan of a book to a user.

    A book is busy while a lendbook that references it is not soft-deleted.
    """

    book_id: str = Field(description="Identifier of the lent book")
    user_id: str = Field(description="Identifier of the borrowing user")

    def __eq__(self, other: Any) -> bool:
        """Compare lendbooks by business attributes, ignoring timestamps."""
        if not isinstance(other, Lendbook):
            return False

        return (
            self.id == other.id
            and self.book_id == other.book_id
            and self.user_id == other.user_id
        )

    def __hash__(self) -> int:
        return hash((self.id, self.book_id, self.user_id))
