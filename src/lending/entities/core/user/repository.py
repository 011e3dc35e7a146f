"""User repository."""

from src.lending.entities.core._repository import SoftDeleteRepository

from .entity import User
from .table import UserTable


class UserRepository(SoftDeleteRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_class = User
    table_class = UserTable
    updatable_fields = ("name", "email")
