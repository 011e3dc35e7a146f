"""User CRUD service."""

from src.lending.core.services.base import EntityService
from src.lending.entities.core.user import User, UserRepository


class UserService(EntityService[User]):
    """Create, update, find and soft-delete library users."""

    entity_name = "user"
    repository_class = UserRepository
