"""Category CRUD service."""

from src.lending.core.services.base import EntityService
from src.lending.entities.service.category import Category, CategoryRepository


class CategoryService(EntityService[Category]):
    """Create, update, find and soft-delete categories."""

    entity_name = "category"
    repository_class = CategoryRepository
