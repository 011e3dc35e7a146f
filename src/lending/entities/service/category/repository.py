"""Category repository."""

from src.lending.entities.core._repository import SoftDeleteRepository

from .entity import Category
from .table import CategoryTable


class CategoryRepository(SoftDeleteRepository[Category, CategoryTable]):
    """Data-access layer for categories."""

    entity_class = Category
    table_class = CategoryTable
    updatable_fields = ("name",)
