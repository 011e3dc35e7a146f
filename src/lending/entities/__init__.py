"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import User, UserRepository, UserTable
from .service.book import Book, BookRepository, BookTable
from .service.category import Category, CategoryRepository, CategoryTable
from .service.lendbook import Lendbook, LendbookRepository, LendbookTable

__all__ = [
    "Book",
    "BookRepository",
    "BookTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Lendbook",
    "LendbookRepository",
    "LendbookTable",
    "User",
    "UserRepository",
    "UserTable",
]
