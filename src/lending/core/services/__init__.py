"""Core services exports."""

# Database Service
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Entity Services
from .book_service import BookService
from .category_service import CategoryService
from .lendbook_service import LendbookService
from .user_service import UserService

__all__ = [
    # Entity Services
    "BookService",
    "CategoryService",
    "LendbookService",
    "UserService",
    # Database Service
    "DbManageService",
    "DbSessionService",
]
