"""Entity package: Lendbook."""

from .entity import Lendbook
from .repository import LendbookRepository
from .table import ACTIVE_BOOK_INDEX, LendbookTable

__all__ = ["ACTIVE_BOOK_INDEX", "Lendbook", "LendbookRepository", "LendbookTable"]
