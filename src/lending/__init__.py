"""Library lending service: CRUD over books, categories, users and loans."""

__version__ = "0.1.0"
