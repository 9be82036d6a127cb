"""
Top-level package for the library manager.

The core lives in ``library_manager.app``: ``core`` holds settings,
logging, error kinds and persistence; ``schemas`` the pydantic models;
``services`` the business rules for books, users and loans.
"""

from .app.main import Library, create_library

__all__ = ["Library", "create_library"]
