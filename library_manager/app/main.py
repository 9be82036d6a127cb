"""
Main entrypoint for the library core.

``create_library`` sets up logging, opens the catalog from the
configured storage and wires the services to one shared store.  A
presentation layer (web page, desktop form, test) builds a ``Library``
once per session and calls its services, re-rendering from the
returned results::

    library = create_library()
    result = library.books.add_book("Dune", "Frank Herbert", "0-4410-1359-7", 1965, "SF")
    if result.success:
        library.loans.borrow_book(user_id=1, book_id=result.data.id)

Settings such as the storage path and log level come from
``core.config``.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import JsonFileStorage, StorageAdapter
from .core.store import CatalogStore
from .schemas.book import Book
from .schemas.user import User
from .services.book_service import BookService
from .services.loan_service import LoanService
from .services.suggestion_service import suggest_available_books, suggest_users
from .services.user_service import UserService


class Library:
    """The three services sharing one catalog store."""

    def __init__(self, store: CatalogStore, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self.books = BookService(store, today=today)
        self.users = UserService(store)
        self.loans = LoanService(store, today=today)

    def suggest_users(self, query: str) -> List[User]:
        return suggest_users(self.store.catalog, query)

    def suggest_books(self, query: str) -> List[Book]:
        return suggest_available_books(self.store.catalog, query)


def create_library(
    storage: Optional[StorageAdapter] = None,
    today: Callable[[], date] = date.today,
) -> Library:
    """Create a ``Library`` backed by ``storage``.

    Parameters
    ----------
    storage : Optional[StorageAdapter]
        Where the catalog lives.  Defaults to a ``JsonFileStorage`` at
        ``settings.get_storage_path()``.
    today : Callable[[], date]
        Source of the current date for loans and year validation.

    Returns
    -------
    Library
        A library whose catalog has been loaded, or is empty when
        nothing was stored yet.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    if storage is None:
        storage = JsonFileStorage(settings.get_storage_path())
    logging.getLogger(__name__).info(
        "Starting %s with %s", settings.project_name, type(storage).__name__
    )
    return Library(CatalogStore.open(storage), today=today)
