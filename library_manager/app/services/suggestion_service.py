"""
Autocomplete helpers for the borrow form.

The form offers users and available books as the librarian types.  Each
record type has its own label function; ``suggest`` filters any list of
records by a label function, so no common base class is needed.
"""

from typing import Callable, List, Sequence, TypeVar

from ..schemas.book import Book
from ..schemas.catalog import Catalog
from ..schemas.user import User

T = TypeVar("T")

# Shorter queries produce no suggestions.
MIN_QUERY_LENGTH = 2


def user_label(user: User) -> str:
    return f"{user.name} ({user.email})"


def book_label(book: Book) -> str:
    return f"{book.title} - {book.author}"


def suggest(
    items: Sequence[T],
    query: str,
    label: Callable[[T], str],
    min_length: int = MIN_QUERY_LENGTH,
) -> List[T]:
    """Return the items whose label contains ``query``, ignoring case."""
    term = query.strip().lower()
    if len(term) < min_length:
        return []
    return [item for item in items if term in label(item).lower()]


def suggest_users(catalog: Catalog, query: str) -> List[User]:
    return suggest(catalog.users, query, user_label)


def suggest_available_books(catalog: Catalog, query: str) -> List[Book]:
    """Only books that can be borrowed right now are offered."""
    return suggest([b for b in catalog.books if b.available], query, book_label)
