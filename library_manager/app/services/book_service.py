"""
Business logic for books.

``BookService`` validates and adds books, removes them and searches the
catalogue.  Validation follows the rules of the paper form it replaced:
every field is mandatory, the ISBN must use one of the two hyphenated
layouts accepted by ``check_isbn`` and the publication year must lie
between 1000 and the current year.  ISBNs are unique.

Removing a book does not touch its loans; a loan may therefore refer to
a book that no longer exists.
"""

import logging
import re
from datetime import date
from typing import Callable, List, Optional

from ..core.exceptions import DOMAIN_ERRORS, NotFoundError, ValidationError
from ..core.store import CatalogStore
from ..schemas.book import Book
from ..schemas.result import OperationResult

ISBN_10 = "ISBN-10"
ISBN_13 = "ISBN-13"

_ISBN_10_RE = re.compile(r"[0-9]-[0-9]{4}-[0-9]{4}-[0-9X]")
_ISBN_13_RE = re.compile(r"978-[0-9]-[0-9]{4}-[0-9]{4}-[0-9]")

MIN_YEAR = 1000


def check_isbn(isbn: str) -> Optional[str]:
    """Return ``"ISBN-10"`` or ``"ISBN-13"`` for a well-formed ISBN, else ``None``.

    Only the hyphenated layouts ``D-DDDD-DDDD-C`` (``C`` a digit or
    ``X``) and ``978-D-DDDD-DDDD-D`` are accepted.  Check digits are
    not verified.
    """
    if _ISBN_10_RE.fullmatch(isbn):
        return ISBN_10
    if _ISBN_13_RE.fullmatch(isbn):
        return ISBN_13
    return None


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_year(value) -> int:
    """Return ``value`` as a year if it is an ``int`` or an integer string.

    Floats and booleans are refused rather than truncated.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError("Publication year must be a whole number.")


class BookService:
    """Service for adding, removing and searching books."""

    def __init__(self, store: CatalogStore, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self.today = today

    def add_book(self, title: str, author: str, isbn: str, year, genre: str) -> OperationResult[Book]:
        """Validate and add a book.

        ``year`` may be an ``int`` or a numeric string as read from a
        form field.  On success the new book is available and the
        catalog has been persisted.
        """
        logger = logging.getLogger(__name__)
        try:
            book = self._create_book(title, author, isbn, year, genre)
        except DOMAIN_ERRORS as exc:
            logger.info("Book rejected: %s", exc)
            return OperationResult[Book].fail(exc)
        logger.info("Added book %s '%s' (%s)", book.id, book.title, book.isbn)
        return OperationResult[Book].ok("Book added.", book)

    def _create_book(self, title, author, isbn, year, genre) -> Book:
        if any(_is_blank(v) for v in (title, author, isbn, year, genre)):
            raise ValidationError("All fields are required.")
        if not all(isinstance(v, str) for v in (title, author, isbn, genre)):
            raise ValidationError("Title, author, ISBN and genre must be text.")
        if check_isbn(isbn) is None:
            raise ValidationError("Invalid ISBN (only ISBN-10 or ISBN-13 are accepted).")
        year = parse_year(year)
        if year < MIN_YEAR or year > self.today().year:
            raise ValidationError("Invalid publication year.")

        catalog = self.store.catalog
        if any(b.isbn == isbn for b in catalog.books):
            raise ValidationError("A book with this ISBN already exists.")

        with self.store.transaction() as catalog:
            book = Book(
                id=catalog.next_book_id,
                title=title,
                author=author,
                isbn=isbn,
                year=year,
                genre=genre,
                available=True,
            )
            catalog.next_book_id += 1
            catalog.books.append(book)
        return book

    def remove_book(self, book_id: int) -> OperationResult[Book]:
        """Remove a book by ID.

        Removing an unknown ID is not an error: the result is successful
        with ``data`` set to ``None``.  The catalog is saved either way.
        """
        logger = logging.getLogger(__name__)
        with self.store.transaction() as catalog:
            book = catalog.get_book(book_id)
            catalog.books = [b for b in catalog.books if b.id != book_id]
        if book is None:
            logger.info("Remove book %s: no such book", book_id)
            return OperationResult[Book].ok("No book with this ID; nothing removed.")
        logger.info("Removed book %s '%s'", book.id, book.title)
        return OperationResult[Book].ok("Book removed.", book)

    def search_books(self, keyword: str) -> List[Book]:
        """Return books whose title, author, genre or year contains ``keyword``.

        Matching is a case-insensitive substring test, so an empty
        keyword matches every book.
        """
        term = keyword.lower()
        return [
            b for b in self.store.catalog.books
            if term in b.title.lower()
            or term in b.author.lower()
            or term in b.genre.lower()
            or term in str(b.year)
        ]

    def find_books(self, keyword: str) -> OperationResult[List[Book]]:
        """Search wrapper for the presentation layer with a count message."""
        books = self.search_books(keyword)
        if not books:
            return OperationResult[List[Book]].fail(NotFoundError("book", "No books found."))
        if len(books) == 1:
            return OperationResult[List[Book]].ok("1 book found.", books)
        return OperationResult[List[Book]].ok(f"{len(books)} books found.", books)

    def list_books(self) -> List[Book]:
        return list(self.store.catalog.books)

    def get_book(self, book_id: int) -> Optional[Book]:
        return self.store.catalog.get_book(book_id)
