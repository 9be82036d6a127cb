"""
Pydantic models for books.

``BookBase`` holds the catalogue fields supplied by the librarian;
``Book`` adds the identifier assigned by ``BookService`` and the
availability flag maintained by ``LoanService``.
"""

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    title: str = Field(..., examples=["Le Petit Prince"])
    author: str = Field(..., examples=["Antoine de Saint-Exupéry"])
    isbn: str = Field(..., examples=["2-1234-5678-9"])
    year: int = Field(..., examples=[1943])
    genre: str = Field(..., examples=["Conte"])


class Book(BookBase):
    """A book stored in the catalog.

    ``available`` is false exactly while an active loan references the
    book.  It is never edited directly by callers.
    """

    id: int
    available: bool = True
