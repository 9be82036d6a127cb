"""
Pydantic models for loans.

A loan is ACTIVE while ``returned_on`` is ``None`` and becomes RETURNED
once, when the book comes back.  Field names are snake_case in Python
and camelCase in the stored document (``userId``, ``borrowedOn`` ...);
dates serialize as ``YYYY-MM-DD``.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

ACTIVE = "ACTIVE"
RETURNED = "RETURNED"


class Loan(BaseModel):
    """A borrowing transaction between a user and a book."""

    id: int
    user_id: int = Field(..., alias="userId")
    book_id: int = Field(..., alias="bookId")
    borrowed_on: date = Field(..., alias="borrowedOn")
    due_on: date = Field(..., alias="dueOn")
    returned_on: Optional[date] = Field(None, alias="returnedOn")

    model_config = {
        "populate_by_name": True,
    }

    @property
    def is_active(self) -> bool:
        return self.returned_on is None

    @property
    def status(self) -> str:
        """``ACTIVE`` or ``RETURNED``."""
        return ACTIVE if self.is_active else RETURNED


class LoanView(BaseModel):
    """A loan joined with the borrower's name and the book title.

    Loans are never deleted, so they can outlive the user or book they
    reference.  Such dangling references are rendered with the
    ``Unknown user`` / ``Unknown book`` placeholders.
    """

    id: int
    user_id: int
    book_id: int
    user_name: str
    book_title: str
    borrowed_on: date
    due_on: date
    returned_on: Optional[date] = None
    status: str
