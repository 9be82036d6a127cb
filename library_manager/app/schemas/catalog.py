"""
The catalog aggregate: every book, user and loan plus the three ID
counters.  The whole object is what gets persisted, as a single JSON
document of the form::

    {"books": [...], "users": [...], "loans": [...],
     "nextBookId": 1, "nextUserId": 1, "nextLoanId": 1}
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .book import Book
from .loan import Loan
from .user import User


class Catalog(BaseModel):
    books: List[Book] = Field(default_factory=list)
    users: List[User] = Field(default_factory=list)
    loans: List[Loan] = Field(default_factory=list)
    next_book_id: int = Field(1, alias="nextBookId")
    next_user_id: int = Field(1, alias="nextUserId")
    next_loan_id: int = Field(1, alias="nextLoanId")

    model_config = {
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def counters_ahead_of_ids(self) -> "Catalog":
        # Documents written by older tools may lack the counters or hold
        # stale ones; never hand out an ID that is already in use.
        self.next_book_id = max([self.next_book_id] + [b.id + 1 for b in self.books])
        self.next_user_id = max([self.next_user_id] + [u.id + 1 for u in self.users])
        self.next_loan_id = max([self.next_loan_id] + [l.id + 1 for l in self.loans])
        return self

    def get_book(self, book_id: int) -> Optional[Book]:
        return next((b for b in self.books if b.id == book_id), None)

    def get_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def active_loans(self, user_id: Optional[int] = None) -> List[Loan]:
        """Return ACTIVE loans, optionally only those held by ``user_id``."""
        return [
            l for l in self.loans
            if l.is_active and (user_id is None or l.user_id == user_id)
        ]

    def active_loan_for_book(self, book_id: int) -> Optional[Loan]:
        """Return the first ACTIVE loan on ``book_id`` in list order."""
        return next((l for l in self.loans if l.is_active and l.book_id == book_id), None)

    def to_document(self) -> dict:
        """Return the JSON-ready form written by the storage adapters."""
        return self.model_dump(mode="json", by_alias=True)
