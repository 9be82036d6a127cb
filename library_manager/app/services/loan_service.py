"""
Business logic for loans.

``LoanService`` implements the borrow/return workflow.  A borrow is
checked in a fixed order (user exists, book exists, book available,
user under the loan limit) and nothing is changed until every check
has passed.  The loan is then appended, the book marked unavailable
and the catalog saved inside a single store transaction.

Due dates are computed with calendar arithmetic on ``datetime.date``:
a book borrowed on 2024-01-25 is due on 2024-02-08.
"""

import logging
from datetime import date, timedelta
from typing import Callable, List, Optional

from ..core.exceptions import (
    DOMAIN_ERRORS,
    ConflictError,
    LimitExceededError,
    NotFoundError,
)
from ..core.store import CatalogStore
from ..schemas.loan import Loan, LoanView
from ..schemas.result import OperationResult

LOAN_PERIOD_DAYS = 14
MAX_ACTIVE_LOANS = 3

UNKNOWN_USER = "Unknown user"
UNKNOWN_BOOK = "Unknown book"


def due_date(borrowed_on: date) -> date:
    return borrowed_on + timedelta(days=LOAN_PERIOD_DAYS)


class LoanService:
    """Service for borrowing and returning books."""

    def __init__(self, store: CatalogStore, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self.today = today

    def borrow_book(self, user_id: int, book_id: int) -> OperationResult[Loan]:
        """Lend book ``book_id`` to user ``user_id`` for fourteen days.

        Returns a failed result with ``NotFoundError`` (unknown user or
        book), ``ConflictError`` (book already on loan) or
        ``LimitExceededError`` (user already holds three active loans).
        A failed borrow leaves the catalog and the loan counter untouched.
        """
        logger = logging.getLogger(__name__)
        try:
            self._check_borrow(user_id, book_id)
        except DOMAIN_ERRORS as exc:
            logger.info("Borrow of book %s by user %s rejected: %s", book_id, user_id, exc)
            return OperationResult[Loan].fail(exc)

        borrowed_on = self.today()
        with self.store.transaction() as catalog:
            loan = Loan(
                id=catalog.next_loan_id,
                user_id=user_id,
                book_id=book_id,
                borrowed_on=borrowed_on,
                due_on=due_date(borrowed_on),
            )
            catalog.next_loan_id += 1
            catalog.loans.append(loan)
            catalog.get_book(book_id).available = False
        logger.info(
            "Loan %s: book %s lent to user %s until %s", loan.id, book_id, user_id, loan.due_on
        )
        return OperationResult[Loan].ok("Loan recorded.", loan)

    def _check_borrow(self, user_id: int, book_id: int) -> None:
        catalog = self.store.catalog
        if catalog.get_user(user_id) is None:
            raise NotFoundError("user")
        book = catalog.get_book(book_id)
        if book is None:
            raise NotFoundError("book")
        if not book.available:
            raise ConflictError("Book is already on loan.")
        if len(catalog.active_loans(user_id)) >= MAX_ACTIVE_LOANS:
            raise LimitExceededError(
                f"Limit of {MAX_ACTIVE_LOANS} loans reached for this user."
            )

    def return_book(self, book_id: int) -> OperationResult[Loan]:
        """Close the active loan on ``book_id``.

        A book that was never lent and a book already returned both give
        ``NotFoundError``.  Should several active loans reference the
        book, the first one in the list is closed.
        """
        logger = logging.getLogger(__name__)
        loan = self.store.catalog.active_loan_for_book(book_id)
        if loan is None:
            exc = NotFoundError("loan", "No active loan found for this book.")
            logger.info("Return of book %s rejected: %s", book_id, exc)
            return OperationResult[Loan].fail(exc)

        with self.store.transaction() as catalog:
            loan.returned_on = self.today()
            book = catalog.get_book(book_id)
            if book is not None:
                book.available = True
        if book is None:
            logger.warning("Loan %s closed for book %s, which is no longer catalogued", loan.id, book_id)
        logger.info("Loan %s closed: book %s returned on %s", loan.id, book_id, loan.returned_on)
        return OperationResult[Loan].ok("Book returned.", loan)

    def list_loans(self) -> List[Loan]:
        return list(self.store.catalog.loans)

    def active_loans(self, user_id: Optional[int] = None) -> List[Loan]:
        return self.store.catalog.active_loans(user_id)

    def loan_overview(self) -> List[LoanView]:
        """Return every loan with the borrower's name and the book title."""
        catalog = self.store.catalog
        views: List[LoanView] = []
        for loan in catalog.loans:
            user = catalog.get_user(loan.user_id)
            book = catalog.get_book(loan.book_id)
            views.append(
                LoanView(
                    id=loan.id,
                    user_id=loan.user_id,
                    book_id=loan.book_id,
                    user_name=user.name if user else UNKNOWN_USER,
                    book_title=book.title if book else UNKNOWN_BOOK,
                    borrowed_on=loan.borrowed_on,
                    due_on=loan.due_on,
                    returned_on=loan.returned_on,
                    status=loan.status,
                )
            )
        return views
