"""
Pydantic models for the library catalog.

Books, users and loans are three independent models with no shared base
class.  ``Catalog`` aggregates them and is the unit of persistence;
``OperationResult`` is what the services hand back to the presentation
layer.
"""

from .book import Book, BookBase
from .catalog import Catalog
from .loan import Loan, LoanView
from .result import OperationResult
from .user import User, UserBase

__all__ = [
    "Book",
    "BookBase",
    "Catalog",
    "Loan",
    "LoanView",
    "OperationResult",
    "User",
    "UserBase",
]
