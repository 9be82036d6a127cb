"""
Business logic for users.

Users are borrowers identified by a unique e-mail address.  They can be
added, removed and searched; there is no update operation.  Removing a
user leaves their loans in place, still pointing at the removed ID.
"""

import logging
import re
from typing import List, Optional

from ..core.exceptions import DOMAIN_ERRORS, NotFoundError, ValidationError
from ..core.store import CatalogStore
from ..schemas.result import OperationResult
from ..schemas.user import User

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"[0-9]{10}")


class UserService:
    """Service for adding, removing and searching users."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def add_user(self, name: str, email: str, phone: str) -> OperationResult[User]:
        """Validate and register a user.

        The e-mail must look like ``local@domain.tld`` and the phone
        number must be exactly ten digits.  E-mail addresses are compared
        as entered.
        """
        logger = logging.getLogger(__name__)
        try:
            if not all(isinstance(v, str) for v in (name, email, phone) if v is not None):
                raise ValidationError("Name, email and phone must be text.")
            if any(not v or not v.strip() for v in (name, email, phone)):
                raise ValidationError("All fields are required.")
            if not EMAIL_RE.fullmatch(email):
                raise ValidationError("Invalid email address.")
            if not PHONE_RE.fullmatch(phone):
                raise ValidationError("Invalid phone number (10 digits expected).")
            if any(u.email == email for u in self.store.catalog.users):
                raise ValidationError("A user with this email already exists.")
        except DOMAIN_ERRORS as exc:
            logger.info("User rejected: %s", exc)
            return OperationResult[User].fail(exc)

        with self.store.transaction() as catalog:
            user = User(id=catalog.next_user_id, name=name, email=email, phone=phone)
            catalog.next_user_id += 1
            catalog.users.append(user)
        logger.info("Added user %s <%s>", user.id, user.email)
        return OperationResult[User].ok("User added.", user)

    def remove_user(self, user_id: int) -> OperationResult[User]:
        """Remove a user by ID; unknown IDs are a successful no-op.

        Loans held by the user are kept.
        """
        logger = logging.getLogger(__name__)
        with self.store.transaction() as catalog:
            user = catalog.get_user(user_id)
            catalog.users = [u for u in catalog.users if u.id != user_id]
        if user is None:
            logger.info("Remove user %s: no such user", user_id)
            return OperationResult[User].ok("No user with this ID; nothing removed.")
        orphaned = len(self.store.catalog.active_loans(user_id))
        if orphaned:
            logger.warning("Removed user %s still holds %d active loan(s)", user_id, orphaned)
        logger.info("Removed user %s <%s>", user.id, user.email)
        return OperationResult[User].ok("User removed.", user)

    def search_users(self, keyword: str) -> List[User]:
        """Return users whose name, email or phone contains ``keyword``."""
        term = keyword.lower()
        return [
            u for u in self.store.catalog.users
            if term in u.name.lower()
            or term in u.email.lower()
            or keyword in u.phone
        ]

    def find_users(self, keyword: str) -> OperationResult[List[User]]:
        users = self.search_users(keyword)
        if not users:
            return OperationResult[List[User]].fail(NotFoundError("user", "No users found."))
        if len(users) == 1:
            return OperationResult[List[User]].ok("1 user found.", users)
        return OperationResult[List[User]].ok(f"{len(users)} users found.", users)

    def list_users(self) -> List[User]:
        return list(self.store.catalog.users)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.catalog.get_user(user_id)
