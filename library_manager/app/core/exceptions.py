"""
Error kinds raised by the library core.

Services raise these internally and translate the domain kinds into an
``OperationResult`` at the call boundary, so callers only ever branch on
``result.success``.  ``StorageError`` is the exception: a failing
persistence adapter is not a business outcome and propagates.
"""


class LibraryError(Exception):
    """Base class for all library errors."""


class ValidationError(LibraryError):
    """Input is missing or malformed, or a unique field is already taken."""


class ConflictError(LibraryError):
    """The requested change clashes with the current state (e.g. book on loan)."""


class LimitExceededError(LibraryError):
    """A user already holds the maximum number of active loans."""


class NotFoundError(LibraryError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, message: str = "") -> None:
        self.entity = entity
        super().__init__(message or f"{entity.capitalize()} not found.")


class StorageError(LibraryError):
    """The persisted catalog document could not be read or written."""


# Kinds converted into failed results instead of propagating.
DOMAIN_ERRORS = (ValidationError, ConflictError, LimitExceededError, NotFoundError)
