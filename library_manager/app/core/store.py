"""
In-memory catalog store.

``CatalogStore`` holds the live ``Catalog`` and the adapter it was loaded
from.  Services receive the store explicitly instead of reaching for a
module-level object, which is what lets tests run against
``MemoryStorage``.

Every mutating service call runs inside ``transaction()``: the catalog is
changed in memory and then written back in full.  If the write fails the
in-memory state is rolled back to the snapshot taken on entry and the
error is re-raised, so callers never observe a change that was not
persisted.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..schemas.catalog import Catalog
from .storage import StorageAdapter


class CatalogStore:
    """Owns the catalog for one session."""

    def __init__(self, storage: StorageAdapter, catalog: Optional[Catalog] = None) -> None:
        self.storage = storage
        self.catalog = catalog if catalog is not None else Catalog()

    @classmethod
    def open(cls, storage: StorageAdapter) -> "CatalogStore":
        """Load the stored catalog, or start with an empty one."""
        logger = logging.getLogger(__name__)
        catalog = storage.load()
        if catalog is None:
            logger.info("No stored catalog found; starting empty")
        else:
            logger.info(
                "Loaded catalog with %d books, %d users and %d loans",
                len(catalog.books),
                len(catalog.users),
                len(catalog.loans),
            )
        return cls(storage, catalog)

    def save(self) -> None:
        self.storage.save(self.catalog)

    @contextmanager
    def transaction(self) -> Iterator[Catalog]:
        """Yield the catalog for mutation and persist it on exit."""
        snapshot = self.catalog.model_copy(deep=True)
        try:
            yield self.catalog
            self.save()
        except Exception:
            self._restore(snapshot)
            raise

    def _restore(self, snapshot: Catalog) -> None:
        # Restore in place so references to ``self.catalog`` stay valid.
        for name in Catalog.model_fields:
            setattr(self.catalog, name, getattr(snapshot, name))
