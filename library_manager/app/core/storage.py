"""
Persistence adapters for the catalog document.

The whole catalog is stored as one JSON document under a single name;
there is no schema version and no partial update.  Two adapters are
provided:

* ``JsonFileStorage`` keeps the document in a file on disk and
  replaces it atomically on every save.
* ``MemoryStorage`` keeps the serialized document in a dictionary of
  named slots, the in-process equivalent of a browser key-value store.
  It is what the tests inject.

Adapters only convert between ``Catalog`` and JSON text; they never
interpret the data.  A blob that cannot be decoded raises
``StorageError`` instead of being replaced by an empty catalog, so a
corrupt document is never silently overwritten.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import ValidationError as SchemaError

from ..schemas.catalog import Catalog
from .exceptions import StorageError


def decode_catalog(text: str, source: str) -> Catalog:
    """Parse JSON ``text`` into a ``Catalog``.

    ``source`` only serves the error message.
    """
    try:
        return Catalog.model_validate(json.loads(text))
    except json.JSONDecodeError as exc:
        raise StorageError(f"{source} does not contain valid JSON: {exc}") from exc
    except SchemaError as exc:
        raise StorageError(f"{source} does not describe a catalog: {exc}") from exc


def encode_catalog(catalog: Catalog) -> str:
    return json.dumps(catalog.to_document(), ensure_ascii=False, indent=2)


class StorageAdapter:
    """Load and save the catalog as a whole."""

    def load(self) -> Optional[Catalog]:
        """Return the stored catalog, or ``None`` if nothing was saved yet."""
        raise NotImplementedError

    def save(self, catalog: Catalog) -> None:
        raise NotImplementedError


class JsonFileStorage(StorageAdapter):
    """Store the catalog in a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> Optional[Catalog]:
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        return decode_catalog(text, str(self.path))

    def save(self, catalog: Catalog) -> None:
        """Write the catalog via a temporary file so readers never see half a document."""
        logger = logging.getLogger(__name__)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(encode_catalog(catalog), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Catalog written to %s", self.path)


class MemoryStorage(StorageAdapter):
    """Keep the catalog as JSON text in a named slot of ``slots``.

    Several adapters may share one ``slots`` mapping, like pages sharing
    a browser's storage; each reads and writes only its own ``key``.
    """

    def __init__(self, key: str = "library", slots: Optional[Dict[str, str]] = None) -> None:
        self.key = key
        self.slots: Dict[str, str] = slots if slots is not None else {}

    def load(self) -> Optional[Catalog]:
        text = self.slots.get(self.key)
        if text is None:
            return None
        return decode_catalog(text, f"slot {self.key!r}")

    def save(self, catalog: Catalog) -> None:
        self.slots[self.key] = encode_catalog(catalog)
        logging.getLogger(__name__).debug("Catalog written to slot %r", self.key)
