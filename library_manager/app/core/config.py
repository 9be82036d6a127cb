"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
library works out of the box with a ``library.json`` document in the
current working directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    """Library settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Library Manager")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Location of the JSON document holding the whole catalog.  A
    # relative path is resolved against the working directory by
    # ``get_storage_path``.
    storage_path: str = os.getenv("LIBRARY_STORAGE_PATH", "library.json")

    def get_storage_path(self) -> Path:
        """Return the absolute path of the catalog document."""
        path = Path(self.storage_path)
        if path.is_absolute():
            return path
        return (Path.cwd() / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
