"""
Application package.

The code is split the same way for every domain: models under
``schemas``, rules under ``services`` and shared infrastructure under
``core``.  ``main`` assembles them into a ``Library``.
"""

from .main import Library, create_library  # noqa: F401
