import datetime as dt

import pytest

from library_manager.app.core.storage import MemoryStorage
from library_manager.app.main import create_library

TODAY = dt.date(2024, 1, 25)


class Clock:
    """Settable replacement for ``date.today``."""

    def __init__(self, today: dt.date) -> None:
        self.value = today

    def __call__(self) -> dt.date:
        return self.value


@pytest.fixture
def clock():
    return Clock(TODAY)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def library(storage, clock):
    return create_library(storage, today=clock)


@pytest.fixture
def book(library):
    return library.books.add_book("Le Petit Prince", "Saint-Exupéry", "2-1111-2222-3", 1943, "Conte").data


@pytest.fixture
def user(library):
    return library.users.add_user("Alice", "a@b.com", "0123456789").data
