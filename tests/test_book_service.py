import pytest

from library_manager.app.services.book_service import ISBN_10, ISBN_13, check_isbn


def add(library, title="Dune", author="Frank Herbert", isbn="0-4410-1359-7", year=1965, genre="SF"):
    return library.books.add_book(title, author, isbn, year, genre)


@pytest.mark.parametrize(
    "isbn, kind",
    [
        ("978-2-1234-5678-9", ISBN_13),
        ("2-1234-5678-9", ISBN_10),
        ("2-1234-5678-X", ISBN_10),
        ("123456789", None),
        ("979-2-1234-5678-9", None),
        ("2-1234-5678-x", None),
        ("2-1234-5678-9\n", None),
    ],
)
def test_check_isbn(isbn, kind):
    assert check_isbn(isbn) == kind


def test_add_book_assigns_ids_and_persists(library, storage):
    first = add(library)
    second = add(library, isbn="978-2-1234-5678-9")

    assert first.success and second.success
    assert first.message == "Book added."
    assert (first.data.id, second.data.id) == (1, 2)
    assert first.data.available is True
    assert library.store.catalog.next_book_id == 3
    assert [b.id for b in storage.load().books] == [1, 2]


def test_add_book_accepts_year_from_form_field(library):
    result = add(library, year="1965")
    assert result.success
    assert result.data.year == 1965


@pytest.mark.parametrize("field", ["title", "author", "isbn", "year", "genre"])
def test_add_book_requires_every_field(library, field):
    result = add(library, **{field: ""})
    assert not result.success
    assert result.error == "ValidationError"
    assert result.message == "All fields are required."
    assert library.store.catalog.books == []


def test_add_book_rejects_malformed_isbn(library):
    result = add(library, isbn="123456789")
    assert result.error == "ValidationError"
    assert "ISBN" in result.message


@pytest.mark.parametrize("year", [999, 2025, "nineteen", 1965.7, 1965.0, "1965.0", True])
def test_add_book_rejects_invalid_year(library, year):
    # The pinned clock says 2024.
    result = add(library, year=year)
    assert not result.success
    assert result.error == "ValidationError"


def test_add_book_accepts_boundary_years(library):
    assert add(library, year=1000).success
    assert add(library, isbn="978-2-1234-5678-9", year=2024).success


def test_add_book_rejects_duplicate_isbn(library, storage):
    add(library)
    saved = storage.slots[storage.key]

    result = add(library, title="Another")

    assert result.error == "ValidationError"
    assert result.message == "A book with this ISBN already exists."
    assert len(library.store.catalog.books) == 1
    assert library.store.catalog.next_book_id == 2
    assert storage.slots[storage.key] == saved


def test_remove_book(library, book, storage):
    result = library.books.remove_book(book.id)
    assert result.success
    assert result.data.id == book.id
    assert library.books.list_books() == []
    assert storage.load().books == []


def test_remove_unknown_book_is_a_noop(library, book):
    result = library.books.remove_book(99)
    assert result.success
    assert result.data is None
    assert [b.id for b in library.books.list_books()] == [book.id]


def test_removed_book_id_is_not_reused(library, book):
    library.books.remove_book(book.id)
    assert add(library).data.id == book.id + 1


def test_search_books_matches_title_author_genre_and_year(library):
    add(library)
    add(library, title="Foundation", author="Isaac Asimov", isbn="0-5533-8257-X", year=1951, genre="SF")
    add(library, title="Germinal", author="Émile Zola", isbn="978-2-0707-0401-1", year=1885, genre="Roman")

    search = library.books.search_books
    assert [b.title for b in search("dune")] == ["Dune"]
    assert [b.title for b in search("ASIMOV")] == ["Foundation"]
    assert [b.title for b in search("sf")] == ["Dune", "Foundation"]
    assert [b.title for b in search("188")] == ["Germinal"]
    assert len(search("")) == 3
    assert search("tolkien") == []


def test_find_books_messages(library):
    add(library)
    add(library, title="Dune Messiah", isbn="0-4410-1360-0", year=1969)

    assert library.books.find_books("messiah").message == "1 book found."
    assert library.books.find_books("dune").message == "2 books found."

    missing = library.books.find_books("zola")
    assert not missing.success
    assert missing.error == "NotFoundError"
    assert missing.message == "No books found."
    assert missing.data is None


def test_get_book(library, book):
    assert library.books.get_book(book.id) == book
    assert library.books.get_book(42) is None


@pytest.mark.parametrize("field, value", [("isbn", 1234), ("title", 42), ("genre", ["SF"])])
def test_add_book_rejects_non_text_fields(library, field, value):
    result = add(library, **{field: value})
    assert not result.success
    assert result.error == "ValidationError"
    assert library.store.catalog.books == []


def test_add_book_strips_year_string(library):
    assert add(library, year=" 1965 ").data.year == 1965


def test_result_holds_a_copy_of_the_book(library):
    result = add(library)
    result.data.available = False
    result.data.title = "Changed"

    stored = library.books.get_book(result.data.id)
    assert stored.available is True
    assert stored.title == "Dune"
