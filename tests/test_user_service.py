import pytest


def add(library, name="Bob", email="bob@example.com", phone="0612345678"):
    return library.users.add_user(name, email, phone)


def test_add_user(library, storage):
    result = add(library)
    assert result.success
    assert result.message == "User added."
    assert result.data.id == 1
    assert add(library, email="carol@example.com").data.id == 2
    assert [u.email for u in storage.load().users] == ["bob@example.com", "carol@example.com"]


@pytest.mark.parametrize("field", ["name", "email", "phone"])
def test_add_user_requires_every_field(library, field):
    result = add(library, **{field: "  "})
    assert result.error == "ValidationError"
    assert result.message == "All fields are required."


@pytest.mark.parametrize("email", ["bob", "bob@example", "bob @example.com", "bob@@example.com", "@example.com"])
def test_add_user_rejects_malformed_email(library, email):
    result = add(library, email=email)
    assert result.error == "ValidationError"
    assert result.message == "Invalid email address."


@pytest.mark.parametrize("phone", ["012345678", "01234567890", "01234-6789", "abcdefghij"])
def test_add_user_rejects_bad_phone(library, phone):
    result = add(library, phone=phone)
    assert result.error == "ValidationError"
    assert "10 digits" in result.message


def test_add_user_rejects_duplicate_email(library):
    add(library)
    result = add(library, name="Robert")
    assert result.error == "ValidationError"
    assert len(library.users.list_users()) == 1
    assert library.store.catalog.next_user_id == 2


def test_remove_user(library, user):
    result = library.users.remove_user(user.id)
    assert result.success
    assert result.data.email == user.email
    assert library.users.get_user(user.id) is None


def test_remove_unknown_user_is_a_noop(library, user):
    result = library.users.remove_user(404)
    assert result.success
    assert result.data is None
    assert len(library.users.list_users()) == 1


def test_remove_user_keeps_their_loans(library, user, book):
    loan = library.loans.borrow_book(user.id, book.id).data

    assert library.users.remove_user(user.id).success

    orphans = library.loans.active_loans(user.id)
    assert [l.id for l in orphans] == [loan.id]
    assert library.users.get_user(user.id) is None
    assert library.books.get_book(book.id).available is False


def test_search_users(library):
    add(library, name="Bob Martin", email="bob@example.com", phone="0611111111")
    add(library, name="Carol", email="carol@work.org", phone="0722222222")

    search = library.users.search_users
    assert [u.name for u in search("MARTIN")] == ["Bob Martin"]
    assert [u.name for u in search("WORK.ORG")] == ["Carol"]
    assert [u.name for u in search("0722")] == ["Carol"]
    assert len(search("")) == 2
    assert search("dave") == []


def test_find_users_messages(library):
    add(library)
    add(library, name="Bobby", email="bobby@example.com")
    assert library.users.find_users("bobby").message == "1 user found."
    assert library.users.find_users("bob").message == "2 users found."
    assert library.users.find_users("zed").error == "NotFoundError"


@pytest.mark.parametrize("field, value", [("phone", 1234567890), ("email", 7), ("name", ["Bob"])])
def test_add_user_rejects_non_text_fields(library, field, value):
    result = add(library, **{field: value})
    assert not result.success
    assert result.error == "ValidationError"
    assert library.users.list_users() == []
