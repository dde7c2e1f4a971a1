import pytest

from bookstore.catalog import Catalog
from bookstore.errors import BookNotFoundError
from bookstore.models import Book


@pytest.fixture()
def catalog():
    return Catalog(
        {
            1: Book(id=1, title="For the Love of Go"),
            2: Book(id=2, title="The Power of Go: Tools"),
        }
    )


def test_get_all_books(catalog):
    got = sorted(catalog.get_all_books(), key=lambda book: book.id)
    assert got == [
        Book(id=1, title="For the Love of Go"),
        Book(id=2, title="The Power of Go: Tools"),
    ]


def test_get_all_books_empty():
    assert Catalog().get_all_books() == []


def test_get_book(catalog):
    assert catalog.get_book(2) == Book(id=2, title="The Power of Go: Tools")


def test_get_book_invalid_id():
    with pytest.raises(BookNotFoundError) as exc:
        Catalog().get_book(999)
    assert exc.value.book_id == 999


def test_get_book_missing_is_key_error(catalog):
    with pytest.raises(KeyError):
        catalog.get_book(999)


def test_returned_books_are_copies(catalog):
    book = catalog.get_book(1)
    book.title = "Changed"
    book.set_price_cents(100)
    for listed in catalog.get_all_books():
        listed.copies = 50
    assert catalog.get_book(1) == Book(id=1, title="For the Love of Go")


def test_construction_copies_input():
    source = Book(id=1, title="A")
    catalog = Catalog({1: source})
    source.title = "B"
    assert catalog.get_book(1).title == "A"


def test_from_books_keys_by_id():
    catalog = Catalog.from_books([Book(id=3, title="C"), Book(id=4, title="D")])
    assert len(catalog) == 2
    assert 3 in catalog
    assert 5 not in catalog
    assert catalog.get_book(4).title == "D"


def test_update_book(catalog):
    book = catalog.get_book(1)
    book.copies = 5
    catalog.update_book(book)
    assert catalog.get_book(1).copies == 5


def test_update_book_does_not_insert(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.update_book(Book(id=42, title="New"))
    assert 42 not in catalog
    assert len(catalog) == 2


def test_construction_rejects_key_id_mismatch():
    with pytest.raises(ValueError):
        Catalog({1: Book(id=2, title="A", copies=5), 2: Book(id=2, title="B", copies=5)})
