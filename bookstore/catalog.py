from collections.abc import Iterable, Mapping

from .errors import BookNotFoundError
from .models import Book


class Catalog:
    """In-memory mapping from book id to Book.

    Entries are held by value: books are copied on the way in and on the way
    out, so changing a returned Book never changes what the catalog stores.
    """

    def __init__(self, books: Mapping[int, Book] | None = None):
        self._books: dict[int, Book] = {}
        for book_id, book in (books or {}).items():
            if book_id != book.id:
                raise ValueError(f"catalog key {book_id} does not match book id {book.id}")
            self._books[book_id] = book.model_copy(deep=True)

    @classmethod
    def from_books(cls, books: Iterable[Book]) -> "Catalog":
        return cls({book.id: book for book in books})

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def get_all_books(self) -> list[Book]:
        return [book.model_copy(deep=True) for book in self._books.values()]

    def get_book(self, book_id: int) -> Book:
        book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book.model_copy(deep=True)

    def update_book(self, book: Book) -> None:
        if book.id not in self._books:
            raise BookNotFoundError(book.id)
        self._books[book.id] = book.model_copy(deep=True)
