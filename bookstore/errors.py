class BookstoreError(Exception):
    """Base class for bookstore errors."""


class OutOfStockError(BookstoreError):
    def __init__(self, title: str):
        super().__init__(f"no copies of {title!r} left")
        self.title = title


class InvalidPriceError(BookstoreError):
    def __init__(self, price_cents: int):
        super().__init__(f"invalid price {price_cents} (must be zero or more)")
        self.price_cents = price_cents


class InvalidCategoryError(BookstoreError):
    def __init__(self, name: str):
        super().__init__(f"unknown category {name!r}")
        self.name = name


class BookNotFoundError(BookstoreError, KeyError):
    def __init__(self, book_id: int):
        super().__init__(book_id)
        self.book_id = book_id

    def __str__(self) -> str:
        return f"no book with id {self.book_id}"
