import logging

from .catalog import Catalog
from .models import Book, buy

logger = logging.getLogger("bookstore.service")


class BookService:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def list(self) -> list[Book]:
        return self.catalog.get_all_books()

    def get(self, book_id: int) -> Book:
        return self.catalog.get_book(book_id)

    def purchase(self, book_id: int) -> Book:
        book = buy(self.catalog.get_book(book_id))
        self.catalog.update_book(book)
        logger.info("book.purchase", extra={"book_id": book_id, "copies": book.copies})
        return book

    def set_price(self, book_id: int, price_cents: int) -> Book:
        book = self.catalog.get_book(book_id)
        book.set_price_cents(price_cents)
        self.catalog.update_book(book)
        logger.info("book.price", extra={"book_id": book_id, "price_cents": price_cents})
        return book

    def set_category(self, book_id: int, name: str) -> Book:
        book = self.catalog.get_book(book_id)
        book.set_category(name)
        self.catalog.update_book(book)
        logger.info("book.category", extra={"book_id": book_id, "category": name})
        return book
