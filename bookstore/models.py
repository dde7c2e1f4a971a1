from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .config import get_settings
from .errors import InvalidCategoryError, InvalidPriceError, OutOfStockError


def valid_categories() -> frozenset[str]:
    return frozenset(get_settings().valid_categories)


class Book(BaseModel):
    """A catalog entry.

    ``category`` is not a field: it can only be written through
    ``set_category``, which checks it against the configured allow-list.
    Equality compares the category too, so two books that differ only in
    category are not equal.
    """

    id: int = 0
    title: str = ""
    author: str = ""
    copies: int = Field(default=0, ge=0)
    price_cents: int = Field(default=0, ge=0)
    discount_percent: int = Field(default=0, ge=0, le=100)

    _category: str = PrivateAttr(default="")

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @property
    def category(self) -> str:
        return self._category

    def set_category(self, name: str) -> None:
        # exact match, no case folding or trimming
        if name not in valid_categories():
            raise InvalidCategoryError(name)
        self._category = name

    def set_price_cents(self, price_cents: int) -> None:
        if price_cents < 0:
            raise InvalidPriceError(price_cents)
        self.price_cents = price_cents

    def net_price_cents(self) -> int:
        return self.price_cents - self.price_cents * self.discount_percent // 100


def buy(book: Book) -> Book:
    """Return a copy of ``book`` with one fewer copy in stock."""
    if book.copies == 0:
        raise OutOfStockError(book.title)
    return book.model_copy(update={"copies": book.copies - 1})
