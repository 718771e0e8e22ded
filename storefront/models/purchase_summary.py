"""Purchase summary returned by the purchase pipeline."""
from typing import Dict
from storefront.models.book import Book


class PurchaseSummary:
    """Total price of an order plus the books that could not be fully supplied."""

    def __init__(self):
        self._total_price = 0
        self._unavailable: Dict[Book, int] = {}

    @property
    def total_price(self) -> int:
        return self._total_price

    @property
    def unavailable(self) -> Dict[Book, int]:
        """Book -> quantity missing. A copy, so callers cannot edit the summary."""
        return dict(self._unavailable)

    def add_to_total_price(self, amount: int) -> None:
        self._total_price += amount

    def add_unavailable(self, book: Book, quantity: int) -> None:
        self._unavailable[book] = quantity

    def __repr__(self):
        return f"<PurchaseSummary(total_price={self._total_price}, unavailable={len(self._unavailable)})>"
