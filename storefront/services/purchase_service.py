"""
Purchase summary service.
Prices a book order against the catalog and reserves what can be supplied.
"""
import logging
from typing import Mapping, Optional
from storefront.models import PurchaseSummary
from storefront.exceptions import BusinessLogicError, NotFoundError
from storefront.services.catalog_service import BookDatabase, BuyBookProcess

logger = logging.getLogger(__name__)


class PurchaseService:
    """Turns an ISBN -> quantity order into a PurchaseSummary."""

    def __init__(self, catalog: BookDatabase, process: BuyBookProcess):
        self.catalog = catalog
        self.process = process

    def price_for_order(self, order: Optional[Mapping[str, int]]) -> Optional[PurchaseSummary]:
        """
        Price an order and reserve the fulfillable quantity of every book.

        Returns None when no order was submitted at all (order is None); an
        empty mapping yields an empty summary instead. buy_book is called once
        per ISBN, with 0 when nothing can be supplied.

        Raises:
            BusinessLogicError: a requested quantity is negative.
            NotFoundError: an ISBN is not in the catalog.
        """
        if order is None:
            return None

        summary = PurchaseSummary()
        for isbn, requested in order.items():
            if requested < 0:
                logger.warning(f"Rejected order line {isbn}: negative quantity {requested}")
                raise BusinessLogicError(f'Requested quantity must not be negative (ISBN {isbn})')

            book = self.catalog.find_by_isbn(isbn)
            if book is None:
                logger.warning(f"Rejected order line {isbn}: not in catalog")
                raise NotFoundError(f'Book {isbn} not found')

            fulfillable = min(requested, book.quantity)
            summary.add_to_total_price(book.price * fulfillable)

            if requested > book.quantity:
                shortfall = requested - book.quantity
                summary.add_unavailable(book, shortfall)
                logger.warning(f"Short on {isbn}: requested {requested}, available {book.quantity}")

            self.process.buy_book(book, fulfillable)

        logger.info(f"Order priced: {len(order)} lines, total {summary.total_price}")
        return summary
