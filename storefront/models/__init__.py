"""Models package - exports domain values and SQLAlchemy models."""
# Cart pricing
from storefront.models.item import Item, ItemType, CartItem

# Purchase summary
from storefront.models.book import Book, BookRecord
from storefront.models.book_reservation import BookReservation
from storefront.models.purchase_summary import PurchaseSummary

__all__ = [
    # Cart pricing
    'Item', 'ItemType', 'CartItem',
    # Purchase summary
    'Book', 'BookRecord', 'BookReservation', 'PurchaseSummary',
]
