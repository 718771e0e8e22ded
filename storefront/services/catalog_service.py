"""Book catalog lookup and stock reservation - SQL-backed collaborators."""
import logging
from abc import ABC, abstractmethod
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from storefront.models import Book, BookRecord, BookReservation
from storefront.exceptions import BusinessLogicError, NotFoundError, InsufficientStockError

logger = logging.getLogger(__name__)


class BookDatabase(ABC):
    """Looks books up by ISBN."""

    @abstractmethod
    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        raise NotImplementedError


class BuyBookProcess(ABC):
    """Reserves stock for an order line."""

    @abstractmethod
    def buy_book(self, book: Book, quantity: int) -> None:
        raise NotImplementedError


class SqlBookCatalog(BookDatabase):
    """Catalog stored in the book table."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        record = self.session.get(BookRecord, isbn)
        if record is None:
            return None
        return record.to_book()

    def add_book(self, book: Book) -> Book:
        """Insert or replace a catalog entry."""
        if book.price < 0 or book.quantity < 0:
            raise BusinessLogicError(f'Price and stock must not be negative for ISBN {book.isbn}')
        self.session.merge(BookRecord(isbn=book.isbn, price=book.price, quantity=book.quantity))
        self.session.commit()
        return book


class ReservationProcess(BuyBookProcess):
    """
    Records a reservation row for every buy_book call.

    Stock on the book row is left untouched; reservations are an audit trail.
    """

    def __init__(self, session: Session):
        self.session = session

    def buy_book(self, book: Book, quantity: int) -> None:
        if quantity < 0:
            raise BusinessLogicError(f'Reservation quantity must not be negative (ISBN {book.isbn})')

        record = self.session.get(BookRecord, book.isbn)
        if record is None:
            raise NotFoundError(f'Book {book.isbn} not found')
        if quantity > record.quantity:
            raise InsufficientStockError(book.isbn, quantity, record.quantity)

        self.session.add(BookReservation(isbn=book.isbn, quantity=quantity))
        self.session.commit()
        logger.info(f"Reserved {quantity} of {book.isbn}")

    def reserved_quantity(self, isbn: str) -> int:
        total = self.session.query(func.coalesce(func.sum(BookReservation.quantity), 0)).filter(
            BookReservation.isbn == isbn
        ).scalar()
        return int(total)
