"""Book Reservation model."""
from sqlalchemy import Column, BigInteger, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from storefront.database import Base


class BookReservation(Base):
    """Quantity of a book set aside for an order."""

    __tablename__ = 'book_reservation'

    id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    isbn = Column(String, ForeignKey('book.isbn'), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<BookReservation(id={self.id}, isbn='{self.isbn}', quantity={self.quantity})>"
