"""Book catalog models."""
from dataclasses import dataclass
from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.sql import func
from storefront.database import Base


@dataclass(frozen=True)
class Book:
    """Catalog entry: a priced, stocked book keyed by ISBN."""

    isbn: str
    price: int
    quantity: int

    def __repr__(self):
        return f"<Book(isbn='{self.isbn}', price={self.price}, quantity={self.quantity})>"


class BookRecord(Base):
    """Book row in the catalog table."""

    __tablename__ = 'book'

    isbn = Column(String, primary_key=True)
    price = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def to_book(self) -> Book:
        return Book(self.isbn, self.price, self.quantity)

    def __repr__(self):
        return f"<BookRecord(isbn='{self.isbn}', price={self.price}, quantity={self.quantity})>"
