import pytest
from unittest.mock import MagicMock

from config import TestingConfig
from storefront import init_app
from storefront.database import get_session, reset_db, close_db
from storefront.models import Book
from storefront.services.cart_service import ShoppingCart, ShoppingCartAdaptor, CartPricingService
from storefront.services.catalog_service import (
    BookDatabase, BuyBookProcess, SqlBookCatalog, ReservationProcess
)
from storefront.services.price_rules import build_default_rules


@pytest.fixture(scope='function')
def session():
    """Fresh in-memory database, reset before and closed after each test."""
    init_app(TestingConfig)
    reset_db()
    session = get_session()
    yield session
    session.rollback()
    close_db()


@pytest.fixture(scope='function')
def cart_store(session):
    """SQL-backed shopping cart."""
    return ShoppingCartAdaptor(session)


@pytest.fixture(scope='function')
def cart_pricing(cart_store):
    """Cart pricing with regular cost, delivery and electronics surcharge."""
    return CartPricingService(cart_store, build_default_rules(TestingConfig))


@pytest.fixture(scope='function')
def catalog(session):
    """SQL-backed book catalog."""
    return SqlBookCatalog(session)


@pytest.fixture(scope='function')
def reservations(session):
    """SQL-backed reservation process."""
    return ReservationProcess(session)


@pytest.fixture(scope='function')
def mock_cart():
    """Mocked shopping cart."""
    return MagicMock(spec=ShoppingCart)


@pytest.fixture(scope='function')
def mock_catalog():
    """Mocked book catalog."""
    return MagicMock(spec=BookDatabase)


@pytest.fixture(scope='function')
def mock_process():
    """Mocked buy-book process."""
    return MagicMock(spec=BuyBookProcess)


@pytest.fixture(scope='function')
def catalog_of(mock_catalog):
    """Stock the mocked catalog with the given books, keyed by ISBN."""
    def _stock(*books: Book):
        by_isbn = {book.isbn: book for book in books}
        mock_catalog.find_by_isbn.side_effect = by_isbn.get
        return mock_catalog
    return _stock
