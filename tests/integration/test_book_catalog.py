"""
Integration tests for book purchases against the SQL catalog and reservation log.
"""
import pytest
from storefront.models import Book, BookReservation
from storefront.exceptions import BusinessLogicError, NotFoundError, InsufficientStockError
from storefront.services.purchase_service import PurchaseService


@pytest.fixture(scope='function')
def purchases(catalog, reservations):
    catalog.add_book(Book('ISBN1', 25, 5))
    catalog.add_book(Book('ISBN2', 10, 20))
    return PurchaseService(catalog, reservations)


def test_find_by_isbn(catalog):
    catalog.add_book(Book('978-0', 30, 2))

    assert catalog.find_by_isbn('978-0') == Book('978-0', 30, 2)
    assert catalog.find_by_isbn('missing') is None


def test_add_book_replaces_existing(catalog):
    catalog.add_book(Book('ISBN1', 10, 1))
    catalog.add_book(Book('ISBN1', 12, 4))

    assert catalog.find_by_isbn('ISBN1') == Book('ISBN1', 12, 4)


def test_add_book_rejects_negative_stock(catalog):
    with pytest.raises(BusinessLogicError):
        catalog.add_book(Book('ISBN1', 10, -1))


def test_shortfall_and_reservation(purchases, reservations, session):
    """10 requested against 5 in stock: pay for 5, 5 unavailable, reserve 5."""
    summary = purchases.price_for_order({'ISBN1': 10})

    assert summary.total_price == 125
    assert summary.unavailable == {Book('ISBN1', 25, 5): 5}
    assert reservations.reserved_quantity('ISBN1') == 5
    assert session.query(BookReservation).count() == 1


def test_reservation_per_line(purchases, reservations, session):
    """Every ordered ISBN gets a reservation row, zero lines included."""
    summary = purchases.price_for_order({'ISBN1': 0, 'ISBN2': 3})

    assert summary.total_price == 30
    assert summary.unavailable == {}
    assert session.query(BookReservation).count() == 2
    assert reservations.reserved_quantity('ISBN1') == 0
    assert reservations.reserved_quantity('ISBN2') == 3


def test_no_order(purchases, session):
    assert purchases.price_for_order(None) is None
    assert session.query(BookReservation).count() == 0


def test_unknown_isbn(purchases):
    with pytest.raises(NotFoundError):
        purchases.price_for_order({'NOPE': 1})


def test_catalog_stock_not_decremented(purchases, catalog):
    purchases.price_for_order({'ISBN2': 4})

    assert catalog.find_by_isbn('ISBN2').quantity == 20


def test_reserving_more_than_stock_is_refused(catalog, reservations):
    book = catalog.add_book(Book('ISBN9', 5, 1))

    with pytest.raises(InsufficientStockError):
        reservations.buy_book(book, 2)


def test_reserving_unknown_book_is_refused(reservations):
    with pytest.raises(NotFoundError):
        reservations.buy_book(Book('GHOST', 1, 1), 1)
