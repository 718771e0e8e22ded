"""Shopping cart storage and cart pricing."""
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Sequence
from sqlalchemy.orm import Session
from storefront.models import Item, CartItem
from storefront.services.price_rules import PriceRule, ZERO
from storefront.utils.money import to_decimal, to_money, format_money

logger = logging.getLogger(__name__)


class ShoppingCart(ABC):
    """Ordered collection of line items."""

    @abstractmethod
    def add(self, item: Item) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_items(self) -> List[Item]:
        raise NotImplementedError


class ShoppingCartAdaptor(ShoppingCart):
    """Cart backed by the cart_item table, one row per added item."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, item: Item) -> None:
        self.session.add(CartItem.from_item(item))
        self.session.commit()

    def get_items(self) -> List[Item]:
        rows = self.session.query(CartItem).order_by(CartItem.id).all()
        return [row.to_item() for row in rows]

    def clear(self) -> None:
        self.session.query(CartItem).delete()
        self.session.commit()


class CartPricingService:
    """
    Prices a shopping cart by summing the contribution of every rule.

    Items are not validated: negative quantities or prices flow straight
    into the totals.
    """

    def __init__(self, cart: ShoppingCart, rules: Sequence[PriceRule]):
        self.cart = cart
        self.rules = list(rules)

    def add_to_cart(self, item: Item) -> None:
        self.cart.add(item)
        logger.info(f"Added to cart: {item.name} x{item.quantity} at {format_money(item.price_per_unit)}")

    def calculate(self) -> Decimal:
        """
        Run every rule over the same read-only snapshot of the cart.

        Rules are invoked in the order they were given.
        """
        items = tuple(self.cart.get_items())
        total = ZERO
        for rule in self.rules:
            total += to_decimal(rule.price_to_aggregate(items))
        total = to_money(total)
        logger.info(f"Cart priced: {len(items)} lines, {len(self.rules)} rules, total {format_money(total)}")
        return total
