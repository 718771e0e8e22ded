"""
Cart pricing rules.

Each rule looks at the whole list of cart items and returns its own
contribution to the total. Rules never see each other's output.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Sequence
from storefront.models import Item, ItemType
from storefront.utils.money import to_money

ZERO = Decimal('0.00')

DEFAULT_DELIVERY_FEE_SMALL = Decimal('5.00')
DEFAULT_DELIVERY_FEE_MEDIUM = Decimal('12.50')
DEFAULT_DELIVERY_FEE_LARGE = Decimal('20.00')
DEFAULT_ELECTRONICS_SURCHARGE = Decimal('7.50')


class PriceRule(ABC):
    """A single contribution to the cart total."""

    @abstractmethod
    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        raise NotImplementedError


class RegularCost(PriceRule):
    """Sum of quantity x unit price over every line."""

    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        return sum((item.subtotal for item in items), ZERO)


class DeliveryPrice(PriceRule):
    """
    Flat delivery fee tiered by the number of lines in the cart.

    0 lines -> 0, 1-3 -> small fee, 4-10 -> medium fee, more than 10 -> large fee.
    Quantities inside a line do not count.
    """

    def __init__(self, small=DEFAULT_DELIVERY_FEE_SMALL, medium=DEFAULT_DELIVERY_FEE_MEDIUM,
                 large=DEFAULT_DELIVERY_FEE_LARGE):
        self.small = to_money(small)
        self.medium = to_money(medium)
        self.large = to_money(large)

    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        count = len(items)
        if count == 0:
            return ZERO
        if count <= 3:
            return self.small
        if count <= 10:
            return self.medium
        return self.large


class ExtraCostForElectronics(PriceRule):
    """Flat surcharge when at least one line is electronic, whatever the count."""

    def __init__(self, surcharge=DEFAULT_ELECTRONICS_SURCHARGE):
        self.surcharge = to_money(surcharge)

    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        if any(item.type is ItemType.ELECTRONIC for item in items):
            return self.surcharge
        return ZERO


def build_default_rules(config=None) -> List[PriceRule]:
    """Regular cost, delivery and electronics surcharge, with fees read from config."""
    def value(key, default):
        if config is None:
            return default
        if isinstance(config, dict):
            return config.get(key, default)
        return getattr(config, key, default)

    return [
        RegularCost(),
        DeliveryPrice(
            small=value('DELIVERY_FEE_SMALL', DEFAULT_DELIVERY_FEE_SMALL),
            medium=value('DELIVERY_FEE_MEDIUM', DEFAULT_DELIVERY_FEE_MEDIUM),
            large=value('DELIVERY_FEE_LARGE', DEFAULT_DELIVERY_FEE_LARGE)
        ),
        ExtraCostForElectronics(
            surcharge=value('ELECTRONICS_SURCHARGE', DEFAULT_ELECTRONICS_SURCHARGE)
        ),
    ]
