"""Cart line item model."""
from dataclasses import dataclass
from decimal import Decimal
from sqlalchemy import Column, BigInteger, Integer, String, Numeric, DateTime, Enum
from sqlalchemy.sql import func
from storefront.database import Base
from storefront.utils.money import to_decimal, format_money
import enum


class ItemType(enum.Enum):
    """Line item category."""
    OTHER = "OTHER"
    ELECTRONIC = "ELECTRONIC"

    # Alias used by the pricing rules documentation
    ORDINARY = "OTHER"


@dataclass(frozen=True)
class Item:
    """Immutable line item held by a shopping cart."""

    type: ItemType
    name: str
    quantity: int
    price_per_unit: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'price_per_unit', to_decimal(self.price_per_unit))

    @property
    def subtotal(self) -> Decimal:
        return self.price_per_unit * self.quantity

    def __repr__(self):
        return (
            f"<Item(type={self.type.value}, name='{self.name}', "
            f"quantity={self.quantity}, price_per_unit={format_money(self.price_per_unit)})>"
        )


class CartItem(Base):
    """Persisted cart line (one row per add_to_cart call)."""

    __tablename__ = 'cart_item'

    id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    type = Column(Enum(ItemType, name='item_type'), nullable=False)
    name = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    price_per_unit = Column(Numeric(14, 6), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    @classmethod
    def from_item(cls, item: Item) -> 'CartItem':
        return cls(
            type=item.type,
            name=item.name,
            quantity=item.quantity,
            price_per_unit=item.price_per_unit
        )

    def to_item(self) -> Item:
        return Item(self.type, self.name, self.quantity, self.price_per_unit)

    def __repr__(self):
        return f"<CartItem(id={self.id}, name='{self.name}', quantity={self.quantity})>"
