"""Money helpers shared by the pricing pipelines."""
from decimal import Decimal, InvalidOperation
from typing import Union

CENTS = Decimal('0.01')

Number = Union[int, float, Decimal, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to an exact Decimal, without rounding.

    Floats go through str() first so 0.1 stays 0.1 instead of its
    binary expansion.

    Raises:
        ValueError: if the value cannot be read as a number.
    """
    if value is None:
        raise ValueError('Amount is required')
    try:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f'Invalid amount: {value!r}')


def to_money(value: Number) -> Decimal:
    """Convert a number to a Decimal rounded to cents."""
    return to_decimal(value).quantize(CENTS)


def format_money(value: Union[Number, None]) -> str:
    """
    Format an amount for log lines and reprs.

    Examples:
        format_money(1765) -> "$1,765.00"
        format_money(-2.5) -> "-$2.50"
        format_money(None) -> "-"
    """
    if value is None or value == "":
        return "-"
    try:
        amount = to_money(value)
    except ValueError:
        return "-"
    sign = '-' if amount < 0 else ''
    return f"{sign}${abs(amount):,.2f}"
