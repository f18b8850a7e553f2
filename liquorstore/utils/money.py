# utils/money.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_money(value) -> Decimal:
    # Stored amounts arrive as str, int, float or Decimal.
    # Floats go through str() so 19.99 stays 19.99 and not 19.989999...
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"Not a currency amount: {value!r}")


def round_half_up(amount: Decimal, places: int = 2) -> Decimal:
    """Round to the given number of decimal places, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def as_cents(amount: Decimal) -> Decimal:
    # display precision only, never fed back into arithmetic
    return round_half_up(to_money(amount), 2)
