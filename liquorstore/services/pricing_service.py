# services/pricing_service.py

from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List

from liquorstore.models.cart import CartLine
from liquorstore.models.order import Customer, Order, OrderStatus, OrderTotals
from liquorstore.models.store import PickupSlot, StoreSettings
from liquorstore.services.exceptions import (
    EmptyCart,
    InvalidPickupSlot,
    ItemCapExceeded,
    MissingCustomerInfo,
)
from liquorstore.services.pickup_service import is_valid_slot, pickup_datetime
from liquorstore.utils.money import ZERO, round_half_up, to_money


def compute_totals(lines: Iterable[CartLine], tax_rate) -> OrderTotals:
    # Subtotal is summed exactly; tax is the only rounded figure.
    rate = to_money(tax_rate)
    if rate < 0:
        raise ValueError("The tax rate cannot be negative.")

    subtotal = ZERO
    total_items = 0
    for line in lines:
        subtotal += line.unit_price * line.quantity
        total_items += line.quantity

    tax = round_half_up(subtotal * rate, 2)
    return OrderTotals(
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        total_items=total_items,
    )


def validate_checkout(
    customer: Customer,
    lines: List[CartLine],
    chosen_slot: str | None,
    valid_slots: List[PickupSlot],
    item_cap: int,
) -> int:
    # The checks run in this order and the first failure wins.
    # Returns the cart's total item count.
    if not lines:
        raise EmptyCart()

    missing = [
        field for field in ("name", "email")
        if not (getattr(customer, field) or "").strip()
    ]
    if missing:
        raise MissingCustomerInfo(missing)

    if not is_valid_slot(chosen_slot, valid_slots):
        raise InvalidPickupSlot(chosen_slot)

    total_items = sum(line.quantity for line in lines)
    if total_items > item_cap:
        raise ItemCapExceeded(total_items, item_cap)
    return total_items


def build_order(
    customer: Customer,
    lines: Iterable[CartLine],
    chosen_slot: str | None,
    valid_slots: List[PickupSlot],
    item_cap: int,
    tax_rate,
    now: datetime,
    pickup_instructions: str = "",
) -> Order:
    """
    Validate a checkout submission and assemble the Order.

    Raises one of EmptyCart, MissingCustomerInfo, InvalidPickupSlot or
    ItemCapExceeded. Performs no I/O: persisting the returned Order is the
    caller's job.
    """
    lines = list(lines)
    validate_checkout(customer, lines, chosen_slot, valid_slots, item_cap)
    totals = compute_totals(lines, tax_rate)

    return Order(
        user_id=customer.user_id,
        customer_name=customer.name.strip(),
        customer_email=customer.email.strip(),
        pickup_time=pickup_datetime(chosen_slot, now),
        pickup_instructions=(pickup_instructions or "").strip(),
        lines=tuple(lines),
        subtotal=totals.subtotal,
        tax=totals.tax,
        total=totals.total,
        created_at=now,
        status=OrderStatus.PROCESSING,
    )


class OrderPricer:
    # Holds the store's tax rate and per-order item cap.
    # Both come from store settings, see from_settings().

    def __init__(self, tax_rate=Decimal("0"), item_cap: int = 7):
        self.tax_rate = to_money(tax_rate)
        self.item_cap = item_cap

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "OrderPricer":
        return cls(tax_rate=settings.default_tax, item_cap=settings.max_items_allowed)

    def totals(self, lines: Iterable[CartLine]) -> OrderTotals:
        return compute_totals(lines, self.tax_rate)

    def build_order(
        self,
        customer: Customer,
        lines: Iterable[CartLine],
        chosen_slot: str | None,
        valid_slots: List[PickupSlot],
        now: datetime,
        pickup_instructions: str = "",
    ) -> Order:
        return build_order(
            customer,
            lines,
            chosen_slot,
            valid_slots,
            item_cap=self.item_cap,
            tax_rate=self.tax_rate,
            now=now,
            pickup_instructions=pickup_instructions,
        )
