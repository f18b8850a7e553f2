# services/exceptions.py
"""
Errors raised by the storefront core.

Checkout validation errors are recoverable by the customer (fix the form,
shrink the cart, pick another time). Callers map them to their own
messages; `message` is a sensible default.
"""

from typing import Optional


class StoreError(Exception):
    """Base exception for all storefront core errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CheckoutValidationError(StoreError, ValueError):
    """An order could not be built from the submitted checkout form."""


class MissingCustomerInfo(CheckoutValidationError):
    def __init__(self, missing: list[str]):
        super().__init__(
            message="Please fill in all required fields",
            details={"missing": missing},
        )


class InvalidPickupSlot(CheckoutValidationError):
    def __init__(self, slot: Optional[str]):
        super().__init__(message="Invalid pickup time", details={"slot": slot})


class EmptyCart(CheckoutValidationError):
    def __init__(self):
        super().__init__(message="Cart is empty")


class ItemCapExceeded(CheckoutValidationError):
    """Large orders must be placed in-store."""

    def __init__(self, total_items: int, item_cap: int):
        self.total_items = total_items
        self.item_cap = item_cap
        super().__init__(
            message=f"Orders over {item_cap} items must be placed in-store",
            details={"total_items": total_items, "item_cap": item_cap},
        )


class StockLimitReached(StoreError, ValueError):
    def __init__(self, product_id: str, available: int):
        super().__init__(
            message=f"You have reached the available stock for this item ({available})",
            details={"product_id": product_id, "available": available},
        )


class UnknownReportType(StoreError, ValueError):
    def __init__(self, report_type):
        super().__init__(
            message=f"Unknown report type: {report_type}",
            details={"report_type": str(report_type)},
        )


class UnknownCustomer(StoreError, LookupError):
    def __init__(self, user_id):
        super().__init__(
            message="No customer profile found for this account",
            details={"user_id": user_id},
        )
