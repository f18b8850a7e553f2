# models/order.py
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from liquorstore.models.cart import CartLine
from liquorstore.utils.money import as_cents
from liquorstore.utils.timeutil import readable_timestamp
# Order model representing a submitted pickup order.
class OrderStatus(str, Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class Customer:
    name: str
    email: str
    user_id: str | None = None


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    total_items: int


@dataclass(frozen=True)
class Order:
    user_id: str | None
    customer_name: str
    customer_email: str
    pickup_time: datetime
    pickup_instructions: str
    lines: tuple[CartLine, ...]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    created_at: datetime
    status: OrderStatus = OrderStatus.PROCESSING

    def to_record(self) -> dict:
        # Field names are the document store's, not ours.
        # Amounts are numbers and createdAt a datetime (a Firestore Timestamp).
        return {
            "userId": self.user_id,
            "customerName": self.customer_name,
            "customerEmail": self.customer_email,
            "pickupTime": self.pickup_time.isoformat(),
            "pickupInstructions": self.pickup_instructions,
            "productList": [
                {
                    "productId": line.product_id,
                    "name": line.name,
                    "price": float(line.unit_price),
                    "quantity": line.quantity,
                }
                for line in self.lines
            ],
            "subtotal": float(as_cents(self.subtotal)),
            "tax": float(as_cents(self.tax)),
            "orderTotal": float(as_cents(self.total)),
            "orderStatus": self.status.value,
            "createdAt": self.created_at,
            "readableCreatedAt": readable_timestamp(self.created_at),
        }
