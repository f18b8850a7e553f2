# models/store.py
from dataclasses import dataclass, field
from datetime import time
from decimal import Decimal

from liquorstore.utils.money import to_money
from liquorstore.utils.timeutil import parse_hhmm
# Store-wide settings kept in the document store and edited from the admin console.
DEFAULT_MAX_ITEMS_ALLOWED = 7


@dataclass(frozen=True)
class BusinessHours:
    open: time | None = None
    close: time | None = None

    @property
    def is_set(self) -> bool:
        return self.open is not None and self.close is not None

    @classmethod
    def from_record(cls, data) -> "BusinessHours":
        # {"open": "10:00", "close": "21:00"}; bad or missing values count as unset
        if not isinstance(data, dict):
            return cls()
        return cls(open=parse_hhmm(data.get("open")), close=parse_hhmm(data.get("close")))


@dataclass(frozen=True)
class PickupSlot:
    value: str      # "HH:MM", 24-hour
    label: str      # "h:MM AM"


@dataclass(frozen=True)
class StoreSettings:
    business_hours: BusinessHours = field(default_factory=BusinessHours)
    default_tax: Decimal = Decimal("0")
    max_items_allowed: int = DEFAULT_MAX_ITEMS_ALLOWED
    store_name: str = ""
    contact_email: str = ""

    def __post_init__(self):
        if not (Decimal("0") <= self.default_tax <= Decimal("1")):
            raise ValueError("The default tax rate must be between 0 and 1.")
        if self.max_items_allowed < 1:
            raise ValueError("The item cap must be a positive number.")

    @classmethod
    def from_record(cls, data: dict) -> "StoreSettings":
        return cls(
            business_hours=BusinessHours.from_record(data.get("businessHours")),
            default_tax=to_money(data.get("defaultTax") or 0),
            max_items_allowed=int(data.get("maxItemsAllowed") or DEFAULT_MAX_ITEMS_ALLOWED),
            store_name=data.get("storeName") or "",
            contact_email=data.get("contactEmail") or "",
        )
