# models/product.py
from dataclasses import dataclass
from decimal import Decimal

from liquorstore.utils.money import to_money
# Product model representing a bottle (or any item) in the store catalogue.
@dataclass
class Product:
    id: str
    name: str
    category: str
    price: Decimal
    quantity: int = 0      # units in stock
    active: bool = True

    @classmethod
    def from_record(cls, record: dict) -> "Product":
        return cls(
            id=str(record["id"]),
            name=record.get("name", ""),
            category=record.get("category", ""),
            price=to_money(record.get("price", 0)),
            quantity=int(record.get("quantity", 0)),
            active=record.get("active", True),
        )
