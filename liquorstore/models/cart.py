# models/cart.py
from dataclasses import dataclass
from decimal import Decimal

from liquorstore.models.product import Product
from liquorstore.services.exceptions import StockLimitReached
from liquorstore.utils.money import to_money
# Cart model: the customer's shopping cart before checkout.
@dataclass(frozen=True)
class CartLine:
    product_id: str
    name: str
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError("The quantity must be a positive number.")
        object.__setattr__(self, "unit_price", to_money(self.unit_price))

    @property
    def amount(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart:
    def __init__(self):
        # product_id -> [product, qty], insertion order is display order
        self._entries: dict[str, list] = {}

    def add(self, product: Product, qty: int = 1) -> None:
        if qty <= 0:
            raise ValueError("The quantity must be a positive number.")
        entry = self._entries.get(product.id)
        current = entry[1] if entry else 0
        if current + qty > product.quantity:
            raise StockLimitReached(product.id, product.quantity)
        self._entries[product.id] = [product, current + qty]

    def remove(self, product_id: str) -> None:
        self._entries.pop(product_id, None)

    def update_quantity(self, product_id: str, qty: int) -> None:
        entry = self._entries.get(product_id)
        if entry is None:
            raise KeyError(product_id)
        product = entry[0]
        if qty > product.quantity:
            raise StockLimitReached(product_id, product.quantity)
        entry[1] = max(1, qty)

    def lines(self) -> list[CartLine]:
        return [
            CartLine(product_id=p.id, name=p.name, unit_price=p.price, quantity=qty)
            for p, qty in self._entries.values()
        ]

    def total_items(self) -> int:
        return sum(qty for _, qty in self._entries.values())

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self):
        self._entries.clear()
