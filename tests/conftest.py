"""
Shared fixtures: a small catalogue, three users, three orders and a
JSON-file store in a temporary directory.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from liquorstore.data.repository import DataRepository
from liquorstore.models.cart import Cart
from liquorstore.models.product import Product

# Monday afternoon; the clock every checkout test runs on
NOW = datetime(2026, 10, 19, 15, 5)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def products():
    return [
        {"id": "p1", "name": "Old Forester Bourbon", "category": "Whiskey", "price": 29.99, "quantity": 12},
        {"id": "p2", "name": "Casamigos Blanco", "category": "Tequila", "price": 49.99, "quantity": 3},
        {"id": "p3", "name": "Modelo 12pk", "category": "Beer", "price": 18.50, "quantity": 40},
    ]


@pytest.fixture
def users():
    return [
        {"id": "u1", "name": "Ana Ruiz", "email": "ana@example.com", "orderHistory": []},
        {"id": "u2", "name": "Ben Cole", "email": "ben@example.com"},
        {"id": "u3", "name": "Cara Diaz", "email": "cara@example.com"},
    ]


@pytest.fixture
def orders():
    return [
        {
            "id": "o1",
            "userId": "u1",
            "createdAt": "2026-10-01T14:00:00",
            "productList": [{"productId": "p1", "quantity": 2}],
            "orderTotal": "64.78",
            "orderStatus": "Processing",
        },
        {
            "id": "o2",
            "userId": "u2",
            "createdAt": "2026-10-05T18:30:00",
            "productList": [{"productId": "p2", "quantity": 1}, {"productId": "p3", "quantity": 2}],
            "orderTotal": "92.35",
            "orderStatus": "Completed",
        },
        {
            "id": "o3",
            "userId": "u1",
            "createdAt": "2026-10-12T11:15:00",
            "productList": [{"productId": "p3", "quantity": 1}, {"productId": "gone", "quantity": 4}],
            "orderTotal": "20.00",
            "orderStatus": "Cancelled",
        },
    ]


@pytest.fixture
def repo(tmp_path):
    return DataRepository(tmp_path / "storage")


@pytest.fixture
def seeded_repo(repo, products, users, orders):
    repo.save_products(products)
    repo.save_users(users)
    repo.save_orders(orders)
    repo.save_store_settings({
        "storeName": "Corner Bottle Shop",
        "businessHours": {"open": "08:00", "close": "22:00"},
        "defaultTax": 0.0825,
        "maxItemsAllowed": 7,
    })
    return repo


@pytest.fixture
def bourbon():
    return Product(id="p1", name="Old Forester Bourbon", category="Whiskey", price=Decimal("29.99"), quantity=12)


@pytest.fixture
def tequila():
    return Product(id="p2", name="Casamigos Blanco", category="Tequila", price=Decimal("49.99"), quantity=3)


@pytest.fixture
def cart(bourbon, tequila):
    cart = Cart()
    cart.add(bourbon, 2)
    cart.add(tequila, 1)
    return cart
