# services/analytics_service.py
"""
analytics_service.py

Figures behind the admin dashboard and analytics charts.

All functions take collections as the store returns them (usually already
passed through report_service.filter_by_date_range) and keep no state
between calls.
"""

from collections import Counter
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from liquorstore.services.report_service import index_by_id, order_created_at
from liquorstore.utils.money import ZERO, to_money

LOW_STOCK_THRESHOLD = 5


def revenue_by_date(orders: Iterable[Dict]) -> Dict[str, Decimal]:
    # "2026-10-19" -> revenue that day, in the order days are first seen
    revenue: Dict[str, Decimal] = {}
    for order in orders:
        created = order_created_at(order)
        if created is None:
            continue
        day = created.date().isoformat()
        revenue[day] = revenue.get(day, ZERO) + to_money(order.get("orderTotal"))
    return revenue


def status_counts(orders: Iterable[Dict]) -> Dict[str, int]:
    return dict(Counter(order.get("orderStatus") for order in orders))


def revenue_by_category(orders: Iterable[Dict], products: Iterable[Dict]) -> Dict[str, Decimal]:
    product_index = index_by_id(products)
    revenue: Dict[str, Decimal] = {}
    for order in orders:
        for item in order.get("productList") or []:
            product = product_index.get(str(item.get("productId")))
            if product is None:
                continue
            category = product.get("category", "")
            amount = to_money(product.get("price")) * int(item.get("quantity", 0))
            revenue[category] = revenue.get(category, ZERO) + amount
    return revenue


def customer_lifetime_value(orders: Iterable[Dict], users: Iterable[Dict]) -> Decimal:
    # Spread over every registered user, not just the ones who ordered.
    users = list(users)
    if not users:
        return ZERO
    total = sum((to_money(o.get("orderTotal")) for o in orders), ZERO)
    return total / len(users)


def top_selling_products(orders: Iterable[Dict], products: Iterable[Dict], limit: int = 5) -> List[Dict]:
    # Use Counter to track how many units of each product have been sold;
    # most_common() ranks them.
    counter: Counter = Counter()
    for order in orders:
        for item in order.get("productList") or []:
            counter[str(item.get("productId"))] += int(item.get("quantity", 0))

    product_index = index_by_id(products)
    top = []
    for product_id, quantity in counter.most_common():
        product = product_index.get(product_id)
        if product is None:
            continue
        price = to_money(product.get("price"))
        top.append({
            "id": product_id,
            "name": product.get("name", ""),
            "price": price,
            "quantity": quantity,
            "amount": price * quantity,
        })
        if len(top) == limit:
            break
    return top


def low_stock(products: Iterable[Dict], threshold: int = LOW_STOCK_THRESHOLD) -> List[Tuple[str, int]]:
    # Alert for products with low stock (0 means out of stock).
    return [
        (str(p["id"]), int(p.get("quantity", 0)))
        for p in products
        if int(p.get("quantity", 0)) <= threshold
    ]


def dashboard_stats(products: Iterable[Dict], orders: Iterable[Dict]) -> Dict:
    orders = list(orders)
    return {
        "products": len(list(products)),
        "orders": len(orders),
        "revenue": sum((to_money(o.get("orderTotal")) for o in orders), ZERO),
    }
