"""
Unit tests for dashboard and analytics figures.
"""

from decimal import Decimal

from liquorstore.services.analytics_service import (customer_lifetime_value,
                                                    dashboard_stats,
                                                    low_stock,
                                                    revenue_by_category,
                                                    revenue_by_date,
                                                    status_counts,
                                                    top_selling_products)


def test_revenue_by_date(orders):
    assert revenue_by_date(orders) == {
        "2026-10-01": Decimal("64.78"),
        "2026-10-05": Decimal("92.35"),
        "2026-10-12": Decimal("20.00"),
    }


def test_revenue_by_date_merges_same_day():
    orders = [
        {"createdAt": "2026-10-01T09:00:00", "orderTotal": "1.10"},
        {"createdAt": "2026-10-01T21:00:00", "orderTotal": "2.20"},
        {"orderTotal": "99"},
    ]
    assert revenue_by_date(orders) == {"2026-10-01": Decimal("3.30")}


def test_status_counts(orders):
    assert status_counts(orders) == {"Processing": 1, "Completed": 1, "Cancelled": 1}


def test_revenue_by_category(orders, products):
    assert revenue_by_category(orders, products) == {
        "Whiskey": Decimal("59.98"),
        "Tequila": Decimal("49.99"),
        "Beer": Decimal("55.50"),
    }


def test_customer_lifetime_value_spreads_over_all_users(orders, users):
    assert customer_lifetime_value(orders, users) == Decimal("177.13") / 3


def test_customer_lifetime_value_without_users(orders):
    assert customer_lifetime_value(orders, []) == 0


def test_top_selling_products(orders, products):
    top = top_selling_products(orders, products, limit=2)
    assert [(p["id"], p["quantity"]) for p in top] == [("p3", 3), ("p1", 2)]
    assert top[0]["amount"] == Decimal("55.50")


def test_top_selling_skips_unknown_products(orders, products):
    # "gone" sold the most units but is no longer in the catalogue
    assert "gone" not in [p["id"] for p in top_selling_products(orders, products)]


def test_low_stock(products):
    assert low_stock(products) == [("p2", 3)]
    assert low_stock(products, threshold=12) == [("p1", 12), ("p2", 3)]


def test_dashboard_stats(products, orders):
    assert dashboard_stats(products, orders) == {
        "products": 3,
        "orders": 3,
        "revenue": Decimal("177.13"),
    }


def test_empty_inputs():
    assert revenue_by_date([]) == {}
    assert status_counts([]) == {}
    assert top_selling_products([], []) == []
    assert dashboard_stats([], []) == {"products": 0, "orders": 0, "revenue": 0}
