# services/report_service.py
from datetime import datetime, time
from decimal import Decimal
from typing import Iterable

from liquorstore.models.report import DateRange, ReportRecord, ReportType
from liquorstore.services.exceptions import UnknownReportType
from liquorstore.utils.logger import get_logger
from liquorstore.utils.money import ZERO, to_money
from liquorstore.utils.timeutil import align_tz, parse_timestamp
# report_service.py turns the raw orders / products / users collections into
# the three admin reports (sales, products, customers).
# Everything works on the records exactly as the store returns them.
logger = get_logger("reports")

SALES_HEADERS = ["Order ID", "Date", "Customer", "Total", "Status"]
PRODUCTS_HEADERS = ["Product", "Category", "Units Sold", "Revenue"]
CUSTOMERS_HEADERS = ["Customer", "Email", "Total Orders", "Total Spent", "Avg Order"]


def index_by_id(records: Iterable[dict]) -> dict[str, dict]:
    return {str(r["id"]): r for r in records if r.get("id") is not None}


def order_created_at(order: dict) -> datetime | None:
    return parse_timestamp(order.get("createdAt"))


def _lower_bound(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _upper_bound(value) -> datetime:
    # a bare date means "through the end of that day"
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.max)


def filter_by_date_range(orders: Iterable[dict], date_range: DateRange | None) -> list[dict]:
    #Keeps orders created within [start, end], both ends inclusive.
    #Without both ends every order passes through.
    orders = list(orders)
    if date_range is None or not date_range.is_bounded:
        return orders

    start = _lower_bound(date_range.start)
    end = _upper_bound(date_range.end)

    def in_range(order: dict) -> bool:
        created = order_created_at(order)
        if created is None:
            return False
        return align_tz(start, created) <= created <= align_tz(end, created)

    return list(filter(in_range, orders))


def _average(total: Decimal, count: int) -> Decimal:
    return total / count if count > 0 else ZERO


def generate_sales_report(orders: Iterable[dict], user_index: dict[str, dict]) -> ReportRecord:
    rows = []
    total_revenue = ZERO
    for order in orders:
        created = order_created_at(order)
        user = user_index.get(str(order.get("userId"))) or {}
        total = to_money(order.get("orderTotal"))
        total_revenue += total
        rows.append([
            order.get("orderId") or order.get("id"),
            created.date().isoformat() if created else "",
            user.get("name") or "Unknown",
            total,
            order.get("orderStatus"),
        ])

    summary = {
        "totalOrders": len(rows),
        "totalRevenue": total_revenue,
        "averageOrderValue": _average(total_revenue, len(rows)),
    }
    return ReportRecord(type=ReportType.SALES, summary=summary, headers=list(SALES_HEADERS), rows=rows)


def generate_products_report(orders: Iterable[dict], product_index: dict[str, dict]) -> ReportRecord:
    # Revenue uses the catalogue price; lines for products no longer in the
    # catalogue are skipped.
    stats: dict[str, dict] = {}
    for order in orders:
        for item in order.get("productList") or []:
            product_id = str(item.get("productId"))
            product = product_index.get(product_id)
            if product is None:
                continue
            qty = int(item.get("quantity", 0))
            current = stats.setdefault(product_id, {
                "name": product.get("name", ""),
                "category": product.get("category", ""),
                "quantity": 0,
                "revenue": ZERO,
            })
            current["quantity"] += qty
            current["revenue"] += to_money(product.get("price")) * qty

    # sorted() is stable, ties keep the order they were first sold in
    data = sorted(stats.values(), key=lambda p: p["revenue"], reverse=True)
    total_revenue = sum((p["revenue"] for p in data), ZERO)

    summary = {
        "totalProducts": len(data),
        "totalUnitsSold": sum(p["quantity"] for p in data),
        "totalRevenue": total_revenue,
    }
    rows = [[p["name"], p["category"], p["quantity"], p["revenue"]] for p in data]
    return ReportRecord(type=ReportType.PRODUCTS, summary=summary, headers=list(PRODUCTS_HEADERS), rows=rows)


def generate_customers_report(orders: Iterable[dict], users: Iterable[dict]) -> ReportRecord:
    per_user: dict[str, list] = {}
    for order in orders:
        entry = per_user.setdefault(str(order.get("userId")), [0, ZERO])
        entry[0] += 1
        entry[1] += to_money(order.get("orderTotal"))

    data = []
    for user in users:
        count, spent = per_user.get(str(user.get("id")), (0, ZERO))
        if count == 0:
            continue
        data.append({
            "name": user.get("name") or "Unknown",
            "email": user.get("email") or "N/A",
            "orders": count,
            "spent": spent,
            "avg": _average(spent, count),
        })
    data.sort(key=lambda u: u["spent"], reverse=True)

    total_revenue = sum((u["spent"] for u in data), ZERO)
    summary = {
        "totalCustomers": len(data),
        "totalRevenue": total_revenue,
        "avgCustomerValue": _average(total_revenue, len(data)),
    }
    rows = [[u["name"], u["email"], u["orders"], u["spent"], u["avg"]] for u in data]
    return ReportRecord(type=ReportType.CUSTOMERS, summary=summary, headers=list(CUSTOMERS_HEADERS), rows=rows)


class ReportService:
    def __init__(self, repo):
        self.repo = repo

    def generate(self, report_type: ReportType | str, date_range: DateRange | None = None) -> ReportRecord:
        # This method builds one report from a fresh snapshot of the store.
        # report_type: "sales", "products" or "customers"
        # date_range: optional DateRange; without both ends all orders count.
        try:
            report_type = ReportType(report_type)
        except ValueError:
            raise UnknownReportType(report_type)

        orders = self.repo.get_all_orders()
        filtered = filter_by_date_range(orders, date_range)

        if report_type is ReportType.SALES:
            report = generate_sales_report(filtered, index_by_id(self.repo.get_all_users()))
        elif report_type is ReportType.PRODUCTS:
            report = generate_products_report(filtered, index_by_id(self.repo.get_all_products()))
        else:
            report = generate_customers_report(filtered, self.repo.get_all_users())

        logger.info(
            f"{report_type.value} report: {len(filtered)}/{len(orders)} orders in range, "
            f"{len(report.rows)} rows"
        )
        return report
