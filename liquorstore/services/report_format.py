# services/report_format.py
# Display helpers for whoever renders a ReportRecord (PDF, screen, CSV).
# Reports carry exact Decimals; rounding to cents happens only here.
import re
from datetime import date
from decimal import Decimal

from liquorstore.models.report import ReportRecord, ReportType
from liquorstore.utils.money import as_cents

CURRENCY_COLUMNS = {
    ReportType.SALES: (3,),
    ReportType.PRODUCTS: (3,),
    ReportType.CUSTOMERS: (3, 4),
}


def format_currency(value) -> str:
    return f"${as_cents(value):.2f}"


def format_label(key: str) -> str:
    # "averageOrderValue" -> "Average Order Value"
    spaced = re.sub(r"([A-Z])", r" \1", key)
    return spaced[:1].upper() + spaced[1:]


def _is_number(value) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def format_display_value(key: str, value):
    if not _is_number(value):
        return value
    if "Revenue" in key or "Value" in key:
        return format_currency(value)
    if value == int(value):
        return int(value)
    return f"{as_cents(value):.2f}"


def summary_lines(report: ReportRecord) -> list[str]:
    return [f"{format_label(k)}: {format_display_value(k, v)}" for k, v in report.summary.items()]


def display_rows(report: ReportRecord) -> list[list]:
    money_cols = CURRENCY_COLUMNS.get(report.type, ())
    return [
        [format_currency(cell) if i in money_cols else cell for i, cell in enumerate(row)]
        for row in report.rows
    ]


def report_title(report: ReportRecord) -> str:
    return f"{report.type.value.capitalize()} Report"


def report_filename(report: ReportRecord, today: date, extension: str = "pdf") -> str:
    return f"{report.type.value}_report_{today.isoformat()}.{extension}"
