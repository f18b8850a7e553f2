# models/report.py
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
# Report shapes handed to whatever renders or exports them.
class ReportType(str, Enum):
    SALES = "sales"
    PRODUCTS = "products"
    CUSTOMERS = "customers"


@dataclass(frozen=True)
class DateRange:
    start: date | datetime | None = None
    end: date | datetime | None = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class ReportRecord:
    type: ReportType
    summary: dict
    headers: list
    rows: list
