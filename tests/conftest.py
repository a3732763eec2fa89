from datetime import date

import pytest

from sales_report.schemas import SalesRecord


def record(day, sku, quantity, total, unit_price=None):
    """Shorthand for a SalesRecord; `day` may be a date or a raw string."""
    if unit_price is None:
        unit_price = total / quantity if quantity else 0.0
    return SalesRecord(
        sale_date=day,
        sku=sku,
        unit_price=unit_price,
        quantity=quantity,
        total_price=total,
    )


@pytest.fixture
def january_records():
    return [
        record(date(2024, 1, 3), "A", 2, 20.0),
        record(date(2024, 1, 9), "B", 5, 15.0),
        record(date(2024, 1, 21), "A", 1, 10.0),
    ]


@pytest.fixture
def two_month_records():
    return [
        record(date(2024, 3, 1), "A", 4, 40.0),
        record(date(2024, 2, 11), "A", 1, 100.0),
        record(date(2024, 3, 2), "B", 1, 5.0),
        record(date(2024, 2, 12), "B", 3, 9.0),
        record(date(2024, 3, 20), "A", 2, 20.0),
        record(date(2024, 2, 28), "B", 2, 6.0),
    ]


SAMPLE_CSV = (
    "Date,SKU,Unit Price,Quantity,Total Price\n"
    "2024-01-03,A,10,2,20\n"
    "2024-01-09,B,3,5,15\n"
    "\n"
    "2024-01-21,A,10,1,10\n"
    "2024-02-02,B,3,4,12\n"
)


@pytest.fixture
def sample_csv_text():
    return SAMPLE_CSV
