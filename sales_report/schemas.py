from datetime import date, datetime
from types import MappingProxyType
from typing import NamedTuple, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import settings


class MonthKey(NamedTuple):
    """
    Grouping key for one calendar month. Equality and hashing use the
    (year, month) numbers only; `label` is for display.
    """

    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> "MonthKey":
        return cls(value.year, value.month)

    @property
    def label(self) -> str:
        return f"{settings.MONTH_NAMES[self.month - 1]} {self.year}"

    def __str__(self) -> str:
        return self.label


class SalesRecord(BaseModel):
    """
    Defines the data contract for a single row of the uploaded sales file.
    Numeric fields are not range-checked: values that failed to parse arrive as NaN
    and are carried through as-is. An unparseable date is stored as None.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sale_date: Optional[date] = Field(..., alias="Date")
    sku: str = Field(..., alias="SKU")
    unit_price: float = Field(..., alias="Unit Price")
    quantity: int | float = Field(..., alias="Quantity")
    total_price: float = Field(..., alias="Total Price")

    @field_validator("sale_date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        if value is None:
            return None
        # datetime is a subclass of date, so check it first
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        parsed = pd.to_datetime(value, errors="coerce")
        if pd.isna(parsed):
            return None
        return parsed.date()


class ItemStatistics(BaseModel):
    """Order-size statistics for one SKU within one month."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    min_orders: float = Field(..., alias="minOrders")
    max_orders: float = Field(..., alias="maxOrders")
    avg_orders: float = Field(..., alias="avgOrders")


_REPORT_MAPS = (
    "monthly_sales",
    "most_popular_item",
    "highest_revenue_item",
    "item_statistics",
)


class Report(BaseModel):
    """
    The finished sales report. All four per-month maps share the same keys,
    in the order each month first appeared in the input.
    """

    model_config = ConfigDict(frozen=True)

    total_sales: float = 0.0
    monthly_sales: dict[MonthKey, float] = Field(default_factory=dict)
    most_popular_item: dict[MonthKey, str] = Field(default_factory=dict)
    highest_revenue_item: dict[MonthKey, str] = Field(default_factory=dict)
    item_statistics: dict[MonthKey, ItemStatistics] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _freeze_maps(self) -> "Report":
        # frozen=True only blocks reassignment; the maps themselves become read-only views.
        for name in _REPORT_MAPS:
            self.__dict__[name] = MappingProxyType(dict(getattr(self, name)))
        return self

    @property
    def months(self) -> list[MonthKey]:
        return list(self.monthly_sales)

    def to_dict(self) -> dict:
        """Plain nested dict keyed by month label, ready for json.dump."""
        return {
            "totalSales": self.total_sales,
            "monthlySales": {m.label: v for m, v in self.monthly_sales.items()},
            "mostPopularItem": {m.label: v for m, v in self.most_popular_item.items()},
            "highestRevenueItem": {
                m.label: v for m, v in self.highest_revenue_item.items()
            },
            "itemStatistics": {
                m.label: stats.model_dump(by_alias=True)
                for m, stats in self.item_statistics.items()
            },
        }
