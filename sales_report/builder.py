import logging
import math
from typing import Callable, Iterable, NamedTuple, Sequence

from .errors import EmptyGroupError, InvalidDateError
from .schemas import ItemStatistics, MonthKey, Report, SalesRecord

logger = logging.getLogger(__name__)


class RunningBest(NamedTuple):
    """Accumulator for the "strictly greater wins" leader scan."""

    sku: str = ""
    value: float = 0

    def offer(self, sku: str, value: float) -> "RunningBest":
        # Ties keep the current leader; NaN never compares greater.
        if value > self.value:
            return RunningBest(sku, value)
        return self


def month_key_for(record: SalesRecord, index: int = 0) -> MonthKey:
    if record.sale_date is None:
        raise InvalidDateError(index, record.sku)
    return MonthKey.from_date(record.sale_date)


def group_by_month(records: Iterable[SalesRecord]) -> dict[MonthKey, list[SalesRecord]]:
    """Buckets records by calendar month, keeping first-seen month order."""
    buckets: dict[MonthKey, list[SalesRecord]] = {}
    for index, record in enumerate(records):
        buckets.setdefault(month_key_for(record, index), []).append(record)
    return buckets


def leading_sku(
    records: Iterable[SalesRecord], value_of: Callable[[SalesRecord], float]
) -> RunningBest:
    """
    Scans records in order, keeping a cumulative total per SKU, and returns the
    SKU that first reached the highest cumulative total. Starts from ("", 0), so
    if no SKU ever nets above zero the placeholder is returned unchanged.
    """
    totals: dict[str, float] = {}
    best = RunningBest()
    for record in records:
        totals[record.sku] = totals.get(record.sku, 0) + value_of(record)
        best = best.offer(record.sku, totals[record.sku])
    return best


def order_statistics(
    records: Sequence[SalesRecord], sku: str, month: MonthKey | None = None
) -> ItemStatistics:
    """Min/max/mean of the individual order quantities for one SKU."""
    quantities = [r.quantity for r in records if r.sku == sku]
    if not quantities:
        raise EmptyGroupError(month, sku)
    if any(math.isnan(q) for q in quantities):
        # One unparseable order makes every statistic unknown.
        nan = float("nan")
        return ItemStatistics(min_orders=nan, max_orders=nan, avg_orders=nan)
    return ItemStatistics(
        min_orders=min(quantities),
        max_orders=max(quantities),
        avg_orders=sum(quantities) / len(quantities),
    )


def build_report(records: Sequence[SalesRecord]) -> Report:
    """
    Builds the monthly sales report for one batch of records.

    Raises InvalidDateError when a record has no usable date and EmptyGroupError
    when a month's most popular SKU has no orders to describe (which happens
    when no SKU in that month sells a positive quantity).
    """
    total_sales = sum((r.total_price for r in records), 0.0)

    monthly_sales: dict[MonthKey, float] = {}
    most_popular: dict[MonthKey, str] = {}
    highest_revenue: dict[MonthKey, str] = {}
    statistics: dict[MonthKey, ItemStatistics] = {}

    for month, bucket in group_by_month(records).items():
        popular = leading_sku(bucket, lambda r: r.quantity)
        top_revenue = leading_sku(bucket, lambda r: r.total_price)

        monthly_sales[month] = sum((r.total_price for r in bucket), 0.0)
        most_popular[month] = popular.sku
        highest_revenue[month] = top_revenue.sku
        statistics[month] = order_statistics(bucket, popular.sku, month)

        logger.debug(
            f"{month}: revenue={monthly_sales[month]}, "
            f"popular={popular.sku!r} ({popular.value}), "
            f"top revenue={top_revenue.sku!r} ({top_revenue.value})"
        )

    return Report(
        total_sales=total_sales,
        monthly_sales=monthly_sales,
        most_popular_item=most_popular,
        highest_revenue_item=highest_revenue,
        item_statistics=statistics,
    )
