import pandas as pd

from . import settings
from .schemas import Report


def format_currency(amount: float) -> str:
    return f"{settings.CURRENCY_SYMBOL}{amount:.2f}"


def report_tables(report: Report) -> dict[str, pd.DataFrame]:
    """
    Builds the four per-month tables shown under the total.
    Months keep the report's order; labels are produced only here.
    """
    labels = [month.label for month in report.months]

    monthly = pd.DataFrame(
        {
            "Month": labels,
            "Sale": [format_currency(v) for v in report.monthly_sales.values()],
        }
    )
    popular = pd.DataFrame(
        {
            "Month": labels,
            "Most Popular Item": [report.most_popular_item[m] for m in report.months],
        }
    )
    revenue = pd.DataFrame(
        {
            "Month": labels,
            "Items Generating Most Revenue": [
                report.highest_revenue_item[m] for m in report.months
            ],
        }
    )
    stats = pd.DataFrame(
        {
            "Month": labels,
            "Minimum Order": [f"{report.item_statistics[m].min_orders:g}" for m in report.months],
            "Maximum Order": [f"{report.item_statistics[m].max_orders:g}" for m in report.months],
            "Average Orders": [
                f"{report.item_statistics[m].avg_orders:.2f}" for m in report.months
            ],
        }
    )

    return {
        "Monthly Sales Totals": monthly,
        "Most Popular Item (Most Quantity Sold) per Month": popular,
        "Items Generating Most Revenue per Month": revenue,
        "Most Popular Item Statistics (Min, Max, Avg Orders)": stats,
    }


def render_report(report: Report) -> str:
    """Renders the report as plain text: headline total, then one table per section."""
    lines = [f"Total Sales: {format_currency(report.total_sales)}"]

    for title, table in report_tables(report).items():
        lines.append("")
        lines.append(f"{title}:")
        if table.empty:
            lines.append("  (no data)")
        else:
            lines.append(table.to_string(index=False))

    return "\n".join(lines)
