import io
import logging
import math
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from . import settings
from .schemas import SalesRecord
from .utils import load_csv

logger = logging.getLogger(__name__)

# Read identifiers and dates as text; numeric columns are coerced afterwards.
_TEXT_DTYPES = {"Date": str, "SKU": str}


def _to_quantity(value: float) -> int | float:
    """Whole-number quantities become int; NaN stays as the failure sentinel."""
    if not math.isfinite(value):
        return value
    return int(value)


def records_from_dataframe(df: pd.DataFrame) -> list[SalesRecord] | None:
    """
    Converts a raw sales DataFrame into validated SalesRecord models.
    - Requires the five fixed columns (extra columns are ignored).
    - Coerces numeric columns; unparseable cells become NaN instead of dropping the row.
    """
    df = df.rename(columns=lambda c: str(c).strip())
    missing = [col for col in settings.SALES_COLUMNS if col not in df.columns]
    if missing:
        logger.error(f"❌ Sales data is missing required columns: {', '.join(missing)}")
        return None

    df = df[list(settings.SALES_COLUMNS)].copy()
    for col in settings.NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
    df["SKU"] = df["SKU"].fillna("").astype(str).str.strip()

    rows = df.to_dict("records")
    for row in rows:
        row["Quantity"] = _to_quantity(row["Quantity"])

    try:
        records = [SalesRecord(**{str(k): v for k, v in row.items()}) for row in rows]
    except ValidationError as e:
        logger.error("❌ Sales record validation failed!")
        logger.error(e)
        return None

    undated = sum(1 for r in records if r.sale_date is None)
    if undated:
        logger.warning(f"  > ⚠️  {undated} row(s) have an unparseable date.")
    return records


def parse_sales_text(content: str) -> list[SalesRecord] | None:
    """Parses delimited sales text (header row first, blank lines skipped)."""
    try:
        df = pd.read_csv(io.StringIO(content), dtype=_TEXT_DTYPES, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        logger.warning("⚠️ Sales text is empty.")
        return []
    except pd.errors.ParserError as e:
        logger.error(f"❌ Could not parse sales text: {e}")
        return None
    return records_from_dataframe(df)


def parse_sales_report(file_path: Path) -> list[SalesRecord] | None:
    """Loads a sales CSV file and transforms it into SalesRecord models."""
    df = load_csv(file_path, dtype=_TEXT_DTYPES, skip_blank_lines=True)
    if df is None:
        return None

    records = records_from_dataframe(df)
    if records is not None:
        logger.info(f"✅ Parsed {file_path.name} successfully ({len(records)} rows).")
    return records
