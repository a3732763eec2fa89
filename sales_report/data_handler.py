import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from . import settings
from . import utils
from .presenter import report_tables
from .schemas import Report

logger = logging.getLogger(__name__)


def save_outputs(report: Report, filename_base: str) -> dict[str, Path]:
    """
    Exports the report to a dated CSV (one row per month) and, when enabled, a JSON file.
    Returns the paths that were written.
    """
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.json"
    written = {}

    # Merge the per-month tables on Month into one flat summary.
    tables = list(report_tables(report).values())
    summary = tables[0]
    for table in tables[1:]:
        summary = summary.merge(table, on="Month", how="left")
    summary.to_csv(csv_path, index=False)
    written["csv"] = csv_path
    logger.info(f"✅ Monthly summary saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2, default=str)
        written["json"] = json_path
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return written


def post_to_webhook(
    report: Report,
    metadata: Optional[dict[str, Any]] = None,
    report_type: str = "sales",
) -> bool:
    """
    Posts the report AND its metadata to the webhook.
    Network failures are logged and reported through the return value.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} report to webhook: {settings.WEBHOOK_URL}")

    payload = {
        "reportType": report_type,
        "reportData": report.to_dict(),
        "metadata": metadata or {},
    }

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=15)
        response.raise_for_status()
        logger.info("✅ Report successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False
