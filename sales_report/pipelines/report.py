import logging
from pathlib import Path

from sales_report import parsers, settings, utils
from sales_report.builder import build_report
from sales_report.errors import ReportError
from sales_report.pipeline import DataPipeline
from sales_report.schemas import Report, SalesRecord

logger = logging.getLogger(__name__)


class SalesReportPipeline(DataPipeline):
    def __init__(self, source_file: Path | None = None, test_mode: bool = False):
        super().__init__("sales", test_mode=test_mode)
        self.source_file = source_file

    def _locate_source(self) -> Path | None:
        if self.source_file is not None:
            if not self.source_file.exists():
                logger.error(f"  > ERROR: Sales file not found: {self.source_file}")
                return None
            return self.source_file

        found_info = utils.find_latest_report(
            settings.INPUT_DIR, settings.SALES_FILENAME_PREFIX
        )
        if not found_info:
            logger.warning(
                f"  > ⚠️  No '{settings.SALES_FILENAME_PREFIX}*.csv' file in {settings.INPUT_DIR}."
            )
            return None

        path, file_date = found_info
        logger.info(f"  > Found: {path.name} (File Date: {file_date})")
        self.metadata["fileDate"] = file_date.isoformat()
        return path

    def extract(self) -> list[SalesRecord] | None:
        logger.info("--- Loading Sales Data ---")

        path = self._locate_source()
        if path is None:
            return None

        records = parsers.parse_sales_report(path)
        if records is None:
            logger.warning(f"  > ⚠️  No data processed from {path.name}.")
            return None

        self.metadata["sourceFile"] = path.name
        self.metadata["rows"] = len(records)
        logger.info(f"  > 📊 Rows Analyzed: {len(records)}")
        return records

    def transform(self, records: list[SalesRecord]) -> Report | None:
        logger.info("\n--- Building Sales Report ---")

        try:
            report = build_report(records)
        except ReportError as e:
            # The batch is discarded; a report with made-up values is never produced.
            logger.error(f"❌ Report could not be built: {e}")
            return None

        self.metadata["months"] = [month.label for month in report.months]
        logger.info(f"✅ Report built for {len(report.months)} month(s).")
        return report
