import logging
from abc import ABC, abstractmethod
from typing import Any

from . import data_handler, settings
from .presenter import render_report
from .schemas import Report

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for report pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, test_mode: bool = False):
        self.report_type = report_type
        self.test_mode = test_mode
        # Facts about the run (source file, row count, ...) sent along with the report
        self.metadata: dict[str, Any] = {}

    def run(self) -> Report | None:
        """
        Orchestrates the pipeline execution. Returns the report that was loaded, if any.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if raw_data is None:
            logger.warning(f"⚠️ No data extracted for {self.report_type}. Nothing to report.")
            return None

        # --- 2. TRANSFORM ---
        report = self.transform(raw_data)
        if report is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return None

        # --- 3. LOAD ---
        self.load(report)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return report

    @abstractmethod
    def extract(self) -> Any | None:
        """
        Responsible for finding the input and parsing it into records.
        Should also populate self.metadata as it goes.
        """
        pass

    @abstractmethod
    def transform(self, data: Any) -> Report | None:
        """
        Responsible for turning the extracted records into a Report.
        """
        pass

    def load(self, report: Report):
        """
        Shows the report, saves it to disk and posts it to the webhook.
        """
        # 1. Print the rendered report
        logger.info("\n" + render_report(report))

        # 2. Save Outputs (CSV/JSON)
        self.metadata["outputs"] = {
            kind: str(path)
            for kind, path in data_handler.save_outputs(
                report, settings.REPORT_FILENAME_BASE
            ).items()
        }

        # 3. Post to Webhook
        if not self.test_mode:
            data_handler.post_to_webhook(
                report,
                metadata=self.metadata,
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
