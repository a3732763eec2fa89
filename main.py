import argparse
from pathlib import Path

from sales_report import settings
from sales_report.logger import setup_logger
from sales_report.pipelines.report import SalesReportPipeline


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a monthly sales report from a sales CSV file."
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help=f"Sales CSV to process (default: latest '{settings.SALES_FILENAME_PREFIX}*.csv' in {settings.INPUT_DIR})",
    )
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Skip the webhook post.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    # Configure the package logger so every module's records reach console and file.
    setup_logger("sales_report", args.log_level)

    pipeline = SalesReportPipeline(source_file=args.file, test_mode=args.test_mode)
    report = pipeline.run()
    return 0 if report is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
