import json
import os

import pytest

from sales_report import data_handler, settings
from sales_report.pipelines.report import SalesReportPipeline
from sales_report.schemas import MonthKey


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir()
    monkeypatch.setattr(settings, "INPUT_DIR", input_dir)
    monkeypatch.setattr(settings, "OUTPUT_DIR", output_dir)
    monkeypatch.setattr(settings, "SALES_FILENAME_PREFIX", "sales_")
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", True)
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    return input_dir, output_dir


def test_run_builds_and_saves_latest_file(workspace, sample_csv_text):
    input_dir, output_dir = workspace
    old = input_dir / "sales_old.csv"
    old.write_text("Date,SKU,Unit Price,Quantity,Total Price\n2023-05-01,Z,1,1,1\n")
    os.utime(old, (1_600_000_000, 1_600_000_000))
    (input_dir / "sales_new.csv").write_text(sample_csv_text)

    pipeline = SalesReportPipeline(test_mode=True)
    report = pipeline.run()

    assert report.months == [MonthKey(2024, 1), MonthKey(2024, 2)]
    assert report.total_sales == 57.0
    assert pipeline.metadata["sourceFile"] == "sales_new.csv"
    assert pipeline.metadata["rows"] == 4
    assert pipeline.metadata["months"] == ["January 2024", "February 2024"]

    json_files = list(output_dir.glob("*.json"))
    assert len(json_files) == 1
    assert json.loads(json_files[0].read_text())["totalSales"] == 57.0


def test_run_with_explicit_file(workspace, tmp_path, sample_csv_text):
    source = tmp_path / "any_name.csv"
    source.write_text(sample_csv_text)

    report = SalesReportPipeline(source_file=source, test_mode=True).run()

    assert report.most_popular_item[MonthKey(2024, 1)] == "B"


def test_run_without_input_returns_none(workspace):
    _, output_dir = workspace

    assert SalesReportPipeline(test_mode=True).run() is None
    assert not output_dir.exists()


def test_missing_explicit_file_returns_none(workspace, tmp_path):
    assert SalesReportPipeline(source_file=tmp_path / "gone.csv", test_mode=True).run() is None


def test_report_errors_discard_the_batch(workspace):
    input_dir, output_dir = workspace
    (input_dir / "sales_bad.csv").write_text(
        "Date,SKU,Unit Price,Quantity,Total Price\n"
        "2024-01-01,A,1,1,1\n"
        "not-a-date,B,1,1,1\n"
    )

    assert SalesReportPipeline(test_mode=True).run() is None
    assert not output_dir.exists()


def test_webhook_is_posted_outside_test_mode(workspace, sample_csv_text, monkeypatch):
    input_dir, _ = workspace
    (input_dir / "sales_jan.csv").write_text(sample_csv_text)
    posted = {}

    def fake_post(report, metadata=None, report_type="sales"):
        posted["report"] = report
        posted["metadata"] = metadata
        posted["type"] = report_type
        return True

    monkeypatch.setattr(data_handler, "post_to_webhook", fake_post)

    report = SalesReportPipeline().run()

    assert posted["report"] is report
    assert posted["type"] == "sales"
    assert posted["metadata"]["sourceFile"] == "sales_jan.csv"
    assert "csv" in posted["metadata"]["outputs"]


def test_test_mode_never_posts(workspace, sample_csv_text, monkeypatch):
    input_dir, _ = workspace
    (input_dir / "sales_jan.csv").write_text(sample_csv_text)

    def fail(*args, **kwargs):
        raise AssertionError("should not post")

    monkeypatch.setattr(data_handler, "post_to_webhook", fail)

    assert SalesReportPipeline(test_mode=True).run() is not None
