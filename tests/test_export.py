"""Tests for the findings DataFrame, CSV exporter and TXT reporter."""

from __future__ import annotations

import csv

import pytest

from traces_cleaner.core.engine import InspectionEngine
from traces_cleaner.core.exporters import (
    FINDING_COLUMNS,
    FindingsCSVExporter,
    TXTReporter,
    findings_frame,
)


@pytest.fixture
def report(watermarked_text):
    return InspectionEngine().inspect(watermarked_text, config={"id": "default"})


@pytest.fixture
def clean_report(clean_text):
    return InspectionEngine().inspect(clean_text)


# ---------------------------------------------------------------------------
# findings_frame
# ---------------------------------------------------------------------------


class TestFindingsFrame:
    def test_columns(self, report):
        df = findings_frame(report)
        assert list(df.columns) == FINDING_COLUMNS

    def test_one_row_per_finding(self, report):
        df = findings_frame(report)
        expected = (
            len(report.invisible.chars)
            + len(report.homoglyphs.chars)
            + len(report.whitespace.issues)
        )
        assert len(df) == expected

    def test_invisible_row(self, report):
        df = findings_frame(report)
        row = df[df["code"] == "U+200B"].iloc[0]
        assert row["kind"] == "invisible"
        assert row["name"] == "Zero-Width Space"
        assert row["category"] == "zero-width"
        assert row["count"] == 1
        assert row["positions"] == "10"

    def test_homoglyph_row(self, report):
        df = findings_frame(report)
        row = df[df["code"] == "U+0435"].iloc[0]
        assert row["kind"] == "homoglyph"
        assert row["replacement"] == "e"

    def test_whitespace_rows(self, report):
        df = findings_frame(report)
        kinds = set(df["kind"])
        assert {"trailing-space", "double-space"} <= kinds

    def test_count_dtype(self, report):
        assert str(findings_frame(report)["count"].dtype) == "int64"

    def test_clean_report_is_empty(self, clean_report):
        df = findings_frame(clean_report)
        assert df.empty
        assert list(df.columns) == FINDING_COLUMNS


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


class TestFindingsCSVExporter:
    def test_semicolon_delimiter(self, report, tmp_path):
        out = tmp_path / "findings.csv"
        FindingsCSVExporter().export(report, out)
        header = out.read_text(encoding="utf-8").splitlines()[0]
        assert header == "kind;code;name;category;count;positions;replacement"

    def test_rows_match_frame(self, report, tmp_path):
        out = tmp_path / "findings.csv"
        FindingsCSVExporter().export(report, out)
        with out.open(encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f, delimiter=";"))
        assert len(rows) == len(findings_frame(report))
        zwsp = next(r for r in rows if r["code"] == "U+200B")
        assert zwsp["count"] == "1"

    def test_no_raw_invisible_characters(self, report, tmp_path):
        out = tmp_path / "findings.csv"
        FindingsCSVExporter().export(report, out)
        content = out.read_text(encoding="utf-8")
        assert "\u200b" not in content
        assert "\ufeff" not in content

    def test_bom_option(self, report, tmp_path):
        out = tmp_path / "findings_bom.csv"
        FindingsCSVExporter().export(report, out, bom=True)
        assert out.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_no_bom_by_default(self, report, tmp_path):
        out = tmp_path / "findings.csv"
        FindingsCSVExporter().export(report, out)
        assert not out.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_creates_parent_dirs(self, report, tmp_path):
        out = tmp_path / "nested" / "dir" / "findings.csv"
        FindingsCSVExporter().export(report, out)
        assert out.exists()


# ---------------------------------------------------------------------------
# TXT
# ---------------------------------------------------------------------------


class TestTXTReporter:
    def test_header(self, report):
        text = TXTReporter().render(report)
        assert "TracesCleaner report" in text
        assert "Profile:   default" in text
        assert f"({report.removed_count} removed)" in text

    def test_sections(self, report):
        text = TXTReporter().render(report)
        assert "Invisible characters" in text
        assert "Zero-Width Space" in text
        assert "Homoglyphs" in text
        assert "U+0435" in text
        assert "Whitespace" in text
        assert "Trailing spaces on lines" in text

    def test_clean_report(self, clean_report):
        text = TXTReporter().render(clean_report)
        assert "No hidden characters, homoglyphs or whitespace anomalies." in text
        assert "Profile:" not in text

    def test_export_writes_file(self, report, tmp_path):
        out = tmp_path / "reports" / "report.txt"
        TXTReporter().export(report, out)
        assert out.read_text(encoding="utf-8").startswith("=" * 72)
