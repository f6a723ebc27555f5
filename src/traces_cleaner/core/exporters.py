"""Exporters: findings DataFrame, findings CSV (always ;), TXT report."""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

import pandas as pd

from traces_cleaner.core.models import InspectionReport

FINDING_COLUMNS: list[str] = [
    "kind",
    "char",
    "code",
    "name",
    "category",
    "count",
    "positions",
    "replacement",
]


# ---------------------------------------------------------------------------
# DataFrame
# ---------------------------------------------------------------------------


def findings_frame(report: InspectionReport) -> pd.DataFrame:
    """Flatten a report into one row per distinct finding.

    ``kind`` is ``"invisible"``, ``"homoglyph"`` or the whitespace issue kind.
    Columns that do not apply to a row are empty strings.
    """
    rows: list[dict] = []

    for ch, entry in report.invisible.chars.items():
        info = entry.descriptor
        rows.append(
            {
                "kind": "invisible",
                "char": ch,
                "code": info.code,
                "name": info.name,
                "category": info.category.value,
                "count": entry.count,
                "positions": " ".join(str(p) for p in entry.positions),
                "replacement": "",
            }
        )

    for ch, entry in report.homoglyphs.chars.items():
        rows.append(
            {
                "kind": "homoglyph",
                "char": ch,
                "code": entry.code,
                "name": "",
                "category": "",
                "count": entry.count,
                "positions": "",
                "replacement": entry.replacement,
            }
        )

    for issue in report.whitespace.issues:
        rows.append(
            {
                "kind": issue.kind.value,
                "char": "",
                "code": "",
                "name": issue.description,
                "category": "",
                "count": issue.count,
                "positions": "",
                "replacement": "",
            }
        )

    df = pd.DataFrame(rows, columns=FINDING_COLUMNS)
    return df.astype({"count": "int64"})


# ---------------------------------------------------------------------------
# Findings CSV export (ALWAYS ; delimiter)
# ---------------------------------------------------------------------------


class FindingsCSVExporter:
    """Export the findings table to CSV.

    - Delimiter: ;
    - Quote char: "
    - Quoting: QUOTE_MINIMAL (cells with ; or " or newline are quoted)
    - Encoding: UTF-8 or UTF-8-BOM
    - Characters are written as their code label; the raw invisible character
      would be unreadable in a spreadsheet.
    """

    def export(self, report: InspectionReport, path: Path, bom: bool = False) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        encoding = "utf-8-sig" if bom else "utf-8"
        df = findings_frame(report).drop(columns=["char"])

        with path.open("w", encoding=encoding, newline="") as f:
            writer = csv.writer(f, delimiter=";", quotechar='"', quoting=csv.QUOTE_MINIMAL)
            writer.writerow(list(df.columns))
            for row in df.itertuples(index=False, name=None):
                writer.writerow(["" if pd.isna(v) else str(v) for v in row])


# ---------------------------------------------------------------------------
# TXT report
# ---------------------------------------------------------------------------


class TXTReporter:
    """Generate a human-readable text report."""

    def export(self, report: InspectionReport, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(report), encoding="utf-8")

    def render(self, report: InspectionReport) -> str:
        lines: list[str] = []
        ts = datetime.now().strftime("%Y-%m-%d %H:%M")

        # Header
        lines.append("=" * 72)
        lines.append("TracesCleaner report")
        lines.append(f"Generated: {ts}")
        if report.profile_id:
            lines.append(f"Profile:   {report.profile_id}")
        lines.append(
            f"Length:    {len(report.text)} -> {len(report.cleaned)} characters "
            f"({report.removed_count} removed)"
        )
        lines.append("=" * 72)
        lines.append("")

        # Summary counts
        lines.append("Summary")
        lines.append("-" * 40)
        lines.append(f"  {'Invisible characters':<24} {report.invisible.total:>5}")
        lines.append(f"  {'Homoglyphs':<24} {report.homoglyphs.total:>5}")
        lines.append(f"  {'Whitespace anomalies':<24} {report.whitespace.total:>5}")
        lines.append(f"  {'Hidden incl. formatting':<24} {report.hidden.total:>5}")
        lines.append("")

        if report.is_clean:
            lines.append("No hidden characters, homoglyphs or whitespace anomalies.")
            return "\n".join(lines)

        if report.invisible.chars:
            lines.append("Invisible characters")
            lines.append("-" * 40)
            for entry in report.invisible.chars.values():
                info = entry.descriptor
                lines.append(f"  {info.code:<10} {info.name:<36} x{entry.count}")
            lines.append("")

        if report.homoglyphs.chars:
            lines.append("Homoglyphs")
            lines.append("-" * 40)
            for entry in report.homoglyphs.chars.values():
                lines.append(f"  {entry.code:<10} -> {entry.replacement!r:<8} x{entry.count}")
            lines.append("")

        if report.whitespace.issues:
            lines.append("Whitespace")
            lines.append("-" * 40)
            for issue in report.whitespace.issues:
                lines.append(f"  {issue.description:<47} x{issue.count}")
            lines.append("")

        return "\n".join(lines)
