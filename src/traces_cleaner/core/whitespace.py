"""Whitespace anomaly analyzer.

Detects:
- Trailing spaces/tabs at line ends
- Runs of multiple spaces between words (indentation excluded)
- Mixed CRLF / LF line endings
- Non-standard space characters (one issue per distinct space)
"""

from __future__ import annotations

from traces_cleaner.core.models import WhitespaceKind, WhitespaceReport
from traces_cleaner.core.registry import SPECIAL_SPACES
from traces_cleaner.core.text_utils import BARE_LF_RE, INNER_MULTI_SPACE_RE, TRAILING_WS_RE


def detect_whitespace_anomalies(text: str) -> WhitespaceReport:
    report = WhitespaceReport()

    trailing = len(TRAILING_WS_RE.findall(text))
    if trailing:
        report.add(WhitespaceKind.TRAILING_SPACE, trailing, "Trailing spaces on lines")

    runs = len(INNER_MULTI_SPACE_RE.findall(text))
    if runs:
        report.add(WhitespaceKind.DOUBLE_SPACE, runs, "Multiple consecutive spaces")

    # Binary flag: counts once however many lines disagree.
    if "\r\n" in text and BARE_LF_RE.search(text):
        report.add(WhitespaceKind.MIXED_ENDINGS, 1, "Mixed line endings (CRLF + LF)")

    for ch, info in SPECIAL_SPACES:
        count = text.count(ch)
        if count:
            report.add(WhitespaceKind.SPECIAL_SPACE, count, f"{info.name} ({info.code})")

    return report
