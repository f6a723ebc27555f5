"""The registered checks: invisible characters, homoglyphs, whitespace."""

from __future__ import annotations

from typing import Any

from traces_cleaner.core.check_base import Check, registry
from traces_cleaner.core.detector import detect
from traces_cleaner.core.homoglyphs import detect_homoglyphs
from traces_cleaner.core.models import DetectionResult, HomoglyphResult, WhitespaceReport
from traces_cleaner.core.whitespace import detect_whitespace_anomalies


@registry.register
class InvisibleCharsCheck(Check):
    """Zero-width, bidi, control and other hidden characters."""

    check_id = "invisible"
    name = "Invisible characters"

    def run(self, text: str, config: dict[str, Any]) -> DetectionResult:
        return detect(text, include_formatting=bool(config.get("include_formatting", False)))

    def empty_result(self) -> DetectionResult:
        return DetectionResult()


@registry.register
class HomoglyphsCheck(Check):
    check_id = "homoglyphs"
    name = "Homoglyphs"

    def run(self, text: str, config: dict[str, Any]) -> HomoglyphResult:
        return detect_homoglyphs(text)

    def empty_result(self) -> HomoglyphResult:
        return HomoglyphResult()


@registry.register
class WhitespaceCheck(Check):
    check_id = "whitespace"
    name = "Whitespace anomalies"

    def run(self, text: str, config: dict[str, Any]) -> WhitespaceReport:
        return detect_whitespace_anomalies(text)

    def empty_result(self) -> WhitespaceReport:
        return WhitespaceReport()
