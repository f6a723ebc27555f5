"""TracesCleaner: find, reveal and remove invisible Unicode characters."""

from __future__ import annotations

from traces_cleaner.core.cleaner import CleanOptions, clean
from traces_cleaner.core.detector import detect
from traces_cleaner.core.engine import InspectionEngine
from traces_cleaner.core.homoglyphs import HOMOGLYPHS, detect_homoglyphs
from traces_cleaner.core.injector import inject
from traces_cleaner.core.providers import AI_WATERMARK_INFO
from traces_cleaner.core.registry import INVISIBLE_CHARS, get_char_info
from traces_cleaner.core.reveal import reveal_html
from traces_cleaner.core.whitespace import detect_whitespace_anomalies

__version__ = "0.1.0"

__all__ = [
    "AI_WATERMARK_INFO",
    "CleanOptions",
    "HOMOGLYPHS",
    "INVISIBLE_CHARS",
    "InspectionEngine",
    "clean",
    "detect",
    "detect_homoglyphs",
    "detect_whitespace_anomalies",
    "get_char_info",
    "inject",
    "reveal_html",
]
