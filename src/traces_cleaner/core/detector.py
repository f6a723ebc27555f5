"""Detector: positional inventory of hidden characters in a text."""

from __future__ import annotations

from traces_cleaner.core.models import DetectionResult
from traces_cleaner.core.registry import classify
from traces_cleaner.core.text_utils import join_surrogates


def detect(text: str, include_formatting: bool = False) -> DetectionResult:
    """Scan *text* one code point at a time and record every hidden character.

    Args:
        text: Any string.  Surrogate pairs are joined before scanning, so a
            supplementary character counts once.
        include_formatting: Also report tab, line feed, form feed and
            carriage return.

    Returns:
        A DetectionResult whose ``chars`` are ordered by first occurrence.
        Positions are zero-based code point offsets into the surrogate-joined
        text.
    """
    result = DetectionResult()
    for pos, ch in enumerate(join_surrogates(text)):
        info = classify(ch)
        if info is None:
            continue
        if info.is_formatting and not include_formatting:
            continue
        result.record(ch, info, pos)
    return result
