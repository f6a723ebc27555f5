"""Tests for detect()."""

from __future__ import annotations

from traces_cleaner.core.detector import detect
from traces_cleaner.core.models import Category


class TestDetect:
    def test_single_zero_width_space(self):
        result = detect("Hello\u200bWorld")
        assert result.total == 1
        assert list(result.chars) == ["\u200b"]
        entry = result.chars["\u200b"]
        assert entry.descriptor.name == "Zero-Width Space"
        assert entry.descriptor.code == "U+200B"
        assert entry.count == 1
        assert entry.positions == [5]

    def test_plain_text_counts_nothing(self, clean_text):
        result = detect(clean_text)
        assert result.total == 0
        assert result.chars == {}

    def test_empty_string(self):
        assert detect("").total == 0

    def test_formatting_excluded_by_default(self):
        result = detect("a\tb\nc\r\n")
        assert result.total == 0

    def test_formatting_included_on_request(self):
        result = detect("a\tb\nc\r\n", include_formatting=True)
        assert result.total == 4
        assert result.chars["\n"].positions == [3, 6]
        assert result.chars["\t"].descriptor.category == Category.FORMATTING

    def test_no_formatting_category_without_flag(self, watermarked_text):
        result = detect(watermarked_text)
        assert all(
            e.descriptor.category != Category.FORMATTING for e in result.chars.values()
        )

    def test_total_equals_sum_of_counts(self, watermarked_text):
        result = detect(watermarked_text, include_formatting=True)
        assert result.total == sum(e.count for e in result.chars.values())

    def test_entries_in_first_seen_order(self):
        result = detect("x\u200dy\u200bz\u200d")
        assert list(result.chars) == ["\u200d", "\u200b"]
        assert result.chars["\u200d"].positions == [1, 5]

    def test_generic_control_character(self):
        result = detect("bell\x07")
        entry = result.chars["\x07"]
        assert entry.descriptor.name == "Control Character"
        assert entry.descriptor.code == "U+0007"
        assert entry.descriptor.category == Category.CONTROL

    def test_supplementary_tag_counts_once(self):
        result = detect("a\U000e0041b")
        assert result.total == 1
        assert result.chars["\U000e0041"].positions == [1]

    def test_positions_are_code_point_offsets(self):
        # The emoji is one code point, so the ZWSP sits at offset 2.
        result = detect("\U0001f600a\u200b")
        assert result.chars["\u200b"].positions == [2]

    def test_utf16_surrogate_pair_is_joined(self):
        # U+E0041 spelled as two surrogate code points
        result = detect("a\udb40\udc41b\u200b")
        assert result.total == 2
        assert "\U000e0041" in result.chars
        assert result.chars["\u200b"].positions == [3]

    def test_lone_surrogate_does_not_raise(self):
        result = detect("a\ud800b")
        assert result.total == 0

    def test_only_hidden_characters(self):
        result = detect("\u200b\u200c\ufeff")
        assert result.total == 3

    def test_is_deterministic(self, watermarked_text):
        r1 = detect(watermarked_text)
        r2 = detect(watermarked_text)
        assert r1 == r2

    def test_input_not_mutated(self):
        text = "a\u200bb"
        detect(text)
        assert text == "a\u200bb"
