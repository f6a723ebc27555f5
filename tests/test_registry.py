"""Tests for the character registry and classification."""

from __future__ import annotations

import pytest

from traces_cleaner.core.models import Category
from traces_cleaner.core.registry import (
    INVISIBLE_CHARS,
    SPECIAL_SPACES,
    classify,
    get_char_info,
    is_control,
    is_strippable,
)


class TestGetCharInfo:
    def test_zero_width_space(self):
        info = get_char_info("\u200b")
        assert info is not None
        assert info.name == "Zero-Width Space"
        assert info.code == "U+200B"
        assert info.category == Category.ZERO_WIDTH

    def test_unknown_character_returns_none(self):
        assert get_char_info("a") is None

    def test_generic_control_is_not_a_named_entry(self):
        assert get_char_info("\x07") is None

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            INVISIBLE_CHARS["x"] = None  # type: ignore[index]

    def test_variation_selectors_cover_sixteen_code_points(self):
        names = [INVISIBLE_CHARS[chr(0xFE00 + i)].name for i in range(16)]
        assert names[0] == "Variation Selector-1"
        assert names[-1] == "Variation Selector-16"

    @pytest.mark.parametrize("ch", ["\t", "\n", "\r", "\x0c"])
    def test_formatting_characters(self, ch):
        assert INVISIBLE_CHARS[ch].category == Category.FORMATTING

    def test_every_code_label_matches_its_key(self):
        for ch, info in INVISIBLE_CHARS.items():
            assert info.code == f"U+{ord(ch):04X}"


class TestSpecialSpaces:
    def test_fourteen_spaces_in_definition_order(self):
        assert len(SPECIAL_SPACES) == 14
        assert SPECIAL_SPACES[0][1].name == "Hair Space"
        assert SPECIAL_SPACES[-1][1].name == "Ideographic Space"

    def test_all_are_space_category(self):
        assert all(info.category == Category.SPACE for _, info in SPECIAL_SPACES)


class TestClassify:
    @pytest.mark.parametrize("code", [0x00, 0x08, 0x0B, 0x0E, 0x1F, 0x7F, 0x80, 0x9F])
    def test_control_ranges(self, code):
        info = classify(chr(code))
        assert info is not None
        assert info.category == Category.CONTROL
        assert info.name == "Control Character"
        assert info.code == f"U+{code:04X}"

    @pytest.mark.parametrize("ch", ["\t", "\n", "\r", "\x0c"])
    def test_formatting_is_not_a_control(self, ch):
        assert not is_control(ch)
        assert classify(ch).category == Category.FORMATTING

    def test_tag_character(self):
        info = classify("\U000e0041")
        assert info is not None
        assert info.category == Category.FORMAT
        assert info.code == "U+E0041"
        assert info.name == "Tag Latin Capital Letter A"

    def test_variation_selector_supplement(self):
        info = classify("\U000e0100")
        assert info.category == Category.VARIATION
        assert info.name == "Variation Selector-17"
        assert classify("\U000e01ef").name == "Variation Selector-256"

    def test_outside_supplementary_ranges(self):
        assert classify("\U000e0000") is None
        assert classify("\U000e0080") is None
        assert classify("\U0001f600") is None

    @pytest.mark.parametrize("ch", ["a", "Z", " ", "\u00e9", "\u4e2d"])
    def test_visible_text_is_unclassified(self, ch):
        assert classify(ch) is None

    def test_lone_surrogate_is_unclassified(self):
        assert classify("\ud800") is None


class TestIsStrippable:
    def test_formatting_is_kept(self):
        assert not is_strippable("\n")
        assert not is_strippable("\t")

    def test_hidden_characters_are_stripped(self):
        assert is_strippable("\u200b")
        assert is_strippable("\x00")
        assert is_strippable("\U000e0041")
        assert is_strippable("\u00a0")

    def test_plain_text_is_kept(self):
        assert not is_strippable("x")
