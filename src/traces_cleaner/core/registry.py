"""Character registry: every invisible or format-control character we know.

The explicit table keys on the literal character.  Two families are
classified by range instead of by table entry:

- C0/C1 control characters not named in the table, reported generically as
  ``Control Character``;
- supplementary-plane Tag characters (U+E0001..U+E007F), used to smuggle
  ASCII payloads, and the Variation Selectors Supplement (U+E0100..U+E01EF).

``formatting`` entries (tab, newlines) are classified like everything else
but are never stripped and only reported when the caller asks for them.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

from traces_cleaner.core.models import Category, CharacterDescriptor, code_label


def _entry(ch: str, name: str, category: Category) -> tuple[str, CharacterDescriptor]:
    return ch, CharacterDescriptor(name=name, code=code_label(ch), category=category)


_ENTRIES: list[tuple[str, CharacterDescriptor]] = [
    # Formatting / whitespace (detected, never stripped)
    _entry("\u0009", "Tab", Category.FORMATTING),
    _entry("\u000a", "Line Feed", Category.FORMATTING),
    _entry("\u000c", "Form Feed", Category.FORMATTING),
    _entry("\u000d", "Carriage Return", Category.FORMATTING),
    # Zero-width & joining
    _entry("\u200b", "Zero-Width Space", Category.ZERO_WIDTH),
    _entry("\u200c", "Zero-Width Non-Joiner", Category.ZERO_WIDTH),
    _entry("\u200d", "Zero-Width Joiner", Category.ZERO_WIDTH),
    _entry("\u200e", "Left-to-Right Mark", Category.DIRECTION),
    _entry("\u200f", "Right-to-Left Mark", Category.DIRECTION),
    # General punctuation
    _entry("\u2028", "Line Separator", Category.SEPARATOR),
    _entry("\u2029", "Paragraph Separator", Category.SEPARATOR),
    _entry("\u202a", "Left-to-Right Embedding", Category.DIRECTION),
    _entry("\u202b", "Right-to-Left Embedding", Category.DIRECTION),
    _entry("\u202c", "Pop Directional Formatting", Category.DIRECTION),
    _entry("\u202d", "Left-to-Right Override", Category.DIRECTION),
    _entry("\u202e", "Right-to-Left Override", Category.DIRECTION),
    # Invisible math operators
    _entry("\u2060", "Word Joiner", Category.JOINER),
    _entry("\u2061", "Function Application", Category.MATH_INVISIBLE),
    _entry("\u2062", "Invisible Times", Category.MATH_INVISIBLE),
    _entry("\u2063", "Invisible Separator", Category.MATH_INVISIBLE),
    _entry("\u2064", "Invisible Plus", Category.MATH_INVISIBLE),
    _entry("\ufeff", "Byte Order Mark (BOM)", Category.BOM),
    _entry("\u00ad", "Soft Hyphen", Category.FORMAT),
    # Variation selectors 1-16
    *(
        _entry(chr(0xFE00 + i), f"Variation Selector-{i + 1}", Category.VARIATION)
        for i in range(16)
    ),
    # Interlinear annotation
    _entry("\ufff9", "Interlinear Annotation Anchor", Category.ANNOTATION),
    _entry("\ufffa", "Interlinear Annotation Separator", Category.ANNOTATION),
    _entry("\ufffb", "Interlinear Annotation Terminator", Category.ANNOTATION),
    # Script-specific format characters
    _entry("\u061c", "Arabic Letter Mark", Category.DIRECTION),
    _entry("\u2066", "Left-to-Right Isolate", Category.DIRECTION),
    _entry("\u2067", "Right-to-Left Isolate", Category.DIRECTION),
    _entry("\u2068", "First Strong Isolate", Category.DIRECTION),
    _entry("\u2069", "Pop Directional Isolate", Category.DIRECTION),
    _entry("\u180e", "Mongolian Vowel Separator", Category.FORMAT),
    # Hangul fillers
    _entry("\u115f", "Hangul Choseong Filler", Category.FILLER),
    _entry("\u1160", "Hangul Jungseong Filler", Category.FILLER),
    _entry("\u3164", "Hangul Filler", Category.FILLER),
    _entry("\uffa0", "Halfwidth Hangul Filler", Category.FILLER),
    # Copy-paste residue
    _entry("\ufffc", "Object Replacement Character", Category.FORMAT),
    _entry("\ufffd", "Replacement Character", Category.FORMAT),
    _entry("\u2011", "Non-Breaking Hyphen", Category.FORMAT),
    # Non-standard space widths
    _entry("\u200a", "Hair Space", Category.SPACE),
    _entry("\u2009", "Thin Space", Category.SPACE),
    _entry("\u2008", "Punctuation Space", Category.SPACE),
    _entry("\u2007", "Figure Space", Category.SPACE),
    _entry("\u2006", "Six-Per-Em Space", Category.SPACE),
    _entry("\u2005", "Four-Per-Em Space", Category.SPACE),
    _entry("\u2004", "Three-Per-Em Space", Category.SPACE),
    _entry("\u2003", "Em Space", Category.SPACE),
    _entry("\u2002", "En Space", Category.SPACE),
    _entry("\u2001", "Em Quad", Category.SPACE),
    _entry("\u2000", "En Quad", Category.SPACE),
    _entry("\u00a0", "Non-Breaking Space", Category.SPACE),
    _entry("\u205f", "Medium Mathematical Space", Category.SPACE),
    _entry("\u3000", "Ideographic Space", Category.SPACE),
]

INVISIBLE_CHARS: Mapping[str, CharacterDescriptor] = MappingProxyType(dict(_ENTRIES))

#: Non-standard spaces in definition order (used by the whitespace analyzer).
SPECIAL_SPACES: tuple[tuple[str, CharacterDescriptor], ...] = tuple(
    (ch, desc) for ch, desc in INVISIBLE_CHARS.items() if desc.category == Category.SPACE
)

# ---------------------------------------------------------------------------
# Range-based classes
# ---------------------------------------------------------------------------

CONTROL_NAME = "Control Character"

TAG_FIRST, TAG_LAST = 0xE0001, 0xE007F
VS_SUPPLEMENT_FIRST, VS_SUPPLEMENT_LAST = 0xE0100, 0xE01EF


def is_control(ch: str) -> bool:
    """True for C0/C1 controls that are not tab, LF, FF or CR."""
    code = ord(ch)
    return (
        code <= 0x08
        or code == 0x0B
        or 0x0E <= code <= 0x1F
        or code == 0x7F
        or 0x80 <= code <= 0x9F
    )


def is_supplementary_invisible(ch: str) -> bool:
    code = ord(ch)
    return TAG_FIRST <= code <= TAG_LAST or VS_SUPPLEMENT_FIRST <= code <= VS_SUPPLEMENT_LAST


def _supplementary_descriptor(ch: str) -> CharacterDescriptor:
    code = ord(ch)
    if code >= VS_SUPPLEMENT_FIRST:
        return CharacterDescriptor(
            name=f"Variation Selector-{code - VS_SUPPLEMENT_FIRST + 17}",
            code=code_label(ch),
            category=Category.VARIATION,
        )
    # e.g. "TAG LATIN SMALL LETTER A" -> "Tag Latin Small Letter A"
    name = unicodedata.name(ch, "Tag Character").title()
    return CharacterDescriptor(name=name, code=code_label(ch), category=Category.FORMAT)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def get_char_info(ch: str) -> CharacterDescriptor | None:
    """Return the named registry entry for *ch*, or None."""
    return INVISIBLE_CHARS.get(ch)


def classify(ch: str) -> CharacterDescriptor | None:
    """Return a descriptor for any character the scanners report, or None.

    Covers the named table, the generic control ranges and the
    supplementary-plane ranges.  Regular visible text returns None.
    """
    info = INVISIBLE_CHARS.get(ch)
    if info is not None:
        return info
    if len(ch) != 1:
        return None
    if is_control(ch):
        return CharacterDescriptor(name=CONTROL_NAME, code=code_label(ch), category=Category.CONTROL)
    if is_supplementary_invisible(ch):
        return _supplementary_descriptor(ch)
    return None


def is_strippable(ch: str) -> bool:
    """True if the cleaner removes *ch* (any classified non-formatting character)."""
    info = classify(ch)
    return info is not None and not info.is_formatting
