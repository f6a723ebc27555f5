"""Homoglyph table and scanner.

Maps look-alike code points (Cyrillic, Greek, fullwidth Latin, typographic
punctuation, odd space widths) to the plain ASCII character they imitate.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from traces_cleaner.core.models import HomoglyphEntry, HomoglyphResult, code_label
from traces_cleaner.core.text_utils import join_surrogates

_CYRILLIC: dict[str, str] = {
    "\u0410": "A",
    "\u0412": "B",
    "\u0421": "C",
    "\u0415": "E",
    "\u041d": "H",
    "\u041a": "K",
    "\u041c": "M",
    "\u041e": "O",
    "\u0420": "P",
    "\u0422": "T",
    "\u0425": "X",
    "\u0430": "a",
    "\u0435": "e",
    "\u043e": "o",
    "\u0440": "p",
    "\u0441": "c",
    "\u0443": "y",
    "\u0445": "x",
    "\u0456": "i",   # Ukrainian i
    "\u0458": "j",   # je
    "\u04bb": "h",   # shha
    "\u0501": "d",   # komi de
}

_GREEK: dict[str, str] = {
    "\u0391": "A",
    "\u0392": "B",
    "\u0395": "E",
    "\u0396": "Z",
    "\u0397": "H",
    "\u0399": "I",
    "\u039a": "K",
    "\u039c": "M",
    "\u039d": "N",
    "\u039f": "O",
    "\u03a1": "P",
    "\u03a4": "T",
    "\u03a5": "Y",
    "\u03a7": "X",
    "\u03bf": "o",
}

# U+FF21..U+FF3A and U+FF41..U+FF5A
_FULLWIDTH: dict[str, str] = {
    **{chr(0xFF21 + i): chr(ord("A") + i) for i in range(26)},
    **{chr(0xFF41 + i): chr(ord("a") + i) for i in range(26)},
}

_PUNCTUATION: dict[str, str] = {
    "\u2010": "-",   # hyphen
    "\u2011": "-",   # non-breaking hyphen
    "\u2012": "-",   # figure dash
    "\u2013": "-",   # en dash
    "\u2014": "-",   # em dash
    "\u2018": "'",   # left single quotation mark
    "\u2019": "'",   # right single quotation mark
    "\u201c": '"',   # left double quotation mark
    "\u201d": '"',   # right double quotation mark
    "\u2032": "'",   # prime
    "\u2033": '"',   # double prime
}

_SPACES: dict[str, str] = {
    ch: " "
    for ch in (
        "\u00a0",
        *(chr(code) for code in range(0x2000, 0x200B)),
        "\u205f",
        "\u3000",
    )
}

HOMOGLYPHS: Mapping[str, str] = MappingProxyType(
    {**_CYRILLIC, **_GREEK, **_FULLWIDTH, **_PUNCTUATION, **_SPACES}
)

#: Typography that shows up in ordinary prose; never flagged nor folded.
EXPECTED_CHARS: frozenset[str] = frozenset(
    {
        "\u00a0",   # non-breaking space
        "\u2018",
        "\u2019",
        "\u201c",
        "\u201d",
        "\u2013",   # en dash
        "\u2014",   # em dash
    }
)


def is_expected_char(ch: str) -> bool:
    return ch in EXPECTED_CHARS


def fold_homoglyph(ch: str) -> str:
    """Return the plain equivalent of *ch*, or *ch* itself."""
    if ch in EXPECTED_CHARS:
        return ch
    return HOMOGLYPHS.get(ch, ch)


def detect_homoglyphs(text: str) -> HomoglyphResult:
    """Count look-alike characters in *text*, one entry per distinct character."""
    result = HomoglyphResult()
    for ch in join_surrogates(text):
        replacement = HOMOGLYPHS.get(ch)
        if replacement is None or ch in EXPECTED_CHARS:
            continue
        entry = result.chars.get(ch)
        if entry is None:
            entry = result.chars[ch] = HomoglyphEntry(
                original=ch, code=code_label(ch), replacement=replacement
            )
        entry.count += 1
        result.total += 1
    return result
