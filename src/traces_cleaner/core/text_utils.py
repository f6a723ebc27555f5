"""Shared text-processing constants and helpers.

Used by the scanners (detector, homoglyphs, whitespace), the cleaner and the
reveal renderer so they agree on line ends, surrogate pairs and HTML.
"""

from __future__ import annotations

import html
import re

# ---------------------------------------------------------------------------
# Surrogates
# ---------------------------------------------------------------------------

_SURROGATE_PAIR_RE = re.compile(r"[\ud800-\udbff][\udc00-\udfff]")

SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def _combine_pair(match: re.Match) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def join_surrogates(text: str) -> str:
    """Return *text* with UTF-16 surrogate pairs merged into scalar values.

    Strings that went through a UTF-16 layer (JSON ``\\uXXXX`` escapes,
    ``surrogatepass`` decoding) can carry a supplementary character as two
    code points.  Unpaired surrogates are left untouched.
    """
    if not _SURROGATE_PAIR_RE.search(text):
        return text
    return _SURROGATE_PAIR_RE.sub(_combine_pair, text)


def is_surrogate(ch: str) -> bool:
    return SURROGATE_MIN <= ord(ch) <= SURROGATE_MAX


# ---------------------------------------------------------------------------
# Lines and spaces
# ---------------------------------------------------------------------------

TRAILING_WS_RE = re.compile(r"[ \t]+(?=\r\n|[\n\r\u2028\u2029]|\Z)")

# Runs strictly between two non-whitespace characters (indentation excluded).
INNER_MULTI_SPACE_RE = re.compile(r"(?<=\S) {2,}(?=\S)")

MULTI_SPACE_RE = re.compile(r" {2,}")

BARE_LF_RE = re.compile(r"(?<!\r)\n")


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

HTML_TAG_RE = re.compile(r"<[^>]*>")

HTML_ENTITIES: dict[str, str] = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
}

_HTML_ENTITY_RE = re.compile(
    "|".join(re.escape(entity) for entity in HTML_ENTITIES), re.IGNORECASE
)


def strip_html(text: str) -> str:
    """Drop tag-shaped substrings and decode the six common entities.

    Not an HTML parser: anything between ``<`` and the next ``>`` goes.
    """
    text = HTML_TAG_RE.sub("", text)
    return _HTML_ENTITY_RE.sub(lambda m: HTML_ENTITIES[m.group().lower()], text)


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for embedding in markup or attribute values."""
    return html.escape(text, quote=True)
