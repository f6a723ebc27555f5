"""Cleaner: ordered multi-pass sanitization of a text.

Pass order matters:

1. optional HTML stripping
2. removal of every strippable registry character and control character
3. removal of supplementary Tag / Variation Selector Supplement characters
   and unpaired surrogates
4. optional NFC normalization
5. optional homoglyph folding, then NFC again when normalizing
6. trailing whitespace removal
7. collapsing of multiple spaces

Homoglyph folding must run after invisible stripping, otherwise a zero-width
character can stay wedged between a look-alike and its replacement.  NFC must
run after stripping because it rewrites some registry code points (e.g.
U+2000 composes to U+2002).  The second NFC pass composes a folded letter
with a combining mark that followed the look-alike.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, fields
from typing import Any, Mapping

from traces_cleaner.core.homoglyphs import fold_homoglyph
from traces_cleaner.core.registry import is_strippable, is_supplementary_invisible
from traces_cleaner.core.text_utils import (
    MULTI_SPACE_RE,
    TRAILING_WS_RE,
    is_surrogate,
    join_surrogates,
)
from traces_cleaner.core.text_utils import strip_html as _strip_html_tags

# camelCase spellings accepted by CleanOptions.from_mapping
_ALIASES: dict[str, str] = {
    "fixHomoglyphs": "fix_homoglyphs",
    "stripSpaces": "strip_spaces",
    "stripHTML": "strip_html",
    "stripHtml": "strip_html",
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def _as_bool(val: Any) -> bool:
    """Coerce a profile value; strings such as "false" or "no" are False."""
    if isinstance(val, str):
        return val.strip().lower() in _TRUE_STRINGS
    return bool(val)


@dataclass(frozen=True)
class CleanOptions:
    normalize: bool = True
    fix_homoglyphs: bool = False
    strip_spaces: bool = False  # accepted for compatibility, has no effect
    strip_html: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "CleanOptions":
        """Build options from a loose dict; unknown keys are ignored."""
        if not mapping:
            return cls()
        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, val in mapping.items():
            name = _ALIASES.get(key, key)
            if name in known:
                values[name] = _as_bool(val)
        return cls(**values)


def _strip_invisible(text: str) -> str:
    return "".join(ch for ch in text if not is_strippable(ch))


def _strip_supplementary(text: str) -> str:
    return "".join(
        ch for ch in text if not (is_supplementary_invisible(ch) or is_surrogate(ch))
    )


def clean(
    text: str,
    normalize: bool = True,
    fix_homoglyphs: bool = False,
    strip_spaces: bool = False,
    strip_html: bool = False,
) -> str:
    """Return a sanitized copy of *text*.

    Args:
        text: Input text.  Never modified.
        normalize: Apply NFC normalization.
        fix_homoglyphs: Replace look-alike characters with their ASCII
            equivalent (common typography such as curly quotes is kept).
        strip_spaces: Accepted and ignored; non-standard spaces are always
            removed in the invisible-character pass.
        strip_html: Drop ``<...>`` tags and decode the common entities first.

    Returns:
        The cleaned text.  It never contains an unpaired surrogate.
    """
    return clean_with(
        text,
        CleanOptions(
            normalize=normalize,
            fix_homoglyphs=fix_homoglyphs,
            strip_spaces=strip_spaces,
            strip_html=strip_html,
        ),
    )


def clean_with(text: str, options: CleanOptions) -> str:
    """Same as :func:`clean` but driven by a CleanOptions instance."""
    result = text

    if options.strip_html:
        result = _strip_html_tags(result)

    result = _strip_invisible(join_surrogates(result))
    result = _strip_supplementary(result)

    if options.normalize:
        result = unicodedata.normalize("NFC", result)

    if options.fix_homoglyphs:
        result = "".join(fold_homoglyph(ch) for ch in result)
        if options.normalize:
            result = unicodedata.normalize("NFC", result)

    result = TRAILING_WS_RE.sub("", result)
    result = MULTI_SPACE_RE.sub(" ", result)
    return result
