"""Reveal renderer: annotated HTML with every hidden character marked inline."""

from __future__ import annotations

from traces_cleaner.core.models import CharacterDescriptor
from traces_cleaner.core.registry import classify
from traces_cleaner.core.text_utils import escape_html, join_surrogates

VISIBLE_CLASS = "char-visible"
HIDDEN_CLASS = "char-hidden"
FORMATTING_CLASS = "char-formatting"


def _visible_span(run: str) -> str:
    return f'<span class="{VISIBLE_CLASS}">{escape_html(run)}</span>'


def _annotation(info: CharacterDescriptor) -> str:
    css_class = FORMATTING_CLASS if info.is_formatting else HIDDEN_CLASS
    title = escape_html(f"{info.name} ({info.code})")
    return f'<span class="{css_class}" title="{title}">[{info.code}]</span>'


def reveal_html(text: str, include_formatting: bool = True) -> str:
    """Render *text* as HTML with hidden characters shown as ``[U+XXXX]`` tags.

    Consecutive visible characters are grouped into one ``char-visible`` span.
    A character is annotated exactly when :func:`detect` with the same
    ``include_formatting`` would count it.
    """
    parts: list[str] = []
    run: list[str] = []

    for ch in join_surrogates(text):
        info = classify(ch)
        if info is None or (info.is_formatting and not include_formatting):
            run.append(ch)
            continue
        if run:
            parts.append(_visible_span("".join(run)))
            run = []
        parts.append(_annotation(info))

    if run:
        parts.append(_visible_span("".join(run)))

    return "".join(parts)
