"""Demo injector: sprinkle invisible characters into a text.

Purely illustrative and random by design.  Detection and cleaning never use
it.  Pass a seeded ``random.Random`` to get a reproducible output.
"""

from __future__ import annotations

import random
import re

from traces_cleaner.core.models import InjectionResult

ZWSP = "\u200b"
ZWNJ = "\u200c"
BOM = "\ufeff"
INVISIBLE_OPERATORS = ("\u2061", "\u2062", "\u2063", "\u2064")

BOUNDARY_PROBABILITY = 0.6
INNER_PROBABILITY = 0.3

_WS_SPLIT_RE = re.compile(r"(\s+)")


def _pool(zwsp: bool, zwnj: bool, bom: bool, invis_sep: bool) -> list[str]:
    chars: list[str] = []
    if zwsp:
        chars.append(ZWSP)
    if zwnj:
        chars.append(ZWNJ)
    if bom:
        chars.append(BOM)
    if invis_sep:
        chars.extend(INVISIBLE_OPERATORS)
    return chars


def inject(
    text: str,
    zwsp: bool = False,
    zwnj: bool = False,
    bom: bool = False,
    invis_sep: bool = False,
    rng: random.Random | None = None,
) -> InjectionResult:
    """Insert random invisible characters between and inside words.

    The text is split on whitespace runs, keeping the separators as tokens.
    After every token but the last a character is inserted with probability
    0.6; tokens longer than four characters also get one at a random interior
    offset with probability 0.3.
    """
    chars = _pool(zwsp, zwnj, bom, invis_sep)
    if not chars:
        return InjectionResult(text=text, count=0)

    rand = rng or random
    tokens = _WS_SPLIT_RE.split(text)
    out: list[str] = []
    count = 0

    for i, token in enumerate(tokens):
        if len(token) > 4 and rand.random() < INNER_PROBABILITY:
            pos = rand.randrange(1, len(token) - 1)
            token = token[:pos] + rand.choice(chars) + token[pos:]
            count += 1
        out.append(token)
        if i < len(tokens) - 1 and rand.random() < BOUNDARY_PROBABILITY:
            out.append(rand.choice(chars))
            count += 1

    return InjectionResult(text="".join(out), count=count)
