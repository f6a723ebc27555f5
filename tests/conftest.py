"""Pytest fixtures shared across all tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def watermarked_text() -> str:
    """A short paragraph with intentional artifacts of every kind."""
    return (
        "\ufeffThe quick\u200b brown fox\u200d jumps.\n"   # BOM, ZWSP, ZWJ
        "Sh\u0435 said \u201chi\u201d  twice.  \n"          # Cyrillic e, curly quotes, double/trailing space
        "Price:\u00a0100\u2009EUR\x07\n"                     # NBSP, thin space, BEL control
        "Tagged\U000e0041\U000e0042 end"                     # supplementary Tag characters
    )


@pytest.fixture
def clean_text() -> str:
    return "Plain ASCII text.\nSecond line with single spaces.\n"


@pytest.fixture
def user_profiles_dir(tmp_path):
    d = tmp_path / "profiles"
    d.mkdir()
    return d
