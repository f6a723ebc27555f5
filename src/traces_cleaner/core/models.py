"""Core data model dataclasses.

All other modules import from here. Keep this module free of side-effects so
it can be used in tests and scripts without pulling in the scanners.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Category(str, Enum):
    FORMATTING = "formatting"
    ZERO_WIDTH = "zero-width"
    DIRECTION = "direction"
    SEPARATOR = "separator"
    JOINER = "joiner"
    MATH_INVISIBLE = "math-invisible"
    BOM = "bom"
    FORMAT = "format"
    VARIATION = "variation"
    ANNOTATION = "annotation"
    FILLER = "filler"
    SPACE = "space"
    CONTROL = "control"


class WhitespaceKind(str, Enum):
    TRAILING_SPACE = "trailing-space"
    DOUBLE_SPACE = "double-space"
    MIXED_ENDINGS = "mixed-endings"
    SPECIAL_SPACE = "special-space"


class Effectiveness(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------


def code_label(ch: str) -> str:
    """Return the ``U+XXXX`` label of a single code point."""
    return f"U+{ord(ch):04X}"


@dataclass(frozen=True)
class CharacterDescriptor:
    name: str
    code: str  # e.g. "U+200B"
    category: Category

    @property
    def is_formatting(self) -> bool:
        return self.category == Category.FORMATTING


# ---------------------------------------------------------------------------
# Detection results
# ---------------------------------------------------------------------------


@dataclass
class DetectionEntry:
    """All occurrences of one distinct hidden character in a scanned text."""

    descriptor: CharacterDescriptor
    count: int = 0
    positions: list[int] = field(default_factory=list)  # code point offsets

    def add(self, position: int) -> None:
        self.count += 1
        self.positions.append(position)


@dataclass
class DetectionResult:
    total: int = 0
    chars: dict[str, DetectionEntry] = field(default_factory=dict)  # first-seen order

    def record(self, ch: str, descriptor: CharacterDescriptor, position: int) -> None:
        entry = self.chars.get(ch)
        if entry is None:
            entry = self.chars[ch] = DetectionEntry(descriptor=descriptor)
        entry.add(position)
        self.total += 1


@dataclass
class HomoglyphEntry:
    original: str
    code: str
    replacement: str
    count: int = 0


@dataclass
class HomoglyphResult:
    total: int = 0
    chars: dict[str, HomoglyphEntry] = field(default_factory=dict)


@dataclass
class WhitespaceIssue:
    kind: WhitespaceKind
    count: int
    description: str


@dataclass
class WhitespaceReport:
    total: int = 0
    issues: list[WhitespaceIssue] = field(default_factory=list)

    def add(self, kind: WhitespaceKind, count: int, description: str) -> None:
        self.issues.append(WhitespaceIssue(kind=kind, count=count, description=description))
        self.total += count


@dataclass
class InjectionResult:
    text: str
    count: int


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AIProviderProfile:
    """Known watermarking behaviour of one AI provider. Informational only."""

    label: str
    icon: str
    techniques: tuple[str, ...]
    effectiveness: Effectiveness
    note: str


# ---------------------------------------------------------------------------
# Inspection report
# ---------------------------------------------------------------------------


@dataclass
class InspectionReport:
    """Everything the engine computes for one input text."""

    text: str
    cleaned: str
    revealed: str
    invisible: DetectionResult  # watermark-type characters only
    hidden: DetectionResult  # same scan including formatting characters
    homoglyphs: HomoglyphResult
    whitespace: WhitespaceReport
    profile_id: str | None = None

    @property
    def is_clean(self) -> bool:
        return (
            self.invisible.total == 0
            and self.homoglyphs.total == 0
            and self.whitespace.total == 0
        )

    @property
    def removed_count(self) -> int:
        """Number of code points the cleaner dropped."""
        return len(self.text) - len(self.cleaned)
