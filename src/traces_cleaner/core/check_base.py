"""Check base class and CheckRegistry singleton."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Check(ABC):
    """Abstract base for all text checks run by the inspection engine."""

    #: Stable unique identifier, e.g. "invisible"
    check_id: str

    #: Human-readable name used in reports
    name: str = ""

    @abstractmethod
    def run(self, text: str, config: dict[str, Any]) -> Any:
        """Scan *text* and return the check's result object.

        Args:
            text: The text under inspection.
            config: This check's section of the profile (``enabled`` already
                removed).  Unknown keys must be ignored.

        Returns:
            The result dataclass of the underlying scanner.
        """

    @abstractmethod
    def empty_result(self) -> Any:
        """Result used when the check is disabled or fails."""


class CheckRegistry:
    """Singleton registry mapping check_id → Check class."""

    _instance: "CheckRegistry | None" = None
    _checks: dict[str, type[Check]]

    def __new__(cls) -> "CheckRegistry":
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._checks = {}
            cls._instance = inst
        return cls._instance

    def register(self, cls: type[Check]) -> type[Check]:
        """Register a Check class. Can be used as a decorator."""
        self._checks[cls.check_id] = cls
        return cls

    def all_ids(self) -> list[str]:
        return sorted(self._checks.keys())

    def all_checks(self) -> list[type[Check]]:
        return [self._checks[k] for k in self.all_ids()]


# Module-level convenience instance
registry = CheckRegistry()
