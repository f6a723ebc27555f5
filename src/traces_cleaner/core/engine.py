"""InspectionEngine: runs the checks, the cleaner and the reveal renderer.

The engine is stateless: one call to ``inspect()`` produces one
InspectionReport and nothing is kept between calls.
"""

from __future__ import annotations

import logging
from typing import Any

_log = logging.getLogger(__name__)

# Import checks module to trigger all @registry.register decorators
import traces_cleaner.core.checks  # noqa: F401
from traces_cleaner.core.check_base import CheckRegistry, registry
from traces_cleaner.core.cleaner import CleanOptions, clean_with
from traces_cleaner.core.detector import detect
from traces_cleaner.core.models import (
    DetectionResult,
    HomoglyphResult,
    InspectionReport,
    WhitespaceReport,
)
from traces_cleaner.core.reveal import reveal_html


class InspectionEngine:
    """Inspect and clean one text according to a profile config.

    Usage::

        engine = InspectionEngine()
        report = engine.inspect(text, config=profile_config)
    """

    def __init__(self, check_registry: CheckRegistry | None = None) -> None:
        self._registry = check_registry or registry

    def run_checks(self, text: str, config: dict[str, Any] | None = None) -> dict[str, Any]:
        """Run every registered check and return ``{check_id: result}``.

        Args:
            text: The text to scan.
            config: Profile config dict.  Structure::

                {
                    "checks": {
                        "invisible": {"enabled": True, "include_formatting": False},
                        "homoglyphs": {"enabled": True},
                        "whitespace": {"enabled": False},
                    }
                }

        Disabled checks and checks that raise yield their empty result.
        """
        if config is None:
            config = {}
        checks_config: dict[str, dict] = config.get("checks") or {}

        results: dict[str, Any] = {}
        for check_cls in self._registry.all_checks():
            check = check_cls()
            check_cfg = {**(checks_config.get(check.check_id) or {})}
            enabled = check_cfg.pop("enabled", True)
            if not enabled:
                results[check.check_id] = check.empty_result()
                continue
            try:
                results[check.check_id] = check.run(text, check_cfg)
            except Exception as exc:
                # Never fail the whole inspection because one check fails
                _log.exception("Check %s failed: %s", check.check_id, exc)
                results[check.check_id] = check.empty_result()
        return results

    def inspect(self, text: str, config: dict[str, Any] | None = None) -> InspectionReport:
        """Run all checks, clean *text* and render the reveal view.

        Besides the checks, ``config`` may hold a ``clean`` section
        (CleanOptions keys) and a ``reveal`` section
        (``include_formatting``, default True).
        """
        if config is None:
            config = {}

        results = self.run_checks(text, config)
        reveal_cfg: dict = config.get("reveal") or {}
        include_formatting = bool(reveal_cfg.get("include_formatting", True))

        options = CleanOptions.from_mapping(config.get("clean"))
        cleaned = clean_with(text, options)

        report = InspectionReport(
            text=text,
            cleaned=cleaned,
            revealed=reveal_html(text, include_formatting=include_formatting),
            invisible=results.get("invisible", DetectionResult()),
            hidden=detect(text, include_formatting=True),
            homoglyphs=results.get("homoglyphs", HomoglyphResult()),
            whitespace=results.get("whitespace", WhitespaceReport()),
            profile_id=config.get("id"),
        )
        _log.debug(
            "Inspected %d chars with profile %r: %d invisible, %d homoglyphs, "
            "%d whitespace, %d removed",
            len(text),
            report.profile_id,
            report.invisible.total,
            report.homoglyphs.total,
            report.whitespace.total,
            report.removed_count,
        )
        return report
