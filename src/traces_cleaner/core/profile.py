"""ProfileLoader: load and deep-merge YAML cleaning profiles."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path

import yaml


def deep_merge(base: dict, overlay: dict) -> dict:
    """Merge overlay into base. Overlay wins on scalar conflicts.

    Dicts are merged recursively. Lists are replaced (not concatenated).
    """
    result = deepcopy(base)
    for key, val in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = deep_merge(result[key], val)
        else:
            result[key] = deepcopy(val)
    return result


class ProfileLoader:
    """Read profile YAML files and layer them on top of each other."""

    def read(self, path: Path) -> dict:
        """Return the parsed profile, or {} for a missing or empty file."""
        if not path.exists():
            return {}
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile {path} must be a mapping, got {type(data).__name__}")
        return data

    def load(self, base_path: Path, overlay_path: Path | None = None) -> dict:
        """Return the merged profile config dict."""
        config = self.read(base_path)
        if overlay_path is not None:
            config = deep_merge(config, self.read(overlay_path))
        return config
