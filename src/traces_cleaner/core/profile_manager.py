"""ProfileManager: discover, load, and compile cleaning profiles.

Handles two profile scopes:

- **builtin**: shipped with the package under resources/profiles/builtin/
- **user**: per-user config directory (platform-specific)

A profile is one YAML file.  It may name another profile in its ``base``
key; the base is loaded first and the profile is deep-merged on top.  The
``compile_config()`` method returns a dict ready for
``InspectionEngine.inspect()``.
"""

from __future__ import annotations

import importlib.resources
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path

import yaml

_log = logging.getLogger(__name__)

from traces_cleaner.core.profile import ProfileLoader, deep_merge

BUILTIN_PROFILES_PACKAGE = "traces_cleaner.resources.profiles.builtin"


def get_builtin_profiles_dir() -> Path:
    """Directory of the YAML profiles shipped inside the package (read-only)."""
    return Path(str(importlib.resources.files(BUILTIN_PROFILES_PACKAGE)))


# ---------------------------------------------------------------------------
# ProfileInfo
# ---------------------------------------------------------------------------


@dataclass
class ProfileInfo:
    """Describes one discovered profile file."""

    id: str          # e.g. "default" or "strict"
    name: str        # Human-readable display name
    scope: str       # "builtin" | "user"
    base: str | None
    path: Path
    readonly: bool   # True for builtin profiles


# ---------------------------------------------------------------------------
# ProfileManager
# ---------------------------------------------------------------------------


class ProfileManager:
    """Discover profiles and compile them into InspectionEngine configs.

    Args:
        user_dir: Directory holding user profiles.  Defaults to the
            platform config directory (see ``get_user_profiles_dir``).
    """

    def __init__(self, user_dir: Path | None = None) -> None:
        self._user_dir = user_dir
        self._loader = ProfileLoader()

    # ------------------------------------------------------------------
    # Profile discovery
    # ------------------------------------------------------------------

    def list_profiles(self) -> list[ProfileInfo]:
        """Return all known profiles, builtin first, then user ones."""
        profiles: list[ProfileInfo] = []
        profiles.extend(self._scan_dir(get_builtin_profiles_dir(), scope="builtin", readonly=True))
        user_dir = self.get_user_profiles_dir()
        if user_dir.exists():
            profiles.extend(self._scan_dir(user_dir, scope="user", readonly=False))
        return profiles

    def _scan_dir(self, directory: Path, scope: str, readonly: bool) -> list[ProfileInfo]:
        results: list[ProfileInfo] = []
        for yml_path in sorted(directory.glob("*.yml")):
            try:
                data = self._loader.read(yml_path)
            except (OSError, ValueError, yaml.YAMLError) as exc:
                _log.warning("Could not parse profile %s: %s", yml_path, exc)
                continue

            profile_id = data.get("id") or yml_path.stem
            results.append(
                ProfileInfo(
                    id=profile_id,
                    name=data.get("name") or profile_id,
                    scope=scope,
                    base=data.get("base"),
                    path=yml_path,
                    readonly=readonly,
                )
            )
        return results

    # ------------------------------------------------------------------
    # User config directory
    # ------------------------------------------------------------------

    def get_user_profiles_dir(self) -> Path:
        """Return the per-user profiles directory (platform-specific)."""
        if self._user_dir is not None:
            return self._user_dir

        system = platform.system()
        if system == "Darwin":
            base = Path.home() / "Library" / "Application Support" / "TracesCleaner"
        elif system == "Windows":
            base = Path(os.environ.get("APPDATA", str(Path.home()))) / "TracesCleaner"
        else:
            # Linux / other
            xdg = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))
            base = xdg / "TracesCleaner"

        return base / "profiles"

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def _resolve_path(self, profile_id: str) -> Path | None:
        """Resolve a profile ID to a file path.  User scope wins over builtin."""
        p = self.get_user_profiles_dir() / f"{profile_id}.yml"
        if p.exists():
            return p

        p = get_builtin_profiles_dir() / f"{profile_id}.yml"
        if p.exists():
            return p

        return None

    def _load_chain(self, profile_id: str, seen: set[str]) -> dict:
        if profile_id in seen:
            _log.warning("Profile base cycle at %r; stopping.", profile_id)
            return {}
        seen.add(profile_id)

        path = self._resolve_path(profile_id)
        if path is None:
            _log.warning("Profile '%s' not found; using empty config.", profile_id)
            return {}

        data = self._loader.read(path)
        base_id = data.pop("base", None)
        if base_id:
            data = deep_merge(self._load_chain(str(base_id), seen), data)
        return data

    # ------------------------------------------------------------------
    # Config compilation
    # ------------------------------------------------------------------

    def compile_config(self, profile_id: str = "default", overrides: dict | None = None) -> dict:
        """Load a profile (with its base chain) into an InspectionEngine config.

        Args:
            profile_id: Profile to load, e.g. ``"default"`` or ``"strict"``.
            overrides: Optional dict merged last, e.g.
                ``{"clean": {"fix_homoglyphs": True}}``.

        Returns:
            A config dict ready for ``InspectionEngine.inspect()``.  Broken or
            missing profiles degrade to an empty config with a warning.
        """
        try:
            config = self._load_chain(profile_id, set())
        except (OSError, ValueError, yaml.YAMLError) as exc:
            _log.warning("Could not load profile '%s': %s", profile_id, exc)
            config = {}

        if overrides:
            config = deep_merge(config, overrides)
        config["id"] = profile_id

        self._warn_unknown_checks(config)
        return config

    def _warn_unknown_checks(self, config: dict) -> None:
        """Emit a warning for any check IDs in config not in the registry."""
        import traces_cleaner.core.checks  # noqa: F401
        from traces_cleaner.core.check_base import registry as _registry

        known = set(_registry.all_ids())
        for check_id in config.get("checks") or {}:
            if check_id not in known:
                _log.warning("Profile references unknown check: %r", check_id)
