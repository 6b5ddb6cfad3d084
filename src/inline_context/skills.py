"""Resolution of additional skill directory locations.

Skill locations come from the ``skills.locations`` setting, a mapping of
location string to an enabled flag::

    skills:
      locations:
        "~/.agent/skills": true       # under the user's home directory
        "/opt/team/skills": true      # absolute
        ".github/skills": true        # relative: joined to every workspace folder
        "old/skills": false           # ignored

Resolved locations are cached. The owning session calls
:meth:`SkillsLocationResolver.on_configuration_changed` and
:meth:`SkillsLocationResolver.on_workspace_folders_changed` when the
underlying settings change.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from inline_context.config import SkillsConfig
from inline_context.utils.logger import get_logger

logger = get_logger("skills")

SKILLS_LOCATION_KEY = "skills.locations"


@dataclass
class SkillsSettings:
    """Inputs for skill location resolution.

    Attributes:
        locations: Mapping of location string to enabled flag
        user_home: Directory that ``~/`` expands to
        workspace_folders: Folders relative locations are joined to, in order
    """

    locations: Mapping[str, Any] = field(default_factory=dict)
    user_home: Path = field(default_factory=Path.home)
    workspace_folders: list[Path] = field(default_factory=list)

    @classmethod
    def from_config(
        cls,
        config: SkillsConfig,
        user_home: Path | None = None,
        workspace_folders: Iterable[Path] = (),
    ) -> SkillsSettings:
        return cls(
            locations=dict(config.locations),
            user_home=user_home or Path.home(),
            workspace_folders=list(workspace_folders),
        )


def resolve_skill_locations(settings: SkillsSettings) -> list[Path]:
    """Resolve enabled skill locations to paths.

    Entries are processed in mapping order. Only entries whose value is
    exactly ``True`` are used.
    """
    resolved: list[Path] = []
    if not isinstance(settings.locations, Mapping):
        return resolved

    for key, enabled in settings.locations.items():
        if enabled is not True:
            continue
        location = str(key).strip()
        if location.startswith("~/"):
            resolved.append(settings.user_home / location[2:])
        elif Path(location).is_absolute():
            resolved.append(Path(location))
        else:
            resolved.extend(folder / location for folder in settings.workspace_folders)
    return resolved


class SkillsLocationResolver:
    """Cached skill location resolution with explicit invalidation."""

    def __init__(self, settings: SkillsSettings) -> None:
        self._settings = settings
        self._cached: list[Path] | None = None

    @property
    def settings(self) -> SkillsSettings:
        return self._settings

    def get_locations(self) -> list[Path]:
        """Return the resolved skill locations, computing them on first use."""
        if self._cached is None:
            self._cached = resolve_skill_locations(self._settings)
            logger.debug(f"Resolved {len(self._cached)} skill locations")
        return list(self._cached)

    def invalidate(self) -> None:
        self._cached = None

    def update_settings(self, settings: SkillsSettings) -> None:
        self._settings = settings
        self.invalidate()

    def on_configuration_changed(self, changed_keys: Iterable[str]) -> None:
        """Invalidate the cache if the skill location setting or any entry of it changed."""
        if any(
            key == SKILLS_LOCATION_KEY
            or key.startswith(f"{SKILLS_LOCATION_KEY}.")
            or SKILLS_LOCATION_KEY.startswith(f"{key}.")
            for key in changed_keys
        ):
            self.invalidate()

    def on_workspace_folders_changed(self, folders: Iterable[Path]) -> None:
        self._settings = replace(self._settings, workspace_folders=list(folders))
        self.invalidate()


__all__ = [
    "SKILLS_LOCATION_KEY",
    "SkillsLocationResolver",
    "SkillsSettings",
    "resolve_skill_locations",
]
