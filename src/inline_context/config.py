"""Inline context configuration classes.

Configuration is loaded from the ``inline_context:`` section of a YAML config
file. Every section has defaults, so an empty or missing section yields a
working configuration.

Example config.yml::

    inline_context:
      window:
        radius: 2
        cursor_marker: "$CURSOR$"
      large_file:
        line_threshold: 250
        cropped_max_lines: 120
      skills:
        locations:
          "~/.agent/skills": true
          ".github/skills": true
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from inline_context.exceptions import ConfigurationError
from inline_context.utils.logger import get_logger

logger = get_logger("config")

CONFIG_SECTION = "inline_context"
DEFAULT_CURSOR_MARKER = "$CURSOR$"
DEFAULT_WINDOW_RADIUS = 2
DEFAULT_LARGE_FILE_LINE_THRESHOLD = 250
DEFAULT_CROPPED_MAX_LINES = 120


@dataclass
class WindowConfig:
    """Configuration for the cursor window.

    Attributes:
        radius: Lines shown on each side of the cursor line before blank-line
            extension
        cursor_marker: Literal token inserted at the cursor offset
    """

    radius: int = DEFAULT_WINDOW_RADIUS
    cursor_marker: str = DEFAULT_CURSOR_MARKER

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WindowConfig:
        """Create WindowConfig from dictionary."""
        return cls(
            radius=data.get("radius", DEFAULT_WINDOW_RADIUS),
            cursor_marker=data.get("cursor_marker", DEFAULT_CURSOR_MARKER),
        )


@dataclass
class LargeFileConfig:
    """Configuration for large-file handling.

    Attributes:
        line_threshold: Files with more lines than this are "large"
        cropped_max_lines: Lines shown by the default cropped renderer
    """

    line_threshold: int = DEFAULT_LARGE_FILE_LINE_THRESHOLD
    cropped_max_lines: int = DEFAULT_CROPPED_MAX_LINES

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LargeFileConfig:
        """Create LargeFileConfig from dictionary."""
        return cls(
            line_threshold=data.get("line_threshold", DEFAULT_LARGE_FILE_LINE_THRESHOLD),
            cropped_max_lines=data.get("cropped_max_lines", DEFAULT_CROPPED_MAX_LINES),
        )


@dataclass
class SkillsConfig:
    """Additional skill directories.

    Attributes:
        locations: Mapping of location string to enabled flag. Only entries
            whose value is exactly ``true`` are used.
    """

    locations: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SkillsConfig:
        """Create SkillsConfig from dictionary."""
        locations = data.get("locations") or {}
        return cls(locations=dict(locations) if isinstance(locations, dict) else {})


@dataclass
class InlineContextConfig:
    """Root configuration for inline context assembly.

    Attributes:
        window: Cursor window configuration
        large_file: Large-file classification and cropping configuration
        skills: Skill location configuration
    """

    window: WindowConfig = field(default_factory=WindowConfig)
    large_file: LargeFileConfig = field(default_factory=LargeFileConfig)
    skills: SkillsConfig = field(default_factory=SkillsConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> InlineContextConfig:
        """Create InlineContextConfig from a config dictionary.

        Args:
            config_dict: The ``inline_context`` section of the config file

        Returns:
            InlineContextConfig instance
        """
        window = WindowConfig()
        if "window" in config_dict:
            window = WindowConfig.from_dict(config_dict["window"] or {})

        large_file = LargeFileConfig()
        if "large_file" in config_dict:
            large_file = LargeFileConfig.from_dict(config_dict["large_file"] or {})

        skills = SkillsConfig()
        if "skills" in config_dict:
            skills = SkillsConfig.from_dict(config_dict["skills"] or {})

        return cls(window=window, large_file=large_file, skills=skills)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        if not isinstance(self.window.radius, int) or self.window.radius < 0:
            errors.append("window.radius must be a non-negative integer")
        if not self.window.cursor_marker:
            errors.append("window.cursor_marker must not be empty")

        threshold = self.large_file.line_threshold
        if not isinstance(threshold, int) or threshold < 1:
            errors.append("large_file.line_threshold must be >= 1")
        if (
            not isinstance(self.large_file.cropped_max_lines, int)
            or self.large_file.cropped_max_lines < 1
        ):
            errors.append("large_file.cropped_max_lines must be >= 1")

        return errors


def load_config(path: str | Path) -> InlineContextConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Validated InlineContextConfig

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or the
            configuration is invalid
    """
    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_path}: {e}",
            technical_details={"path": str(config_path)},
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_path}: {e}",
            technical_details={"path": str(config_path)},
        ) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    section = raw.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{CONFIG_SECTION}' section must be a mapping", invalid_keys=[CONFIG_SECTION]
        )

    config = InlineContextConfig.from_dict(section)
    errors = config.validate()
    if errors:
        raise ConfigurationError(
            "Invalid inline context configuration: " + "; ".join(errors),
            invalid_keys=[e.split(" ", 1)[0] for e in errors],
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return config


__all__ = [
    "InlineContextConfig",
    "LargeFileConfig",
    "SkillsConfig",
    "WindowConfig",
    "load_config",
]
