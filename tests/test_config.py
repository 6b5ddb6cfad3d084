"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from inline_context.config import (
    InlineContextConfig,
    LargeFileConfig,
    SkillsConfig,
    WindowConfig,
    load_config,
)
from inline_context.exceptions import ConfigurationError, ErrorCategory


class TestInlineContextConfig:
    """Tests for InlineContextConfig.from_dict and validate."""

    def test_defaults(self):
        config = InlineContextConfig.from_dict({})

        assert config.window == WindowConfig(radius=2, cursor_marker="$CURSOR$")
        assert config.large_file == LargeFileConfig(line_threshold=250, cropped_max_lines=120)
        assert config.skills == SkillsConfig(locations={})
        assert config.validate() == []

    def test_sections_parsed(self):
        config = InlineContextConfig.from_dict(
            {
                "window": {"radius": 4},
                "large_file": {"line_threshold": 500},
                "skills": {"locations": {"~/skills": True}},
            }
        )

        assert config.window.radius == 4
        assert config.window.cursor_marker == "$CURSOR$"
        assert config.large_file.line_threshold == 500
        assert config.skills.locations == {"~/skills": True}

    def test_empty_sections_use_defaults(self):
        config = InlineContextConfig.from_dict({"window": None, "skills": None})

        assert config.window.radius == 2
        assert config.skills.locations == {}

    def test_non_mapping_locations_ignored(self):
        assert SkillsConfig.from_dict({"locations": ["a", "b"]}).locations == {}

    def test_validate_reports_errors(self):
        config = InlineContextConfig(
            window=WindowConfig(radius=-1, cursor_marker=""),
            large_file=LargeFileConfig(line_threshold=0, cropped_max_lines=0),
        )

        errors = config.validate()

        assert len(errors) == 4
        assert any("window.radius" in e for e in errors)
        assert any("large_file.line_threshold" in e for e in errors)


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_section(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text(
            "inline_context:\n"
            "  window:\n"
            "    radius: 3\n"
            "  skills:\n"
            "    locations:\n"
            "      '.github/skills': true\n"
        )

        config = load_config(path)

        assert config.window.radius == 3
        assert config.skills.locations == {".github/skills": True}

    def test_missing_section_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("other: {}\n")

        assert load_config(path) == InlineContextConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")

        assert load_config(path) == InlineContextConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path / "missing.yml")

        assert exc_info.value.category == ErrorCategory.CONFIGURATION

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("inline_context: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("inline_context:\n  window:\n    radius: -2\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert exc_info.value.invalid_keys == ["window.radius"]
