"""
Tests for harness configuration.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gof_harness.config import HarnessConfig, load_config
from gof_harness.constants import OutputFormat


class TestHarnessConfig:
    """Tests for HarnessConfig defaults and validation."""

    def test_defaults(self) -> None:
        """No timeout, warnings only, text output."""
        config = HarnessConfig()
        assert config.timeout_seconds is None
        assert config.log_level == "WARNING"
        assert config.output_format == OutputFormat.TEXT

    def test_log_level_normalized(self) -> None:
        """Levels are case-insensitive."""
        assert HarnessConfig(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        """Unknown levels are rejected."""
        with pytest.raises(ValidationError):
            HarnessConfig(log_level="chatty")

    def test_timeout_must_be_positive(self) -> None:
        """Zero and negative timeouts are rejected."""
        for bad in (0, -1.5):
            with pytest.raises(ValidationError):
                HarnessConfig(timeout_seconds=bad)

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = HarnessConfig()
        with pytest.raises(ValidationError):
            config.log_level = "DEBUG"  # type: ignore[misc]

    def test_with_overrides_skips_none(self) -> None:
        """None means keep the current value."""
        config = HarnessConfig(timeout_seconds=3).with_overrides(
            timeout_seconds=None, output_format="yaml"
        )
        assert config.timeout_seconds == 3
        assert config.output_format == OutputFormat.YAML


class TestYamlLoading:
    """Tests for loading config files."""

    def test_top_level_keys(self, temp_dir: Path) -> None:
        """Settings may sit at the top level."""
        path = temp_dir / "config.yaml"
        path.write_text("timeout_seconds: 2.5\noutput_format: json\n")
        config = HarnessConfig.from_yaml(path)
        assert config.timeout_seconds == 2.5
        assert config.output_format == OutputFormat.JSON

    def test_harness_section(self, temp_dir: Path) -> None:
        """Settings may sit under a harness: section."""
        path = temp_dir / "config.yaml"
        path.write_text("harness:\n  log_level: info\n")
        assert HarnessConfig.from_yaml(path).log_level == "INFO"

    def test_empty_file(self, temp_dir: Path) -> None:
        """An empty file gives the defaults."""
        path = temp_dir / "config.yaml"
        path.write_text("")
        assert HarnessConfig.from_yaml(path) == HarnessConfig()

    def test_non_mapping_rejected(self, temp_dir: Path) -> None:
        """A list is not a valid config."""
        path = temp_dir / "config.yaml"
        path.write_text("- timeout_seconds\n")
        with pytest.raises(ValueError):
            HarnessConfig.from_yaml(path)

    def test_harness_section_must_be_mapping(self, temp_dir: Path) -> None:
        """An empty or scalar harness: section is rejected."""
        path = temp_dir / "config.yaml"
        for text in ("harness:\n", "harness: fast\n", "harness:\n  - 1\n"):
            path.write_text(text)
            with pytest.raises(ValueError, match="harness"):
                HarnessConfig.from_yaml(path)

    def test_unknown_format_rejected(self, temp_dir: Path) -> None:
        """Output formats are validated."""
        path = temp_dir / "config.yaml"
        path.write_text("output_format: xml\n")
        with pytest.raises(ValidationError):
            HarnessConfig.from_yaml(path)


class TestEnvironment:
    """Tests for environment overrides."""

    def test_env_overrides(self) -> None:
        """GOF_HARNESS_* variables override defaults."""
        config = load_config(
            environ={
                "GOF_HARNESS_TIMEOUT": "4",
                "GOF_HARNESS_LOG_LEVEL": "error",
                "GOF_HARNESS_FORMAT": "yaml",
            }
        )
        assert config.timeout_seconds == 4.0
        assert config.log_level == "ERROR"
        assert config.output_format == OutputFormat.YAML

    def test_env_beats_file(self, temp_dir: Path) -> None:
        """Environment variables take precedence over the file."""
        path = temp_dir / "config.yaml"
        path.write_text("timeout_seconds: 10\nlog_level: info\n")
        config = load_config(path, environ={"GOF_HARNESS_TIMEOUT": "1"})
        assert config.timeout_seconds == 1.0
        assert config.log_level == "INFO"

    def test_empty_env_values_ignored(self) -> None:
        """Blank variables do not override."""
        config = load_config(environ={"GOF_HARNESS_TIMEOUT": ""})
        assert config.timeout_seconds is None

    def test_invalid_env_value(self) -> None:
        """Bad values from the environment fail validation."""
        with pytest.raises(ValidationError):
            load_config(environ={"GOF_HARNESS_TIMEOUT": "-3"})

    def test_unrelated_env_ignored(self) -> None:
        """Only prefixed variables are read."""
        assert load_config(environ={"TIMEOUT": "5"}) == HarnessConfig()
