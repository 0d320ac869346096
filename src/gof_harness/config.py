"""
Harness configuration.

Settings come from, lowest to highest precedence: defaults, a YAML file,
environment variables, then command-line flags (applied by the CLI).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from gof_harness.constants import OutputFormat

ENV_PREFIX = "GOF_HARNESS_"

# Environment variable suffix -> config field
ENV_FIELDS: dict[str, str] = {
    "TIMEOUT": "timeout_seconds",
    "LOG_LEVEL": "log_level",
    "FORMAT": "output_format",
}


class HarnessConfig(BaseModel):
    """Settings for running the harness from the CLI or MCP server."""

    timeout_seconds: float | None = Field(None, gt=0, description="Wall-clock bound per run")
    log_level: str = Field("WARNING", description="Root logging level")
    output_format: OutputFormat = Field(OutputFormat.TEXT, description="Result rendering")

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one logging knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_yaml(cls, path: Path) -> HarnessConfig:
        """
        Load settings from a YAML file.

        Accepts either top-level keys or a ``harness:`` section.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        section = data.get("harness", data)
        if not isinstance(section, dict):
            raise ValueError(f"Config section 'harness' must be a mapping: {path}")
        return cls(**section)

    def with_env(self, environ: Mapping[str, str] | None = None) -> HarnessConfig:
        """Return a copy with environment overrides applied."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}
        for suffix, field_name in ENV_FIELDS.items():
            value = env.get(f"{ENV_PREFIX}{suffix}")
            if value:
                overrides[field_name] = value
        return self.with_overrides(**overrides)

    def with_overrides(self, **overrides: Any) -> HarnessConfig:
        """Return a validated copy with the given non-None fields replaced."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return HarnessConfig(**data)


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> HarnessConfig:
    """
    Load configuration from an optional file plus the environment.

    Args:
        path: Optional YAML config file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The merged configuration
    """
    config = HarnessConfig.from_yaml(path) if path else HarnessConfig()
    return config.with_env(environ)
