# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the FinApp project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from finapp.compiler.reconciler import ReconcileStrategy
from finapp.model.entities import Platform

# ###############
# Public Interface
# ###############

PROJECT_CONFIG_NAME = ".finapp.yaml"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The parsed configuration for a FinApp project.

    Attributes:
        output_directory: Directory (relative to the config file) for generated code.
        platforms: Platforms to generate code for.
        strategy: How grammar and extractor results are reconciled.
        fail_on_warnings: Whether ``check`` treats warnings as failures.
        debug_dump: Optional path for the debug JSON dump of the application.
    """

    output_directory: str = "generated"
    platforms: list[Platform] = field(default_factory=lambda: [Platform.WEB])
    strategy: ReconcileStrategy = ReconcileStrategy.EXTRACTED
    fail_on_warnings: bool = False
    debug_dump: str | None = None


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse a FinApp project configuration file.

    Args:
        path: Path to the `.finapp.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ProjectConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


def find_project_config(source: Path) -> Path | None:
    """Return the `.finapp.yaml` next to *source*, or None if there is none."""
    candidate = source.resolve().parent / PROJECT_CONFIG_NAME
    return candidate if candidate.is_file() else None


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    An empty document yields the defaults.

    Raises:
        ProjectConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    config = ProjectConfig()
    if "output-directory" in data:
        config.output_directory = _require_string(data, "output-directory", source_label)
    if "platforms" in data:
        config.platforms = _parse_platforms(data["platforms"], source_label)
    if "strategy" in data:
        value = _require_string(data, "strategy", source_label)
        try:
            config.strategy = ReconcileStrategy(value)
        except ValueError:
            choices = ", ".join(s.value for s in ReconcileStrategy)
            raise ProjectConfigError(
                f"{source_label}: unknown strategy '{value}' (expected one of: {choices})"
            ) from None
    if "fail-on-warnings" in data:
        value = data["fail-on-warnings"]
        if not isinstance(value, bool):
            raise ProjectConfigError(f"{source_label}: 'fail-on-warnings' must be a boolean")
        config.fail_on_warnings = value
    if "debug-dump" in data and data["debug-dump"] is not None:
        config.debug_dump = _require_string(data, "debug-dump", source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ProjectConfigError if missing."""
    if key not in mapping:
        raise ProjectConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _parse_platforms(raw: object, source_label: str) -> list[Platform]:
    if not isinstance(raw, list):
        raise ProjectConfigError(f"{source_label}: 'platforms' must be a list")
    platforms: list[Platform] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, str):
            raise ProjectConfigError(f"{source_label}: platforms[{index}] must be a string")
        try:
            platforms.append(Platform(entry))
        except ValueError:
            raise ProjectConfigError(f"{source_label}: platforms[{index}]: unknown platform '{entry}'") from None
    return platforms
