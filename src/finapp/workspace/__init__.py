# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for FinApp."""

from finapp.workspace.config import (
    PROJECT_CONFIG_NAME,
    ProjectConfig,
    ProjectConfigError,
    find_project_config,
    load_project_config,
)

__all__ = [
    "PROJECT_CONFIG_NAME",
    "ProjectConfig",
    "ProjectConfigError",
    "find_project_config",
    "load_project_config",
]
