# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic checks for FinApp applications (initial screen, references, conventions, etc.)."""

from finapp.validation.checks import (
    Diagnostic,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "Diagnostic",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
