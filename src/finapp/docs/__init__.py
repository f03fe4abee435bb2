# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation generators for FinApp applications."""

from finapp.docs.markdown import DOCUMENTATION_FILE_NAME, render_markdown, write_markdown

__all__ = [
    "DOCUMENTATION_FILE_NAME",
    "render_markdown",
    "write_markdown",
]
