# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Merging of the grammar tree and direct-text extraction into one Application."""

from __future__ import annotations

import enum
import logging

from finapp.compiler.extractor import Extraction
from finapp.model.entities import Application, ParsedDocument

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DocumentParseError(Exception):
    """Raised when the grammar tree is absent, so no Application can be built."""


class ReconcileStrategy(enum.Enum):
    """Which source wins for models, screens and the API.

    EXTRACTED: each collection comes from the direct-text extractor whenever the
        extractor found anything for it, falling back to the grammar tree.
    GRAMMAR: the grammar tree is the only source; extraction output is ignored.
    """

    EXTRACTED = "extracted"
    GRAMMAR = "grammar"


def reconcile(
    tree: ParsedDocument | None,
    extraction: Extraction | None = None,
    *,
    strategy: ReconcileStrategy = ReconcileStrategy.EXTRACTED,
) -> Application:
    """Build the reconciled Application.

    Scalar metadata (name, id, version, platforms, theme), navigation and mock
    data always come from the grammar tree.

    Args:
        tree: The grammar tree from :func:`finapp.compiler.parser.parse`.
        extraction: Output of :func:`finapp.compiler.extractor.extract`.
        strategy: Precedence policy for models, screens and the API.

    Returns:
        A new :class:`Application`. Neither input is modified.

    Raises:
        DocumentParseError: If *tree* is None or has no ``app`` declaration.
    """
    if tree is None:
        raise DocumentParseError("Could not parse document: no grammar tree was produced")
    header = tree.header
    if header is None:
        raise DocumentParseError("Could not parse document: missing 'app' declaration")

    models = tree.models
    screens = tree.screens
    api = tree.api
    if strategy == ReconcileStrategy.EXTRACTED and extraction is not None:
        if extraction.models:
            models = extraction.models
        if extraction.screens:
            screens = extraction.screens
        if extraction.api is not None:
            api = extraction.api
    logger.debug(
        "Reconciled %s with %d models, %d screens (%s strategy)", header.name, len(models), len(screens), strategy.value
    )

    app = Application(
        name=header.name,
        display_name=header.display_name,
        app_id=header.app_id,
        version=header.version,
        platforms=list(header.platforms),
        theme=dict(header.theme) if header.theme is not None else None,
        models=models,
        screens=screens,
        navigation=tree.navigation,
        api=api,
        mock_data=tree.mock_data,
    )
    # Deep copy so the Application owns its collections outright.
    return app.model_copy(deep=True)
