# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end compile workflow for FinApp DSL files.

The pipeline is synchronous and keeps no state between calls:

1. Load the document text (the only I/O step).
2. Parse it with the grammar parser, collecting syntax diagnostics.
3. Run the direct-text extractor over the same text.
4. Reconcile both results into an :class:`~finapp.model.entities.Application`.

Validation is a separate step (:func:`finapp.validation.validate`) so callers
decide how to treat its diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from finapp.compiler.extractor import Extraction, extract
from finapp.compiler.parser import SyntaxDiagnostic, parse
from finapp.compiler.reconciler import ReconcileStrategy, reconcile
from finapp.model.entities import Application

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DocumentLoadError(Exception):
    """Raised when a source document cannot be read."""


@dataclass(frozen=True)
class Document:
    """Source text together with a stable identifier.

    Attributes:
        text: The decoded UTF-8 source.
        uri: Absolute ``file://`` URI of the document.
    """

    text: str
    uri: str


@dataclass
class CompileResult:
    """Output of :func:`compile_source`.

    Attributes:
        application: The reconciled application.
        syntax_errors: Recoverable syntax diagnostics from the grammar parser.
        extraction: What the direct-text extractor found.
    """

    application: Application
    syntax_errors: list[SyntaxDiagnostic] = field(default_factory=list)
    extraction: Extraction = field(default_factory=Extraction)


def load_document(path: Path) -> Document:
    """Read a DSL file as UTF-8 text.

    Raises:
        DocumentLoadError: If the file does not exist or cannot be decoded.
    """
    resolved = path.resolve()
    try:
        text = resolved.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DocumentLoadError(f"File not found: {resolved}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Cannot read source file '{resolved}': {exc}") from exc
    return Document(text=text, uri=resolved.as_uri())


def compile_source(
    source: str,
    *,
    strategy: ReconcileStrategy = ReconcileStrategy.EXTRACTED,
) -> CompileResult:
    """Parse, extract and reconcile one source text.

    Raises:
        LexerError: If *source* is not text.
        DocumentParseError: If no ``app`` declaration could be parsed.
    """
    result = parse(source)
    for diagnostic in result.errors:
        logger.debug("Syntax error at %s", diagnostic)
    extraction = extract(source)
    application = reconcile(result.tree, extraction, strategy=strategy)
    return CompileResult(application=application, syntax_errors=result.errors, extraction=extraction)


def compile_file(
    path: Path,
    *,
    strategy: ReconcileStrategy = ReconcileStrategy.EXTRACTED,
) -> CompileResult:
    """Load *path* and compile its contents.

    Raises:
        DocumentLoadError: If the file cannot be read.
        DocumentParseError: If no ``app`` declaration could be parsed.
    """
    document = load_document(path)
    logger.info("Processing file: %s", document.uri)
    return compile_source(document.text, strategy=strategy)
