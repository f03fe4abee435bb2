# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for FinApp DSL files: parsing, extraction and reconciliation."""

from finapp.compiler.artifact import dump_debug, to_debug_data, write_debug_dump
from finapp.compiler.build import (
    CompileResult,
    Document,
    DocumentLoadError,
    compile_file,
    compile_source,
    load_document,
)
from finapp.compiler.extractor import Extraction, extract, extract_api, extract_models, extract_screens
from finapp.compiler.parser import ParseError, ParseResult, SyntaxDiagnostic, parse
from finapp.compiler.reconciler import DocumentParseError, ReconcileStrategy, reconcile

__all__ = [
    "parse",
    "ParseError",
    "ParseResult",
    "SyntaxDiagnostic",
    "extract",
    "extract_models",
    "extract_screens",
    "extract_api",
    "Extraction",
    "reconcile",
    "ReconcileStrategy",
    "DocumentParseError",
    "load_document",
    "Document",
    "DocumentLoadError",
    "compile_source",
    "compile_file",
    "CompileResult",
    "dump_debug",
    "to_debug_data",
    "write_debug_dump",
]
