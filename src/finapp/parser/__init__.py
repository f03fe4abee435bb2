# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for FinApp DSL files."""

from finapp.parser.lexer import LexerError, Token, TokenStream, TokenType, tokenize

__all__ = [
    "tokenize",
    "Token",
    "TokenStream",
    "TokenType",
    "LexerError",
]
