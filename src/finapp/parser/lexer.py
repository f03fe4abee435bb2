# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for FinApp DSL files.

Converts raw source text into a sequence of tokens for subsequent parsing.
Scanning never aborts on bad input: characters that start no valid token are
returned as ``UNKNOWN`` tokens and left for the parser to report.
"""

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the FinApp lexer."""

    # Statement keywords
    APP = "app"
    MODEL = "model"
    SCREEN = "screen"
    NAVIGATION = "navigation"
    API = "api"
    MOCK_DATA = "mockData"
    ENDPOINT = "endpoint"
    TRUE = "true"
    FALSE = "false"

    # Symbols
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    COLON = ":"
    DOT = "."

    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # Anything the scanner could not classify
    UNKNOWN = "UNKNOWN"

    # End of file
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token (or decoded string content for STRING tokens).
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


class LexerError(Exception):
    """Raised when the input cannot be tokenized at all (e.g. it is not text).

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int = 1, column: int = 1) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class TokenStream:
    """A lazy, restartable sequence of tokens over one source text.

    Each iteration scans the source from the beginning, so the stream can be
    consumed any number of times. The last token of every pass is EOF.
    """

    def __init__(self, source: str) -> None:
        if not isinstance(source, str):
            raise LexerError(f"Expected source text, got {type(source).__name__}")
        self._source = source

    def __iter__(self) -> Iterator[Token]:
        return _Lexer(self._source).scan()


def tokenize(source: str) -> list[Token]:
    """Tokenize FinApp source text into a list of tokens.

    Comments and whitespace are consumed and not included in the output.

    Args:
        source: The full text of a DSL file.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: If *source* is not a string.
    """
    return list(TokenStream(source))


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {
    "app": TokenType.APP,
    "model": TokenType.MODEL,
    "screen": TokenType.SCREEN,
    "navigation": TokenType.NAVIGATION,
    "api": TokenType.API,
    "mockData": TokenType.MOCK_DATA,
    "endpoint": TokenType.ENDPOINT,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
}

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


class _Lexer:
    """Character-level scanner over one source text.

    Tracks the 1-based line and column of the read position; every token is
    stamped with the position of its first character.
    """

    def __init__(self, source: str) -> None:
        self._text = source
        self._end = len(source)
        self._pos = 0
        self._line = 1
        self._column = 1

    def scan(self) -> Iterator[Token]:
        """Yield every token of the source, then a single EOF token."""
        while True:
            self._skip_trivia()
            if self._exhausted:
                break
            yield self._next_token()
        yield Token(TokenType.EOF, "", self._line, self._column)

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    @property
    def _exhausted(self) -> bool:
        return self._pos >= self._end

    def _char(self, offset: int = 0) -> str:
        """Return the character *offset* places past the cursor, or '' beyond the end."""
        index = self._pos + offset
        return self._text[index] if index < self._end else ""

    def _take(self) -> str:
        """Move the cursor one character forward and return the character passed."""
        ch = self._text[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line, self._column = self._line + 1, 1
        else:
            self._column += 1
        return ch

    def _take_while(self, predicate: Callable[[str], bool]) -> None:
        while not self._exhausted and predicate(self._char()):
            self._take()

    def _rewind(self, pos: int, line: int, column: int) -> None:
        self._pos, self._line, self._column = pos, line, column

    # ------------------------------------------------------------------
    # Trivia: whitespace, // line comments and /* block */ comments
    # ------------------------------------------------------------------

    def _skip_trivia(self) -> None:
        while not self._exhausted:
            ch = self._char()
            if ch.isspace():
                self._take()
                continue
            opener = ch + self._char(1)
            if opener == "//":
                self._take_while(lambda c: c != "\n")
            elif opener == "/*":
                self._skip_block_comment()
            else:
                return

    def _skip_block_comment(self) -> None:
        # An unclosed block comment runs to the end of the input.
        self._take()
        self._take()
        while not self._exhausted:
            if self._char() == "*" and self._char(1) == "/":
                self._take()
                self._take()
                return
            self._take()

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _next_token(self) -> Token:
        ch = self._char()
        line, col = self._line, self._column

        symbol = _SINGLE_CHAR_TOKENS.get(ch)
        if symbol is not None:
            self._take()
            return Token(symbol, ch, line, col)
        if ch == '"' or ch == "'":
            return self._string(line, col)
        if ch.isdecimal() or (ch == "-" and self._char(1).isdecimal()):
            return self._number(line, col)
        if ch == "_" or ch.isalpha():
            return self._word(line, col)
        self._take()
        return Token(TokenType.UNKNOWN, ch, line, col)

    def _string(self, line: int, col: int) -> Token:
        """Read a quoted literal, decoding escapes.

        Literals end at the matching quote and may not span lines. An
        unterminated literal becomes an UNKNOWN token for its opening quote and
        scanning continues with the character after that quote.
        """
        start = self._pos
        quote = self._take()
        decoded: list[str] = []
        while not self._exhausted and self._char() != "\n":
            ch = self._take()
            if ch == quote:
                return Token(TokenType.STRING, "".join(decoded), line, col)
            if ch != "\\":
                decoded.append(ch)
            elif not self._exhausted:
                escaped = self._take()
                decoded.append(_ESCAPES.get(escaped, escaped))
        self._rewind(start + 1, line, col + 1)
        return Token(TokenType.UNKNOWN, quote, line, col)

    def _number(self, line: int, col: int) -> Token:
        """Read an integer or decimal; a fraction needs digits on both sides of the point."""
        start = self._pos
        if self._char() == "-":
            self._take()
        self._take_while(str.isdecimal)
        if self._char() == "." and self._char(1).isdecimal():
            self._take()
            self._take_while(str.isdecimal)
        return Token(TokenType.NUMBER, self._text[start : self._pos], line, col)

    def _word(self, line: int, col: int) -> Token:
        start = self._pos
        self._take_while(lambda c: c == "_" or c.isalnum())
        text = self._text[start : self._pos]
        return Token(_KEYWORDS.get(text, TokenType.IDENTIFIER), text, line, col)
