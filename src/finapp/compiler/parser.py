# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for FinApp DSL files.

Converts a token stream produced by the lexer into a ParsedDocument. Syntax
errors do not abort the parse: each one is recorded as a diagnostic, the
offending statement is dropped, and parsing resumes at the next statement
header.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from finapp.model.entities import (
    Action,
    Api,
    AppHeader,
    Component,
    Endpoint,
    FormField,
    HttpMethod,
    Layout,
    LayoutType,
    MockData,
    Model,
    Navigation,
    NavigationType,
    NavItem,
    ParsedDocument,
    Platform,
    Screen,
)
from finapp.model.types import Parameter, Property, TypeRef
from finapp.parser.lexer import Token, TokenType, tokenize

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised inside the parser when it encounters a syntactically invalid construct.

    Never escapes :func:`parse`; each occurrence becomes a :class:`SyntaxDiagnostic`.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column


@dataclass(frozen=True)
class SyntaxDiagnostic:
    """A recoverable syntax error with its source position."""

    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"


@dataclass
class ParseResult:
    """The outcome of a parse: a best-effort tree plus all syntax diagnostics.

    Attributes:
        tree: The parsed document, or None when the source holds no tokens at all.
        errors: Syntax diagnostics in source order. Empty on success.
    """

    tree: ParsedDocument | None
    errors: list[SyntaxDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.tree is not None and not self.errors


def parse(source: str) -> ParseResult:
    """Parse FinApp source text into a grammar tree.

    Args:
        source: The full text of a DSL file.

    Returns:
        A :class:`ParseResult`. Recoverable syntax problems are reported in
        ``errors``; the tree holds every statement that parsed cleanly.

    Raises:
        LexerError: If *source* is not text.
    """
    tokens = tokenize(source)
    return _Parser(tokens).parse()


# ################
# Implementation
# ################

_NAME_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.APP,
        TokenType.MODEL,
        TokenType.SCREEN,
        TokenType.NAVIGATION,
        TokenType.API,
        TokenType.MOCK_DATA,
        TokenType.ENDPOINT,
    }
)

_PROPERTY_FEATURES: frozenset[str] = frozenset({"required", "default", "enum"})


class _Parser:
    """Recursive-descent parser for FinApp token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._errors: list[SyntaxDiagnostic] = []
        self._saw_app = False

    def parse(self) -> ParseResult:
        """Parse the full token stream, recovering from errors statement by statement."""
        if self._at_end():
            return ParseResult(tree=None, errors=[])
        doc = ParsedDocument()
        while not self._at_end():
            start = self._pos
            try:
                self._parse_statement(doc)
            except ParseError as exc:
                self._errors.append(SyntaxDiagnostic(exc.message, exc.line, exc.column))
                self._synchronize(start)
        if doc.header is None and not self._saw_app:
            first = self._tokens[0]
            self._errors.insert(0, SyntaxDiagnostic("Missing 'app' declaration", first.line, first.column))
        return ParseResult(tree=doc, errors=self._errors)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _peek(self, offset: int = 1) -> Token:
        """Return the token *offset* positions ahead, clamped to EOF."""
        return self._tokens[min(self._pos + offset, len(self._tokens) - 1)]

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._current().type == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types."""
        return self._current().type in types

    def _check_word(self, word: str) -> bool:
        """Return True if the current token is a name token spelled *word*."""
        tok = self._current()
        return tok.type in _NAME_TYPES and tok.value == word

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        tok = self._current()
        if tok.type not in types:
            expected = ", ".join(repr(t.value) for t in types)
            raise self._unexpected(tok, f"Expected {expected}")
        return self._advance()

    def _expect_name(self) -> Token:
        """Consume the current token as a name.

        Accepts identifiers and statement keywords used in name positions
        (e.g. an action key named 'api').
        """
        tok = self._current()
        if tok.type not in _NAME_TYPES:
            raise self._unexpected(tok, "Expected identifier")
        return self._advance()

    def _expect_word(self, word: str) -> Token:
        """Consume a contextual keyword spelled *word*."""
        if not self._check_word(word):
            raise self._unexpected(self._current(), f"Expected {word!r}")
        return self._advance()

    def _skip_commas(self) -> None:
        while self._check(TokenType.COMMA):
            self._advance()

    def _unexpected(self, tok: Token, prefix: str) -> ParseError:
        got = "end of input" if tok.type == TokenType.EOF else repr(tok.value)
        return ParseError(f"{prefix}, got {got}", tok.line, tok.column)

    def _report(self, message: str, tok: Token) -> None:
        """Record a non-fatal diagnostic without interrupting the parse."""
        self._errors.append(SyntaxDiagnostic(message, tok.line, tok.column))

    # ------------------------------------------------------------------
    # Error recovery
    # ------------------------------------------------------------------

    def _synchronize(self, start: int) -> None:
        """Skip tokens until the next statement header (or EOF).

        Always consumes at least one token past *start* so recovery makes progress.
        """
        if self._pos == start:
            self._advance()
        while not self._at_end() and not self._at_statement_header():
            self._advance()

    def _at_statement_header(self) -> bool:
        tok = self._current()
        if tok.type in (TokenType.APP, TokenType.MODEL, TokenType.SCREEN):
            return self._peek().type in _NAME_TYPES and self._peek(2).type == TokenType.LBRACE
        if tok.type in (TokenType.NAVIGATION, TokenType.API, TokenType.MOCK_DATA):
            nxt = self._peek().type
            return nxt == TokenType.LBRACE or (nxt == TokenType.COLON and self._peek(2).type == TokenType.LBRACE)
        return False

    # ------------------------------------------------------------------
    # Top-level statements
    # ------------------------------------------------------------------

    def _parse_statement(self, doc: ParsedDocument) -> None:
        """Parse one top-level statement and attach it to the document."""
        tok = self._current()
        if tok.type == TokenType.APP:
            self._saw_app = True
            header = self._parse_app()
            if doc.header is None:
                doc.header = header
            else:
                self._report("Duplicate 'app' declaration", tok)
        elif tok.type == TokenType.MODEL:
            doc.models.append(self._parse_model())
        elif tok.type == TokenType.SCREEN:
            doc.screens.append(self._parse_screen())
        elif tok.type == TokenType.NAVIGATION:
            navigation = self._parse_navigation()
            if doc.navigation is None:
                doc.navigation = navigation
            else:
                self._report("Duplicate 'navigation' section", tok)
        elif tok.type == TokenType.API:
            api = self._parse_api()
            if doc.api is None:
                doc.api = api
            else:
                self._report("Duplicate 'api' section", tok)
        elif tok.type == TokenType.MOCK_DATA:
            mock_data = self._parse_mock_data()
            if doc.mock_data is None:
                doc.mock_data = mock_data
            else:
                self._report("Duplicate 'mockData' section", tok)
        else:
            raise self._unexpected(tok, "Expected 'app', 'model', 'screen', 'navigation', 'api' or 'mockData'")

    def _open_section(self, keyword: TokenType) -> Token:
        """Parse: <keyword> [':'] '{' and return the keyword token."""
        tok = self._expect(keyword)
        if self._check(TokenType.COLON):
            self._advance()
        self._expect(TokenType.LBRACE)
        return tok

    # ------------------------------------------------------------------
    # App declaration
    # ------------------------------------------------------------------

    def _parse_app(self) -> AppHeader:
        """Parse: app <Name> { name: .. id: .. version: .. [platforms: [..]] [theme: {..}] }

        Once the name and opening brace are read, the header always survives:
        a bad attribute is reported and skipped, and a missing closing brace is
        reported without discarding the attributes read so far.
        """
        app_tok = self._expect(TokenType.APP)
        name_tok = self._expect_name()
        self._expect(TokenType.LBRACE)
        header = AppHeader(name=name_tok.value)
        seen: set[str] = set()
        while not self._check(TokenType.RBRACE, TokenType.EOF) and not self._at_statement_header():
            start = self._pos
            value_start: int | None = None
            try:
                key_tok = self._expect_name()
                self._expect(TokenType.COLON)
                value_start = self._pos
                seen.add(key_tok.value)
                self._parse_app_attribute(header, key_tok)
            except ParseError as exc:
                self._errors.append(SyntaxDiagnostic(exc.message, exc.line, exc.column))
                self._skip_app_attribute(start, value_start)
            self._skip_commas()
        if self._check(TokenType.RBRACE):
            self._advance()
        else:
            self._report(f"Expected '}}' to close app {header.name!r}", self._current())
        for required in ("name", "id", "version"):
            if required not in seen:
                self._report(f"App {header.name!r} is missing {required!r}", app_tok)
        return header

    def _parse_app_attribute(self, header: AppHeader, key_tok: Token) -> None:
        key = key_tok.value
        if key == "name":
            header.display_name = self._expect(TokenType.STRING).value
        elif key == "id":
            header.app_id = self._expect(TokenType.STRING).value
        elif key == "version":
            header.version = self._expect(TokenType.STRING).value
        elif key == "platforms":
            header.platforms = self._parse_platforms()
        elif key == "theme":
            header.theme = self._parse_theme()
        else:
            raise ParseError(f"Unknown app attribute {key!r}", key_tok.line, key_tok.column)

    def _skip_app_attribute(self, start: int, value_start: int | None) -> None:
        """Skip past a malformed app attribute.

        When the key and colon were read, the value after the colon is skipped
        as a whole. Otherwise tokens are skipped up to the next ``key:`` pair,
        the closing brace or the next statement header.
        """
        if value_start is not None:
            self._pos = value_start
            self._skip_value()
            return
        self._pos = start
        self._advance()
        while not self._check(TokenType.RBRACE, TokenType.EOF) and not self._at_statement_header():
            if self._current().type in _NAME_TYPES and self._peek().type == TokenType.COLON:
                return
            if self._check(TokenType.RBRACKET):
                self._advance()
            else:
                self._skip_value()

    def _skip_value(self) -> None:
        """Skip one token, or one bracketed or braced group with everything nested in it.

        A closing bracket or brace is left in place.
        """
        depth = 0
        while not self._at_end():
            if depth == 0 and self._check(TokenType.RBRACE, TokenType.RBRACKET):
                return
            tok = self._advance()
            if tok.type in (TokenType.LBRACE, TokenType.LBRACKET):
                depth += 1
            elif tok.type in (TokenType.RBRACE, TokenType.RBRACKET):
                depth -= 1
            if depth == 0:
                return

    def _parse_platforms(self) -> list[Platform]:
        """Parse: [ ios, android, web ]

        Unknown platform names are reported and left out of the result.
        """
        self._expect(TokenType.LBRACKET)
        platforms: list[Platform] = []
        while not self._check(TokenType.RBRACKET, TokenType.EOF):
            tok = self._expect_name()
            try:
                platforms.append(Platform(tok.value))
            except ValueError:
                self._report(f"Unknown platform {tok.value!r}", tok)
            if not self._check(TokenType.COMMA):
                break
            self._advance()
        self._expect(TokenType.RBRACKET)
        return platforms

    def _parse_theme(self) -> dict[str, str]:
        """Parse: { key: "value" ... }"""
        self._expect(TokenType.LBRACE)
        theme: dict[str, str] = {}
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            key = self._expect_name().value
            self._expect(TokenType.COLON)
            theme[key] = self._expect(TokenType.STRING).value
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        return theme

    # ------------------------------------------------------------------
    # Models
    # ------------------------------------------------------------------

    def _parse_model(self) -> Model:
        """Parse: model <Name> { property* }"""
        self._expect(TokenType.MODEL)
        name_tok = self._expect_name()
        self._expect(TokenType.LBRACE)
        model = Model(name=name_tok.value)
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            model.properties.append(self._parse_property())
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        return model

    def _parse_property(self) -> Property:
        """Parse: <name>: <type>['[]'] [required] [default: <value>] [enum: [..]]

        Features repeat greedily; ``required`` only counts as a feature when it
        is not followed by a colon (which would start the next property).
        """
        name_tok = self._expect_name()
        self._expect(TokenType.COLON)
        prop = Property(name=name_tok.value, type=self._parse_type_ref())
        while True:
            tok = self._current()
            if tok.type not in _NAME_TYPES or tok.value not in _PROPERTY_FEATURES:
                break
            follows_colon = self._peek().type == TokenType.COLON
            if tok.value == "required" and not follows_colon:
                self._advance()
                prop.required = True
            elif tok.value == "default" and follows_colon:
                self._advance()
                self._advance()
                prop.default_value = self._parse_scalar_text()
            elif tok.value == "enum" and follows_colon:
                self._advance()
                self._advance()
                prop.enum_values = self._parse_enum_values()
            else:
                break
            self._skip_commas()
        return prop

    def _parse_type_ref(self) -> TypeRef:
        """Parse: <typeName> ['[' ']']"""
        name_tok = self._expect_name()
        is_array = False
        if self._check(TokenType.LBRACKET) and self._peek().type == TokenType.RBRACKET:
            self._advance()
            self._advance()
            is_array = True
        return TypeRef(name=name_tok.value, is_array=is_array)

    def _parse_scalar_text(self) -> str:
        """Parse a default value (string, number, boolean or name) as text."""
        tok = self._current()
        if tok.type in (TokenType.STRING, TokenType.NUMBER, TokenType.TRUE, TokenType.FALSE) or tok.type in _NAME_TYPES:
            return self._advance().value
        raise self._unexpected(tok, "Expected a default value")

    def _parse_enum_values(self) -> list[str]:
        """Parse: [ v1, "v2", ... ]"""
        self._expect(TokenType.LBRACKET)
        values: list[str] = []
        while not self._check(TokenType.RBRACKET, TokenType.EOF):
            values.append(self._parse_scalar_text())
            if not self._check(TokenType.COMMA):
                break
            self._advance()
        self._expect(TokenType.RBRACKET)
        return values

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def _parse_screen(self) -> Screen:
        """Parse: screen <Name> { title: .. [initial] [params: {..}] layout: {..} }"""
        screen_tok = self._expect(TokenType.SCREEN)
        name_tok = self._expect_name()
        self._expect(TokenType.LBRACE)
        title: str | None = None
        screen = Screen(name=name_tok.value, title=name_tok.value)
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            if self._check_word("initial") and self._peek().type != TokenType.COLON:
                self._advance()
                screen.is_initial = True
                continue
            key_tok = self._expect_name()
            self._expect(TokenType.COLON)
            key = key_tok.value
            if key == "title":
                title = self._expect(TokenType.STRING).value
            elif key == "params":
                screen.parameters = self._parse_screen_params()
            elif key == "layout":
                screen.layout = self._parse_layout()
            else:
                raise ParseError(f"Unknown screen attribute {key!r}", key_tok.line, key_tok.column)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        if title is None:
            self._report(f"Screen {screen.name!r} is missing 'title'", screen_tok)
        else:
            screen.title = title
        return screen

    def _parse_screen_params(self) -> list[Parameter]:
        """Parse: { <name>: <type> [required] ... }"""
        self._expect(TokenType.LBRACE)
        params: list[Parameter] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            name_tok = self._expect_name()
            self._expect(TokenType.COLON)
            param = Parameter(name=name_tok.value, type=self._parse_type_ref())
            if self._check_word("required") and self._peek().type != TokenType.COLON:
                self._advance()
                param.required = True
            params.append(param)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        return params

    def _parse_layout(self) -> Layout:
        """Parse: { type: <kind> [components: [..]] [fields: [..]] [actions: {..}] [submitButton/cancelButton] }"""
        open_tok = self._expect(TokenType.LBRACE)
        layout = Layout()
        has_type = False
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            key_tok = self._expect_name()
            self._expect(TokenType.COLON)
            key = key_tok.value
            if key == "type":
                kind_tok = self._expect_name()
                try:
                    layout.type = LayoutType(kind_tok.value)
                except ValueError:
                    raise ParseError(
                        f"Unknown layout type {kind_tok.value!r}", kind_tok.line, kind_tok.column
                    ) from None
                has_type = True
            elif key == "components":
                layout.components = [self._to_component(obj, key_tok) for obj in self._parse_object_list()]
            elif key == "fields":
                layout.fields = [self._to_form_field(obj, key_tok) for obj in self._parse_object_list()]
            elif key == "actions":
                layout.actions = self._parse_actions()
            elif key == "submitButton":
                layout.submit_button = self._expect(TokenType.STRING).value
            elif key == "cancelButton":
                layout.cancel_button = self._expect(TokenType.STRING).value
            else:
                raise ParseError(f"Unknown layout attribute {key!r}", key_tok.line, key_tok.column)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        if not has_type:
            raise ParseError("Layout is missing 'type'", open_tok.line, open_tok.column)
        return layout

    def _to_component(self, obj: dict[str, Any], at: Token) -> Component:
        kind = obj.pop("type", None)
        if not isinstance(kind, str):
            raise ParseError("Component is missing 'type'", at.line, at.column)
        return Component(type=kind, attributes=obj)

    def _to_form_field(self, obj: dict[str, Any], at: Token) -> FormField:
        name = obj.pop("name", None)
        kind = obj.pop("type", None)
        if not isinstance(name, str) or not isinstance(kind, str):
            raise ParseError("Form field requires 'name' and 'type'", at.line, at.column)
        label = obj.pop("label", None)
        return FormField(
            name=name,
            type=kind,
            label=label if isinstance(label, str) else None,
            required=obj.pop("required", False) is True,
            attributes=obj,
        )

    def _parse_actions(self) -> list[Action]:
        """Parse: { onEvent: { navigate: Screen api: endpoint params: {..} } ... }"""
        self._expect(TokenType.LBRACE)
        actions: list[Action] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            event_tok = self._expect_name()
            self._expect(TokenType.COLON)
            body = self._parse_object()
            navigate = body.get("navigate")
            api = body.get("api")
            params = body.get("params")
            actions.append(
                Action(
                    event=event_tok.value,
                    navigate=navigate if isinstance(navigate, str) else None,
                    api=api if isinstance(api, str) else None,
                    params=params if isinstance(params, dict) else {},
                )
            )
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        return actions

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _parse_navigation(self) -> Navigation:
        """Parse: navigation [:] { type: tab|drawer|stack items: [ {..}, .. ] }"""
        nav_tok = self._open_section(TokenType.NAVIGATION)
        nav_type: NavigationType | None = None
        items: list[NavItem] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            key_tok = self._expect_name()
            self._expect(TokenType.COLON)
            if key_tok.value == "type":
                kind_tok = self._expect_name()
                try:
                    nav_type = NavigationType(kind_tok.value)
                except ValueError:
                    raise ParseError(
                        f"Unknown navigation type {kind_tok.value!r}", kind_tok.line, kind_tok.column
                    ) from None
            elif key_tok.value == "items":
                for obj in self._parse_object_list():
                    screen = obj.get("screen")
                    if not isinstance(screen, str):
                        raise ParseError("Navigation item is missing 'screen'", key_tok.line, key_tok.column)
                    title = obj.get("title")
                    icon = obj.get("icon")
                    items.append(
                        NavItem(
                            screen=screen,
                            title=title if isinstance(title, str) else None,
                            icon=icon if isinstance(icon, str) else None,
                        )
                    )
            else:
                raise ParseError(f"Unknown navigation attribute {key_tok.value!r}", key_tok.line, key_tok.column)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        if nav_type is None:
            raise ParseError("Navigation is missing 'type'", nav_tok.line, nav_tok.column)
        return Navigation(type=nav_type, items=items)

    # ------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------

    def _parse_api(self) -> Api:
        """Parse: api [:] { baseUrl: ".." [mock] endpoints: [ {..}, .. ] | endpoint <Name> {..} }"""
        api_tok = self._open_section(TokenType.API)
        base_url: str | None = None
        mock = False
        endpoints: list[Endpoint] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            if self._check_word("mock") and self._peek().type != TokenType.COLON:
                self._advance()
                mock = True
                continue
            if self._check(TokenType.ENDPOINT):
                self._advance()
                name_tok = self._expect_name()
                endpoints.append(self._parse_endpoint(name_tok))
                continue
            key_tok = self._expect_name()
            self._expect(TokenType.COLON)
            if key_tok.value == "baseUrl":
                base_url = self._expect(TokenType.STRING).value
            elif key_tok.value == "mock":
                mock = self._expect(TokenType.TRUE, TokenType.FALSE).type == TokenType.TRUE
            elif key_tok.value == "endpoints":
                self._expect(TokenType.LBRACKET)
                while not self._check(TokenType.RBRACKET, TokenType.EOF):
                    endpoints.append(self._parse_endpoint(None))
                    if not self._check(TokenType.COMMA):
                        break
                    self._advance()
                self._expect(TokenType.RBRACKET)
            else:
                raise ParseError(f"Unknown api attribute {key_tok.value!r}", key_tok.line, key_tok.column)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        if base_url is None:
            raise ParseError("API section is missing 'baseUrl'", api_tok.line, api_tok.column)
        return Api(base_url=base_url, mock=mock, endpoints=endpoints)

    def _parse_endpoint(self, name_tok: Token | None) -> Endpoint:
        """Parse an endpoint body: { id: .. path: ".." method: .. [params: [..]] [body: ..] [response: ..] }

        For the inline ``endpoint <Name> { .. }`` form the id comes from *name_tok*.
        """
        open_tok = self._expect(TokenType.LBRACE)
        endpoint_id = name_tok.value if name_tok is not None else None
        path: str | None = None
        method: str | None = None
        params: list[Parameter] = []
        body: str | None = None
        response: TypeRef | None = None
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            key_tok = self._expect_name()
            self._expect(TokenType.COLON)
            key = key_tok.value
            if key == "id":
                endpoint_id = self._expect_name().value
            elif key == "path":
                path = self._expect(TokenType.STRING).value
            elif key == "method":
                method_tok = self._expect_name()
                if method_tok.value not in HttpMethod.__members__:
                    raise ParseError(
                        f"Unsupported HTTP method {method_tok.value!r}", method_tok.line, method_tok.column
                    )
                method = method_tok.value
            elif key == "params":
                params = self._parse_endpoint_params()
            elif key == "body":
                body = self._expect_name().value
            elif key == "response":
                response = self._parse_type_ref()
            else:
                raise ParseError(f"Unknown endpoint attribute {key!r}", key_tok.line, key_tok.column)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        for attr, value in (("id", endpoint_id), ("path", path), ("method", method)):
            if value is None:
                raise ParseError(f"Endpoint is missing {attr!r}", open_tok.line, open_tok.column)
        assert endpoint_id is not None and path is not None and method is not None
        return Endpoint(id=endpoint_id, path=path, method=method, parameters=params, body=body, response=response)

    def _parse_endpoint_params(self) -> list[Parameter]:
        """Parse: [ { name: .. type: .. [required] } ... ]"""
        self._expect(TokenType.LBRACKET)
        params: list[Parameter] = []
        while not self._check(TokenType.RBRACKET, TokenType.EOF):
            params.append(self._parse_endpoint_param())
            self._skip_commas()
        self._expect(TokenType.RBRACKET)
        return params

    def _parse_endpoint_param(self) -> Parameter:
        open_tok = self._expect(TokenType.LBRACE)
        name: str | None = None
        type_ref = TypeRef(name="string")
        required = False
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            if self._check_word("required") and self._peek().type != TokenType.COLON:
                self._advance()
                required = True
                continue
            key_tok = self._expect_name()
            self._expect(TokenType.COLON)
            if key_tok.value == "name":
                name = self._expect_name().value
            elif key_tok.value == "type":
                type_ref = self._parse_type_ref()
            elif key_tok.value == "required":
                required = self._expect(TokenType.TRUE, TokenType.FALSE).type == TokenType.TRUE
            else:
                raise ParseError(f"Unknown parameter attribute {key_tok.value!r}", key_tok.line, key_tok.column)
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        if name is None:
            raise ParseError("Parameter is missing 'name'", open_tok.line, open_tok.column)
        return Parameter(name=name, type=type_ref, required=required)

    # ------------------------------------------------------------------
    # Mock data
    # ------------------------------------------------------------------

    def _parse_mock_data(self) -> MockData:
        """Parse: mockData [:] { <section>: [ {..}, .. ] ... }"""
        self._open_section(TokenType.MOCK_DATA)
        mock_data = MockData()
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            section_tok = self._expect_name()
            self._expect(TokenType.COLON)
            mock_data.sections[section_tok.value] = self._parse_object_list()
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        return mock_data

    # ------------------------------------------------------------------
    # Generic values
    # ------------------------------------------------------------------

    def _parse_object_list(self) -> list[dict[str, Any]]:
        """Parse: [ {..}, {..} ... ]"""
        self._expect(TokenType.LBRACKET)
        items: list[dict[str, Any]] = []
        while not self._check(TokenType.RBRACKET, TokenType.EOF):
            items.append(self._parse_object())
            self._skip_commas()
        self._expect(TokenType.RBRACKET)
        return items

    def _parse_object(self) -> dict[str, Any]:
        """Parse: { key [: value] ... }. A key without a value is a flag set to True."""
        self._expect(TokenType.LBRACE)
        result: dict[str, Any] = {}
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            if self._check(TokenType.STRING):
                key = self._advance().value
            else:
                key = self._expect_name().value
            if self._check(TokenType.COLON):
                self._advance()
                result[key] = self._parse_value()
            else:
                result[key] = True
            self._skip_commas()
        self._expect(TokenType.RBRACE)
        return result

    def _parse_value(self) -> Any:
        """Parse a string, number, boolean, dotted name, object or array."""
        tok = self._current()
        if tok.type == TokenType.STRING:
            return self._advance().value
        if tok.type == TokenType.NUMBER:
            text = self._advance().value
            return float(text) if "." in text else int(text)
        if tok.type in (TokenType.TRUE, TokenType.FALSE):
            return self._advance().type == TokenType.TRUE
        if tok.type == TokenType.LBRACE:
            return self._parse_object()
        if tok.type == TokenType.LBRACKET:
            self._advance()
            items: list[Any] = []
            while not self._check(TokenType.RBRACKET, TokenType.EOF):
                items.append(self._parse_value())
                if not self._check(TokenType.COMMA):
                    break
                self._advance()
            self._expect(TokenType.RBRACKET)
            return items
        if tok.type in _NAME_TYPES:
            parts = [self._advance().value]
            while self._check(TokenType.DOT) and self._peek().type in _NAME_TYPES:
                self._advance()
                parts.append(self._advance().value)
            return ".".join(parts)
        raise self._unexpected(tok, "Expected a value")
