# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Core application entities for the FinApp model."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import Field as _Field

from finapp.model.types import Parameter, Property, TypeRef

# ###############
# Public Interface
# ###############


class Platform(Enum):
    """Target platforms an application can be generated for."""

    WEB = "web"
    IOS = "ios"
    ANDROID = "android"


class LayoutType(Enum):
    """Screen layout kinds."""

    STACK = "stack"
    FORM = "form"
    SCROLL = "scroll"
    TABS = "tabs"


class NavigationType(Enum):
    """Top-level navigation styles."""

    TAB = "tab"
    DRAWER = "drawer"
    STACK = "stack"


class HttpMethod(Enum):
    """HTTP methods an endpoint may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Model(BaseModel):
    """A data model: a named, ordered list of properties."""

    name: str
    properties: list[Property] = _Field(default_factory=list)

    def get_property(self, name: str) -> Property | None:
        return next((p for p in self.properties if p.name == name), None)


class Component(BaseModel):
    """A UI component inside a layout.

    Attributes other than ``type`` are kept as generic values (strings,
    numbers, booleans, nested dicts and lists).
    """

    type: str
    attributes: dict[str, Any] = _Field(default_factory=dict)


class FormField(BaseModel):
    """An input field of a form layout."""

    name: str
    type: str
    label: str | None = None
    required: bool = False
    attributes: dict[str, Any] = _Field(default_factory=dict)


class Action(BaseModel):
    """A layout event handler, e.g. ``onSubmit``."""

    event: str
    navigate: str | None = None
    api: str | None = None
    params: dict[str, Any] = _Field(default_factory=dict)


class Layout(BaseModel):
    """The layout of a screen."""

    type: LayoutType = LayoutType.STACK
    components: list[Component] = _Field(default_factory=list)
    fields: list[FormField] = _Field(default_factory=list)
    actions: list[Action] = _Field(default_factory=list)
    submit_button: str | None = None
    cancel_button: str | None = None


class Screen(BaseModel):
    """A screen of the application."""

    name: str
    title: str
    is_initial: bool = False
    parameters: list[Parameter] = _Field(default_factory=list)
    layout: Layout | None = None


class NavItem(BaseModel):
    """A navigation entry referencing a screen by name."""

    screen: str
    title: str | None = None
    icon: str | None = None


class Navigation(BaseModel):
    """The application's top-level navigation."""

    type: NavigationType
    items: list[NavItem] = _Field(default_factory=list)


class Endpoint(BaseModel):
    """An API endpoint.

    ``method`` stays a string: the direct-text extractor accepts any bare
    identifier, and validation reports anything outside :class:`HttpMethod`.
    """

    id: str
    path: str
    method: str
    parameters: list[Parameter] = _Field(default_factory=list)
    body: str | None = None
    response: TypeRef | None = None

    def path_parameters(self) -> list[str]:
        """Return the ``{name}`` placeholders of the path, in order."""
        names: list[str] = []
        rest = self.path
        while "{" in rest:
            start = rest.index("{")
            end = rest.find("}", start)
            if end == -1:
                break
            names.append(rest[start + 1 : end].strip())
            rest = rest[end + 1 :]
        return names


class Api(BaseModel):
    """API configuration: base URL and endpoints."""

    base_url: str
    mock: bool = False
    endpoints: list[Endpoint] = _Field(default_factory=list)


class MockData(BaseModel):
    """Named sections of sample records used during development."""

    sections: dict[str, list[dict[str, Any]]] = _Field(default_factory=dict)


class AppHeader(BaseModel):
    """Scalar metadata from the ``app`` declaration."""

    name: str
    display_name: str = ""
    app_id: str = ""
    version: str = ""
    platforms: list[Platform] = _Field(default_factory=list)
    theme: dict[str, str] | None = None


class ParsedDocument(BaseModel):
    """The grammar tree: everything the grammar parser recovered from one source."""

    header: AppHeader | None = None
    models: list[Model] = _Field(default_factory=list)
    screens: list[Screen] = _Field(default_factory=list)
    navigation: Navigation | None = None
    api: Api | None = None
    mock_data: MockData | None = None


class Application(BaseModel):
    """The reconciled application passed to validation and emitters."""

    name: str
    display_name: str = ""
    app_id: str = ""
    version: str = ""
    platforms: list[Platform] = _Field(default_factory=list)
    theme: dict[str, str] | None = None
    models: list[Model] = _Field(default_factory=list)
    screens: list[Screen] = _Field(default_factory=list)
    navigation: Navigation | None = None
    api: Api | None = None
    mock_data: MockData | None = None

    def get_model(self, name: str) -> Model | None:
        return next((m for m in self.models if m.name == name), None)

    def get_screen(self, name: str) -> Screen | None:
        return next((s for s in self.screens if s.name == name), None)

    @property
    def initial_screen(self) -> Screen | None:
        return next((s for s in self.screens if s.is_initial), None)
