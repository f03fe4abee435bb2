# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic validation checks for reconciled FinApp applications.

Every rule runs independently and never modifies the application. Structural
problems are reported as errors, style and best-practice deviations as
warnings. Any error means the application should not be handed to emitters.
"""

from __future__ import annotations

import builtins
import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from finapp.model.entities import (
    Api,
    Application,
    Component,
    Endpoint,
    HttpMethod,
    Layout,
    LayoutType,
    Model,
    Navigation,
    NavigationType,
    Screen,
)
from finapp.model.types import DATA_TYPE_NAMES, DataType, Parameter, Property

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal rule violation: the application is usable but deviates from conventions.

    Attributes:
        message: Human-readable description of the warning.
        entity: Label of the offending entity, e.g. ``"model 'Account'"``.
        property: Name of the offending property or attribute, if any.
    """

    message: str
    entity: str = ""
    property: str | None = None

    @builtins.property
    def severity(self) -> str:
        return "warning"


@dataclass(frozen=True)
class ValidationError:
    """A fatal rule violation: the application must be fixed before code generation.

    Attributes:
        message: Human-readable description of the error.
        entity: Label of the offending entity, e.g. ``"screen 'Home'"``.
        property: Name of the offending property or attribute, if any.
    """

    message: str
    entity: str = ""
    property: str | None = None

    @builtins.property
    def severity(self) -> str:
        return "error"


Diagnostic = ValidationError | ValidationWarning


@dataclass
class ValidationResult:
    """Result of running all validation checks.

    Attributes:
        diagnostics: Every diagnostic in the order the rules produced them.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationError]:
        return [d for d in self.diagnostics if isinstance(d, ValidationError)]

    @property
    def warnings(self) -> list[ValidationWarning]:
        return [d for d in self.diagnostics if isinstance(d, ValidationWarning)]

    @property
    def has_errors(self) -> bool:
        """Return True if any error-severity diagnostic was found."""
        return any(isinstance(d, ValidationError) for d in self.diagnostics)


def validate(app: Application) -> ValidationResult:
    """Run every validation rule on a reconciled Application.

    Checks performed:

    1. **Sections** (warning): missing models, screens, navigation or API.
    2. **Initial screen** (error): exactly one screen must be marked initial
       when any screens exist. Zero or several yield a single error.
    3. **Models**: duplicate names (error), at least one property (error),
       PascalCase names and an ``id`` property (warnings), duplicate property
       names (error), known data types (error), enums only on strings
       (error), unique enum values (error), defaults inside the enum (error),
       required with a default (warning).
    4. **Screens**: duplicate names and parameters (error), a layout (error),
       layout shape per type, action and component targets resolving to
       declared screens and endpoints (error).
    5. **Navigation**: items resolving to declared screens (error), at most
       five tab items (warning), at least one item (warning).
    6. **API**: unique endpoint ids, supported methods, declared path
       parameters and body models (errors); body/method and identifier-path
       conventions and response types (warnings).

    Args:
        app: The reconciled application. It is not modified.

    Returns:
        A :class:`ValidationResult` holding every diagnostic found.
    """
    diagnostics: list[Diagnostic] = []

    diagnostics.extend(_check_sections(app))
    diagnostics.extend(_check_initial_screen(app))
    diagnostics.extend(_check_models(app.models))
    diagnostics.extend(_check_screens(app))
    if app.navigation is not None:
        diagnostics.extend(_check_navigation(app.navigation, app))
    if app.api is not None:
        diagnostics.extend(_check_api(app.api, app))

    return ValidationResult(diagnostics=diagnostics)


# ################
# Implementation
# ################

_PASCAL_CASE_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
_MAX_TAB_ITEMS = 5


def _duplicates(names: Iterable[str]) -> list[str]:
    """Return names occurring more than once, in order of first occurrence."""
    counts = Counter(names)
    return [name for name, count in counts.items() if count > 1]


def _check_sections(app: Application) -> list[Diagnostic]:
    label = f"app '{app.name}'"
    result: list[Diagnostic] = []
    if not app.models:
        result.append(ValidationWarning("No models defined. At least one model should be defined.", label, "models"))
    if not app.screens:
        result.append(
            ValidationWarning("No screens defined. At least one screen should be defined.", label, "screens")
        )
    if app.navigation is None:
        result.append(ValidationWarning("No navigation defined.", label, "navigation"))
    if app.api is None:
        result.append(ValidationWarning("No API defined.", label, "api"))
    return result


def _check_initial_screen(app: Application) -> list[Diagnostic]:
    if not app.screens:
        return []
    label = f"app '{app.name}'"
    initial = [s for s in app.screens if s.is_initial]
    if not initial:
        return [
            ValidationError("No initial screen defined. One screen must be marked as initial.", label, "screens")
        ]
    if len(initial) > 1:
        names = ", ".join(s.name for s in initial)
        return [
            ValidationError(
                f"Multiple initial screens defined ({names}). Only one screen can be marked as initial.",
                label,
                "screens",
            )
        ]
    return []


# ------------------------------------------------------------------
# Models
# ------------------------------------------------------------------


def _check_models(models: list[Model]) -> list[Diagnostic]:
    result: list[Diagnostic] = []
    for name in _duplicates(m.name for m in models):
        result.append(ValidationError(f"Duplicate model name '{name}'.", f"model '{name}'"))
    for model in models:
        result.extend(_check_model(model))
    return result


def _check_model(model: Model) -> list[Diagnostic]:
    label = f"model '{model.name}'"
    result: list[Diagnostic] = []
    if not _PASCAL_CASE_RE.match(model.name):
        result.append(ValidationWarning(f"Model name '{model.name}' should be PascalCase.", label))
    if not model.properties:
        result.append(ValidationError(f"Model '{model.name}' must have at least one property.", label, "properties"))
        return result
    if model.get_property("id") is None:
        result.append(ValidationWarning(f"Model '{model.name}' has no 'id' property.", label, "properties"))
    for name in _duplicates(p.name for p in model.properties):
        result.append(ValidationError(f"Duplicate property '{name}' in model '{model.name}'.", label, name))
    for prop in model.properties:
        result.extend(_check_property(model, prop))
    return result


def _check_property(model: Model, prop: Property) -> list[Diagnostic]:
    label = f"model '{model.name}'"
    qualified = f"{model.name}.{prop.name}"
    result: list[Diagnostic] = []
    if prop.type.name not in DATA_TYPE_NAMES:
        result.append(
            ValidationError(f"Property '{qualified}' has unknown data type '{prop.type.name}'.", label, prop.name)
        )
    if prop.enum_values:
        if prop.type.data_type != DataType.STRING:
            result.append(
                ValidationError(
                    f"Property '{qualified}': enum values can only be used with string properties.", label, prop.name
                )
            )
        for value in _duplicates(prop.enum_values):
            result.append(
                ValidationError(f"Property '{qualified}' has duplicate enum value '{value}'.", label, prop.name)
            )
        if prop.default_value is not None and prop.default_value not in prop.enum_values:
            result.append(
                ValidationError(
                    f"Default value '{prop.default_value}' of property '{qualified}' is not one of its enum values.",
                    label,
                    prop.name,
                )
            )
    if prop.required and prop.default_value is not None:
        result.append(
            ValidationWarning(
                f"Property '{qualified}' is required and has a default value; the default is redundant.",
                label,
                prop.name,
            )
        )
    return result


def _check_parameters(params: list[Parameter], label: str, owner: str) -> list[Diagnostic]:
    result: list[Diagnostic] = []
    for name in _duplicates(p.name for p in params):
        result.append(ValidationError(f"Duplicate parameter '{name}' in {owner}.", label, name))
    for param in params:
        if param.type.name not in DATA_TYPE_NAMES:
            result.append(
                ValidationError(
                    f"Parameter '{param.name}' of {owner} has unknown data type '{param.type.name}'.", label, param.name
                )
            )
    return result


# ------------------------------------------------------------------
# Screens
# ------------------------------------------------------------------


def _check_screens(app: Application) -> list[Diagnostic]:
    result: list[Diagnostic] = []
    for name in _duplicates(s.name for s in app.screens):
        result.append(ValidationError(f"Duplicate screen name '{name}'.", f"screen '{name}'"))
    screen_names = {s.name for s in app.screens}
    endpoint_ids = {e.id for e in app.api.endpoints} if app.api is not None else set()
    for screen in app.screens:
        result.extend(_check_screen(screen, screen_names, endpoint_ids))
    return result


def _check_screen(screen: Screen, screen_names: set[str], endpoint_ids: set[str]) -> list[Diagnostic]:
    label = f"screen '{screen.name}'"
    result: list[Diagnostic] = []
    result.extend(_check_parameters(screen.parameters, label, f"screen '{screen.name}'"))
    if screen.layout is None:
        result.append(ValidationError(f"Screen '{screen.name}' has no layout.", label, "layout"))
        return result
    result.extend(_check_layout(screen, screen.layout))
    for action in screen.layout.actions:
        if action.navigate is not None and action.navigate not in screen_names:
            result.append(
                ValidationError(
                    f"Action '{action.event}' of screen '{screen.name}' navigates to undeclared screen "
                    f"'{action.navigate}'.",
                    label,
                    action.event,
                )
            )
        if action.api is not None and action.api not in endpoint_ids:
            result.append(
                ValidationError(
                    f"Action '{action.event}' of screen '{screen.name}' calls undeclared endpoint '{action.api}'.",
                    label,
                    action.event,
                )
            )
    for component in screen.layout.components:
        for target in _navigation_targets(component.attributes):
            if target not in screen_names:
                result.append(
                    ValidationError(
                        f"Component '{component.type}' of screen '{screen.name}' navigates to undeclared screen "
                        f"'{target}'.",
                        label,
                        "components",
                    )
                )
    return result


def _check_layout(screen: Screen, layout: Layout) -> list[Diagnostic]:
    label = f"screen '{screen.name}'"
    result: list[Diagnostic] = []
    if layout.type == LayoutType.FORM:
        if not layout.fields:
            result.append(
                ValidationError(
                    f"Form layout of screen '{screen.name}' must define at least one field.", label, "fields"
                )
            )
        if layout.submit_button is None:
            result.append(
                ValidationWarning(f"Form layout of screen '{screen.name}' has no submit button.", label, "submitButton")
            )
        for name in _duplicates(f.name for f in layout.fields):
            result.append(ValidationError(f"Duplicate form field '{name}' in screen '{screen.name}'.", label, name))
    elif layout.fields:
        result.append(
            ValidationWarning(
                f"Screen '{screen.name}' declares fields on a '{layout.type.value}' layout; fields are only used by "
                "form layouts.",
                label,
                "fields",
            )
        )
    if layout.type == LayoutType.TABS and len(layout.components) < 2:
        result.append(
            ValidationWarning(
                f"Tabs layout of screen '{screen.name}' should define at least two components.", label, "components"
            )
        )
    return result


def _navigation_targets(value: Any) -> list[str]:
    """Collect every ``navigate`` target nested anywhere in generic component attributes."""
    targets: list[str] = []
    if isinstance(value, dict):
        for key, item in value.items():
            if key == "navigate" and isinstance(item, str):
                targets.append(item)
            else:
                targets.extend(_navigation_targets(item))
    elif isinstance(value, list):
        for item in value:
            targets.extend(_navigation_targets(item))
    elif isinstance(value, Component):
        targets.extend(_navigation_targets(value.attributes))
    return targets


# ------------------------------------------------------------------
# Navigation
# ------------------------------------------------------------------


def _check_navigation(navigation: Navigation, app: Application) -> list[Diagnostic]:
    label = "navigation"
    result: list[Diagnostic] = []
    if not navigation.items:
        result.append(ValidationWarning("Navigation defines no items.", label, "items"))
    screen_names = {s.name for s in app.screens}
    for item in navigation.items:
        if item.screen not in screen_names:
            item_label = item.title or item.screen
            result.append(
                ValidationError(
                    f"Navigation item '{item_label}' references undeclared screen '{item.screen}'.", label, "items"
                )
            )
    if navigation.type == NavigationType.TAB and len(navigation.items) > _MAX_TAB_ITEMS:
        result.append(
            ValidationWarning(
                f"Tab navigation has {len(navigation.items)} items; more than {_MAX_TAB_ITEMS} tabs are hard to use.",
                label,
                "items",
            )
        )
    return result


# ------------------------------------------------------------------
# API
# ------------------------------------------------------------------


def _check_api(api: Api, app: Application) -> list[Diagnostic]:
    result: list[Diagnostic] = []
    if not api.endpoints:
        result.append(ValidationWarning("API defines no endpoints.", "api", "endpoints"))
    for endpoint_id in _duplicates(e.id for e in api.endpoints):
        result.append(ValidationError(f"Duplicate endpoint id '{endpoint_id}'.", f"endpoint '{endpoint_id}'", "id"))
    model_names = {m.name for m in app.models}
    for endpoint in api.endpoints:
        result.extend(_check_endpoint(endpoint, model_names))
    return result


def _check_endpoint(endpoint: Endpoint, model_names: set[str]) -> list[Diagnostic]:
    label = f"endpoint '{endpoint.id}'"
    result: list[Diagnostic] = []
    result.extend(_check_parameters(endpoint.parameters, label, f"endpoint '{endpoint.id}'"))

    declared = {p.name for p in endpoint.parameters}
    path_params = endpoint.path_parameters()
    for name in dict.fromkeys(path_params):
        if name not in declared:
            result.append(
                ValidationError(
                    f"Path parameter '{name}' not defined in the parameters of endpoint '{endpoint.id}'.",
                    label,
                    "params",
                )
            )

    if endpoint.method not in HttpMethod.__members__:
        result.append(
            ValidationError(
                f"Endpoint '{endpoint.id}' uses unsupported HTTP method '{endpoint.method}'.", label, "method"
            )
        )
    else:
        method = HttpMethod[endpoint.method]
        if method in (HttpMethod.POST, HttpMethod.PUT) and endpoint.body is None:
            result.append(
                ValidationWarning(f"{method.value} endpoint '{endpoint.id}' should declare a body.", label, "body")
            )
        if method in (HttpMethod.GET, HttpMethod.DELETE) and endpoint.body is not None:
            result.append(
                ValidationWarning(f"{method.value} endpoint '{endpoint.id}' should not declare a body.", label, "body")
            )
        if method in (HttpMethod.PUT, HttpMethod.DELETE) and not path_params:
            result.append(
                ValidationWarning(
                    f"{method.value} endpoint '{endpoint.id}' should identify its resource with a path parameter.",
                    label,
                    "path",
                )
            )

    if endpoint.body is not None and endpoint.body not in model_names:
        result.append(
            ValidationError(
                f"Endpoint '{endpoint.id}' body references undeclared model '{endpoint.body}'.", label, "body"
            )
        )
    if endpoint.response is not None:
        response = endpoint.response.name
        if response not in model_names and response not in DATA_TYPE_NAMES:
            result.append(
                ValidationWarning(
                    f"Endpoint '{endpoint.id}' response type '{response}' is not a declared model.", label, "response"
                )
            )
    return result
