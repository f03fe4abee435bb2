# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI for browsing a compiled FinApp application."""

import dash
from dash import html

from finapp.model.entities import Application, Endpoint, Model, Screen

# ###############
# Public Interface
# ###############

TITLE = "FinApp Application Viewer"


def create_app(application: Application) -> dash.Dash:
    """Create and configure the FinApp web UI for *application*."""
    app = dash.Dash(
        __name__,
        title=TITLE,
    )
    app.layout = _build_layout(application)
    return app


# ################
# Implementation
# ################

_MUTED = {"color": "#666"}


def _build_layout(application: Application) -> html.Div:
    """Build the application layout."""
    header = f"{application.display_name or application.name}"
    if application.version:
        header += f" {application.version}"
    return html.Div(
        [
            html.H1(TITLE),
            html.H2(header),
            html.P(", ".join(p.value for p in application.platforms) or "No platforms declared.", style=_MUTED),
            html.Hr(),
            _section("Models", [_model_card(m) for m in application.models], "No models defined."),
            _section("Screens", [_screen_card(s) for s in application.screens], "No screens defined."),
            _navigation_section(application),
            _api_section(application),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _section(title: str, children: list, empty_text: str) -> html.Section:
    return html.Section([html.H3(title), *(children or [html.P(empty_text, style=_MUTED)])])


def _model_card(model: Model) -> html.Div:
    rows = [
        html.Tr(
            [
                html.Td(prop.name),
                html.Td(str(prop.type)),
                html.Td("required" if prop.required else ""),
                html.Td(", ".join(prop.enum_values)),
            ]
        )
        for prop in model.properties
    ]
    return html.Div([html.H4(model.name), html.Table(rows)], id=f"model-{model.name}")


def _screen_card(screen: Screen) -> html.Div:
    layout = screen.layout.type.value if screen.layout is not None else "no layout"
    details = f"{screen.title} ({layout})"
    if screen.is_initial:
        details += " - initial"
    return html.Div([html.H4(screen.name), html.P(details, style=_MUTED)], id=f"screen-{screen.name}")


def _navigation_section(application: Application) -> html.Section:
    navigation = application.navigation
    if navigation is None:
        return _section("Navigation", [], "No navigation defined.")
    items = [html.Li(f"{item.title or item.screen} → {item.screen}") for item in navigation.items]
    return _section("Navigation", [html.P(f"Type: {navigation.type.value}"), html.Ul(items)], "")


def _api_section(application: Application) -> html.Section:
    api = application.api
    if api is None:
        return _section("API", [], "No API defined.")
    return _section(
        "API",
        [html.P(f"Base URL: {api.base_url}"), html.Ul([_endpoint_item(e) for e in api.endpoints])],
        "",
    )


def _endpoint_item(endpoint: Endpoint) -> html.Li:
    return html.Li(html.Code(f"{endpoint.method} {endpoint.path}"), title=endpoint.id)
