# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Markdown documentation for a FinApp application."""

from __future__ import annotations

from pathlib import Path

from finapp.emitters.base import render
from finapp.model.entities import Application

# ###############
# Public Interface
# ###############

DOCUMENTATION_FILE_NAME = "app-documentation.md"


def render_markdown(app: Application) -> str:
    """Render a Markdown overview of models, screens, navigation and API of *app*."""
    return render(_TEMPLATE, app=app, cell=_cell)


def write_markdown(app: Application, directory: Path) -> Path:
    """Write the documentation of *app* to ``app-documentation.md`` in *directory*."""
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / DOCUMENTATION_FILE_NAME
    target.write_text(render_markdown(app), encoding="utf-8")
    return target


# ################
# Implementation
# ################


def _cell(value: object) -> str:
    """Format a value for a Markdown table cell."""
    if value is None or value is False:
        return ""
    if value is True:
        return "✓"
    return str(value).replace("|", "\\|").replace("\n", " ")


_TEMPLATE = """\
# {{ app.display_name or app.name }}

**App ID:** {{ app.app_id }}
**Version:** {{ app.version }}
**Platforms:** {{ app.platforms | map(attribute='value') | join(', ') }}

## Data Models

{% for model in app.models %}
### {{ model.name }}

| Property | Type | Required | Default | Notes |
|----------|------|----------|---------|-------|
{% for prop in model.properties %}
| {{ cell(prop.name) }} | {{ cell(prop.type) }} | {{ cell(prop.required) }} | {{ cell(prop.default_value) }} | {{ cell('Enum: [' ~ prop.enum_values | join(', ') ~ ']' if prop.enum_values else None) }} |
{% endfor %}

{% else %}
No models defined.

{% endfor %}
## Screens

{% for screen in app.screens %}
### {{ screen.name }}{{ ' (Initial Screen)' if screen.is_initial else '' }}

**Title:** {{ screen.title }}
**Layout Type:** {{ screen.layout.type.value if screen.layout else 'none' }}

{% if screen.parameters %}
#### Parameters

| Name | Type | Required |
|------|------|----------|
{% for param in screen.parameters %}
| {{ cell(param.name) }} | {{ cell(param.type) }} | {{ cell(param.required) }} |
{% endfor %}

{% endif %}
{% else %}
No screens defined.

{% endfor %}
## Navigation

{% if app.navigation %}
**Type:** {{ app.navigation.type.value }}

{% for item in app.navigation.items %}
- {{ item.title or item.screen }} → {{ item.screen }}{{ ' (icon: ' ~ item.icon ~ ')' if item.icon else '' }}
{% endfor %}

{% else %}
No navigation defined.

{% endif %}
## API Endpoints

{% if app.api and app.api.endpoints %}
**Base URL:** {{ app.api.base_url }}
{% if app.api.mock %}
**Mock data:** enabled
{% endif %}

{% for endpoint in app.api.endpoints %}
### {{ endpoint.id }}

**Method:** {{ endpoint.method }}
**Path:** {{ endpoint.path }}

{% if endpoint.parameters %}
#### Parameters

| Name | Type | Required |
|------|------|----------|
{% for param in endpoint.parameters %}
| {{ cell(param.name) }} | {{ cell(param.type) }} | {{ cell(param.required) }} |
{% endfor %}

{% endif %}
{% if endpoint.body %}
#### Request Body

Model: {{ endpoint.body }}

{% endif %}
{% if endpoint.response %}
#### Response

Type: {{ endpoint.response }}

{% endif %}
{% endfor %}
{% else %}
No API endpoints defined.
{% endif %}
"""
