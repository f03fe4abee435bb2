# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""React/TypeScript emitter for the web platform."""

from __future__ import annotations

from typing import Any

from finapp.emitters.base import referenced_models, render, start_screen
from finapp.model.entities import Application, Endpoint, HttpMethod, Layout, Screen

# ###############
# Public Interface
# ###############


def emit_web(app: Application) -> dict[str, str]:
    """Render the web sources of *app* as a mapping of relative path to text."""
    files: dict[str, str] = {}
    for model in app.models:
        files[f"src/models/{model.name}.ts"] = render(_MODEL_TEMPLATE, model=model)
    files["src/models/index.ts"] = render(_MODEL_INDEX_TEMPLATE, models=app.models)
    for screen in app.screens:
        files[f"src/screens/{screen.name}Screen.tsx"] = render(_SCREEN_TEMPLATE, **_screen_context(screen))
    if app.api is not None:
        files["src/api/client.ts"] = render(
            _API_TEMPLATE,
            api=app.api,
            imports=referenced_models(app, app.api.endpoints),
            endpoints=[_endpoint_context(e) for e in app.api.endpoints],
        )
    files["src/App.tsx"] = render(_APP_TEMPLATE, app=app, start=start_screen(app))
    return files


# ################
# Implementation
# ################

_INPUT_TYPES = frozenset({"password", "email", "number", "date", "tel"})


def _screen_context(screen: Screen) -> dict[str, Any]:
    layout = screen.layout or Layout()
    return {
        "screen": screen,
        "layout": layout,
        "uses_navigation": any(a.navigate for a in layout.actions),
        "input_types": _INPUT_TYPES,
    }


def _endpoint_context(endpoint: Endpoint) -> dict[str, Any]:
    path_params = endpoint.path_parameters()
    declared = {p.name: p for p in endpoint.parameters}
    arguments = [f"{name}: {_param_type(declared.get(name))}" for name in path_params]
    sends_body = endpoint.method in (HttpMethod.POST.value, HttpMethod.PUT.value) or endpoint.body is not None
    if sends_body:
        arguments.append(f"body: {endpoint.body or 'unknown'}")
    else:
        arguments.append("query?: Record<string, unknown>")
    return {
        "endpoint": endpoint,
        "arguments": ", ".join(arguments),
        "sends_body": sends_body,
    }


def _param_type(param: Any) -> str:
    if param is None:
        return "string"
    return "number" if param.type.name in ("number", "decimal") else "string"


_MODEL_TEMPLATE = """\
/**
 * Model: {{ model.name }}
 * Generated by FinApp - do not modify manually
 */

export interface {{ model.name }} {
{% for prop in model.properties %}
  {{ prop.name }}{{ '' if prop.required else '?' }}: {{ prop | ts_property_type }};
{% endfor %}
}

export const empty{{ model.name }}: {{ model.name }} = {
{% for prop in model.properties %}
  {{ prop.name }}: {{ prop | ts_default }},
{% endfor %}
};
"""

_MODEL_INDEX_TEMPLATE = """\
/**
 * Models index - exports all model types
 * Generated by FinApp - do not modify manually
 */

{% for model in models %}
export type { {{ model.name }} } from './{{ model.name }}';
export { empty{{ model.name }} } from './{{ model.name }}';
{% endfor %}
"""

_SCREEN_TEMPLATE = """\
import React from 'react';
import { Box, Button, Container, TextField, Typography } from '@mui/material';
{% if uses_navigation %}
import { useNavigate } from 'react-router-dom';
{% endif %}

/**
 * {{ screen.name }}Screen ({{ layout.type.value }} layout)
 * Generated by FinApp - do not modify manually
 */
export const {{ screen.name }}Screen: React.FC = () => {
{% if uses_navigation %}
  const navigate = useNavigate();
{% endif %}
{% for action in layout.actions %}
  const {{ action.event }} = () => {
{% if action.api %}
    // calls endpoint {{ action.api }}
{% endif %}
{% if action.navigate %}
    navigate('/{{ action.navigate | lower }}');
{% endif %}
  };
{% endfor %}

  return (
    <Container maxWidth="md">
      <Box my={4}>
        <Typography variant="h4" component="h1" gutterBottom>
          {{ screen.title }}
        </Typography>
{% for component in layout.components %}
        <Box data-component="{{ component.type }}" />
{% endfor %}
{% for field in layout.fields %}
        <TextField
          name="{{ field.name }}"
          label="{{ field.label or field.name }}"
{% if field.type in input_types %}
          type="{{ field.type }}"
{% endif %}
{% if field.required %}
          required
{% endif %}
          fullWidth
          margin="normal"
        />
{% endfor %}
{% if layout.submit_button %}
        <Button type="submit" variant="contained">{{ layout.submit_button }}</Button>
{% endif %}
{% if layout.cancel_button %}
        <Button variant="text">{{ layout.cancel_button }}</Button>
{% endif %}
      </Box>
    </Container>
  );
};

export default {{ screen.name }}Screen;
"""

_API_TEMPLATE = """\
/**
 * API client
 * Generated by FinApp - do not modify manually
 */
import axios, { AxiosRequestConfig } from 'axios';
{% if imports %}
import type { {{ imports | join(', ') }} } from '../models';
{% endif %}

export const API_BASE_URL = {{ api.base_url | json }};
export const USE_MOCK_DATA = {{ 'true' if api.mock else 'false' }};

export const apiClient = axios.create({
  baseURL: API_BASE_URL,
  headers: { 'Content-Type': 'application/json' },
});

async function apiRequest<T>(config: AxiosRequestConfig): Promise<T> {
  const response = await apiClient.request<T>(config);
  return response.data;
}
{% for item in endpoints %}

/**
 * {{ item.endpoint.method }} {{ item.endpoint.path }}
 */
export async function {{ item.endpoint.id }}({{ item.arguments }}): Promise<{{ item.endpoint.response | ts_type if item.endpoint.response else 'void' }}> {
  return apiRequest({
    url: `{{ item.endpoint.path | ts_path }}`,
    method: '{{ item.endpoint.method | lower }}',
{% if item.sends_body %}
    data: body,
{% else %}
    params: query,
{% endif %}
  });
}
{% endfor %}
"""

_APP_TEMPLATE = """\
import React from 'react';
import { BrowserRouter as Router, Navigate, Route, Routes } from 'react-router-dom';
{% for screen in app.screens %}
import { {{ screen.name }}Screen } from './screens/{{ screen.name }}Screen';
{% endfor %}

/**
 * {{ app.display_name or app.name }}{{ ' ' ~ app.version if app.version else '' }}
 * Generated by FinApp - do not modify manually
 */
function App() {
  return (
    <Router>
      <Routes>
{% for screen in app.screens %}
        <Route path="/{{ screen.name | lower }}" element={<{{ screen.name }}Screen />} />
{% endfor %}
{% if start %}
        <Route path="/" element={<Navigate to="/{{ start.name | lower }}" />} />
{% endif %}
      </Routes>
    </Router>
  );
}

export default App;
"""
