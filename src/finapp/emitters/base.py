# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared template environment and helpers for platform code emitters."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from finapp.model.entities import Application, Endpoint, Screen
from finapp.model.types import Property, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class EmitterError(Exception):
    """Raised when code cannot be emitted for an application."""


def render(template: str, **context: Any) -> str:
    """Render a template string with the shared emitter environment.

    Raises:
        EmitterError: If the template is malformed or references an undefined value.
    """
    try:
        return _ENV.from_string(template).render(**context)
    except TemplateError as exc:
        raise EmitterError(f"Template rendering failed: {exc}") from exc


def write_outputs(files: Mapping[str, str], directory: Path) -> list[Path]:
    """Write emitted files below *directory*, creating folders as needed.

    Args:
        files: Mapping of POSIX-style relative paths to file contents.
        directory: Root output directory.

    Returns:
        The written paths in the order of *files*.
    """
    written: list[Path] = []
    for relative, content in files.items():
        target = directory.joinpath(*relative.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", target)
        written.append(target)
    return written


def start_screen(app: Application) -> Screen | None:
    """Return the initial screen, falling back to the first declared screen."""
    initial = app.initial_screen
    if initial is not None:
        return initial
    return app.screens[0] if app.screens else None


def referenced_models(app: Application, endpoints: list[Endpoint]) -> list[str]:
    """Return the sorted model names used as bodies or responses by *endpoints*."""
    model_names = {m.name for m in app.models}
    used: set[str] = set()
    for endpoint in endpoints:
        if endpoint.body is not None:
            used.add(endpoint.body)
        if endpoint.response is not None:
            used.add(endpoint.response.name)
    return sorted(used & model_names)


# ################
# Implementation
# ################

_TS_TYPES = {
    "string": "string",
    "number": "number",
    "decimal": "number",
    "boolean": "boolean",
    "date": "Date",
    "array": "any[]",
    "object": "Record<string, any>",
}

_SWIFT_TYPES = {
    "string": "String",
    "number": "Double",
    "decimal": "Decimal",
    "boolean": "Bool",
    "date": "Date",
    "array": "[AnyCodable]",
    "object": "[String: AnyCodable]",
}

_KOTLIN_TYPES = {
    "string": "String",
    "number": "Double",
    "decimal": "Double",
    "boolean": "Boolean",
    "date": "String",
    "array": "List<Any>",
    "object": "Map<String, Any>",
}

_PATH_PARAM_RE = re.compile(r"\{([^}]+)\}")


def _ts_type(ref: TypeRef) -> str:
    base = _TS_TYPES.get(ref.name, ref.name)
    return f"{base}[]" if ref.is_array else base


def _ts_property_type(prop: Property) -> str:
    if prop.enum_values and not prop.type.is_array:
        return " | ".join(json.dumps(v) for v in prop.enum_values)
    return _ts_type(prop.type)


def _ts_default(prop: Property) -> str:
    """Return a TypeScript literal for the initial value of *prop*."""
    if prop.type.is_array:
        return "[]"
    name = prop.type.name
    if prop.default_value is not None:
        if name in ("number", "decimal", "boolean"):
            return prop.default_value
        if name == "date":
            return f"new Date({json.dumps(prop.default_value)})"
        return json.dumps(prop.default_value)
    if prop.enum_values:
        return json.dumps(prop.enum_values[0])
    return {
        "string": "''",
        "number": "0",
        "decimal": "0",
        "boolean": "false",
        "date": "new Date()",
        "array": "[]",
        "object": "{}",
    }.get(name, "null")


def _swift_type(ref: TypeRef) -> str:
    base = _SWIFT_TYPES.get(ref.name, ref.name)
    return f"[{base}]" if ref.is_array else base


def _kotlin_type(ref: TypeRef) -> str:
    base = _KOTLIN_TYPES.get(ref.name, ref.name)
    return f"List<{base}>" if ref.is_array else base


def _template_path(path: str, prefix: str = "") -> str:
    """Turn ``/accounts/{id}`` into an interpolated path, e.g. ``/accounts/${id}``."""
    return _PATH_PARAM_RE.sub(lambda m: f"{prefix}{{{m.group(1)}}}", path)


def _swift_path(path: str) -> str:
    return _PATH_PARAM_RE.sub(lambda m: f"\\({m.group(1)})", path)


def _lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def _upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


_ENV = Environment(
    loader=BaseLoader(),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)
_ENV.filters.update(
    ts_type=_ts_type,
    ts_property_type=_ts_property_type,
    ts_default=_ts_default,
    ts_path=lambda path: _template_path(path, "$"),
    swift_type=_swift_type,
    swift_path=_swift_path,
    kotlin_type=_kotlin_type,
    kotlin_path=lambda path: _template_path(path, "$"),
    json=json.dumps,
    lower_first=_lower_first,
    upper_first=_upper_first,
)
