# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Direct-text extraction of models, screens and API endpoints.

A best-effort regex pass over the raw source that works independently of the
grammar parser. Blocks that do not fit the expected shape are skipped; the
extractor never raises.

Known limitation: a model body must not contain nested braces. The model
pattern stops at the first closing brace, so a property whose default value is
an object literal truncates the model at that point.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from finapp.model.entities import Api, Endpoint, Layout, LayoutType, Model, Screen
from finapp.model.types import Property, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass
class Extraction:
    """Collections recovered by the direct-text pass.

    Attributes:
        models: Models in source order.
        screens: Screens in source order.
        api: The API configuration, or None when no ``api { .. baseUrl .. }`` block exists.
    """

    models: list[Model] = field(default_factory=list)
    screens: list[Screen] = field(default_factory=list)
    api: Api | None = None


def extract(source: str) -> Extraction:
    """Run all three extractors over *source*."""
    result = Extraction(
        models=extract_models(source),
        screens=extract_screens(source),
        api=extract_api(source),
    )
    logger.info("Extracted %d models and %d screens from direct parsing", len(result.models), len(result.screens))
    return result


def extract_models(source: str) -> list[Model]:
    """Return every ``model NAME { .. }`` block as a Model.

    Each non-empty, non-comment line of the body is read as ``name: type rest``;
    ``rest`` supplies the ``required`` flag, ``default: value`` and
    ``enum: [..]`` features.
    """
    models: list[Model] = []
    for match in _MODEL_RE.finditer(source):
        name = match.group(1)
        logger.debug("Creating model: %s", name)
        properties: list[Property] = []
        for line in match.group(2).split("\n"):
            line = line.strip()
            if not line or line.startswith("//"):
                continue
            prop = _extract_property(line)
            if prop is not None:
                properties.append(prop)
        models.append(Model(name=name, properties=properties))
    return models


def extract_screens(source: str) -> list[Screen]:
    """Return every ``screen NAME { .. }`` block as a Screen with a default stack layout."""
    screens: list[Screen] = []
    for match in _SCREEN_RE.finditer(source):
        name = match.group(1)
        block = match.group(0)
        logger.debug("Creating screen: %s", name)
        title_match = _TITLE_RE.search(block)
        screens.append(
            Screen(
                name=name,
                title=title_match.group(1) if title_match else name,
                is_initial="initial" in block,
                layout=Layout(type=LayoutType.STACK),
            )
        )
    return screens


def extract_api(source: str) -> Api | None:
    """Return the API base URL and all inline endpoints, or None without an api block.

    Endpoints are searched across the whole source, not only inside the api
    block, and the method is taken verbatim.
    """
    api_match = _API_RE.search(source)
    if api_match is None:
        logger.debug("Could not extract API section or baseUrl")
        return None
    base_url = api_match.group(1)
    logger.debug("API base URL: %s", base_url)
    endpoints: list[Endpoint] = []
    for match in _ENDPOINT_RE.finditer(source):
        endpoint_id, path, method = match.group(1), match.group(2), match.group(3)
        logger.debug("Endpoint: %s, path: %s, method: %s", endpoint_id, path, method)
        endpoints.append(Endpoint(id=endpoint_id, path=path, method=method))
    return Api(base_url=base_url, endpoints=endpoints)


# ################
# Implementation
# ################

_MODEL_RE = re.compile(r"\bmodel\s+(\w+)\s*{([^}]*)}")
_SCREEN_RE = re.compile(r"\bscreen\s+(\w+)\s*{([\s\S]*?)}")
_TITLE_RE = re.compile(r'title\s*:\s*"([^"]*)"')
_API_RE = re.compile(r'\bapi\s*{[\s\S]*?baseUrl\s*:\s*"([^"]+)"[\s\S]*?}')
_ENDPOINT_RE = re.compile(r'\bendpoint\s+(\w+)\s*{[\s\S]*?path\s*:\s*"([^"]+)"[\s\S]*?method\s*:\s*(\w+)')

_PROPERTY_RE = re.compile(r"(\w+)\s*:\s*(\w+)(.*)")
_ENUM_RE = re.compile(r"enum\s*:\s*\[(.*?)\]")
_DEFAULT_RE = re.compile(r"default\s*:\s*([^,\s]+)")


def _extract_property(line: str) -> Property | None:
    match = _PROPERTY_RE.match(line)
    if match is None:
        return None
    name, type_name, rest = match.group(1), match.group(2), match.group(3).strip()
    is_array = rest.startswith("[]")
    if is_array:
        rest = rest[2:].strip()

    enum_values: list[str] = []
    enum_match = _ENUM_RE.search(rest)
    if enum_match:
        enum_values = [_unquote(v.strip()) for v in enum_match.group(1).split(",")]
        enum_values = [v for v in enum_values if v]

    default_match = _DEFAULT_RE.search(rest)
    return Property(
        name=name,
        type=TypeRef(name=type_name, is_array=is_array),
        required="required" in rest,
        default_value=_unquote(default_match.group(1)) if default_match else None,
        enum_values=enum_values,
    )


def _unquote(text: str) -> str:
    return text.replace('"', "").replace("'", "")
