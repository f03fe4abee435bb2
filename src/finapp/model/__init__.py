# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Application model for FinApp (models, screens, navigation, API, etc.)."""

from finapp.model.entities import (
    Action,
    Api,
    AppHeader,
    Application,
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
from finapp.model.types import DATA_TYPE_NAMES, DataType, Parameter, Property, TypeRef

__all__ = [
    # Types
    "DataType",
    "DATA_TYPE_NAMES",
    "TypeRef",
    "Property",
    "Parameter",
    # Entities
    "Platform",
    "LayoutType",
    "NavigationType",
    "HttpMethod",
    "Model",
    "Component",
    "FormField",
    "Action",
    "Layout",
    "Screen",
    "NavItem",
    "Navigation",
    "Endpoint",
    "Api",
    "MockData",
    "AppHeader",
    "ParsedDocument",
    "Application",
]
