# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data types and properties for the FinApp application model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class DataType(Enum):
    """Primitive data types a model property may declare."""

    STRING = "string"
    NUMBER = "number"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"


DATA_TYPE_NAMES: frozenset[str] = frozenset(t.value for t in DataType)


class TypeRef(BaseModel):
    """A property or parameter type as written in the source.

    ``name`` is kept as a plain string so that unknown type names recovered by
    the direct-text extractor survive until validation reports them.
    """

    name: str
    is_array: bool = False

    @property
    def data_type(self) -> DataType | None:
        """Return the matching :class:`DataType`, or None for unknown names."""
        if self.name in DATA_TYPE_NAMES:
            return DataType(self.name)
        return None

    def __str__(self) -> str:
        return f"{self.name}[]" if self.is_array else self.name


class Property(BaseModel):
    """A named, typed property of a data model."""

    name: str
    type: TypeRef
    required: bool = False
    default_value: str | None = None
    enum_values: list[str] = _Field(default_factory=list)


class Parameter(BaseModel):
    """A screen or endpoint parameter."""

    name: str
    type: TypeRef
    required: bool = False
