# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Debug dump of parsed trees and applications as JSON.

The dump is a debugging aid, not a stable format. Every model object carries a
``$type`` tag with its class name; other keys starting with ``$`` or ``_`` are
internal and stripped. A reference back to an object that is still being
encoded is written as ``"[Circular]"``.
"""

from __future__ import annotations

import dataclasses
import enum
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

# ###############
# Public Interface
# ###############

TYPE_KEY = "$type"
CIRCULAR_MARKER = "[Circular]"


def to_debug_data(value: Any) -> Any:
    """Convert *value* into plain JSON-compatible data for the debug dump."""
    return _encode(value, set())


def dump_debug(value: Any) -> str:
    """Serialize *value* to an indented JSON string."""
    return json.dumps(to_debug_data(value), indent=2)


def write_debug_dump(value: Any, path: Path) -> None:
    """Write the debug dump to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_debug(value), encoding="utf-8")


# ################
# Implementation
# ################


def _is_internal(key: str) -> bool:
    return key != TYPE_KEY and (key.startswith("$") or key.startswith("_"))


def _encode(value: Any, active: set[int]) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if id(value) in active:
        return CIRCULAR_MARKER

    active.add(id(value))
    try:
        if isinstance(value, BaseModel):
            items: dict[str, Any] = {TYPE_KEY: type(value).__name__}
            items.update((name, getattr(value, name)) for name in type(value).model_fields)
            return _encode_mapping(items, active)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            items = {TYPE_KEY: type(value).__name__}
            items.update((f.name, getattr(value, f.name)) for f in dataclasses.fields(value))
            return _encode_mapping(items, active)
        if isinstance(value, dict):
            return _encode_mapping(value, active)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [_encode(item, active) for item in value]
        return str(value)
    finally:
        active.discard(id(value))


def _encode_mapping(mapping: dict[Any, Any], active: set[int]) -> dict[str, Any]:
    return {str(key): _encode(item, active) for key, item in mapping.items() if not _is_internal(str(key))}
