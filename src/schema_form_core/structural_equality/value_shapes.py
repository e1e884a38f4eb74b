"""Variant classification of plain values."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueShape(str, Enum):
    """Shape of a plain value as seen by structural comparison."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    RECORD = "record"
    SCALAR = "scalar"


COMPOSITE_SHAPES = frozenset({ValueShape.SEQUENCE, ValueShape.RECORD})


def shape_of(value: Any) -> ValueShape:
    """Classify `value`; bool is checked before numbers since it subclasses int."""
    if value is None:
        return ValueShape.NULL
    if isinstance(value, bool):
        return ValueShape.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueShape.NUMBER
    if isinstance(value, str):
        return ValueShape.STRING
    if isinstance(value, (list, tuple)):
        return ValueShape.SEQUENCE
    if isinstance(value, Mapping):
        return ValueShape.RECORD
    return ValueShape.SCALAR
