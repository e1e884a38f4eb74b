"""Initial form value resolution."""

from __future__ import annotations

import copy
from typing import Any

from schema_form_core.schema_classification import get_choices
from schema_form_core.schema_model import SchemaKind, resolve_kind

_EMPTY_RECORD_KINDS = frozenset({SchemaKind.DICT, SchemaKind.OBJECT, SchemaKind.INTERSECT})


def infer_fallback(node: Any) -> Any:
    """Return the structural empty value of `node`, or None when none is canonical.

    Arrays, tuples and unions have no single correct empty shape and infer nothing.
    """
    kind = resolve_kind(node)
    if kind is SchemaKind.STRING:
        return ""
    if kind is SchemaKind.NUMBER:
        return 0
    if kind is SchemaKind.BOOLEAN:
        return False
    if kind in _EMPTY_RECORD_KINDS:
        return {}
    return None


def get_fallback(node: Any, required: bool = False) -> Any:
    """Return the initial value of a form field bound to `node`.

    An authored default always wins and is returned as an independent copy, since
    callers mutate it as live form state. Without one, a value is inferred only for
    required fields. Degenerate unions with a single choice get no fallback.
    """
    if node is None:
        return None
    if resolve_kind(node) is SchemaKind.UNION and len(get_choices(node)) == 1:
        return None
    default = node.meta.default
    if default is not None:
        return copy.deepcopy(default)
    return infer_fallback(node) if required else None
