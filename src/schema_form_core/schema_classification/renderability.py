"""Predicates deciding how a generic form renders a schema."""

from __future__ import annotations

import logging
from typing import Any

from schema_form_core.schema_model import (
    COMPOSITE_KINDS,
    DEFAULT_LIMITS,
    PRIMITIVE_KINDS,
    SchemaKind,
    TraversalLimits,
    descend,
    resolve_kind,
)

from .object_shapes import get_choices, object_like_at

logger = logging.getLogger(__name__)


def is_validatable(node: Any, *, limits: TraversalLimits = DEFAULT_LIMITS) -> bool:
    """Return whether the form engine can render `node` without a raw fallback.

    Absent and hidden nodes are skipped, so they count as validatable. Anything
    not recognized as safely renderable is rejected.
    """
    return _is_validatable(node, 0, limits)


def has_title(
    node: Any, is_root: bool = False, *, limits: TraversalLimits = DEFAULT_LIMITS
) -> bool:
    """Return whether `node` already supplies its own label.

    Transparent wrappers (objects without a description, single-choice unions and
    intersections) defer to their first concrete member. A composite root is
    self-describing when its inner shape is validatable.
    """
    return _has_title(node, is_root, 0, limits)


def _is_validatable(node: Any, depth: int, limits: TraversalLimits) -> bool:
    if node is None or node.meta.hidden:
        return True
    kind = resolve_kind(node)
    if kind is SchemaKind.OBJECT:
        child_depth = descend(depth, limits)
        return all(_is_validatable(child, child_depth, limits) for child in node.fields.values())
    if kind is SchemaKind.INTERSECT:
        child_depth = descend(depth, limits)
        return all(object_like_at(child, child_depth, limits) for child in node.children)
    if kind is SchemaKind.UNION:
        choices = get_choices(node)
        if len(choices) == 1:
            return True
        child_depth = descend(depth, limits)
        return all(_is_validatable(choice, child_depth, limits) for choice in choices)
    if kind in COMPOSITE_KINDS:
        return _is_validatable(node.inner, descend(depth, limits), limits)
    if kind is SchemaKind.TUPLE:
        return all(resolve_kind(child) in PRIMITIVE_KINDS for child in node.children)
    if kind is None:
        logger.debug("unknown schema kind %r is not validatable", node.kind)
    return kind in PRIMITIVE_KINDS


def _has_title(node: Any, is_root: bool, depth: int, limits: TraversalLimits) -> bool:
    if node is None:
        return True
    kind = resolve_kind(node)
    if kind is SchemaKind.OBJECT:
        if node.meta.description:
            return True
        first_field = next(iter(node.fields.values()), None)
        if first_field is None:
            return True
        return _has_title(first_field, False, descend(depth, limits), limits)
    if kind is SchemaKind.INTERSECT:
        first_child = node.children[0] if node.children else None
        return _has_title(first_child, False, descend(depth, limits), limits)
    if kind is SchemaKind.UNION:
        choices = get_choices(node)
        if len(choices) != 1:
            return False
        return _has_title(choices[0], False, descend(depth, limits), limits)
    if is_root and kind in COMPOSITE_KINDS:
        return _is_validatable(node.inner, descend(depth, limits), limits)
    return False
