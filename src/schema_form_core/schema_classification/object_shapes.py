"""Object-likeness and union choice resolution."""

from __future__ import annotations

import logging
from typing import Any

from schema_form_core.schema_model import (
    DEFAULT_LIMITS,
    DYNAMIC_KINDS,
    SchemaKind,
    TraversalLimits,
    descend,
    resolve_kind,
)

logger = logging.getLogger(__name__)


def is_object_like(node: Any, *, limits: TraversalLimits = DEFAULT_LIMITS) -> bool:
    """Return whether `node` renders as a single (possibly merged) object form."""
    return object_like_at(node, 0, limits)


def get_choices(node: Any) -> list[Any]:
    """Return the presentable alternatives of a union node.

    Hidden members are skipped. Dynamic members (function, transform, is) are
    never presented; when nothing else remains, the inner shapes of the
    transform members are offered instead.
    """
    choices: list[Any] = []
    inner: list[Any] = []
    for child in node.children:
        if child.meta.hidden:
            continue
        kind = resolve_kind(child)
        if kind is SchemaKind.TRANSFORM:
            inner.append(child.inner)
        if kind not in DYNAMIC_KINDS:
            choices.append(child)
    return choices if choices else inner


def object_like_at(node: Any, depth: int, limits: TraversalLimits) -> bool:
    """Depth-tracking form of `is_object_like` for walks already in progress."""
    kind = resolve_kind(node)
    if kind is SchemaKind.OBJECT:
        return True
    if kind is SchemaKind.INTERSECT:
        child_depth = descend(depth, limits)
        return all(object_like_at(child, child_depth, limits) for child in node.children)
    if kind is SchemaKind.UNION:
        child_depth = descend(depth, limits)
        return all(object_like_at(choice, child_depth, limits) for choice in get_choices(node))
    if kind is None and node is not None:
        logger.debug("unknown schema kind %r is not object-like", node.kind)
    return False
