"""Nesting depth guard shared by every recursive walk."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 128


class SchemaTraversalError(Exception):
    """Raised when a schema tree or value cannot be traversed."""


class TraversalDepthError(SchemaTraversalError):
    """Raised when nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Nesting exceeds the maximum traversal depth of {max_depth}.")
        self.max_depth = max_depth


@dataclass(frozen=True)
class TraversalLimits:
    """Bounds applied to recursive traversals."""

    max_depth: int = DEFAULT_MAX_DEPTH


DEFAULT_LIMITS = TraversalLimits()


def descend(depth: int, limits: TraversalLimits) -> int:
    """Return the depth of the next nesting level, enforcing `limits`."""
    next_depth = depth + 1
    if next_depth > limits.max_depth:
        logger.debug("traversal depth %d exceeds limit %d", next_depth, limits.max_depth)
        raise TraversalDepthError(limits.max_depth)
    return next_depth
