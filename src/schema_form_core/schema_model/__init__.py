"""Schema model exports."""

from .schema_nodes import (
    COMBINATOR_KINDS,
    COMPOSITE_KINDS,
    DYNAMIC_KINDS,
    KNOWN_KINDS,
    PRIMITIVE_KINDS,
    SchemaKind,
    SchemaMeta,
    SchemaNode,
    resolve_kind,
)
from .traversal_depth import (
    DEFAULT_LIMITS,
    DEFAULT_MAX_DEPTH,
    SchemaTraversalError,
    TraversalDepthError,
    TraversalLimits,
    descend,
)

__all__ = [
    "SchemaKind",
    "SchemaMeta",
    "SchemaNode",
    "PRIMITIVE_KINDS",
    "DYNAMIC_KINDS",
    "COMPOSITE_KINDS",
    "COMBINATOR_KINDS",
    "KNOWN_KINDS",
    "resolve_kind",
    "TraversalLimits",
    "DEFAULT_LIMITS",
    "DEFAULT_MAX_DEPTH",
    "SchemaTraversalError",
    "TraversalDepthError",
    "descend",
]
