"""Schema tree entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchemaKind(str, Enum):
    """Tag set of schema nodes."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BITSET = "bitset"
    CONST = "const"
    FUNCTION = "function"
    TRANSFORM = "transform"
    IS = "is"
    ARRAY = "array"
    DICT = "dict"
    OBJECT = "object"
    INTERSECT = "intersect"
    UNION = "union"
    TUPLE = "tuple"


PRIMITIVE_KINDS = frozenset(
    {
        SchemaKind.STRING,
        SchemaKind.NUMBER,
        SchemaKind.BOOLEAN,
        SchemaKind.BITSET,
        SchemaKind.CONST,
    }
)
DYNAMIC_KINDS = frozenset({SchemaKind.FUNCTION, SchemaKind.TRANSFORM, SchemaKind.IS})
COMPOSITE_KINDS = frozenset({SchemaKind.ARRAY, SchemaKind.DICT})
COMBINATOR_KINDS = frozenset(
    {SchemaKind.OBJECT, SchemaKind.INTERSECT, SchemaKind.UNION, SchemaKind.TUPLE}
)
KNOWN_KINDS = PRIMITIVE_KINDS | DYNAMIC_KINDS | COMPOSITE_KINDS | COMBINATOR_KINDS


@dataclass(frozen=True)
class SchemaMeta:
    """Side-channel annotations of a schema node."""

    hidden: bool = False
    description: str | None = None
    default: Any = None


@dataclass(frozen=True)
class SchemaNode:
    """One recursive unit of a schema tree.

    `fields` keeps the declaration order of object fields, `children` holds the
    members of intersect/union/tuple nodes and `inner` the wrapped shape of
    array/dict/transform nodes.
    """

    kind: str
    meta: SchemaMeta = field(default_factory=SchemaMeta)
    fields: Mapping[str, SchemaNode] = field(default_factory=dict)
    children: tuple[SchemaNode, ...] = ()
    inner: SchemaNode | None = None

    @staticmethod
    def leaf(kind: str, meta: SchemaMeta | None = None) -> SchemaNode:
        """Build a childless node of a primitive, dynamic or unknown kind."""
        return SchemaNode(kind=kind, meta=meta or SchemaMeta())

    @staticmethod
    def object_of(fields: Mapping[str, SchemaNode], meta: SchemaMeta | None = None) -> SchemaNode:
        return SchemaNode(kind=SchemaKind.OBJECT, meta=meta or SchemaMeta(), fields=dict(fields))

    @staticmethod
    def union_of(*children: SchemaNode, meta: SchemaMeta | None = None) -> SchemaNode:
        return SchemaNode(kind=SchemaKind.UNION, meta=meta or SchemaMeta(), children=children)

    @staticmethod
    def intersect_of(*children: SchemaNode, meta: SchemaMeta | None = None) -> SchemaNode:
        return SchemaNode(kind=SchemaKind.INTERSECT, meta=meta or SchemaMeta(), children=children)

    @staticmethod
    def tuple_of(*children: SchemaNode, meta: SchemaMeta | None = None) -> SchemaNode:
        return SchemaNode(kind=SchemaKind.TUPLE, meta=meta or SchemaMeta(), children=children)

    @staticmethod
    def wrapping(kind: str, inner: SchemaNode, meta: SchemaMeta | None = None) -> SchemaNode:
        """Build an array, dict or transform node around `inner`."""
        return SchemaNode(kind=kind, meta=meta or SchemaMeta(), inner=inner)


def resolve_kind(node: Any) -> SchemaKind | None:
    """Map a node's tag onto `SchemaKind`, or None for an unknown tag."""
    if node is None:
        return None
    try:
        return SchemaKind(node.kind)
    except ValueError:
        return None
