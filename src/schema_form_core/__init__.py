"""Structural queries over schema trees for generic form rendering."""

import logging

from .fallback_resolution import get_fallback, infer_fallback
from .schema_classification import get_choices, has_title, is_object_like, is_validatable
from .schema_model import (
    SchemaKind,
    SchemaMeta,
    SchemaNode,
    SchemaTraversalError,
    TraversalDepthError,
    TraversalLimits,
)
from .structural_equality import deep_equal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SchemaKind",
    "SchemaMeta",
    "SchemaNode",
    "TraversalLimits",
    "SchemaTraversalError",
    "TraversalDepthError",
    "is_object_like",
    "get_choices",
    "is_validatable",
    "has_title",
    "infer_fallback",
    "get_fallback",
    "deep_equal",
]
