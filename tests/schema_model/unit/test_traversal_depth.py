"""Traversal depth guard tests."""

from __future__ import annotations

import pytest
from schema_form_core.schema_classification import has_title, is_object_like, is_validatable
from schema_form_core.schema_model import (
    DEFAULT_LIMITS,
    SchemaKind,
    SchemaNode,
    SchemaTraversalError,
    TraversalDepthError,
    TraversalLimits,
    descend,
)


def _nested_arrays(levels: int) -> SchemaNode:
    node = SchemaNode.leaf(SchemaKind.STRING)
    for _ in range(levels):
        node = SchemaNode.wrapping(SchemaKind.ARRAY, node)
    return node


def _nested_intersections(levels: int) -> SchemaNode:
    node = SchemaNode.object_of({})
    for _ in range(levels):
        node = SchemaNode.intersect_of(node)
    return node


def test_descend_enforces_the_limit() -> None:
    limits = TraversalLimits(max_depth=2)

    assert descend(0, limits) == 1
    assert descend(1, limits) == 2
    with pytest.raises(TraversalDepthError) as excinfo:
        descend(2, limits)

    assert excinfo.value.max_depth == 2
    assert isinstance(excinfo.value, SchemaTraversalError)


def test_tree_at_the_limit_is_accepted() -> None:
    limits = TraversalLimits(max_depth=2)

    assert is_validatable(_nested_arrays(2), limits=limits) is True
    assert is_object_like(_nested_intersections(2), limits=limits) is True


def test_tree_beyond_the_limit_raises() -> None:
    limits = TraversalLimits(max_depth=2)

    with pytest.raises(TraversalDepthError):
        is_validatable(_nested_arrays(3), limits=limits)
    with pytest.raises(TraversalDepthError):
        is_object_like(_nested_intersections(3), limits=limits)
    with pytest.raises(TraversalDepthError):
        has_title(_nested_intersections(3), limits=limits)


def test_default_limits_handle_deep_but_reasonable_trees() -> None:
    assert DEFAULT_LIMITS.max_depth == 128
    assert is_validatable(_nested_arrays(100)) is True


def test_default_limit_accepts_128_levels_and_rejects_129() -> None:
    assert is_validatable(_nested_arrays(128)) is True
    with pytest.raises(TraversalDepthError) as excinfo:
        is_validatable(_nested_arrays(129))

    assert excinfo.value.max_depth == 128


def test_raised_limit_accepts_deeper_trees() -> None:
    assert is_validatable(_nested_arrays(129), limits=TraversalLimits(max_depth=129)) is True
