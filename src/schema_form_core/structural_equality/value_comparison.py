"""Deep structural equality of plain values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from schema_form_core.schema_model import DEFAULT_LIMITS, TraversalLimits, descend

from .value_shapes import COMPOSITE_SHAPES, ValueShape, shape_of


def deep_equal(a: Any, b: Any, *, limits: TraversalLimits = DEFAULT_LIMITS) -> bool:
    """Return whether two plain values are structurally equal.

    Sequences compare index by index and must have the same length. Records compare
    over the union of their keys, a missing key reading as None, so `{"a": 1}`
    equals `{"a": 1, "b": None}`. A sequence never equals a record. Inputs must be
    acyclic; cycles surface as `TraversalDepthError`.
    """
    return _deep_equal(a, b, 0, limits)


def _deep_equal(a: Any, b: Any, depth: int, limits: TraversalLimits) -> bool:
    if a is b:
        return True
    shape = shape_of(a)
    if shape is not shape_of(b):
        return False
    if shape not in COMPOSITE_SHAPES:
        return bool(a == b)
    child_depth = descend(depth, limits)
    if shape is ValueShape.SEQUENCE:
        return _sequences_equal(a, b, child_depth, limits)
    return _records_equal(a, b, child_depth, limits)


def _sequences_equal(
    a: Sequence[Any], b: Sequence[Any], depth: int, limits: TraversalLimits
) -> bool:
    if len(a) != len(b):
        return False
    return all(_deep_equal(left, right, depth, limits) for left, right in zip(a, b))


def _records_equal(
    a: Mapping[Any, Any], b: Mapping[Any, Any], depth: int, limits: TraversalLimits
) -> bool:
    keys = {**a, **b}.keys()
    return all(_deep_equal(a.get(key), b.get(key), depth, limits) for key in keys)
