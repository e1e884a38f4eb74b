"""Structural equality exports."""

from .value_comparison import deep_equal
from .value_shapes import ValueShape, shape_of

__all__ = ["deep_equal", "ValueShape", "shape_of"]
