"""Schema classification exports."""

from .object_shapes import get_choices, is_object_like
from .renderability import has_title, is_validatable

__all__ = [
    "is_object_like",
    "get_choices",
    "is_validatable",
    "has_title",
]
