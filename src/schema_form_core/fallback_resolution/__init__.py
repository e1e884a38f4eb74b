"""Fallback resolution exports."""

from .fallback_values import get_fallback, infer_fallback

__all__ = ["infer_fallback", "get_fallback"]
