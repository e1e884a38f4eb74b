"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_form_core.schema_model import TraversalLimits


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    traversal: TraversalLimits
