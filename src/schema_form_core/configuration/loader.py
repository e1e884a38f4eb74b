"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_form_core.schema_model import DEFAULT_MAX_DEPTH, TraversalLimits

from .runtime_settings import Configuration


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    traversal = _parse_traversal_section(parsed.get("traversal"))
    return Configuration(path=path, traversal=traversal)


def _parse_traversal_section(value: Any) -> TraversalLimits:
    if value is None:
        return TraversalLimits()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'traversal' must be a mapping.")
    max_depth = _require_positive_int(
        value.get("max_depth", DEFAULT_MAX_DEPTH), "traversal.max_depth"
    )
    return TraversalLimits(max_depth=max_depth)


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
