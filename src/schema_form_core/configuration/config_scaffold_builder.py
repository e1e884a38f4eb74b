"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from schema_form_core.schema_model import DEFAULT_MAX_DEPTH

DEFAULT_CONFIG_FILENAME = "schema-form.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = f"""# Settings template for schema-form-core.
# Every key is optional; omitted keys keep their defaults.

traversal:
  # Deepest nesting level walked in a schema tree or compared value.
  # Deeper input raises TraversalDepthError instead of exhausting the stack.
  max_depth: {DEFAULT_MAX_DEPTH}
"""


def build_placeholder_configuration() -> str:
    """Build a YAML settings template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
