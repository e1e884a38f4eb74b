"""Module entry point for `python -m schema_form_core`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
