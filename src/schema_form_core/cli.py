"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from schema_form_core.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-form-core")
def cli() -> None:
    """Schema form classification utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="show-config")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings file",
)
def show_config(config_path: str) -> None:
    """Validate a settings file and print the effective traversal limits."""
    try:
        configuration = load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"config: {configuration.path.resolve()}")
    click.echo(f"traversal.max_depth: {configuration.traversal.max_depth}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
