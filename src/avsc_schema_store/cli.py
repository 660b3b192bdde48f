"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from avsc_schema_store.configuration import (
    DEFAULT_CONFIG_FILENAME,
    LOG_LEVELS,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from avsc_schema_store.schema_resolution import SchemaStore, SchemaStoreError

_PACKAGE_LOGGER_NAME = "avsc_schema_store"
_STORE_LOGGER_NAME = "avsc_schema_store.schema_store"


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(_PACKAGE_LOGGER_NAME).setLevel(level)


def _open_store(config_path: str, log_level: str | None) -> SchemaStore:
    configuration = load_configuration(config_path)
    _configure_logging((log_level or configuration.logging.level).upper())
    return SchemaStore(
        path=configuration.schemas.path,
        logger=logging.getLogger(_STORE_LOGGER_NAME),
    )


_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema store configuration file",
)
_log_level_option = click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override the configured diagnostics level",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="avsc-schema-store")
def cli() -> None:
    """Resolve Avro schemas stored one type per .avsc file."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.argument("name")
@click.option(
    "--namespace",
    "namespace",
    required=False,
    help="Namespace applied when NAME is not fully qualified",
)
@_config_option
@_log_level_option
def resolve(name: str, namespace: str | None, config_path: str, log_level: str | None) -> None:
    """Resolve one schema, loading its dependencies, and print its definition."""
    try:
        store = _open_store(config_path, log_level)
        schema = store.find(name, namespace)
    except (ConfigurationError, SchemaStoreError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(schema.definition, indent=2))


@cli.command(name="load-all")
@_config_option
@_log_level_option
def load_all(config_path: str, log_level: str | None) -> None:
    """Load every schema file and print the names of all cached schemas."""
    try:
        store = _open_store(config_path, log_level)
        store.load_schemas()
    except (ConfigurationError, SchemaStoreError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    for fullname in store.known_names():
        click.echo(fullname)


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
