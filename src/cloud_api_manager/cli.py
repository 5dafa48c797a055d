"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from cloud_api_manager.asset_loading import AssetKind, Operation, ValidationError
from cloud_api_manager.configuration import (
    DEFAULT_PROVIDER,
    DEFAULT_SETTINGS_FILENAME,
    ConfigurationError,
    load_settings,
    write_placeholder_settings,
)
from cloud_api_manager.logging_setup import configure_logging
from cloud_api_manager.provider_clients import PROVIDER_FACTORIES
from cloud_api_manager.reconciliation import (
    CloudApiManagerController,
    OperationFailedError,
    ReconciliationRequest,
)

ENV_PREFIX = "CLOUD_APIMGT"

_LOGGER = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="cloud-api-manager")
@click.option(
    "-v",
    "--verbose",
    "verbosity",
    count=True,
    help="Increase log output on stderr (-v info, -vv debug).",
)
def cli(verbosity: int) -> None:
    """Synchronise local API and policy definitions with a cloud API-management dashboard."""
    configure_logging(verbosity)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_SETTINGS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML settings file with guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="sync")
@click.option(
    "-f",
    "--file-path",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="Path to the JSON asset definition to process",
)
@click.option(
    "-o",
    "--operation",
    required=True,
    type=click.Choice([operation.value for operation in Operation]),
    help="The operation to perform with the submitted file",
)
@click.option(
    "-t",
    "--type",
    "asset_type",
    required=True,
    type=click.Choice([kind.value for kind in AssetKind]),
    help="The type of asset being submitted",
)
@click.option(
    "-p",
    "--provider",
    required=False,
    type=click.Choice(sorted(PROVIDER_FACTORIES)),
    envvar=f"{ENV_PREFIX}_PROVIDER",
    help="The provider of the cloud API-management service [default: tyk]",
)
@click.option(
    "-b",
    "--base-url",
    "base_url",
    required=False,
    envvar=f"{ENV_PREFIX}_BASE_URL",
    help="Base url of the provider dashboard, overriding the provider default",
)
@click.option(
    "-a",
    "--authorisation",
    required=False,
    envvar=f"{ENV_PREFIX}_AUTHORISATION",
    help=f"Dashboard credential, usually supplied through {ENV_PREFIX}_AUTHORISATION",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    envvar=f"{ENV_PREFIX}_CONFIG",
    type=click.Path(path_type=str),
    help="Optional YAML settings file",
)
@click.option(
    "--timeout-seconds",
    "timeout_seconds",
    required=False,
    type=int,
    help="Per-request timeout for provider calls [default: 30]",
)
def sync(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    file_path: str,
    operation: str,
    asset_type: str,
    provider: str | None,
    base_url: str | None,
    authorisation: str | None,
    config_path: str | None,
    timeout_seconds: int | None,
) -> None:
    """Create, update or delete one asset on the dashboard, matched by its name."""
    try:
        settings = load_settings(
            config_path,
            overrides={
                "provider": provider,
                "base_url": base_url,
                "authorisation": authorisation,
                "timeout_seconds": timeout_seconds,
            },
        )
        with CloudApiManagerController(settings) as controller:
            outcome = controller.execute_request(
                ReconciliationRequest(file_path=file_path, operation=operation, kind=asset_type)
            )
    except (ConfigurationError, ValidationError, OperationFailedError) as exc:
        _LOGGER.error(
            "failure: %s for %s asset with provider %s failed",
            operation,
            asset_type,
            provider or DEFAULT_PROVIDER,
        )
        raise CliError(str(exc)) from exc

    _LOGGER.info(
        "success: %s for %s asset %s with provider %s succeeded",
        outcome.operation.value,
        outcome.kind.value,
        outcome.asset_name,
        settings.provider,
    )
    click.echo(json.dumps(outcome.provider_response, indent=2, sort_keys=True))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="cloud-api-manager", standalone_mode=False)
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
