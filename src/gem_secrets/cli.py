#!/usr/bin/env python
"""Command-line interface for gem-secrets.

This module provides the CLI entry points, handling command-line argument
parsing and turning generator results into files on disk. Every command is
available under the ``gem-secrets`` group and as a standalone script.
"""

import sys
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import click
from click.core import ParameterSource
from icecream import ic

from gem_secrets import __version__, console
from gem_secrets.exceptions import GemSecretsError, MissingFieldError, NoInputError
from gem_secrets.generators import (
    DEFAULT_METRICS_CONFIG,
    DEFAULT_OVERRIDES_CONFIG,
    SAMPLE_OVERRIDES_JSON,
    RenderedOutput,
    generate_admin_secret,
    generate_bucket_secret,
    generate_license_secret,
    generate_metrics_secrets,
    generate_overrides,
)
from gem_secrets.manifests.writing import write_manifests
from gem_secrets.prompts import prompt_field


def _debug_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> bool:
    """Enable icecream output for --debug, disable it for top-level runs without it."""
    if value:
        ic.enable()
    elif ctx.parent is None:
        ic.disable()
    return value


debug_option = click.option(
    "--debug",
    is_flag=True,
    expose_value=False,
    callback=_debug_callback,
    help="print debug information",
)

output_dir_option = click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="directory to write manifests to",
)


@contextmanager
def _handle_errors() -> Generator[None, None, None]:
    """Convert gem-secrets errors into click errors.

    Raises:
        click.UsageError: If a required field is missing.
        click.ClickException: For any other gem-secrets error.

    """
    try:
        yield
    except MissingFieldError as e:
        raise click.UsageError(str(e), ctx=click.get_current_context()) from None
    except GemSecretsError as e:
        raise click.ClickException(str(e)) from None


def _report_config(ctx: click.Context, config: str) -> None:
    """Tell the user which config file is used.

    A missing default config file is only noted; a missing file passed
    explicitly on the command line gets a warning.
    """
    if Path(config).is_file():
        console.info(f"Using config file {console.highlight(config)}")
    elif ctx.get_parameter_source("config") == ParameterSource.COMMANDLINE:
        console.warning(f"Config file {console.highlight(config)} not found, ignoring it")
    else:
        console.step(f"No {console.highlight(config)} found, using flags and prompts")


def write_and_report(outputs: list[RenderedOutput]) -> None:
    """Write rendered manifests and print a per-file summary.

    Args:
        outputs: Pairs of (destination path, rendered YAML).

    Exits with status 1 if any file could not be written.

    """
    console.action(f"Writing {len(outputs)} manifest(s)")
    results = write_manifests(outputs)
    failed = [result for result in results if not result.ok]

    console.newline()
    console.summary_panel(
        "Manifests Written" if not failed else "Some Manifests Failed",
        {str(result.path): "written" if result.ok else "failed" for result in results},
        failed=bool(failed),
    )

    if failed:
        sys.exit(1)


@click.group(
    help="Generate Kubernetes secrets and Helm overrides for Grafana Enterprise Metrics",
    invoke_without_command=True,
)
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@debug_option
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Process group-level options.

    Args:
        ctx: Click context.
        version: Print version and exit.

    """
    if version:
        click.echo(__version__)
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("admin-secret", help="Create an admin credentials secret, prompting for missing values")
@click.option("--namespace", "-n", required=False, help="Kubernetes namespace")
@click.option("--name", required=False, help="Kubernetes secret name")
@click.option("--admin-user", "--adminUser", "admin_user", required=False, help="admin username")
@click.option("--admin-password", "--adminPassword", "admin_password", required=False, help="admin password")
@output_dir_option
@debug_option
def admin_secret(
    namespace: str | None,
    name: str | None,
    admin_user: str | None,
    admin_password: str | None,
    output_dir: Path,
) -> None:
    """Create an admin secret named ``<name>.yaml``."""
    with _handle_errors():
        outputs = generate_admin_secret(
            {
                "namespace": namespace,
                "name": name,
                "adminUser": admin_user,
                "adminPassword": admin_password,
            },
            output_dir=output_dir,
            prompt=prompt_field,
        )
    write_and_report(outputs)


@cli.command("license-secret", help="Create a secret from a license.jwt file")
@click.option("--namespace", "-n", required=False, help="Kubernetes namespace (required)")
@click.option("--name", required=False, help="Kubernetes secret name (required)")
@click.option("--file", "-f", "license_file", required=False, help="Path to license.jwt file (required)")
@output_dir_option
@debug_option
def license_secret(
    namespace: str | None,
    name: str | None,
    license_file: str | None,
    output_dir: Path,
) -> None:
    """Create a license secret without prompting."""
    with _handle_errors():
        outputs = generate_license_secret(
            {"namespace": namespace, "name": name, "file": license_file},
            output_dir=output_dir,
        )
    write_and_report(outputs)


@cli.command("bucket-secret", help="Create the mimir-bucket-secret from an AWS key pair")
@click.option("--access-key-id", required=False, help="AWS_ACCESS_KEY_ID (required)")
@click.option("--secret-access-key", required=False, help="AWS_SECRET_ACCESS_KEY (required)")
@output_dir_option
@debug_option
def bucket_secret(access_key_id: str | None, secret_access_key: str | None, output_dir: Path) -> None:
    """Create the bucket secret without prompting."""
    with _handle_errors():
        outputs = generate_bucket_secret(
            {"AWS_ACCESS_KEY_ID": access_key_id, "AWS_SECRET_ACCESS_KEY": secret_access_key},
            output_dir=output_dir,
        )
    write_and_report(outputs)


@cli.command("metrics-secrets", help="Create the admin, license and bucket secrets for GEM")
@click.option("--config", "-c", default=DEFAULT_METRICS_CONFIG, show_default=True, help="JSON config file")
@click.option("--admin-user", "--adminUser", "admin_user", required=False, help="admin username")
@click.option("--admin-password", "--adminPassword", "admin_password", required=False, help="admin password")
@click.option("--aws-key", "--awsKey", "aws_key", required=False, help="AWS access key")
@click.option("--aws-secret", "--awsSecret", "aws_secret", required=False, help="AWS secret access key")
@click.option("--license-file", "--licensefile", "license_file", required=False, help="path to license.jwt file")
@click.option("--namespace", "-n", required=False, help="Kubernetes namespace for all secrets")
@output_dir_option
@debug_option
@click.pass_context
def metrics_secrets(
    ctx: click.Context,
    config: str,
    admin_user: str | None,
    admin_password: str | None,
    aws_key: str | None,
    aws_secret: str | None,
    license_file: str | None,
    namespace: str | None,
    output_dir: Path,
) -> None:
    """Create three secrets, prompting for values no other source supplies."""
    _report_config(ctx, config)

    with _handle_errors():
        outputs = generate_metrics_secrets(
            {
                "adminUser": admin_user,
                "adminPassword": admin_password,
                "AWS_ACCESS_KEY": aws_key,
                "AWS_SECRET_ACCESS_KEY": aws_secret,
            },
            config_path=config,
            output_dir=output_dir,
            prompt=prompt_field,
            license_file=license_file,
            namespace=namespace,
        )
    write_and_report(outputs)


@cli.command("gem-overrides", help="Generate Helm overrides YAML for Grafana Enterprise Metrics")
@click.option("--config", "-c", default=DEFAULT_OVERRIDES_CONFIG, show_default=True, help="JSON config file")
@click.option("--admin-bucket", required=False, help="Admin S3 bucket")
@click.option("--alertmanager-bucket", required=False, help="Alertmanager S3 bucket (defaults to the ruler bucket)")
@click.option("--ruler-bucket", required=False, help="Ruler S3 bucket")
@click.option("--blocks-bucket", required=False, help="Blocks S3 bucket")
@click.option("--access-key", required=False, help="AWS access key")
@click.option("--secret-key", required=False, help="AWS secret key")
@click.option("--endpoint", required=False, help="S3 endpoint")
@click.option("--secret-version", default="0", show_default=True, help="bucket secret version pod annotation")
@output_dir_option
@debug_option
@click.pass_context
def gem_overrides(
    ctx: click.Context,
    config: str,
    admin_bucket: str | None,
    alertmanager_bucket: str | None,
    ruler_bucket: str | None,
    blocks_bucket: str | None,
    access_key: str | None,
    secret_key: str | None,
    endpoint: str | None,
    secret_version: str,
    output_dir: Path,
) -> None:
    """Generate the overrides file from flags and the config file."""
    _report_config(ctx, config)

    with _handle_errors():
        try:
            outputs = generate_overrides(
                {
                    "admin_bucket": admin_bucket,
                    "alertmanager_bucket": alertmanager_bucket,
                    "ruler_bucket": ruler_bucket,
                    "blocks_bucket": blocks_bucket,
                    "access_key": access_key,
                    "secret_key": secret_key,
                    "endpoint": endpoint,
                },
                config_path=config,
                output_dir=output_dir,
                secret_version=secret_version,
            )
        except NoInputError as e:
            console.error(str(e))
            click.echo(ctx.get_help())
            click.echo(SAMPLE_OVERRIDES_JSON)
            ctx.exit(1)
    write_and_report(outputs)


if __name__ == "__main__":
    cli()
