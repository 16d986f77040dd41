"""
Chronoseal CLI

Command-line interface for the timestamped-message action service.

The service never signs or broadcasts: it publishes an action manifest
and compiles requests into unsigned transactions for a wallet to sign.

Commands:
  serve     - Run the HTTP service
  manifest  - Print the validated action manifest
  compile   - Compile a message into a serialized unsigned transaction
  decode    - Decode a serialized unsigned transaction
  info      - Show deployment configuration
"""

from __future__ import annotations

import dataclasses
import json
import sys
from typing import Optional

import click
from eth_abi.exceptions import DecodingError

from .compiler import ExecutionRequest, TransactionCompiler
from .config import ConfigurationError, Settings
from .errors import ActionError, TransactionDecodeError
from .pneuma.abi import decode_call, timestamped_message_abi
from .pneuma.chains import UnknownChainError, chain_by_id
from .pneuma.tx import SERIALIZERS, decode_legacy_transaction, get_serializer


# ============ Constants ============

VERSION = "1.0.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()
    click.echo(
        click.style("        C H R O N O S E A L", fg="bright_white", bold=True)
        + click.style(f"      v{VERSION}", dim=True)
    )
    click.secho("        ─── Timestamped Message Action ───", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigurationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="chronoseal")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Chronoseal: timestamped message action service."""
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Serve ============


@cli.command()
@click.option("--host", envvar="CHRONOSEAL_HOST", default=None, help="Bind address")
@click.option("--port", envvar="CHRONOSEAL_PORT", default=None, type=int, help="Bind port")
@click.option("--log-level", envvar="CHRONOSEAL_LOG_LEVEL", default=None, help="Log level")
def serve(host: Optional[str], port: Optional[int], log_level: Optional[str]) -> None:
    """Run the HTTP service."""
    import uvicorn

    from .api import create_app
    from .logs import setup_logging

    settings = _load_settings()
    level = setup_logging(log_level or settings.log_level)

    app = create_app(settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
        log_level=level.lower() if level not in ("TRACE", "SUCCESS") else "info",
    )


# ============ Manifest ============


@cli.command()
@click.option("--base-url", default="http://localhost:3000", help="Externally visible base URL")
def manifest(base_url: str) -> None:
    """Print the validated action manifest as JSON."""
    from .spec.manifest import describe

    settings = _load_settings()
    try:
        validated = describe(base_url, settings)
    except ActionError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for error in getattr(exc, "errors", []):
            click.echo(f"  - {error}")
        sys.exit(exc.exit_code)

    click.echo(json.dumps(validated.to_dict(), indent=2))


# ============ Compile ============


@cli.command("compile")
@click.argument("message")
@click.option("--amount", default=None, help="Amount (accepted, not encoded)")
@click.option("--timestamp", default=None, type=int, help="Fixed Unix time instead of the clock")
@click.option(
    "--format",
    "tx_format",
    default=None,
    type=click.Choice(sorted(SERIALIZERS)),
    help="Serialized transaction format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show derived timestamp and offset")
def compile_cmd(
    message: str,
    amount: Optional[str],
    timestamp: Optional[int],
    tx_format: Optional[str],
    verbose: bool,
) -> None:
    """Compile MESSAGE into a serialized unsigned transaction."""
    settings = _load_settings()
    if tx_format:
        settings = dataclasses.replace(settings, tx_format=tx_format)

    kwargs = {"serializer": get_serializer(settings.tx_format)}
    if timestamp is not None:
        kwargs["clock"] = lambda: timestamp
    compiler = TransactionCompiler(settings.compiler_config(), **kwargs)

    request = ExecutionRequest(message=message, amount=amount)
    try:
        compiled = compiler.build(request)
        if verbose:
            click.echo(f"  Contract:  {compiled.transaction.to}", err=True)
            click.echo(f"  Chain:     {settings.chain.name} ({settings.chain.id})", err=True)
            click.echo(f"  Timestamp: {compiled.timestamp} (offset {compiled.offset}s)", err=True)
        response = compiler.serialize(compiled)
    except ActionError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    click.echo(json.dumps(response.to_dict(), indent=2))


# ============ Decode ============


@cli.command()
@click.argument("serialized")
def decode(serialized: str) -> None:
    """Decode a serialized unsigned legacy transaction."""
    try:
        tx = decode_legacy_transaction(serialized)
    except TransactionDecodeError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    try:
        chain_label = f"{chain_by_id(tx.chain_id).name} ({tx.chain_id})"
    except UnknownChainError:
        chain_label = str(tx.chain_id)

    click.echo(f"  To:       {tx.to}")
    click.echo(f"  Chain:    {chain_label}")
    click.echo(f"  Type:     {tx.type}")

    try:
        function_name, args = decode_call(timestamped_message_abi(), tx.data)
    except (ValueError, DecodingError):
        click.echo(f"  Data:     0x{tx.data.hex()}")
        return

    click.echo(f"  Function: {function_name}")
    for value in args:
        click.echo(f"    - {value!r}")


# ============ Info ============


@cli.command()
def info() -> None:
    """Show deployment configuration."""
    _print_banner()
    settings = _load_settings()

    click.secho("  Deployment ─────────────────────────────", fg="cyan")
    click.echo()
    rows = [
        ("Contract:", settings.contract_address),
        ("Chain:", f"{settings.chain.name} ({settings.chain.id}, tag {settings.chain_tag})"),
        ("Path:", settings.action_path),
        ("Format:", settings.tx_format),
        ("Bind:", f"{settings.host}:{settings.port}"),
    ]
    for label, value in rows:
        click.echo(
            click.style(f"  {label:<11}", dim=True)
            + click.style(value, fg="bright_white")
        )
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """Chronoseal CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
