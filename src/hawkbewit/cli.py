"""hawkbewit CLI - Generate, validate and inspect bewits."""

import sys
from datetime import datetime, timedelta, timezone

import click
from rich.console import Console
from rich.table import Table

from hawkbewit.bewit import (
    Algorithm,
    AuthenticationError,
    Bad,
    Expired,
    Good,
    HawkBewit,
    add_bewit,
)
from hawkbewit.bewit.codec import decode_bewit
from hawkbewit.common.errors import CredentialsError, InvalidBewitError, UnsupportedSchemeError
from hawkbewit.common.logging import setup_logging
from hawkbewit.common.settings import Settings

console = Console()
err_console = Console(stderr=True)


def _credential_options(f):
    f = click.option(
        "--algorithm",
        type=click.Choice([a.value for a in Algorithm]),
        default=None,
        help="HMAC algorithm (default: HAWKBEWIT_ALGORITHM or SHA256)",
    )(f)
    f = click.option("--key", default=None, help="Shared secret (default: HAWKBEWIT_KEY)")(f)
    f = click.option("--key-id", default=None, help="Key identifier (default: HAWKBEWIT_KEY_ID)")(f)
    return f


@click.group()
@click.option("--log-level", default=None, help="Log level (default: HAWKBEWIT_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """hawkbewit CLI - Signed, time-limited URLs."""
    settings = Settings()
    setup_logging(log_level or settings.log_level, json_output=settings.log_json)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command("generate")
@click.argument("url")
@_credential_options
@click.option("--ttl", type=int, default=None, help="Lifetime in seconds (default: HAWKBEWIT_DEFAULT_TTL_SECONDS)")
@click.option("--expiry", type=int, default=None, help="Absolute expiry in seconds since the epoch")
@click.option("--append", is_flag=True, help="Print the URL with the bewit added as a query parameter")
@click.pass_context
def generate(
    ctx: click.Context,
    url: str,
    key_id: str | None,
    key: str | None,
    algorithm: str | None,
    ttl: int | None,
    expiry: int | None,
    append: bool,
) -> None:
    """Generate a bewit for URL."""
    settings: Settings = ctx.obj["settings"]
    try:
        credentials = settings.credentials(key_id, key, algorithm)
    except CredentialsError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        sys.exit(2)

    lifetime = ttl if ttl is not None else settings.default_ttl_seconds
    try:
        if expiry is not None:
            expires_at = datetime.fromtimestamp(expiry, tz=timezone.utc)
        else:
            expires_at = datetime.now(timezone.utc) + timedelta(seconds=lifetime)
    except (OverflowError, OSError, ValueError):
        err_console.print("[red]Error: expiry is out of range[/red]")
        sys.exit(2)

    try:
        bewit = HawkBewit().generate(credentials, url, expires_at)
    except UnsupportedSchemeError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        sys.exit(2)

    if append:
        click.echo(add_bewit(url, bewit, settings.bewit_param))
    else:
        click.echo(bewit)


@cli.command("validate")
@click.argument("url")
@click.argument("bewit")
@_credential_options
@click.pass_context
def validate(
    ctx: click.Context,
    url: str,
    bewit: str,
    key_id: str | None,
    key: str | None,
    algorithm: str | None,
) -> None:
    """Validate BEWIT against the unsigned URL."""
    settings: Settings = ctx.obj["settings"]
    try:
        credentials = settings.credentials(key_id, key, algorithm)
        result = HawkBewit().validate(credentials, url, bewit)
    except (CredentialsError, UnsupportedSchemeError) as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        sys.exit(2)

    if isinstance(result, Good):
        console.print(f"[green]Good[/green] (expires {result.expiry.isoformat()})")
        return
    if isinstance(result, Expired):
        console.print(f"[yellow]Expired[/yellow] at {result.expiry.isoformat()}")
    elif isinstance(result, AuthenticationError):
        console.print(f"[red]Authentication error:[/red] {result.message}")
    elif isinstance(result, Bad):
        console.print(f"[red]Bad:[/red] {result.message}")
    sys.exit(1)


@cli.command("inspect")
@click.argument("bewit")
def inspect(bewit: str) -> None:
    """Decode BEWIT without validating it."""
    try:
        data = decode_bewit(bewit)
    except InvalidBewitError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        sys.exit(1)

    table = Table(title="Bewit")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green", overflow="fold")
    table.add_row("Key ID", data.key_id)
    table.add_row("Expiry", data.expiry.isoformat())
    table.add_row("MAC", data.mac.hex())
    table.add_row("MAC bytes", str(len(data.mac)))
    console.print(table)


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
