"""storeopts CLI: inspect key schemas and validate store options."""

from __future__ import annotations

import json
import logging
import sys

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .capabilities import Provider
from .config import load_capabilities, load_store_options, load_transport_config
from .errors import OptionsFileError, StoreOptionsError
from .keys import schema_for
from .options_file import load_options_file
from .options import StoreOptions

console = Console()

_SECRET_MARKERS = ("secret", "key", "token", "password")
_PROVIDER_CHOICE = click.Choice(["azure", "s3", "aws", "gcs", "gcp", "google", "http"], case_sensitive=False)


def _mask(name: str, value: str) -> str:
    if any(marker in name for marker in _SECRET_MARKERS) and value:
        return "****"
    return value


def _parse_option_args(values: tuple[str, ...]) -> list[tuple[str, str]]:
    """Parse repeated ``key=value`` arguments; the value may be empty."""
    pairs = []
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid --option {raw!r}. Expected key=value")
        pairs.append((key.strip(), value))
    return pairs


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool):
    """storeopts: normalize and validate object-store options"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@cli.command("keys")
@click.argument("provider", type=_PROVIDER_CHOICE)
def keys_command(provider: str):
    """List the configuration keys a provider recognizes."""
    try:
        schema = schema_for(provider)
    except StoreOptionsError as err:
        console.print(f"[red]✗ {escape(str(err))}[/red]")
        sys.exit(1)

    table = Table(title=f"{schema.provider.value} configuration keys")
    table.add_column("Key", style="cyan")
    table.add_column("Variant")
    for name in schema.names():
        table.add_row(name, schema.parse(name).name)
    console.print(table)


@cli.command("validate")
@click.argument("provider", type=_PROVIDER_CHOICE)
@click.option("--option", "-o", "option_args", multiple=True, help="Option as key=value. Repeatable.")
@click.option(
    "--file",
    "options_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML options file; -o values override it.",
)
@click.option("--env/--no-env", "include_env", default=False, show_default=True, help="Read provider-prefixed environment variables.")
@click.option("--show-secrets", is_flag=True, default=False, help="Print secret values unmasked.")
def validate_command(
    provider: str,
    option_args: tuple[str, ...],
    options_path: str | None,
    include_env: bool,
    show_secrets: bool,
):
    """Validate options against a provider's key schema."""
    load_dotenv()
    resolved = Provider.parse(provider)
    try:
        pairs = _parse_option_args(option_args)
    except ValueError as err:
        console.print(f"[red]✗ {escape(str(err))}[/red]")
        sys.exit(1)

    try:
        transport = load_transport_config()
        if options_path:
            document = load_options_file(options_path)
            declared = document.declared_provider()
            if declared is not None and declared is not resolved:
                raise OptionsFileError(
                    options_path,
                    [f"[provider] file is for '{declared.value}', not '{resolved.value}'"],
                )
            pairs = list(document.options) + pairs
            transport = document.transport_config()
        store_options = load_store_options(
            resolved,
            pairs,
            transport=transport,
            include_env=include_env,
        )
        validated = store_options.get_options(resolved)
    except (StoreOptionsError, ValueError) as err:
        console.print(f"[red]✗ {escape(str(err))}[/red]")
        sys.exit(1)

    console.print(f"[green]✓ Valid![/green] {len(validated)} option(s) for {resolved.value}")
    if not validated:
        return
    table = Table()
    table.add_column("Key", style="cyan")
    table.add_column("Variant")
    table.add_column("Value")
    for key, value in validated.items():
        shown = value if show_secrets else _mask(key.value, value)
        table.add_row(key.value, key.name, escape(shown))
    console.print(table)


@cli.command("transport")
@click.option(
    "--file",
    "options_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML options file with a transport section.",
)
def transport_command(options_path: str | None):
    """Print the effective HTTP client settings as JSON."""
    load_dotenv()
    try:
        transport = load_transport_config()
        if options_path:
            transport = load_options_file(options_path).transport_config()
        store_options = StoreOptions((), transport, capabilities=load_capabilities())
    except StoreOptionsError as err:
        console.print(f"[red]✗ {escape(str(err))}[/red]")
        sys.exit(1)

    config = store_options.get_transport_config()
    if config is None:
        console.print("[yellow]No providers enabled; transport settings are omitted.[/yellow]")
        return
    click.echo(json.dumps(config.to_dict(), indent=2, sort_keys=True))


if __name__ == "__main__":
    cli()
