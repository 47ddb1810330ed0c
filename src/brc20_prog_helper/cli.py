"""
BRC20 Prog helper CLI

Compiles the BRC20_Prog example contract and writes unsigned deploy/call
payloads, wrapped in ``brc20-prog`` envelopes, for manual indexer testing.

Commands:
  build     - Compile and write every payload to output/
  compile   - Compile only, list functions and selectors
  encode    - Encode one ad-hoc call envelope
  selectors - List selectors of a compiled ABI file
  validate  - Check envelope files against the schema
  info      - Show defaults and installed compilers
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from solcx import get_installed_solc_versions

from .config import (
    DEFAULT_CONTRACT,
    DEFAULT_DEPENDENCY_DIR,
    DEFAULT_EVM_VERSION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOLC_VERSION,
    DEFAULT_SOURCE,
    PROTOCOL_TAG,
    load_env,
)
from .encoding.abi import function_selector, function_signature, functions, load_abi
from .errors import HelperError


# ============ Constants ============

VERSION = "0.1.0"


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="brc20-prog-helper")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """BRC20 Prog helper - contract build and test payloads."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.build import build
from .commands.compile import compile_cmd
from .commands.encode import encode
from .commands.validate import validate

cli.add_command(build)
cli.add_command(compile_cmd)
cli.add_command(encode)
cli.add_command(validate)


# ============ Selectors ============


@cli.command()
@click.option("--abi", "abi_path", default=str(Path(DEFAULT_OUTPUT_DIR) / f"{DEFAULT_CONTRACT}.abi"),
              show_default=True, type=click.Path(dir_okay=False, path_type=Path), help="ABI file")
def selectors(abi_path: Path) -> None:
    """List function signatures and selectors."""
    try:
        abi = load_abi(abi_path)
    except FileNotFoundError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    except HelperError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)

    for entry in functions(abi):
        click.echo(f"0x{function_selector(entry).hex()}  {function_signature(entry)}")


# ============ Info ============


@cli.command()
def info() -> None:
    """Show defaults and installed compilers."""
    click.secho(f"  brc20-prog-helper v{VERSION}", bold=True)
    click.echo()

    rows = [
        ("Protocol", PROTOCOL_TAG),
        ("Source", DEFAULT_SOURCE),
        ("Contract", DEFAULT_CONTRACT),
        ("Output dir", DEFAULT_OUTPUT_DIR),
        ("Dependencies", DEFAULT_DEPENDENCY_DIR),
        ("solc", f"{DEFAULT_SOLC_VERSION} ({DEFAULT_EVM_VERSION})"),
    ]
    for label, value in rows:
        click.echo(click.style(f"  {label + ':':<14}", dim=True) + value)

    installed = sorted(get_installed_solc_versions())
    if installed:
        text = click.style(", ".join(str(v) for v in installed), fg="green")
    else:
        text = click.style("none", fg="yellow") + click.style("  (installed on first build)", dim=True)
    click.echo(click.style(f"  {'Installed:':<14}", dim=True) + text)
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """CLI entry point."""
    load_env()
    cli()


if __name__ == "__main__":
    main()
