"""
Compile - run solc only and summarise the contract.

Nothing is written to disk.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..artifacts import BuildOptions, compile_from_options
from ..config import (
    DEFAULT_CONTRACT,
    DEFAULT_DEPENDENCY_DIR,
    DEFAULT_EVM_VERSION,
    DEFAULT_SOLC_VERSION,
    DEFAULT_SOURCE,
    ENV_CONTRACT,
    ENV_DEPENDENCY_DIR,
    ENV_EVM_VERSION,
    ENV_SOLC_VERSION,
    ENV_SOURCE,
)
from ..encoding.abi import function_selector, function_signature, functions
from ..errors import CompilationError, HelperError


@click.command("compile")
@click.option("--source", envvar=ENV_SOURCE, default=DEFAULT_SOURCE, show_default=True,
              type=click.Path(path_type=Path), help="Solidity source file")
@click.option("--contract", "contract_name", envvar=ENV_CONTRACT, default=DEFAULT_CONTRACT,
              show_default=True, help="Contract to extract from the compiler output")
@click.option("--dependency-dir", envvar=ENV_DEPENDENCY_DIR, default=DEFAULT_DEPENDENCY_DIR,
              show_default=True, type=click.Path(file_okay=False, path_type=Path),
              help="Fallback directory for imports")
@click.option("--solc-version", envvar=ENV_SOLC_VERSION, default=DEFAULT_SOLC_VERSION,
              show_default=True, help="solc release")
@click.option("--evm-version", envvar=ENV_EVM_VERSION, default=DEFAULT_EVM_VERSION,
              show_default=True, help="EVM target")
def compile_cmd(
    source: Path,
    contract_name: str,
    dependency_dir: Path,
    solc_version: str,
    evm_version: str,
) -> None:
    """Compile the contract and list its functions."""
    click.echo("=== BRC20 Prog Compile ===")
    click.echo("")

    options = BuildOptions(
        source=source,
        contract_name=contract_name,
        dependency_dir=dependency_dir,
        solc_version=solc_version,
        evm_version=evm_version,
    )

    try:
        contract = compile_from_options(options)
    except CompilationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for line in exc.diagnostics:
            click.echo(f"  {line}")
        sys.exit(exc.exit_code)
    except HelperError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)

    click.echo(f"  Contract: {contract.name}")
    click.echo(f"  Bytecode: {len(contract.bytecode) // 2} bytes")
    click.echo("")
    for entry in functions(contract.abi):
        click.echo(f"  0x{function_selector(entry).hex()}  {function_signature(entry)}")
