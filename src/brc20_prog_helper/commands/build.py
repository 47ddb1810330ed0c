"""
Build - compile BRC20_Prog and write the test payloads to output/.

Writes the ABI, the raw bytecode, the deploy envelope and one call
envelope per example call. Write failures are reported as warnings and do
not change the exit status.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..artifacts import BuildOptions, build_artifacts
from ..config import (
    CONTRACT_ADDRESS_PLACEHOLDER,
    DEFAULT_CONTRACT,
    DEFAULT_DEPENDENCY_DIR,
    DEFAULT_EVM_VERSION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOLC_VERSION,
    DEFAULT_SOURCE,
    ENV_CONTRACT,
    ENV_CONTRACT_ADDRESS,
    ENV_DEPENDENCY_DIR,
    ENV_EVM_VERSION,
    ENV_OUTPUT_DIR,
    ENV_SOLC_VERSION,
    ENV_SOURCE,
)
from ..errors import CompilationError, HelperError


@click.command()
@click.option("--source", envvar=ENV_SOURCE, default=DEFAULT_SOURCE, show_default=True,
              type=click.Path(path_type=Path), help="Solidity source file")
@click.option("--contract", "contract_name", envvar=ENV_CONTRACT, default=DEFAULT_CONTRACT,
              show_default=True, help="Contract to extract from the compiler output")
@click.option("--output-dir", envvar=ENV_OUTPUT_DIR, default=DEFAULT_OUTPUT_DIR, show_default=True,
              type=click.Path(file_okay=False, path_type=Path), help="Directory for generated files")
@click.option("--dependency-dir", envvar=ENV_DEPENDENCY_DIR, default=DEFAULT_DEPENDENCY_DIR,
              show_default=True, type=click.Path(file_okay=False, path_type=Path),
              help="Fallback directory for imports")
@click.option("--solc-version", envvar=ENV_SOLC_VERSION, default=DEFAULT_SOLC_VERSION,
              show_default=True, help="solc release")
@click.option("--evm-version", envvar=ENV_EVM_VERSION, default=DEFAULT_EVM_VERSION,
              show_default=True, help="EVM target")
@click.option("--contract-address", envvar=ENV_CONTRACT_ADDRESS, default=CONTRACT_ADDRESS_PLACEHOLDER,
              help="Value for the 'c' field of call envelopes")
def build(
    source: Path,
    contract_name: str,
    output_dir: Path,
    dependency_dir: Path,
    solc_version: str,
    evm_version: str,
    contract_address: str,
) -> None:
    """
    Compile the contract and write deploy/call payloads.
    """
    click.echo("=== BRC20 Prog Build ===")
    click.echo("")

    options = BuildOptions(
        source=source,
        contract_name=contract_name,
        output_dir=output_dir,
        dependency_dir=dependency_dir,
        solc_version=solc_version,
        evm_version=evm_version,
        contract_address=contract_address,
    )

    click.echo(f"  Source:   {source}")
    click.echo(f"  Contract: {contract_name}")
    click.echo(f"  solc:     {solc_version} ({evm_version})")
    click.echo("")

    try:
        result = build_artifacts(options)
    except CompilationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for line in exc.diagnostics:
            click.echo(f"  {line}")
        sys.exit(exc.exit_code)
    except HelperError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)

    bytecode_size = len(result.contract.bytecode) // 2
    click.echo(f"  Bytecode: {bytecode_size} bytes")
    click.echo(f"  Functions: {len(result.contract.function_names())}")
    click.echo("")

    for path in result.written:
        click.echo(f"  wrote {path}")
    for failure in result.failures:
        click.secho(f"  WARNING: could not write {failure.path}: {failure.error}", fg="yellow")

    click.echo("")
    click.secho("SUCCESS: Build complete.", fg="green")
