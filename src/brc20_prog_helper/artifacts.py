"""
Build - compile the contract and write every test payload.

One linear pass: read source -> compile -> extract ABI/bytecode -> encode
deploy and example calls -> write files. Output files are overwritten in
place, so repeated runs with the same source leave identical content.

Individual file writes are independent. A failed write is recorded in the
result and does not stop the remaining writes or fail the build.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from .compiler.imports import make_resolver
from .compiler.solc import CompiledContract, compile_contract
from .config import (
    CONTRACT_ADDRESS_PLACEHOLDER,
    DEFAULT_CONTRACT,
    DEFAULT_DEPENDENCY_DIR,
    DEFAULT_EVM_VERSION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOLC_VERSION,
    DEFAULT_SOURCE,
)
from .encoding.tx import build_deploy_data, encode_function_data
from .errors import SourceNotFoundError
from .examples import EXAMPLE_CALLS, ExampleCall
from .spec.models import TransactionEnvelope
from .utils import dump_pretty


@dataclass(frozen=True)
class BuildOptions:
    source: Path = Path(DEFAULT_SOURCE)
    contract_name: str = DEFAULT_CONTRACT
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    dependency_dir: Path = Path(DEFAULT_DEPENDENCY_DIR)
    solc_version: str = DEFAULT_SOLC_VERSION
    evm_version: str = DEFAULT_EVM_VERSION
    contract_address: str = CONTRACT_ADDRESS_PLACEHOLDER
    calls: Sequence[ExampleCall] = EXAMPLE_CALLS


@dataclass
class WriteFailure:
    path: Path
    error: str


@dataclass
class BuildResult:
    contract: CompiledContract
    deploy_data: str
    written: list[Path] = field(default_factory=list)
    failures: list[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def read_source(path: Path) -> str:
    if not path.is_file():
        raise SourceNotFoundError(f"Source file not found: {path}")
    return path.read_text(encoding="utf-8")


def compile_from_options(options: BuildOptions) -> CompiledContract:
    content = read_source(options.source)
    return compile_contract(
        options.source.name,
        content,
        options.contract_name,
        resolver=make_resolver(
            options.dependency_dir, base_dir=options.source.parent
        ),
        solc_version=options.solc_version,
        evm_version=options.evm_version,
    )


def output_files(options: BuildOptions) -> list[Path]:
    """Every file ``build_artifacts`` writes, in write order."""
    prefix = options.contract_name
    out = options.output_dir
    files = [
        out / f"{prefix}.abi",
        out / f"{prefix}.bytecode",
        out / f"{prefix}_deploy_tx.json",
    ]
    files.extend(out / f"{prefix}_{call.stem}_tx.json" for call in options.calls)
    return files


def build_artifacts(options: Optional[BuildOptions] = None) -> BuildResult:
    """
    Compile the contract and write ABI, bytecode and transaction envelopes.

    Args:
        options: Build configuration (default: BRC20_Prog.sol -> output/)

    Returns:
        BuildResult with the compiled contract, deploy data and per-file
        write outcomes

    Raises:
        SourceNotFoundError: Before anything is written, if the source is missing
        CompilationError: If solc fails
        ContractNotFoundError: If the contract is not in the compiler output
        EncodingError: If an example call does not match the ABI
    """
    options = options or BuildOptions()

    contract = compile_from_options(options)
    deploy_data = build_deploy_data(contract.abi, contract.bytecode)

    # Encode everything before touching the output directory.
    envelopes = [TransactionEnvelope.deploy(deploy_data)]
    for call in options.calls:
        data = encode_function_data(contract.abi, call.function, call.args)
        envelopes.append(TransactionEnvelope.call(options.contract_address, data))
    for envelope in envelopes:
        envelope.validate()

    contents = [dump_pretty(contract.abi), contract.bytecode]
    contents.extend(envelope.to_json() for envelope in envelopes)

    options.output_dir.mkdir(parents=True, exist_ok=True)

    result = BuildResult(contract=contract, deploy_data=deploy_data)
    for path, text in zip(output_files(options), contents):
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            result.failures.append(WriteFailure(path=path, error=str(exc)))
        else:
            result.written.append(path)

    return result
