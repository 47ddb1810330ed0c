"""
Solidity compilation through py-solc-x.

Builds a standard-JSON input for a single entry file (plus every import the
resolver can find), runs solc, and extracts one contract's ABI and
creation bytecode from the structured output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from solcx import compile_standard, get_installed_solc_versions, install_solc
from solcx.exceptions import SolcError

from ..config import DEFAULT_EVM_VERSION, DEFAULT_SOLC_VERSION
from ..errors import CompilationError, ContractNotFoundError
from .imports import Resolver, collect_sources


@dataclass(frozen=True)
class CompiledContract:
    name: str
    abi: list[dict[str, Any]]
    bytecode: str

    def function_names(self) -> list[str]:
        return [e["name"] for e in self.abi if e.get("type") == "function"]


def build_standard_input(
    sources: dict[str, dict[str, str]],
    evm_version: str = DEFAULT_EVM_VERSION,
) -> dict[str, Any]:
    return {
        "language": "Solidity",
        "sources": sources,
        "settings": {
            "evmVersion": evm_version,
            "outputSelection": {
                "*": {
                    "*": ["*"],
                },
            },
        },
    }


def ensure_solc(version: str = DEFAULT_SOLC_VERSION) -> None:
    """Install the requested solc release if it is not present yet."""
    installed = {str(v) for v in get_installed_solc_versions()}
    if version.lstrip("v") not in installed:
        install_solc(version)


def compile_sources(
    entry_name: str,
    content: str,
    resolver: Resolver,
    solc_version: str = DEFAULT_SOLC_VERSION,
    evm_version: str = DEFAULT_EVM_VERSION,
) -> dict[str, Any]:
    """
    Compile an entry source and its imports.

    Args:
        entry_name: Virtual filename used as the source unit name
        content: Solidity source text
        resolver: Import resolver (see compiler.imports)
        solc_version: solc release to use
        evm_version: EVM target

    Returns:
        Parsed standard-JSON compiler output

    Raises:
        CompilationError: If solc reports errors. Imports the resolver
            could not find surface here as solc diagnostics.
    """
    sources, missing = collect_sources(entry_name, content, resolver)
    standard_input = build_standard_input(sources, evm_version=evm_version)

    ensure_solc(solc_version)
    try:
        return compile_standard(standard_input, solc_version=solc_version)
    except SolcError as exc:
        diagnostics = [
            err.get("formattedMessage") or err.get("message", "")
            for err in (getattr(exc, "error_dict", None) or [])
            if err.get("severity") == "error"
        ]
        message = f"Compilation of {entry_name} failed"
        if missing:
            message += f" (unresolved imports: {', '.join(missing)})"
        raise CompilationError(message, diagnostics=diagnostics or [str(exc)]) from exc


def extract_artifact(
    output: dict[str, Any],
    file_name: str,
    contract_name: str,
) -> CompiledContract:
    """
    Pick one contract out of solc's output.

    Raises:
        ContractNotFoundError: If the file or contract is absent
    """
    try:
        contract = output["contracts"][file_name][contract_name]
    except KeyError as exc:
        raise ContractNotFoundError(
            f"Contract {contract_name} not found in compiler output for {file_name}"
        ) from exc

    return CompiledContract(
        name=contract_name,
        abi=contract["abi"],
        bytecode=contract["evm"]["bytecode"]["object"],
    )


def compile_contract(
    entry_name: str,
    content: str,
    contract_name: str,
    resolver: Resolver,
    solc_version: Optional[str] = None,
    evm_version: Optional[str] = None,
) -> CompiledContract:
    """Compile a source and return the named contract's artifact."""
    output = compile_sources(
        entry_name,
        content,
        resolver,
        solc_version=solc_version or DEFAULT_SOLC_VERSION,
        evm_version=evm_version or DEFAULT_EVM_VERSION,
    )
    return extract_artifact(output, entry_name, contract_name)
