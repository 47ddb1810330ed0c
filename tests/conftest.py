"""Shared fixtures: a BRC20_Prog ABI and a fake solc."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

FAKE_BYTECODE = "6080604052348015600e575f80fd5b50603e80601a5f395ff3fe60806040525f80fd"


def _string(name: str) -> dict[str, str]:
    return {"internalType": "string", "name": name, "type": "string"}


def _uint(name: str) -> dict[str, str]:
    return {"internalType": "uint256", "name": name, "type": "uint256"}


BRC20_PROG_ABI: list[dict[str, Any]] = [
    {
        "inputs": [_string("ticker"), _string("pkscript")],
        "name": "getBrc20BalanceOf",
        "outputs": [_uint("")],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [_string("txid"), _uint("vout"), _uint("sat")],
        "name": "getLastSatLocation",
        "outputs": [
            _string("lastTxid"),
            _uint("lastVout"),
            _uint("lastSat"),
            _string("oldPkscript"),
            _string("newPkscript"),
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [_string("pkscript"), _uint("lockBlockCount")],
        "name": "getLockedPkscript",
        "outputs": [_string("")],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [_string("txid")],
        "name": "getTxDetails",
        "outputs": [
            _uint("blockHeight"),
            {"internalType": "string[]", "name": "vinTxids", "type": "string[]"},
            {"internalType": "uint256[]", "name": "vinVouts", "type": "uint256[]"},
            {"internalType": "string[]", "name": "vinScriptPubKeys", "type": "string[]"},
            {"internalType": "uint256[]", "name": "vinValues", "type": "uint256[]"},
            {"internalType": "string[]", "name": "voutScriptPubKeys", "type": "string[]"},
            {"internalType": "uint256[]", "name": "voutValues", "type": "uint256[]"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [_string("addr"), _string("message"), _string("signature")],
        "name": "verifyBIP322Signature",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
]


def fake_output(
    file_name: str = "BRC20_Prog.sol",
    contract_name: str = "BRC20_Prog",
    abi: list[dict[str, Any]] | None = None,
    bytecode: str = FAKE_BYTECODE,
) -> dict[str, Any]:
    return {
        "contracts": {
            file_name: {
                contract_name: {
                    "abi": copy.deepcopy(abi if abi is not None else BRC20_PROG_ABI),
                    "evm": {"bytecode": {"object": bytecode}},
                },
            },
        },
        "sources": {file_name: {"id": 0}},
    }


class FakeSolc:
    """Stands in for solcx.compile_standard and records each call."""

    def __init__(self, output: dict[str, Any] | None = None) -> None:
        self.output = output or fake_output()
        self.calls: list[dict[str, Any]] = []

    def __call__(self, input_data: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        self.calls.append({"input": copy.deepcopy(input_data), **kwargs})
        return copy.deepcopy(self.output)


@pytest.fixture()
def abi() -> list[dict[str, Any]]:
    return copy.deepcopy(BRC20_PROG_ABI)


@pytest.fixture()
def fake_solc(monkeypatch: pytest.MonkeyPatch) -> FakeSolc:
    solc = FakeSolc()
    monkeypatch.setattr("brc20_prog_helper.compiler.solc.compile_standard", solc)
    monkeypatch.setattr("brc20_prog_helper.compiler.solc.ensure_solc", lambda version: None)
    return solc


@pytest.fixture()
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory holding BRC20_Prog.sol and its interface import."""
    work = tmp_path / "project"
    (work / "contracts" / "interfaces").mkdir(parents=True)
    (work / "BRC20_Prog.sol").write_text(
        (REPO_ROOT / "BRC20_Prog.sol").read_text(encoding="utf-8"), encoding="utf-8"
    )
    (work / "contracts" / "interfaces" / "IBTCPrecompiles.sol").write_text(
        (REPO_ROOT / "contracts" / "interfaces" / "IBTCPrecompiles.sol").read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    monkeypatch.chdir(work)
    return work
