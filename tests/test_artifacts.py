"""Tests for the build routine, with solc faked."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from brc20_prog_helper.artifacts import BuildOptions, build_artifacts, output_files
from brc20_prog_helper.encoding.tx import encode_function_data
from brc20_prog_helper.errors import ContractNotFoundError, SourceNotFoundError
from brc20_prog_helper.examples import EXAMPLE_CALLS

from conftest import BRC20_PROG_ABI, FAKE_BYTECODE, FakeSolc

EXPECTED_FILES = {
    "BRC20_Prog.abi",
    "BRC20_Prog.bytecode",
    "BRC20_Prog_deploy_tx.json",
    "BRC20_Prog_bip322_verify_tx.json",
    "BRC20_Prog_brc20_balance_tx.json",
    "BRC20_Prog_btc_tx_details_tx.json",
    "BRC20_Prog_btc_last_sat_loc_tx.json",
    "BRC20_Prog_btc_locked_pkscript_tx.json",
}


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {p.name: p.read_bytes() for p in sorted(directory.iterdir())}


class TestBuild:
    def test_writes_all_files(self, project: Path, fake_solc: FakeSolc) -> None:
        result = build_artifacts()

        out = project / "output"
        assert {p.name for p in out.iterdir()} == EXPECTED_FILES
        assert result.ok
        assert len(result.written) == len(EXPECTED_FILES)

    def test_abi_and_bytecode(self, project: Path, fake_solc: FakeSolc) -> None:
        build_artifacts()

        out = project / "output"
        abi_text = (out / "BRC20_Prog.abi").read_text(encoding="utf-8")
        assert json.loads(abi_text) == BRC20_PROG_ABI
        assert abi_text.startswith('[\n    {\n        "inputs"')
        assert (out / "BRC20_Prog.bytecode").read_text(encoding="utf-8") == FAKE_BYTECODE

    def test_deploy_envelope(self, project: Path, fake_solc: FakeSolc) -> None:
        build_artifacts()

        raw = (project / "output" / "BRC20_Prog_deploy_tx.json").read_text(encoding="utf-8")
        assert raw == '{"p":"brc20-prog","op":"deploy","d":"0x' + FAKE_BYTECODE + '"}'

    def test_call_envelopes(self, project: Path, fake_solc: FakeSolc) -> None:
        build_artifacts()

        for call in EXAMPLE_CALLS:
            path = project / "output" / f"BRC20_Prog_{call.stem}_tx.json"
            payload = json.loads(path.read_text(encoding="utf-8"))
            assert list(payload) == ["p", "op", "c", "d"]
            assert payload["p"] == "brc20-prog"
            assert payload["op"] == "call"
            assert payload["c"] == "REPLACE_THIS_WITH_CONTRACT_ADDRESS"
            assert payload["d"] == encode_function_data(BRC20_PROG_ABI, call.function, call.args)

    def test_contract_address_option(self, project: Path, fake_solc: FakeSolc) -> None:
        address = "0x" + "ab" * 20
        build_artifacts(BuildOptions(contract_address=address))

        payload = json.loads((project / "output" / "BRC20_Prog_btc_tx_details_tx.json").read_text())
        assert payload["c"] == address

    def test_idempotent(self, project: Path, fake_solc: FakeSolc) -> None:
        build_artifacts()
        first = _snapshot(project / "output")
        build_artifacts()
        second = _snapshot(project / "output")

        assert first == second
        assert set(second) == EXPECTED_FILES

    def test_existing_output_dir(self, project: Path, fake_solc: FakeSolc) -> None:
        (project / "output").mkdir()
        build_artifacts()
        assert {p.name for p in (project / "output").iterdir()} == EXPECTED_FILES

    def test_custom_output_dir(self, project: Path, fake_solc: FakeSolc) -> None:
        out = project / "build" / "nested"
        build_artifacts(BuildOptions(output_dir=out))
        assert {p.name for p in out.iterdir()} == EXPECTED_FILES

    def test_output_files_order(self) -> None:
        names = [p.name for p in output_files(BuildOptions())]
        assert names[:3] == ["BRC20_Prog.abi", "BRC20_Prog.bytecode", "BRC20_Prog_deploy_tx.json"]
        assert set(names) == EXPECTED_FILES


class TestBuildFailures:
    def test_missing_source_writes_nothing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_solc: FakeSolc
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SourceNotFoundError):
            build_artifacts()
        assert not (tmp_path / "output").exists()
        assert fake_solc.calls == []

    def test_missing_contract_writes_nothing(self, project: Path, fake_solc: FakeSolc) -> None:
        with pytest.raises(ContractNotFoundError):
            build_artifacts(BuildOptions(contract_name="Missing"))
        assert not (project / "output").exists()

    def test_write_failure_reported(
        self, project: Path, fake_solc: FakeSolc, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        original = Path.write_text

        def flaky(self: Path, data: str, *args, **kwargs) -> int:
            if self.name == "BRC20_Prog.bytecode":
                raise PermissionError("read-only")
            return original(self, data, *args, **kwargs)

        monkeypatch.setattr(Path, "write_text", flaky)
        result = build_artifacts()

        assert not result.ok
        assert [f.path.name for f in result.failures] == ["BRC20_Prog.bytecode"]
        assert "read-only" in result.failures[0].error
        assert len(result.written) == len(EXPECTED_FILES) - 1
        assert not (project / "output" / "BRC20_Prog.bytecode").exists()


class TestSourceLocation:
    def test_source_in_subdirectory(self, project: Path, fake_solc: FakeSolc) -> None:
        src = project / "src"
        src.mkdir()
        (project / "BRC20_Prog.sol").rename(src / "BRC20_Prog.sol")
        (project / "contracts").rename(src / "contracts")

        result = build_artifacts(BuildOptions(source=Path("src/BRC20_Prog.sol")))

        sources = fake_solc.calls[0]["input"]["sources"]
        assert list(sources) == ["BRC20_Prog.sol", "contracts/interfaces/IBTCPrecompiles.sol"]
        assert "interface IBTCTxDetails" in sources["contracts/interfaces/IBTCPrecompiles.sol"]["content"]
        assert result.ok
