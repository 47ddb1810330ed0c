"""
Encode - build one ad-hoc call envelope from a compiled ABI.

Reads the ABI written by ``build`` and encodes FUNCTION with the given
JSON arguments. Prints the envelope, or writes it with ``--out``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import (
    CONTRACT_ADDRESS_PLACEHOLDER,
    DEFAULT_CONTRACT,
    DEFAULT_OUTPUT_DIR,
    ENV_CONTRACT_ADDRESS,
)
from ..encoding.abi import load_abi
from ..encoding.tx import encode_function_data
from ..errors import HelperError
from ..spec.models import TransactionEnvelope

DEFAULT_ABI_PATH = Path(DEFAULT_OUTPUT_DIR) / f"{DEFAULT_CONTRACT}.abi"


@click.command()
@click.argument("function")
@click.option("--args", "args_json", default="[]", help="Function args as JSON array")
@click.option("--abi", "abi_path", default=str(DEFAULT_ABI_PATH), show_default=True,
              type=click.Path(dir_okay=False, path_type=Path), help="ABI file")
@click.option("--contract-address", envvar=ENV_CONTRACT_ADDRESS, default=CONTRACT_ADDRESS_PLACEHOLDER,
              help="Value for the 'c' field")
@click.option("--out", "out_path", default=None, type=click.Path(dir_okay=False, path_type=Path),
              help="Write the envelope here instead of printing it")
def encode(
    function: str,
    args_json: str,
    abi_path: Path,
    contract_address: str,
    out_path: Optional[Path],
) -> None:
    """
    Encode a call to FUNCTION (name or full signature) as an envelope.
    """
    try:
        args = json.loads(args_json)
        if not isinstance(args, list):
            raise ValueError("Args must be a JSON array")
    except (json.JSONDecodeError, ValueError) as exc:
        click.secho(f"ERROR: Invalid args: {exc}", fg="red")
        sys.exit(1)

    try:
        abi = load_abi(abi_path)
        data = encode_function_data(abi, function, args)
    except FileNotFoundError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    except HelperError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)

    envelope = TransactionEnvelope.call(contract_address, data)

    if out_path is None:
        click.echo(envelope.to_json())
        return

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(envelope.to_json(), encoding="utf-8")
    click.secho(f"Wrote {out_path}", fg="green")
