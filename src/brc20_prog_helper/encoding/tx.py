"""
Transaction payloads - deployment data and function call data.

Produces the ``data`` field of unsigned transactions only: there is no
nonce, gas or signing here, the indexer under test receives these
payloads wrapped in envelopes.
"""

from __future__ import annotations

from typing import Any, Sequence

from eth_abi import encode
from eth_abi.exceptions import EncodingError as AbiEncodingError

from ..errors import EncodingError
from ..utils import add_0x, is_hex, strip_0x
from .abi import coerce_args, find_constructor, find_function, function_selector, input_types


def build_deploy_data(
    abi: list[dict[str, Any]],
    bytecode: str,
    constructor_args: Sequence[Any] = (),
) -> str:
    """
    Build contract creation data: bytecode followed by encoded constructor args.

    Args:
        abi: Contract ABI
        bytecode: Creation bytecode, with or without 0x prefix
        constructor_args: Constructor arguments (default: none)

    Returns:
        0x-prefixed lowercase hex

    Raises:
        EncodingError: On unlinked/invalid bytecode or an argument count
            that does not match the constructor
    """
    body = strip_0x(bytecode)
    if not body or not is_hex(body):
        raise EncodingError("Invalid bytecode (empty, odd length or unlinked library placeholders)")

    constructor = find_constructor(abi) or {"type": "constructor", "inputs": []}
    args = coerce_args(constructor, list(constructor_args))

    encoded = b""
    if args:
        encoded = _encode(input_types(constructor), args)

    return add_0x(body.lower() + encoded.hex())


def encode_function_data(
    abi: list[dict[str, Any]],
    function_name: str,
    args: Sequence[Any] = (),
) -> str:
    """ABI-encode a function call to 0x-prefixed hex calldata."""
    entry = find_function(abi, function_name, arg_count=len(args))
    coerced = coerce_args(entry, list(args))

    selector = function_selector(entry)
    encoded = _encode(input_types(entry), coerced) if coerced else b""

    return add_0x(selector.hex() + encoded.hex())


def _encode(types: list[str], args: list[Any]) -> bytes:
    try:
        return encode(types, args)
    except (AbiEncodingError, TypeError, ValueError) as exc:
        raise EncodingError(f"Cannot encode arguments as ({','.join(types)}): {exc}") from exc
