"""
ABI helpers - lookup, signatures, selectors and argument coercion.

ABIs come straight from solc output (or the ``.abi`` file the build step
writes). Functions can be addressed by bare name or by full signature;
overloaded names are disambiguated by argument count.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional, Sequence

from ..errors import EncodingError
from ..utils import hex_to_bytes, keccak256, load_json

_ARRAY_SUFFIX_RE = re.compile(r"(\[\d*\])+$")
_INT_RE = re.compile(r"^u?int\d*$")
_FIXED_BYTES_RE = re.compile(r"^bytes(\d+)$")


def load_abi(path: Path) -> list[dict[str, Any]]:
    """
    Load an ABI JSON file (as written by the build step).

    Raises:
        FileNotFoundError: If the file does not exist
        EncodingError: If the file does not hold an ABI list
    """
    if not path.is_file():
        raise FileNotFoundError(f"ABI not found: {path}. Run 'brc20-prog-helper build' first.")
    abi = load_json(path)
    if not isinstance(abi, list):
        raise EncodingError(f"{path} does not contain an ABI array")
    return abi


def canonical_type(param: dict[str, Any]) -> str:
    """Canonical ABI type string, with tuple components expanded."""
    type_str = param["type"]
    if not type_str.startswith("tuple"):
        return type_str
    suffix = type_str[len("tuple"):]
    inner = ",".join(canonical_type(c) for c in param.get("components", []))
    return f"({inner}){suffix}"


def input_types(entry: dict[str, Any]) -> list[str]:
    return [canonical_type(p) for p in entry.get("inputs", [])]


def function_signature(entry: dict[str, Any]) -> str:
    return f"{entry['name']}({','.join(input_types(entry))})"


def function_selector(entry: dict[str, Any]) -> bytes:
    return keccak256(function_signature(entry).encode("utf-8"))[:4]


def functions(abi: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [e for e in abi if e.get("type") == "function"]


def find_constructor(abi: list[dict[str, Any]]) -> Optional[dict[str, Any]]:
    for entry in abi:
        if entry.get("type") == "constructor":
            return entry
    return None


def find_function(
    abi: list[dict[str, Any]],
    name_or_signature: str,
    arg_count: Optional[int] = None,
) -> dict[str, Any]:
    """
    Find a function entry by name or signature.

    Args:
        abi: Contract ABI
        name_or_signature: ``"getTxDetails"`` or ``"getTxDetails(string)"``
        arg_count: Used to pick between overloads of a bare name

    Raises:
        EncodingError: If no function, or more than one, matches
    """
    if "(" in name_or_signature:
        wanted = name_or_signature.replace(" ", "")
        for entry in functions(abi):
            if function_signature(entry) == wanted:
                return entry
        raise EncodingError(f"Function {name_or_signature} not found in ABI")

    candidates = [e for e in functions(abi) if e.get("name") == name_or_signature]
    if not candidates:
        raise EncodingError(f"Function {name_or_signature} not found in ABI")
    if len(candidates) > 1 and arg_count is not None:
        candidates = [e for e in candidates if len(e.get("inputs", [])) == arg_count]
    if len(candidates) != 1:
        overloads = ", ".join(function_signature(e) for e in candidates) or "none"
        raise EncodingError(
            f"Ambiguous function {name_or_signature} (candidates: {overloads}); "
            f"use the full signature"
        )
    return candidates[0]


def _split_array(type_str: str) -> tuple[str, Optional[str]]:
    """'uint256[2][]' -> ('uint256[2]', ''), 'uint256' -> ('uint256', None)."""
    if not type_str.endswith("]"):
        return type_str, None
    start = type_str.rindex("[")
    return type_str[:start], type_str[start + 1:-1]


def coerce_value(param: dict[str, Any], value: Any) -> Any:
    """
    Convert a JSON-friendly value into what eth-abi expects for ``param``.

    Hex strings become bytes for ``bytes``/``bytesN``, decimal or hex
    strings become ints for integer types; arrays and tuples recurse.
    """
    type_str = param["type"]
    base, length = _split_array(type_str)

    if length is not None:
        if not isinstance(value, (list, tuple)):
            raise EncodingError(f"Expected a list for {type_str}, got {type(value).__name__}")
        if length and len(value) != int(length):
            raise EncodingError(f"Expected {length} items for {type_str}, got {len(value)}")
        element = dict(param, type=base)
        return [coerce_value(element, v) for v in value]

    if base == "tuple":
        components = param.get("components", [])
        if isinstance(value, dict):
            missing = [c["name"] for c in components if c["name"] not in value]
            if missing:
                raise EncodingError(f"Missing tuple fields: {', '.join(missing)}")
            value = [value[c["name"]] for c in components]
        elif not isinstance(value, (list, tuple)):
            raise EncodingError(f"Expected a list or object for tuple, got {type(value).__name__}")
        if len(value) != len(components):
            raise EncodingError(f"Expected {len(components)} tuple fields, got {len(value)}")
        return tuple(coerce_value(c, v) for c, v in zip(components, value))

    if _INT_RE.match(base):
        if isinstance(value, bool):
            raise EncodingError(f"Expected an integer for {base}, got bool")
        if isinstance(value, str):
            try:
                return int(value, 0)
            except ValueError as exc:
                raise EncodingError(f"Invalid integer for {base}: {value!r}") from exc
        return value

    if base == "bytes" or _FIXED_BYTES_RE.match(base):
        if isinstance(value, str):
            try:
                value = hex_to_bytes(value)
            except ValueError as exc:
                raise EncodingError(f"Invalid hex for {base}: {value!r}") from exc
        match = _FIXED_BYTES_RE.match(base)
        if match and len(value) > int(match.group(1)):
            raise EncodingError(f"Value too long for {base}: {len(value)} bytes")
        return value

    return value


def coerce_args(entry: dict[str, Any], args: Sequence[Any]) -> list[Any]:
    inputs = entry.get("inputs", [])
    if len(args) != len(inputs):
        label = function_signature(entry) if entry.get("name") else "constructor"
        raise EncodingError(
            f"{label} expects {len(inputs)} arguments, got {len(args)}"
        )
    return [coerce_value(p, v) for p, v in zip(inputs, args)]
