from __future__ import annotations

import json
import string
from pathlib import Path
from typing import Any

from eth_hash.auto import keccak

HEX_DIGITS = frozenset(string.hexdigits)


def keccak256(data: bytes) -> bytes:
    # Keccak-256, not NIST SHA3-256: never hashlib.sha3_256 here.
    return keccak(data)


def strip_0x(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def add_0x(value: str) -> str:
    return "0x" + strip_0x(value)


def is_hex(value: str) -> bool:
    body = strip_0x(value)
    return len(body) % 2 == 0 and all(c in HEX_DIGITS for c in body)


def hex_to_bytes(value: str) -> bytes:
    body = strip_0x(value)
    if not is_hex(body):
        raise ValueError(f"Not a hex string: {value!r}")
    return bytes.fromhex(body)


def dump_compact(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def dump_pretty(payload: Any) -> str:
    return json.dumps(payload, indent=4, ensure_ascii=False)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
