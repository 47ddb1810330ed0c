"""
Literal example calls written by ``build``.

Each entry becomes ``<contract>_<stem>_tx.json``. The arguments are fixed
so that every run produces byte-identical payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

BTC_ADDRESS = "bc1q9vza2e8x573nczrlzms0wvx3gsqjx7vavgkx0l"
BIP322_MESSAGE = "Hello World"
BIP322_SIGNATURE = (
    "AkgwRQIhAOzyynlqt93lOKJr+wmmxIens//zPzl9tqIOua93wO6MAiBi5n5EyAcPScOjf1lAqIUIQ"
    "tr3zKNeavYabHyR8eGhowEhAsfxIAMZZEKUPYWI4BruhAQjzFT8FSFSajuFwrDL1Yhy"
)
BRC20_TICKER = "bleh"
# https://mempool.space/signet/tx/4183fb733b9553ca8b93208c91dda18bee3d0b8510720b15d76d979af7fd9926
BTC_TXID = "4183fb733b9553ca8b93208c91dda18bee3d0b8510720b15d76d979af7fd9926"
BTC_VOUT = 2
BTC_SAT = 250000
LOCK_BLOCK_COUNT = 100


@dataclass(frozen=True)
class ExampleCall:
    stem: str
    function: str
    args: tuple[Any, ...]


EXAMPLE_CALLS: tuple[ExampleCall, ...] = (
    ExampleCall(
        "bip322_verify",
        "verifyBIP322Signature",
        (BTC_ADDRESS, BIP322_MESSAGE, BIP322_SIGNATURE),
    ),
    ExampleCall("brc20_balance", "getBrc20BalanceOf", (BRC20_TICKER, BTC_ADDRESS)),
    ExampleCall("btc_tx_details", "getTxDetails", (BTC_TXID,)),
    ExampleCall("btc_last_sat_loc", "getLastSatLocation", (BTC_TXID, BTC_VOUT, BTC_SAT)),
    ExampleCall("btc_locked_pkscript", "getLockedPkscript", (BTC_TXID, LOCK_BLOCK_COUNT)),
)
