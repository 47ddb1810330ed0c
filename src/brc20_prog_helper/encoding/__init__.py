"""
Encoding - ABI lookup and unsigned transaction payloads.

Uses eth-abi for argument encoding and eth-hash for Keccak-256 selectors.
"""
