"""
Command implementations for the BRC20 Prog helper CLI.

- build:    Compile and write ABI, bytecode and transaction envelopes
- compile:  Compile only and list functions with selectors
- encode:   Encode one ad-hoc call envelope from a compiled ABI
- validate: Check envelope files against the envelope schema
"""
