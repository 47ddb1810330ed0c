"""
Compiler - Solidity compilation and import resolution.

Wraps py-solc-x's standard-JSON interface. Imports are resolved from the
working directory first and the dependency directory second.
"""
