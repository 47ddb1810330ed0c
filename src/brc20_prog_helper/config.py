"""
Defaults and environment configuration for the BRC20 Prog helper.

Every default here can be overridden per command with a CLI option, and
each option reads a ``BRC20_PROG_*`` environment variable. A ``.env`` in
the working directory is loaded once at start-up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


PROTOCOL_TAG = "brc20-prog"
CONTRACT_ADDRESS_PLACEHOLDER = "REPLACE_THIS_WITH_CONTRACT_ADDRESS"

DEFAULT_SOURCE = "BRC20_Prog.sol"
DEFAULT_CONTRACT = "BRC20_Prog"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_DEPENDENCY_DIR = "node_modules"
DEFAULT_SOLC_VERSION = "0.8.24"
DEFAULT_EVM_VERSION = "cancun"

ENV_SOURCE = "BRC20_PROG_SOURCE"
ENV_CONTRACT = "BRC20_PROG_CONTRACT"
ENV_OUTPUT_DIR = "BRC20_PROG_OUTPUT_DIR"
ENV_DEPENDENCY_DIR = "BRC20_PROG_DEPENDENCY_DIR"
ENV_SOLC_VERSION = "BRC20_PROG_SOLC_VERSION"
ENV_EVM_VERSION = "BRC20_PROG_EVM_VERSION"
ENV_CONTRACT_ADDRESS = "BRC20_PROG_CONTRACT_ADDRESS"


def load_env(env_path: Optional[Path] = None) -> bool:
    """
    Load a ``.env`` file without overriding variables already set.

    Args:
        env_path: Path to the .env file (default: ./.env)

    Returns:
        True if a file was found and loaded
    """
    env_path = env_path or Path.cwd() / ".env"
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)
