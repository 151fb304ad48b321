"""Defaults shared across the command line tool, and debug switches."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_CONFIG_DIR_NAME = ".hmy_cli"
DEFAULT_CONFIG_ACCOUNT_ALIASES_DIR_NAME = "account-keys"
DEFAULT_COMMAND_ALIASES_DIR_NAME = "command"
DEFAULT_PASSPHRASE = ""
JSON_RPC_VERSION = "2.0"
SECP256K1_PRIVATE_KEY_BYTES_LENGTH = 32
SCRYPT_N = 1 << 18
SCRYPT_P = 1


@dataclass
class DebugFlags:
    """Which kinds of debug output are switched on."""

    rpc: bool = False
    transaction: bool = False

    def enable_all_verbose(self) -> None:
        self.rpc = True
        self.transaction = True


def debug_flags_from_env(environ: Mapping[str, str] | None = None) -> DebugFlags:
    """Build debug flags from the presence of HMY_*_DEBUG variables."""
    env = os.environ if environ is None else environ
    flags = DebugFlags(
        rpc="HMY_RPC_DEBUG" in env,
        transaction="HMY_TX_DEBUG" in env,
    )
    if "HMY_ALL_DEBUG" in env:
        flags.enable_all_verbose()
    return flags