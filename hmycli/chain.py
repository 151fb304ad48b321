"""Known Harmony chain identifiers."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

_INT64_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ChainID:
    """A chain's human name together with its numeric id."""

    name: str
    value: int


MAINNET = ChainID("mainnet", 1)
TESTNET = ChainID("testnet", 2)
PANGAEA = ChainID("pangaea", 3)
PARTNER = ChainID("partner", 4)
STRESS = ChainID("stress", 5)

KNOWN_CHAINS = {
    "mainnet": MAINNET,
    "testnet": TESTNET,
    "pangaea": PANGAEA,
    "partner": PARTNER,
    "stress": STRESS,
}

_BY_NAME = {
    "mainnet": MAINNET,
    "testnet": TESTNET,
    "pangaea": PANGAEA,
    "devnet": PARTNER,
    "partner": PARTNER,
    "stressnet": STRESS,
    "dryrun": MAINNET,
}


def string_to_chain_id(name: str) -> ChainID:
    """Return the chain for a known name or a non-negative integer string."""
    if name in _BY_NAME:
        return _BY_NAME[name]
    if _DECIMAL.fullmatch(name):
        value = int(name)
        if 0 <= value <= _INT64_MAX:
            return ChainID(str(value), value)
    raise ValueError(f"unknown chain-id: {name}")


def known_chains_json() -> str:
    """Return the known chains as indented JSON."""
    return json.dumps(
        {key: {"chain-as-number": chain.value} for key, chain in KNOWN_CHAINS.items()},
        indent=2,
    )