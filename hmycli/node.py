"""Node address handling: normalising the --node value and inferring its chain."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Sequence

from hmycli.address import Bech32Error, bech32_to_address
from hmycli.chain import (
    MAINNET,
    PANGAEA,
    PARTNER,
    STRESS,
    TESTNET,
    ChainID,
    string_to_chain_id,
)

HMY_DOCS_DIR = "hmy-docs"
DEFAULT_NODE_ADDR = "http://localhost:9500"
DEFAULT_RPC_PREFIX = "hmy"
DEFAULT_MAINNET_ENDPOINT = "https://api.s0.t.hmny.io/"

_ENDPOINT = re.compile(r"https://api\.s[0-9]\..*\.hmny\.io")

_ENDPOINT_MARKERS = (
    (".t.", MAINNET),
    (".b.", TESTNET),
    (".os.", PANGAEA),
    (".ps.", PARTNER),
    (".stn.", STRESS),
    (".dry.", MAINNET),
)


def normalize_node(node: str) -> str:
    """Add a scheme, and a default port where needed, to a --node value."""
    if node.startswith(("https://", "http://", "ws://")):
        return node
    if node.startswith("api") or node.startswith("ws"):
        return "https://" + node
    components = node.split(":")
    if len(components) == 1:
        return "http://" + node + ":9500"
    if len(components) == 2:
        return "http://" + node
    return node


def endpoint_to_chain_id(node_addr: str) -> ChainID:
    """Guess the chain from the network marker inside an endpoint URL."""
    for marker, chain in _ENDPOINT_MARKERS:
        if marker in node_addr:
            return chain
    return TESTNET


def infer_chain(
    node: str, target_chain: str, shard_routes: Sequence[str] | None
) -> ChainID:
    """Decide which chain a command targets.

    ``node`` is the normalised node address. ``shard_routes`` holds the HTTP
    endpoints of the node's sharding structure, or None if it could not be
    fetched; it is only consulted when ``node`` is the default local node.
    """
    if target_chain:
        return string_to_chain_id(target_chain)
    if node == DEFAULT_NODE_ADDR:
        if shard_routes is None:
            return TESTNET
        routes = list(shard_routes)
        if not routes:
            raise ValueError("empty reply from sharding structure")
        return endpoint_to_chain_id(routes[0])
    if _ENDPOINT.search(node):
        return endpoint_to_chain_id(node)
    if "api.harmony.one" in node:
        return MAINNET
    return TESTNET


def is_ip_node(node: str) -> bool:
    """Tell whether the host part of a node address is a literal IP address."""
    host = node.removeprefix("http://").removeprefix("https://").split(":")[0]
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def validate_one_address(s: str) -> str:
    """Return s if it is a valid bech32 'one' address, else raise ValueError."""
    try:
        bech32_to_address(s)
    except Bech32Error as exc:
        raise ValueError(f"not a valid one address: {exc}") from exc
    return s