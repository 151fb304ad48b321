import json

import pytest

from hmycli.chain import (
    MAINNET,
    PARTNER,
    STRESS,
    TESTNET,
    ChainID,
    known_chains_json,
    string_to_chain_id,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("mainnet", MAINNET),
        ("testnet", TESTNET),
        ("devnet", PARTNER),
        ("partner", PARTNER),
        ("stressnet", STRESS),
        ("dryrun", MAINNET),
    ],
)
def test_named_chains(name, expected):
    assert string_to_chain_id(name) is expected


def test_mainnet_value():
    assert string_to_chain_id("mainnet").value == 1


def test_numeric_chain():
    assert string_to_chain_id("42") == ChainID("42", 42)


def test_numeric_chain_with_sign_is_normalised():
    assert string_to_chain_id("+7").name == "7"


@pytest.mark.parametrize("name", ["-1", "foo", "stress", "", "1.5"])
def test_unknown_chain_rejected(name):
    with pytest.raises(ValueError, match="unknown chain-id"):
        string_to_chain_id(name)


def test_known_chains_json_content():
    assert json.loads(known_chains_json()) == {
        "mainnet": {"chain-as-number": 1},
        "testnet": {"chain-as-number": 2},
        "pangaea": {"chain-as-number": 3},
        "partner": {"chain-as-number": 4},
        "stress": {"chain-as-number": 5},
    }


def test_known_chains_json_layout():
    assert known_chains_json().startswith('{\n  "mainnet": {\n    "chain-as-number": 1\n  }')