import pytest

from hmycli.chain import MAINNET, PANGAEA, PARTNER, STRESS, TESTNET, ChainID
from hmycli.cookbook import cookbook_target, cookbook_text
from hmycli.node import DEFAULT_NODE_ADDR

OTHER_NODE = "http://example.com:9500"


def test_default_node_points_at_mainnet():
    assert cookbook_target(DEFAULT_NODE_ADDR, TESTNET) == (
        "https://api.s0.t.hmny.io",
        "Mainnet",
    )


@pytest.mark.parametrize(
    "chain, expected",
    [
        (MAINNET, ("https://api.s0.t.hmny.io", "Mainnet")),
        (TESTNET, ("https://api.s0.b.hmny.io", "Long-Running Testnet")),
        (PANGAEA, ("https://api.s0.os.hmny.io", "Open Staking Network")),
        (PARTNER, ("https://api.s0.ps.hmny.io", "Partner Testnet")),
        (STRESS, ("https://api.s0.stn.hmny.io", "Stress Testing Network")),
    ],
)
def test_target_for_known_chain(chain, expected):
    assert cookbook_target(OTHER_NODE, chain) == expected


def test_target_for_numeric_chain_is_empty():
    assert cookbook_target(OTHER_NODE, ChainID("7", 7)) == ("", "")


def test_text_has_no_placeholders_left():
    text = cookbook_text(OTHER_NODE, TESTNET)
    assert "[NODE]" not in text
    assert "[NETWORK]" not in text


def test_text_uses_chosen_node_and_network():
    text = cookbook_text(OTHER_NODE, PANGAEA)
    assert (
        "./hmy --node=https://api.s0.os.hmny.io balances <SOME_ONE_ADDRESS>" in text
    )
    assert "Shard 0 of Open Staking Network as argument for --node" in text


def test_text_structure():
    text = cookbook_text(DEFAULT_NODE_ADDR, None)
    assert text.startswith("\nCookbook of Usage\n")
    assert "1.  Check account balance on given chain\n./hmy --node=" in text
    assert text.endswith(
        "PS: key must first use (hmy keys import-private-key) to import\n"
    )
    assert "25. Vote Proposal In Space Of Governance" in text


def test_unknown_chain_leaves_node_blank():
    text = cookbook_text(OTHER_NODE, None)
    assert "./hmy --node= balances <SOME_ONE_ADDRESS>" in text


def test_line_continuations_kept():
    text = cookbook_text(OTHER_NODE, MAINNET)
    assert "--max-total-delegation 10 --rate 0.1\\\n" in text
    assert "./hmy --node=https://api.s0.t.hmny.io transfer \\\n" in text