"""Worked examples of the most common commands."""

from __future__ import annotations

from hmycli.chain import MAINNET, PANGAEA, PARTNER, STRESS, TESTNET, ChainID
from hmycli.node import DEFAULT_NODE_ADDR

_NODE = "./hmy --node=[NODE]"
_HMY = "./hmy"
_CONTINUATION = " \\\n    "
_IMPORT_NOTE = "PS: key must first use (hmy keys import-private-key) to import"


def _line(*words: str) -> str:
    return " ".join(words)


def _wrapped(first: str, *rest: str) -> str:
    return _CONTINUATION.join((first, *rest))


_NOTES = (
    "Every subcommand recognizes a '--help' flag",
    "\n   ".join(
        (
            "If a passphrase is used by a subcommand, one can enter their own "
            "passphrase interactively",
            "with the --passphrase option. Alternatively, one can pass their own "
            "passphrase via a file",
            "using the --passphrase-file option. If no passphrase option is "
            "selected, the default",
            "passphrase of '' is used.",
        )
    ),
    "These examples use Shard 0 of [NETWORK] as argument for --node",
)

_PROPOSAL_YAML = (
    "space: staking-testnet",
    "start: 2020-04-16 21:45:12",
    "end: 2020-04-21 21:45:12",
    "choices:",
    "  - yes",
    "  - no",
    "title: this is title",
    "body: |",
    "  this is body,",
    "  you can write mutli line",
)

_EXAMPLES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Check account balance on given chain",
        (_line(_NODE, "balances", "<SOME_ONE_ADDRESS>"),),
    ),
    (
        "Check sent transaction",
        (_line(_NODE, "blockchain", "transaction-by-hash", "<SOME_TX_HASH>"),),
    ),
    ("List local account keys", (_line(_HMY, "keys", "list"),)),
    (
        "Sending a transaction (waits 40 seconds for transaction confirmation)",
        (
            _wrapped(
                _line(_NODE, "transfer"),
                _line("--from", "<SOME_ONE_ADDRESS>", "--to", "<SOME_ONE_ADDRESS>"),
                _line("--from-shard", "0", "--to-shard", "1", "--amount", "200", "--passphrase"),
            ),
        ),
    ),
    (
        "Sending a batch of transactions as dictated from a file "
        "(the `--dry-run` options still apply)",
        (
            _line(_NODE, "transfer", "--file", "<PATH_TO_JSON_FILE>"),
            "Check README for details on json file format.",
        ),
    ),
    (
        "Check a completed transaction receipt",
        (_line(_NODE, "blockchain", "transaction-receipt", "<SOME_TX_HASH>"),),
    ),
    (
        "Import an account using the mnemonic. Prompts the user to give the mnemonic.",
        (_line(_HMY, "keys", "recover-from-mnemonic", "<ACCOUNT_NAME>", "--passphrase"),),
    ),
    (
        "Import an existing keystore file",
        (_line(_HMY, "keys", "import-ks", "<PATH_TO_KEYSTORE_JSON>"),),
    ),
    (
        "Import a keystore file using a secp256k1 private key",
        (_line(_HMY, "keys", "import-private-key", "<secp256k1_PRIVATE_KEY>"),),
    ),
    (
        "Export a keystore file's secp256k1 private key",
        (_line(_HMY, "keys", "export-private-key", "<ACCOUNT_ADDRESS>", "--passphrase"),),
    ),
    (
        "Generate a BLS key then encrypt and save the private key to the specified location.",
        (_line(_HMY, "keys", "generate-bls-key", "--bls-file-path", "<PATH_FOR_BLS_KEY_FILE>"),),
    ),
    (
        "Create a new validator with a list of BLS keys",
        (
            _wrapped(
                _line(
                    _NODE, "staking", "create-validator",
                    "--amount", "10", "--validator-addr", "<SOME_ONE_ADDRESS>",
                ),
                _line("--bls-pubkeys", "<BLS_KEY_1>,<BLS_KEY_2>,<BLS_KEY_3>"),
                _line(
                    "--identity", "foo", "--details", "bar", "--name", "baz",
                    "--max-change-rate", "0.1", "--max-rate", "0.1",
                    "--max-total-delegation", "10",
                ),
                _line(
                    "--min-self-delegation", "10", "--rate", "0.1",
                    "--security-contact", "Leo", "", "--website", "harmony.one",
                    "--passphrase",
                ),
            ),
        ),
    ),
    (
        "Edit an existing validator",
        (
            _wrapped(
                _line(_NODE, "staking", "edit-validator"),
                _line(
                    "--validator-addr", "<SOME_ONE_ADDRESS>",
                    "--identity", "foo", "--details", "bar",
                ),
                _line("--name", "baz", "--security-contact", "EK", "--website", "harmony.one"),
                _line("--min-self-delegation", "0", "--max-total-delegation", "10", "--rate", "0.1")
                + _CONTINUATION.lstrip(" ")
                + _line(
                    "--add-bls-key", "<SOME_BLS_KEY>",
                    "--remove-bls-key", "<OTHER_BLS_KEY>", "--passphrase",
                ),
            ),
        ),
    ),
    (
        "Delegate an amount to a validator",
        (
            _wrapped(
                _line(_NODE, "staking", "delegate"),
                _line(
                    "--delegator-addr", "<SOME_ONE_ADDRESS>",
                    "--validator-addr", "<VALIDATOR_ONE_ADDRESS>",
                ),
                _line("--amount", "10", "--passphrase"),
            ),
        ),
    ),
    (
        "Undelegate to a validator",
        (
            _wrapped(
                _line(_NODE, "staking", "undelegate"),
                _line(
                    "--delegator-addr", "<SOME_ONE_ADDRESS>",
                    "--validator-addr", "<VALIDATOR_ONE_ADDRESS>",
                ),
                _line("--amount", "10", "--passphrase"),
            ),
        ),
    ),
    (
        "Collect block rewards as a delegator",
        (
            _wrapped(
                _line(_NODE, "staking", "collect-rewards"),
                _line("--delegator-addr", "<SOME_ONE_ADDRESS>", "--passphrase"),
            ),
        ),
    ),
    ("Check elected validators", (_line(_NODE, "blockchain", "validator", "elected"),)),
    ("Get current staking utility metrics", (_line(_NODE, "blockchain", "utility-metrics"),)),
    (
        "Check in-memory record of failed staking transactions",
        (_line(_NODE, "failures", "staking"),),
    ),
    (
        "Check which shard your BLS public key would be assigned to as a validator",
        (_line(_NODE, "utility", "shard-for-bls", "<BLS_PUBLIC_KEY>"),),
    ),
    ("List Space In Governance", (_line(_HMY, "governance", "list-space"),)),
    (
        "List Proposal In Space Of Governance",
        (
            _line(
                _HMY, "governance", "list-proposal",
                "--space=[space key, example: staking-testnet]",
            ),
        ),
    ),
    (
        "View Proposal In Governance",
        (_line(_HMY, "governance", "view-proposal", "--proposal=[proposal hash]"),),
    ),
    (
        "New Proposal In Space Of Governance",
        (
            _line(
                _HMY, "governance", "new-proposal",
                "--proposal-yaml=[file path]", "--key=[account address]",
            ),
            _IMPORT_NOTE,
            "Yaml example(time is in UTC timezone):",
            *_PROPOSAL_YAML,
        ),
    ),
    (
        "Vote Proposal In Space Of Governance",
        (
            _line(
                _HMY, "governance", "vote-proposal", "--proposal=[proposal hash]",
                "--choice=[your choise text, eg: yes]", "--key=[account address]",
            ),
            _IMPORT_NOTE,
        ),
    ),
)

_TARGETS = (
    (TESTNET, "https://api.s0.b.hmny.io", "Long-Running Testnet"),
    (PANGAEA, "https://api.s0.os.hmny.io", "Open Staking Network"),
    (PARTNER, "https://api.s0.ps.hmny.io", "Partner Testnet"),
    (STRESS, "https://api.s0.stn.hmny.io", "Stress Testing Network"),
)


def _render() -> str:
    header = [
        "Cookbook of Usage",
        "",
        "Note:",
        "",
        *(f"{number}) {note}" for number, note in enumerate(_NOTES, start=1)),
        "",
        "Examples:",
    ]
    blocks = [
        "\n".join((f"{number}.".ljust(4) + heading, *body))
        for number, (heading, body) in enumerate(_EXAMPLES, start=1)
    ]
    return "\n" + "\n".join(header) + "\n\n" + "\n\n".join(blocks) + "\n"


_COOKBOOK = _render()


def cookbook_target(node: str, chain: ChainID | None) -> tuple[str, str]:
    """Return the example node URL and network name to show in the cookbook."""
    if node == DEFAULT_NODE_ADDR or chain == MAINNET:
        return "https://api.s0.t.hmny.io", "Mainnet"
    for known, doc_node, doc_net in _TARGETS:
        if chain == known:
            return doc_node, doc_net
    return "", ""


def cookbook_text(node: str, chain: ChainID | None) -> str:
    """Return the cookbook with examples pointed at the chosen network."""
    doc_node, doc_net = cookbook_target(node, chain)
    return _COOKBOOK.replace("[NODE]", doc_node).replace("[NETWORK]", doc_net)