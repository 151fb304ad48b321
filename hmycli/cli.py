"""The ``hmy`` command line: global options, chain inference and offline commands."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from hmycli.address import Bech32Error, bech32_to_address, parse, to_bech32
from hmycli.chain import ChainID, known_chains_json
from hmycli.cookbook import cookbook_text
from hmycli.node import (
    DEFAULT_NODE_ADDR,
    DEFAULT_RPC_PREFIX,
    HMY_DOCS_DIR,
    infer_chain,
    normalize_node,
)
from hmycli.settings import DebugFlags, debug_flags_from_env

VERSION = ""
COMMIT = ""
BUILT_AT = ""
BUILT_BY = ""
VERSION_WRAP_DUMP = f"{VERSION}-{COMMIT}"

PROG = "hmy"
ROOT_LONG = (
    "\nCLI interface to the Harmony blockchain\n\n"
    "Invoke 'hmy cookbook' for examples of the most common, important usages"
)


@dataclass
class Context:
    """Settings resolved from the global options before a command runs."""

    node: str
    chain: ChainID
    rpc_prefix: str
    debug: DebugFlags
    no_latest: bool = False
    no_pretty: bool = False
    use_ledger: bool = False
    file: str = ""


@dataclass
class _CommandTree:
    entries: list[tuple[str, argparse.ArgumentParser, str]] = field(default_factory=list)

    def add(self, path: str, parser: argparse.ArgumentParser, short: str) -> None:
        self.entries.append((path, parser, short))


Handler = Callable[[argparse.Namespace, Context], None]


def _global_options(parser: argparse.ArgumentParser, *, suppress: bool) -> None:
    def default(value: object) -> object:
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="dump out debug information, same as env var HMY_ALL_DEBUG=true",
    )
    parser.add_argument(
        "-n", "--node", default=default(DEFAULT_NODE_ADDR), metavar="<host>"
    )
    parser.add_argument(
        "-r",
        "--rpc-prefix",
        dest="rpc_prefix",
        default=default(DEFAULT_RPC_PREFIX),
        metavar="<rpc>",
    )
    parser.add_argument(
        "--no-latest",
        dest="no_latest",
        action="store_true",
        default=default(False),
        help="Do not add 'latest' to RPC params",
    )
    parser.add_argument(
        "--no-pretty",
        dest="no_pretty",
        action="store_true",
        default=default(False),
        help="Disable pretty print JSON outputs",
    )
    parser.add_argument(
        "-e",
        "--ledger",
        action="store_true",
        default=default(False),
        help="Use ledger hardware wallet",
    )
    parser.add_argument(
        "--file",
        default=default(""),
        help="Path to file for given command when applicable",
    )


def _help_handler(parser: argparse.ArgumentParser) -> Handler:
    def show(args: argparse.Namespace, ctx: Context) -> None:
        parser.print_help(sys.stdout)

    return show


def _cmd_version(args: argparse.Namespace, ctx: Context) -> None:
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else PROG
    print(
        f"Harmony (C) 2020. {name}, version {VERSION}-{COMMIT} ({BUILT_BY} {BUILT_AT})",
        file=sys.stderr,
    )


def _cmd_cookbook(args: argparse.Namespace, ctx: Context) -> None:
    sys.stdout.write(cookbook_text(ctx.node, ctx.chain))


def _cmd_known_chains(args: argparse.Namespace, ctx: Context) -> None:
    print(known_chains_json())


def _cmd_bech32_to_addr(args: argparse.Namespace, ctx: Context) -> None:
    print(bech32_to_address(args.address).hex())


def _cmd_addr_to_bech32(args: argparse.Namespace, ctx: Context) -> None:
    print(to_bech32(parse(args.address)))


def _markdown_for(path: str, parser: argparse.ArgumentParser, short: str) -> str:
    return f"## {path}\n\n{short}\n\n### Synopsis\n\n```\n{parser.format_help()}```\n"


def _cmd_docs(args: argparse.Namespace, ctx: Context) -> None:
    doc_dir = Path.cwd() / HMY_DOCS_DIR
    doc_dir.mkdir(mode=0o700, exist_ok=True)
    tree: _CommandTree = args.command_tree
    for path, parser, short in tree.entries:
        filename = path.replace(" ", "_") + ".md"
        (doc_dir / filename).write_text(_markdown_for(path, parser, short), encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every command."""
    tree = _CommandTree()
    common = argparse.ArgumentParser(add_help=False)
    _global_options(common, suppress=True)

    root = argparse.ArgumentParser(
        prog=PROG,
        description=ROOT_LONG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _global_options(root, suppress=False)
    root.set_defaults(func=_help_handler(root), command_tree=tree)
    tree.add(PROG, root, "Harmony blockchain")

    def add(
        subparsers: argparse._SubParsersAction,
        parent_path: str,
        name: str,
        short: str,
        handler: Handler | None = None,
        long: str | None = None,
    ) -> argparse.ArgumentParser:
        parser = subparsers.add_parser(
            name,
            help=short,
            description=long if long is not None else short,
            parents=[common],
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.set_defaults(func=handler or _help_handler(parser))
        tree.add(f"{parent_path} {name}", parser, short)
        return parser

    top = root.add_subparsers(title="commands", metavar="<command>")

    add(top, PROG, "version", "Show version", _cmd_version)
    add(
        top,
        PROG,
        "cookbook",
        "Example usages of the most important, frequently used commands",
        _cmd_cookbook,
    )
    add(
        top,
        PROG,
        "docs",
        f"Generate docs to a local {HMY_DOCS_DIR} directory",
        _cmd_docs,
    )

    blockchain_path = f"{PROG} blockchain"
    blockchain = add(
        top,
        PROG,
        "blockchain",
        "Interact with the Harmony.one Blockchain",
        long="\nQuery Harmony's blockchain for completed transaction, historic records\n",
    )
    blockchain_sub = blockchain.add_subparsers(title="commands", metavar="<command>")
    add(
        blockchain_sub,
        blockchain_path,
        "known-chains",
        "Print out the known chain-ids",
        _cmd_known_chains,
    )

    utility_path = f"{PROG} utility"
    utility = add(top, PROG, "utility", "common harmony blockchain utilities")
    utility_sub = utility.add_subparsers(title="commands", metavar="<command>")
    bech32_to_addr = add(
        utility_sub,
        utility_path,
        "bech32-to-addr",
        "0x Address of a bech32 one-address",
        _cmd_bech32_to_addr,
    )
    bech32_to_addr.add_argument("address")
    addr_to_bech32 = add(
        utility_sub,
        utility_path,
        "addr-to-bech32",
        "bech32 one-address of an 0x address",
        _cmd_addr_to_bech32,
    )
    addr_to_bech32.add_argument("address")

    return root


def _resolve_context(args: argparse.Namespace) -> Context:
    debug = debug_flags_from_env()
    if args.verbose:
        debug.enable_all_verbose()
    rpc_prefix = "eth" if args.rpc_prefix == "eth" else "hmy"
    node = normalize_node(args.node)
    chain = infer_chain(node, "", None)
    return Context(
        node=node,
        chain=chain,
        rpc_prefix=rpc_prefix,
        debug=debug,
        no_latest=args.no_latest,
        no_pretty=args.no_pretty,
        use_ledger=args.ledger,
        file=args.file,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        ctx = _resolve_context(args)
        args.func(args, ctx)
    except (ValueError, OSError) as exc:
        print(f"commit: {VERSION_WRAP_DUMP}, error: {exc}", file=sys.stderr)
        print(
            "check hmy cookbook for valid examples or try adding a `--help` flag",
            file=sys.stderr,
        )
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())