# hmycli

A small library and command-line tool for working with Harmony blockchain
data offline: addresses in hex and bech32 form, chain ids, 18-digit
fixed-point amounts, checks on staking inputs, and handling of node
addresses.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package adds an `hmy` command.

```
hmy --help
hmy version
hmy cookbook
hmy docs
hmy blockchain known-chains
hmy utility addr-to-bech32 0x0000000000000000000000000000000000000000
hmy utility bech32-to-addr <SOME_ONE_ADDRESS>
```

- `version` prints the version line to standard error.
- `cookbook` prints worked examples of common commands, with the example
  node URL and network name chosen from `--node`.
- `docs` writes one Markdown file per command into a `hmy-docs` directory
  under the current directory.
- `blockchain known-chains` prints the known chain ids as JSON.
- `utility bech32-to-addr` prints the checksummed hex form of a `one1...`
  address.
- `utility addr-to-bech32` prints the `one1...` form of an address. Hex
  input is read leniently: anything that is not valid hex gives a zero
  (or partly zero) address.

A command given without a subcommand prints its help. Every command
accepts `--help`. If a command fails, its error is printed to standard
error and the exit status is 1.

Global options, accepted by every command:

- `--node` / `-n`: the node address, default `http://localhost:9500`. A
  bare host gets `http://` and port `9500` added. A host with a port gets
  `http://` added. A name that starts with `api` or `ws` gets `https://`
  added.
- `--rpc-prefix` / `-r`: `hmy` (the default) or `eth`. Any other value is
  treated as `hmy`.
- `--verbose` / `-v`: turns on all debug flags, the same as setting the
  environment variable `HMY_ALL_DEBUG`.
- `--no-latest`, `--no-pretty`, `--ledger` / `-e`, `--file`: these are
  accepted and recorded, but none of the commands above use them.

## Library

- `hmycli.address`
  - `Address` is a 20-byte address. `Address.hex()` returns its EIP-55
    checksummed hex form.
  - `hex_to_address` parses hex leniently.
  - `bech32_to_address` decodes a `one1...` address and raises
    `Bech32Error` (a `ValueError`) on bad input.
  - `parse` tries bech32 first and falls back to hex.
  - `to_bech32`, `build_bech32_addr` and `convert_and_encode` encode to
    bech32.
- `hmycli.chain`
  - `ChainID` holds a chain's name and number.
  - `string_to_chain_id` accepts `mainnet`, `testnet`, `pangaea`,
    `partner`, `devnet`, `stressnet` or `dryrun`, or a non-negative integer.
    Any other value raises `ValueError`.
  - `known_chains_json` lists the known chains.
- `hmycli.numeric`
  - `Dec` is a signed decimal with 18 fractional digits. It has `add`,
    `mul`, `quo`, `round_int` (halves go to the even neighbour) and
    `truncate_int`.
  - The constructors are `new_dec`, `new_dec_from_str` and `dec_pow`.
  - `new_dec_from_string` reads non-negative amounts, including exponent
    notation such as `1e18`.
  - `new_dec_from_hex` reads hex quantities such as balances.
- `hmycli.presentation`
  - `json_pretty_format` indents a JSON document by two spaces and returns
    invalid input unchanged.
  - `to_json_unsafe` serialises a value, or returns `"{}"` if it cannot.
- `hmycli.settings`: shared defaults, plus `DebugFlags` and
  `debug_flags_from_env`, which reads the `HMY_RPC_DEBUG`, `HMY_TX_DEBUG`
  and `HMY_ALL_DEBUG` variables.
- `hmycli.staking_checks`
  - `Description` holds a validator's description.
  - `delegation_amount_sanity_check`, `rate_sanity_check`, `ensure_length`,
    `assert_valid_option_string` and `validate_bls_key_input` raise
    `StakingInputError` when a check fails.
- `hmycli.staking_inputs`
  - `gas_price_in_atto`, `parse_gas_limit` and `parse_active` read
    transaction settings. `parse_active` returns an `EposStatus`.
  - `one_amount` and `optional_one_amount` read amounts given in ONE.
  - `create_validator_amounts` returns `CreateValidatorAmounts`.
  - `parse_commission_rates` reads and checks commission rates.
- `hmycli.node`
  - `normalize_node` completes a node address.
  - `endpoint_to_chain_id` and `infer_chain` work out the chain from a node
    address.
  - `is_ip_node` tells whether the host is a literal IP address.
  - `validate_one_address` checks a `one1...` address.
- `hmycli.cookbook`: `cookbook_target` and `cookbook_text` build the
  cookbook text for a node and chain.

```python
from hmycli.address import hex_to_address, to_bech32, bech32_to_address
from hmycli.numeric import new_dec_from_string

addr = hex_to_address("0x0000000000000000000000000000000000000000")
b32 = to_bech32(addr)
assert bech32_to_address(b32) == addr
print(new_dec_from_string("1.5e3"))
```

## What this package does not do

The package never contacts a node. It has no JSON-RPC client, so it
cannot query balances, blocks, transactions, validators or delegations,
and it does not look up a node's sharding structure. The `hmy` command
therefore works out the chain only from the `--node` value, and for the
default local node it assumes testnet.

There is no keystore or account management: the package cannot create,
import, export or remove keys. It cannot generate mnemonics or BLS keys.
It cannot sign or send transfers or staking transactions. It has no
governance commands and no interactive console.

The staking modules only parse and check inputs. The cookbook's examples
mention commands that the `hmy` command here does not provide.