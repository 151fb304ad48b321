"""Harmony account addresses: 20-byte values shown as checksummed hex or bech32."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from Crypto.Hash import keccak

HASH_LENGTH = 32
ADDRESS_LENGTH = 20
BECH32_ADDRESS_HRP = "one"

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_REV = {char: index for index, char in enumerate(_CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_HEX_PAIRS = re.compile(r"(?:[0-9a-fA-F]{2})*")


class Bech32Error(ValueError):
    """Raised when a bech32 string cannot be decoded or encoded."""


@dataclass(frozen=True)
class Address:
    """A 20-byte account address."""

    data: bytes = bytes(ADDRESS_LENGTH)

    def __post_init__(self) -> None:
        if len(self.data) != ADDRESS_LENGTH:
            raise ValueError(
                f"address must be {ADDRESS_LENGTH} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    def hex(self) -> str:
        """Return the EIP-55 mixed-case checksummed hex form."""
        lower = self.data.hex()
        digest = keccak.new(digest_bits=256, data=lower.encode("ascii")).hexdigest()
        return "0x" + "".join(
            char.upper() if char.isalpha() and int(nibble, 16) >= 8 else char
            for char, nibble in zip(lower, digest)
        )

    def __str__(self) -> str:
        return self.hex()


def _address_from_tail(raw: bytes) -> Address:
    return Address(raw[-ADDRESS_LENGTH:].rjust(ADDRESS_LENGTH, b"\0"))


def hex_to_address(s: str) -> Address:
    """Parse a hex string leniently; invalid input yields a (partly) zero address."""
    if len(s) >= 2 and s[0] == "0" and s[1] in "xX":
        s = s[2:]
    if len(s) % 2:
        s = "0" + s
    valid = _HEX_PAIRS.match(s).group(0)
    return _address_from_tail(bytes.fromhex(valid))


def _polymod(values: Iterable[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, data: list[int]) -> list[int]:
    mod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(mod >> 5 * (5 - position)) & 31 for position in range(6)]


def _bech32_encode(hrp: str, data: list[int]) -> str:
    combined = data + _create_checksum(hrp, data)
    return hrp + "1" + "".join(_CHARSET[value] for value in combined)


def _bech32_decode(bech: str) -> tuple[str, list[int]]:
    if not 8 <= len(bech) <= 90:
        raise Bech32Error(f"invalid bech32 string length {len(bech)}")
    for char in bech:
        if not 33 <= ord(char) <= 126:
            raise Bech32Error(f"invalid character in string: {char!r}")
    lower = bech.lower()
    if bech != lower and bech != bech.upper():
        raise Bech32Error("string not all lowercase or all uppercase")
    bech = lower
    one = bech.rfind("1")
    if one < 1 or one + 7 > len(bech):
        raise Bech32Error(f"invalid index of 1: {one}")
    hrp = bech[:one]
    try:
        data = [_CHARSET_REV[char] for char in bech[one + 1 :]]
    except KeyError as exc:
        raise Bech32Error(
            f"invalid character not part of charset: {exc.args[0]!r}"
        ) from None
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise Bech32Error("checksum failed")
    return hrp, data[:-6]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    max_value = (1 << to_bits) - 1
    acc_mask = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise Bech32Error(f"invalid data range: {value}")
        acc = ((acc << from_bits) | value) & acc_mask
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise Bech32Error("invalid padding")
    return out


def _decode_and_convert(bech: str) -> tuple[str, bytes]:
    try:
        hrp, data = _bech32_decode(bech)
        converted = _convert_bits(data, 5, 8, False)
    except Bech32Error as exc:
        raise Bech32Error(f"decoding bech32 failed: {exc}") from exc
    return hrp, bytes(converted)


def bech32_to_address(b32: str) -> Address:
    """Decode a bech32 address with the 'one' human-readable part."""
    try:
        hrp, raw = _decode_and_convert(b32)
    except Bech32Error as exc:
        raise Bech32Error(f'cannot decode "{b32}" as bech32 address: {exc}') from exc
    if len(raw) != ADDRESS_LENGTH:
        raise Bech32Error(f'decoded bech32 "{b32}" has invalid length {len(raw)}')
    if hrp != BECH32_ADDRESS_HRP:
        raise Bech32Error(f'"{b32}" is not a "{BECH32_ADDRESS_HRP}" address')
    return Address(raw)


def parse(s: str) -> Address:
    """Parse an address as bech32, falling back to lenient hex."""
    try:
        return bech32_to_address(s)
    except Bech32Error:
        return hex_to_address(s)


def convert_and_encode(hrp: str, data: bytes) -> str:
    """Encode raw bytes as bech32 under the given human-readable part."""
    try:
        converted = _convert_bits(data, 8, 5, True)
    except Bech32Error as exc:
        raise Bech32Error(f"encoding bech32 failed: {exc}") from exc
    return _bech32_encode(hrp, converted)


def build_bech32_addr(hrp: str, addr: Address) -> str:
    """Encode an address as bech32 under the given human-readable part."""
    return convert_and_encode(hrp, addr.data)


def to_bech32(addr: Address) -> str:
    """Return the 'one1...' form of an address."""
    return build_bech32_addr(BECH32_ADDRESS_HRP, addr)