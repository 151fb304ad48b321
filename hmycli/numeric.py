"""Fixed-point decimals with 18 fractional digits and amount parsing helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

PRECISION = 18
_MULTIPLIER = 10**PRECISION
_HALF = _MULTIPLIER // 2
_SCIENTIFIC = re.compile(r"[0-9]+\.?[0-9]*[eE][-+]?[0-9]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_ATOI = re.compile(r"[+-]?[0-9]+")
_HEX = re.compile(r"[+-]?[0-9a-fA-F]+")


def _quo_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _chop_precision_and_round(value: int) -> int:
    if value < 0:
        return -_chop_precision_and_round(-value)
    quotient, remainder = divmod(value, _MULTIPLIER)
    if remainder < _HALF:
        return quotient
    if remainder > _HALF:
        return quotient + 1
    return quotient if quotient % 2 == 0 else quotient + 1


@dataclass(frozen=True, order=True)
class Dec:
    """A signed decimal stored as an integer scaled by 10**18."""

    raw: int = 0

    def add(self, other: Dec) -> Dec:
        return Dec(self.raw + other.raw)

    def mul(self, other: Dec) -> Dec:
        return Dec(_chop_precision_and_round(self.raw * other.raw))

    def quo(self, other: Dec) -> Dec:
        scaled = self.raw * _MULTIPLIER * _MULTIPLIER
        return Dec(_chop_precision_and_round(_quo_trunc(scaled, other.raw)))

    def round_int(self) -> int:
        """Round to an integer, halves going to the even neighbour."""
        return _chop_precision_and_round(self.raw)

    def truncate_int(self) -> int:
        """Drop the fractional part, rounding toward zero."""
        return _quo_trunc(self.raw, _MULTIPLIER)

    def __str__(self) -> str:
        sign = "-" if self.raw < 0 else ""
        whole, fraction = divmod(abs(self.raw), _MULTIPLIER)
        return f"{sign}{whole}.{fraction:0{PRECISION}d}"


def new_dec(i: int) -> Dec:
    """Return the decimal equal to the integer i."""
    return Dec(i * _MULTIPLIER)


def new_dec_from_str(s: str) -> Dec:
    """Parse a plain decimal such as '12.5' or '-3'."""
    if not s:
        raise ValueError("decimal string is empty")
    negative = s.startswith("-")
    if negative:
        s = s[1:]
    if not s:
        raise ValueError("decimal string is empty")
    parts = s.split(".")
    if len(parts) > 2:
        raise ValueError("too many periods to be a decimal string")
    combined = parts[0]
    decimals = 0
    if len(parts) == 2:
        decimals = len(parts[1])
        if decimals == 0 or not combined:
            raise ValueError("bad decimal length")
        combined += parts[1]
    if decimals > PRECISION:
        raise ValueError(
            f"too much precision, maximum {PRECISION}, len decimal {decimals}"
        )
    combined += "0" * (PRECISION - decimals)
    if not _INTEGER.fullmatch(combined):
        raise ValueError(f"bad string to integer conversion, combinedStr: {combined}")
    value = int(combined)
    return Dec(-value if negative else value)


def dec_pow(base: Dec, exp: int) -> Dec:
    """Raise base to an integer power by repeated squaring."""
    if exp < 0:
        return dec_pow(new_dec(1).quo(base), -exp)
    result = new_dec(1)
    while True:
        if exp % 2 == 1:
            result = result.mul(base)
        exp >>= 1
        if exp == 0:
            return result
        base = base.mul(base)


def _atoi_or_zero(text: str) -> int:
    return int(text) if _ATOI.fullmatch(text) else 0


def new_dec_from_string(s: str) -> Dec:
    """Parse a non-negative amount, also accepting scientific notation."""
    if s.startswith("-"):
        raise ValueError(f"can not be negative: {s}")
    if _SCIENTIFIC.search(s):
        tokens = s.split("e")
        if len(tokens) == 1:
            tokens = s.split("E")
        mantissa = new_dec_from_str(tokens[0])
        exponent = _atoi_or_zero(tokens[1])
        return mantissa.mul(dec_pow(new_dec(10), exponent))
    if s.startswith("."):
        s = "0" + s
    return new_dec_from_str(s)


def _parse_hex(text: str) -> int:
    if not _HEX.fullmatch(text):
        raise ValueError(f"invalid hex number: {text!r}")
    return int(text, 16)


def new_dec_from_hex(s: str) -> Dec:
    """Parse a hex quantity such as '0x1bc16d674ec80000' into a decimal."""
    if s.startswith("0x"):
        s = s[2:]
    half = len(s) // 2
    right = s[half:]
    right_value = _parse_hex(right)
    if half == 0:
        return new_dec(right_value)
    left_value = _parse_hex(s[:half])
    return new_dec(left_value).mul(dec_pow(new_dec(16), len(right))).add(new_dec(right_value))