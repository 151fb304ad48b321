"""Parsing of staking command inputs into amounts, rates and transaction settings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from hmycli.numeric import Dec, new_dec_from_string
from hmycli.staking_checks import (
    NANO_AS_DEC,
    ONE_AS_DEC,
    delegation_amount_sanity_check,
    rate_sanity_check,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MODULUS = 2**64
_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class EposStatus(IntEnum):
    """Eligibility a validator asks for when it is edited."""

    NIL = 0
    ACTIVE = 1
    INACTIVE = 2


@dataclass(frozen=True)
class CreateValidatorAmounts:
    """Amounts in atto for a create-validator transaction, already rounded."""

    amount: int
    min_self_delegation: int
    max_total_delegation: int


def gas_price_in_atto(gas_price: str) -> int:
    """Convert a gas price given in nano ONE to a whole number of atto."""
    return new_dec_from_string(gas_price).mul(NANO_AS_DEC).truncate_int()


def parse_gas_limit(gas_limit: str) -> int | None:
    """Parse an explicit gas limit; an empty string means it is to be computed."""
    if gas_limit == "":
        return None
    if not _SIGNED_DECIMAL.fullmatch(gas_limit):
        raise ValueError(f'parsing "{gas_limit}": invalid syntax')
    value = int(gas_limit)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'parsing "{gas_limit}": value out of range')
    return value % _UINT64_MODULUS


def parse_active(value: str) -> EposStatus:
    """Map the --active option to an eligibility status."""
    if value == "":
        return EposStatus.NIL
    if value in _TRUE_WORDS:
        return EposStatus.ACTIVE
    if value in _FALSE_WORDS:
        return EposStatus.INACTIVE
    raise ValueError(f'parsing "{value}": invalid syntax')


def one_amount(value: str) -> Dec:
    """Parse an amount in ONE and scale it to atto."""
    return new_dec_from_string(value).mul(ONE_AS_DEC)


def optional_one_amount(value: str) -> Dec | None:
    """Like one_amount, but an empty string gives None."""
    if value == "":
        return None
    return one_amount(value)


def create_validator_amounts(
    amount: str, min_self_delegation: str, max_total_delegation: str
) -> CreateValidatorAmounts:
    """Parse and check the amounts of a new validator."""
    amount_dec = one_amount(amount)
    min_dec = one_amount(min_self_delegation)
    max_dec = one_amount(max_total_delegation)
    delegation_amount_sanity_check(min_dec, max_dec, amount_dec)
    return CreateValidatorAmounts(
        amount=amount_dec.round_int(),
        min_self_delegation=min_dec.round_int(),
        max_total_delegation=max_dec.round_int(),
    )


def parse_commission_rates(
    rate: str, max_rate: str, max_change_rate: str
) -> tuple[Dec, Dec, Dec]:
    """Parse and check the commission rates of a new validator."""
    rate_dec = new_dec_from_string(rate)
    max_rate_dec = new_dec_from_string(max_rate)
    max_change_dec = new_dec_from_string(max_change_rate)
    rate_sanity_check(rate_dec, max_rate_dec, max_change_dec)
    return rate_dec, max_rate_dec, max_change_dec