"""Sanity checks on staking command inputs: amounts, commission rates, descriptions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from hmycli.numeric import Dec, new_dec

ONE_AS_DEC = new_dec(10**18)
NANO_AS_DEC = new_dec(10**9)

BLS_PUB_KEY_SIZE = 48
MAX_NAME_LENGTH = 140
MAX_IDENTITY_LENGTH = 140
MAX_WEBSITE_LENGTH = 140
MAX_SECURITY_CONTACT_LENGTH = 140
MAX_DETAILS_LENGTH = 280

ERR_SELF_DELEGATION_TOO_SMALL = "amount can not be less than min-self-delegation"
ERR_SELF_DELEGATION_TOO_LARGE = "amount can not be greater than max-total-delegation"
ERR_MIN_SELF_DELEGATION_TOO_SMALL = "min-self-delegation can not be less than 1 ONE"
ERR_MAX_TOTAL_DELEGATION_TOO_SMALL = "max-total-delegation can not be less than 1 ONE"
ERR_INVALID_MAX_TOTAL_DELEGATION = (
    "max-total-delegation can not be less than min-self-delegation"
)
ERR_COMMISSION_RATE_TOO_LARGE = "rate can not be greater than max-commission-rate"
ERR_CHANGE_RATE_TOO_LARGE = "max-change-rate can not be greater than max-commission-rate"
ERR_INVALID_COMMISSION_RATE_LOW = "rate can not be less than 0, must be between 0 and 1"
ERR_INVALID_COMMISSION_RATE_HIGH = (
    "rate can not be greater than 1, must be between 0 and 1"
)
ERR_INVALID_CHANGE_RATE_LOW = (
    "max-change-rate can not be less than 0, must be between 0 and 1"
)
ERR_INVALID_CHANGE_RATE_HIGH = (
    "max-change-rate can not be greater than 1, must be between 0 and 1"
)
ERR_INVALID_MAX_RATE_LOW = (
    "max-commission-rate can not be less than 0, must be between 0 and 1"
)
ERR_INVALID_MAX_RATE_HIGH = (
    "max-commission-rate can not be greater than 1, must be between 0 and 1"
)
ERR_INVALID_DESC_FIELD_NAME = "exceeds maximum length of 140 characters for name"
ERR_INVALID_DESC_FIELD_IDENTITY = "exceeds maximum length of 140 characters for identity"
ERR_INVALID_DESC_FIELD_WEBSITE = "exceeds maximum length of 140 characters for website"
ERR_INVALID_DESC_FIELD_SECURITY_CONTACT = (
    "exceeds maximum length of 140 characters for security-contact"
)
ERR_INVALID_DESC_FIELD_DETAILS = "exceeds maximum length of 280 characters for details"
ERR_NEGATIVE_AMOUNT = "amount can not be negative"
ERR_INVALID_OPTION = "invalid or missing option"


class StakingInputError(ValueError):
    """Raised when a staking command input fails a sanity check."""


@dataclass(frozen=True)
class Description:
    """The public description of a validator."""

    name: str = ""
    identity: str = ""
    website: str = ""
    security_contact: str = ""
    details: str = ""


def delegation_amount_sanity_check(
    min_self_delegation: Dec | None,
    max_total_delegation: Dec | None,
    amount: Dec | None,
) -> None:
    """Check delegation bounds; any argument may be None to skip its checks."""
    if min_self_delegation is not None and min_self_delegation < ONE_AS_DEC:
        raise StakingInputError(ERR_MIN_SELF_DELEGATION_TOO_SMALL)
    if max_total_delegation is not None and max_total_delegation < ONE_AS_DEC:
        raise StakingInputError(ERR_MAX_TOTAL_DELEGATION_TOO_SMALL)
    if min_self_delegation is None or max_total_delegation is None:
        return
    if max_total_delegation < min_self_delegation:
        raise StakingInputError(ERR_INVALID_MAX_TOTAL_DELEGATION)
    if amount is not None:
        if amount < min_self_delegation:
            raise StakingInputError(ERR_SELF_DELEGATION_TOO_SMALL)
        if amount > max_total_delegation:
            raise StakingInputError(ERR_SELF_DELEGATION_TOO_LARGE)


def rate_sanity_check(rate: Dec, max_rate: Dec, max_change_rate: Dec) -> None:
    """Check that commission rates lie in [0, 1] and respect the maximum rate."""
    hundred_percent = new_dec(1)
    zero_percent = new_dec(0)
    checks = (
        (rate < zero_percent, ERR_INVALID_COMMISSION_RATE_LOW),
        (rate > hundred_percent, ERR_INVALID_COMMISSION_RATE_HIGH),
        (max_rate < zero_percent, ERR_INVALID_MAX_RATE_LOW),
        (max_rate > hundred_percent, ERR_INVALID_MAX_RATE_HIGH),
        (max_change_rate < zero_percent, ERR_INVALID_CHANGE_RATE_LOW),
        (max_change_rate > hundred_percent, ERR_INVALID_CHANGE_RATE_HIGH),
        (rate > max_rate, ERR_COMMISSION_RATE_TOO_LARGE),
        (max_change_rate > max_rate, ERR_CHANGE_RATE_TOO_LARGE),
    )
    for failed, message in checks:
        if failed:
            raise StakingInputError(message)


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def ensure_length(description: Description) -> Description:
    """Return the description if every field fits its byte-length limit."""
    limits = (
        (description.name, MAX_NAME_LENGTH, ERR_INVALID_DESC_FIELD_NAME),
        (description.identity, MAX_IDENTITY_LENGTH, ERR_INVALID_DESC_FIELD_IDENTITY),
        (description.website, MAX_WEBSITE_LENGTH, ERR_INVALID_DESC_FIELD_WEBSITE),
        (
            description.security_contact,
            MAX_SECURITY_CONTACT_LENGTH,
            ERR_INVALID_DESC_FIELD_SECURITY_CONTACT,
        ),
        (description.details, MAX_DETAILS_LENGTH, ERR_INVALID_DESC_FIELD_DETAILS),
    )
    for value, limit, message in limits:
        if _byte_length(value) > limit:
            raise StakingInputError(message)
    return description


def assert_valid_option_string(value: str) -> None:
    """Reject a non-numeric option value that looks like another flag."""
    if value.startswith("-"):
        raise StakingInputError(ERR_INVALID_OPTION)


def _check_with_context(value: str, context: str) -> None:
    try:
        assert_valid_option_string(value)
    except StakingInputError as exc:
        raise StakingInputError(f"{context}: {exc}") from exc


def validate_bls_key_input(
    slot_key_to_add: str, slot_key_to_remove: str, bls_pubkeys: Iterable[str]
) -> None:
    """Check that no BLS key option was given another flag as its value."""
    _check_with_context(slot_key_to_add, "BLS key to add error")
    _check_with_context(slot_key_to_remove, "BLS key to remove error")
    for key in bls_pubkeys:
        _check_with_context(key, "BLS key to create validator error")