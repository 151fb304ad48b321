import pytest

from hmycli.numeric import new_dec, new_dec_from_str
from hmycli.staking_checks import (
    ERR_CHANGE_RATE_TOO_LARGE,
    ERR_COMMISSION_RATE_TOO_LARGE,
    ERR_INVALID_CHANGE_RATE_HIGH,
    ERR_INVALID_CHANGE_RATE_LOW,
    ERR_INVALID_COMMISSION_RATE_HIGH,
    ERR_INVALID_COMMISSION_RATE_LOW,
    ERR_INVALID_DESC_FIELD_DETAILS,
    ERR_INVALID_DESC_FIELD_IDENTITY,
    ERR_INVALID_DESC_FIELD_NAME,
    ERR_INVALID_DESC_FIELD_SECURITY_CONTACT,
    ERR_INVALID_DESC_FIELD_WEBSITE,
    ERR_INVALID_MAX_RATE_HIGH,
    ERR_INVALID_MAX_RATE_LOW,
    ERR_INVALID_MAX_TOTAL_DELEGATION,
    ERR_MAX_TOTAL_DELEGATION_TOO_SMALL,
    ERR_MIN_SELF_DELEGATION_TOO_SMALL,
    ERR_SELF_DELEGATION_TOO_LARGE,
    ERR_SELF_DELEGATION_TOO_SMALL,
    MAX_DETAILS_LENGTH,
    MAX_NAME_LENGTH,
    ONE_AS_DEC,
    Description,
    StakingInputError,
    assert_valid_option_string,
    delegation_amount_sanity_check,
    ensure_length,
    rate_sanity_check,
    validate_bls_key_input,
)


def ones(text):
    return new_dec_from_str(text).mul(ONE_AS_DEC)


def rate(text):
    return new_dec_from_str(text)


def test_one_as_dec_matches_integer_one_token():
    assert ONE_AS_DEC.truncate_int() == 10**18


def test_delegation_valid_amounts_pass():
    assert delegation_amount_sanity_check(ones("10"), ones("100"), ones("50")) is None


def test_delegation_amount_at_bounds_passes():
    assert delegation_amount_sanity_check(ones("10"), ones("10"), ones("10")) is None


@pytest.mark.parametrize(
    "min_self, max_total, amount, message",
    [
        ("0.5", "100", "50", ERR_MIN_SELF_DELEGATION_TOO_SMALL),
        ("10", "0.5", "50", ERR_MAX_TOTAL_DELEGATION_TOO_SMALL),
        ("20", "10", "15", ERR_INVALID_MAX_TOTAL_DELEGATION),
        ("10", "100", "5", ERR_SELF_DELEGATION_TOO_SMALL),
        ("10", "100", "150", ERR_SELF_DELEGATION_TOO_LARGE),
    ],
)
def test_delegation_errors(min_self, max_total, amount, message):
    with pytest.raises(StakingInputError, match=f"^{message}$"):
        delegation_amount_sanity_check(ones(min_self), ones(max_total), ones(amount))


def test_delegation_amount_ignored_when_bound_missing():
    assert delegation_amount_sanity_check(ones("10"), None, ones("1")) is None


def test_delegation_none_skips_all_checks():
    assert delegation_amount_sanity_check(None, None, None) is None


def test_delegation_single_bound_still_checked():
    with pytest.raises(StakingInputError, match=ERR_MAX_TOTAL_DELEGATION_TOO_SMALL):
        delegation_amount_sanity_check(None, new_dec(0), None)


def test_rate_valid_passes():
    assert rate_sanity_check(rate("0.1"), rate("0.1"), rate("0.1")) is None


def test_rate_extremes_pass():
    assert rate_sanity_check(new_dec(0), new_dec(1), new_dec(1)) is None


@pytest.mark.parametrize(
    "r, max_r, change, message",
    [
        ("-0.1", "0.5", "0.1", ERR_INVALID_COMMISSION_RATE_LOW),
        ("1.5", "0.5", "0.1", ERR_INVALID_COMMISSION_RATE_HIGH),
        ("0.1", "-0.5", "0.1", ERR_INVALID_MAX_RATE_LOW),
        ("0.1", "1.5", "0.1", ERR_INVALID_MAX_RATE_HIGH),
        ("0.1", "0.5", "-0.1", ERR_INVALID_CHANGE_RATE_LOW),
        ("0.1", "0.5", "1.1", ERR_INVALID_CHANGE_RATE_HIGH),
        ("0.6", "0.5", "0.1", ERR_COMMISSION_RATE_TOO_LARGE),
        ("0.1", "0.5", "0.6", ERR_CHANGE_RATE_TOO_LARGE),
    ],
)
def test_rate_errors(r, max_r, change, message):
    with pytest.raises(StakingInputError, match=f"^{message}$"):
        rate_sanity_check(rate(r), rate(max_r), rate(change))


def test_ensure_length_returns_description():
    desc = Description("baz", "foo", "harmony.one", "Leo", "bar")
    assert ensure_length(desc) == desc


def test_ensure_length_at_limits():
    desc = Description(name="a" * MAX_NAME_LENGTH, details="d" * MAX_DETAILS_LENGTH)
    assert ensure_length(desc) is desc


@pytest.mark.parametrize(
    "field, size, message",
    [
        ("name", 141, ERR_INVALID_DESC_FIELD_NAME),
        ("identity", 141, ERR_INVALID_DESC_FIELD_IDENTITY),
        ("website", 141, ERR_INVALID_DESC_FIELD_WEBSITE),
        ("security_contact", 141, ERR_INVALID_DESC_FIELD_SECURITY_CONTACT),
        ("details", 281, ERR_INVALID_DESC_FIELD_DETAILS),
    ],
)
def test_ensure_length_errors(field, size, message):
    with pytest.raises(StakingInputError, match=f"^{message}$"):
        ensure_length(Description(**{field: "x" * size}))


def test_ensure_length_counts_utf8_bytes():
    with pytest.raises(StakingInputError, match=ERR_INVALID_DESC_FIELD_NAME):
        ensure_length(Description(name="é" * 71))


def test_assert_valid_option_string_rejects_flag():
    with pytest.raises(StakingInputError, match="invalid or missing option"):
        assert_valid_option_string("--name")


@pytest.mark.parametrize("value", ["", "0xabc", "abc-def"])
def test_assert_valid_option_string_accepts(value):
    assert assert_valid_option_string(value) is None


def test_validate_bls_key_input_accepts_keys():
    assert validate_bls_key_input("0xabc", "", ["0x1", "0x2"]) is None


@pytest.mark.parametrize(
    "add, remove, keys, context",
    [
        ("--remove-bls-key", "", [], "BLS key to add error"),
        ("", "-x", [], "BLS key to remove error"),
        ("", "", ["0x1", "--amount"], "BLS key to create validator error"),
    ],
)
def test_validate_bls_key_input_errors(add, remove, keys, context):
    with pytest.raises(StakingInputError) as info:
        validate_bls_key_input(add, remove, keys)
    assert str(info.value) == f"{context}: invalid or missing option"