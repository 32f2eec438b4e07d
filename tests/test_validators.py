from decimal import Decimal

import pytest

from nft_sdk.errors import ValidationError
from nft_sdk.validators import (
    MAX_MINT_QUANTITY,
    ROYALTY_FEE_DENOMINATOR,
    validate_address,
    validate_boolean,
    validate_defined,
    validate_equal_length,
    validate_ether_amount,
    validate_gas_price,
    validate_integer,
    validate_integer_sequence,
    validate_non_empty_string,
    validate_transaction_hash,
)

LOC = "[Test.op]"


def _kw(field="value"):
    return {"location": LOC, "message": "bad", "field": field}


@pytest.mark.parametrize(
    "address",
    ["0x" + "ab" * 20, "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"],
)
def test_valid_addresses(address):
    validate_address(address, **_kw("address"))


@pytest.mark.parametrize(
    "address",
    [None, "", "notAValidAddress", "0x1234", "0x5AAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", 42],
)
def test_invalid_addresses(address):
    with pytest.raises(ValidationError) as excinfo:
        validate_address(address, **_kw("address"))
    assert excinfo.value.location == LOC
    assert excinfo.value.field == "address"


def test_defined_and_strings():
    validate_defined("", **_kw())
    with pytest.raises(ValidationError):
        validate_defined(None, **_kw())
    validate_non_empty_string("x", **_kw())
    for bad in ("", "   ", None, 1):
        with pytest.raises(ValidationError):
            validate_non_empty_string(bad, **_kw())


def test_boolean_rejects_truthy_values():
    validate_boolean(False, **_kw())
    with pytest.raises(ValidationError):
        validate_boolean(1, **_kw())
    with pytest.raises(ValidationError):
        validate_boolean("true", **_kw())


@pytest.mark.parametrize("quantity", [1, MAX_MINT_QUANTITY])
def test_quantity_bounds_accept_edges(quantity):
    validate_integer(quantity, gt=0, le=MAX_MINT_QUANTITY, **_kw())


@pytest.mark.parametrize("quantity", [0, MAX_MINT_QUANTITY + 1, -1, 1.0, True, "1"])
def test_quantity_bounds_reject(quantity):
    with pytest.raises(ValidationError):
        validate_integer(quantity, gt=0, le=MAX_MINT_QUANTITY, **_kw())


@pytest.mark.parametrize("fee,ok", [(1, True), (9999, True), (0, False), (ROYALTY_FEE_DENOMINATOR, False)])
def test_fee_bounds_are_exclusive(fee, ok):
    if ok:
        validate_integer(fee, gt=0, lt=ROYALTY_FEE_DENOMINATOR, **_kw())
    else:
        with pytest.raises(ValidationError):
            validate_integer(fee, gt=0, lt=ROYALTY_FEE_DENOMINATOR, **_kw())


def test_integer_sequence():
    validate_integer_sequence([], ge=0, **_kw())
    validate_integer_sequence((0, 1, 2), ge=0, **_kw())
    for bad in ([0, -1], [1, "2"], "012", None, [True]):
        with pytest.raises(ValidationError):
            validate_integer_sequence(bad, ge=0, **_kw())


def test_ether_amount():
    assert validate_ether_amount("0.01", **_kw()) == Decimal("0.01")
    assert validate_ether_amount("0", **_kw()) == Decimal(0)
    for bad in ("-1", "abc", "NaN", "Infinity", 0.01, None):
        with pytest.raises(ValidationError):
            validate_ether_amount(bad, **_kw())


def test_ether_amount_must_be_whole_wei_within_uint256():
    assert validate_ether_amount("0.000000000000000001", **_kw()) == Decimal("1e-18")
    assert validate_ether_amount("1e59", **_kw()) == Decimal("1e59")
    for bad in ("1e80", "1e200", "0.0000000000000000001"):
        with pytest.raises(ValidationError):
            validate_ether_amount(bad, **_kw())
    # Gwei amounts may have up to 9 decimals
    assert validate_gas_price("0.000000001", location=LOC, message="bad") == Decimal("1e-9")
    with pytest.raises(ValidationError):
        validate_gas_price("0.0000000001", location=LOC, message="bad")


def test_gas_price_must_be_positive():
    assert validate_gas_price("1.5", location=LOC, message="bad") == Decimal("1.5")
    with pytest.raises(ValidationError):
        validate_gas_price("0", location=LOC, message="bad")


def test_transaction_hash_shape():
    validate_transaction_hash("0x" + "a" * 64, location=LOC, message="bad")
    for bad in ("0x" + "a" * 63, "a" * 64, "0x" + "g" * 64, None):
        with pytest.raises(ValidationError):
            validate_transaction_hash(bad, location=LOC, message="bad")


def test_equal_length():
    validate_equal_length([1, 2], [3, 4], **_kw())
    with pytest.raises(ValidationError):
        validate_equal_length([1, 2], [3], **_kw())
