"""
Input validators shared by every operation.

Each validator either returns silently or raises ``ValidationError`` tagged
with the caller's location. Validators never touch the network, so a failing
check guarantees that no external call has been made.
"""

import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Mapping, Optional, Sequence

from web3 import Web3

from .errors import ValidationError

# Business rules
MAX_MINT_QUANTITY = 20
ROYALTY_FEE_DENOMINATOR = 10000

# Largest value a uint256 can hold
MAX_UINT256 = 2**256 - 1

_UNIT_DECIMALS = {"ether": 18, "gwei": 9}

_TX_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _in_bounds(
    value: int,
    gt: Optional[int],
    ge: Optional[int],
    lt: Optional[int],
    le: Optional[int],
) -> bool:
    if gt is not None and not value > gt:
        return False
    if ge is not None and not value >= ge:
        return False
    if lt is not None and not value < lt:
        return False
    if le is not None and not value <= le:
        return False
    return True


def validate_address(value: Any, *, location: str, message: str, field: str = "address") -> None:
    """
    Validate an account or contract address.

    Accepts lowercase or correctly checksummed 0x-prefixed hex addresses.
    """
    if not value or not isinstance(value, str) or not Web3.is_address(value):
        raise ValidationError(message, location, field=field)


def validate_defined(value: Any, *, location: str, message: str, field: str) -> None:
    """Validate that a value was supplied (``None`` means missing)."""
    if value is None:
        raise ValidationError(message, location, field=field)


def validate_non_empty_string(value: Any, *, location: str, message: str, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message, location, field=field)


def validate_boolean(value: Any, *, location: str, message: str, field: str) -> None:
    if not isinstance(value, bool):
        raise ValidationError(message, location, field=field)


def validate_integer(
    value: Any,
    *,
    location: str,
    message: str,
    field: str,
    gt: Optional[int] = None,
    ge: Optional[int] = None,
    lt: Optional[int] = None,
    le: Optional[int] = None,
) -> None:
    """
    Validate an integer and its optional bounds.

    Args:
        value: Candidate value (``bool`` is rejected)
        location: Location tag of the calling operation
        message: Error message on failure
        field: Name of the validated field
        gt, ge, lt, le: Exclusive/inclusive lower and upper bounds

    Raises:
        ValidationError: If the value is not an integer or out of bounds
    """
    if not _is_integer(value) or not _in_bounds(value, gt, ge, lt, le):
        raise ValidationError(message, location, field=field)


def validate_integer_sequence(
    values: Any,
    *,
    location: str,
    message: str,
    field: str,
    gt: Optional[int] = None,
    ge: Optional[int] = None,
) -> None:
    """Validate a list or tuple of integers, each satisfying the lower bound."""
    if not isinstance(values, (list, tuple)):
        raise ValidationError(message, location, field=field)
    for value in values:
        if not _is_integer(value) or not _in_bounds(value, gt, ge, None, None):
            raise ValidationError(message, location, field=field)


def _to_wei(amount: Decimal, unit: str) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 120
        return amount.scaleb(_UNIT_DECIMALS[unit])


def validate_ether_amount(
    value: Any,
    *,
    location: str,
    message: str,
    field: str,
    unit: str = "ether",
) -> Decimal:
    """
    Validate a non-negative decimal amount expressed in ``unit``.

    The amount must convert to a whole number of wei that fits in a uint256.

    Args:
        value: Decimal string (e.g. ``"0.01"``) or ``Decimal``
        unit: ``"ether"`` or ``"gwei"``

    Returns:
        The parsed amount
    """
    if isinstance(value, bool) or not isinstance(value, (str, Decimal)):
        raise ValidationError(message, location, field=field)
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValidationError(message, location, field=field) from None
    if not amount.is_finite() or amount < 0:
        raise ValidationError(message, location, field=field)
    # Anything above 1e100 overflows a uint256 whatever the unit
    if amount.adjusted() > 100:
        raise ValidationError(message, location, field=field)
    wei = _to_wei(amount, unit)
    if wei != wei.to_integral_value() or wei > MAX_UINT256:
        raise ValidationError(message, location, field=field)
    return amount


def validate_gas_price(value: Any, *, location: str, message: str, field: str = "gas_price") -> Decimal:
    """Validate a gas price given in gwei; it must be strictly positive."""
    amount = validate_ether_amount(value, location=location, message=message, field=field, unit="gwei")
    if amount == 0:
        raise ValidationError(message, location, field=field)
    return amount


def validate_mapping(value: Any, *, location: str, message: str, field: str) -> None:
    if not isinstance(value, Mapping):
        raise ValidationError(message, location, field=field)


def validate_transaction_hash(value: Any, *, location: str, message: str, field: str = "tx_hash") -> None:
    if not isinstance(value, str) or not _TX_HASH_RE.match(value):
        raise ValidationError(message, location, field=field)


def validate_equal_length(
    first: Sequence[Any],
    second: Sequence[Any],
    *,
    location: str,
    message: str,
    field: str,
) -> None:
    if len(first) != len(second):
        raise ValidationError(message, location, field=field)
