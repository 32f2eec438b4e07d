"""Transfer and approval operations common to ERC721 templates."""

from typing import Optional

from web3 import Web3

from ..messages import ErrorLocation, ErrorMessage
from ..provider import PendingWrite
from ..validators import (
    validate_address,
    validate_boolean,
    validate_gas_price,
    validate_integer,
)
from .base import ContractBinding


class ERC721Transfers:
    """ERC721 transfer/approval calls bound to a template's lifecycle."""

    def __init__(self, binding: ContractBinding) -> None:
        self._binding = binding

    async def transfer(
        self,
        from_address: str,
        to_address: str,
        token_id: int,
        gas_price: Optional[str] = None,
    ) -> PendingWrite:
        """
        Transfer ``token_id`` between two addresses with ``safeTransferFrom``.

        Args:
            from_address: Current owner of the token
            to_address: Recipient
            token_id: ID of the token to transfer
            gas_price: Optional gas price in gwei (decimal string)

        Returns:
            PendingWrite for the transfer transaction
        """
        location = ErrorLocation.BASE_ERC721_TRANSFER
        self._binding.require_bound(location)
        validate_address(
            from_address,
            location=location,
            message=ErrorMessage.INVALID_FROM_ADDRESS,
            field="from_address",
        )
        validate_address(
            to_address,
            location=location,
            message=ErrorMessage.INVALID_TO_ADDRESS,
            field="to_address",
        )
        validate_integer(
            token_id,
            location=location,
            message=ErrorMessage.TOKEN_ID_MUST_BE_INTEGER,
            field="token_id",
            ge=0,
        )
        gas_price_wei = None
        if gas_price is not None:
            gwei = validate_gas_price(
                gas_price, location=location, message=ErrorMessage.INVALID_GAS_PRICE_SUPPLIED
            )
            gas_price_wei = Web3.to_wei(gwei, "gwei")

        return await self._binding.transact(
            location,
            "safeTransferFrom(address,address,uint256)",
            from_address,
            to_address,
            token_id,
            gas_price=gas_price_wei,
        )

    async def set_approval_for_all(self, to_address: str, approval_status: bool) -> PendingWrite:
        """Grant (True) or revoke (False) operator rights over all tokens."""
        location = ErrorLocation.BASE_ERC721_SET_APPROVAL_FOR_ALL
        self._binding.require_bound(location)
        validate_address(
            to_address,
            location=location,
            message=ErrorMessage.NO_TO_ADDRESS,
            field="to_address",
        )
        validate_boolean(
            approval_status,
            location=location,
            message=ErrorMessage.APPROVAL_STATUS_MUST_BE_BOOLEAN,
            field="approval_status",
        )
        return await self._binding.transact(location, "setApprovalForAll", to_address, approval_status)

    async def approve_transfer(self, to_address: str, token_id: int) -> PendingWrite:
        """Allow ``to_address`` to transfer a single token."""
        location = ErrorLocation.BASE_ERC721_APPROVE_TRANSFER
        self._binding.require_bound(location)
        validate_address(
            to_address,
            location=location,
            message=ErrorMessage.INVALID_TO_ADDRESS,
            field="to_address",
        )
        validate_integer(
            token_id,
            location=location,
            message=ErrorMessage.TOKEN_ID_MUST_BE_INTEGER,
            field="token_id",
            ge=0,
        )
        return await self._binding.transact(location, "approve", to_address, token_id)
