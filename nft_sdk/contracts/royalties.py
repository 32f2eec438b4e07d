"""ERC2981 royalty operations."""

from typing import Tuple

from ..messages import ErrorLocation, ErrorMessage
from ..provider import PendingWrite
from ..validators import ROYALTY_FEE_DENOMINATOR, validate_address, validate_integer
from .base import ContractBinding


class Royalties:
    """Royalty configuration shared by the templates that support ERC2981."""

    def __init__(self, binding: ContractBinding) -> None:
        self._binding = binding

    async def set_royalties(self, public_address: str, fee: int) -> PendingWrite:
        """
        Set the royalty receiver and fee.

        Args:
            public_address: Address receiving royalties
            fee: Fee in basis points, strictly between 0 and 10000

        Returns:
            PendingWrite for the configuration transaction
        """
        location = ErrorLocation.ROYALTIES_SET_ROYALTIES
        self._binding.require_bound(location)
        validate_address(
            public_address,
            location=location,
            message=ErrorMessage.NO_ADDRESS_SUPPLIED,
            field="public_address",
        )
        validate_integer(
            fee,
            location=location,
            message=ErrorMessage.FEE_MUST_BE_BETWEEN_0_AND_10000,
            field="fee",
            gt=0,
            lt=ROYALTY_FEE_DENOMINATOR,
        )
        return await self._binding.transact(location, "setRoyalties", public_address, fee)

    async def royalty_info(self, token_id: int, sell_price: int) -> Tuple[str, int]:
        """
        Return the royalty receiver and amount owed for a sale.

        Args:
            token_id: Token sold
            sell_price: Sale price in wei

        Returns:
            Tuple of (receiver address, royalty amount in wei)
        """
        location = ErrorLocation.ROYALTIES_ROYALTY_INFO
        self._binding.require_bound(location)
        validate_integer(
            token_id,
            location=location,
            message=ErrorMessage.NO_TOKEN_ID_SUPPLIED,
            field="token_id",
            ge=0,
        )
        validate_integer(
            sell_price,
            location=location,
            message=ErrorMessage.NO_SELL_PRICE_SUPPLIED,
            field="sell_price",
            gt=0,
        )
        receiver, amount = await self._binding.call(location, "royaltyInfo", token_id, sell_price)
        return receiver, amount
