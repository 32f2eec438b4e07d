"""
ERC721UserMintable contract template.

Pay-to-mint ERC721 collection: any user mints up to ``MAX_MINT_QUANTITY``
tokens per call by paying ``price`` (in ether) per token while the sale is
open. The owner can reserve tokens, reveal the collection, change the price
and withdraw the collected funds.
"""

from typing import Optional, Tuple

from web3 import Web3

from ..messages import ErrorLocation, ErrorMessage
from ..provider import PendingWrite, Web3Signer
from ..validators import (
    MAX_MINT_QUANTITY,
    validate_defined,
    validate_ether_amount,
    validate_integer,
    validate_non_empty_string,
)
from .base import BoundState, ContractBinding, Template
from .royalties import Royalties
from .transfers import ERC721Transfers


class ERC721UserMintable:
    """
    Handle for an ERC721UserMintable contract.

    Example:
        >>> contract = ERC721UserMintable(signer)
        >>> await contract.deploy(
        ...     name="Payable Mint", symbol="PYMC", base_uri="ipfs://.../",
        ...     max_supply=10, price="0.01",
        ... )
        >>> await (await contract.toggle_sale()).wait()
        >>> tx = await contract.mint(quantity=2, cost="0.02")
    """

    TEMPLATE = Template.ERC721_USER_MINTABLE
    DEPLOY_PARAMS = ("name", "symbol", "base_uri", "max_supply", "price")

    def __init__(self, signer: Optional[Web3Signer]) -> None:
        self._binding = ContractBinding(signer, self.TEMPLATE)
        self._transfers = ERC721Transfers(self._binding)
        self._royalties = Royalties(self._binding)

    @property
    def address(self) -> Optional[str]:
        return self._binding.address

    @property
    def bound_state(self) -> BoundState:
        return self._binding.state

    @property
    def template(self) -> Template:
        return self.TEMPLATE

    async def deploy(
        self,
        name: str,
        symbol: str,
        base_uri: str,
        max_supply: int,
        price: str,
    ) -> None:
        """
        Deploy a new ERC721UserMintable contract.

        Args:
            name: Name of the collection
            symbol: Symbol of the collection
            base_uri: Base URI of the token metadata (pre-reveal URI)
            max_supply: Maximum number of tokens
            price: Price of one token in ether, as a decimal string

        Raises:
            ContractStateError: If the handle is already bound
            ValidationError: If a parameter is missing or malformed
            NetworkError: If the deployment fails
        """
        location = ErrorLocation.ERC721_USER_MINTABLE_DEPLOY
        self._binding.ensure_unbound(location, ErrorMessage.CONTRACT_ALREADY_DEPLOYED)
        self._binding.require_signer(location)
        validate_non_empty_string(
            name, location=location, message=ErrorMessage.NO_NAME_SUPPLIED, field="name"
        )
        validate_defined(
            symbol, location=location, message=ErrorMessage.NO_SYMBOL_SUPPLIED, field="symbol"
        )
        validate_defined(
            base_uri, location=location, message=ErrorMessage.NO_BASE_URI_SUPPLIED, field="base_uri"
        )
        validate_integer(
            max_supply,
            location=location,
            message=ErrorMessage.INVALID_MAX_SUPPLY,
            field="max_supply",
            gt=0,
        )
        price_in_ether = validate_ether_amount(
            price, location=location, message=ErrorMessage.INVALID_PRICE, field="price"
        )
        price_in_wei = Web3.to_wei(price_in_ether, "ether")
        await self._binding.deploy(location, name, symbol, base_uri, max_supply, price_in_wei)

    async def load(self, contract_address: str) -> None:
        """Load an existing ERC721UserMintable contract."""
        await self._binding.load(ErrorLocation.ERC721_USER_MINTABLE_LOAD, contract_address)

    async def mint(self, quantity: int, cost: str) -> PendingWrite:
        """
        Mint ``quantity`` tokens to the sender, paying ``cost`` ether.

        The contract checks that ``cost`` covers ``price * quantity``.

        Args:
            quantity: Number of tokens, between 1 and 20
            cost: Total amount paid in ether, as a decimal string

        Returns:
            PendingWrite for the mint transaction
        """
        location = ErrorLocation.ERC721_USER_MINTABLE_MINT
        self._binding.require_bound(location)
        validate_integer(
            quantity,
            location=location,
            message=ErrorMessage.QUANTITY_MUST_BE_BETWEEN_1_AND_20,
            field="quantity",
            gt=0,
            le=MAX_MINT_QUANTITY,
        )
        cost_in_ether = validate_ether_amount(
            cost, location=location, message=ErrorMessage.INVALID_COST, field="cost"
        )
        return await self._binding.transact(
            location, "mint", quantity, value=Web3.to_wei(cost_in_ether, "ether")
        )

    async def price(self) -> str:
        """Return the price of one token in ether."""
        location = ErrorLocation.ERC721_USER_MINTABLE_PRICE
        price_in_wei = await self._binding.call(location, "price")
        return str(Web3.from_wei(price_in_wei, "ether"))

    async def reserve(self, quantity: int) -> PendingWrite:
        """Mint ``quantity`` tokens (1-20) to the contract owner for free."""
        location = ErrorLocation.ERC721_USER_MINTABLE_RESERVE
        self._binding.require_bound(location)
        validate_integer(
            quantity,
            location=location,
            message=ErrorMessage.QUANTITY_MUST_BE_BETWEEN_1_AND_20,
            field="quantity",
            gt=0,
            le=MAX_MINT_QUANTITY,
        )
        return await self._binding.transact(location, "reserve", quantity)

    async def reveal(self, base_uri: str) -> PendingWrite:
        """Mark the collection as revealed and point it at ``base_uri``."""
        location = ErrorLocation.ERC721_USER_MINTABLE_REVEAL
        self._binding.require_bound(location)
        validate_non_empty_string(
            base_uri, location=location, message=ErrorMessage.INVALID_BASE_URI, field="base_uri"
        )
        return await self._binding.transact(location, "reveal", base_uri)

    async def set_base_uri(self, base_uri: str) -> PendingWrite:
        location = ErrorLocation.ERC721_USER_MINTABLE_SET_BASE_URI
        self._binding.require_bound(location)
        validate_non_empty_string(
            base_uri, location=location, message=ErrorMessage.INVALID_BASE_URI, field="base_uri"
        )
        return await self._binding.transact(location, "setBaseURI", base_uri)

    async def set_price(self, price: str) -> PendingWrite:
        """Set the price of one token, in ether."""
        location = ErrorLocation.ERC721_USER_MINTABLE_SET_PRICE
        self._binding.require_bound(location)
        price_in_ether = validate_ether_amount(
            price, location=location, message=ErrorMessage.INVALID_PRICE, field="price"
        )
        return await self._binding.transact(location, "setPrice", Web3.to_wei(price_in_ether, "ether"))

    async def toggle_sale(self) -> PendingWrite:
        """Open or close the public sale."""
        return await self._binding.transact(ErrorLocation.ERC721_USER_MINTABLE_TOGGLE_SALE, "toggleSale")

    async def withdraw(self) -> PendingWrite:
        """Send the contract's ether balance to the owner."""
        return await self._binding.transact(ErrorLocation.ERC721_USER_MINTABLE_WITHDRAW, "withdraw")

    async def renounce_ownership(self) -> PendingWrite:
        """Leave the contract without an owner. Irreversible."""
        return await self._binding.transact(
            ErrorLocation.ERC721_USER_MINTABLE_RENOUNCE_OWNERSHIP, "renounceOwnership"
        )

    async def set_royalties(self, public_address: str, fee: int) -> PendingWrite:
        return await self._royalties.set_royalties(public_address, fee)

    async def royalty_info(self, token_id: int, sell_price: int) -> Tuple[str, int]:
        return await self._royalties.royalty_info(token_id, sell_price)

    async def transfer(
        self,
        from_address: str,
        to_address: str,
        token_id: int,
        gas_price: Optional[str] = None,
    ) -> PendingWrite:
        return await self._transfers.transfer(from_address, to_address, token_id, gas_price)

    async def set_approval_for_all(self, to_address: str, approval_status: bool) -> PendingWrite:
        return await self._transfers.set_approval_for_all(to_address, approval_status)

    async def approve_transfer(self, to_address: str, token_id: int) -> PendingWrite:
        return await self._transfers.approve_transfer(to_address, token_id)
