"""
ERC721Mintable contract template.

Fixed-mint ERC721 collection: only accounts holding the minter role mint
tokens, each with its own token URI.
"""

from typing import Optional, Tuple

from ..messages import ErrorLocation, ErrorMessage
from ..provider import PendingWrite, Web3Signer
from ..validators import validate_address, validate_defined, validate_non_empty_string
from .access_control import AccessControl
from .base import BoundState, ContractBinding, Template
from .royalties import Royalties
from .transfers import ERC721Transfers


class ERC721Mintable:
    """
    Handle for an ERC721Mintable contract.

    Example:
        >>> contract = ERC721Mintable(signer)
        >>> await contract.deploy(name="My NFT", symbol="MNFT", contract_uri="ipfs://...")
        >>> tx = await contract.mint(public_address="0x...", token_uri="ipfs://...")
        >>> receipt = await tx.wait()
    """

    TEMPLATE = Template.ERC721_MINTABLE
    DEPLOY_PARAMS = ("name", "symbol", "contract_uri")

    def __init__(self, signer: Optional[Web3Signer]) -> None:
        self._binding = ContractBinding(signer, self.TEMPLATE)
        self._transfers = ERC721Transfers(self._binding)
        self._royalties = Royalties(self._binding)
        self.access_control = AccessControl(self._binding)

    @property
    def address(self) -> Optional[str]:
        return self._binding.address

    @property
    def bound_state(self) -> BoundState:
        return self._binding.state

    @property
    def template(self) -> Template:
        return self.TEMPLATE

    async def deploy(self, name: str, symbol: str, contract_uri: str) -> None:
        """
        Deploy a new ERC721Mintable contract.

        Args:
            name: Name of the collection
            symbol: Symbol of the collection
            contract_uri: URI of the collection-level metadata JSON

        Raises:
            ContractStateError: If the handle is already bound
            ValidationError: If a parameter is missing
            NetworkError: If the deployment fails
        """
        location = ErrorLocation.ERC721_MINTABLE_DEPLOY
        self._binding.ensure_unbound(location, ErrorMessage.CONTRACT_ALREADY_DEPLOYED)
        self._binding.require_signer(location)
        validate_non_empty_string(
            name, location=location, message=ErrorMessage.NO_NAME_SUPPLIED, field="name"
        )
        validate_defined(
            symbol, location=location, message=ErrorMessage.NO_SYMBOL_SUPPLIED, field="symbol"
        )
        validate_defined(
            contract_uri,
            location=location,
            message=ErrorMessage.NO_CONTRACT_URI_SUPPLIED,
            field="contract_uri",
        )
        await self._binding.deploy(location, name, symbol, contract_uri)

    async def load(self, contract_address: str) -> None:
        """Load an existing ERC721Mintable contract."""
        await self._binding.load(ErrorLocation.ERC721_MINTABLE_LOAD, contract_address)

    async def mint(self, public_address: str, token_uri: str) -> PendingWrite:
        """
        Mint a token to ``public_address`` with its own metadata URI.

        Args:
            public_address: Recipient of the token
            token_uri: URI of the token-level metadata JSON

        Returns:
            PendingWrite for the mint transaction
        """
        location = ErrorLocation.ERC721_MINTABLE_MINT
        self._binding.require_bound(location)
        validate_address(
            public_address,
            location=location,
            message=ErrorMessage.INVALID_PUBLIC_ADDRESS,
            field="public_address",
        )
        validate_non_empty_string(
            token_uri, location=location, message=ErrorMessage.NO_TOKEN_URI_SUPPLIED, field="token_uri"
        )
        return await self._binding.transact(location, "mintWithTokenURI", public_address, token_uri)

    async def set_contract_uri(self, contract_uri: str) -> PendingWrite:
        location = ErrorLocation.ERC721_MINTABLE_SET_CONTRACT_URI
        self._binding.require_bound(location)
        validate_non_empty_string(
            contract_uri,
            location=location,
            message=ErrorMessage.INVALID_CONTRACT_URI,
            field="contract_uri",
        )
        return await self._binding.transact(location, "setContractURI", contract_uri)

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

    async def set_royalties(self, public_address: str, fee: int) -> PendingWrite:
        return await self._royalties.set_royalties(public_address, fee)

    async def royalty_info(self, token_id: int, sell_price: int) -> Tuple[str, int]:
        return await self._royalties.royalty_info(token_id, sell_price)
