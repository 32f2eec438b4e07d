"""
ERC1155Mintable contract template.

Multi-token collection: each token id has a supply. Ids must be registered
(at deployment or with ``add_ids``) before they can be minted.
"""

from typing import List, Optional, Sequence, Tuple

from ..messages import ErrorLocation, ErrorMessage
from ..provider import PendingWrite, Web3Signer
from ..validators import (
    validate_address,
    validate_boolean,
    validate_defined,
    validate_equal_length,
    validate_integer,
    validate_integer_sequence,
    validate_non_empty_string,
)
from .access_control import AccessControl
from .base import BoundState, ContractBinding, Template
from .royalties import Royalties

_EMPTY_DATA = b""


class ERC1155Mintable:
    """
    Handle for an ERC1155Mintable contract.

    Example:
        >>> contract = ERC1155Mintable(signer)
        >>> await contract.deploy(base_uri="ipfs://.../", contract_uri="ipfs://...", ids=[0, 1])
        >>> tx = await contract.mint_batch(to="0x...", ids=[0, 1], quantities=[10, 5])
    """

    TEMPLATE = Template.ERC1155_MINTABLE
    DEPLOY_PARAMS = ("base_uri", "contract_uri", "ids")

    def __init__(self, signer: Optional[Web3Signer]) -> None:
        self._binding = ContractBinding(signer, self.TEMPLATE)
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

    def _validate_ids(self, ids: Sequence[int], location: str) -> None:
        validate_integer_sequence(
            ids, location=location, message=ErrorMessage.INVALID_IDS, field="ids", ge=0
        )

    def _validate_batch(self, ids: Sequence[int], quantities: Sequence[int], location: str) -> None:
        self._validate_ids(ids, location)
        validate_integer_sequence(
            quantities,
            location=location,
            message=ErrorMessage.INVALID_QUANTITIES,
            field="quantities",
            gt=0,
        )
        validate_equal_length(
            ids,
            quantities,
            location=location,
            message=ErrorMessage.IDS_QUANTITIES_LENGTH_MISMATCH,
            field="quantities",
        )

    async def deploy(self, base_uri: str, contract_uri: str, ids: List[int]) -> None:
        """
        Deploy a new ERC1155Mintable contract.

        Args:
            base_uri: Base URI of the token metadata
            contract_uri: URI of the collection-level metadata JSON
            ids: Token ids mintable right after deployment (may be empty)

        Raises:
            ContractStateError: If the handle is already bound
            ValidationError: If a parameter is missing or malformed
            NetworkError: If the deployment fails
        """
        location = ErrorLocation.ERC1155_MINTABLE_DEPLOY
        self._binding.ensure_unbound(location, ErrorMessage.CONTRACT_ALREADY_DEPLOYED)
        self._binding.require_signer(location)
        validate_defined(
            base_uri, location=location, message=ErrorMessage.NO_BASE_URI_SUPPLIED, field="base_uri"
        )
        validate_defined(
            contract_uri,
            location=location,
            message=ErrorMessage.NO_CONTRACT_URI_SUPPLIED,
            field="contract_uri",
        )
        self._validate_ids(ids, location)
        await self._binding.deploy(location, base_uri, contract_uri, list(ids))

    async def load(self, contract_address: str) -> None:
        """Load an existing ERC1155Mintable contract."""
        await self._binding.load(ErrorLocation.ERC1155_MINTABLE_LOAD, contract_address)

    async def mint(self, to: str, token_id: int, quantity: int) -> PendingWrite:
        """
        Mint ``quantity`` units of ``token_id`` to ``to``.

        Returns:
            PendingWrite for the mint transaction
        """
        location = ErrorLocation.ERC1155_MINTABLE_MINT
        self._binding.require_bound(location)
        validate_address(to, location=location, message=ErrorMessage.INVALID_TO_ADDRESS, field="to")
        validate_integer(
            token_id,
            location=location,
            message=ErrorMessage.TOKEN_ID_MUST_BE_INTEGER,
            field="token_id",
            ge=0,
        )
        validate_integer(
            quantity,
            location=location,
            message=ErrorMessage.INVALID_MINT_QUANTITY,
            field="quantity",
            gt=0,
        )
        return await self._binding.transact(location, "mint", to, token_id, quantity)

    async def mint_batch(self, to: str, ids: List[int], quantities: List[int]) -> PendingWrite:
        """
        Mint several token ids in one transaction.

        ``ids[i]`` receives ``quantities[i]`` units; both lists must have the
        same length.
        """
        location = ErrorLocation.ERC1155_MINTABLE_MINT_BATCH
        self._binding.require_bound(location)
        validate_address(to, location=location, message=ErrorMessage.INVALID_TO_ADDRESS, field="to")
        self._validate_batch(ids, quantities, location)
        return await self._binding.transact(location, "mintBatch", to, list(ids), list(quantities))

    async def add_ids(self, ids: List[int]) -> PendingWrite:
        """Register new mintable token ids."""
        location = ErrorLocation.ERC1155_MINTABLE_ADD_IDS
        self._binding.require_bound(location)
        self._validate_ids(ids, location)
        return await self._binding.transact(location, "addIds", list(ids))

    async def set_base_uri(self, base_uri: str) -> PendingWrite:
        location = ErrorLocation.ERC1155_MINTABLE_SET_BASE_URI
        self._binding.require_bound(location)
        validate_non_empty_string(
            base_uri, location=location, message=ErrorMessage.INVALID_BASE_URI, field="base_uri"
        )
        return await self._binding.transact(location, "setURI", base_uri)

    async def set_contract_uri(self, contract_uri: str) -> PendingWrite:
        location = ErrorLocation.ERC1155_MINTABLE_SET_CONTRACT_URI
        self._binding.require_bound(location)
        validate_non_empty_string(
            contract_uri,
            location=location,
            message=ErrorMessage.INVALID_CONTRACT_URI,
            field="contract_uri",
        )
        return await self._binding.transact(location, "setContractURI", contract_uri)

    async def transfer(self, from_address: str, to_address: str, token_id: int, quantity: int) -> PendingWrite:
        location = ErrorLocation.ERC1155_MINTABLE_TRANSFER
        self._binding.require_bound(location)
        validate_address(
            from_address,
            location=location,
            message=ErrorMessage.INVALID_FROM_ADDRESS,
            field="from_address",
        )
        validate_address(
            to_address, location=location, message=ErrorMessage.INVALID_TO_ADDRESS, field="to_address"
        )
        validate_integer(
            token_id,
            location=location,
            message=ErrorMessage.TOKEN_ID_MUST_BE_INTEGER,
            field="token_id",
            ge=0,
        )
        validate_integer(
            quantity,
            location=location,
            message=ErrorMessage.INVALID_MINT_QUANTITY,
            field="quantity",
            gt=0,
        )
        return await self._binding.transact(
            location, "safeTransferFrom", from_address, to_address, token_id, quantity, _EMPTY_DATA
        )

    async def transfer_batch(
        self,
        from_address: str,
        to_address: str,
        token_ids: List[int],
        quantities: List[int],
    ) -> PendingWrite:
        location = ErrorLocation.ERC1155_MINTABLE_TRANSFER_BATCH
        self._binding.require_bound(location)
        validate_address(
            from_address,
            location=location,
            message=ErrorMessage.INVALID_FROM_ADDRESS,
            field="from_address",
        )
        validate_address(
            to_address, location=location, message=ErrorMessage.INVALID_TO_ADDRESS, field="to_address"
        )
        self._validate_batch(token_ids, quantities, location)
        return await self._binding.transact(
            location,
            "safeBatchTransferFrom",
            from_address,
            to_address,
            list(token_ids),
            list(quantities),
            _EMPTY_DATA,
        )

    async def set_approval_for_all(self, to_address: str, approval_status: bool) -> PendingWrite:
        location = ErrorLocation.ERC1155_MINTABLE_SET_APPROVAL_FOR_ALL
        self._binding.require_bound(location)
        validate_address(
            to_address, location=location, message=ErrorMessage.NO_TO_ADDRESS, field="to_address"
        )
        validate_boolean(
            approval_status,
            location=location,
            message=ErrorMessage.APPROVAL_STATUS_MUST_BE_BOOLEAN,
            field="approval_status",
        )
        return await self._binding.transact(location, "setApprovalForAll", to_address, approval_status)

    async def set_royalties(self, public_address: str, fee: int) -> PendingWrite:
        return await self._royalties.set_royalties(public_address, fee)

    async def royalty_info(self, token_id: int, sell_price: int) -> Tuple[str, int]:
        return await self._royalties.royalty_info(token_id, sell_price)
