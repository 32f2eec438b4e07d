"""
Deploy-or-load lifecycle shared by every contract template.

A contract handle starts ``Unbound`` and is bound exactly once, either by
deploying a new contract or by loading an existing address. There is no way
back: a second ``deploy``/``load`` fails with ``ContractStateError`` and
leaves the handle untouched, which rules out accidental double deployments.

Binding calls on a single handle must be serialized by the caller; there is no
lock. If two bindings overlap anyway, the one finishing last fails with
``ContractStateError`` and the first binding is kept.
"""

import logging
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Protocol, Tuple

from ..artifacts.loader import get_abi, get_bytecode
from ..errors import ContractStateError, ValidationError, error_boundary
from ..messages import ErrorMessage
from ..provider import BoundContract, PendingWrite, Web3Signer
from ..validators import validate_address

logger = logging.getLogger(__name__)

# Fixed gas ceiling for deployments and state-changing calls
DEFAULT_GAS_LIMIT = 6000000


class Template(str, Enum):
    """Contract templates supported by the SDK."""

    ERC721_MINTABLE = "ERC721Mintable"
    ERC721_USER_MINTABLE = "ERC721UserMintable"
    ERC1155_MINTABLE = "ERC1155Mintable"


class BoundState(str, Enum):
    UNBOUND = "Unbound"
    BOUND = "Bound"


class ContractHandle(Protocol):
    """Capabilities shared by every template."""

    TEMPLATE: ClassVar[Template]
    DEPLOY_PARAMS: ClassVar[Tuple[str, ...]]

    @property
    def address(self) -> Optional[str]: ...

    @property
    def bound_state(self) -> BoundState: ...

    @property
    def template(self) -> Template: ...

    async def deploy(self, **params: Any) -> None: ...

    async def load(self, contract_address: str) -> None: ...


class ContractBinding:
    """
    Lifecycle state of one contract handle.

    Owns the bound contract reference and the address; borrows the signer.
    Templates hold one instance and route every operation through it.
    """

    def __init__(
        self,
        signer: Optional[Web3Signer],
        template: Template,
        gas_limit: int = DEFAULT_GAS_LIMIT,
    ) -> None:
        self._signer = signer
        self._template = template
        self._gas_limit = gas_limit
        self._contract: Optional[BoundContract] = None
        self._address: Optional[str] = None

    @property
    def template(self) -> Template:
        return self._template

    @property
    def address(self) -> Optional[str]:
        return self._address

    @property
    def state(self) -> BoundState:
        return BoundState.BOUND if self._contract is not None else BoundState.UNBOUND

    @property
    def gas_limit(self) -> int:
        return self._gas_limit

    @property
    def signer(self) -> Optional[Web3Signer]:
        return self._signer

    def ensure_unbound(self, location: str, message: str) -> None:
        if self.state is BoundState.BOUND:
            raise ContractStateError(message, location)

    def require_bound(self, location: str) -> BoundContract:
        """Return the bound contract or fail before any external call."""
        if self._contract is None:
            raise ContractStateError(ErrorMessage.CONTRACT_NOT_DEPLOYED_OR_LOADED, location)
        return self._contract

    def require_signer(self, location: str) -> Web3Signer:
        if self._signer is None:
            raise ValidationError(
                ErrorMessage.NO_SIGNER_INSTANCE_SUPPLIED, location, field="signer"
            )
        return self._signer

    def _abi(self) -> List[Dict[str, Any]]:
        return get_abi(self._template.value)

    def _bind(self, contract: BoundContract, address: str, location: str, message: str) -> None:
        # Another binding may have completed while this one was awaiting
        self.ensure_unbound(location, message)
        self._contract = contract
        self._address = address

    async def deploy(self, location: str, *args: Any) -> None:
        """
        Deploy the template's contract and bind to it.

        Callers must validate the constructor arguments before calling.
        """
        self.ensure_unbound(location, ErrorMessage.CONTRACT_ALREADY_DEPLOYED)
        signer = self.require_signer(location)

        with error_boundary(location):
            pending = await signer.deploy_contract(
                self._abi(),
                get_bytecode(self._template.value),
                list(args),
                gas_limit=self._gas_limit,
            )
            contract = await pending.deployed()

        self._bind(contract, contract.address, location, ErrorMessage.CONTRACT_ALREADY_DEPLOYED)
        logger.info("Deployed %s at %s", self._template.value, contract.address)

    async def load(self, location: str, contract_address: str) -> None:
        """Bind to an existing contract. Only the address shape is checked."""
        self.ensure_unbound(location, ErrorMessage.CONTRACT_ALREADY_LOADED)
        validate_address(
            contract_address,
            location=location,
            message=ErrorMessage.INVALID_CONTRACT_ADDRESS,
            field="contract_address",
        )
        signer = self.require_signer(location)

        with error_boundary(location):
            contract = signer.contract(contract_address, self._abi())

        self._bind(contract, contract_address, location, ErrorMessage.CONTRACT_ALREADY_LOADED)
        logger.info("Loaded %s at %s", self._template.value, contract_address)

    async def transact(
        self,
        location: str,
        method: str,
        *args: Any,
        value: Optional[int] = None,
        gas_price: Optional[int] = None,
    ) -> PendingWrite:
        """Send a state-changing call under the fixed gas ceiling."""
        contract = self.require_bound(location)
        with error_boundary(location):
            return await contract.transact(
                method,
                *args,
                gas_limit=self._gas_limit,
                value=value,
                gas_price=gas_price,
            )

    async def call(self, location: str, method: str, *args: Any) -> Any:
        """Execute a read-only call."""
        contract = self.require_bound(location)
        with error_boundary(location):
            return await contract.call(method, *args)
