"""
Web3 signer used by the contract templates.

The templates only rely on the small surface defined here: deploying a
contract from ABI and bytecode, binding a contract object to an address,
sending transactions and waiting for receipts. ``Web3Signer`` implements it
on top of ``AsyncWeb3`` with a local private key.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import AsyncWeb3, Web3
from web3.exceptions import TransactionNotFound

from .errors import NetworkError, error_boundary
from .messages import ErrorLocation, ErrorMessage

logger = logging.getLogger(__name__)

DEFAULT_RECEIPT_TIMEOUT = 120.0


def _checksum_args(args: Any) -> List[Any]:
    """Checksum every address argument; web3 refuses lowercase addresses."""
    return [
        Web3.to_checksum_address(arg) if isinstance(arg, str) and Web3.is_address(arg) else arg
        for arg in args
    ]


class TxStatus(IntEnum):
    REVERTED = 0
    SUCCESS = 1


@dataclass(frozen=True)
class TransactionReceipt:
    """Subset of a transaction receipt exposed to callers."""

    tx_hash: str
    status: TxStatus
    block_number: Optional[int] = None
    contract_address: Optional[str] = None
    gas_used: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_web3(cls, receipt: Any) -> "TransactionReceipt":
        return cls(
            tx_hash=Web3.to_hex(receipt["transactionHash"]),
            status=TxStatus(int(receipt["status"])),
            block_number=receipt.get("blockNumber"),
            contract_address=receipt.get("contractAddress"),
            gas_used=receipt.get("gasUsed"),
            raw=dict(receipt),
        )


class PendingWrite:
    """
    Handle to a submitted, not yet confirmed transaction.

    ``wait()`` blocks the calling task until the transaction is mined and
    returns its receipt; a reverted transaction resolves with
    ``TxStatus.REVERTED`` rather than raising.
    """

    def __init__(
        self,
        tx_hash: Union[bytes, str],
        web3: AsyncWeb3,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ) -> None:
        self._tx_hash = HexBytes(tx_hash)
        self._web3 = web3
        self._receipt_timeout = receipt_timeout

    @property
    def tx_hash(self) -> str:
        return Web3.to_hex(self._tx_hash)

    async def wait(self, timeout: Optional[float] = None) -> TransactionReceipt:
        with error_boundary(ErrorLocation.PENDING_WRITE_WAIT):
            receipt = await self._web3.eth.wait_for_transaction_receipt(
                self._tx_hash,
                timeout=timeout if timeout is not None else self._receipt_timeout,
            )
        return TransactionReceipt.from_web3(receipt)

    def __repr__(self) -> str:
        return f"PendingWrite(tx_hash={self.tx_hash!r})"


class BoundContract:
    """A contract object bound to an address and a signer."""

    def __init__(self, contract: Any, signer: "Web3Signer") -> None:
        self._contract = contract
        self._signer = signer

    @property
    def address(self) -> str:
        return self._contract.address

    def _function(self, method: str) -> Any:
        # Overloaded functions are addressed by their full signature
        if "(" in method:
            return self._contract.get_function_by_signature(method)
        return self._contract.get_function_by_name(method)

    async def transact(
        self,
        method: str,
        *args: Any,
        gas_limit: Optional[int] = None,
        value: Optional[int] = None,
        gas_price: Optional[int] = None,
    ) -> PendingWrite:
        """
        Build, sign and send a transaction calling ``method``.

        Args:
            method: Function name, or full signature for overloaded functions
            *args: Function arguments
            gas_limit: Gas ceiling for the transaction
            value: Wei sent along with the call
            gas_price: Legacy gas price in wei

        Returns:
            PendingWrite for the submitted transaction
        """
        params: Dict[str, Any] = {"from": self._signer.address}
        if gas_limit is not None:
            params["gas"] = gas_limit
        if value is not None:
            params["value"] = value
        if gas_price is not None:
            params["gasPrice"] = gas_price
        tx = await self._function(method)(*_checksum_args(args)).build_transaction(params)
        return await self._signer.send_transaction(tx)

    async def call(self, method: str, *args: Any) -> Any:
        """Execute a read-only call."""
        return await self._function(method)(*_checksum_args(args)).call()


class PendingDeployment:
    """A contract creation transaction awaiting confirmation."""

    def __init__(self, pending: PendingWrite, signer: "Web3Signer", abi: List[Dict[str, Any]]) -> None:
        self._pending = pending
        self._signer = signer
        self._abi = abi

    @property
    def tx_hash(self) -> str:
        return self._pending.tx_hash

    async def deployed(self) -> BoundContract:
        """Wait for the creation receipt and bind the new contract."""
        receipt = await self._pending.wait()
        if receipt.status != TxStatus.SUCCESS or not receipt.contract_address:
            raise NetworkError(
                f"{ErrorMessage.CONTRACT_DEPLOYMENT_FAILED} tx={receipt.tx_hash}",
                ErrorLocation.CONTRACT_FACTORY_DEPLOY,
            )
        return self._signer.contract(receipt.contract_address, self._abi)


class Web3Signer:
    """
    Signs and sends transactions from a local account through ``AsyncWeb3``.

    The instance is shared by every contract handle created from the same
    ``Auth`` and is never mutated by them.
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        account: LocalAccount,
        chain_id: int,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ) -> None:
        self._web3 = web3
        self._account = account
        self._chain_id = chain_id
        self._receipt_timeout = receipt_timeout

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def web3(self) -> AsyncWeb3:
        return self._web3

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def send_transaction(self, tx: Dict[str, Any]) -> PendingWrite:
        """Fill nonce and chain id, sign locally and broadcast."""
        tx = dict(tx)
        tx.setdefault("from", self.address)
        tx.setdefault("chainId", self._chain_id)
        if "nonce" not in tx:
            tx["nonce"] = await self._web3.eth.get_transaction_count(self.address, "pending")
        signed = self._account.sign_transaction(tx)
        tx_hash = await self._web3.eth.send_raw_transaction(signed.raw_transaction)
        logger.debug("Sent transaction %s", Web3.to_hex(tx_hash))
        return PendingWrite(tx_hash, self._web3, self._receipt_timeout)

    async def deploy_contract(
        self,
        abi: List[Dict[str, Any]],
        bytecode: str,
        args: List[Any],
        gas_limit: Optional[int] = None,
    ) -> PendingDeployment:
        """
        Send a contract creation transaction.

        Args:
            abi: Contract ABI
            bytecode: Creation bytecode (0x-prefixed hex)
            args: Constructor arguments in declaration order
            gas_limit: Gas ceiling for the deployment

        Returns:
            PendingDeployment resolving to the bound contract
        """
        factory = self._web3.eth.contract(abi=abi, bytecode=bytecode)
        params: Dict[str, Any] = {"from": self.address}
        if gas_limit is not None:
            params["gas"] = gas_limit
        tx = await factory.constructor(*_checksum_args(args)).build_transaction(params)
        pending = await self.send_transaction(tx)
        return PendingDeployment(pending, self, abi)

    def contract(self, address: str, abi: List[Dict[str, Any]]) -> BoundContract:
        """Bind a contract object to ``address``. No network round-trip."""
        contract = self._web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        return BoundContract(contract, self)

    async def get_transaction_receipt(self, tx_hash: str) -> Optional[TransactionReceipt]:
        """Return the receipt of a mined transaction, or None while pending."""
        try:
            receipt = await self._web3.eth.get_transaction_receipt(HexBytes(tx_hash))
        except TransactionNotFound:
            return None
        return TransactionReceipt.from_web3(receipt)
