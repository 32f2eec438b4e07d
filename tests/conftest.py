from typing import Any, Dict, List, Optional, Tuple

import pytest

from nft_sdk.provider import TransactionReceipt, TxStatus

TEST_PRIVATE_KEY = "0x" + "11" * 32
OWNER = "0x" + "ab" * 20
RECIPIENT = "0x" + "cd" * 20
CONTRACT_ADDRESS = "0x" + "ef" * 20
TX_HASH = "0x" + "12" * 32


class FakePendingWrite:
    """Stands in for a submitted transaction."""

    def __init__(self, tx_hash: str = TX_HASH, status: TxStatus = TxStatus.SUCCESS) -> None:
        self.tx_hash = tx_hash
        self._status = status
        self.waits = 0

    async def wait(self, timeout: Optional[float] = None) -> TransactionReceipt:
        self.waits += 1
        return TransactionReceipt(tx_hash=self.tx_hash, status=self._status, block_number=1)


class FakeContract:
    """
    Contract stub recording every transaction and read.
    ``call_results`` maps a method name to its return value.
    """

    def __init__(self, address: str) -> None:
        self.address = address
        self.transactions: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []
        self.reads: List[Tuple[str, Tuple[Any, ...]]] = []
        self.call_results: Dict[str, Any] = {}
        self.fail_with: Optional[BaseException] = None
        self.hooks: Dict[str, Any] = {}

    async def transact(self, method: str, *args: Any, **kwargs: Any) -> FakePendingWrite:
        if self.fail_with is not None:
            raise self.fail_with
        self.transactions.append((method, args, kwargs))
        hook = self.hooks.get(method)
        if hook is not None:
            hook(*args)
        return FakePendingWrite()

    async def call(self, method: str, *args: Any) -> Any:
        if self.fail_with is not None:
            raise self.fail_with
        self.reads.append((method, args))
        return self.call_results.get(method)


class FakePendingDeployment:
    def __init__(self, contract: FakeContract, error: Optional[BaseException] = None) -> None:
        self._contract = contract
        self._error = error

    async def deployed(self) -> FakeContract:
        if self._error is not None:
            raise self._error
        return self._contract


class FakeSigner:
    """
    Signer stub. Counts every external call so tests can assert that a
    rejected operation never reached the chain.
    """

    def __init__(self, address: str = OWNER) -> None:
        self.address = address
        self.chain_id = 1
        self.deployments: List[Tuple[List[Any], Optional[int]]] = []
        self.loaded: List[str] = []
        self.contracts: List[FakeContract] = []
        self.receipts: Dict[str, TransactionReceipt] = {}
        self.deploy_error: Optional[BaseException] = None
        self.next_address = CONTRACT_ADDRESS

    async def deploy_contract(
        self,
        abi: List[Dict[str, Any]],
        bytecode: str,
        args: List[Any],
        gas_limit: Optional[int] = None,
    ) -> FakePendingDeployment:
        self.deployments.append((list(args), gas_limit))
        contract = FakeContract(self.next_address)
        self.contracts.append(contract)
        return FakePendingDeployment(contract, self.deploy_error)

    def contract(self, address: str, abi: List[Dict[str, Any]]) -> FakeContract:
        self.loaded.append(address)
        contract = FakeContract(address)
        self.contracts.append(contract)
        return contract

    async def get_transaction_receipt(self, tx_hash: str) -> Optional[TransactionReceipt]:
        return self.receipts.get(tx_hash)

    @property
    def external_calls(self) -> int:
        sent = sum(len(c.transactions) + len(c.reads) for c in self.contracts)
        return len(self.deployments) + sent


@pytest.fixture(autouse=True)
def fake_artifacts(monkeypatch):
    """Serve a minimal ABI/bytecode pair instead of compiled artifacts."""
    monkeypatch.setattr("nft_sdk.contracts.base.get_abi", lambda name: [])
    monkeypatch.setattr("nft_sdk.contracts.base.get_bytecode", lambda name: "0x6080")


@pytest.fixture
def signer() -> FakeSigner:
    return FakeSigner()
