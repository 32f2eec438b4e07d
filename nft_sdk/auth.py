"""
Account credentials and the clients derived from them.

An ``Auth`` bundles the chain, the signing key and the API credentials of one
account. It validates everything up front and builds the signer, the API
authorization header and the optional storage client lazily.
"""

import base64
import logging
from typing import Dict, Optional

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3

from .api.http import DEFAULT_REQUEST_TIMEOUT, NFT_API_URL
from .config import SDKConfig
from .errors import ValidationError
from .messages import ErrorLocation, ErrorMessage
from .provider import DEFAULT_RECEIPT_TIMEOUT, Web3Signer
from .storage.ipfs import IpfsStorage
from .validators import validate_defined, validate_integer, validate_non_empty_string

logger = logging.getLogger(__name__)

# Chain id -> Infura network name
SUPPORTED_CHAINS: Dict[int, str] = {
    1: "mainnet",
    5: "goerli",
    11155111: "sepolia",
    137: "polygon-mainnet",
    80001: "polygon-mumbai",
    59144: "linea-mainnet",
    59140: "linea-goerli",
    42161: "arbitrum-mainnet",
    10: "optimism-mainnet",
}


def default_rpc_url(chain_id: int, project_id: str) -> str:
    return f"https://{SUPPORTED_CHAINS[chain_id]}.infura.io/v3/{project_id}"


class Auth:
    """
    Credentials of one account on one chain.

    Args:
        chain_id: Id of a supported chain
        project_id: Indexing API key id
        secret_id: Indexing API key secret
        private_key: Hex private key of the signing account
        rpc_url: JSON-RPC endpoint; derived from the chain when omitted
        ipfs: Optional ``{"project_id", "api_key_secret"}`` of the storage service
        api_url: Base URL of the indexing API
        request_timeout: HTTP timeout in seconds
        receipt_timeout: Default wait for transaction receipts in seconds

    Raises:
        ValidationError: If a credential is missing or the chain is unsupported
    """

    def __init__(
        self,
        chain_id: int,
        project_id: str,
        secret_id: str,
        private_key: str,
        rpc_url: Optional[str] = None,
        ipfs: Optional[Dict[str, str]] = None,
        api_url: str = NFT_API_URL,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ) -> None:
        location = ErrorLocation.AUTH_CONSTRUCTOR
        validate_non_empty_string(
            project_id, location=location, message=ErrorMessage.NO_PROJECT_ID_SUPPLIED, field="project_id"
        )
        validate_non_empty_string(
            secret_id, location=location, message=ErrorMessage.NO_SECRET_ID_SUPPLIED, field="secret_id"
        )
        validate_non_empty_string(
            private_key, location=location, message=ErrorMessage.NO_PRIVATE_KEY, field="private_key"
        )
        validate_defined(chain_id, location=location, message=ErrorMessage.NO_CHAIN_ID_SUPPLIED, field="chain_id")
        validate_integer(chain_id, location=location, message=ErrorMessage.CHAIN_NOT_SUPPORTED, field="chain_id")
        if chain_id not in SUPPORTED_CHAINS:
            raise ValidationError(ErrorMessage.CHAIN_NOT_SUPPORTED, location, field="chain_id")
        try:
            account = Account.from_key(private_key)
        except Exception:
            raise ValidationError(ErrorMessage.INVALID_PRIVATE_KEY, location, field="private_key") from None
        if ipfs is not None:
            validate_non_empty_string(
                ipfs.get("project_id"), location=location, message=ErrorMessage.NO_IPFS_CONFIGURED, field="ipfs"
            )
            validate_non_empty_string(
                ipfs.get("api_key_secret"),
                location=location,
                message=ErrorMessage.NO_IPFS_CONFIGURED,
                field="ipfs",
            )

        self._chain_id = chain_id
        self._project_id = project_id
        self._secret_id = secret_id
        self._account = account
        self._rpc_url = rpc_url or default_rpc_url(chain_id, project_id)
        self._ipfs_credentials = dict(ipfs) if ipfs is not None else None
        self._api_url = api_url
        self._request_timeout = request_timeout
        self._receipt_timeout = receipt_timeout
        self._signer: Optional[Web3Signer] = None
        self._ipfs: Optional[IpfsStorage] = None

    @classmethod
    def from_config(cls, config: SDKConfig) -> "Auth":
        """Build an ``Auth`` from an ``SDKConfig`` (e.g. ``SDKConfig.from_env()``)."""
        ipfs = None
        if config.has_ipfs:
            ipfs = {"project_id": config.ipfs_project_id, "api_key_secret": config.ipfs_api_key_secret}
        return cls(
            chain_id=config.chain_id,  # type: ignore[arg-type]
            project_id=config.project_id,  # type: ignore[arg-type]
            secret_id=config.secret_id,  # type: ignore[arg-type]
            private_key=config.private_key,  # type: ignore[arg-type]
            rpc_url=config.rpc_url,
            ipfs=ipfs,
            api_url=config.api_url,
            request_timeout=config.request_timeout,
            receipt_timeout=config.receipt_timeout,
        )

    @property
    def chain_id(self) -> int:
        return self._chain_id

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def request_timeout(self) -> float:
        return self._request_timeout

    def get_signer(self) -> Web3Signer:
        """Return the account's signer, created on first use."""
        if self._signer is None:
            web3 = AsyncWeb3(AsyncHTTPProvider(self._rpc_url))
            self._signer = Web3Signer(web3, self._account, self._chain_id, self._receipt_timeout)
            logger.info("Signer %s ready on chain %s", self._account.address, self._chain_id)
        return self._signer

    def get_api_auth(self) -> str:
        """HTTP Basic authorization header value for the indexing API."""
        token = base64.b64encode(f"{self._project_id}:{self._secret_id}".encode("utf-8")).decode("ascii")
        return f"Basic {token}"

    def get_ipfs(self) -> Optional[IpfsStorage]:
        """Return the storage client, or None when no storage credentials were given."""
        if self._ipfs_credentials is None:
            return None
        if self._ipfs is None:
            self._ipfs = IpfsStorage(
                self._ipfs_credentials["project_id"],
                self._ipfs_credentials["api_key_secret"],
            )
        return self._ipfs

    def __repr__(self) -> str:
        return f"Auth(chain_id={self._chain_id}, address={self._account.address!r})"
