"""
Entry point tying an account to contract handles, index queries and storage.

Example:
    auth = Auth.from_config(SDKConfig.from_env())
    sdk = SDK(auth)
    contract = await sdk.deploy(Template.ERC1155_MINTABLE, {"base_uri": uri, "contract_uri": uri, "ids": []})
    await (await contract.mint(auth.address, 0, 1)).wait()
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .api.client import Api
from .api.http import HttpService
from .auth import Auth
from .contracts.base import ContractHandle
from .contracts.registry import create_handle, resolve_template
from .errors import ValidationError, error_boundary
from .messages import ErrorLocation, ErrorMessage
from .provider import TxStatus
from .storage.ipfs import IpfsStorage
from .validators import validate_mapping, validate_transaction_hash

logger = logging.getLogger(__name__)


class SDK:
    """
    Facade over one account.

    Args:
        auth: Account credentials
        http_client: Optional transport for the indexing API (defaults to one
            built from ``auth``)

    Raises:
        ValidationError: If ``auth`` is not an ``Auth`` instance
    """

    def __init__(self, auth: Auth, http_client: Optional[HttpService] = None) -> None:
        if not isinstance(auth, Auth):
            raise ValidationError(
                ErrorMessage.INVALID_AUTH_INSTANCE, ErrorLocation.SDK_CONSTRUCTOR, field="auth"
            )
        self._auth = auth
        self._http = http_client or HttpService(
            auth.api_url, auth.get_api_auth(), timeout=auth.request_timeout
        )
        self.api = Api(f"/networks/{auth.chain_id}", self._http)

    @property
    def auth(self) -> Auth:
        return self._auth

    async def aclose(self) -> None:
        """Close the HTTP clients owned by this SDK."""
        await self._http.aclose()
        ipfs = self._auth.get_ipfs()
        if ipfs is not None:
            await ipfs.aclose()

    async def __aenter__(self) -> "SDK":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    # Contracts

    async def deploy(self, template: Any, params: Mapping[str, Any]) -> ContractHandle:
        """
        Deploy a new contract from a template.

        Args:
            template: ``Template`` member or its string value
            params: Deploy parameters of the template (see ``DEPLOY_PARAMS``)

        Returns:
            The bound contract handle

        Raises:
            ValidationError: On a missing template, unknown parameter or malformed value
            NetworkError: If the deployment fails
        """
        location = ErrorLocation.SDK_DEPLOY
        resolved = resolve_template(template, location)
        validate_mapping(
            params, location=location, message=ErrorMessage.NO_PARAMETERS_SUPPLIED, field="params"
        )
        handle = create_handle(resolved, self._auth.get_signer())
        unknown = sorted(set(params) - set(handle.DEPLOY_PARAMS))
        if unknown:
            raise ValidationError(
                f"{ErrorMessage.INVALID_DEPLOY_PARAMETER} {', '.join(unknown)}",
                location,
                field=unknown[0],
            )
        # Missing parameters reach the template as None and fail its validation
        await handle.deploy(**{name: params.get(name) for name in handle.DEPLOY_PARAMS})
        return handle

    async def load_contract(self, template: Any, contract_address: str) -> ContractHandle:
        """Bind a handle of ``template`` to an existing contract."""
        resolved = resolve_template(template, ErrorLocation.SDK_LOAD_CONTRACT)
        handle = create_handle(resolved, self._auth.get_signer())
        await handle.load(contract_address)
        return handle

    async def get_status(self, tx_hash: str) -> Optional[TxStatus]:
        """Return the status of a mined transaction, or None while it is pending."""
        location = ErrorLocation.SDK_GET_STATUS
        validate_transaction_hash(
            tx_hash, location=location, message=ErrorMessage.INVALID_TRANSACTION_HASH
        )
        with error_boundary(location):
            receipt = await self._auth.get_signer().get_transaction_receipt(tx_hash)
        return receipt.status if receipt is not None else None

    # Index queries

    async def query_by_owner(
        self,
        public_address: str,
        include_metadata: bool = False,
        cursor: Optional[str] = None,
        all_pages: bool = False,
    ) -> Dict[str, Any]:
        return await self.api.query_by_owner(public_address, include_metadata, cursor, all_pages)

    async def query_by_collection(
        self,
        contract_address: str,
        cursor: Optional[str] = None,
        all_pages: bool = False,
    ) -> Dict[str, Any]:
        return await self.api.query_by_collection(contract_address, cursor, all_pages)

    async def query_contract_metadata(self, contract_address: str) -> Optional[Dict[str, Any]]:
        return await self.api.query_contract_metadata(contract_address)

    async def query_token_metadata(self, contract_address: str, token_id: int) -> Optional[Dict[str, Any]]:
        return await self.api.query_token_metadata(contract_address, token_id)

    # Storage

    def _require_ipfs(self) -> IpfsStorage:
        ipfs = self._auth.get_ipfs()
        if ipfs is None:
            raise ValidationError(ErrorMessage.NO_IPFS_CONFIGURED, ErrorLocation.SDK_STORE, field="ipfs")
        return ipfs

    async def store_file(self, source: Union[str, Path]) -> str:
        """Store a local file or URL content; returns its ``ipfs://`` URI."""
        return await self._require_ipfs().store_file(source)

    async def store_metadata(self, metadata: Mapping[str, Any]) -> str:
        """Store a metadata document; returns its ``ipfs://`` URI."""
        return await self._require_ipfs().store_object(metadata)

    async def create_folder(self, entries: Sequence[Mapping[str, Any]], erc1155: bool = False) -> str:
        """
        Store metadata entries as one directory.

        Returns:
            Base URI of the directory, ending with ``/``, suitable as a
            ``base_uri`` deploy parameter
        """
        uris: List[str] = await self._require_ipfs().store_directory(entries, erc1155=erc1155)
        return uris[0].rsplit("/", 1)[0] + "/"
