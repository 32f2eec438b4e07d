"""
Read-path queries against the NFT indexing API.

The index mirrors chain state asynchronously, so results may lag behind
confirmed transactions; use ``nft_sdk.poller.await_condition`` to wait for a
write to become visible. Records the index does not know yet are reported as
``None`` (single records) or an empty page (collections), never as errors.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..errors import error_boundary
from ..messages import ErrorLocation, ErrorMessage
from ..validators import validate_address, validate_integer
from .http import HttpService

logger = logging.getLogger(__name__)


def _empty_page() -> Dict[str, Any]:
    return {"total": 0, "cursor": None, "assets": []}


class Api:
    """
    Query layer bound to one network.

    Args:
        api_path: Network prefix, e.g. ``/networks/1``
        http_client: Transport used for every request
    """

    def __init__(self, api_path: str, http_client: HttpService) -> None:
        self._api_path = api_path.rstrip("/")
        self._http = http_client

    @property
    def api_path(self) -> str:
        return self._api_path

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        # A 404 means the index has no record yet
        try:
            return await self._http.get(f"{self._api_path}{path}", params=params)
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                return None
            raise

    async def _get_page(
        self,
        location: str,
        path: str,
        cursor: Optional[str],
        all_pages: bool,
    ) -> Dict[str, Any]:
        with error_boundary(location):
            page = await self._get(path, {"cursor": cursor} if cursor else None)
            if page is None:
                return _empty_page()
            page = dict(page)
            assets: List[Dict[str, Any]] = list(page.get("assets") or [])
            while all_pages and page.get("cursor"):
                following = await self._get(path, {"cursor": page["cursor"]})
                if not following:
                    break
                assets.extend(following.get("assets") or [])
                page["cursor"] = following.get("cursor")
        page["assets"] = assets
        page.setdefault("total", len(assets))
        page.setdefault("cursor", None)
        return page

    async def query_by_owner(
        self,
        public_address: str,
        include_metadata: bool = False,
        cursor: Optional[str] = None,
        all_pages: bool = False,
    ) -> Dict[str, Any]:
        """
        List the NFTs owned by an account.

        Args:
            public_address: Owner account
            include_metadata: Keep each asset's ``metadata``
            cursor: Resume from a previous page
            all_pages: Follow cursors and return every asset

        Returns:
            Page with ``total``, ``cursor`` and ``assets``
        """
        location = ErrorLocation.API_QUERY_BY_OWNER
        validate_address(
            public_address,
            location=location,
            message=ErrorMessage.INVALID_PUBLIC_ADDRESS,
            field="public_address",
        )
        page = await self._get_page(
            location, f"/accounts/{public_address}/assets/nfts", cursor, all_pages
        )
        assets = []
        for asset in page["assets"]:
            asset = dict(asset)
            if include_metadata:
                asset.setdefault("metadata", None)
            else:
                asset.pop("metadata", None)
            assets.append(asset)
        page["assets"] = assets
        return page

    async def query_by_collection(
        self,
        contract_address: str,
        cursor: Optional[str] = None,
        all_pages: bool = False,
    ) -> Dict[str, Any]:
        """List the tokens of a collection."""
        location = ErrorLocation.API_QUERY_BY_COLLECTION
        validate_address(
            contract_address,
            location=location,
            message=ErrorMessage.INVALID_CONTRACT_ADDRESS,
            field="contract_address",
        )
        return await self._get_page(location, f"/nfts/{contract_address}/tokens", cursor, all_pages)

    async def query_contract_metadata(self, contract_address: str) -> Optional[Dict[str, Any]]:
        """Return the collection-level metadata, or None if not indexed yet."""
        location = ErrorLocation.API_QUERY_CONTRACT_METADATA
        validate_address(
            contract_address,
            location=location,
            message=ErrorMessage.INVALID_CONTRACT_ADDRESS,
            field="contract_address",
        )
        with error_boundary(location):
            body = await self._get(f"/nfts/{contract_address}")
        if body is None:
            return None
        return {key: value for key, value in body.items() if key != "contract"}

    async def query_token_metadata(self, contract_address: str, token_id: int) -> Optional[Dict[str, Any]]:
        """Return the metadata of one token, or None if not indexed yet."""
        location = ErrorLocation.API_QUERY_TOKEN_METADATA
        validate_address(
            contract_address,
            location=location,
            message=ErrorMessage.INVALID_CONTRACT_ADDRESS,
            field="contract_address",
        )
        validate_integer(
            token_id,
            location=location,
            message=ErrorMessage.NO_TOKEN_ID_SUPPLIED,
            field="token_id",
            ge=0,
        )
        with error_boundary(location):
            return await self._get(f"/nfts/{contract_address}/tokens/{token_id}")
