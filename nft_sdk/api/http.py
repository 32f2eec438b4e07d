"""
Async HTTP client for the NFT indexing API.

Thin wrapper around ``httpx.AsyncClient`` that sets the base URL, the
authorization header and a default timeout, and decodes JSON bodies.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .. import __version__

logger = logging.getLogger(__name__)

NFT_API_URL = "https://nft.api.infura.io"
DEFAULT_REQUEST_TIMEOUT = 30.0


class HttpService:
    """GET-only JSON client. Shared by every query issued from one SDK."""

    def __init__(
        self,
        base_url: str,
        auth_header: Optional[str] = None,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": f"nft-sdk-python/{__version__}",
        }
        if auth_header:
            headers["Authorization"] = auth_header
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "HttpService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        GET ``path`` and return the decoded JSON body.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.HTTPError: On transport failures
        """
        logger.debug("GET %s params=%s", path, dict(params) if params else {})
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()
