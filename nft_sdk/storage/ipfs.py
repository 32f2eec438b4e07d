"""
IPFS storage over the IPFS HTTP API (``/api/v0``).

Files, JSON objects and directories of JSON entries are added and pinned;
the returned URIs use the ``ipfs://`` scheme so they can be used directly as
token or contract URIs.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import httpx

from ..errors import ValidationError, error_boundary
from ..messages import ErrorLocation, ErrorMessage
from ..validators import validate_mapping, validate_non_empty_string

logger = logging.getLogger(__name__)

IPFS_API_URL = "https://ipfs.infura.io:5001"
DEFAULT_STORAGE_TIMEOUT = 60.0

FileEntry = Tuple[str, bytes]


def _parse_add_response(text: str) -> List[Dict[str, Any]]:
    # /api/v0/add streams one JSON object per added entry
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class IpfsStorage:
    """
    Client for an IPFS pinning service.

    Args:
        project_id: API key id
        api_key_secret: API key secret
        api_url: Base URL of the IPFS HTTP API
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)
    """

    def __init__(
        self,
        project_id: str,
        api_key_secret: str,
        *,
        api_url: str = IPFS_API_URL,
        timeout: float = DEFAULT_STORAGE_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._auth = httpx.BasicAuth(project_id, api_key_secret)
        self._api_url = api_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _add(self, files: Sequence[FileEntry], wrap_with_directory: bool = False) -> List[Dict[str, Any]]:
        params = {"pin": "true"}
        if wrap_with_directory:
            params["wrap-with-directory"] = "true"
        response = await self._client.post(
            f"{self._api_url}/api/v0/add",
            params=params,
            files=[("file", (name, content, "application/octet-stream")) for name, content in files],
            auth=self._auth,
        )
        response.raise_for_status()
        return _parse_add_response(response.text)

    async def _read_source(self, source: Union[str, Path]) -> FileEntry:
        text = str(source)
        if text.startswith(("http://", "https://")):
            response = await self._client.get(text, follow_redirects=True)
            response.raise_for_status()
            return text.rstrip("/").rsplit("/", 1)[-1] or "file", response.content
        path = Path(source)
        if not path.is_file():
            raise ValidationError(ErrorMessage.INVALID_SOURCE, ErrorLocation.IPFS_STORE_FILE, field="source")
        return path.name, path.read_bytes()

    async def store_file(self, source: Union[str, Path]) -> str:
        """
        Store a local file or the content behind a URL.

        Args:
            source: Path to a local file or an http(s) URL

        Returns:
            ``ipfs://<cid>`` URI of the stored content
        """
        location = ErrorLocation.IPFS_STORE_FILE
        if not isinstance(source, Path):
            validate_non_empty_string(
                source, location=location, message=ErrorMessage.INVALID_SOURCE, field="source"
            )
        with error_boundary(location):
            entry = await self._read_source(source)
            added = await self._add([entry])
        cid = added[-1]["Hash"]
        logger.info("Stored %s as ipfs://%s", entry[0], cid)
        return f"ipfs://{cid}"

    async def store_object(self, obj: Mapping[str, Any]) -> str:
        """Store a JSON object and return its ``ipfs://`` URI."""
        location = ErrorLocation.IPFS_STORE_OBJECT
        validate_mapping(obj, location=location, message=ErrorMessage.INVALID_METADATA, field="obj")
        with error_boundary(location):
            payload = json.dumps(dict(obj)).encode("utf-8")
            added = await self._add([("metadata.json", payload)])
        return f"ipfs://{added[-1]['Hash']}"

    async def store_directory(self, entries: Sequence[Mapping[str, Any]], erc1155: bool = False) -> List[str]:
        """
        Store JSON entries as files of a single directory.

        Entry ``i`` is stored as file ``i`` or, for ERC1155 collections, as
        the 64-character zero-padded hex id expected by ``{id}`` substitution.

        Returns:
            ``ipfs://<dir-cid>/<name>`` URI of every entry, in order
        """
        location = ErrorLocation.IPFS_STORE_DIRECTORY
        if not isinstance(entries, (list, tuple)) or not entries:
            raise ValidationError(ErrorMessage.INVALID_METADATA, location, field="entries")
        for entry in entries:
            validate_mapping(entry, location=location, message=ErrorMessage.INVALID_METADATA, field="entries")

        names = [format(index, "064x") if erc1155 else str(index) for index in range(len(entries))]
        files = [(name, json.dumps(dict(entry)).encode("utf-8")) for name, entry in zip(names, entries)]
        with error_boundary(location):
            added = await self._add(files, wrap_with_directory=True)
            # The wrapping directory is reported last, with an empty name
            directory_cid = [item["Hash"] for item in added if item.get("Name") == ""][-1]
        return [f"ipfs://{directory_cid}/{name}" for name in names]

    async def unpin(self, cid: str) -> None:
        """Remove the pin of ``cid`` (accepts a bare CID or an ``ipfs://`` URI)."""
        location = ErrorLocation.IPFS_UNPIN
        validate_non_empty_string(cid, location=location, message=ErrorMessage.INVALID_SOURCE, field="cid")
        if cid.startswith("ipfs://"):
            cid = cid[len("ipfs://"):].split("/", 1)[0]
        with error_boundary(location):
            response = await self._client.post(
                f"{self._api_url}/api/v0/pin/rm", params={"arg": cid}, auth=self._auth
            )
            response.raise_for_status()
