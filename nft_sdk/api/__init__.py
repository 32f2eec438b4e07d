"""Read-path access to the NFT indexing API."""
from .client import Api
from .http import DEFAULT_REQUEST_TIMEOUT, NFT_API_URL, HttpService

__all__ = ["Api", "HttpService", "NFT_API_URL", "DEFAULT_REQUEST_TIMEOUT"]
