"""
SDK configuration: credentials, endpoints and timeouts.

Values default to the conventional environment variables so that scripts and
test harnesses can build an ``Auth`` with ``Auth.from_config(SDKConfig.from_env())``.
Nothing is read at import time.
"""

import os
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .api.http import DEFAULT_REQUEST_TIMEOUT, NFT_API_URL
from .provider import DEFAULT_RECEIPT_TIMEOUT

_HEX_RE = re.compile(r"^0x[0-9a-fA-F]+$")


def _parse_chain_id(val: Any) -> Optional[int]:
    """Accepts int, decimal str, or 0x-hex str."""
    if val is None or val == "":
        return None
    if isinstance(val, int):
        return val
    s = str(val).strip()
    if _HEX_RE.match(s):
        return int(s, 16)
    return int(s, 10)


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v else default


def _ensure_http(url: Optional[str]) -> Optional[str]:
    if url and not url.lower().startswith(("http://", "https://")):
        raise ValueError(f"URL must start with http:// or https://, got: {url!r}")
    return url


@dataclass
class SDKConfig:
    # Account
    private_key: Optional[str] = None
    chain_id: Optional[int] = None
    rpc_url: Optional[str] = None
    # Indexing API credentials
    project_id: Optional[str] = None
    secret_id: Optional[str] = None
    # Storage credentials (optional)
    ipfs_project_id: Optional[str] = None
    ipfs_api_key_secret: Optional[str] = None
    # Endpoints / timeouts
    api_url: str = NFT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT

    @classmethod
    def from_env(cls) -> "SDKConfig":
        """
        Create config from environment variables:

        WALLET_PRIVATE_KEY           (hex private key)
        CHAIN_ID                     (int or 0x-hex)
        EVM_RPC_URL                  (http/https) optional
        INFURA_PROJECT_ID            (str)
        INFURA_PROJECT_SECRET        (str)
        INFURA_IPFS_PROJECT_ID       (str) optional
        INFURA_IPFS_PROJECT_SECRET   (str) optional
        NFT_API_URL                  (http/https) optional
        NFT_SDK_REQUEST_TIMEOUT      (float seconds)
        NFT_SDK_RECEIPT_TIMEOUT      (float seconds)
        """
        return cls(
            private_key=_env("WALLET_PRIVATE_KEY"),
            chain_id=_parse_chain_id(_env("CHAIN_ID")),
            rpc_url=_ensure_http(_env("EVM_RPC_URL")),
            project_id=_env("INFURA_PROJECT_ID"),
            secret_id=_env("INFURA_PROJECT_SECRET"),
            ipfs_project_id=_env("INFURA_IPFS_PROJECT_ID"),
            ipfs_api_key_secret=_env("INFURA_IPFS_PROJECT_SECRET"),
            api_url=_ensure_http(_env("NFT_API_URL", NFT_API_URL)) or NFT_API_URL,
            request_timeout=float(_env("NFT_SDK_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))),
            receipt_timeout=float(_env("NFT_SDK_RECEIPT_TIMEOUT", str(DEFAULT_RECEIPT_TIMEOUT))),
        )

    def with_overrides(self, **overrides: Any) -> "SDKConfig":
        """
        Return a copy with keyword overrides applied.
        Unknown keys are ignored.
        """
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if k in data})
        if "chain_id" in overrides:
            data["chain_id"] = _parse_chain_id(overrides["chain_id"])
        if "rpc_url" in overrides:
            _ensure_http(data["rpc_url"])
        if "api_url" in overrides:
            _ensure_http(data["api_url"])
        return SDKConfig(**data)

    @property
    def has_ipfs(self) -> bool:
        return bool(self.ipfs_project_id and self.ipfs_api_key_secret)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __repr__(self) -> str:
        # Secrets stay out of logs and tracebacks
        masked = {
            key: ("***" if key in ("private_key", "secret_id", "ipfs_api_key_secret") and value else value)
            for key, value in self.to_dict().items()
        }
        fields = ", ".join(f"{key}={value!r}" for key, value in masked.items())
        return f"SDKConfig({fields})"


__all__ = ["SDKConfig"]
