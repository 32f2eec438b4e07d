"""Off-chain storage for token media and metadata."""
from .ipfs import IPFS_API_URL, IpfsStorage
from .metadata import (
    free_level_metadata,
    open_sea_collection_level_standard,
    open_sea_token_level_standard,
)

__all__ = [
    "IPFS_API_URL",
    "IpfsStorage",
    "free_level_metadata",
    "open_sea_collection_level_standard",
    "open_sea_token_level_standard",
]
