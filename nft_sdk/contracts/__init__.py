"""Contract templates and the lifecycle machinery they share."""
from .base import DEFAULT_GAS_LIMIT, BoundState, ContractBinding, ContractHandle, Template
from .erc1155_mintable import ERC1155Mintable
from .erc721_mintable import ERC721Mintable
from .erc721_user_mintable import ERC721UserMintable
from .registry import TEMPLATE_CLASSES, create_handle, resolve_template

__all__ = [
    "DEFAULT_GAS_LIMIT",
    "BoundState",
    "ContractBinding",
    "ContractHandle",
    "Template",
    "ERC721Mintable",
    "ERC721UserMintable",
    "ERC1155Mintable",
    "TEMPLATE_CLASSES",
    "create_handle",
    "resolve_template",
]
