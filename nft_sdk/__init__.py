"""
NFT SDK

Deploy, load and operate NFT contract templates (ERC721 and ERC1155), query
the NFT indexing API and store token metadata on IPFS.
"""

__version__ = "1.0.0"

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
)

from .errors import (
    ContractStateError,
    ErrorKind,
    NetworkError,
    PollTimeoutError,
    SdkError,
    ValidationError,
    normalize,
)
from .messages import ErrorLocation, ErrorMessage
from .poller import PollSpec, await_condition
from .provider import PendingWrite, TransactionReceipt, TxStatus
from .contracts import (
    BoundState,
    ERC1155Mintable,
    ERC721Mintable,
    ERC721UserMintable,
    Template,
)
from .config import SDKConfig
from .auth import Auth
from .sdk import SDK

__all__ = [
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'ContractStateError',
    'ErrorKind',
    'NetworkError',
    'PollTimeoutError',
    'SdkError',
    'ValidationError',
    'normalize',
    'ErrorLocation',
    'ErrorMessage',
    'PollSpec',
    'await_condition',
    'PendingWrite',
    'TransactionReceipt',
    'TxStatus',
    'BoundState',
    'ERC1155Mintable',
    'ERC721Mintable',
    'ERC721UserMintable',
    'Template',
    'SDKConfig',
    'Auth',
    'SDK',
]
