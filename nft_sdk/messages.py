"""
Catalogue of error messages and location tags.

Messages and locations are kept as plain string constants so that callers
(and tests) can match errors exactly.
"""


class ErrorMessage:
    """Human-readable error messages."""

    INVALID_AUTH_INSTANCE = "Invalid Auth instance."

    NO_PARAMETERS_SUPPLIED = "No parameters supplied."
    NO_TEMPLATE_TYPE_SUPPLIED = "No template type supplied."
    NO_TOKEN_ID_SUPPLIED = "No tokenId supplied."
    NO_TOKEN_URI_SUPPLIED = "No tokenURI supplied."
    NO_PROJECT_ID_SUPPLIED = "No project id supplied."
    NO_SECRET_ID_SUPPLIED = "No secret id supplied."
    NO_CHAIN_ID_SUPPLIED = "No chain id supplied."
    NO_SIGNER_INSTANCE_SUPPLIED = "No signer instance supplied."
    NO_NAME_SUPPLIED = "No name supplied."
    NO_SYMBOL_SUPPLIED = "No symbol supplied."
    NO_CONTRACT_URI_SUPPLIED = "No contractURI supplied."
    NO_BASE_URI_SUPPLIED = "No baseURI supplied."
    NO_ADDRESS_SUPPLIED = "No address supplied."
    NO_SELL_PRICE_SUPPLIED = "No sell price supplied."
    NO_TO_ADDRESS = "No to address."
    NO_PRIVATE_KEY = "No privateKey."
    INVALID_PRIVATE_KEY = "Invalid privateKey."
    NO_IPFS_CONFIGURED = "No IPFS credentials configured."

    INVALID_CONTRACT_ADDRESS = "Invalid contract address."
    INVALID_PUBLIC_ADDRESS = "Invalid public address."
    INVALID_FROM_ADDRESS = "Invalid from address."
    INVALID_TO_ADDRESS = "Invalid to address."
    INVALID_CONTRACT_URI = "Invalid contractURI."
    INVALID_BASE_URI = "Invalid baseURI."
    INVALID_TEMPLATE = "Invalid template."
    INVALID_TRANSACTION_HASH = "Invalid transaction hash."
    INVALID_MAX_SUPPLY = "Invalid maximum supply."
    INVALID_PRICE = "Invalid price."
    INVALID_COST = "Invalid cost."
    INVALID_MINT_QUANTITY = "Quantity as integer value greater than 0 required."
    QUANTITY_MUST_BE_BETWEEN_1_AND_20 = "Quantity as integer value between 1 and 20 is required."
    INVALID_IDS = "Ids must be a list of non-negative integers."
    INVALID_QUANTITIES = "Quantities must be a list of integers greater than 0."
    IDS_QUANTITIES_LENGTH_MISMATCH = "Ids and quantities must have the same length."
    INVALID_GAS_PRICE_SUPPLIED = "Invalid value for gas provided."
    INVALID_SOURCE = "Source should be a file or a valid URL."
    INVALID_METADATA = "Metadata should be a JSON object."
    INVALID_DEPLOY_PARAMETER = "Unsupported deploy parameter."
    INVALID_POLL_INTERVAL = "Poll interval must be greater than 0."
    INVALID_POLL_TIMEOUT = "Poll timeout must be greater than or equal to the interval."

    CONTRACT_ALREADY_DEPLOYED = "Contract already deployed."
    CONTRACT_ALREADY_LOADED = "Contract already loaded."
    CONTRACT_NOT_DEPLOYED_OR_LOADED = "Contract not deployed or loaded."
    CONTRACT_DEPLOYMENT_FAILED = "Contract deployment transaction failed."

    FEE_MUST_BE_BETWEEN_0_AND_10000 = "Fee must be between 0 and 10000."
    TOKEN_ID_MUST_BE_INTEGER = "TokenId must be integer."
    APPROVAL_STATUS_MUST_BE_BOOLEAN = "approvalStatus must be boolean."
    CHAIN_NOT_SUPPORTED = "Chain not supported."
    AN_ERROR_OCCURRED = "An error occurred"
    CONDITION_TIMED_OUT = "Condition not met before timeout"


class ErrorLocation:
    """Location tags identifying the failing operation."""

    SDK_CONSTRUCTOR = "[SDK.__init__]"
    SDK_DEPLOY = "[SDK.deploy]"
    SDK_LOAD_CONTRACT = "[SDK.load_contract]"
    SDK_GET_STATUS = "[SDK.get_status]"
    SDK_STORE = "[SDK.store]"

    API_QUERY_BY_OWNER = "[SDK.query_by_owner]"
    API_QUERY_BY_COLLECTION = "[SDK.query_by_collection]"
    API_QUERY_CONTRACT_METADATA = "[SDK.query_contract_metadata]"
    API_QUERY_TOKEN_METADATA = "[SDK.query_token_metadata]"

    AUTH_CONSTRUCTOR = "[Auth.__init__]"

    ACCESS_CONTROL_ADD_MINTER = "[AccessControl.add_minter]"
    ACCESS_CONTROL_REMOVE_MINTER = "[AccessControl.remove_minter]"
    ACCESS_CONTROL_RENOUNCE_MINTER = "[AccessControl.renounce_minter]"
    ACCESS_CONTROL_IS_MINTER = "[AccessControl.is_minter]"
    ACCESS_CONTROL_ADD_ADMIN = "[AccessControl.add_admin]"
    ACCESS_CONTROL_REMOVE_ADMIN = "[AccessControl.remove_admin]"
    ACCESS_CONTROL_RENOUNCE_ADMIN = "[AccessControl.renounce_admin]"
    ACCESS_CONTROL_IS_ADMIN = "[AccessControl.is_admin]"
    ACCESS_CONTROL_RENOUNCE_OWNERSHIP = "[AccessControl.renounce_ownership]"

    BASE_ERC721_TRANSFER = "[BaseERC721.transfer]"
    BASE_ERC721_SET_APPROVAL_FOR_ALL = "[BaseERC721.set_approval_for_all]"
    BASE_ERC721_APPROVE_TRANSFER = "[BaseERC721.approve_transfer]"

    ROYALTIES_SET_ROYALTIES = "[Royalties.set_royalties]"
    ROYALTIES_ROYALTY_INFO = "[Royalties.royalty_info]"

    ERC721_MINTABLE_DEPLOY = "[ERC721Mintable.deploy]"
    ERC721_MINTABLE_LOAD = "[ERC721Mintable.load]"
    ERC721_MINTABLE_MINT = "[ERC721Mintable.mint]"
    ERC721_MINTABLE_SET_CONTRACT_URI = "[ERC721Mintable.set_contract_uri]"

    ERC721_USER_MINTABLE_DEPLOY = "[ERC721UserMintable.deploy]"
    ERC721_USER_MINTABLE_LOAD = "[ERC721UserMintable.load]"
    ERC721_USER_MINTABLE_MINT = "[ERC721UserMintable.mint]"
    ERC721_USER_MINTABLE_PRICE = "[ERC721UserMintable.price]"
    ERC721_USER_MINTABLE_RESERVE = "[ERC721UserMintable.reserve]"
    ERC721_USER_MINTABLE_REVEAL = "[ERC721UserMintable.reveal]"
    ERC721_USER_MINTABLE_SET_PRICE = "[ERC721UserMintable.set_price]"
    ERC721_USER_MINTABLE_TOGGLE_SALE = "[ERC721UserMintable.toggle_sale]"
    ERC721_USER_MINTABLE_SET_BASE_URI = "[ERC721UserMintable.set_base_uri]"
    ERC721_USER_MINTABLE_WITHDRAW = "[ERC721UserMintable.withdraw]"
    ERC721_USER_MINTABLE_RENOUNCE_OWNERSHIP = "[ERC721UserMintable.renounce_ownership]"

    ERC1155_MINTABLE_DEPLOY = "[ERC1155Mintable.deploy]"
    ERC1155_MINTABLE_LOAD = "[ERC1155Mintable.load]"
    ERC1155_MINTABLE_MINT = "[ERC1155Mintable.mint]"
    ERC1155_MINTABLE_MINT_BATCH = "[ERC1155Mintable.mint_batch]"
    ERC1155_MINTABLE_ADD_IDS = "[ERC1155Mintable.add_ids]"
    ERC1155_MINTABLE_SET_BASE_URI = "[ERC1155Mintable.set_base_uri]"
    ERC1155_MINTABLE_SET_CONTRACT_URI = "[ERC1155Mintable.set_contract_uri]"
    ERC1155_MINTABLE_TRANSFER = "[ERC1155Mintable.transfer]"
    ERC1155_MINTABLE_TRANSFER_BATCH = "[ERC1155Mintable.transfer_batch]"
    ERC1155_MINTABLE_SET_APPROVAL_FOR_ALL = "[ERC1155Mintable.set_approval_for_all]"

    CONTRACT_FACTORY_DEPLOY = "[ContractFactory.deploy]"
    PENDING_WRITE_WAIT = "[PendingWrite.wait]"
    POLLER_AWAIT_CONDITION = "[Poller.await_condition]"

    IPFS_STORE_FILE = "[IPFS.store_file]"
    IPFS_STORE_OBJECT = "[IPFS.store_object]"
    IPFS_STORE_DIRECTORY = "[IPFS.store_directory]"
    IPFS_UNPIN = "[IPFS.unpin]"

    METADATA_COLLECTION_LEVEL = "[Metadata.open_sea_collection_level_standard]"
    METADATA_TOKEN_LEVEL = "[Metadata.open_sea_token_level_standard]"
    METADATA_FREE_LEVEL = "[Metadata.free_level_metadata]"
