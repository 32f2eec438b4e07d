import pytest
from web3 import Web3
from web3.exceptions import ContractLogicError

from conftest import CONTRACT_ADDRESS, OWNER, RECIPIENT

from nft_sdk.contracts import DEFAULT_GAS_LIMIT, ERC721Mintable
from nft_sdk.contracts.access_control import DEFAULT_ADMIN_ROLE, MINTER_ROLE
from nft_sdk.errors import NetworkError, ValidationError
from nft_sdk.messages import ErrorLocation, ErrorMessage


async def _bound(signer):
    handle = ERC721Mintable(signer)
    await handle.load(CONTRACT_ADDRESS)
    return handle, signer.contracts[-1]


@pytest.mark.asyncio
async def test_deploy_passes_constructor_args_in_order(signer):
    handle = ERC721Mintable(signer)
    await handle.deploy(name="Collection", symbol="COL", contract_uri="ipfs://contract")
    assert signer.deployments == [(["Collection", "COL", "ipfs://contract"], DEFAULT_GAS_LIMIT)]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params,message",
    [
        ({"name": "", "symbol": "COL", "contract_uri": "ipfs://c"}, ErrorMessage.NO_NAME_SUPPLIED),
        ({"name": "Collection", "symbol": None, "contract_uri": "ipfs://c"}, ErrorMessage.NO_SYMBOL_SUPPLIED),
        ({"name": "Collection", "symbol": "COL", "contract_uri": None}, ErrorMessage.NO_CONTRACT_URI_SUPPLIED),
        # The first violation in declaration order is reported
        ({"name": None, "symbol": None, "contract_uri": None}, ErrorMessage.NO_NAME_SUPPLIED),
    ],
)
async def test_deploy_validation(signer, params, message):
    handle = ERC721Mintable(signer)
    with pytest.raises(ValidationError) as excinfo:
        await handle.deploy(**params)
    assert excinfo.value.message == message
    assert excinfo.value.location == ErrorLocation.ERC721_MINTABLE_DEPLOY
    assert signer.external_calls == 0


@pytest.mark.asyncio
async def test_mint_with_token_uri(signer):
    handle, contract = await _bound(signer)
    pending = await handle.mint(RECIPIENT, "ipfs://token/1")
    receipt = await pending.wait()
    assert receipt.status == 1
    method, args, kwargs = contract.transactions[0]
    assert method == "mintWithTokenURI"
    assert args == (RECIPIENT, "ipfs://token/1")
    assert kwargs["gas_limit"] == DEFAULT_GAS_LIMIT


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "address,token_uri,message",
    [
        ("notAValidAddress", "ipfs://t", ErrorMessage.INVALID_PUBLIC_ADDRESS),
        (RECIPIENT, "", ErrorMessage.NO_TOKEN_URI_SUPPLIED),
    ],
)
async def test_mint_validation(signer, address, token_uri, message):
    handle, contract = await _bound(signer)
    with pytest.raises(ValidationError) as excinfo:
        await handle.mint(address, token_uri)
    assert excinfo.value.message == message
    assert contract.transactions == []


@pytest.mark.asyncio
async def test_set_contract_uri(signer):
    handle, contract = await _bound(signer)
    await handle.set_contract_uri("ipfs://new")
    assert contract.transactions[0][:2] == ("setContractURI", ("ipfs://new",))


@pytest.mark.asyncio
async def test_transfer_uses_safe_transfer_and_gwei_gas_price(signer):
    handle, contract = await _bound(signer)
    await handle.transfer(OWNER, RECIPIENT, 7, gas_price="2")
    method, args, kwargs = contract.transactions[0]
    assert method == "safeTransferFrom(address,address,uint256)"
    assert args == (OWNER, RECIPIENT, 7)
    assert kwargs["gas_price"] == Web3.to_wei(2, "gwei")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"from_address": "0x12", "to_address": RECIPIENT, "token_id": 1}, ErrorMessage.INVALID_FROM_ADDRESS),
        ({"from_address": OWNER, "to_address": "", "token_id": 1}, ErrorMessage.INVALID_TO_ADDRESS),
        ({"from_address": OWNER, "to_address": RECIPIENT, "token_id": "1"}, ErrorMessage.TOKEN_ID_MUST_BE_INTEGER),
        (
            {"from_address": OWNER, "to_address": RECIPIENT, "token_id": 1, "gas_price": "0"},
            ErrorMessage.INVALID_GAS_PRICE_SUPPLIED,
        ),
        (
            {"from_address": OWNER, "to_address": RECIPIENT, "token_id": 1, "gas_price": "1e70"},
            ErrorMessage.INVALID_GAS_PRICE_SUPPLIED,
        ),
        (
            {"from_address": OWNER, "to_address": RECIPIENT, "token_id": 1, "gas_price": "0.0000000001"},
            ErrorMessage.INVALID_GAS_PRICE_SUPPLIED,
        ),
    ],
)
async def test_transfer_validation(signer, kwargs, message):
    handle, contract = await _bound(signer)
    with pytest.raises(ValidationError) as excinfo:
        await handle.transfer(**kwargs)
    assert excinfo.value.message == message
    assert excinfo.value.location == ErrorLocation.BASE_ERC721_TRANSFER
    assert contract.transactions == []


@pytest.mark.asyncio
async def test_approvals(signer):
    handle, contract = await _bound(signer)
    await handle.set_approval_for_all(RECIPIENT, True)
    await handle.approve_transfer(RECIPIENT, 3)
    assert [t[:2] for t in contract.transactions] == [
        ("setApprovalForAll", (RECIPIENT, True)),
        ("approve", (RECIPIENT, 3)),
    ]
    with pytest.raises(ValidationError) as excinfo:
        await handle.set_approval_for_all(RECIPIENT, "yes")
    assert excinfo.value.message == ErrorMessage.APPROVAL_STATUS_MUST_BE_BOOLEAN


@pytest.mark.asyncio
async def test_royalties(signer):
    handle, contract = await _bound(signer)
    contract.call_results["royaltyInfo"] = [OWNER, 50]
    await handle.set_royalties(OWNER, 500)
    assert contract.transactions[0][:2] == ("setRoyalties", (OWNER, 500))
    assert await handle.royalty_info(1, 1000) == (OWNER, 50)
    assert contract.reads == [("royaltyInfo", (1, 1000))]


@pytest.mark.asyncio
async def test_access_control_roles(signer):
    handle, contract = await _bound(signer)
    contract.call_results["hasRole"] = True
    await handle.access_control.add_minter(RECIPIENT)
    await handle.access_control.remove_admin(RECIPIENT)
    await handle.access_control.renounce_ownership()
    assert await handle.access_control.is_minter(RECIPIENT) is True
    assert [t[:2] for t in contract.transactions] == [
        ("grantRole", (MINTER_ROLE, RECIPIENT)),
        ("revokeRole", (DEFAULT_ADMIN_ROLE, RECIPIENT)),
        ("renounceOwnership", ()),
    ]
    with pytest.raises(ValidationError):
        await handle.access_control.add_admin("notAValidAddress")


@pytest.mark.asyncio
async def test_revert_is_normalized_with_operation_location(signer):
    handle, contract = await _bound(signer)
    contract.fail_with = ContractLogicError("execution reverted: caller is not a minter")
    with pytest.raises(NetworkError) as excinfo:
        await handle.mint(RECIPIENT, "ipfs://token")
    err = excinfo.value
    assert err.location == ErrorLocation.ERC721_MINTABLE_MINT
    assert str(err) == (
        "[ERC721Mintable.mint] Network: An error occurred: execution reverted: caller is not a minter"
    )
