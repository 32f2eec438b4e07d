import httpx
import pytest

from conftest import CONTRACT_ADDRESS, OWNER

from nft_sdk.api import Api, HttpService
from nft_sdk.errors import NetworkError, ValidationError
from nft_sdk.messages import ErrorLocation, ErrorMessage

BASE_URL = "https://nft.api.test"


class FakeIndex:
    """Routes requests to canned JSON responses and records them."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.url.path, request.url.params.get("cursor"))
        if key not in self.routes:
            key = (request.url.path, None)
        status, body = self.routes.get(key, (404, {"message": "not found"}))
        return httpx.Response(status, json=body)


def _api(index: FakeIndex) -> Api:
    http = HttpService(BASE_URL, "Basic abc", transport=httpx.MockTransport(index))
    return Api("/networks/1", http)


ASSET = {"contract": CONTRACT_ADDRESS, "tokenId": "0", "supply": "1", "type": "ERC1155", "metadata": {"name": "A"}}


@pytest.mark.asyncio
async def test_query_by_owner_strips_metadata_by_default():
    path = f"/networks/1/accounts/{OWNER}/assets/nfts"
    index = FakeIndex({(path, None): (200, {"total": 1, "cursor": None, "assets": [ASSET]})})
    result = await _api(index).query_by_owner(OWNER)
    assert result["total"] == 1
    assert "metadata" not in result["assets"][0]
    assert index.requests[0].headers["Authorization"] == "Basic abc"


@pytest.mark.asyncio
async def test_query_by_owner_keeps_metadata_on_request():
    path = f"/networks/1/accounts/{OWNER}/assets/nfts"
    bare = {k: v for k, v in ASSET.items() if k != "metadata"}
    index = FakeIndex({(path, None): (200, {"total": 2, "assets": [ASSET, bare]})})
    result = await _api(index).query_by_owner(OWNER, include_metadata=True)
    assert result["assets"][0]["metadata"] == {"name": "A"}
    assert result["assets"][1]["metadata"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("address", ["notAValidAddress", "", None])
async def test_invalid_address_makes_no_request(address):
    index = FakeIndex({})
    api = _api(index)
    for query, location in [
        (api.query_by_owner, ErrorLocation.API_QUERY_BY_OWNER),
        (api.query_by_collection, ErrorLocation.API_QUERY_BY_COLLECTION),
        (api.query_contract_metadata, ErrorLocation.API_QUERY_CONTRACT_METADATA),
    ]:
        with pytest.raises(ValidationError) as excinfo:
            await query(address)
        assert excinfo.value.location == location
    with pytest.raises(ValidationError):
        await api.query_token_metadata(address, 1)
    assert index.requests == []


@pytest.mark.asyncio
async def test_query_by_owner_message_for_invalid_address():
    with pytest.raises(ValidationError) as excinfo:
        await _api(FakeIndex({})).query_by_owner("notAValidAddress")
    assert str(excinfo.value) == f"[SDK.query_by_owner] Validation: {ErrorMessage.INVALID_PUBLIC_ADDRESS}"


@pytest.mark.asyncio
async def test_unknown_collection_is_empty_page():
    result = await _api(FakeIndex({})).query_by_collection(CONTRACT_ADDRESS)
    assert result == {"total": 0, "cursor": None, "assets": []}


@pytest.mark.asyncio
async def test_query_by_collection_follows_cursors():
    path = f"/networks/1/nfts/{CONTRACT_ADDRESS}/tokens"
    index = FakeIndex(
        {
            (path, None): (200, {"total": 3, "cursor": "p2", "assets": [{"tokenId": "0"}]}),
            (path, "p2"): (200, {"total": 3, "cursor": "p3", "assets": [{"tokenId": "1"}]}),
            (path, "p3"): (200, {"total": 3, "cursor": None, "assets": [{"tokenId": "2"}]}),
        }
    )
    api = _api(index)

    first = await api.query_by_collection(CONTRACT_ADDRESS)
    assert [a["tokenId"] for a in first["assets"]] == ["0"]
    assert first["cursor"] == "p2"

    everything = await api.query_by_collection(CONTRACT_ADDRESS, all_pages=True)
    assert [a["tokenId"] for a in everything["assets"]] == ["0", "1", "2"]
    assert everything["total"] == 3
    assert everything["cursor"] is None


@pytest.mark.asyncio
async def test_contract_metadata_drops_contract_key():
    path = f"/networks/1/nfts/{CONTRACT_ADDRESS}"
    body = {"contract": CONTRACT_ADDRESS, "name": "Collection", "symbol": "COL", "tokenType": "ERC721"}
    result = await _api(FakeIndex({(path, None): (200, body)})).query_contract_metadata(CONTRACT_ADDRESS)
    assert result == {"name": "Collection", "symbol": "COL", "tokenType": "ERC721"}


@pytest.mark.asyncio
async def test_missing_records_are_none():
    api = _api(FakeIndex({}))
    assert await api.query_contract_metadata(CONTRACT_ADDRESS) is None
    assert await api.query_token_metadata(CONTRACT_ADDRESS, 5) is None


@pytest.mark.asyncio
async def test_token_metadata():
    path = f"/networks/1/nfts/{CONTRACT_ADDRESS}/tokens/5"
    body = {"contract": CONTRACT_ADDRESS, "tokenId": "5", "metadata": {"name": "Five"}}
    result = await _api(FakeIndex({(path, None): (200, body)})).query_token_metadata(CONTRACT_ADDRESS, 5)
    assert result == body


@pytest.mark.asyncio
async def test_token_metadata_rejects_negative_id():
    index = FakeIndex({})
    with pytest.raises(ValidationError) as excinfo:
        await _api(index).query_token_metadata(CONTRACT_ADDRESS, -1)
    assert excinfo.value.message == ErrorMessage.NO_TOKEN_ID_SUPPLIED
    assert index.requests == []


@pytest.mark.asyncio
async def test_server_error_is_network_error():
    path = f"/networks/1/nfts/{CONTRACT_ADDRESS}/tokens"
    index = FakeIndex({(path, None): (500, {"message": "boom"})})
    with pytest.raises(NetworkError) as excinfo:
        await _api(index).query_by_collection(CONTRACT_ADDRESS)
    assert excinfo.value.location == ErrorLocation.API_QUERY_BY_COLLECTION
    assert "HTTP 500" in excinfo.value.message


@pytest.mark.asyncio
async def test_transport_failure_is_network_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = Api("/networks/1", HttpService(BASE_URL, transport=httpx.MockTransport(refuse)))
    with pytest.raises(NetworkError) as excinfo:
        await api.query_by_owner(OWNER)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_http_service_context_manager():
    index = FakeIndex({("/ping", None): (200, {"ok": True})})
    async with HttpService(BASE_URL, transport=httpx.MockTransport(index)) as http:
        assert await http.get("/ping") == {"ok": True}
    assert "Authorization" not in index.requests[0].headers
    assert index.requests[0].headers["Accept"] == "application/json"
