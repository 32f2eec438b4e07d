import json

import httpx
import pytest

from nft_sdk.errors import NetworkError, ValidationError
from nft_sdk.messages import ErrorLocation
from nft_sdk.storage import (
    IpfsStorage,
    free_level_metadata,
    open_sea_collection_level_standard,
    open_sea_token_level_standard,
)

API_URL = "https://ipfs.test:5001"


class FakeIpfs:
    """Minimal /api/v0 stub; hashes are derived from the file names."""

    def __init__(self) -> None:
        self.requests = []
        self.bodies = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        self.requests.append(request)
        self.bodies.append(body)
        if request.url.host == "media.test":
            return httpx.Response(200, content=b"\x89PNG")
        if request.url.path == "/api/v0/add":
            names = [part.split(b'"')[0].decode() for part in body.split(b'filename="')[1:]]
            lines = [{"Name": name, "Hash": f"Qm{name[-4:]}", "Size": "10"} for name in names]
            if request.url.params.get("wrap-with-directory") == "true":
                lines.append({"Name": "", "Hash": "QmDirectory", "Size": "100"})
            return httpx.Response(200, text="\n".join(json.dumps(line) for line in lines))
        if request.url.path == "/api/v0/pin/rm":
            return httpx.Response(200, json={"Pins": [request.url.params["arg"]]})
        return httpx.Response(404)


def _storage(fake: FakeIpfs) -> IpfsStorage:
    return IpfsStorage("project", "secret", api_url=API_URL, transport=httpx.MockTransport(fake))


@pytest.mark.asyncio
async def test_store_local_file(tmp_path):
    image = tmp_path / "cat.png"
    image.write_bytes(b"\x89PNG")
    fake = FakeIpfs()
    uri = await _storage(fake).store_file(str(image))
    assert uri == "ipfs://Qm.png"
    request = fake.requests[0]
    assert request.url.params["pin"] == "true"
    assert request.headers["Authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_store_file_from_url():
    fake = FakeIpfs()
    uri = await _storage(fake).store_file("https://media.test/images/dog.png")
    assert uri == "ipfs://Qm.png"
    assert [r.url.host for r in fake.requests] == ["media.test", "ipfs.test"]
    # Credentials are only sent to the storage API
    assert "Authorization" not in fake.requests[0].headers


@pytest.mark.asyncio
@pytest.mark.parametrize("source", ["", "/does/not/exist.png", None])
async def test_store_file_rejects_bad_source(source):
    fake = FakeIpfs()
    with pytest.raises(ValidationError) as excinfo:
        await _storage(fake).store_file(source)
    assert excinfo.value.location == ErrorLocation.IPFS_STORE_FILE
    assert fake.requests == []


@pytest.mark.asyncio
async def test_store_object():
    fake = FakeIpfs()
    uri = await _storage(fake).store_object({"name": "Token"})
    assert uri == "ipfs://Qmjson"
    assert b'{"name": "Token"}' in fake.bodies[0]


@pytest.mark.asyncio
async def test_store_directory_names_entries_by_index():
    fake = FakeIpfs()
    uris = await _storage(fake).store_directory([{"name": "a"}, {"name": "b"}])
    assert uris == ["ipfs://QmDirectory/0", "ipfs://QmDirectory/1"]
    assert fake.requests[0].url.params["wrap-with-directory"] == "true"


@pytest.mark.asyncio
async def test_store_directory_uses_hex_ids_for_erc1155():
    fake = FakeIpfs()
    uris = await _storage(fake).store_directory([{"name": "a"}, {"name": "b"}], erc1155=True)
    assert uris == ["ipfs://QmDirectory/" + "0" * 64, "ipfs://QmDirectory/" + "0" * 63 + "1"]


@pytest.mark.asyncio
@pytest.mark.parametrize("entries", [[], None, [{"name": "a"}, "b"]])
async def test_store_directory_validation(entries):
    fake = FakeIpfs()
    with pytest.raises(ValidationError):
        await _storage(fake).store_directory(entries)
    assert fake.requests == []


@pytest.mark.asyncio
async def test_unpin_accepts_uri():
    fake = FakeIpfs()
    await _storage(fake).unpin("ipfs://QmDirectory/0")
    assert fake.requests[0].url.params["arg"] == "QmDirectory"


@pytest.mark.asyncio
async def test_service_error_is_network_error():
    def fail(request):
        return httpx.Response(401, json={"Message": "unauthorized"})

    storage = IpfsStorage("project", "wrong", api_url=API_URL, transport=httpx.MockTransport(fail))
    with pytest.raises(NetworkError) as excinfo:
        await storage.store_object({"name": "Token"})
    assert excinfo.value.location == ErrorLocation.IPFS_STORE_OBJECT
    await storage.aclose()


def test_collection_level_metadata():
    doc = open_sea_collection_level_standard(
        name="Collection", description="desc", seller_fee_basis_points=250, fee_recipient="0x" + "ab" * 20
    )
    assert doc == {
        "name": "Collection",
        "description": "desc",
        "seller_fee_basis_points": 250,
        "fee_recipient": "0x" + "ab" * 20,
    }
    with pytest.raises(ValidationError) as excinfo:
        open_sea_collection_level_standard(name="")
    assert excinfo.value.location == ErrorLocation.METADATA_COLLECTION_LEVEL


def test_token_level_metadata():
    doc = open_sea_token_level_standard(
        name="Token", image="ipfs://img", attributes=[{"trait_type": "Color", "value": "Red"}]
    )
    assert doc["attributes"] == [{"trait_type": "Color", "value": "Red"}]
    assert "description" not in doc
    assert open_sea_token_level_standard() == {}
    with pytest.raises(ValidationError):
        open_sea_token_level_standard(attributes={"trait_type": "Color"})
    with pytest.raises(ValidationError):
        open_sea_token_level_standard(attributes=["Red"])


def test_free_level_metadata():
    assert free_level_metadata({"anything": [1, 2]}) == {"anything": [1, 2]}
    with pytest.raises(ValidationError) as excinfo:
        free_level_metadata(["not", "an", "object"])
    assert excinfo.value.location == ErrorLocation.METADATA_FREE_LEVEL
