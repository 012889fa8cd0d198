from __future__ import annotations

import httpx
import pytest

from computeengine.client import AsyncComputeClient
from computeengine.errors import ConfigurationError, TransportError

PROJECT_ID = "test-project"
BASE_URL = "https://compute.example/compute/v1"


def _zone(name: str, region: str, state: str | None = None) -> dict[str, object]:
    item: dict[str, object] = {
        "name": name,
        "status": "UP",
        "region": f"{BASE_URL}/projects/{PROJECT_ID}/regions/{region}",
        "selfLink": f"{BASE_URL}/projects/{PROJECT_ID}/zones/{name}",
    }
    if state is not None:
        item["deprecated"] = {"state": state}
    return item


ZONES = {
    "items": [
        _zone("us-central1-f", "us-central1"),
        _zone("asia-east1-a", "asia-east1"),
        _zone("us-central1-a", "us-central1"),
        _zone("us-central1-d", "us-central1", state="DEPRECATED"),
    ]
}


def _handler(request: httpx.Request) -> httpx.Response:
    assert request.url.path == f"/compute/v1/projects/{PROJECT_ID}/zones"
    return httpx.Response(200, json=ZONES)


@pytest.mark.asyncio
async def test_list_available_zones() -> None:
    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as http_client:
        client = AsyncComputeClient(
            config={}, project_id=PROJECT_ID, access_token="token", base_url=BASE_URL, http_client=http_client
        )
        zones = await client.zones.list_available()

    assert [zone.name for zone in zones] == ["asia-east1-a", "us-central1-a", "us-central1-f"]
    assert zones[0].region == "asia-east1"


@pytest.mark.asyncio
async def test_list_available_zones_in_region_accepts_self_link() -> None:
    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as http_client:
        client = AsyncComputeClient(
            config={}, project_id=PROJECT_ID, access_token="token", base_url=BASE_URL, http_client=http_client
        )
        by_name = await client.zones.list_available(region="us-central1")
        by_link = await client.zones.list_available(
            region=f"{BASE_URL}/projects/{PROJECT_ID}/regions/us-central1"
        )

    assert [zone.name for zone in by_name] == ["us-central1-a", "us-central1-f"]
    assert by_link == by_name


@pytest.mark.asyncio
async def test_list_zones_requires_project() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        client = AsyncComputeClient(config={}, access_token="token", base_url=BASE_URL, http_client=http_client)
        with pytest.raises(ConfigurationError):
            await client.zones.list_available("   ")


@pytest.mark.asyncio
async def test_malformed_zone_payload_surfaces_as_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": [{"name": "us-west1-a", "region": ["not", "a", "link"]}]})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        client = AsyncComputeClient(
            config={}, project_id=PROJECT_ID, access_token="token", base_url=BASE_URL, http_client=http_client
        )
        with pytest.raises(TransportError, match="malformed ZoneList"):
            await client.zones.list_available()
