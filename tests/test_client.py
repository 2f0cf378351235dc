import asyncio

import httpx
import pytest
from pydantic import ValidationError

from coin_charts.client import fetch_coin_prices


def test_fetch_resolves_path_against_base_url(make_client, prices_payload):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=prices_payload("BTC", 3))

    async def run():
        async with make_client(handler) as client:
            return await fetch_coin_prices(client, "bitcoin")

    response = asyncio.run(run())

    assert seen == ["https://coinbase.test/api/v2/assets/prices/bitcoin"]
    assert response.data.base == "BTC"
    assert len(response.data.prices.hour.prices) == 3


def test_fetch_raises_on_http_error(make_client):
    def handler(request):
        return httpx.Response(503, json={"errors": []})

    async def run():
        async with make_client(handler) as client:
            await fetch_coin_prices(client, "bitcoin")

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(run())


def test_fetch_raises_on_unexpected_shape(make_client):
    def handler(request):
        return httpx.Response(200, json={"data": {"prices": {}}})

    async def run():
        async with make_client(handler) as client:
            await fetch_coin_prices(client, "bitcoin")

    with pytest.raises(ValidationError):
        asyncio.run(run())
