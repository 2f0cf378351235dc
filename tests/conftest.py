import httpx
import pytest
from loguru import logger

from coin_charts.client import create_api_client
from coin_charts.config import Settings
from coin_charts.page import Page

# Logs de los tests solo en consola
logger.remove()
logger.add(lambda msg: print(msg, end=""), level="DEBUG")

COINS = ("bitcoin", "ethereum", "solana")
SYMBOLS = {"bitcoin": "BTC", "ethereum": "ETH", "solana": "SOL"}
START_TS = 1700000000


def _prices_payload(base, n=30, start_price=100.0):
    """Cuerpo como el del API: n muestras horarias, la más reciente primero."""
    prices = [[START_TS - i * 3600, f"{start_price + i:.2f}"] for i in range(n)]
    return {"data": {"base": base, "prices": {"hour": {"prices": prices}}}}


def _coin_of(request: httpx.Request) -> str:
    return request.url.path.rsplit("/", 1)[-1]


@pytest.fixture
def prices_payload():
    return _prices_payload


@pytest.fixture
def coin_of():
    return _coin_of


@pytest.fixture
def make_client():
    def factory(handler):
        return create_api_client(
            "https://coinbase.test/api/v2/assets/prices",
            transport=httpx.MockTransport(handler),
        )
    return factory


@pytest.fixture
def ok_handler():
    """Handler que responde n muestras para cualquier moneda conocida."""
    def factory(n=30):
        def handler(request: httpx.Request) -> httpx.Response:
            coin = _coin_of(request)
            return httpx.Response(200, json=_prices_payload(SYMBOLS[coin], n))
        return handler
    return factory


@pytest.fixture
def settings():
    return Settings(coins=COINS, refresh_interval=0.01)


@pytest.fixture
def page():
    return Page()
