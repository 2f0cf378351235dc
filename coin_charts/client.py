import httpx
from typing import Optional

from .config import DEFAULT_BASE_URL
from .schemas import PricesResponse

def create_api_client(base_url: str = DEFAULT_BASE_URL, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    # Cliente único ligado a la URL base; las rutas relativas (/bitcoin, /ethereum...) se resuelven contra ella
    return httpx.AsyncClient(base_url=base_url, transport=transport)

async def fetch_coin_prices(client: httpx.AsyncClient, coin_id: str) -> PricesResponse:
    # Endpoint: {base}/{coin_id}  ej. /bitcoin
    r = await client.get(f"/{coin_id}")
    r.raise_for_status()
    return PricesResponse.model_validate(r.json())
