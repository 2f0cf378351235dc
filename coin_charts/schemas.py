from pydantic import BaseModel
from typing import List, Tuple

# 🔹 Respuesta del API: {"data": {"base": "BTC", "prices": {"hour": {"prices": [[ts, "precio"], ...]}}}}

class PriceWindow(BaseModel):
    prices: List[Tuple[int, str]]

class PriceWindows(BaseModel):
    hour: PriceWindow

class AssetPrices(BaseModel):
    base: str
    prices: PriceWindows

class PricesResponse(BaseModel):
    data: AssetPrices

# 🔹 Serie lista para graficar

class ChartSeries(BaseModel):
    coin_id: str
    labels: List[str]
    data: List[float]
    symbol: str

class ChartSeriesOut(ChartSeries):
    latest_price: str

class ChartsResponse(BaseModel):
    coins: List[str]
    series: List[ChartSeriesOut]
