from datetime import datetime
from typing import List, Union
import math

def parse_price(price_str: str) -> float:
    # El API manda el precio como string decimal ("67012.34"); NaN/inf no se grafican
    try:
        value = float(price_str)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid price format: {price_str!r}")
    if not math.isfinite(value):
        raise ValueError(f"Non-finite price: {price_str!r}")
    return value

def time_label(ts: int) -> str:
    # Hora local en el formato %X del locale activo del proceso (C salvo setlocale)
    return datetime.fromtimestamp(ts).strftime("%X")

def format_currency(value: Union[int, float, str]) -> str:
    # 67012.3 -> "$67,012.3"  (miles agrupados, hasta 3 decimales)
    text = f"{float(value):,.3f}".rstrip("0").rstrip(".")
    return "$" + text

def parse_coin_list(raw: str) -> List[str]:
    # "Bitcoin, ethereum,,solana" -> ["bitcoin", "ethereum", "solana"]
    return [s.strip().lower() for s in raw.split(",") if s.strip()]
