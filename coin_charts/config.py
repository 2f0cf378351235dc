import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from .utils import parse_coin_list

DEFAULT_BASE_URL = "https://coinbase.com/api/v2/assets/prices"
DEFAULT_COINS = "bitcoin,ethereum,solana"
OVERLAP_POLICIES = ("allow", "skip")


class Settings(BaseModel):
    coins: Tuple[str, ...] = ("bitcoin", "ethereum", "solana")
    base_url: str = DEFAULT_BASE_URL
    refresh_interval: float = 10.0    # segundos
    series_length: int = 24           # muestras por moneda
    overlap_policy: str = "allow"     # allow | skip
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @field_validator("coins")
    @classmethod
    def _coins_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("at least one coin must be tracked")
        return v

    @field_validator("refresh_interval")
    @classmethod
    def _positive_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("refresh_interval must be > 0")
        return v

    @field_validator("series_length")
    @classmethod
    def _positive_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("series_length must be > 0")
        return v

    @field_validator("overlap_policy")
    @classmethod
    def _known_policy(cls, v: str) -> str:
        v = v.lower()
        if v not in OVERLAP_POLICIES:
            raise ValueError(f"overlap_policy must be one of: {', '.join(OVERLAP_POLICIES)}")
        return v


def load_settings() -> Settings:
    """Lee la configuración del entorno (y de .env si existe)."""
    load_dotenv()
    return Settings(
        coins=tuple(parse_coin_list(os.getenv("COINS", DEFAULT_COINS))),
        base_url=os.getenv("PRICES_BASE_URL", DEFAULT_BASE_URL),
        refresh_interval=float(os.getenv("REFRESH_INTERVAL_SECONDS", "10")),
        series_length=int(os.getenv("SERIES_LENGTH", "24")),
        overlap_policy=os.getenv("OVERLAP_POLICY", "allow"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_dir=os.getenv("LOG_DIR") or None,
    )
