"""Immutable client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

BASE_URL = "https://api.binance.com/api/"
API_KEY_HEADER = "X-MBX-APIKEY"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 4


@dataclass(frozen=True, slots=True)
class Credentials:
    """API key pair owned by a client for its whole lifetime."""

    api_key: str
    api_secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Process-wide settings shared by every request a client issues."""

    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS
    credentials: Credentials | None = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_workers <= 0:
            raise ValueError("max_workers must be a positive integer")
