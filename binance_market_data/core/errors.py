"""Custom exception hierarchy for market data fetching."""

from __future__ import annotations


class MarketDataError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class UnexpectedStatusCode(MarketDataError):
    """Raised when a status-only endpoint answers with anything but HTTP 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP status code {status_code}")
        self.status_code = status_code


class InvalidResponseBody(MarketDataError):
    """The body decoded but does not carry the expected content."""

    def __init__(self, body: bytes) -> None:
        super().__init__(f"Invalid response body ({len(body)} bytes)")
        self.body = body


class DecodeFailure(MarketDataError):
    """The body could not be decoded into the requested record type."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to decode response: {cause}")
        self.cause = cause


class InvalidURL(MarketDataError):
    """Raised when the composed request URL is not syntactically valid."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid request URL: {url!r}")
        self.url = url


class NoResponse(MarketDataError):
    """The exchange answered without a body where one was expected."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Empty response body from {url}")
        self.url = url


class ExchangeTransientError(MarketDataError):
    """Represents temporary issues such as network failures or timeouts."""


class ExchangeAPIError(MarketDataError):
    """Binance answered with an error object (``{"code": ..., "msg": ...}``)."""

    def __init__(self, status_code: int, code: int, message: str | None = None) -> None:
        super().__init__(message or f"Binance error code {code}")
        self.status_code = status_code
        self.code = code
        self.message = message


class SymbolNotSupportedError(ExchangeAPIError):
    """Raised when the exchange does not list the requested symbol."""


class IntervalNotSupportedError(ExchangeAPIError):
    """Raised when an unsupported candlestick interval is requested."""
