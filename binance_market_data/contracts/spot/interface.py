"""Protocols describing spot market data endpoints."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Protocol, runtime_checkable

from ...models.shared import Symbol
from ...models.spot import (
    AggregatedTrade,
    BookTicker,
    Candlestick,
    ExchangeInfo,
    MarketDepth,
    TickerPrice,
    TickerPriceChange,
    Trade,
)


@runtime_checkable
class SpotMarketDataSource(Protocol):
    """Asynchronous source of spot market data.

    Every method accepts optional ``success``/``failure`` keyword continuations
    and returns a future for the same outcome.
    """

    # Connectivity ------------------------------------------------------
    def ping(self, **callbacks: Any) -> Future[None]:
        """Check that the REST API is reachable."""

    def time(self, **callbacks: Any) -> Future[int]:
        """Return the exchange server time in milliseconds."""

    def exchange_info(self, **callbacks: Any) -> Future[ExchangeInfo]:
        """Return trading rules and symbol metadata."""

    # Market data -------------------------------------------------------
    def depth(self, symbol: Symbol | str, limit: int = 100, **callbacks: Any) -> Future[MarketDepth]:
        """Return the order book."""

    def trades(self, symbol: Symbol | str, limit: int = 500, **callbacks: Any) -> Future[list[Trade]]:
        """Return recent trades."""

    def historical_trades(self, symbol: Symbol | str, limit: int = 500, **kwargs: Any) -> Future[list[Trade]]:
        """Return older trades, optionally starting at ``from_id``."""

    def aggregated_trades(
        self, symbol: Symbol | str, limit: int = 500, **kwargs: Any
    ) -> Future[list[AggregatedTrade]]:
        """Return compressed trades for an optional id or time window."""

    def candlesticks(self, symbol: Symbol | str, **kwargs: Any) -> Future[list[Candlestick]]:
        """Return klines for an interval and optional time window."""

    # Tickers -----------------------------------------------------------
    def ticker_change(
        self, symbol: Symbol | str | None = None, **callbacks: Any
    ) -> Future[TickerPriceChange] | Future[list[TickerPriceChange]]:
        """Return 24 hour statistics for one pair, or for all pairs."""

    def ticker_price(
        self, symbol: Symbol | str | None = None, **callbacks: Any
    ) -> Future[TickerPrice] | Future[list[TickerPrice]]:
        """Return the latest price for one pair, or for all pairs."""

    def book_ticker(
        self, symbol: Symbol | str | None = None, **callbacks: Any
    ) -> Future[BookTicker] | Future[list[BookTicker]]:
        """Return the best bid/ask for one pair, or for all pairs."""
