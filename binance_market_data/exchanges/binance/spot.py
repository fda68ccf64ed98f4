"""Binance spot market data implementation."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from datetime import datetime
from typing import Any

import requests

from ...contracts.spot.interface import SpotMarketDataSource
from ...core.builder import RequestBuilder
from ...core.config import ClientConfig, Credentials
from ...core.dispatcher import Decoder, Dispatcher, FailureCallback
from ...core.errors import InvalidURL
from ...core.params import canonical_query_string, to_milliseconds
from ...core.signing import sign_query
from ...models.shared import CandlestickInterval, ParameterMap, ParamValue, Symbol, symbol_pair
from ...models.spot import (
    AggregatedTrade,
    BookTicker,
    Candlestick,
    ExchangeInfo,
    MarketDepth,
    TickerPrice,
    TickerPriceChange,
    Trade,
    list_of,
)

PING_ENDPOINT = "v1/ping"
TIME_ENDPOINT = "v1/time"
EXCHANGE_INFO_ENDPOINT = "v1/exchangeInfo"
DEPTH_ENDPOINT = "v1/depth"
TRADES_ENDPOINT = "v1/trades"
HISTORICAL_TRADES_ENDPOINT = "v1/historicalTrades"
AGG_TRADES_ENDPOINT = "v1/aggTrades"
KLINES_ENDPOINT = "v1/klines"
TICKER_24H_ENDPOINT = "v1/ticker/24hr"
TICKER_PRICE_ENDPOINT = "v3/ticker/price"
BOOK_TICKER_ENDPOINT = "v3/ticker/bookTicker"

DEFAULT_DEPTH_LIMIT = 100
DEFAULT_LIMIT = 500

Timestamp = datetime | int


class BinanceSpotClient(SpotMarketDataSource):
    """Requests-backed implementation of :class:`SpotMarketDataSource`."""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        *,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if config is None:
            credentials = Credentials(api_key, api_secret) if api_key or api_secret else None
            config = ClientConfig(credentials=credentials)
        self._config = config
        self._builder = RequestBuilder(config.base_url, config.credentials)
        self._dispatcher = Dispatcher(session=session, timeout=config.timeout, max_workers=config.max_workers)

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------
    # Connectivity
    def ping(
        self,
        *,
        success: Callable[[], None] | None = None,
        failure: FailureCallback | None = None,
    ) -> Future[None]:
        try:
            request = self._builder.build(PING_ENDPOINT, {})
        except InvalidURL as exc:
            return self._dispatcher.reject(exc, failure=failure)
        return self._dispatcher.send_status_only(request, success=success, failure=failure)

    def time(
        self,
        *,
        success: Callable[[int], None] | None = None,
        failure: FailureCallback | None = None,
    ) -> Future[int]:
        try:
            request = self._builder.build(TIME_ENDPOINT, {})
        except InvalidURL as exc:
            return self._dispatcher.reject(exc, failure=failure)
        return self._dispatcher.send_server_time(request, success=success, failure=failure)

    def exchange_info(self, **callbacks: Any) -> Future[ExchangeInfo]:
        return self._send(EXCHANGE_INFO_ENDPOINT, {}, ExchangeInfo.from_payload, **callbacks)

    # ------------------------------------------------------------------
    # Market data
    def depth(self, symbol: Symbol | str, limit: int = DEFAULT_DEPTH_LIMIT, **callbacks: Any) -> Future[MarketDepth]:
        params = {"symbol": symbol_pair(symbol), "limit": _check_limit(limit)}
        return self._send(DEPTH_ENDPOINT, params, MarketDepth.from_payload, **callbacks)

    def trades(self, symbol: Symbol | str, limit: int = DEFAULT_LIMIT, **callbacks: Any) -> Future[list[Trade]]:
        params = {"symbol": symbol_pair(symbol), "limit": _check_limit(limit)}
        return self._send(TRADES_ENDPOINT, params, list_of(Trade.from_payload), **callbacks)

    def historical_trades(
        self,
        symbol: Symbol | str,
        limit: int = DEFAULT_LIMIT,
        from_id: int | None = None,
        **callbacks: Any,
    ) -> Future[list[Trade]]:
        params: dict[str, ParamValue] = {"symbol": symbol_pair(symbol), "limit": _check_limit(limit)}
        if from_id is not None:
            params["fromId"] = from_id
        return self._send(HISTORICAL_TRADES_ENDPOINT, params, list_of(Trade.from_payload), **callbacks)

    def aggregated_trades(
        self,
        symbol: Symbol | str,
        limit: int = DEFAULT_LIMIT,
        from_id: int | None = None,
        start_time: Timestamp | None = None,
        end_time: Timestamp | None = None,
        **callbacks: Any,
    ) -> Future[list[AggregatedTrade]]:
        params: dict[str, ParamValue] = {"symbol": symbol_pair(symbol), "limit": _check_limit(limit)}
        if from_id is not None:
            params["fromId"] = from_id
        params.update(_window_params(start_time, end_time))
        return self._send(AGG_TRADES_ENDPOINT, params, list_of(AggregatedTrade.from_payload), **callbacks)

    def candlesticks(
        self,
        symbol: Symbol | str,
        interval: CandlestickInterval = CandlestickInterval.HOUR_4,
        limit: int = DEFAULT_LIMIT,
        start_time: Timestamp | None = None,
        end_time: Timestamp | None = None,
        **callbacks: Any,
    ) -> Future[list[Candlestick]]:
        params: dict[str, ParamValue] = {
            "symbol": symbol_pair(symbol),
            "interval": CandlestickInterval(interval).value,
            "limit": _check_limit(limit),
        }
        params.update(_window_params(start_time, end_time))
        return self._send(KLINES_ENDPOINT, params, list_of(Candlestick.from_payload), **callbacks)

    # ------------------------------------------------------------------
    # Tickers. Without a symbol every pair is returned as a list.
    def ticker_change(self, symbol: Symbol | str | None = None, **callbacks: Any) -> Future[Any]:
        return self._send_ticker(TICKER_24H_ENDPOINT, symbol, TickerPriceChange.from_payload, **callbacks)

    def ticker_price(self, symbol: Symbol | str | None = None, **callbacks: Any) -> Future[Any]:
        return self._send_ticker(TICKER_PRICE_ENDPOINT, symbol, TickerPrice.from_payload, **callbacks)

    def book_ticker(self, symbol: Symbol | str | None = None, **callbacks: Any) -> Future[Any]:
        return self._send_ticker(BOOK_TICKER_ENDPOINT, symbol, BookTicker.from_payload, **callbacks)

    # ------------------------------------------------------------------
    # Signing
    def signature_for(self, params: ParameterMap) -> str | None:
        """Sign ``params`` with the configured secret.

        Requests built by this client are never signed automatically; callers
        add the returned value to their parameters when an endpoint needs it.
        """

        credentials = self._config.credentials
        if credentials is None:
            raise ValueError("API secret is required to sign parameters")
        return sign_query(canonical_query_string(params), credentials.api_secret)

    # ------------------------------------------------------------------
    # Internal helpers
    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> BinanceSpotClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send_ticker(self, path: str, symbol: Symbol | str | None, decoder: Decoder[Any], **callbacks: Any) -> Future[Any]:
        if symbol is None:
            return self._send(path, {}, list_of(decoder), **callbacks)
        return self._send(path, {"symbol": symbol_pair(symbol)}, decoder, **callbacks)

    def _send(
        self,
        path: str,
        params: ParameterMap,
        decoder: Decoder[Any],
        *,
        success: Callable[[Any], None] | None = None,
        failure: FailureCallback | None = None,
    ) -> Future[Any]:
        try:
            request = self._builder.build(path, params)
        except InvalidURL as exc:
            return self._dispatcher.reject(exc, failure=failure)
        return self._dispatcher.send_decoded(request, decoder, success=success, failure=failure)


def _check_limit(limit: int) -> int:
    if limit <= 0:
        raise ValueError("limit must be a positive integer")
    return limit


def _window_params(start_time: Timestamp | None, end_time: Timestamp | None) -> dict[str, ParamValue]:
    params: dict[str, ParamValue] = {}
    if start_time is not None:
        params["startTime"] = to_milliseconds(start_time)
    if end_time is not None:
        params["endTime"] = to_milliseconds(end_time)
    if "startTime" in params and "endTime" in params and params["startTime"] >= params["endTime"]:
        raise ValueError("start_time must be earlier than end_time")
    return params
