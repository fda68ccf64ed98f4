"""Client library for the Binance spot market data REST API.

This module exposes the public API: the endpoint client, request
construction helpers, domain models and the error hierarchy.
"""

from .contracts.spot.interface import SpotMarketDataSource
from .core.builder import RequestBuilder, SignedRequest
from .core.config import BASE_URL, ClientConfig, Credentials
from .core.dispatcher import Dispatcher
from .core.errors import (
    DecodeFailure,
    ExchangeAPIError,
    ExchangeTransientError,
    IntervalNotSupportedError,
    InvalidResponseBody,
    InvalidURL,
    MarketDataError,
    NoResponse,
    SymbolNotSupportedError,
    UnexpectedStatusCode,
)
from .core.params import canonical_query_string, current_timestamp, prepare_order_params
from .core.signing import sign_query
from .exchanges.binance.spot import BinanceSpotClient
from .models.shared import CandlestickInterval, OrderResponseType, OrderSide, OrderType, Symbol, TimeInForce
from .models.spot import (
    AggregatedTrade,
    BookTicker,
    Candlestick,
    ExchangeInfo,
    MarketDepth,
    TickerPrice,
    TickerPriceChange,
    Trade,
)

__all__ = [
    "BinanceSpotClient",
    "SpotMarketDataSource",
    "RequestBuilder",
    "SignedRequest",
    "Dispatcher",
    "BASE_URL",
    "ClientConfig",
    "Credentials",
    "canonical_query_string",
    "current_timestamp",
    "prepare_order_params",
    "sign_query",
    "CandlestickInterval",
    "OrderResponseType",
    "OrderSide",
    "OrderType",
    "Symbol",
    "TimeInForce",
    "AggregatedTrade",
    "BookTicker",
    "Candlestick",
    "ExchangeInfo",
    "MarketDepth",
    "TickerPrice",
    "TickerPriceChange",
    "Trade",
    "MarketDataError",
    "UnexpectedStatusCode",
    "InvalidResponseBody",
    "DecodeFailure",
    "InvalidURL",
    "NoResponse",
    "ExchangeTransientError",
    "ExchangeAPIError",
    "SymbolNotSupportedError",
    "IntervalNotSupportedError",
]
