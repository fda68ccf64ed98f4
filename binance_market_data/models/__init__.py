"""Domain models for Binance spot market data."""

from .shared import (
    CandlestickInterval,
    OrderResponseType,
    OrderSide,
    OrderType,
    ParameterMap,
    ParamValue,
    Symbol,
    TimeInForce,
    symbol_pair,
)
from .spot import (
    AggregatedTrade,
    BookTicker,
    Candlestick,
    ExchangeInfo,
    MarketDepth,
    PriceLevel,
    RateLimit,
    SymbolInfo,
    TickerPrice,
    TickerPriceChange,
    Trade,
    list_of,
)

__all__ = [
    "CandlestickInterval",
    "OrderResponseType",
    "OrderSide",
    "OrderType",
    "ParameterMap",
    "ParamValue",
    "Symbol",
    "TimeInForce",
    "symbol_pair",
    "AggregatedTrade",
    "BookTicker",
    "Candlestick",
    "ExchangeInfo",
    "MarketDepth",
    "PriceLevel",
    "RateLimit",
    "SymbolInfo",
    "TickerPrice",
    "TickerPriceChange",
    "Trade",
    "list_of",
]
