"""Typed records decoded from Binance spot market data payloads.

Every record exposes a ``from_payload`` constructor taking the already parsed
JSON value. The constructors are pure and raise ``KeyError``, ``TypeError``,
``ValueError``, ``IndexError``, ``OverflowError`` or ``decimal.InvalidOperation`` on shape
mismatches; the dispatcher turns those into ``DecodeFailure``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeVar

T = TypeVar("T")


def _decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Expected a numeric string, got {value!r}")
    return Decimal(str(value))


def _mapping(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise TypeError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def _sequence(payload: Any) -> Sequence[Any]:
    if not isinstance(payload, list):
        raise TypeError(f"Expected a JSON array, got {type(payload).__name__}")
    return payload


def list_of(decoder: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """Lift a record decoder to a decoder of JSON arrays of that record."""

    def decode(payload: Any) -> list[T]:
        return [decoder(entry) for entry in _sequence(payload)]

    return decode


@dataclass(frozen=True, slots=True)
class RateLimit:
    rate_limit_type: str
    interval: str
    limit: int

    @classmethod
    def from_payload(cls, payload: Any) -> RateLimit:
        raw = _mapping(payload)
        return cls(
            rate_limit_type=str(raw["rateLimitType"]),
            interval=str(raw["interval"]),
            limit=int(raw["limit"]),
        )


@dataclass(frozen=True, slots=True)
class SymbolInfo:
    """Trading rules for a single pair as listed by ``exchangeInfo``."""

    symbol: str
    status: str
    base_asset: str
    base_asset_precision: int
    quote_asset: str
    quote_precision: int
    order_types: tuple[str, ...]
    iceberg_allowed: bool
    filters: tuple[dict[str, Any], ...]

    @classmethod
    def from_payload(cls, payload: Any) -> SymbolInfo:
        raw = _mapping(payload)
        return cls(
            symbol=str(raw["symbol"]),
            status=str(raw["status"]),
            base_asset=str(raw["baseAsset"]),
            base_asset_precision=int(raw["baseAssetPrecision"]),
            quote_asset=str(raw["quoteAsset"]),
            quote_precision=int(raw.get("quotePrecision", raw.get("quoteAssetPrecision"))),
            order_types=tuple(str(item) for item in _sequence(raw.get("orderTypes", []))),
            iceberg_allowed=bool(raw.get("icebergAllowed", False)),
            filters=tuple(_mapping(item) for item in _sequence(raw.get("filters", []))),
        )

    def find_filter(self, filter_type: str) -> dict[str, Any] | None:
        for flt in self.filters:
            if flt.get("filterType") == filter_type:
                return flt
        return None


@dataclass(frozen=True, slots=True)
class ExchangeInfo:
    timezone: str
    server_time: int
    rate_limits: tuple[RateLimit, ...]
    symbols: tuple[SymbolInfo, ...]

    @classmethod
    def from_payload(cls, payload: Any) -> ExchangeInfo:
        raw = _mapping(payload)
        return cls(
            timezone=str(raw["timezone"]),
            server_time=int(raw["serverTime"]),
            rate_limits=tuple(RateLimit.from_payload(item) for item in _sequence(raw["rateLimits"])),
            symbols=tuple(SymbolInfo.from_payload(item) for item in _sequence(raw["symbols"])),
        )

    def symbol(self, name: str) -> SymbolInfo | None:
        """Look up trading rules by pair name."""

        for info in self.symbols:
            if info.symbol == name:
                return info
        return None


@dataclass(frozen=True, slots=True)
class PriceLevel:
    price: Decimal
    quantity: Decimal

    @classmethod
    def from_payload(cls, payload: Any) -> PriceLevel:
        # ``[price, qty, []]``; the trailing element is ignored
        raw = _sequence(payload)
        return cls(price=_decimal(raw[0]), quantity=_decimal(raw[1]))


@dataclass(frozen=True, slots=True)
class MarketDepth:
    last_update_id: int
    bids: tuple[PriceLevel, ...]
    asks: tuple[PriceLevel, ...]

    @classmethod
    def from_payload(cls, payload: Any) -> MarketDepth:
        raw = _mapping(payload)
        return cls(
            last_update_id=int(raw["lastUpdateId"]),
            bids=tuple(PriceLevel.from_payload(level) for level in _sequence(raw["bids"])),
            asks=tuple(PriceLevel.from_payload(level) for level in _sequence(raw["asks"])),
        )


@dataclass(frozen=True, slots=True)
class Trade:
    id: int
    price: Decimal
    quantity: Decimal
    time: int
    is_buyer_maker: bool
    is_best_match: bool

    @classmethod
    def from_payload(cls, payload: Any) -> Trade:
        raw = _mapping(payload)
        return cls(
            id=int(raw["id"]),
            price=_decimal(raw["price"]),
            quantity=_decimal(raw["qty"]),
            time=int(raw["time"]),
            is_buyer_maker=bool(raw["isBuyerMaker"]),
            is_best_match=bool(raw["isBestMatch"]),
        )


@dataclass(frozen=True, slots=True)
class AggregatedTrade:
    """Trades filled at the same time, price and side, compressed into one row."""

    id: int
    price: Decimal
    quantity: Decimal
    first_trade_id: int
    last_trade_id: int
    timestamp: int
    is_buyer_maker: bool
    is_best_match: bool

    @classmethod
    def from_payload(cls, payload: Any) -> AggregatedTrade:
        raw = _mapping(payload)
        return cls(
            id=int(raw["a"]),
            price=_decimal(raw["p"]),
            quantity=_decimal(raw["q"]),
            first_trade_id=int(raw["f"]),
            last_trade_id=int(raw["l"]),
            timestamp=int(raw["T"]),
            is_buyer_maker=bool(raw["m"]),
            is_best_match=bool(raw["M"]),
        )


@dataclass(frozen=True, slots=True)
class Candlestick:
    open_time: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    close_time: int
    quote_asset_volume: Decimal
    number_of_trades: int
    taker_buy_base_asset_volume: Decimal
    taker_buy_quote_asset_volume: Decimal

    @classmethod
    def from_payload(cls, payload: Any) -> Candlestick:
        raw = _sequence(payload)
        if len(raw) < 11:
            raise ValueError("Unexpected Binance kline payload structure")
        return cls(
            open_time=int(raw[0]),
            open=_decimal(raw[1]),
            high=_decimal(raw[2]),
            low=_decimal(raw[3]),
            close=_decimal(raw[4]),
            volume=_decimal(raw[5]),
            close_time=int(raw[6]),
            quote_asset_volume=_decimal(raw[7]),
            number_of_trades=int(raw[8]),
            taker_buy_base_asset_volume=_decimal(raw[9]),
            taker_buy_quote_asset_volume=_decimal(raw[10]),
        )


@dataclass(frozen=True, slots=True)
class TickerPriceChange:
    """Rolling 24 hour statistics for a pair."""

    symbol: str
    price_change: Decimal
    price_change_percent: Decimal
    weighted_avg_price: Decimal
    prev_close_price: Decimal
    last_price: Decimal
    bid_price: Decimal
    ask_price: Decimal
    open_price: Decimal
    high_price: Decimal
    low_price: Decimal
    volume: Decimal
    open_time: int
    close_time: int
    first_id: int
    last_id: int
    count: int

    @classmethod
    def from_payload(cls, payload: Any) -> TickerPriceChange:
        raw = _mapping(payload)
        return cls(
            symbol=str(raw["symbol"]),
            price_change=_decimal(raw["priceChange"]),
            price_change_percent=_decimal(raw["priceChangePercent"]),
            weighted_avg_price=_decimal(raw["weightedAvgPrice"]),
            prev_close_price=_decimal(raw["prevClosePrice"]),
            last_price=_decimal(raw["lastPrice"]),
            bid_price=_decimal(raw["bidPrice"]),
            ask_price=_decimal(raw["askPrice"]),
            open_price=_decimal(raw["openPrice"]),
            high_price=_decimal(raw["highPrice"]),
            low_price=_decimal(raw["lowPrice"]),
            volume=_decimal(raw["volume"]),
            open_time=int(raw["openTime"]),
            close_time=int(raw["closeTime"]),
            first_id=int(raw["firstId"]),
            last_id=int(raw["lastId"]),
            count=int(raw["count"]),
        )


@dataclass(frozen=True, slots=True)
class TickerPrice:
    symbol: str
    price: Decimal

    @classmethod
    def from_payload(cls, payload: Any) -> TickerPrice:
        raw = _mapping(payload)
        return cls(symbol=str(raw["symbol"]), price=_decimal(raw["price"]))


@dataclass(frozen=True, slots=True)
class BookTicker:
    """Best bid/ask currently on the order book."""

    symbol: str
    bid_price: Decimal
    bid_quantity: Decimal
    ask_price: Decimal
    ask_quantity: Decimal

    @classmethod
    def from_payload(cls, payload: Any) -> BookTicker:
        raw = _mapping(payload)
        return cls(
            symbol=str(raw["symbol"]),
            bid_price=_decimal(raw["bidPrice"]),
            bid_quantity=_decimal(raw["bidQty"]),
            ask_price=_decimal(raw["askPrice"]),
            ask_quantity=_decimal(raw["askQty"]),
        )
