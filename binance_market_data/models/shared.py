"""Shared domain models used across request construction and decoding."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Mapping, TypeAlias

# Request parameter values. ``StrEnum`` members count as ``str``.
ParamValue: TypeAlias = str | int | Decimal
ParameterMap: TypeAlias = Mapping[str, ParamValue]


class CandlestickInterval(StrEnum):
    """Kline intervals accepted by the spot API."""

    MINUTE_1 = "1m"
    MINUTE_3 = "3m"
    MINUTE_5 = "5m"
    MINUTE_15 = "15m"
    MINUTE_30 = "30m"
    HOUR_1 = "1h"
    HOUR_2 = "2h"
    HOUR_4 = "4h"
    HOUR_6 = "6h"
    HOUR_8 = "8h"
    HOUR_12 = "12h"
    DAY_1 = "1d"
    DAY_3 = "3d"
    WEEK_1 = "1w"
    MONTH_1 = "1M"


class OrderSide(StrEnum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(StrEnum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"


class TimeInForce(StrEnum):
    """How long an order stays active (good-til-cancelled / immediate-or-cancel)."""

    GTC = "GTC"
    IOC = "IOC"


class OrderResponseType(StrEnum):
    ACK = "ACK"
    RESULT = "RESULT"
    FULL = "FULL"


@dataclass(frozen=True, slots=True)
class Symbol:
    """Represents a spot trading pair."""

    base: str
    quote: str

    def __post_init__(self) -> None:
        if not self.base or not self.quote:
            raise ValueError("Symbol base and quote must be non-empty strings.")

    @property
    def pair(self) -> str:
        """Return the exchange pair string (e.g., ``BTCUSDT``)."""

        return f"{self.base}{self.quote}"


def symbol_pair(symbol: Symbol | str) -> str:
    """Return the pair string for a :class:`Symbol` or a raw pair name."""

    if isinstance(symbol, Symbol):
        return symbol.pair
    if not symbol:
        raise ValueError("symbol must be a non-empty string")
    return symbol
