"""Request parameter canonicalization and preparation helpers."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from decimal import Decimal

from ..models.shared import (
    OrderResponseType,
    OrderSide,
    OrderType,
    ParameterMap,
    ParamValue,
    Symbol,
    TimeInForce,
    symbol_pair,
)


def format_param_value(value: ParamValue) -> str:
    """Render a single parameter value the way it appears in a query string."""

    # bool is an int subclass but has no agreed wire form
    if isinstance(value, bool):
        raise TypeError("Boolean parameter values are not supported")
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    raise TypeError(f"Unsupported parameter value type: {type(value).__name__}")


def canonical_query_string(params: ParameterMap) -> str:
    """Serialize ``params`` as ``key=value`` pairs joined by ``&``, keys sorted.

    Values are not URL-encoded. A value containing ``&``, ``=`` or non-ASCII
    characters corrupts the query string and any signature computed over it.
    """

    return "&".join(f"{key}={format_param_value(params[key])}" for key in sorted(params))


def current_timestamp() -> int:
    """Milliseconds since the Unix epoch."""

    return int(time.time() * 1000)


def to_milliseconds(value: datetime | int) -> int:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp() * 1000)
    return int(value)


def prepare_order_params(
    symbol: Symbol | str,
    side: OrderSide,
    order_type: OrderType,
    quantity: Decimal,
    price: Decimal | None = None,
) -> dict[str, ParamValue]:
    """Build the parameter map for a new order request.

    Only the parameters are prepared; submitting orders is outside this
    package.
    """

    params: dict[str, ParamValue] = {
        "symbol": symbol_pair(symbol),
        "side": side.value,
        "type": order_type.value,
        "quantity": quantity,
        "timestamp": current_timestamp(),
        "timeInForce": TimeInForce.GTC.value,
        "newOrderRespType": OrderResponseType.ACK.value,
    }
    if price is not None:
        params["price"] = price
    return params
