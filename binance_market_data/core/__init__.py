"""Core request construction and dispatch utilities."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ClientConfig",
    "Credentials",
    "Dispatcher",
    "RequestBuilder",
    "SignedRequest",
    "canonical_query_string",
    "current_timestamp",
    "prepare_order_params",
    "sign_query",
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

_lazy_targets = {
    "ClientConfig": ("config", "ClientConfig"),
    "Credentials": ("config", "Credentials"),
    "Dispatcher": ("dispatcher", "Dispatcher"),
    "RequestBuilder": ("builder", "RequestBuilder"),
    "SignedRequest": ("builder", "SignedRequest"),
    "canonical_query_string": ("params", "canonical_query_string"),
    "current_timestamp": ("params", "current_timestamp"),
    "prepare_order_params": ("params", "prepare_order_params"),
    "sign_query": ("signing", "sign_query"),
    "MarketDataError": ("errors", "MarketDataError"),
    "UnexpectedStatusCode": ("errors", "UnexpectedStatusCode"),
    "InvalidResponseBody": ("errors", "InvalidResponseBody"),
    "DecodeFailure": ("errors", "DecodeFailure"),
    "InvalidURL": ("errors", "InvalidURL"),
    "NoResponse": ("errors", "NoResponse"),
    "ExchangeTransientError": ("errors", "ExchangeTransientError"),
    "ExchangeAPIError": ("errors", "ExchangeAPIError"),
    "SymbolNotSupportedError": ("errors", "SymbolNotSupportedError"),
    "IntervalNotSupportedError": ("errors", "IntervalNotSupportedError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:  # pragma: no cover - defensive
        raise AttributeError(f"module 'binance_market_data.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
