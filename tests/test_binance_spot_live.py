from __future__ import annotations

from decimal import Decimal

import pytest

from binance_market_data.core.errors import ExchangeTransientError
from binance_market_data.exchanges.binance.spot import BinanceSpotClient
from binance_market_data.models.shared import CandlestickInterval, Symbol

SYMBOL = Symbol("BTC", "USDT")


@pytest.fixture(scope="module")
def live_client() -> BinanceSpotClient:
    client = BinanceSpotClient()
    yield client
    client.close()


def _result_or_skip(future):
    try:
        return future.result(timeout=30)
    except ExchangeTransientError as exc:  # pragma: no cover - depends on external service
        pytest.skip(f"binance API unavailable: {exc}")


@pytest.mark.network
@pytest.mark.integration
def test_ping_live(live_client: BinanceSpotClient) -> None:
    assert _result_or_skip(live_client.ping()) is None


@pytest.mark.network
@pytest.mark.integration
def test_time_live(live_client: BinanceSpotClient) -> None:
    server_time = _result_or_skip(live_client.time())

    assert isinstance(server_time, int)
    assert server_time > 1_600_000_000_000


@pytest.mark.network
@pytest.mark.integration
def test_candlesticks_live(live_client: BinanceSpotClient) -> None:
    candles = _result_or_skip(live_client.candlesticks(SYMBOL, CandlestickInterval.MINUTE_1, limit=3))

    assert 0 < len(candles) <= 3
    assert isinstance(candles[0].close, Decimal)


@pytest.mark.network
@pytest.mark.integration
def test_book_ticker_live(live_client: BinanceSpotClient) -> None:
    ticker = _result_or_skip(live_client.book_ticker(SYMBOL))

    assert ticker.symbol == SYMBOL.pair
    assert ticker.ask_price >= ticker.bid_price
