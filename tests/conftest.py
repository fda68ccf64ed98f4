from __future__ import annotations

import json
import threading
from typing import Any, Callable

import pytest

from binance_market_data.exchanges.binance.spot import BinanceSpotClient


class StubResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, content: bytes | None = None):
        if content is None:
            content = b"" if payload is None else json.dumps(payload).encode()
        self.content = content
        self.status_code = status_code

    def json(self):
        return json.loads(self.content)


class StubSession:
    def __init__(self) -> None:
        self.calls: list[dict] = []
        self.closed = False
        self._responses: list[StubResponse] = []
        self._handler: Callable[[str], StubResponse] | None = None
        self._lock = threading.Lock()

    def queue(self, payload: Any = None, status_code: int = 200, content: bytes | None = None) -> None:
        self._responses.append(StubResponse(payload, status_code, content))

    def respond_with(self, handler: Callable[[str], StubResponse]) -> None:
        self._handler = handler

    def get(self, url, headers=None, timeout=0):
        with self._lock:
            self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
            if self._handler is None:
                if not self._responses:
                    raise AssertionError("No queued response left for stub session")
                return self._responses.pop(0)
        return self._handler(url)

    def close(self) -> None:
        self.closed = True


class Recorder:
    """Collects continuation invocations and the threads they ran on."""

    def __init__(self) -> None:
        self.successes: list[Any] = []
        self.failures: list[Exception] = []
        self.threads: list[threading.Thread] = []

    def success(self, *args: Any) -> None:
        self.threads.append(threading.current_thread())
        self.successes.append(args[0] if args else None)

    def failure(self, error: Exception) -> None:
        self.threads.append(threading.current_thread())
        self.failures.append(error)

    @property
    def calls(self) -> int:
        return len(self.successes) + len(self.failures)


@pytest.fixture()
def session() -> StubSession:
    return StubSession()


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def stub_response() -> type[StubResponse]:
    return StubResponse


@pytest.fixture()
def client(session):
    source = BinanceSpotClient("test-key", "test-secret", session=session)
    yield source
    source.close()
