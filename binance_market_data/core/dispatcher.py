"""Send prepared requests and route decoded results to continuations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

import requests

from .builder import SignedRequest
from .config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT
from .errors import (
    DecodeFailure,
    ExchangeAPIError,
    ExchangeTransientError,
    IntervalNotSupportedError,
    InvalidResponseBody,
    MarketDataError,
    NoResponse,
    SymbolNotSupportedError,
    UnexpectedStatusCode,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SuccessCallback = Callable[[T], None]
SuccessCallbackEmpty = Callable[[], None]
FailureCallback = Callable[[MarketDataError], None]
Decoder = Callable[[Any], T]

_API_ERRORS: dict[int, type[ExchangeAPIError]] = {
    -1121: SymbolNotSupportedError,
    -1120: IntervalNotSupportedError,
}


class Dispatcher:
    """Run requests on a worker pool and invoke exactly one continuation.

    Every ``send_*`` call returns a :class:`~concurrent.futures.Future`
    resolving to the decoded value (or raising the :class:`MarketDataError`).
    Continuations run on the worker thread after the round-trip, never in the
    caller's thread.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._timeout = timeout
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="binance-dispatch")

    # ------------------------------------------------------------------
    # Execution shapes
    def send_status_only(
        self,
        request: SignedRequest,
        *,
        success: SuccessCallbackEmpty | None = None,
        failure: FailureCallback | None = None,
    ) -> Future[None]:
        def work() -> None:
            response = self._fetch(request)
            if response.status_code != 200:
                raise UnexpectedStatusCode(response.status_code)

        on_success = (lambda _: success()) if success is not None else None
        return self._schedule(request.url, work, on_success, failure)

    def send_decoded(
        self,
        request: SignedRequest,
        decoder: Decoder[T] | None = None,
        *,
        success: SuccessCallback[T] | None = None,
        failure: FailureCallback | None = None,
    ) -> Future[T]:
        """Decode the body with ``decoder``; without one the raw JSON is delivered."""

        def work() -> T:
            response = self._fetch(request)
            payload = self._decode_response(request, response)
            if decoder is None:
                return payload
            try:
                return decoder(payload)
            except Exception as exc:
                # any decoder fault, including from caller-supplied decoders
                raise DecodeFailure(exc) from exc

        return self._schedule(request.url, work, success, failure)

    def send_server_time(
        self,
        request: SignedRequest,
        *,
        success: SuccessCallback[int] | None = None,
        failure: FailureCallback | None = None,
    ) -> Future[int]:
        def work() -> int:
            response = self._fetch(request)
            payload = self._decode_response(request, response)
            if not isinstance(payload, dict) or not all(
                isinstance(value, int) and not isinstance(value, bool) for value in payload.values()
            ):
                raise DecodeFailure(TypeError("Expected a JSON object of integers"))
            server_time = payload.get("serverTime")
            if server_time is None:
                raise InvalidResponseBody(response.content)
            return server_time

        return self._schedule(request.url, work, success, failure)

    def reject(self, error: MarketDataError, *, failure: FailureCallback | None = None) -> Future[Any]:
        """Report an error raised before a request could be sent."""

        def work() -> None:
            raise error

        return self._schedule("<unsent>", work, None, failure)

    # ------------------------------------------------------------------
    # Lifecycle
    def close(self) -> None:
        self._executor.shutdown(wait=True)
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Internal helpers
    def _schedule(
        self,
        url: str,
        work: Callable[[], T],
        success: SuccessCallback[T] | None,
        failure: FailureCallback | None,
    ) -> Future[T]:
        def run() -> T:
            try:
                value = work()
            except MarketDataError as exc:
                logger.warning("Request to %s failed: %s", url, exc)
                if failure is not None:
                    failure(exc)
                raise
            except Exception as exc:
                logger.exception("Unexpected failure calling %s", url)
                error = MarketDataError(f"Unexpected failure calling {url}: {exc}")
                if failure is not None:
                    failure(error)
                raise error from exc
            if success is not None:
                success(value)
            return value

        logger.debug("Scheduling request to %s", url)
        return self._executor.submit(run)

    def _fetch(self, request: SignedRequest) -> requests.Response:
        try:
            return self._session.get(request.url, headers=dict(request.headers), timeout=self._timeout)
        except requests.RequestException as exc:
            raise ExchangeTransientError(f"Failed to call Binance endpoint {request.url}: {exc}") from exc

    def _decode_response(self, request: SignedRequest, response: requests.Response) -> Any:
        if not response.content:
            raise NoResponse(request.url)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeFailure(exc) from exc
        if response.status_code != 200 and _is_error_payload(payload):
            code = int(payload["code"])
            error_cls = _API_ERRORS.get(code, ExchangeAPIError)
            raise error_cls(response.status_code, code, payload.get("msg"))
        return payload


def _is_error_payload(payload: Any) -> bool:
    return isinstance(payload, dict) and isinstance(payload.get("code"), int) and "msg" in payload
