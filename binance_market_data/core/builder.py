"""Assemble request URLs and headers for spot endpoints."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from urllib.parse import urlsplit

from ..models.shared import ParameterMap
from .config import API_KEY_HEADER, Credentials
from .errors import InvalidURL
from .params import canonical_query_string

# RFC 3986 unreserved, reserved and percent characters
_URL_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """A prepared GET request. Built once per call and never reused."""

    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    query_signature: str | None = None


def validate_url(url: str) -> str:
    if any(char not in _URL_CHARACTERS for char in url):
        raise InvalidURL(url)
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidURL(url) from exc
    if not parts.scheme or not parts.netloc:
        raise InvalidURL(url)
    return url


class RequestBuilder:
    """Compose ``base_url + path + ?query`` and attach the API key header.

    The builder never signs requests. Callers that need a signature compute it
    with :func:`~binance_market_data.core.signing.sign_query` and add it to the
    parameters themselves.
    """

    def __init__(self, base_url: str, credentials: Credentials | None = None) -> None:
        self._base_url = base_url
        self._credentials = credentials

    def build(self, path: str, params: ParameterMap) -> SignedRequest:
        url = self._base_url + path
        if params:
            url += "?" + canonical_query_string(params)
        validate_url(url)
        headers: dict[str, str] = {}
        if self._credentials is not None and self._credentials.api_key:
            headers[API_KEY_HEADER] = self._credentials.api_key
        return SignedRequest(url=url, headers=MappingProxyType(headers))
