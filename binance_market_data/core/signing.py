"""HMAC-SHA256 query signing."""

from __future__ import annotations

import base64
import hashlib
import hmac


def sign_query(query_string: str, secret: str) -> str | None:
    """Return the lowercase hex HMAC-SHA256 signature of ``query_string``.

    The query string is UTF-8 encoded and base64-encoded first; the HMAC is
    computed over the base64 text, not over the raw query. Binance itself
    signs the raw query string, so signatures from this function are only
    accepted by servers expecting this exact scheme.

    Returns ``None`` when the query string cannot be UTF-8 encoded.
    """

    try:
        encoded = query_string.encode("utf-8")
        key = secret.encode("utf-8")
    except UnicodeEncodeError:
        return None
    message = base64.b64encode(encoded)
    return hmac.new(key, message, hashlib.sha256).hexdigest()
