"""Query-string construction and raw value helpers."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class BinanceError(Exception):
    """Raised for any failure while building requests or reading responses."""


def build_request(parameters: Mapping[str, Any]) -> str:
    """Join parameters as ``key=value`` pairs in key order, separated by ``&``."""
    return "&".join(f"{key}={value}" for key, value in sorted(parameters.items()))


def build_signed_request(parameters: Mapping[str, Any], recv_window: int) -> str:
    """Build a request carrying ``recvWindow`` and the current ``timestamp``."""
    return build_signed_request_custom(parameters, recv_window, datetime.now(timezone.utc))


def _timestamp_ms(start: datetime) -> int:
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    elapsed = start - _EPOCH
    if elapsed < timedelta(0):
        raise BinanceError("Failed to get timestamp")
    return elapsed // timedelta(milliseconds=1)


def build_signed_request_custom(parameters: Mapping[str, Any], recv_window: int, start: datetime) -> str:
    """Build a request whose ``timestamp`` is taken from ``start`` (naive means UTC)."""
    params = dict(parameters)
    if recv_window > 0:
        params["recvWindow"] = str(recv_window)
    params["timestamp"] = str(_timestamp_ms(start))
    return build_request(params)


def to_i64(value: Any) -> int:
    """Return a JSON integer that fits in a signed 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise BinanceError(f"expected an integer, got {value!r}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise BinanceError(f"integer out of range: {value}")
    return value


def to_f64(value: Any) -> float:
    """Return the float held in a JSON string."""
    if not isinstance(value, str):
        raise BinanceError(f"expected a string, got {value!r}")
    if value != value.strip() or "_" in value:
        raise BinanceError(f"invalid float literal: {value!r}")
    try:
        return float(value)
    except ValueError as exc:
        raise BinanceError(f"invalid float literal: {value!r}") from exc