from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qsl

import pytest

from binancekit.util import (
    BinanceError,
    build_request,
    build_signed_request,
    build_signed_request_custom,
    to_f64,
    to_i64,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_build_request_sorted():
    assert build_request({"b": "2", "a": "1"}) == "a=1&b=2"


def test_build_request_empty():
    assert build_request({}) == ""


def test_build_request_keeps_every_pair():
    params = {"symbol": "ETHBTC", "limit": "5", "interval": "1m"}
    pairs = build_request(params).split("&")
    assert dict(p.split("=", 1) for p in pairs) == params
    assert [p.split("=")[0] for p in pairs] == sorted(params)


def test_signed_custom_adds_window_and_timestamp():
    params = {"symbol": "ETHBTC"}
    start = EPOCH + timedelta(milliseconds=1234567)
    query = dict(parse_qsl(build_signed_request_custom(params, 5000, start)))
    assert query == {"symbol": "ETHBTC", "recvWindow": "5000", "timestamp": "1234567"}
    assert params == {"symbol": "ETHBTC"}


def test_signed_custom_zero_window_omitted():
    start = EPOCH + timedelta(milliseconds=42)
    query = dict(parse_qsl(build_signed_request_custom({}, 0, start)))
    assert query == {"timestamp": "42"}


def test_signed_custom_naive_is_utc():
    aware = EPOCH + timedelta(days=3, milliseconds=9)
    naive = aware.replace(tzinfo=None)
    assert build_signed_request_custom({}, 1, naive) == build_signed_request_custom({}, 1, aware)


def test_signed_custom_before_epoch_raises():
    with pytest.raises(BinanceError, match="timestamp"):
        build_signed_request_custom({}, 0, EPOCH - timedelta(seconds=1))


def test_signed_request_uses_now():
    before = (datetime.now(timezone.utc) - EPOCH) // timedelta(milliseconds=1)
    query = dict(parse_qsl(build_signed_request({"a": "1"}, 10)))
    after = (datetime.now(timezone.utc) - EPOCH) // timedelta(milliseconds=1)
    assert before <= int(query["timestamp"]) <= after
    assert query["recvWindow"] == "10"


def test_to_i64():
    assert to_i64(5) == 5
    assert to_i64(-7) == -7
    for bad in ("5", True, 1.0, 2**63):
        with pytest.raises(BinanceError):
            to_i64(bad)


def test_to_f64():
    assert to_f64("1.5") == 1.5
    assert to_f64("-0.25") == -0.25
    for bad in (1.5, "x", None, " 1"):
        with pytest.raises(BinanceError):
            to_f64(bad)