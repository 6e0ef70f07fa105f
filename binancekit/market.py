"""Query construction and response decoding for the market data endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from binancekit.model import KlineSummary
from binancekit.util import BinanceError, build_request, build_signed_request, to_f64, to_i64

_U16_MAX = 2**16 - 1
_U64_MAX = 2**64 - 1
_KLINE_COLUMNS = 11


def _unsigned(name: str, value: Any, high: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BinanceError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= high:
        raise BinanceError(f"{name} out of range: {value}")
    return str(value)


def _parameters(symbol: str, **optional: tuple[Any, int]) -> dict[str, str]:
    params = {"symbol": str(symbol)}
    for key, (value, high) in optional.items():
        if value is not None:
            params[key] = _unsigned(key, value, high)
    return params


def symbol_query(symbol: str) -> str:
    """Query naming a single symbol (price, ticker, stats, trades, open interest)."""
    return build_request({"symbol": str(symbol)})


def depth_query(symbol: str, limit: int | None = None) -> str:
    """Order book query; without ``limit`` the server default depth applies."""
    return build_request(_parameters(symbol, limit=(limit, _U64_MAX)))


def klines_query(
    symbol: str,
    interval: str,
    limit: int | None = None,
    start_time: int | None = None,
    end_time: int | None = None,
) -> str:
    """Kline query for ``symbol`` at ``interval`` ("1m", "5m", ...)."""
    params = _parameters(
        symbol,
        limit=(limit, _U16_MAX),
        startTime=(start_time, _U64_MAX),
        endTime=(end_time, _U64_MAX),
    )
    params["interval"] = str(interval)
    return build_request(params)


def agg_trades_query(
    symbol: str,
    from_id: int | None = None,
    start_time: int | None = None,
    end_time: int | None = None,
    limit: int | None = None,
) -> str:
    """Compressed/aggregate trades query."""
    params = _parameters(
        symbol,
        limit=(limit, _U16_MAX),
        startTime=(start_time, _U64_MAX),
        endTime=(end_time, _U64_MAX),
        fromId=(from_id, _U64_MAX),
    )
    return build_request(params)


def historical_trades_query(
    symbol: str,
    from_id: int | None = None,
    limit: int | None = None,
    recv_window: int = 0,
) -> str:
    """Signed query for older trades, optionally starting at ``from_id``."""
    params = _parameters(symbol, limit=(limit, _U16_MAX), fromId=(from_id, _U64_MAX))
    return build_signed_request(params, recv_window)


def _kline(row: Any) -> KlineSummary:
    if not isinstance(row, (list, tuple)):
        raise BinanceError(f"expected a kline array, got {row!r}")
    if len(row) < _KLINE_COLUMNS:
        raise BinanceError(f"kline row has {len(row)} columns, expected at least {_KLINE_COLUMNS}")
    return KlineSummary(
        open_time=to_i64(row[0]),
        open=to_f64(row[1]),
        high=to_f64(row[2]),
        low=to_f64(row[3]),
        close=to_f64(row[4]),
        volume=to_f64(row[5]),
        close_time=to_i64(row[6]),
        quote_asset_volume=to_f64(row[7]),
        number_of_trades=to_i64(row[8]),
        taker_buy_base_asset_volume=to_f64(row[9]),
        taker_buy_quote_asset_volume=to_f64(row[10]),
    )


def parse_klines(rows: Iterable[Any]) -> list[KlineSummary]:
    """Decode the array-of-arrays kline response into summaries."""
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Iterable):
        raise BinanceError(f"expected an array of klines, got {rows!r}")
    return [_kline(row) for row in rows]