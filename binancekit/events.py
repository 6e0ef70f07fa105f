"""Stream event models pushed over the websocket connections."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable

from binancekit.model import Asks, Bids
from binancekit.schema import Model, wire
from binancekit.util import BinanceError


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise BinanceError(f"expected a string, got {value!r}")
    return value


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise BinanceError(f"expected a boolean, got {value!r}")
    return value


def _integer(low: int, high: int) -> Callable[[Any], int]:
    def parse(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise BinanceError(f"expected an integer, got {value!r}")
        if not low <= value <= high:
            raise BinanceError(f"integer out of range: {value}")
        return value

    return parse


_u32 = _integer(0, 2**32 - 1)
_u64 = _integer(0, 2**64 - 1)
_i32 = _integer(-(2**31), 2**31 - 1)
_i64 = _integer(-(2**63), 2**63 - 1)


def _many(parse: Callable[[Any], Any]) -> Callable[[Any], list]:
    def parse_list(items: Any) -> list:
        if not isinstance(items, (list, tuple)):
            raise BinanceError(f"expected an array, got {items!r}")
        return [parse(item) for item in items]

    return parse_list


def _text(key: str, default: Any = dataclasses.MISSING):
    return wire(key, parse=_string, default=default)


def _flag(key: str):
    return wire(key, parse=_boolean)


def _uint(key: str, default: Any = dataclasses.MISSING):
    return wire(key, parse=_u64, default=default)


def _int(key: str):
    return wire(key, parse=_i64)


def _int32(key: str):
    return wire(key, parse=_i32)


def _skip(default: Any):
    """A field that is never read from nor written to the wire."""
    return dataclasses.field(default=default, metadata={"skip": True})


@dataclass(kw_only=True)
class EventBalance(Model):
    asset: str = _text("a")
    free: str = _text("f")
    locked: str = _text("l")


@dataclass(kw_only=True)
class AccountUpdateEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    m: int = _uint("m")
    t: int = _uint("t")
    b: int = _uint("b")
    s: int = _uint("s")
    t_ignore: bool = _flag("T")
    w_ignore: bool = _flag("W")
    d_ignore: bool = _flag("D")
    balance: list[EventBalance] = wire("B", parse=_many(EventBalance.from_dict))


@dataclass(kw_only=True)
class OrderTradeEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    new_client_order_id: str = _text("c")
    side: str = _text("S")
    order_type: str = _text("o")
    time_in_force: str = _text("f")
    qty: str = _text("q")
    price: str = _text("p")
    p_ignore: str = _skip("")
    f_ignore: str = _skip("")
    g: int = _skip(0)
    c_ignore: str | None = _skip(None)
    execution_type: str = _text("x")
    order_status: str = _text("X")
    order_reject_reason: str = _text("r")
    order_id: int = _uint("i")
    qty_last_filled_trade: str = _text("l")
    accumulated_qty_filled_trades: str = _text("z")
    price_last_filled_trade: str = _text("L")
    commission: str = _text("n")
    asset_commisioned: str | None = _skip(None)
    trade_order_time: int = _uint("T")
    trade_id: int = _int("t")
    i_ignore: int = _skip(0)
    w: bool = _skip(False)
    is_buyer_maker: bool = _flag("m")
    m_ignore: bool = _skip(False)


@dataclass(kw_only=True)
class AggrTradesEvent(Model):
    """Trade information aggregated for a single taker order (``<symbol>@aggTrade``)."""

    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    aggregated_trade_id: int = _uint("a")
    price: str = _text("p")
    qty: str = _text("q")
    first_break_trade_id: int = _uint("f")
    last_break_trade_id: int = _uint("l")
    trade_order_time: int = _uint("T")
    is_buyer_maker: bool = _flag("m")
    m_ignore: bool = _skip(False)


@dataclass(kw_only=True)
class TradeEvent(Model):
    """Raw trade information with a unique buyer and seller (``<symbol>@trade``)."""

    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    trade_id: int = _uint("t")
    price: str = _text("p")
    qty: str = _text("q")
    buyer_order_id: int = _uint("b")
    seller_order_id: int = _uint("a")
    trade_order_time: int = _uint("T")
    is_buyer_maker: bool = _flag("m")
    m_ignore: bool = _skip(False)


@dataclass(kw_only=True)
class IndexPriceEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    pair: str = _text("i")
    price: str = _text("p")


@dataclass(kw_only=True)
class MarkPriceEvent(Model):
    event_time: int = _uint("E")
    estimate_settle_price: str = _text("P")
    next_funding_time: int = _uint("T")
    event_type: str = _text("e")
    index_price: str | None = _text("i", default=None)
    mark_price: str = _text("p")
    funding_rate: str = _text("r")
    symbol: str = _text("s")


@dataclass(kw_only=True)
class LiquidationOrder(Model):
    symbol: str = _text("s")
    side: str = _text("S")
    order_type: str = _text("o")
    time_in_force: str = _text("f")
    original_quantity: str = _text("q")
    price: str = _text("p")
    average_price: str = _text("ap")
    order_status: str = _text("X")
    order_last_filled_quantity: str = _text("l")
    order_filled_accumulated_quantity: str = _text("z")
    order_trade_time: int = _uint("T")


@dataclass(kw_only=True)
class LiquidationEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    liquidation_order: LiquidationOrder = wire("o", parse=LiquidationOrder.from_dict)


@dataclass(kw_only=True)
class BookTickerEvent(Model):
    update_id: int = _uint("u")
    symbol: str = _text("s")
    best_bid: str = _text("b")
    best_bid_qty: str = _text("B")
    best_ask: str = _text("a")
    best_ask_qty: str = _text("A")


@dataclass(kw_only=True)
class DayTickerEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    price_change: str = _text("p")
    price_change_percent: str = _text("P")
    average_price: str = _text("w")
    prev_close: str = _text("x")
    current_close: str = _text("c")
    current_close_qty: str = _text("Q")
    best_bid: str = _text("b")
    best_bid_qty: str = _text("B")
    best_ask: str = _text("a")
    best_ask_qty: str = _text("A")
    open: str = _text("o")
    high: str = _text("h")
    low: str = _text("l")
    volume: str = _text("v")
    quote_volume: str = _text("q")
    open_time: int = _uint("O")
    close_time: int = _uint("C")
    first_trade_id: int = _int("F")
    last_trade_id: int = _int("L")
    num_trades: int = _uint("n")


@dataclass(kw_only=True)
class MiniTickerEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    close: str = _text("c")
    open: str = _text("o")
    high: str = _text("h")
    low: str = _text("l")
    volume: str = _text("v")
    quote_volume: str = _text("q")


@dataclass(kw_only=True)
class Kline(Model):
    start_time: int = _int("t")
    end_time: int = _int("T")
    symbol: str = _text("s")
    interval: str = _text("i")
    first_trade_id: int = _int32("f")
    last_trade_id: int = _int32("L")
    open: str = _text("o")
    close: str = _text("c")
    high: str = _text("h")
    low: str = _text("l")
    volume: str = _text("v")
    number_of_trades: int = _int32("n")
    is_final_bar: bool = _flag("x")
    quote_volume: str = _text("q")
    active_buy_volume: str = _text("V")
    active_volume_buy_quote: str = _text("Q")
    ignore_me: str = _skip("")


@dataclass(kw_only=True)
class ContinuousKline(Model):
    start_time: int = _int("t")
    end_time: int = _int("T")
    interval: str = _text("i")
    first_trade_id: int = _int("f")
    last_trade_id: int = _int("L")
    open: str = _text("o")
    close: str = _text("c")
    high: str = _text("h")
    low: str = _text("l")
    volume: str = _text("v")
    number_of_trades: int = _int("n")
    is_final_bar: bool = _flag("x")
    quote_volume: str = _text("q")
    active_buy_volume: str = _text("V")
    active_volume_buy_quote: str = _text("Q")
    ignore_me: str = _skip("")


@dataclass(kw_only=True)
class IndexKline(Model):
    start_time: int = _int("t")
    end_time: int = _int("T")
    ignore_me: str = _skip("")
    interval: str = _text("i")
    first_trade_id: int = _int("f")
    last_trade_id: int = _int("L")
    open: str = _text("o")
    close: str = _text("c")
    high: str = _text("h")
    low: str = _text("l")
    volume: str = _text("v")
    number_of_trades: int = _int("n")
    is_final_bar: bool = _flag("x")
    ignore_me2: str = _skip("")
    ignore_me3: str = _skip("")
    ignore_me4: str = _skip("")
    ignore_me5: str = _skip("")


@dataclass(kw_only=True)
class KlineEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    kline: Kline = wire("k", parse=Kline.from_dict)


@dataclass(kw_only=True)
class ContinuousKlineEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    pair: str = _text("ps")
    contract_type: str = _text("ct")
    kline: ContinuousKline = wire("k", parse=ContinuousKline.from_dict)


@dataclass(kw_only=True)
class IndexKlineEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    pair: str = _text("ps")
    kline: IndexKline = wire("k", parse=IndexKline.from_dict)


@dataclass(kw_only=True)
class DepthOrderBookEvent(Model):
    event_type: str = _text("e")
    event_time: int = _uint("E")
    symbol: str = _text("s")
    first_update_id: int = _uint("U")
    final_update_id: int = _uint("u")
    previous_final_update_id: int | None = _uint("pu", default=None)
    bids: list[Bids] = wire("b", parse=_many(Bids.from_dict))
    asks: list[Asks] = wire("a", parse=_many(Asks.from_dict))


__all__ = [
    "EventBalance",
    "AccountUpdateEvent",
    "OrderTradeEvent",
    "AggrTradesEvent",
    "TradeEvent",
    "IndexPriceEvent",
    "MarkPriceEvent",
    "LiquidationOrder",
    "LiquidationEvent",
    "BookTickerEvent",
    "DayTickerEvent",
    "MiniTickerEvent",
    "Kline",
    "ContinuousKline",
    "IndexKline",
    "KlineEvent",
    "ContinuousKlineEvent",
    "IndexKlineEvent",
    "DepthOrderBookEvent",
]