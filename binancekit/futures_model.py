"""Futures REST response models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from binancekit.model import (
    Asks,
    Bids,
    KlineSummary,
    RateLimit,
    ServerTime,
    SymbolPrice,
    Tickers,
    parse_filter,
)
from binancekit.schema import (
    Model,
    parse_optional_string_or_float,
    parse_string_or_bool,
    parse_string_or_float,
    wire,
)
from binancekit.util import BinanceError

_float = parse_string_or_float
_opt_float = parse_optional_string_or_float


def _many(parse: Callable[[Any], Any]) -> Callable[[Any], list]:
    def parse_list(items: Any) -> list:
        if not isinstance(items, (list, tuple)):
            raise BinanceError(f"expected an array, got {items!r}")
        return [parse(item) for item in items]

    return parse_list


@dataclass(kw_only=True)
class Symbol(Model):
    symbol: str
    status: str
    maint_margin_percent: str
    required_margin_percent: str
    base_asset: str
    quote_asset: str
    price_precision: int
    quantity_precision: int
    base_asset_precision: int
    quote_precision: int
    filters: list = wire(parse=_many(parse_filter))
    order_types: list[str]
    time_in_force: list[str]


@dataclass(kw_only=True)
class ExchangeInformation(Model):
    timezone: str
    server_time: int
    rate_limits: list[RateLimit] = wire(parse=_many(RateLimit.from_dict))
    exchange_filters: list[str]
    symbols: list[Symbol] = wire(parse=_many(Symbol.from_dict))


def find_symbol(info: ExchangeInformation, symbol: str) -> Symbol:
    """Return the futures symbol entry matching ``symbol`` case-insensitively."""
    wanted = symbol.upper()
    for item in info.symbols:
        if item.symbol == wanted:
            return item
    raise BinanceError("Symbol not found")


@dataclass(kw_only=True)
class OrderBook(Model):
    last_update_id: int
    event_time: int = wire("E")
    trade_order_time: int = wire("T")
    bids: list[Bids] = wire(parse=_many(Bids.from_dict))
    asks: list[Asks] = wire(parse=_many(Asks.from_dict))


@dataclass(kw_only=True)
class PriceStats(Model):
    symbol: str
    price_change: str
    price_change_percent: str
    weighted_avg_price: str
    last_price: float = wire(parse=_float)
    open_price: float = wire(parse=_float)
    high_price: float = wire(parse=_float)
    low_price: float = wire(parse=_float)
    volume: float = wire(parse=_float)
    quote_volume: float = wire(parse=_float)
    last_qty: float = wire(parse=_float)
    open_time: int
    close_time: int
    first_id: int
    last_id: int
    count: int


@dataclass(kw_only=True)
class Trade(Model):
    id: int
    is_buyer_maker: bool
    price: float = wire(parse=_float)
    qty: float = wire(parse=_float)
    quote_qty: float = wire(parse=_float)
    time: int


@dataclass(kw_only=True)
class AggTrade(Model):
    time: int = wire("T")
    agg_id: int = wire("a")
    first_id: int = wire("f")
    last_id: int = wire("l")
    maker: bool = wire("m")
    price: float = wire("p", parse=_float)
    qty: float = wire("q", parse=_float)


@dataclass(kw_only=True)
class MarkPrice(Model):
    symbol: str
    mark_price: float = wire(parse=_float)
    last_funding_rate: float = wire(parse=_float)
    next_funding_time: int
    time: int


@dataclass(kw_only=True)
class LiquidationOrder(Model):
    average_price: float = wire(parse=_float)
    executed_qty: float = wire(parse=_float)
    orig_qty: float = wire(parse=_float)
    price: float = wire(parse=_float)
    side: str
    status: str
    symbol: str
    time: int
    time_in_force: str
    order_type: str = wire("type")


@dataclass(kw_only=True)
class OpenInterest(Model):
    open_interest: float = wire(parse=_float)
    symbol: str


@dataclass(kw_only=True)
class Order(Model):
    client_order_id: str
    cum_qty: float = wire(parse=_float, default=0.0)
    cum_quote: float = wire(parse=_float)
    executed_qty: float = wire(parse=_float)
    order_id: int
    avg_price: float = wire(parse=_float)
    orig_qty: float = wire(parse=_float)
    price: float = wire(parse=_float)
    side: str
    reduce_only: bool
    position_side: str
    status: str
    stop_price: float = wire(parse=_float, default=0.0)
    close_position: bool
    symbol: str
    time_in_force: str
    order_type: str = wire("type")
    orig_type: str
    activation_price: float = wire(parse=_float, default=0.0)
    price_rate: float = wire(parse=_float, default=0.0)
    update_time: int
    working_type: str
    price_protect: bool


@dataclass(kw_only=True)
class Transaction(Model):
    client_order_id: str
    cum_qty: float = wire(parse=_float)
    cum_quote: float = wire(parse=_float)
    executed_qty: float = wire(parse=_float)
    order_id: int
    avg_price: float = wire(parse=_float)
    orig_qty: float = wire(parse=_float)
    reduce_only: bool
    side: str
    position_side: str
    status: str
    stop_price: float = wire(parse=_float)
    close_position: bool
    symbol: str
    time_in_force: str
    type_name: str = wire("type")
    orig_type: str
    activate_price: float | None = wire(parse=_opt_float, default=None)
    price_rate: float | None = wire(parse=_opt_float, default=None)
    update_time: int
    working_type: str
    price_protect: bool


@dataclass(kw_only=True)
class CanceledOrder(Model):
    client_order_id: str
    cum_qty: float = wire(parse=_float)
    cum_quote: float = wire(parse=_float)
    executed_qty: float = wire(parse=_float)
    order_id: int
    orig_qty: float = wire(parse=_float)
    orig_type: str
    price: float = wire(parse=_float)
    reduce_only: bool
    side: str
    position_side: str
    status: str
    stop_price: float = wire(parse=_float)
    close_position: bool
    symbol: str
    time_in_force: str
    type_name: str = wire("type")
    activate_price: float | None = wire(parse=_opt_float, default=None)
    price_rate: float | None = wire(parse=_opt_float, default=None)
    update_time: int
    working_type: str
    price_protect: bool


@dataclass(kw_only=True)
class Position(Model):
    entry_price: float = wire(parse=_float)
    margin_type: str
    is_auto_add_margin: bool = wire(parse=parse_string_or_bool)
    isolated_margin: float = wire(parse=_float)
    leverage: str
    liquidation_price: float = wire(parse=_float)
    mark_price: float = wire(parse=_float)
    max_notional_value: float = wire(parse=_float)
    position_amount: float = wire("positionAmt", parse=_float)
    symbol: str
    unrealized_profit: float = wire("unRealizedProfit", parse=_float)
    position_side: str


@dataclass(kw_only=True)
class AccountBalance(Model):
    account_alias: str
    asset: str
    balance: float = wire(parse=_float)
    cross_wallet_balance: float = wire(parse=_float)
    cross_unrealized_pnl: float = wire("crossUnPnl", parse=_float)
    available_balance: float = wire(parse=_float)
    max_withdraw_amount: float = wire(parse=_float)
    margin_available: bool
    update_time: int


@dataclass(kw_only=True)
class ChangeLeverageResponse(Model):
    leverage: int
    max_notional_value: float = wire(parse=_float)
    symbol: str


__all__ = [
    "Asks",
    "Bids",
    "KlineSummary",
    "RateLimit",
    "ServerTime",
    "SymbolPrice",
    "Tickers",
    "Symbol",
    "ExchangeInformation",
    "OrderBook",
    "PriceStats",
    "Trade",
    "AggTrade",
    "MarkPrice",
    "LiquidationOrder",
    "OpenInterest",
    "Order",
    "Transaction",
    "CanceledOrder",
    "Position",
    "AccountBalance",
    "ChangeLeverageResponse",
    "find_symbol",
]