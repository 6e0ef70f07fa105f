"""Spot REST response models."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

from binancekit.schema import Model, parse_string_or_float, wire
from binancekit.util import BinanceError

_float = parse_string_or_float


def _many(parse: Callable[[Any], Any]) -> Callable[[Any], list]:
    def parse_list(items: Any) -> list:
        if not isinstance(items, (list, tuple)):
            raise BinanceError(f"expected an array, got {items!r}")
        return [parse(item) for item in items]

    return parse_list


@dataclass
class ServerTime(Model):
    server_time: int


@dataclass
class RateLimit(Model):
    rate_limit_type: str
    interval: str
    interval_num: int
    limit: int


class _Filter(Model):
    FILTER_TYPE: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        return {"filterType": self.FILTER_TYPE, **super().to_dict()}


@dataclass
class PriceFilter(_Filter):
    FILTER_TYPE: ClassVar[str] = "PRICE_FILTER"
    min_price: str
    max_price: str
    tick_size: str


@dataclass
class PercentPrice(_Filter):
    FILTER_TYPE: ClassVar[str] = "PERCENT_PRICE"
    multiplier_up: str
    multiplier_down: str
    avg_price_mins: float | None = wire(default=None)


@dataclass
class LotSize(_Filter):
    FILTER_TYPE: ClassVar[str] = "LOT_SIZE"
    min_qty: str
    max_qty: str
    step_size: str


@dataclass
class MinNotional(_Filter):
    FILTER_TYPE: ClassVar[str] = "MIN_NOTIONAL"
    notional: str | None = wire(default=None)
    min_notional: str | None = wire(default=None)
    apply_to_market: bool | None = wire(default=None)
    avg_price_mins: float | None = wire(default=None)


@dataclass
class IcebergParts(_Filter):
    FILTER_TYPE: ClassVar[str] = "ICEBERG_PARTS"
    limit: int | None = wire(default=None)


@dataclass
class MaxNumOrders(_Filter):
    FILTER_TYPE: ClassVar[str] = "MAX_NUM_ORDERS"
    max_num_orders: int | None = wire(default=None)


@dataclass
class MaxNumAlgoOrders(_Filter):
    FILTER_TYPE: ClassVar[str] = "MAX_NUM_ALGO_ORDERS"
    max_num_algo_orders: int | None = wire(default=None)


@dataclass
class MaxNumIcebergOrders(_Filter):
    FILTER_TYPE: ClassVar[str] = "MAX_NUM_ICEBERG_ORDERS"
    max_num_iceberg_orders: int


@dataclass
class MaxPosition(_Filter):
    FILTER_TYPE: ClassVar[str] = "MAX_POSITION"
    max_position: str


@dataclass
class MarketLotSize(_Filter):
    FILTER_TYPE: ClassVar[str] = "MARKET_LOT_SIZE"
    min_qty: str
    max_qty: str
    step_size: str


_FILTERS: dict[str, type[_Filter]] = {
    cls.FILTER_TYPE: cls
    for cls in (
        PriceFilter,
        PercentPrice,
        LotSize,
        MinNotional,
        IcebergParts,
        MaxNumOrders,
        MaxNumAlgoOrders,
        MaxNumIcebergOrders,
        MaxPosition,
        MarketLotSize,
    )
}


def parse_filter(data: Any) -> _Filter:
    """Build the filter model selected by the object's ``filterType``."""
    if not isinstance(data, Mapping):
        raise BinanceError(f"expected a filter object, got {data!r}")
    if "filterType" not in data:
        raise BinanceError("missing field `filterType`")
    tag = data["filterType"]
    cls = _FILTERS.get(tag)
    if cls is None:
        raise BinanceError(f"unknown filter variant `{tag}`")
    return cls.from_dict(data)


@dataclass
class Symbol(Model):
    symbol: str
    status: str
    base_asset: str
    base_asset_precision: int
    quote_asset: str
    quote_precision: int
    order_types: list[str]
    iceberg_allowed: bool
    is_spot_trading_allowed: bool
    is_margin_trading_allowed: bool
    filters: list[_Filter] = wire(parse=_many(parse_filter))


@dataclass
class ExchangeInformation(Model):
    timezone: str
    server_time: int
    rate_limits: list[RateLimit] = wire(parse=_many(RateLimit.from_dict))
    symbols: list[Symbol] = wire(parse=_many(Symbol.from_dict))


def find_symbol(info: ExchangeInformation, symbol: str) -> Symbol:
    """Return the symbol entry matching ``symbol`` case-insensitively."""
    wanted = symbol.upper()
    for item in info.symbols:
        if item.symbol == wanted:
            return item
    raise BinanceError("Symbol not found")


@dataclass
class Balance(Model):
    asset: str
    free: str
    locked: str


@dataclass
class AccountInformation(Model):
    maker_commission: float
    taker_commission: float
    buyer_commission: float
    seller_commission: float
    can_trade: bool
    can_withdraw: bool
    can_deposit: bool
    balances: list[Balance] = wire(parse=_many(Balance.from_dict))


@dataclass
class Order(Model):
    symbol: str
    order_id: int
    order_list_id: int
    client_order_id: str
    price: float = wire(parse=_float)
    orig_qty: str = wire()
    executed_qty: str = wire()
    cummulative_quote_qty: str = wire()
    status: str = wire()
    time_in_force: str = wire()
    type_name: str = wire("type")
    side: str = wire()
    stop_price: float = wire(parse=_float)
    iceberg_qty: str = wire()
    time: int = wire()
    update_time: int = wire()
    is_working: bool = wire()
    orig_quote_order_qty: str = wire()


@dataclass
class OrderCanceled(Model):
    symbol: str
    orig_client_order_id: str | None = wire(default=None)
    order_id: int | None = wire(default=None)
    client_order_id: str | None = wire(default=None)


@dataclass
class FillInfo(Model):
    price: float = wire(parse=_float)
    qty: float = wire(parse=_float)
    commission: float = wire(parse=_float)
    commission_asset: str = wire()
    trade_id: int | None = wire(default=None)


@dataclass(kw_only=True)
class Transaction(Model):
    symbol: str
    order_id: int
    order_list_id: int | None = wire(default=None)
    client_order_id: str
    transact_time: int
    price: float = wire(parse=_float)
    orig_qty: float = wire(parse=_float)
    executed_qty: float = wire(parse=_float)
    cummulative_quote_qty: float = wire(parse=_float)
    stop_price: float = wire(parse=_float, default=0.0)
    status: str
    time_in_force: str
    type_name: str = wire("type")
    side: str
    fills: list[FillInfo] | None = wire(parse=_many(FillInfo.from_dict), default=None)


@dataclass
class Bids(Model):
    price: float = wire(parse=_float)
    qty: float = wire(parse=_float)


@dataclass
class Asks(Model):
    price: float = wire(parse=_float)
    qty: float = wire(parse=_float)


@dataclass
class OrderBook(Model):
    last_update_id: int
    bids: list[Bids] = wire(parse=_many(Bids.from_dict))
    asks: list[Asks] = wire(parse=_many(Asks.from_dict))


@dataclass
class UserDataStream(Model):
    listen_key: str


@dataclass
class SymbolPrice(Model):
    symbol: str
    price: float = wire(parse=_float)


@dataclass
class AveragePrice(Model):
    mins: int
    price: float = wire(parse=_float)


@dataclass
class Tickers(Model):
    symbol: str
    bid_price: float = wire(parse=_float)
    bid_qty: float = wire(parse=_float)
    ask_price: float = wire(parse=_float)
    ask_qty: float = wire(parse=_float)


@dataclass
class TradeHistory(Model):
    id: int
    price: float = wire(parse=_float)
    qty: float = wire(parse=_float)
    commission: str = wire()
    commission_asset: str = wire()
    time: int = wire()
    is_buyer: bool = wire()
    is_maker: bool = wire()
    is_best_match: bool = wire()


@dataclass
class PriceStats(Model):
    symbol: str
    price_change: str
    price_change_percent: str
    weighted_avg_price: str
    prev_close_price: float = wire(parse=_float)
    last_price: float = wire(parse=_float)
    bid_price: float = wire(parse=_float)
    ask_price: float = wire(parse=_float)
    open_price: float = wire(parse=_float)
    high_price: float = wire(parse=_float)
    low_price: float = wire(parse=_float)
    volume: float = wire(parse=_float)
    open_time: int = wire()
    close_time: int = wire()
    first_id: int = wire()
    last_id: int = wire()
    count: int = wire()


@dataclass
class KlineSummary(Model):
    open_time: int = wire("open_time")
    open: float = wire("open")
    high: float = wire("high")
    low: float = wire("low")
    close: float = wire("close")
    volume: float = wire("volume")
    close_time: int = wire("close_time")
    quote_asset_volume: float = wire("quote_asset_volume")
    number_of_trades: int = wire("number_of_trades")
    taker_buy_base_asset_volume: float = wire("taker_buy_base_asset_volume")
    taker_buy_quote_asset_volume: float = wire("taker_buy_quote_asset_volume")


@dataclass(kw_only=True)
class Network(Model):
    address_regex: str
    coin: str
    deposit_desc: str | None = wire(default=None)
    deposit_enable: bool
    is_default: bool
    memo_regex: str
    min_confirm: int
    name: str
    network: str
    reset_address_status: bool
    special_tips: str | None = wire(default=None)
    un_lock_confirm: int
    withdraw_desc: str | None = wire(default=None)
    withdraw_enable: bool
    withdraw_fee: float = wire(parse=_float)
    withdraw_min: float = wire(parse=_float)
    withdraw_integer_multiple: str | None = wire(default=None)


@dataclass
class CoinInfo(Model):
    coin: str
    deposit_all_enable: bool
    free: float = wire(parse=_float)
    freeze: float = wire(parse=_float)
    ipoable: float = wire(parse=_float)
    ipoing: float = wire(parse=_float)
    is_legal_money: bool = wire()
    locked: float = wire(parse=_float)
    name: str = wire()
    network_list: list[Network] = wire(parse=_many(Network.from_dict))
    storage: float = wire(parse=_float)
    trading: bool = wire()
    withdraw_all_enable: bool = wire()
    withdrawing: float = wire(parse=_float)


@dataclass
class AssetDetail(Model):
    min_withdraw_amount: float = wire(parse=_float)
    deposit_status: bool = wire()
    withdraw_fee: float = wire(parse=_float)
    withdraw_status: bool = wire()
    deposit_tip: str | None = wire(default=None)


@dataclass
class DepositAddress(Model):
    address: str
    coin: str
    tag: str
    url: str