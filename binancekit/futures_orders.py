"""Order construction and signed queries for the futures account endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from binancekit.schema import format_string_or_float
from binancekit.util import BinanceError, build_signed_request

_U8_MAX = 2**8 - 1
_U64_MAX = 2**64 - 1

BUY = "BUY"
SELL = "SELL"


class ContractType(str, Enum):
    PERPETUAL = "PERPETUAL"
    CURRENT_MONTH = "CURRENT_MONTH"
    NEXT_MONTH = "NEXT_MONTH"
    CURRENT_QUARTER = "CURRENT_QUARTER"
    NEXT_QUARTER = "NEXT_QUARTER"


class PositionSide(str, Enum):
    BOTH = "BOTH"
    LONG = "LONG"
    SHORT = "SHORT"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP = "STOP"
    STOP_MARKET = "STOP_MARKET"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"
    TRAILING_STOP_MARKET = "TRAILING_STOP_MARKET"


class WorkingType(str, Enum):
    MARK_PRICE = "MARK_PRICE"
    CONTRACT_PRICE = "CONTRACT_PRICE"


def _text(value: Any) -> str:
    """The wire string of an enum member or a plain string."""
    return str(value.value) if isinstance(value, Enum) else str(value)


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BinanceError(f"{name} must be a number, got {value!r}")
    return float(value)


def _unsigned(name: str, value: Any, high: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BinanceError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= high:
        raise BinanceError(f"{name} out of range: {value}")
    return str(value)


def _flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"


@dataclass
class OrderRequest:
    """A futures order before it is turned into query parameters."""

    symbol: str
    side: str
    order_type: OrderType
    position_side: PositionSide | None = None
    time_in_force: Any = None
    qty: float | None = None
    reduce_only: bool | None = None
    price: float | None = None
    stop_price: float | None = None
    close_position: bool | None = None
    activation_price: float | None = None
    callback_rate: float | None = None
    working_type: WorkingType | None = None
    price_protect: float | None = None


def build_order(order: OrderRequest) -> dict[str, str]:
    """Return the query parameters describing ``order``."""
    params = {
        "symbol": str(order.symbol),
        "side": _text(order.side),
        "type": _text(order.order_type),
    }
    if order.position_side is not None:
        params["positionSide"] = _text(order.position_side)
    if order.time_in_force is not None:
        params["timeInForce"] = _text(order.time_in_force)
    if order.qty is not None:
        params["quantity"] = format_string_or_float(_number("qty", order.qty))
    if order.reduce_only is not None:
        params["reduceOnly"] = _flag(order.reduce_only)
    if order.price is not None:
        params["price"] = format_string_or_float(_number("price", order.price))
    if order.stop_price is not None:
        params["stopPrice"] = format_string_or_float(_number("stop_price", order.stop_price))
    if order.close_position is not None:
        params["closePosition"] = _flag(order.close_position)
    if order.activation_price is not None:
        params["activationPrice"] = format_string_or_float(
            _number("activation_price", order.activation_price)
        )
    if order.callback_rate is not None:
        params["callbackRate"] = format_string_or_float(_number("callback_rate", order.callback_rate))
    if order.working_type is not None:
        params["workingType"] = _text(order.working_type)
    if order.price_protect is not None:
        params["priceProtect"] = format_string_or_float(
            _number("price_protect", order.price_protect)
        ).upper()
    return params


def signed_order(order: OrderRequest, recv_window: int = 0) -> str:
    """Signed query placing ``order``."""
    return build_signed_request(build_order(order), recv_window)


def limit_buy(symbol: str, qty: float, price: float, time_in_force: Any) -> OrderRequest:
    """A LIMIT buy order."""
    return OrderRequest(
        symbol=str(symbol),
        side=BUY,
        order_type=OrderType.LIMIT,
        time_in_force=time_in_force,
        qty=_number("qty", qty),
        price=_number("price", price),
    )


def limit_sell(symbol: str, qty: float, price: float, time_in_force: Any) -> OrderRequest:
    """A LIMIT sell order."""
    return OrderRequest(
        symbol=str(symbol),
        side=SELL,
        order_type=OrderType.LIMIT,
        time_in_force=time_in_force,
        qty=_number("qty", qty),
        price=_number("price", price),
    )


def market_buy(symbol: str, qty: float) -> OrderRequest:
    """A MARKET buy order."""
    return OrderRequest(symbol=str(symbol), side=BUY, order_type=OrderType.MARKET, qty=_number("qty", qty))


def market_sell(symbol: str, qty: float) -> OrderRequest:
    """A MARKET sell order."""
    return OrderRequest(symbol=str(symbol), side=SELL, order_type=OrderType.MARKET, qty=_number("qty", qty))


def stop_market_close_buy(symbol: str, stop_price: float) -> OrderRequest:
    """A STOP_MARKET buy that closes the whole position."""
    return OrderRequest(
        symbol=str(symbol),
        side=BUY,
        order_type=OrderType.STOP_MARKET,
        stop_price=_number("stop_price", stop_price),
        close_position=True,
    )


def stop_market_close_sell(symbol: str, stop_price: float) -> OrderRequest:
    """A STOP_MARKET sell that closes the whole position."""
    return OrderRequest(
        symbol=str(symbol),
        side=SELL,
        order_type=OrderType.STOP_MARKET,
        stop_price=_number("stop_price", stop_price),
        close_position=True,
    )


def cancel_order_query(symbol: str, order_id: int, recv_window: int = 0) -> str:
    """Signed query cancelling one order."""
    params = {"symbol": str(symbol), "orderId": _unsigned("order_id", order_id, _U64_MAX)}
    return build_signed_request(params, recv_window)


def position_information_query(symbol: str, recv_window: int = 0) -> str:
    """Signed query for position risk on ``symbol``."""
    return build_signed_request({"symbol": str(symbol)}, recv_window)


def account_balance_query(recv_window: int = 0) -> str:
    """Signed query for the futures account balances."""
    return build_signed_request({}, recv_window)


def change_initial_leverage_query(symbol: str, leverage: int, recv_window: int = 0) -> str:
    """Signed query setting the initial leverage of ``symbol``."""
    params = {"symbol": str(symbol), "leverage": _unsigned("leverage", leverage, _U8_MAX)}
    return build_signed_request(params, recv_window)


def change_position_mode_query(dual_side_position: bool, recv_window: int = 0) -> str:
    """Signed query switching between one-way and hedge position mode."""
    params = {"dualSidePosition": "true" if dual_side_position else "false"}
    return build_signed_request(params, recv_window)


def open_orders_query(symbol: str, recv_window: int = 0) -> str:
    """Signed query addressing all open orders on ``symbol`` (list or cancel)."""
    return build_signed_request({"symbol": str(symbol)}, recv_window)