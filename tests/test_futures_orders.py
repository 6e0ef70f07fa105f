import pytest

from binancekit.futures_orders import (
    OrderRequest,
    OrderType,
    PositionSide,
    WorkingType,
    account_balance_query,
    build_order,
    cancel_order_query,
    change_initial_leverage_query,
    change_position_mode_query,
    limit_buy,
    limit_sell,
    market_buy,
    market_sell,
    open_orders_query,
    position_information_query,
    signed_order,
    stop_market_close_buy,
    stop_market_close_sell,
)
from binancekit.util import BinanceError


def _parse(query):
    return dict(pair.split("=", 1) for pair in query.split("&"))


def test_limit_buy_parameters():
    params = build_order(limit_buy("BTCUSDT", 1.5, 30000.25, "GTC"))
    assert params == {
        "symbol": "BTCUSDT",
        "side": "BUY",
        "type": "LIMIT",
        "timeInForce": "GTC",
        "quantity": "1.5",
        "price": "30000.25",
    }


def test_limit_sell_side_and_type():
    params = build_order(limit_sell("ETHUSDT", 2, 1800, "GTC"))
    assert params["side"] == "SELL"
    assert params["type"] == "LIMIT"
    assert params["quantity"] == "2"
    assert params["price"] == "1800"


def test_market_orders_have_no_price_or_time_in_force():
    for order in (market_buy("BTCUSDT", 0.25), market_sell("BTCUSDT", 0.25)):
        params = build_order(order)
        assert params["type"] == "MARKET"
        assert params["quantity"] == "0.25"
        assert "price" not in params
        assert "timeInForce" not in params
    assert build_order(market_buy("BTCUSDT", 1))["side"] == "BUY"
    assert build_order(market_sell("BTCUSDT", 1))["side"] == "SELL"


def test_stop_market_close_orders():
    buy = build_order(stop_market_close_buy("BTCUSDT", 25000.5))
    sell = build_order(stop_market_close_sell("BTCUSDT", 25000.5))
    assert buy["type"] == "STOP_MARKET"
    assert buy["closePosition"] == "TRUE"
    assert buy["stopPrice"] == "25000.5"
    assert "quantity" not in buy
    assert sell["side"] == "SELL"
    assert sell["closePosition"] == "TRUE"


def test_optional_fields_are_written():
    order = OrderRequest(
        symbol="BTCUSDT",
        side="BUY",
        order_type=OrderType.TRAILING_STOP_MARKET,
        position_side=PositionSide.LONG,
        reduce_only=False,
        activation_price=100.5,
        callback_rate=1.0,
        working_type=WorkingType.MARK_PRICE,
    )
    params = build_order(order)
    assert params["type"] == "TRAILING_STOP_MARKET"
    assert params["positionSide"] == "LONG"
    assert params["reduceOnly"] == "FALSE"
    assert params["activationPrice"] == "100.5"
    assert params["callbackRate"] == "1"
    assert params["workingType"] == "MARK_PRICE"


def test_non_numeric_quantity_rejected():
    with pytest.raises(BinanceError):
        market_buy("BTCUSDT", "1")


def test_signed_order_carries_timestamp_and_window():
    query = signed_order(market_buy("BTCUSDT", 3), 5000)
    params = _parse(query)
    assert params["recvWindow"] == "5000"
    assert params["timestamp"].isdigit()
    assert params["symbol"] == "BTCUSDT"
    assert list(params) == sorted(params)


def test_signed_order_without_window():
    params = _parse(signed_order(market_sell("BTCUSDT", 3)))
    assert "recvWindow" not in params


def test_cancel_order_query():
    params = _parse(cancel_order_query("BTCUSDT", 42, 1000))
    assert params["orderId"] == "42"
    assert params["symbol"] == "BTCUSDT"


def test_cancel_order_negative_id_rejected():
    with pytest.raises(BinanceError):
        cancel_order_query("BTCUSDT", -1)


def test_leverage_query_and_range():
    params = _parse(change_initial_leverage_query("BTCUSDT", 20))
    assert params["leverage"] == "20"
    with pytest.raises(BinanceError):
        change_initial_leverage_query("BTCUSDT", 256)


def test_position_mode_query():
    assert _parse(change_position_mode_query(True))["dualSidePosition"] == "true"
    assert _parse(change_position_mode_query(False))["dualSidePosition"] == "false"


def test_symbol_queries_and_balance():
    assert _parse(position_information_query("BTCUSDT"))["symbol"] == "BTCUSDT"
    assert _parse(open_orders_query("ETHUSDT", 10))["recvWindow"] == "10"
    balance = _parse(account_balance_query())
    assert set(balance) == {"timestamp"}