import time
from urllib.parse import parse_qsl

from binancekit.savings import all_coins_query, asset_detail_query, deposit_address_query


def _keys(query):
    return [key for key, _ in parse_qsl(query)]


def test_all_coins_query_with_window():
    before = int(time.time() * 1000)
    query = all_coins_query(5000)
    after = int(time.time() * 1000)
    values = dict(parse_qsl(query))
    assert _keys(query) == ["recvWindow", "timestamp"]
    assert values["recvWindow"] == "5000"
    assert before <= int(values["timestamp"]) <= after


def test_all_coins_query_without_window():
    assert _keys(all_coins_query(0)) == ["timestamp"]


def test_asset_detail_query_with_asset():
    query = asset_detail_query("BTC", 5000)
    assert query.startswith("asset=BTC&recvWindow=5000&timestamp=")


def test_asset_detail_query_without_asset():
    assert _keys(asset_detail_query(None, 0)) == ["timestamp"]


def test_deposit_address_query_with_network():
    query = deposit_address_query("BTC", "BSC", 5000)
    assert _keys(query) == ["coin", "network", "recvWindow", "timestamp"]
    assert dict(parse_qsl(query))["network"] == "BSC"


def test_deposit_address_query_default_network():
    query = deposit_address_query("ETH")
    assert _keys(query) == ["coin", "timestamp"]
    assert dict(parse_qsl(query))["coin"] == "ETH"