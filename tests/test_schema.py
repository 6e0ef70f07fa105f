import math
from dataclasses import dataclass

import pytest

from binancekit.model import Bids, ServerTime
from binancekit.schema import (
    Model,
    format_string_or_float,
    parse_optional_string_or_float,
    parse_string_or_bool,
    parse_string_or_float,
    wire,
)
from binancekit.util import BinanceError


@dataclass(kw_only=True)
class Sample(Model):
    symbol_name: str
    price: float = wire("p", parse=parse_string_or_float)
    flag: bool = wire(parse=parse_string_or_bool)
    note: str | None = wire(default=None)
    extra: float | None = wire(parse=parse_optional_string_or_float, default=None)


@dataclass
class Pair(Model):
    price: float = wire(parse=parse_string_or_float)
    qty: float = wire(parse=parse_string_or_float)


@dataclass
class Holder(Model):
    pair: Pair = wire(parse=Pair.from_dict)


def test_parse_string_or_float_values():
    assert parse_string_or_float("1.5") == 1.5
    assert parse_string_or_float(2) == 2.0
    assert parse_string_or_float(0.25) == 0.25
    assert parse_string_or_float("INF") == math.inf


@pytest.mark.parametrize("bad", ["abc", "", True, None, [1], " 1"])
def test_parse_string_or_float_rejects(bad):
    with pytest.raises(BinanceError):
        parse_string_or_float(bad)


def test_parse_optional_string_or_float():
    assert parse_optional_string_or_float("0.5") == 0.5
    with pytest.raises(BinanceError):
        parse_optional_string_or_float(None)


def test_parse_string_or_bool():
    assert parse_string_or_bool("true") is True
    assert parse_string_or_bool("false") is False
    assert parse_string_or_bool(False) is False
    with pytest.raises(BinanceError):
        parse_string_or_bool("True")
    with pytest.raises(BinanceError):
        parse_string_or_bool(1)


def test_format_pins():
    assert format_string_or_float(1.0) == "1"
    assert format_string_or_float(1e-7) == "0.0000001"
    assert format_string_or_float(math.inf) == "inf"


@pytest.mark.parametrize("value", [0.1, 1.0, 2.5e-8, 123456789.125, -3.75, 1e22, 7])
def test_format_round_trips_without_exponent(value):
    text = format_string_or_float(value)
    assert "e" not in text
    assert parse_string_or_float(text) == value


def test_model_reads_camel_and_wire_keys():
    sample = Sample.from_dict({"symbolName": "X", "p": "1.5", "flag": "true", "unknown": 1})
    assert sample.symbol_name == "X"
    assert sample.price == 1.5
    assert sample.flag is True
    assert sample.note is None
    assert sample.extra is None
    data = Model.to_dict(sample)
    assert data["symbolName"] == "X"
    assert data["p"] == "1.5"
    assert data["flag"] == "true"
    assert "unknown" not in data


def test_model_to_dict_formats_values():
    sample = Sample.from_dict({"symbolName": "X", "p": 2.5, "flag": False, "extra": "0.5"})
    data = Model.to_dict(sample)
    assert data["p"] == "2.5"
    assert data["flag"] == "false"
    assert data["extra"] == "0.5"
    assert data["note"] is None
    assert Sample.from_dict(data) == sample


def test_model_missing_field_raises():
    with pytest.raises(BinanceError, match="serverTime"):
        ServerTime.from_dict({})


def test_model_rejects_non_object():
    with pytest.raises(BinanceError):
        ServerTime.from_dict("nope")


def test_model_from_array():
    bid = Bids.from_dict(["1.25", "3"])
    assert bid.price == 1.25
    assert bid.qty == 3.0
    with pytest.raises(BinanceError):
        Bids.from_dict(["1"])
    with pytest.raises(BinanceError):
        Bids.from_dict(["1", "2", "3"])


def test_nested_round_trip():
    holder = Holder.from_dict({"pair": {"price": "4", "qty": "0.5"}})
    assert holder.pair.qty == 0.5
    data = Model.to_dict(holder)
    assert data["pair"]["qty"] == "0.5"
    assert Holder.from_dict(data) == holder