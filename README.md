# binancekit

Typed data models, query-string builders and spot websocket stream handling
for the Binance spot, wallet and futures APIs.

The package does not hold credentials and does not send REST requests itself.
It builds the query strings that the endpoints expect, including the
signed-request fields `recvWindow` and `timestamp`. It turns JSON responses
and stream messages into dataclasses. You choose the HTTP client and do the
signing yourself.

## Installation

```
pip install binancekit
```

## Modules

- `binancekit.util`: `build_request`, `build_signed_request`,
  `build_signed_request_custom`, `to_i64`, `to_f64` and the `BinanceError`
  exception.
- `binancekit.schema`: the `Model` base class (`from_dict`, `to_dict`) and
  the value parsers `parse_string_or_float`, `parse_string_or_bool` and
  `format_string_or_float`.
- `binancekit.model`: spot REST response models such as
  `ExchangeInformation`, `Symbol`, `OrderBook`, `PriceStats`, `Transaction`,
  `CoinInfo` and `AssetDetail`, the symbol filters (`parse_filter`), and
  `find_symbol`.
- `binancekit.events`: stream event models, including `TradeEvent`,
  `AggrTradesEvent`, `KlineEvent`, `DayTickerEvent`, `DepthOrderBookEvent`,
  `MarkPriceEvent`, `LiquidationEvent` and `ContinuousKlineEvent`.
- `binancekit.futures_model`: futures REST response models such as
  `Position`, `AccountBalance`, `Order`, `Transaction` and `MarkPrice`, and a
  futures `find_symbol`.
- `binancekit.market`: market data queries (`symbol_query`, `depth_query`,
  `klines_query`, `agg_trades_query`, `historical_trades_query`) and
  `parse_klines`.
- `binancekit.savings`: signed wallet queries (`all_coins_query`,
  `asset_detail_query`, `deposit_address_query`).
- `binancekit.futures_orders`: futures order construction (`OrderRequest`,
  `limit_buy`, `market_sell`, `stop_market_close_buy`, ...), `build_order`,
  `signed_order` and signed account queries.
- `binancekit.websockets`: spot stream URLs, `parse_event` and the
  `WebSockets` client.

## Building requests

```python
from binancekit.market import klines_query, depth_query
from binancekit.util import build_signed_request

klines_query("BTCUSDT", "1m", 500, None, None)
# 'interval=1m&limit=500&symbol=BTCUSDT'

depth_query("BTCUSDT", 100)
# 'limit=100&symbol=BTCUSDT'

build_signed_request({"symbol": "BTCUSDT"}, 5000)
# 'recvWindow=5000&symbol=BTCUSDT&timestamp=...'
```

Parameters are always sorted by key. A `recv_window` of 0 leaves out
`recvWindow`. Futures orders are built in the same way:

```python
from binancekit.futures_orders import limit_buy, signed_order

order = limit_buy("BTCUSDT", 0.01, 30000.0, "GTC")
query = signed_order(order, 5000)
```

## Parsing responses

```python
from binancekit.model import ExchangeInformation, find_symbol
from binancekit.market import parse_klines

info = ExchangeInformation.from_dict(response_json)
btc = find_symbol(info, "btcusdt")   # raises BinanceError if absent

klines = parse_klines(kline_rows)    # list of KlineSummary
```

Numeric fields that the API sends as strings are read as floats. The string
`"INF"` is read as infinity. `to_dict()` writes such fields back as plain
decimal strings.

## Spot streams

```python
import threading
from binancekit.websockets import WebSockets, EventKind

def on_event(event):
    if event.kind is EventKind.TRADE:
        print(event.data.symbol, event.data.price)

ws = WebSockets(on_event)
ws.connect("btcusdt@trade")
running = threading.Event()
running.set()
ws.event_loop(running)   # runs until running is cleared or the stream closes
```

`connect_with_endpoint` opens a stream below a custom endpoint, and
`connect_multiple_streams` opens a combined stream. Messages from combined
streams are unwrapped from their `data` field. Messages that match no known
event shape are ignored. You can pass raw messages to `handle_msg` to test
your handler without a network connection.

## What is not included

The package has no futures stream client. The futures event models in
`binancekit.events`, such as `MarkPriceEvent`, `IndexPriceEvent`,
`LiquidationEvent` and `MiniTickerEvent`, can be decoded with their
`from_dict`, but you have to open the connection and route futures stream
messages yourself.

## Errors

Failures that the library reports raise `binancekit.util.BinanceError`.
Examples are an unknown symbol, a malformed response, a failed handshake, a
closed stream, or closing a connection that was never opened.