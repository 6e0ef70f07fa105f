"""Spot market streams: stream URLs, event decoding and the read loop."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import websocket

from binancekit.events import (
    AccountUpdateEvent,
    AggrTradesEvent,
    BookTickerEvent,
    DayTickerEvent,
    DepthOrderBookEvent,
    KlineEvent,
    OrderTradeEvent,
    TradeEvent,
)
from binancekit.model import OrderBook
from binancekit.util import BinanceError

STREAM_ENDPOINT = "wss://stream.binance.com:9443"

_DECODE_ERRORS = (BinanceError, TypeError, ValueError)


def stream_url(subscription: str, endpoint: str | None = None) -> str:
    """URL of a single stream, on the default host or below ``endpoint``."""
    if endpoint is None:
        return f"{STREAM_ENDPOINT}/ws/{subscription}"
    return f"{endpoint}/{subscription}"


def multi_stream_url(endpoints: Iterable[str]) -> str:
    """URL of a combined stream carrying every stream in ``endpoints``."""
    return f"{STREAM_ENDPOINT}/stream?streams={'/'.join(endpoints)}"


def _list_of(model: type) -> Callable[[Any], list]:
    def parse(value: Any) -> list:
        if not isinstance(value, list):
            raise BinanceError(f"expected an array, got {type(value).__name__}")
        return [model.from_dict(item) for item in value]

    return parse


def _first_match(value: Any, candidates: Sequence[tuple[Any, Callable[[Any], Any]]]) -> tuple[Any, Any] | None:
    """Return ``(kind, data)`` for the first candidate able to decode ``value``."""
    for kind, parse in candidates:
        try:
            data = parse(value)
        except _DECODE_ERRORS:
            continue
        return kind, data
    return None


class EventKind(Enum):
    ACCOUNT_UPDATE = "AccountUpdate"
    ORDER_TRADE = "OrderTrade"
    AGGR_TRADES = "AggrTrades"
    TRADE = "Trade"
    ORDER_BOOK = "OrderBook"
    DAY_TICKER = "DayTicker"
    DAY_TICKER_ALL = "DayTickerAll"
    KLINE = "Kline"
    DEPTH_ORDER_BOOK = "DepthOrderBook"
    BOOK_TICKER = "BookTicker"


@dataclass(frozen=True)
class WebsocketEvent:
    """A decoded spot stream message."""

    kind: EventKind
    data: Any


_CANDIDATES: tuple[tuple[EventKind, Callable[[Any], Any]], ...] = (
    (EventKind.DAY_TICKER_ALL, _list_of(DayTickerEvent)),
    (EventKind.DAY_TICKER, DayTickerEvent.from_dict),
    (EventKind.BOOK_TICKER, BookTickerEvent.from_dict),
    (EventKind.ACCOUNT_UPDATE, AccountUpdateEvent.from_dict),
    (EventKind.ORDER_TRADE, OrderTradeEvent.from_dict),
    (EventKind.AGGR_TRADES, AggrTradesEvent.from_dict),
    (EventKind.TRADE, TradeEvent.from_dict),
    (EventKind.KLINE, KlineEvent.from_dict),
    (EventKind.ORDER_BOOK, OrderBook.from_dict),
    (EventKind.DEPTH_ORDER_BOOK, DepthOrderBookEvent.from_dict),
)


def parse_event(value: Any) -> WebsocketEvent | None:
    """Decode a JSON value into the first event shape it fits, or ``None``."""
    match = _first_match(value, _CANDIDATES)
    if match is None:
        return None
    kind, data = match
    return WebsocketEvent(kind, data)


class _StreamClient:
    """Connection handling and message dispatch shared by the stream clients."""

    def __init__(self, handler: Callable[[Any], Any], parser: Callable[[Any], Any]) -> None:
        self.socket: Any = None
        self._handler = handler
        self._parser = parser

    def _connect_wss(self, url: str) -> None:
        try:
            self.socket = websocket.create_connection(url)
        except (websocket.WebSocketException, OSError, ValueError) as exc:
            raise BinanceError(f"Error during handshake {exc}") from exc

    def _close(self) -> None:
        if self.socket is None:
            raise BinanceError("Not able to close the connection")
        socket, self.socket = self.socket, None
        try:
            socket.close()
        except (websocket.WebSocketException, OSError) as exc:
            raise BinanceError(str(exc)) from exc

    def _decode(self, msg: str | bytes) -> None:
        try:
            value = json.loads(msg)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise BinanceError(str(exc)) from exc
        self._dispatch(value)

    def _dispatch(self, value: Any) -> None:
        if isinstance(value, dict) and "data" in value:
            self._dispatch(value["data"])
            return
        event = self._parser(value)
        if event is not None:
            self._handler(event)

    def _read_loop(self, running: threading.Event) -> None:
        while running.is_set():
            if self.socket is None:
                continue
            try:
                opcode, data = self.socket.recv_data()
            except (websocket.WebSocketException, OSError) as exc:
                raise BinanceError(str(exc)) from exc
            if opcode == websocket.ABNF.OPCODE_TEXT:
                try:
                    text = data.decode("utf-8") if isinstance(data, bytes) else data
                    self._decode(text)
                except Exception as exc:
                    raise BinanceError(f"Error on handling stream message: {exc}") from exc
            elif opcode == websocket.ABNF.OPCODE_CLOSE:
                raise BinanceError(f"Disconnected {data!r}")


class WebSockets(_StreamClient):
    """Client for the spot streams, calling ``handler`` with each decoded event."""

    def __init__(self, handler: Callable[[WebsocketEvent], Any]) -> None:
        super().__init__(handler, parse_event)

    def connect(self, subscription: str) -> None:
        """Open a single stream on the default host."""
        self._connect_wss(stream_url(subscription))

    def connect_with_endpoint(self, subscription: str, endpoint: str) -> None:
        """Open a single stream below a custom endpoint."""
        self._connect_wss(stream_url(subscription, endpoint))

    def connect_multiple_streams(self, endpoints: Iterable[str]) -> None:
        """Open a combined stream on the default host."""
        self._connect_wss(multi_stream_url(endpoints))

    def disconnect(self) -> None:
        """Close the open connection."""
        self._close()

    def handle_msg(self, msg: str | bytes) -> None:
        """Decode one text message and pass any recognised event to the handler."""
        self._decode(msg)

    def event_loop(self, running: threading.Event) -> None:
        """Read and dispatch messages while ``running`` is set."""
        self._read_loop(running)