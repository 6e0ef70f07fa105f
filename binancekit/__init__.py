"""Models, request builders and spot stream handling for the Binance spot and futures APIs."""

__version__ = "0.1.0"
__all__ = [
    "schema",
    "util",
    "model",
    "events",
    "futures_model",
    "market",
    "savings",
    "futures_orders",
    "websockets",
]