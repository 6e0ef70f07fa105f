"""Signed queries for the wallet (coins, asset details, deposit addresses)."""

from __future__ import annotations

from binancekit.util import build_signed_request


def all_coins_query(recv_window: int = 0) -> str:
    """Signed query listing all coins available for deposit and withdrawal."""
    return build_signed_request({}, recv_window)


def asset_detail_query(asset: str | None = None, recv_window: int = 0) -> str:
    """Signed query for supported asset details, optionally for one asset."""
    params = {} if asset is None else {"asset": asset}
    return build_signed_request(params, recv_window)


def deposit_address_query(coin: str, network: str | None = None, recv_window: int = 0) -> str:
    """Signed query for a deposit address; the default network is used without ``network``."""
    params = {"coin": str(coin)}
    if network is not None:
        params["network"] = network
    return build_signed_request(params, recv_window)