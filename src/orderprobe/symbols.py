"""Trading-pair listing: fetch from the market endpoint and pick a target pair."""

from __future__ import annotations

import logging
from typing import Iterable

import httpx

from orderprobe.client import auth_headers, retry
from orderprobe.models import PayloadError, TradingPair

logger = logging.getLogger(__name__)

DEFAULT_QUOTE_ASSET = "IRR"
DEFAULT_FALLBACK_SYMBOL = "AHRM1IRR"


def fetch_symbols(
    url: str,
    token: str,
    client: httpx.Client | None = None,
    retries: int = 0,
    backoff_s: float = 1.0,
) -> list[TradingPair]:
    """GET the symbols array. Any failure yields an empty list, never a partial one."""
    if client is None:
        with httpx.Client() as c:
            return fetch_symbols(url, token, c, retries, backoff_s)

    try:
        r = retry(client.get, url, headers=auth_headers(token), retries=retries, backoff_s=backoff_s)
    except httpx.RequestError as e:
        logger.warning("Symbols request to %s failed: %s", url, e)
        return []

    if r.status_code != 200:
        logger.warning("Failed to fetch symbols. HTTP code: %d. Response: %s", r.status_code, r.text)
        return []

    try:
        data = r.json()
        if not isinstance(data, list):
            raise PayloadError(f"expected array, got {type(data).__name__}")
        return [TradingPair.from_json(item) for item in data]
    except (ValueError, RecursionError) as e:
        logger.warning("Symbols response parsing error: %s", e)
        return []


def select_pair(
    pairs: Iterable[TradingPair], quote_asset: str = DEFAULT_QUOTE_ASSET
) -> TradingPair | None:
    for pair in pairs:
        if pair.is_active and pair.quote_asset == quote_asset:
            return pair
    return None


def select_symbol(
    pairs: Iterable[TradingPair],
    quote_asset: str = DEFAULT_QUOTE_ASSET,
    fallback: str = DEFAULT_FALLBACK_SYMBOL,
) -> str:
    """First active pair quoted in ``quote_asset``, in server order, else ``fallback``."""
    pair = select_pair(pairs, quote_asset)
    return pair.symbol if pair else fallback
