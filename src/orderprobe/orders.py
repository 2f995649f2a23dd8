"""Order submission and round-trip timing."""

from __future__ import annotations

import json
import logging
import time
from typing import Callable

import httpx

from orderprobe.client import auth_headers
from orderprobe.models import TrialResult

logger = logging.getLogger(__name__)

ORDER_CREATED = 201


def build_order_payload(
    symbol: str,
    total_amount: float,
    order_type: str = "market",
    side: str = "BUY",
) -> str:
    return json.dumps(
        {"orderType": order_type, "side": side, "symbol": symbol, "totalAmount": float(total_amount)},
        separators=(",", ":"),
    )


def measure_order_latency(
    url: str,
    payload: str,
    token: str,
    client: httpx.Client | None = None,
    trial: int = 1,
    clock: Callable[[], int] = time.perf_counter_ns,
) -> TrialResult:
    """POST one order and time it.

    The window spans the whole blocking ``post`` call, body read included.
    Only HTTP 201 counts as success; anything else discards the duration.
    Not retried: each call places a live order.
    """
    if client is None:
        with httpx.Client() as c:
            return measure_order_latency(url, payload, token, c, trial, clock)

    headers = auth_headers(token, json_body=True)
    try:
        t0 = clock()
        r = client.post(url, content=payload, headers=headers)
        t1 = clock()
    except httpx.RequestError as e:
        logger.warning("Order request for trial %d failed: %s", trial, e)
        return TrialResult(trial=trial, error=str(e) or type(e).__name__)

    if r.status_code != ORDER_CREATED:
        logger.warning("Order failed with HTTP code %d. Response: %s", r.status_code, r.text)
        return TrialResult(trial=trial, status_code=r.status_code, response_body=r.text)

    return TrialResult(
        trial=trial,
        status_code=r.status_code,
        latency_us=(t1 - t0) // 1000,
        response_body=r.text,
    )
