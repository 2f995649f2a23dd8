"""HTTP client factory, auth headers and transport retry."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, TypeVar

import httpx

from orderprobe.config import HttpConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_client(config: HttpConfig | None = None) -> httpx.Client:
    config = config or HttpConfig()
    timeout = config.timeout_s or None
    return httpx.Client(timeout=timeout)


def auth_headers(token: str, json_body: bool = False) -> dict[str, str]:
    headers = {"Authorization": f"Bearer {token}"}
    if json_body:
        headers["Content-Type"] = "application/json"
    return headers


def retry(
    fn: Callable[..., T],
    *args: Any,
    retries: int = 0,
    backoff_s: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> T:
    """Call ``fn``, retrying up to ``retries`` times on transport errors only.

    HTTP error statuses are returned to the caller untouched; only failures
    where no response arrived are retried, with exponential backoff.
    """
    attempt = 0
    while True:
        try:
            return fn(*args, **kwargs)
        except httpx.TransportError as e:
            if attempt >= retries:
                raise
            wait = backoff_s * 2 ** attempt
            attempt += 1
            logger.warning("Retry %d/%d after %.1fs: %s", attempt, retries, wait, e)
            sleep(wait)
