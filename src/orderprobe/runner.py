"""Probe pipeline: fetch pairs, select one, place timed orders, summarize."""

from __future__ import annotations

import logging

import httpx

from orderprobe.client import build_client
from orderprobe.config import AppConfig
from orderprobe.models import ProbeSummary
from orderprobe.orders import build_order_payload, measure_order_latency
from orderprobe.report import Reporter
from orderprobe.symbols import fetch_symbols, select_pair

logger = logging.getLogger(__name__)


def run_probe(
    config: AppConfig,
    client: httpx.Client | None = None,
    reporter: Reporter | None = None,
) -> ProbeSummary:
    if client is None:
        with build_client(config.http) as c:
            return run_probe(config, c, reporter)

    reporter = reporter or Reporter()
    api, probe = config.api, config.probe
    if not api.token:
        logger.warning("No API token set (env %s); requests will be unauthenticated", api.token_env)

    pairs = fetch_symbols(
        api.symbols_url, api.token, client,
        retries=config.http.fetch_retries, backoff_s=config.http.retry_backoff_s,
    )
    reporter.symbols(pairs)

    pair = select_pair(pairs, probe.quote_asset)
    symbol = pair.symbol if pair else probe.fallback_symbol
    reporter.selected(symbol, fallback=pair is None)

    payload = build_order_payload(symbol, probe.total_amount, probe.order_type, probe.side)
    summary = ProbeSummary(symbol=symbol, trials=probe.trials)
    for i in range(1, probe.trials + 1):
        reporter.trial_started(i, payload)
        result = measure_order_latency(api.orders_url, payload, api.token, client, trial=i)
        summary.record(result)
        reporter.trial_finished(result)

    logger.info("Probe finished: symbol=%s succeeded=%d/%d", symbol, summary.successful, summary.trials)
    reporter.summary(summary)
    return summary
