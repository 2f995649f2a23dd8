"""Smoke tests for data models."""

import pytest

from orderprobe.models import PayloadError, ProbeSummary, TradingPair, TrialResult


def test_trading_pair_from_json():
    p = TradingPair.from_json({
        "baseAsset": "BTC", "quoteAsset": "IRR", "symbol": "BTCIRR",
        "makerFee": 0, "takerFee": 0.0025, "isActive": True, "extra": [1, 2],
    })
    assert p == TradingPair("BTC", "IRR", "BTCIRR", 0.0, 0.0025, True)
    assert isinstance(p.maker_fee, float)


@pytest.mark.parametrize("item", [
    [], "BTCIRR", {"symbol": 5}, {"makerFee": "0.1"}, {"takerFee": True}, {"isActive": 1},
])
def test_trading_pair_rejects_wrong_types(item):
    with pytest.raises(PayloadError):
        TradingPair.from_json(item)


def test_trading_pair_is_frozen():
    p = TradingPair(symbol="A")
    with pytest.raises(AttributeError):
        p.symbol = "B"


def test_trial_result_ok():
    assert TrialResult(trial=1, status_code=201, latency_us=0).ok
    assert not TrialResult(trial=1, status_code=500).ok


def test_summary_ignores_failures():
    s = ProbeSummary(symbol="A", trials=3)
    s.record(TrialResult(trial=1, status_code=201, latency_us=100))
    s.record(TrialResult(trial=2, status_code=500))
    s.record(TrialResult(trial=3, status_code=201, latency_us=300))
    assert s.successful == 2
    assert s.failed == 1
    assert s.total_latency_us == 400
    assert s.average_latency_us == 200


def test_summary_no_successes():
    s = ProbeSummary(symbol="A", trials=1)
    s.record(TrialResult(trial=1, error="refused"))
    assert s.average_latency_us is None
