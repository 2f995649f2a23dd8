"""Config loading tests."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from orderprobe.config import CONFIG_DIR, AppConfig, ProbeConfig, load_config


def test_defaults_match_baseline():
    c = AppConfig()
    assert c.api.symbols_url == "https://api.mazdax.ir/market/symbols"
    assert c.api.orders_url == "https://api.mazdax.ir/orders"
    assert c.probe.trials == 5
    assert c.probe.quote_asset == "IRR"
    assert c.probe.fallback_symbol == "AHRM1IRR"
    assert c.probe.total_amount == 60000.0
    assert c.http.fetch_retries == 0


def test_shipped_default_toml_loads():
    c = load_config(CONFIG_DIR, env={})
    assert c.probe.trials == 5
    assert c.api.token == ""


def test_token_from_env():
    c = load_config(CONFIG_DIR, env={"ORDERPROBE_API_TOKEN": "secret-token"})
    assert c.api.token == "secret-token"
    assert "secret-token" not in repr(c)


def test_custom_toml_and_env(tmp_path: Path):
    (tmp_path / "default.toml").write_text(
        '[api]\nbase_url = "https://x.test/"\ntoken_env = "MY_TOKEN"\n'
        '[probe]\ntrials = 2\nquote_asset = "USDT"\n'
        '[http]\ntimeout_s = 0\n'
    )
    c = load_config(tmp_path, env={"MY_TOKEN": "abc", "ORDERPROBE_API_TOKEN": "ignored"})
    assert c.api.token == "abc"
    assert c.api.orders_url == "https://x.test/orders"
    assert c.probe.trials == 2
    assert c.probe.quote_asset == "USDT"
    assert c.probe.fallback_symbol == "AHRM1IRR"
    assert c.http.timeout_s == 0


def test_base_url_env_override(tmp_path: Path):
    c = load_config(tmp_path, env={"ORDERPROBE_BASE_URL": "https://staging.test"})
    assert c.api.symbols_url == "https://staging.test/market/symbols"


def test_invalid_trials_rejected():
    with pytest.raises(ValidationError):
        ProbeConfig(trials=0)


@pytest.mark.parametrize("amount", [float("inf"), float("nan"), 0, -5])
def test_invalid_amount_rejected(amount):
    with pytest.raises(ValidationError):
        ProbeConfig(total_amount=amount)
