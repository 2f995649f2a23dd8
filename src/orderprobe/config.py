"""Load and validate TOML configuration files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import tomli
from pydantic import BaseModel, Field

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


class ApiConfig(BaseModel):
    base_url: str = "https://api.mazdax.ir"
    symbols_path: str = "/market/symbols"
    orders_path: str = "/orders"
    token_env: str = "ORDERPROBE_API_TOKEN"
    token: str = Field(default="", repr=False)

    @property
    def symbols_url(self) -> str:
        return self.base_url.rstrip("/") + self.symbols_path

    @property
    def orders_url(self) -> str:
        return self.base_url.rstrip("/") + self.orders_path


class ProbeConfig(BaseModel):
    trials: int = Field(default=5, ge=1)
    quote_asset: str = "IRR"
    fallback_symbol: str = "AHRM1IRR"
    total_amount: float = Field(default=60000.0, gt=0, allow_inf_nan=False)
    order_type: str = "market"
    side: str = "BUY"


class HttpConfig(BaseModel):
    # 0 disables the per-request timeout
    timeout_s: float = Field(default=30.0, ge=0, allow_inf_nan=False)
    fetch_retries: int = Field(default=0, ge=0)
    retry_backoff_s: float = Field(default=1.0, ge=0)


class AppConfig(BaseModel):
    api: ApiConfig = ApiConfig()
    probe: ProbeConfig = ProbeConfig()
    http: HttpConfig = HttpConfig()


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomli.load(f)


def load_config(config_dir: Path | None = None, env: Mapping[str, str] | None = None) -> AppConfig:
    d = config_dir or CONFIG_DIR
    env = os.environ if env is None else env
    raw: dict[str, Any] = {}

    default_path = d / "default.toml"
    if default_path.exists():
        data = _load_toml(default_path)
        raw["api"] = dict(data.get("api", {}))
        raw["probe"] = data.get("probe", {})
        raw["http"] = data.get("http", {})

    api = raw.setdefault("api", {})
    if env.get("ORDERPROBE_BASE_URL"):
        api["base_url"] = env["ORDERPROBE_BASE_URL"]
    token_env = api.get("token_env", ApiConfig().token_env)
    api["token"] = env.get(token_env, "")

    return AppConfig(**raw)
