"""Data models for the order latency probe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class PayloadError(ValueError):
    """Raised when a symbols response element has an unexpected shape."""


def _str_field(item: dict[str, Any], key: str) -> str:
    value = item.get(key, "")
    if not isinstance(value, str):
        raise PayloadError(f"{key}: expected string, got {type(value).__name__}")
    return value


def _float_field(item: dict[str, Any], key: str) -> float:
    value = item.get(key, 0.0)
    # bool is an int subclass; JSON true/false is not a fee
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"{key}: expected number, got {type(value).__name__}")
    return float(value)


def _bool_field(item: dict[str, Any], key: str) -> bool:
    value = item.get(key, False)
    if not isinstance(value, bool):
        raise PayloadError(f"{key}: expected boolean, got {type(value).__name__}")
    return value


# ── Market Models ──

@dataclass(frozen=True)
class TradingPair:
    base_asset: str = ""
    quote_asset: str = ""
    symbol: str = ""
    maker_fee: float = 0.0
    taker_fee: float = 0.0
    is_active: bool = False

    @classmethod
    def from_json(cls, item: Any) -> TradingPair:
        """Decode one element of the symbols array; absent fields take defaults."""
        if not isinstance(item, dict):
            raise PayloadError(f"expected object, got {type(item).__name__}")
        return cls(
            base_asset=_str_field(item, "baseAsset"),
            quote_asset=_str_field(item, "quoteAsset"),
            symbol=_str_field(item, "symbol"),
            maker_fee=_float_field(item, "makerFee"),
            taker_fee=_float_field(item, "takerFee"),
            is_active=_bool_field(item, "isActive"),
        )


# ── Probe Models ──

@dataclass
class TrialResult:
    trial: int
    status_code: int | None = None
    latency_us: int | None = None
    response_body: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.latency_us is not None


@dataclass
class ProbeSummary:
    symbol: str
    trials: int
    successful: int = 0
    total_latency_us: float = 0.0
    results: list[TrialResult] = field(default_factory=list)

    def record(self, result: TrialResult) -> None:
        self.results.append(result)
        if result.ok:
            self.total_latency_us += result.latency_us
            self.successful += 1

    @property
    def failed(self) -> int:
        return len(self.results) - self.successful

    @property
    def average_latency_us(self) -> float | None:
        if not self.successful:
            return None
        return self.total_latency_us / self.successful
