"""CLI entry point: orderprobe command."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from orderprobe.config import AppConfig, load_config
from orderprobe.log import setup_logging

app = typer.Typer(name="orderprobe", help="Exchange order-submission latency probe")
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _configure(config_dir: Optional[Path], log_level: str, **sections: dict[str, Any]) -> AppConfig:
    """Load TOML + env, apply flag overrides and validate the merged result."""
    raw = load_config(config_dir).model_dump()
    for name, overrides in sections.items():
        raw[name].update({k: v for k, v in overrides.items() if v is not None})
    try:
        config = AppConfig.model_validate(raw)
    except ValidationError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=2)
    setup_logging(log_level, secrets=[config.api.token])
    return config


@app.command()
def run(
    trials: Optional[int] = typer.Option(None, "--trials", "-n", min=1, help="Number of orders to time"),
    amount: Optional[float] = typer.Option(None, "--amount", "-a", help="Order notional in quote currency"),
    quote: Optional[str] = typer.Option(None, "--quote", "-q", help="Quote asset to select a pair by"),
    fallback_symbol: Optional[str] = typer.Option(None, "--fallback-symbol", help="Symbol used when no pair matches"),
    base_url: Optional[str] = typer.Option(None, "--base-url"),
    token: Optional[str] = typer.Option(None, "--token", help="Bearer token (default: from environment)"),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0, help="Per-request timeout in seconds, 0 for none"),
    retries: Optional[int] = typer.Option(None, "--retries", min=0, help="Extra attempts for the symbols request"),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir"),
    log_level: str = typer.Option("WARNING", "--log-level"),
):
    """Fetch pairs, pick one and time live market BUY orders against it."""
    from orderprobe.report import Reporter
    from orderprobe.runner import run_probe

    config = _configure(
        config_dir, log_level,
        api={"base_url": base_url, "token": token},
        http={"timeout_s": timeout, "fetch_retries": retries},
        probe={
            "trials": trials, "total_amount": amount,
            "quote_asset": quote, "fallback_symbol": fallback_symbol,
        },
    )

    console.print(
        f"[bold]Probe[/bold] {config.api.orders_url} trials=[green]{config.probe.trials}[/green] "
        f"amount=[green]{config.probe.total_amount:g}[/green]"
    )
    run_probe(config, reporter=Reporter(console))


@app.command()
def symbols(
    quote: Optional[str] = typer.Option(None, "--quote", "-q", help="Only show pairs quoted in this asset"),
    base_url: Optional[str] = typer.Option(None, "--base-url"),
    token: Optional[str] = typer.Option(None, "--token"),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0),
    retries: Optional[int] = typer.Option(None, "--retries", min=0),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir"),
    log_level: str = typer.Option("WARNING", "--log-level"),
):
    """List trading pairs without placing orders."""
    from orderprobe.client import build_client
    from orderprobe.report import Reporter
    from orderprobe.symbols import fetch_symbols

    config = _configure(
        config_dir, log_level,
        api={"base_url": base_url, "token": token},
        http={"timeout_s": timeout, "fetch_retries": retries},
    )
    with build_client(config.http) as client:
        pairs = fetch_symbols(
            config.api.symbols_url, config.api.token, client,
            retries=config.http.fetch_retries, backoff_s=config.http.retry_backoff_s,
        )
    if quote:
        pairs = [p for p in pairs if p.quote_asset == quote]
    title = f"Trading Pairs ({quote})" if quote else "Trading Pairs"
    Reporter(console).symbols_table(pairs, title=title)


if __name__ == "__main__":
    app()
