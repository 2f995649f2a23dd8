"""Console reporting for probe runs. Results go to stdout as they happen."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from orderprobe.models import ProbeSummary, TradingPair, TrialResult


def _flag(value: bool) -> str:
    return "true" if value else "false"


class Reporter:
    def __init__(self, console: Console | None = None):
        self.console = console or Console(soft_wrap=True, highlight=False)

    def symbols(self, pairs: Sequence[TradingPair]) -> None:
        self.console.print(f"Retrieved {len(pairs)} symbols:")
        for p in pairs:
            self.console.print(
                f"Symbol: {escape(p.symbol)}, Base: {escape(p.base_asset)}, "
                f"Quote: {escape(p.quote_asset)}, Active: {_flag(p.is_active)}, "
                f"MakerFee: {p.maker_fee:g}, TakerFee: {p.taker_fee:g}"
            )

    def symbols_table(self, pairs: Sequence[TradingPair], title: str = "Trading Pairs") -> None:
        if not pairs:
            self.console.print("[dim]No symbols retrieved.[/dim]")
            return
        table = Table(title=title)
        table.add_column("Symbol", style="cyan")
        table.add_column("Base")
        table.add_column("Quote")
        table.add_column("Active")
        table.add_column("Maker Fee", justify="right")
        table.add_column("Taker Fee", justify="right")
        for p in pairs:
            table.add_row(
                escape(p.symbol), escape(p.base_asset), escape(p.quote_asset),
                _flag(p.is_active), f"{p.maker_fee:g}", f"{p.taker_fee:g}",
            )
        self.console.print(table)

    def selected(self, symbol: str, fallback: bool) -> None:
        note = " (fallback)" if fallback else ""
        self.console.print(f"\nSelected symbol: [cyan]{escape(symbol)}[/cyan]{note}")

    def trial_started(self, trial: int, payload: str) -> None:
        self.console.print(f"\nRunning trial {trial}...")
        self.console.print(f"Sending order: {escape(payload)}")

    def trial_finished(self, result: TrialResult) -> None:
        if result.ok:
            self.console.print(f"Order created successfully. Response: {escape(result.response_body)}")
            self.console.print(f"Trial {result.trial}: {result.latency_us} microseconds")
        else:
            self.console.print(f"Trial {result.trial}: [red]Failed[/red]")

    def summary(self, summary: ProbeSummary) -> None:
        avg = summary.average_latency_us
        if avg is None:
            self.console.print("\n[bold red]No successful trials completed.[/bold red]")
            return
        self.console.print(
            f"\n[bold]Average latency:[/bold] {avg:.1f} microseconds "
            f"({summary.successful}/{summary.trials} trials succeeded)"
        )
