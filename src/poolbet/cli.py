"""poolbet command line: odds tables, settlement and the football demo.

Usage::

    poolbet odds -r Home -r Away -r Draw -w Home=3 -w Draw=1
    poolbet odds -r A -r B -r C -w A=3 -w A+B=1 -w C=1 --multi
    poolbet settle -r Home -r Away -r Draw -w Home=3 -w Draw=1 --actual Home
    poolbet pools -r A -r B -r C -w A=3 -w B+C=1
    poolbet football
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

import typer
from rich.console import Console
from rich.table import Table

from poolbet.betting import Bet, MultipleChoiceBet, Result, ResultSet, SingleChoiceBet
from poolbet.config import settings
from poolbet.constants import FOOTBALL_RESULTS, RESULT_SEPARATOR
from poolbet.exceptions import BettingError
from poolbet.utils.logging import configure_logging

app = typer.Typer(name="poolbet", help="Parimutuel pool betting engine")
console = Console()

OUTCOME_STYLES = {"win": "green", "loss": "red", "canceled": "yellow"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Parimutuel odds calculation and wager settlement."""
    if verbose:
        configure_logging("DEBUG")


# ── Helpers ───────────────────────────────────────────────────────────


def _fmt(value: Decimal) -> str:
    return f"{value:.{settings.display_places}f}"


def _money(value: Decimal) -> str:
    return f"{settings.currency_symbol}{_fmt(value)}"


@contextmanager
def _engine_errors() -> Iterator[None]:
    """Turn engine validation errors into a red message and exit code 1."""
    try:
        yield
    except BettingError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc


def _parse_wager(text: str) -> tuple[list[str], str]:
    """Split ``"Home+Draw=2.5"`` into (["Home", "Draw"], "2.5")."""
    expected, sep, stake = text.rpartition("=")
    if not sep or not expected.strip() or not stake.strip():
        raise typer.BadParameter(f"Expected EXPECTED=STAKE, got {text!r}", param_hint="--wager")
    names = [name.strip() for name in expected.split(RESULT_SEPARATOR)]
    return names, stake.strip()


def _lookup(names: list[str], by_name: dict[str, Result], multi: bool, param_hint: str):
    unknown = [name for name in names if name not in by_name]
    if unknown:
        raise typer.BadParameter(f"Unknown result(s): {', '.join(unknown)}", param_hint=param_hint)
    if multi:
        return ResultSet(by_name[name] for name in names)
    if len(names) != 1:
        raise typer.BadParameter(
            "Single-choice bets take exactly one result; use --multi for sets",
            param_hint=param_hint,
        )
    return by_name[names[0]]


def _build_bet(
    results: list[str], wagers: list[str], multi: bool
) -> tuple[Bet, dict[str, Result]]:
    if len(set(results)) != len(results):
        raise typer.BadParameter("Result names must be unique", param_hint="--result")

    by_name = {name: Result(name) for name in results}
    bet: Bet = MultipleChoiceBet(by_name.values()) if multi else SingleChoiceBet(by_name.values())
    for text in wagers:
        names, stake = _parse_wager(text)
        bet.add_expected_results(_lookup(names, by_name, multi, "--wager"), stake)
    return bet, by_name


# ── Commands ──────────────────────────────────────────────────────────


@app.command("odds")
def odds_cmd(
    results: list[str] = typer.Option(..., "--result", "-r", help="Atomic result name (repeat)"),
    wagers: list[str] = typer.Option(
        None, "--wager", "-w", help="EXPECTED=STAKE, results joined with + in --multi mode (repeat)"
    ),
    multi: bool = typer.Option(False, "--multi", help="Multiple-choice bet over result sets"),
) -> None:
    """Show the current odds for every winning (expected, actual) pair."""
    from poolbet.betting.report import odds_frame

    with _engine_errors():
        bet, _ = _build_bet(results, wagers or [], multi)
        frame = odds_frame(bet)

    table = Table(title="Odds")
    table.add_column("Expected", style="cyan")
    table.add_column("Actual")
    table.add_column("Odds", justify="right")
    table.add_column(f"Pays per {_money(Decimal(1))}", justify="right")
    for row in frame.itertuples(index=False):
        table.add_row(row.expected, row.actual, _fmt(row.odds), _money(row.odds + 1))
    console.print(table)


@app.command("settle")
def settle_cmd(
    results: list[str] = typer.Option(..., "--result", "-r", help="Atomic result name (repeat)"),
    wagers: list[str] = typer.Option(
        None, "--wager", "-w", help="EXPECTED=STAKE, results joined with + in --multi mode (repeat)"
    ),
    actual: str = typer.Option(..., "--actual", "-a", help="Actual result ('+'-joined with --multi)"),
    multi: bool = typer.Option(False, "--multi", help="Multiple-choice bet over result sets"),
) -> None:
    """Settle every wager against the actual result."""
    from poolbet.betting.report import settlement_frame

    with _engine_errors():
        bet, by_name = _build_bet(results, wagers or [], multi)
        actual_results = _lookup(
            [name.strip() for name in actual.split(RESULT_SEPARATOR)], by_name, multi, "--actual"
        )
        frame = settlement_frame(bet, actual_results)

    table = Table(title=f"Settlement (actual: {actual})")
    table.add_column("Expected", style="cyan")
    table.add_column("Stake", justify="right")
    table.add_column("Outcome")
    table.add_column("Winnings", justify="right")
    table.add_column("Payout", justify="right")
    for row in frame.itertuples(index=False):
        style = OUTCOME_STYLES[row.outcome]
        table.add_row(
            row.expected,
            _money(row.stake),
            f"[{style}]{row.outcome}[/{style}]",
            _money(row.winnings) if row.outcome == "win" else "-",
            _money(row.payout),
        )
    console.print(table)

    if not frame.empty:
        staked = sum(frame["stake"], Decimal(0))
        paid = sum(frame["payout"], Decimal(0))
        console.print(f"Total staked: {_money(staked)}  Total paid out: {_money(paid)}")


@app.command("pools")
def pools_cmd(
    results: list[str] = typer.Option(..., "--result", "-r", help="Atomic result name (repeat)"),
    wagers: list[str] = typer.Option(
        None, "--wager", "-w", help="EXPECTED=STAKE, results joined with + in --multi mode (repeat)"
    ),
) -> None:
    """Show the stake aggregates of every per-actual-result pool (multi-choice)."""
    from poolbet.betting.report import pool_frame

    with _engine_errors():
        bet, _ = _build_bet(results, wagers or [], multi=True)
        frame = pool_frame(bet)

    table = Table(title="Pools")
    table.add_column("Actual", style="cyan")
    table.add_column("Wagers", justify="right")
    table.add_column("Winner stake", justify="right")
    table.add_column("Loser stake", justify="right")
    table.add_column("Leftover", justify="right")
    table.add_column("Canceled")
    for row in frame.itertuples(index=False):
        table.add_row(
            row.actual,
            str(row.wagers),
            _money(row.winner_stake),
            _money(row.loser_stake),
            _money(row.leftover_loser_stake),
            "yes" if row.canceled else "no",
        )
    console.print(table)


# ── Interactive demo ──────────────────────────────────────────────────


def _print_single_odds(bet: SingleChoiceBet) -> None:
    # Same columns as the odds command: net odds, then the total returned per unit
    table = Table(title="Odds")
    table.add_column("#", justify="right")
    table.add_column("Result", style="cyan")
    table.add_column("Odds", justify="right")
    table.add_column(f"Pays per {_money(Decimal(1))}", justify="right")
    for index, result in enumerate(bet.possible_results, start=1):
        odds = bet.get_odds(result, result)
        table.add_row(str(index), str(result), _fmt(odds), _money(odds + 1))
    console.print(table)


@app.command("football")
def football() -> None:
    """Interactive football bet: pick a result, stake on it, repeat."""
    outcomes = [Result(description) for description in FOOTBALL_RESULTS]
    bet = SingleChoiceBet(outcomes)
    console.print("Bet has been created.\n")

    while True:
        _print_single_odds(bet)

        choice = typer.prompt(
            "Select a result to place a bet (blank to finish)", default="", show_default=False
        )
        if not choice.strip():
            break
        try:
            index = int(choice)
        except ValueError:
            console.print(f"[yellow]Unknown format of input. Use 1 to {len(outcomes)}.[/yellow]")
            continue
        if not 1 <= index <= len(outcomes):
            console.print(f"[yellow]Unknown index. Use 1 to {len(outcomes)}.[/yellow]")
            continue

        stake = typer.prompt("Specify stake value")
        try:
            bet.add_expected_results(outcomes[index - 1], stake)
        except BettingError as exc:
            console.print(f"[red]{exc}[/red]")
            continue
        console.print("Wager has been created.\n")

    console.print(f"[green]{len(bet.wagers)} wager(s) placed.[/green]")


if __name__ == "__main__":
    app()
