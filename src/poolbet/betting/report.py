"""Tabular views of a bet: odds grid, settlements and pool aggregates.

All frames keep money and odds as ``Decimal`` objects (object dtype) so
nothing is rounded before the caller decides how to display it.
"""

from __future__ import annotations

from collections.abc import Hashable

import pandas as pd

from poolbet.betting.base import Bet
from poolbet.betting.multiple_choice import MultipleChoiceBet
from poolbet.betting.results import ResultSet, describe

ODDS_COLUMNS = ["expected", "actual", "odds"]
SETTLEMENT_COLUMNS = ["expected", "stake", "outcome", "winnings", "payout"]
POOL_COLUMNS = [
    "actual",
    "wagers",
    "winner_stake",
    "loser_stake",
    "leftover_loser_stake",
    "canceled",
]


def _label(result: Hashable) -> str:
    if isinstance(result, ResultSet):
        return result.label()
    return describe(result)


def odds_frame(bet: Bet) -> pd.DataFrame:
    """Odds for every (expected, actual) pair in which the expected result wins.

    Pairs where the expected result would lose are left out, so the ``-1``
    loser sentinel never appears in the ``odds`` column.
    """
    rows = [
        {
            "expected": _label(expected),
            "actual": _label(actual),
            "odds": bet.get_odds(expected, actual),
        }
        for actual in bet.possible_results
        for expected in bet.possible_results
        if bet.is_winner(expected, actual)
    ]
    return pd.DataFrame(rows, columns=ODDS_COLUMNS)


def settlement_frame(bet: Bet, actual_results: Hashable) -> pd.DataFrame:
    """One row per wager with its outcome for ``actual_results``."""
    rows = [
        {
            "expected": _label(s.wager.expected_results),
            "stake": s.wager.stake.value,
            "outcome": s.outcome.type.value,
            "winnings": s.outcome.winnings if s.outcome.is_win else None,
            "payout": s.payout,
        }
        for s in bet.settle(actual_results)
    ]
    return pd.DataFrame(rows, columns=SETTLEMENT_COLUMNS)


def pool_frame(bet: MultipleChoiceBet) -> pd.DataFrame:
    """Aggregates of each per-actual-result pool of a multiple-choice bet.

    Each row comes from one locked snapshot, so its totals are consistent
    even while wagers are being placed.
    """
    rows = []
    for actual in bet.possible_results:
        summary = bet.pool_for(actual)
        rows.append(
            {
                "actual": actual.label(),
                "wagers": summary.wager_count,
                "winner_stake": summary.winner_stake,
                "loser_stake": summary.loser_stake,
                "leftover_loser_stake": summary.leftover_loser_stake,
                "canceled": not summary.has_winners,
            }
        )
    return pd.DataFrame(rows, columns=POOL_COLUMNS)
