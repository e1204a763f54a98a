"""Parimutuel betting core: result sets, stake pools, bets and outcomes."""

from poolbet.betting.base import Bet
from poolbet.betting.multiple_choice import MultipleChoiceBet
from poolbet.betting.outcome import Outcome, OutcomeType
from poolbet.betting.pool import PoolSummary, StakePool, WagerPool
from poolbet.betting.results import Result, ResultSet
from poolbet.betting.single_choice import SingleChoiceBet
from poolbet.betting.wager import Settlement, Stake, Wager

__all__ = [
    "Bet",
    "MultipleChoiceBet",
    "SingleChoiceBet",
    "Result",
    "ResultSet",
    "Outcome",
    "OutcomeType",
    "Stake",
    "Wager",
    "Settlement",
    "PoolSummary",
    "StakePool",
    "WagerPool",
]
