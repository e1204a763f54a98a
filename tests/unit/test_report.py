"""Tests for the pandas report frames."""

from decimal import Decimal

import pandas as pd
import pytest

from poolbet.betting import MultipleChoiceBet, Result, SingleChoiceBet
from poolbet.betting.report import (
    ODDS_COLUMNS,
    POOL_COLUMNS,
    SETTLEMENT_COLUMNS,
    odds_frame,
    pool_frame,
    settlement_frame,
)


@pytest.fixture
def football():
    home, away, draw = Result("Home"), Result("Away"), Result("Draw")
    bet = SingleChoiceBet([home, away, draw])
    bet.add_expected_results(home, 3)
    bet.add_expected_results(away, 1)
    bet.add_expected_results(draw, 1)
    return bet, home


class TestOddsFrame:

    def test_single_choice_rows(self, football):
        bet, _ = football
        frame = odds_frame(bet)
        assert list(frame.columns) == ODDS_COLUMNS
        assert len(frame) == 3
        assert (frame["expected"] == frame["actual"]).all()

    def test_multiple_choice_skips_losers(self, three_way_bet, rs):
        three_way_bet.add_expected_results(rs("A"), 3)
        three_way_bet.add_expected_results(rs("C"), 1)
        frame = odds_frame(three_way_bet)

        # singletons overlap three values, pairs overlap five
        assert len(frame) == 3 * 3 + 3 * 5
        assert all(odds >= 0 for odds in frame["odds"])

    def test_odds_are_decimals(self, football):
        bet, _ = football
        frame = odds_frame(bet)
        away = frame[frame["expected"] == "Away"].iloc[0]
        assert isinstance(away["odds"], Decimal)
        assert away["odds"] == Decimal(4)

    def test_empty_bet(self):
        frame = odds_frame(SingleChoiceBet(["only"]))
        assert frame.empty
        assert list(frame.columns) == ODDS_COLUMNS


class TestSettlementFrame:

    def test_rows(self, football):
        bet, home = football
        frame = settlement_frame(bet, home)

        assert list(frame.columns) == SETTLEMENT_COLUMNS
        assert list(frame["outcome"]) == ["win", "loss", "loss"]
        assert pd.isna(frame["winnings"].iloc[1])
        assert round(frame["payout"].iloc[0], 10) == Decimal(5)
        assert round(sum(frame["payout"], Decimal(0)), 10) == sum(frame["stake"], Decimal(0))

    def test_canceled(self, three_way_bet, rs):
        three_way_bet.add_expected_results(rs("C"), 2)
        frame = settlement_frame(three_way_bet, rs("A"))
        assert list(frame["outcome"]) == ["canceled"]
        assert frame["payout"].iloc[0] == Decimal(2)


class TestPoolFrame:

    def test_columns_and_rows(self, three_way_bet, rs):
        three_way_bet.add_expected_results(rs("A"), 3)
        three_way_bet.add_expected_results(rs("AB"), 1)
        frame = pool_frame(three_way_bet)

        assert list(frame.columns) == POOL_COLUMNS
        assert len(frame) == 6
        assert (frame["wagers"] == 2).all()

        row = frame.set_index("actual").loc["C"]
        assert row["canceled"]
        assert row["loser_stake"] == Decimal(4)

        row = frame.set_index("actual").loc["A"]
        assert not row["canceled"]
        assert row["winner_stake"] == Decimal(4)

    def test_two_results(self):
        frame = pool_frame(MultipleChoiceBet(["x", "y"]))
        assert set(frame["actual"]) == {"x", "y"}
        assert frame["canceled"].all()
