"""Tests for SingleChoiceBet."""

from decimal import Decimal

import pytest

from poolbet.betting import OutcomeType, Result, SingleChoiceBet
from poolbet.exceptions import (
    ForeignWagerError,
    NotPossibleError,
    NullArgumentError,
    OutOfRangeError,
)


def _close(actual: Decimal, expected) -> bool:
    return round(actual, 10) == round(Decimal(expected), 10)


class TestSingleChoiceBet:
    """Home / Away / Draw market."""

    def setup_method(self):
        self.home, self.away, self.draw = Result("Home"), Result("Away"), Result("Draw")
        self.bet = SingleChoiceBet([self.home, self.away, self.draw])

    def test_possible_results_are_the_atomic_results(self):
        assert self.bet.possible_results == (self.home, self.away, self.draw)

    def test_wager_expects_the_raw_result(self):
        wager = self.bet.add_expected_results(self.home, 3)
        assert wager.bet is self.bet
        assert wager.expected_results is self.home
        assert wager.stake.value == Decimal(3)
        assert self.bet.wagers == (wager,)

    def test_settlement(self):
        home = self.bet.add_expected_results(self.home, 3)
        away = self.bet.add_expected_results(self.away, 1)
        draw = self.bet.add_expected_results(self.draw, 1)

        assert _close(home.get_outcome(self.home).winnings, 2)
        assert away.get_outcome(self.home).type is OutcomeType.LOSS
        assert draw.get_outcome(self.home).type is OutcomeType.LOSS

    def test_odds(self):
        self.bet.add_expected_results(self.home, 3)
        self.bet.add_expected_results(self.away, 1)
        self.bet.add_expected_results(self.draw, 1)

        assert _close(self.bet.get_odds(self.home, self.home), Decimal(2) / 3)
        assert _close(self.bet.get_odds(self.away, self.away), 4)
        assert self.bet.get_odds(self.away, self.home) == Decimal(-1)

    def test_canceled_without_winners(self):
        wager = self.bet.add_expected_results(self.away, 5)
        assert wager.get_outcome(self.home).type is OutcomeType.CANCELED
        assert self.bet.get_odds(self.home, self.home) == 0

    def test_is_winner(self):
        assert self.bet.is_winner(self.home, self.home)
        assert not self.bet.is_winner(self.home, self.draw)

    def test_is_winner_rejects_unknown_results(self):
        with pytest.raises(NotPossibleError):
            self.bet.is_winner(Result("Home"), self.home)
        with pytest.raises(NullArgumentError):
            self.bet.is_winner(self.home, None)

    def test_settle(self):
        self.bet.add_expected_results(self.home, 3)
        self.bet.add_expected_results(self.draw, 1)
        payouts = [s.payout for s in self.bet.settle(self.draw)]
        assert payouts[0] == 0
        assert _close(payouts[1], 4)


class TestSingleChoiceValidation:

    def setup_method(self):
        self.home, self.away = Result("Home"), Result("Away")
        self.bet = SingleChoiceBet([self.home, self.away])

    def test_constructor_errors(self):
        with pytest.raises(NullArgumentError):
            SingleChoiceBet(None)
        with pytest.raises(OutOfRangeError):
            SingleChoiceBet([self.home, self.home])
        with pytest.raises(OutOfRangeError):
            SingleChoiceBet([])

    def test_none_result(self):
        with pytest.raises(NullArgumentError):
            self.bet.add_expected_results(None, 1)
        with pytest.raises(NullArgumentError):
            self.bet.get_odds(self.home, None)

    def test_unknown_result(self):
        with pytest.raises(NotPossibleError):
            self.bet.add_expected_results(Result("Home"), 1)

    def test_unhashable_result(self):
        with pytest.raises(NotPossibleError):
            self.bet.add_expected_results(["Home"], 1)

    def test_bad_stake_records_nothing(self):
        with pytest.raises(OutOfRangeError):
            self.bet.add_expected_results(self.home, 0)
        assert self.bet.wagers == ()

    def test_foreign_wager(self):
        other = SingleChoiceBet([self.home, self.away])
        wager = other.add_expected_results(self.home, 1)
        with pytest.raises(ForeignWagerError):
            self.bet.get_outcome(wager, self.home)

    def test_none_wager(self):
        with pytest.raises(NullArgumentError):
            self.bet.get_outcome(None, self.home)

    def test_single_result_accepts_no_wagers(self):
        bet = SingleChoiceBet([self.home])
        assert bet.possible_results == ()
        with pytest.raises(NotPossibleError):
            bet.add_expected_results(self.home, 1)


def test_plain_strings_as_results():
    bet = SingleChoiceBet(["1", "X", "2"])
    wager = bet.add_expected_results("X", 2)
    bet.add_expected_results("1", 1)
    assert _close(wager.get_outcome("X").winnings, 1)
