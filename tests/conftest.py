"""Shared pytest fixtures for poolbet tests."""

from __future__ import annotations

import pytest

from poolbet.betting import MultipleChoiceBet, Result, ResultSet
from poolbet.utils.logging import configure_logging


@pytest.fixture
def abc():
    """Three distinct atomic results A, B, C."""
    return Result("A"), Result("B"), Result("C")


@pytest.fixture
def three_way_bet(abc):
    """A multiple-choice bet over A, B, C (six possible result sets)."""
    return MultipleChoiceBet(abc)


@pytest.fixture
def rs(abc):
    """Build result sets by letter: ``rs("AB")`` -> ResultSet({A, B})."""
    by_letter = {r.description: r for r in abc}

    def build(letters: str) -> ResultSet:
        return ResultSet(by_letter[letter] for letter in letters)

    return build


@pytest.fixture
def reset_logging():
    """Restore the default logging configuration after the test."""
    yield
    configure_logging()
