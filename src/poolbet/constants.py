"""Engine constants: odds sentinels and demo market descriptions."""

from decimal import Decimal

# Odds returned when the queried actual result has no winner stake at all
NO_WINNERS_ODDS = Decimal(0)

# Odds returned when the queried expected result would itself lose.
# Not a multiplier: check it before computing a payout.
LOSER_ODDS_SENTINEL = Decimal(-1)

# Separator for multi-choice expected results on the command line ("Home+Draw")
RESULT_SEPARATOR = "+"

# Football 1X2 market used by the interactive demo
FOOTBALL_HOME_WINS = "Home Team Wins"
FOOTBALL_VISITOR_WINS = "Visitor Team Wins"
FOOTBALL_DRAW = "Draw"
FOOTBALL_RESULTS = [FOOTBALL_HOME_WINS, FOOTBALL_VISITOR_WINS, FOOTBALL_DRAW]
