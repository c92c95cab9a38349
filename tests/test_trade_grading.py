"""Tests for retrospective trade grades."""

from datetime import date

import pytest

from tradedesk.core.trades.grading import age_factor, grade_from_diff, grade_trade_retrospective
from tradedesk.core.trades.proposal import CompletedTrade

from conftest import make_club, make_player


def _trade(players_to_a=(), players_to_b=()):
    return CompletedTrade(
        id="trade_graded",
        date=date(2024, 10, 10),
        club_a="a",
        club_b="b",
        players_to_a=tuple(players_to_a),
        players_to_b=tuple(players_to_b),
    )


@pytest.fixture
def graded_clubs():
    return {"a": make_club("a", "Adelaide"), "b": make_club("b", "Brisbane")}


class TestGradeFromDiff:

    @pytest.mark.parametrize("diff,grade", [
        (40, "A+"),
        (15, "A+"),
        (14.9, "A"),
        (8, "A"),
        (3, "B+"),
        (0, "B"),
        (-3, "B"),
        (-3.1, "C"),
        (-8, "C"),
        (-15, "D"),
        (-15.1, "F"),
    ])
    def test_thresholds(self, diff, grade):
        assert grade_from_diff(diff) == grade

    def test_age_factor(self):
        assert age_factor(22) == 1.3
        assert age_factor(25) == 1.0
        assert age_factor(30) == 1.0
        assert age_factor(31) == 0.7


class TestGradeTradeRetrospective:

    def test_lopsided_trade(self, graded_clubs):
        players = {
            "young": make_player("young", "a", age=22, overall=80),  # 104
            "old": make_player("old", "b", age=32, overall=70),      # 49
        }
        grade = grade_trade_retrospective(_trade(["young"], ["old"]), players, graded_clubs)

        assert grade.club_a_diff == pytest.approx(55)
        assert grade.club_b_diff == pytest.approx(-55)
        assert grade.club_a_grade == "A+"
        assert grade.club_b_grade == "F"
        assert grade.assessment == "Adelaide got the better end of this deal."

    def test_antisymmetric(self, graded_clubs):
        players = {
            "x": make_player("x", "a", age=27, overall=74),
            "y": make_player("y", "b", age=24, overall=60),
        }
        forward = grade_trade_retrospective(_trade(["x"], ["y"]), players, graded_clubs)
        backward = grade_trade_retrospective(_trade(["y"], ["x"]), players, graded_clubs)

        assert forward.club_a_diff == pytest.approx(-forward.club_b_diff)
        assert forward.club_a_diff == pytest.approx(backward.club_b_diff)
        assert forward.club_a_grade == backward.club_b_grade
        assert "Brisbane" in forward.assessment
        assert "Adelaide" in backward.assessment

    def test_balanced_trade(self, graded_clubs):
        players = {
            "x": make_player("x", "a", age=27, overall=70),
            "y": make_player("y", "b", age=28, overall=72),
        }
        grade = grade_trade_retrospective(_trade(["x"], ["y"]), players, graded_clubs)

        assert grade.club_a_grade == "B"
        assert grade.club_b_grade == "B"
        assert grade.assessment.startswith("A balanced trade")

    def test_missing_players_and_clubs(self):
        grade = grade_trade_retrospective(_trade(["gone"], []), {}, {})

        assert grade.club_a_diff == 0
        assert grade.club_a_name == "a"
        assert grade.club_b_name == "b"
