"""
Unit tests for competition standings ordering.
"""

from footix_manager.core.standings import rank_standings, group_standings
from footix_manager.models.competition_model import StandingRow


def row(club_id, points=0, **kwargs):
    return StandingRow(club_id=club_id, points=points, **kwargs)


def ids(rows):
    return [r.club_id for r in rows]


class TestRankStandings:
    """Tests for points-first ordering and tie-breaks."""

    def test_goal_difference_breaks_tie(self):
        a = row(1, points=10, goals_for=5, goals_against=2)  # gd 3
        b = row(2, points=10, goals_for=3, goals_against=1)  # gd 2

        assert ids(rank_standings([b, a], ["goal_difference"])) == [1, 2]

    def test_points_beat_any_tie_break(self):
        leader = row(1, points=12, goals_for=1, goals_against=9)
        second = row(2, points=10, goals_for=20, goals_against=0)

        ranked = rank_standings([second, leader], ["goal_difference", "goals_for"])
        assert ids(ranked) == [1, 2]

    def test_goals_against_lower_is_better(self):
        leaky = row(1, points=7, goals_against=3)
        solid = row(2, points=7, goals_against=1)

        assert ids(rank_standings([leaky, solid], ["goals_against"])) == [2, 1]

    def test_losses_lower_is_better(self):
        a = row(1, points=7, losses=4)
        b = row(2, points=7, losses=2)

        assert ids(rank_standings([a, b], ["losses"])) == [2, 1]

    def test_wins_and_draws_higher_is_better(self):
        a = row(1, points=9, wins=2, draws=3)
        b = row(2, points=9, wins=3, draws=0)

        assert ids(rank_standings([a, b], ["wins"])) == [2, 1]
        assert ids(rank_standings([a, b], ["draws"])) == [1, 2]

    def test_first_discriminating_criterion_decides(self):
        a = row(1, points=5, goals_for=4, goals_against=2, wins=1)  # gd 2
        b = row(2, points=5, goals_for=6, goals_against=4, wins=2)  # gd 2

        # gd ties, goals_for decides before wins is looked at
        assert ids(rank_standings([a, b], ["goal_difference", "goals_for", "wins"])) == [2, 1]

    def test_head_to_head_falls_through(self):
        a = row(1, points=4, goals_for=2)
        b = row(2, points=4, goals_for=6)

        assert ids(rank_standings([a, b], ["head_to_head", "goals_for"])) == [2, 1]
        assert ids(rank_standings([a, b], ["head_to_head"])) == [1, 2]

    def test_unknown_criteria_are_ignored(self):
        a = row(1, points=4, goals_for=2)
        b = row(2, points=4, goals_for=6)

        assert ids(rank_standings([a, b], ["fair_play", "goals_for"])) == [2, 1]

    def test_full_ties_keep_input_order(self):
        rows = [row(i, points=3, goals_for=1, goals_against=1) for i in (4, 2, 9, 1)]

        assert ids(rank_standings(rows, ["goal_difference", "goals_for"])) == [4, 2, 9, 1]

    def test_empty_input(self):
        assert rank_standings([], ["goal_difference"]) == []

    def test_input_is_not_modified(self):
        rows = [row(1, points=1), row(2, points=5), row(3, points=3)]
        before = list(rows)

        ranked = rank_standings(rows, [])

        assert rows == before
        assert ids(ranked) == [2, 3, 1]

    def test_output_is_permutation_of_input(self):
        rows = [row(i, points=i % 3, goals_for=i, goals_against=7 - i) for i in range(7)]

        ranked = rank_standings(rows, ["goal_difference"])

        assert len(ranked) == len(rows)
        assert sorted(ids(ranked)) == sorted(ids(rows))
        points = [r.points for r in ranked]
        assert points == sorted(points, reverse=True)

    def test_same_input_same_output(self):
        rows = [row(1, points=3, goals_for=2), row(2, points=3, goals_for=2), row(3, points=6)]

        assert rank_standings(rows, ["goals_for"]) == rank_standings(rows, ["goals_for"])


class TestGroupStandings:
    """Tests for per-group ranking."""

    def test_each_group_ranked_separately(self):
        rows = [
            row(1, points=3, group="B"),
            row(2, points=9, group="A"),
            row(3, points=6, group="B"),
            row(4, points=1, group="A"),
        ]

        grouped = group_standings(rows, ["goal_difference"])

        assert list(grouped.keys()) == ["B", "A"]
        assert ids(grouped["B"]) == [3, 1]
        assert ids(grouped["A"]) == [2, 4]

    def test_rows_without_group(self):
        grouped = group_standings([row(1, points=1), row(2, points=2)], [])

        assert ids(grouped[""]) == [2, 1]


class TestStandingRow:
    def test_derived_columns(self):
        r = row(1, goals_for=7, goals_against=3, wins=2, draws=1, losses=4)

        assert r.goal_difference == 4
        assert r.matches_played == 7
        assert r.model_dump()["goal_difference"] == 4
