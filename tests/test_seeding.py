"""
Tests for the seed arrangement passes.
"""

from server.models import Participant, ParticipantStats
from server.seeding import balance_skill_levels, is_permutation, separate_teams, win_rate
from tests.helpers import make_participant


# -----------------------------------------------------------------------------
# win_rate
# -----------------------------------------------------------------------------

class TestWinRate:
    def test_missing_stats_is_average(self):
        assert win_rate(make_participant("A")) == 50.0

    def test_missing_win_rate_is_average(self):
        p = Participant(id="A", name="A", stats=ParticipantStats(wins=3, losses=1))
        assert win_rate(p) == 50.0

    def test_zero_is_kept(self):
        assert win_rate(make_participant("A", win_rate=0)) == 0.0


# -----------------------------------------------------------------------------
# separate_teams
# -----------------------------------------------------------------------------

class TestSeparateTeams:
    def test_first_two_not_same_team(self, mixed_field):
        order = separate_teams(mixed_field)
        teams = {p.id: p.teamId for p in mixed_field}
        assert not (teams[order[0]] == "t1" and teams[order[1]] == "t1")
        assert order == ["A", "C", "B", "D"]

    def test_teamless_keep_relative_order(self):
        field = [
            make_participant("X"),
            make_participant("A", team="t1"),
            make_participant("Y"),
            make_participant("B", team="t1"),
        ]
        assert separate_teams(field) == ["A", "X", "Y", "B"]

    def test_no_teams_is_identity(self):
        field = [make_participant(pid) for pid in "PQRS"]
        assert separate_teams(field) == list("PQRS")

    def test_input_not_mutated(self, mixed_field):
        before = [p.id for p in mixed_field]
        separate_teams(mixed_field)
        assert [p.id for p in mixed_field] == before


# -----------------------------------------------------------------------------
# balance_skill_levels
# -----------------------------------------------------------------------------

class TestBalanceSkillLevels:
    def test_snake_draft_odd_count(self):
        rates = [90, 80, 70, 60, 50]
        field = [make_participant(str(r), win_rate=r) for r in rates]
        assert balance_skill_levels(field) == ["90", "50", "80", "60", "70"]

    def test_snake_draft_even_count(self):
        field = [make_participant(str(r), win_rate=r) for r in (40, 90, 70, 10)]
        assert balance_skill_levels(field) == ["90", "10", "70", "40"]

    def test_unrated_sorts_as_average(self):
        field = [
            make_participant("strong", win_rate=80),
            make_participant("unknown"),
            make_participant("weak", win_rate=20),
        ]
        assert balance_skill_levels(field) == ["strong", "weak", "unknown"]

    def test_empty(self):
        assert balance_skill_levels([]) == []


def test_is_permutation():
    field = [make_participant(pid) for pid in "ABC"]
    assert is_permutation(["C", "A", "B"], field)
    assert not is_permutation(["A", "B"], field)
    assert not is_permutation(["A", "A", "B"], field)
    assert not is_permutation(["A", "B", "Z"], field)
