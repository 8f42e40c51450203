"""Tests for the weekly challenge calendar and its rules."""
import pytest

from sleeperboard.schemas.matchup import EnrichedMatchup, ResolvedPlayer
from sleeperboard.services.challenges import (
    CHALLENGES,
    UNKNOWN_CHALLENGE,
    evaluate_challenge,
    get_challenge,
    matchup_results,
)


def team(roster_id, matchup_id, points, starters=(), team_name=None, display_name=None):
    """Enriched matchup whose starters are (actual, proj) pairs."""
    return EnrichedMatchup(
        matchup_id=matchup_id,
        roster_id=roster_id,
        team_name=team_name or f"Team {roster_id}",
        display_name=display_name or f"manager{roster_id}",
        points=points,
        starters=[
            ResolvedPlayer(id=f"{roster_id}-{i}", name=f"Player {roster_id}-{i}", actual=actual, proj=proj)
            for i, (actual, proj) in enumerate(starters)
        ],
    )


@pytest.fixture
def week():
    return [
        team(1, 1, 100.0, [(30.0, 40.0), (2.5, 50.0)]),
        team(2, 1, 90.0, [(22.0, 45.0), (20.5, 50.0)]),
        team(3, 2, 120.0, [(31.5, None), (1.0, None)]),
        team(4, 2, 95.0, [(21.0, 60.0), (33.0, 30.0)]),
    ]


class TestCalendar:
    def test_thirteen_regular_season_weeks(self):
        assert sorted(CHALLENGES) == list(range(1, 14))

    def test_unknown_week(self, week):
        result = evaluate_challenge(14, week)
        assert result.challenge == UNKNOWN_CHALLENGE.name == "Unknown Challenge"
        assert result.winner is None
        assert get_challenge(0) is UNKNOWN_CHALLENGE

    @pytest.mark.parametrize("week_number", [2, 3, 7, 10, 12])
    def test_weeks_without_a_rule_report_no_winner(self, week, week_number):
        result = evaluate_challenge(week_number, week)
        assert result.challenge == CHALLENGES[week_number].name
        assert result.description
        assert result.winner is None


class TestMatchupResults:
    def test_ties_and_byes_are_dropped(self):
        results = matchup_results([
            team(1, 1, 80.0),
            team(2, 1, 80.0),
            team(3, None, 150.0),
            team(4, 3, 70.0),
        ])
        assert results == []

    def test_unscored_teams_are_ignored(self):
        results = matchup_results([team(1, 1, None), team(2, 1, 50.0)])
        assert results == []


class TestRules:
    def test_week_1_highest_total(self, week):
        result = evaluate_challenge(1, week)
        assert result.challenge == "Hot Start"
        assert result.winner.roster_id == 3
        assert result.winner.points == 120.0

    def test_highest_total_tie_goes_to_first(self):
        result = evaluate_challenge(1, [team(1, 1, 100.0), team(2, 1, 100.0)])
        assert result.winner.roster_id == 1

    def test_no_matchups_means_no_winner(self):
        assert evaluate_challenge(1, []).winner is None

    def test_winner_name_falls_back_to_manager(self):
        result = evaluate_challenge(1, [team(7, 1, 99.0, team_name="—", display_name="bob")])
        assert result.winner.name == "bob"
        assert result.winner.team == "—"
        assert result.winner.manager == "bob"

    def test_week_4_closest_to_21_without_going_over(self, week):
        winner = evaluate_challenge(4, week).winner
        assert winner.roster_id == 4
        assert winner.points == 21.0

    def test_week_4_everyone_busts(self):
        assert evaluate_challenge(4, [team(1, 1, 50.0, [(25.0, None)])]).winner is None

    def test_week_5_most_points_in_a_loss(self, week):
        winner = evaluate_challenge(5, week).winner
        assert winner.roster_id == 4
        assert winner.points == 95.0

    def test_week_6_biggest_margin(self, week):
        winner = evaluate_challenge(6, week).winner
        assert winner.roster_id == 3
        assert winner.detail == "won by 25.00"

    def test_week_13_smallest_margin(self, week):
        winner = evaluate_challenge(13, week).winner
        assert winner.roster_id == 1
        assert winner.detail == "won by 10.00"

    def test_week_8_closest_to_projection(self, week):
        # roster 1: 100 vs 90, roster 2: 90 vs 95, roster 4: 95 vs 90; roster 3 has no projections
        winner = evaluate_challenge(8, week).winner
        assert winner.roster_id == 2
        assert winner.detail == "projected 95.00"

    def test_week_9_lowest_starter_in_a_win(self, week):
        winner = evaluate_challenge(9, week).winner
        assert winner.roster_id == 3
        assert "scored 1" in winner.detail

    def test_week_11_closest_to_30(self, week):
        winner = evaluate_challenge(11, week).winner
        assert winner.roster_id == 1
        assert winner.points == 30.0
