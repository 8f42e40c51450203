"""Tests for roster/owner resolution and standings."""
from sleeperboard.services.owners import build_standings, resolve_owners

from league_data import ROSTERS, USERS


class TestResolveOwners:
    def test_joins_roster_owner_to_user(self):
        owners = resolve_owners(USERS, ROSTERS)
        assert owners[1].team_name == "Gridiron Gang"
        assert owners[1].display_name == "alice"
        assert owners[1].owner_id == "u1"

    def test_missing_team_name_uses_placeholder(self):
        owners = resolve_owners(USERS, ROSTERS)
        assert owners[2].team_name == "—"
        assert owners[2].display_name == "bob"

    def test_unmatched_owner_uses_placeholders(self):
        owners = resolve_owners(USERS, ROSTERS)
        assert owners[4].team_name == "—"
        assert owners[4].display_name == "Unknown"
        assert owners[4].owner_id is None

    def test_roster_without_owner_id(self):
        owners = resolve_owners(USERS, [{"roster_id": 7, "owner_id": None}])
        assert owners[7].display_name == "Unknown"

    def test_every_roster_resolves(self):
        owners = resolve_owners([], ROSTERS)
        assert set(owners) == {1, 2, 3, 4}

    def test_empty_inputs(self):
        assert resolve_owners(None, None) == {}


class TestStandings:
    def test_sorted_by_wins_then_points(self):
        standings = build_standings(USERS, ROSTERS)
        for a, b in zip(standings, standings[1:]):
            assert a.wins >= b.wins
            if a.wins == b.wins:
                assert a.fpts >= b.fpts

    def test_rank_is_one_based_position(self):
        standings = build_standings(USERS, ROSTERS)
        assert [s.rank for s in standings] == list(range(1, len(ROSTERS) + 1))

    def test_records_are_taken_from_sleeper(self):
        standings = build_standings(USERS, ROSTERS)
        assert [s.roster_id for s in standings] == [2, 4, 1, 3]
        top = standings[0]
        assert (top.wins, top.losses, top.ties) == (1, 0, 0)
        assert top.fpa == 80

    def test_missing_settings_default_to_zero(self):
        standings = build_standings([], [{"roster_id": 1, "owner_id": "x"}])
        row = standings[0]
        assert (row.wins, row.losses, row.ties, row.fpts, row.fpa) == (0, 0, 0, 0, 0)
        assert row.display_name == "Unknown"
