"""Tests for injury resilience and the follow-up probability view."""

from conftest import game, injury, player, snapshot, weekly
from services.injury_service import injury_followup_probability, injury_resilience


def full_season(name, season):
    return [weekly(name, season, w) for w in range(1, 17)]


class TestInjuryResilience:
    def test_injuries_per_season(self):
        snap = snapshot(
            players=[player("A", "QB"), player("B", "RB"), player("C", "WR")],
            weekly_stats=full_season("A", 2020) + full_season("A", 2021) + full_season("B", 2020)
            + [weekly("C", 2020, 1)],
            injuries=[
                injury("A", 2020, 3, status="Questionable"),
                injury("A", 2020, 3, status="Out"),
                injury("A", 2021, 7),
                injury("A", 2021, 8),
                injury("B", 2020, 2),
                injury("B", 2020, 4),
                injury("C", 2020, 1),
            ],
        )
        rows = injury_resilience(snap)
        assert [r.player_name for r in rows] == ["B", "A"]
        a = rows[1]
        assert (a.seasons_played, a.total_games, a.total_injuries) == (2, 32, 3)
        assert a.injuries_per_season == 1.5
        assert rows[0].injuries_per_season == 2.0

    def test_position_filter(self):
        snap = snapshot(
            players=[player("A", "QB"), player("B", "RB")],
            weekly_stats=full_season("A", 2020) + full_season("B", 2020),
        )
        rows = injury_resilience(snap, "rb")
        assert [r.player_name for r in rows] == ["B"]
        assert rows[0].total_injuries == 0


class TestInjuryFollowupProbability:
    def test_foggy_week_exposure(self):
        snap = snapshot(
            players=[player("A", "QB"), player("B", "RB")],
            weather=[game(2020, 5, weather="Fog"), game(2020, 9, weather="Rain")],
            injuries=[injury("A", 2020, 6), injury("A", 2021, 2), injury("B", 2020, 9)],
        )
        [row] = injury_followup_probability(snap, window_half_width=1)
        assert row.player_number == 2
        assert row.injured_number == 1
        assert row.injury_prob == 0.5
        assert row.another_injury_prob == 1.0

    def test_adverse_categories_override(self):
        snap = snapshot(
            players=[player("B", "RB")],
            weather=[game(2020, 9, weather="Rain")],
            injuries=[injury("B", 2020, 9)],
        )
        [row] = injury_followup_probability(snap, 0, adverse_categories=["Rainy"])
        assert row.injured_number == 1
        assert row.another_injury_prob == 0.0
