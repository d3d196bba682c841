"""Tests for the weather-conditioned views."""

import pytest

from conftest import game, qb, snapshot, weekly
from core.exceptions import InvalidParameterError
from services.weather_service import (
    adverse_weather_delta,
    cold_weather_quarterbacks,
    team_weather_comparison,
    weather_conditioned_average,
)


def rainy_and_clear_season():
    weather = [game(2020, w, weather="Rain") for w in range(1, 7)]
    weather += [game(2020, w, weather="Sunny") for w in range(7, 13)]
    qbs = [qb("A", 2020, w, passing_yards=200.0 + w) for w in range(1, 13)]
    return snapshot(weather=weather, qb_stats=qbs)


class TestWeatherConditionedAverage:
    def test_groups_by_week_category(self):
        rows = weather_conditioned_average(rainy_and_clear_season())
        assert [r.weather_condition for r in rows] == ["Clear/Sunny", "Rainy"]
        assert rows[0].avg_passing_yards == 209.5
        assert rows[1].avg_passing_yards == 203.5
        assert rows[1].row_count == 6

    def test_small_categories_are_dropped(self):
        snap = snapshot(
            weather=[game(2020, w, weather="Fog") for w in range(1, 6)],
            qb_stats=[qb("A", 2020, w, passing_yards=250.0) for w in range(1, 6)],
        )
        assert weather_conditioned_average(snap) == []

    def test_condition_filter_is_case_insensitive(self):
        rows = weather_conditioned_average(rainy_and_clear_season(), "rainy")
        assert [r.weather_condition for r in rows] == ["Rainy"]

    def test_unknown_condition(self):
        with pytest.raises(InvalidParameterError):
            weather_conditioned_average(rainy_and_clear_season(), "Hail")


class TestAdverseWeatherDelta:
    def test_only_players_better_in_wind(self):
        snap = snapshot(
            weather=[game(2020, 1, wind="25"), game(2020, 2, wind="5"), game(2020, 3, wind="calm")],
            weekly_stats=[
                weekly("A", 2020, 1, points=20.0),
                weekly("A", 2020, 2, points=10.0),
                weekly("A", 2020, 3, points=12.0),
                weekly("B", 2020, 1, points=5.0),
                weekly("B", 2020, 2, points=15.0),
            ],
        )
        rows = adverse_weather_delta(snap, min_wind_speed=15, limit=10)
        assert len(rows) == 1
        assert rows[0].name == "A"
        assert rows[0].avg_fantasy_windy == 20.0
        assert rows[0].avg_fantasy_normal == 11.0
        assert rows[0].performance_difference == 9.0

    def test_limit(self):
        snap = snapshot(
            weather=[game(2020, 1, wind="30")],
            weekly_stats=[
                weekly(name, 2020, week, points=10.0 + bonus if week == 1 else 10.0)
                for name, bonus in (("A", 1), ("B", 3), ("C", 2))
                for week in (1, 2)
            ],
        )
        rows = adverse_weather_delta(snap, min_wind_speed=15, limit=2)
        assert [r.name for r in rows] == ["B", "C"]


class TestTeamWeatherComparison:
    def test_best_adverse_margin_against_normal(self):
        snap = snapshot(weather=[
            game(2020, 1, home="KC", away="BUF", weather="Clear", temperature="70 F", wind="5",
                 home_score=27, away_score=20),
            game(2020, 2, home="KC", away="DEN", weather="Rain", temperature="50 F", wind="5",
                 home_score=24, away_score=10),
            game(2020, 3, home="NYJ", away="KC", weather="Clear", temperature="20 F", wind="5",
                 home_score=17, away_score=10),
        ])
        rows = team_weather_comparison(snap, ["kc", "buf"])
        assert [r.team for r in rows] == ["KC"]
        kc = rows[0]
        assert kc.avg_margin_normal == 7.0
        assert kc.avg_margin_rain_snow == 14.0
        assert kc.avg_margin_cold == -7.0
        assert kc.avg_margin_windy is None
        assert kc.performance_difference == 7.0

    def test_unplayed_conditions_count_as_zero_margin(self):
        snap = snapshot(weather=[
            game(2020, 1, home="KC", away="BUF", weather="Clear", temperature="70 F", wind="5",
                 home_score=25, away_score=20),
            game(2020, 2, home="NYJ", away="KC", weather="Clear", temperature="20 F", wind="5",
                 home_score=13, away_score=10),
        ])
        [kc] = team_weather_comparison(snap, ["KC"])
        assert kc.avg_margin_cold == -3.0
        assert kc.performance_difference == -5.0

    def test_team_without_adverse_games(self):
        snap = snapshot(weather=[game(2020, 1, home="KC", away="BUF", home_score=30, away_score=3)])
        rows = team_weather_comparison(snap, ["KC"])
        assert rows[0].performance_difference == -27.0

    def test_order_uses_zero_padded_difference(self):
        clear = {"weather": "Clear", "temperature": "70 F", "wind": "5"}
        snap = snapshot(weather=[
            game(2020, 1, home="KC", away="NE", home_score=14, away_score=10, **clear),
            game(2020, 1, home="BUF", away="MIA", home_score=20, away_score=10, **clear),
            game(2020, 2, home="BUF", away="NYJ", weather="Clear", temperature="20 F", wind="5",
                 home_score=11, away_score=10),
        ])
        rows = team_weather_comparison(snap, ["KC", "BUF"])
        assert [(r.team, r.performance_difference) for r in rows] == [("KC", -4.0), ("BUF", -9.0)]

    def test_games_missing_conditions_are_normal(self):
        snap = snapshot(weather=[
            game(2020, 1, home="KC", away="BUF", weather="Rain", home_score=24, away_score=10),
        ])
        [kc] = team_weather_comparison(snap, ["KC"])
        assert kc.avg_margin_normal == 14.0
        assert kc.avg_margin_rain_snow is None

    def test_unscored_games_are_ignored(self):
        snap = snapshot(weather=[game(2020, 1, home="KC", away="BUF")])
        assert team_weather_comparison(snap, ["KC"]) == []


class TestColdWeatherQuarterbacks:
    def test_sub_freezing_weeks_only(self):
        snap = snapshot(
            weather=[game(2020, 1, temperature="20"), game(2020, 2, temperature="25F"), game(2020, 3, temperature="50")],
            weekly_stats=[weekly("A", 2020, w) for w in (1, 2, 3)] + [weekly("B", 2020, 1)],
            qb_stats=[
                qb("A", 2020, 1, passing_yards=200.0, passing_tds=2, passer_rating=100.0),
                qb("A", 2020, 2, passing_yards=250.0, passing_tds=1, passer_rating=90.0),
                qb("A", 2020, 3, passing_yards=400.0, passing_tds=4, passer_rating=150.0),
                qb("B", 2020, 1, passing_yards=300.0, passing_tds=3, passer_rating=120.0),
            ],
        )
        rows = cold_weather_quarterbacks(snap, min_games=2)
        assert len(rows) == 1
        assert rows[0].player_name == "A"
        assert rows[0].games_played == 2
        assert rows[0].avg_rating == 95.0
        assert rows[0].avg_passing_yards == 225.0
        assert rows[0].avg_tds == 1.5

    def test_quarterback_rows_need_a_weekly_row(self):
        snap = snapshot(
            weather=[game(2020, 1, temperature="10")],
            qb_stats=[qb("A", 2020, 1, passer_rating=80.0)],
        )
        assert cold_weather_quarterbacks(snap, min_games=1) == []

    def test_signed_temperatures_are_not_cold(self):
        snap = snapshot(
            weather=[game(2020, 1, temperature="-5 F"), game(2020, 2, temperature="10 F")],
            weekly_stats=[weekly("A", 2020, w) for w in (1, 2)],
            qb_stats=[qb("A", 2020, w, passer_rating=80.0) for w in (1, 2)],
        )
        rows = cold_weather_quarterbacks(snap, min_games=1)
        assert [(r.player_name, r.games_played) for r in rows] == [("A", 1)]
