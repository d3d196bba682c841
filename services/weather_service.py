"""
Weather-conditioned performance views.

Weather is recorded per game, but the position stat tables carry no team,
so player rows are associated with the weather of their game-week. A week
holding several games contributes each distinct condition once per player
row; weeks are deduplicated through (season, week) key sets.
"""

from collections import defaultdict
from typing import Iterable, Optional

from schemas.weather import (
    ColdWeatherQBResp,
    ColdWeatherQBRow,
    TeamWeatherResp,
    TeamWeatherRow,
    WeatherAverageResp,
    WeatherAverageRow,
    WindyDeltaResp,
    WindyDeltaRow,
)
from core.exceptions import InvalidParameterError
from services import aggregation as agg
from services.dataset import DatasetSnapshot, Table, WeatherRecord
from services.validation import (
    optional_non_empty,
    optional_season,
    require_codes,
    require_non_negative_number,
    require_positive_int,
)
from services.view_service import BaseViewService
from services.weather_classifier import (
    COLD,
    NORMAL,
    RAIN_SNOW,
    WEATHER_CATEGORIES,
    WINDY,
    classify_game_conditions,
    classify_weather,
    parse_temperature,
    parse_wind_speed,
)

# A category needs more than five QB game-weeks to be reported
MIN_WEATHER_GROUP_ROWS = 6
FREEZING_TEMPERATURE_F = 32
DEFAULT_TEAM_LIMIT = 5

WeekKey = tuple[int, int]


def _canonical_category(weather_condition: Optional[str]) -> Optional[str]:
    if weather_condition is None:
        return None
    for category in WEATHER_CATEGORIES:
        if category.lower() == weather_condition.strip().lower():
            return category
    raise InvalidParameterError(
        "weather_condition",
        f"must be one of {', '.join(WEATHER_CATEGORIES)}",
    )


def categories_by_week(weather: Iterable[WeatherRecord]) -> dict[WeekKey, frozenset[str]]:
    """Distinct weather categories seen in each (season, week)."""
    weeks: dict[WeekKey, set[str]] = defaultdict(set)
    for record in weather:
        weeks[(record.season, record.week)].add(classify_weather(record.weather_text))
    return {key: frozenset(values) for key, values in weeks.items()}


def weather_conditioned_average(
    snapshot: DatasetSnapshot,
    weather_condition: Optional[str] = None,
) -> list[WeatherAverageRow]:
    """Average QB passing yards per weather category, best first."""
    category_filter = _canonical_category(weather_condition)
    week_categories = categories_by_week(snapshot.weather)

    rows = [
        (category, qb.passing_yards)
        for qb in snapshot.qb_stats
        for category in week_categories.get((qb.season, qb.week), ())
        if category_filter is None or category == category_filter
    ]

    groups = agg.aggregate(
        rows,
        key=lambda r: (r[0],),
        reducers={
            "avg_passing_yards": agg.avg(lambda r: r[1]),
            "row_count": agg.count(),
        },
        having=agg.Having(min_count=MIN_WEATHER_GROUP_ROWS),
    )
    groups = agg.sort_rows(groups, [
        agg.desc(lambda g: g["avg_passing_yards"]),
        agg.asc(lambda g: g.key[0]),
    ])
    return [
        WeatherAverageRow(
            weather_condition=g.key[0],
            avg_passing_yards=round(g["avg_passing_yards"], 2),
            row_count=g["row_count"],
        )
        for g in groups
    ]


def windy_weeks(weather: Iterable[WeatherRecord], min_wind_speed: float) -> frozenset[WeekKey]:
    """Weeks where at least one game's parsed wind speed reached the minimum."""
    weeks = set()
    for record in weather:
        speed = parse_wind_speed(record.wind_text)
        if speed is not None and speed >= min_wind_speed:
            weeks.add((record.season, record.week))
    return frozenset(weeks)


def adverse_weather_delta(
    snapshot: DatasetSnapshot,
    min_wind_speed: float,
    limit: int,
) -> list[WindyDeltaRow]:
    """Players who score more in windy weeks than in normal ones, largest gap first."""
    windy = windy_weeks(snapshot.weather, min_wind_speed)

    groups = agg.aggregate(
        snapshot.weekly_stats,
        key=lambda ws: (ws.name, WINDY if (ws.season, ws.week) in windy else NORMAL),
        reducers={"avg_fantasy_points": agg.avg(lambda ws: ws.fantasy_points)},
    )

    by_player: dict[str, dict[str, Optional[float]]] = defaultdict(dict)
    for g in groups:
        name, condition = g.key
        by_player[name][condition] = g["avg_fantasy_points"]

    rows = []
    for name, averages in by_player.items():
        windy_avg = averages.get(WINDY)
        normal_avg = averages.get(NORMAL)
        if windy_avg is None or normal_avg is None or windy_avg <= normal_avg:
            continue
        rows.append(
            WindyDeltaRow(
                name=name,
                avg_fantasy_windy=round(windy_avg, 2),
                avg_fantasy_normal=round(normal_avg, 2),
                performance_difference=round(windy_avg - normal_avg, 2),
            )
        )

    rows = agg.sort_rows(rows, [
        agg.desc(lambda r: r.performance_difference),
        agg.asc(lambda r: r.name),
    ])
    return rows[:limit]


def team_margins(weather: Iterable[WeatherRecord]) -> list[tuple[str, str, int]]:
    """(team, condition, margin) for both sides of every scored game."""
    margins = []
    for record in weather:
        if record.home_score is None or record.away_score is None:
            continue
        condition = classify_game_conditions(
            record.weather_text, record.temperature_text, record.wind_text
        )
        margin = record.home_score - record.away_score
        margins.append((record.home_team, condition, margin))
        margins.append((record.away_team, condition, -margin))
    return margins


def team_weather_comparison(
    snapshot: DatasetSnapshot,
    team_codes: Iterable[str],
    limit: int = DEFAULT_TEAM_LIMIT,
) -> list[TeamWeatherRow]:
    """
    Compare each team's average margin in adverse conditions with normal ones.

    Teams without a positive normal-weather margin are left out. The
    difference uses the team's best adverse condition, counting a condition
    the team never played in as a zero margin.
    """
    codes = frozenset(code.upper() for code in team_codes)

    groups = agg.aggregate(
        (m for m in team_margins(snapshot.weather) if m[0] in codes),
        key=lambda m: (m[0], m[1]),
        reducers={"avg_margin": agg.avg(lambda m: m[2])},
    )

    by_team: dict[str, dict[str, float]] = defaultdict(dict)
    for g in groups:
        team, condition = g.key
        by_team[team][condition] = g["avg_margin"]

    rows = []
    for team, margins in by_team.items():
        normal = margins.get(NORMAL)
        if normal is None or normal <= 0:
            continue
        best_adverse = max(margins.get(c, 0) for c in (RAIN_SNOW, COLD, WINDY))
        rows.append(
            TeamWeatherRow(
                team=team,
                avg_margin_rain_snow=agg.round_or_none(margins.get(RAIN_SNOW), 2),
                avg_margin_cold=agg.round_or_none(margins.get(COLD), 2),
                avg_margin_windy=agg.round_or_none(margins.get(WINDY), 2),
                avg_margin_normal=round(normal, 2),
                performance_difference=round(best_adverse - normal, 2),
            )
        )

    rows = agg.sort_rows(rows, [
        agg.desc(lambda r: r.performance_difference),
        agg.asc(lambda r: r.team),
    ])
    return rows[:limit]


def freezing_weeks(weather: Iterable[WeatherRecord]) -> frozenset[WeekKey]:
    weeks = set()
    for record in weather:
        temperature = parse_temperature(record.temperature_text)
        if temperature is not None and temperature < FREEZING_TEMPERATURE_F:
            weeks.add((record.season, record.week))
    return frozenset(weeks)


def cold_weather_quarterbacks(
    snapshot: DatasetSnapshot,
    min_games: int,
) -> list[ColdWeatherQBRow]:
    """Quarterbacks ranked by passer rating in sub-freezing weeks."""
    cold = freezing_weeks(snapshot.weather)
    played = {ws.key for ws in snapshot.weekly_stats}

    groups = agg.aggregate(
        (qb for qb in snapshot.qb_stats if qb.key in played and (qb.season, qb.week) in cold),
        key=lambda qb: (qb.name,),
        reducers={
            "avg_rating": agg.avg(lambda qb: qb.passer_rating),
            "avg_passing_yards": agg.avg(lambda qb: qb.passing_yards),
            "avg_tds": agg.avg(lambda qb: qb.passing_tds),
        },
        having=agg.Having(min_count=min_games),
    )
    groups = agg.sort_rows(groups, [
        agg.desc(lambda g: g["avg_rating"]),
        agg.asc(lambda g: g.key[0]),
    ])
    return [
        ColdWeatherQBRow(
            player_name=g.key[0],
            games_played=g.size,
            avg_rating=agg.round_or_none(g["avg_rating"], 2),
            avg_passing_yards=agg.round_or_none(g["avg_passing_yards"], 2),
            avg_tds=agg.round_or_none(g["avg_tds"], 2),
        )
        for g in groups
    ]


class WeatherService(BaseViewService):
    """Views that condition player and team results on game weather."""

    name = "weather_service"

    async def get_weather_conditioned_average(
        self,
        weather_condition: Optional[str] = None,
        season: Optional[int] = None,
    ) -> WeatherAverageResp:
        def validate():
            optional_non_empty("weather_condition", weather_condition)
            _canonical_category(weather_condition)
            optional_season("season", season)

        return await self.run_view(
            "weather_conditioned_average",
            WeatherAverageResp,
            tables=(Table.QB_STATS, Table.WEATHER),
            compute=lambda snap: weather_conditioned_average(snap, weather_condition),
            validate=validate,
            season=season,
            weather_condition=weather_condition,
        )

    async def get_adverse_weather_delta(
        self,
        min_wind_speed: float,
        limit: int,
    ) -> WindyDeltaResp:
        def validate():
            require_non_negative_number("min_wind_speed", min_wind_speed)
            require_positive_int("limit", limit)

        return await self.run_view(
            "adverse_weather_delta",
            WindyDeltaResp,
            tables=(Table.WEEKLY_STATS, Table.WEATHER),
            compute=lambda snap: adverse_weather_delta(snap, min_wind_speed, limit),
            validate=validate,
            min_wind_speed=min_wind_speed,
            limit=limit,
        )

    async def get_team_weather_comparison(
        self,
        team_codes: Iterable[str],
        limit: int = DEFAULT_TEAM_LIMIT,
    ) -> TeamWeatherResp:
        team_codes = list(team_codes) if team_codes is not None else None

        def validate():
            require_codes("team_codes", team_codes)
            require_positive_int("limit", limit)

        return await self.run_view(
            "team_weather_comparison",
            TeamWeatherResp,
            tables=(Table.WEATHER,),
            compute=lambda snap: team_weather_comparison(
                snap, require_codes("team_codes", team_codes), limit
            ),
            validate=validate,
            team_codes=team_codes,
        )

    async def get_cold_weather_quarterbacks(self, min_games: int) -> ColdWeatherQBResp:
        return await self.run_view(
            "cold_weather_quarterbacks",
            ColdWeatherQBResp,
            tables=(Table.WEEKLY_STATS, Table.QB_STATS, Table.WEATHER),
            compute=lambda snap: cold_weather_quarterbacks(snap, min_games),
            validate=lambda: require_positive_int("min_games", min_games),
            min_games=min_games,
        )
