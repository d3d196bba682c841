"""
Injury views: per-player injury resilience and the probability of a
follow-up injury after exposure to adverse weather.
"""

from typing import Iterable, Optional

from schemas.injuries import (
    InjuryProbabilityResp,
    InjuryProbabilityRow,
    InjuryResilienceResp,
    InjuryResilienceRow,
)
from core.settings import settings
from services import aggregation as agg
from services.dataset import DatasetSnapshot, Table
from services.probability import compute_injury_probability
from services.validation import (
    optional_non_empty,
    optional_season,
    require_non_negative_int,
    require_positive_int,
)
from services.view_service import BaseViewService
from services.window_associator import AdverseWeekIndex

MIN_RESILIENCE_GAMES = 16


def injury_resilience(
    snapshot: DatasetSnapshot,
    position: Optional[str] = None,
) -> list[InjuryResilienceRow]:
    """Injuries per season played for players with at least 16 games."""
    position = position.upper() if position else None
    positions = {
        name: pos for name, pos in snapshot.positions_by_name().items()
        if position is None or (pos is not None and pos.upper() == position)
    }

    # Every reported status counts; (season, week) keys collapse duplicate reports
    injury_weeks: dict[str, set[tuple[int, int]]] = {}
    for injury in snapshot.injuries:
        if injury.season is None or injury.week is None:
            continue
        injury_weeks.setdefault(injury.player, set()).add((injury.season, injury.week))

    groups = agg.aggregate(
        (ws for ws in snapshot.weekly_stats if ws.name in positions),
        key=lambda ws: (ws.name, positions[ws.name]),
        reducers={
            "seasons_played": agg.count_distinct(lambda ws: ws.season),
            "total_games": agg.count_distinct(lambda ws: (ws.season, ws.week)),
        },
        having=agg.Having(min_values={"total_games": MIN_RESILIENCE_GAMES}),
    )

    rows = []
    for g in groups:
        name, player_position = g.key
        total_injuries = len(injury_weeks.get(name, ()))
        rows.append(
            InjuryResilienceRow(
                player_name=name,
                position=player_position,
                seasons_played=g["seasons_played"],
                total_games=g["total_games"],
                total_injuries=total_injuries,
                injuries_per_season=agg.round_or_none(
                    agg.safe_ratio(total_injuries, g["seasons_played"]), 2
                ),
            )
        )

    return agg.sort_rows(rows, [
        agg.desc(lambda r: r.injuries_per_season),
        agg.desc(lambda r: r.total_injuries),
        agg.asc(lambda r: r.player_name),
    ])


def injury_followup_probability(
    snapshot: DatasetSnapshot,
    window_half_width: int,
    min_seasons: int = 1,
    season: Optional[int] = None,
    adverse_categories: Optional[Iterable[str]] = None,
) -> list[InjuryProbabilityRow]:
    """Single-row view of the injury and re-injury probabilities."""
    categories = adverse_categories or settings.adverse_weather_categories
    index = AdverseWeekIndex.from_weather(snapshot.weather, categories)

    result = compute_injury_probability(
        snapshot.players,
        snapshot.injuries,
        index,
        window_half_width=window_half_width,
        min_seasons=min_seasons,
        season=season,
    )
    return [
        InjuryProbabilityRow(
            player_number=result.player_number,
            injured_number=result.injured_number,
            injured_again=result.injured_again,
            injury_prob=result.injury_prob,
            another_injury_prob=result.another_injury_prob,
        )
    ]


class InjuryService(BaseViewService):
    """Views over the injury report history."""

    name = "injury_service"

    async def get_injury_resilience(self, position: Optional[str] = None) -> InjuryResilienceResp:
        return await self.run_view(
            "injury_resilience",
            InjuryResilienceResp,
            tables=(Table.PLAYERS, Table.WEEKLY_STATS, Table.INJURIES),
            compute=lambda snap: injury_resilience(
                snap, position.strip() if position else None
            ),
            validate=lambda: optional_non_empty("position", position),
            position_filter=position,
        )

    async def get_injury_followup_probability(
        self,
        window_half_width: Optional[int] = None,
        min_seasons: int = 1,
        season: Optional[int] = None,
    ) -> InjuryProbabilityResp:
        if window_half_width is None:
            window_half_width = settings.default_window_half_width

        def validate():
            require_non_negative_int("window_half_width", window_half_width)
            require_positive_int("min_seasons", min_seasons)
            optional_season("season", season)

        return await self.run_view(
            "injury_followup_probability",
            InjuryProbabilityResp,
            tables=(Table.PLAYERS, Table.WEATHER, Table.INJURIES),
            compute=lambda snap: injury_followup_probability(
                snap, window_half_width, min_seasons, season
            ),
            validate=validate,
            window_half_width=window_half_width,
            min_seasons=min_seasons,
            injury_season=season,
        )
