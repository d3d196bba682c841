"""
Player production views: fantasy totals, goal-line backs, scoring
consistency and position performance tiers.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Optional

from schemas.players import (
    ConsistentScorerResp,
    ConsistentScorerRow,
    FantasyTotalResp,
    FantasyTotalRow,
    GoalLineBackResp,
    GoalLineBackRow,
    PerformanceTierResp,
    PerformanceTierRow,
)
from core.settings import settings
from services import aggregation as agg
from services.dataset import DatasetSnapshot, Table
from services.tiers import TIERED_POSITIONS, classify_tier, performance_score, tier_rank
from services.validation import (
    require_non_empty,
    require_non_negative_int,
    require_positive_int,
    require_season,
)
from services.view_service import BaseViewService

MIN_GOAL_LINE_CARRIES = 3
MIN_CONSISTENCY_GAMES = 10
TOP_PLAYER_SEASONS = 1100


def ranked_fantasy_totals(snapshot: DatasetSnapshot, count: int) -> list[FantasyTotalRow]:
    """Top `count` players by total fantasy points."""
    positions = snapshot.positions_by_name()

    groups = agg.aggregate(
        (ws for ws in snapshot.weekly_stats if ws.name in positions),
        key=lambda ws: (ws.name, positions[ws.name]),
        reducers={"total_fantasy_points": agg.total(lambda ws: ws.fantasy_points)},
    )
    groups = [g for g in groups if g["total_fantasy_points"] is not None]
    groups = agg.sort_rows(groups, [
        agg.desc(lambda g: g["total_fantasy_points"]),
        agg.asc(lambda g: g.key[0]),
    ])
    return [
        FantasyTotalRow(
            name=g.key[0],
            position=g.key[1],
            total_fantasy_points=round(g["total_fantasy_points"], 2),
        )
        for g in groups[:count]
    ]


def goal_line_backs(
    snapshot: DatasetSnapshot,
    min_tds: int,
    min_games: int,
) -> list[GoalLineBackRow]:
    """Running back seasons ranked by rushing touchdowns per 100 rushing yards."""
    played = {ws.key for ws in snapshot.weekly_stats}

    groups = agg.aggregate(
        (
            rb for rb in snapshot.rb_stats
            if rb.key in played and rb.carries >= MIN_GOAL_LINE_CARRIES
        ),
        key=lambda rb: (rb.name, rb.season),
        reducers={
            "td_count": agg.total(lambda rb: rb.rushing_tds),
            "rushing_yards": agg.total(lambda rb: rb.rushing_yards),
            "avg_rushing_yards": agg.avg(lambda rb: rb.rushing_yards),
        },
        having=agg.Having(min_count=min_games, min_values={"td_count": min_tds}),
    )

    rows = []
    for g in groups:
        ratio = agg.safe_ratio(g["td_count"], g["rushing_yards"])
        rows.append(
            GoalLineBackRow(
                player_name=g.key[0],
                season=g.key[1],
                games_played=g.size,
                td_count=int(g["td_count"]),
                avg_rushing_yards=agg.round_or_none(g["avg_rushing_yards"], 1),
                td_per_100_yards=round(ratio * 100, 2) if ratio is not None else None,
            )
        )

    return agg.sort_rows(rows, [
        agg.desc(lambda r: r.td_per_100_yards),
        agg.asc(lambda r: r.player_name),
        agg.asc(lambda r: r.season),
    ])


def consistent_scorers(snapshot: DatasetSnapshot, position: str) -> list[ConsistentScorerRow]:
    """Players at `position` ordered from steadiest to most volatile PPR scoring."""
    position = position.upper()
    positions = {
        name: pos for name, pos in snapshot.positions_by_name().items()
        if pos is not None and pos.upper() == position
    }

    groups = agg.aggregate(
        (ws for ws in snapshot.weekly_stats if ws.name in positions),
        key=lambda ws: (ws.name, positions[ws.name]),
        reducers={
            "avg_points": agg.avg(lambda ws: ws.fantasy_points_ppr),
            "point_variability": agg.stddev(lambda ws: ws.fantasy_points_ppr),
            "lowest_score": agg.minimum(lambda ws: ws.fantasy_points_ppr),
            "highest_score": agg.maximum(lambda ws: ws.fantasy_points_ppr),
        },
        having=agg.Having(min_count=MIN_CONSISTENCY_GAMES),
    )

    rows = [
        ConsistentScorerRow(
            player_name=g.key[0],
            position=g.key[1],
            games_played=g.size,
            avg_points=agg.round_or_none(g["avg_points"], 1),
            point_variability=agg.round_or_none(g["point_variability"], 2),
            lowest_score=agg.round_or_none(g["lowest_score"], 1),
            highest_score=agg.round_or_none(g["highest_score"], 1),
        )
        for g in groups
    ]
    return agg.sort_rows(rows, [
        agg.asc(lambda r: r.point_variability),
        agg.desc(lambda r: r.avg_points),
        agg.asc(lambda r: r.player_name),
    ])


@dataclass(frozen=True)
class PlayerSeasonPerformance:
    name: str
    season: int
    position: str
    avg_performance: float
    performance_stddev: float
    avg_fantasy_points: Optional[float]
    tier: Optional[str]


def player_season_performances(snapshot: DatasetSnapshot) -> list[PlayerSeasonPerformance]:
    """Average score and tier for every (player, season, position)."""
    fantasy = {
        g.key: g["avg_fantasy_points"]
        for g in agg.aggregate(
            snapshot.weekly_stats,
            key=lambda ws: (ws.name, ws.season),
            reducers={"avg_fantasy_points": agg.avg(lambda ws: ws.fantasy_points)},
        )
    }

    groups = agg.aggregate(
        snapshot.position_stats(),
        key=lambda stat: (stat.name, stat.season, stat.position),
        reducers={
            "avg_performance": agg.avg(performance_score),
            "performance_stddev": agg.stddev(performance_score),
        },
    )
    performances = []
    for g in groups:
        name, season, position = g.key
        performances.append(
            PlayerSeasonPerformance(
                name=name,
                season=season,
                position=position,
                avg_performance=g["avg_performance"],
                performance_stddev=g["performance_stddev"],
                avg_fantasy_points=fantasy.get((name, season)),
                tier=classify_tier(position, g["avg_performance"]),
            )
        )
    return performances


def improved_keys(performances: list[PlayerSeasonPerformance]) -> frozenset[tuple[str, int]]:
    """(name, season) pairs that beat the same player's previous season."""
    history: dict[str, list[PlayerSeasonPerformance]] = defaultdict(list)
    for perf in performances:
        history[perf.name].append(perf)

    improved = set()
    for name, seasons in history.items():
        seasons.sort(key=lambda p: (p.season, p.position))
        for prev, curr in zip(seasons, seasons[1:]):
            if curr.avg_performance > prev.avg_performance:
                improved.add((name, curr.season))
    return frozenset(improved)


def performance_tiers(
    snapshot: DatasetSnapshot,
    position: str,
    season_floor: int = 2018,
    min_players: int = 1,
) -> list[PerformanceTierRow]:
    """
    Tier breakdown of a position's player-seasons since `season_floor`.

    Cross-tier figures compare each tier with the same tier among the top
    player-seasons of every position and year.
    """
    position = position.upper()
    if position not in TIERED_POSITIONS:
        return []

    performances = [p for p in player_season_performances(snapshot) if p.tier is not None]

    top = agg.sort_rows(performances, [
        agg.desc(lambda p: p.avg_performance),
        agg.asc(lambda p: p.name),
        agg.asc(lambda p: p.season),
    ])[:TOP_PLAYER_SEASONS]
    comparison = {
        g.key: g
        for g in agg.aggregate(
            top,
            key=lambda p: (p.tier, p.position),
            reducers={"group_avg_performance": agg.avg(lambda p: p.avg_performance)},
        )
    }

    improved = improved_keys(performances)

    groups = agg.aggregate(
        (p for p in performances if p.position == position and p.season >= season_floor),
        key=lambda p: (p.tier, p.position),
        reducers={
            "avg_tier_performance": agg.avg(lambda p: p.avg_performance),
            "avg_performance_volatility": agg.avg(lambda p: p.performance_stddev),
            "avg_fantasy_points": agg.avg(lambda p: p.avg_fantasy_points),
        },
        having=agg.Having(min_count=min_players),
        keep_rows=True,
    )

    rows = []
    for g in groups:
        tier, tier_position = g.key
        avg_performance = g["avg_tier_performance"]
        cross = comparison.get(g.key)
        group_avg = cross["group_avg_performance"] if cross else avg_performance
        improved_names = sorted({p.name for p in g.rows if (p.name, p.season) in improved})
        rows.append(
            PerformanceTierRow(
                performance_tier=tier,
                position=tier_position,
                player_count=g.size,
                avg_tier_performance=round(avg_performance, 2),
                avg_performance_volatility=round(g["avg_performance_volatility"], 2),
                cross_calc=round(avg_performance * group_avg, 2),
                comparison_count=cross.size if cross else g.size,
                avg_fantasy_points=agg.round_or_none(g["avg_fantasy_points"], 2),
                improved_players=", ".join(improved_names) or None,
            )
        )

    return sorted(rows, key=lambda r: tier_rank(r.performance_tier))


class PlayerStatsService(BaseViewService):
    """Views over weekly and per-position player production."""

    name = "player_stats_service"

    async def get_ranked_fantasy_totals(self, count: int) -> FantasyTotalResp:
        return await self.run_view(
            "ranked_fantasy_totals",
            FantasyTotalResp,
            tables=(Table.PLAYERS, Table.WEEKLY_STATS),
            compute=lambda snap: ranked_fantasy_totals(snap, count),
            validate=lambda: require_positive_int("count", count),
            count=count,
        )

    async def get_goal_line_backs(self, min_tds: int, min_games: int) -> GoalLineBackResp:
        def validate():
            require_non_negative_int("min_tds", min_tds)
            require_positive_int("min_games", min_games)

        return await self.run_view(
            "goal_line_backs",
            GoalLineBackResp,
            tables=(Table.WEEKLY_STATS, Table.RB_STATS),
            compute=lambda snap: goal_line_backs(snap, min_tds, min_games),
            validate=validate,
            min_tds=min_tds,
            min_games=min_games,
        )

    async def get_consistent_scorers(self, position: str) -> ConsistentScorerResp:
        return await self.run_view(
            "consistent_scorers",
            ConsistentScorerResp,
            tables=(Table.PLAYERS, Table.WEEKLY_STATS),
            compute=lambda snap: consistent_scorers(snap, position.strip()),
            validate=lambda: require_non_empty("position", position),
            position=position.strip().upper() if isinstance(position, str) else None,
        )

    async def get_performance_tiers(
        self,
        position: str,
        season_floor: Optional[int] = None,
        min_players: int = 1,
    ) -> PerformanceTierResp:
        season_floor = settings.tier_season_floor if season_floor is None else season_floor

        def validate():
            require_non_empty("position", position)
            require_season("season_floor", season_floor)
            require_positive_int("min_players", min_players)

        return await self.run_view(
            "performance_tiers",
            PerformanceTierResp,
            tables=(Table.WEEKLY_STATS, Table.QB_STATS, Table.RB_STATS, Table.WR_STATS),
            compute=lambda snap: performance_tiers(
                snap, position.strip(), season_floor, min_players
            ),
            validate=validate,
            position=position,
            season_floor=season_floor,
        )
