"""
Public API routes for player production views.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request

from schemas.players import (
    ConsistentScorerResp,
    FantasyTotalResp,
    GoalLineBackResp,
    PerformanceTierResp,
)
from services.player_stats_service import PlayerStatsService
from core.dependencies import get_player_stats_service
from core.rate_limit import limiter, PUBLIC_RATE_LIMIT

router = APIRouter(prefix="/players", tags=["Players"])


@router.get(
    "/top",
    response_model=FantasyTotalResp,
    summary="Top players by total fantasy points",
    responses={
        200: {"description": "Players retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_top_players(
    request: Request,
    count: int = Query(10, ge=1, le=1000, description="Number of players to return"),
    service: PlayerStatsService = Depends(get_player_stats_service),
) -> FantasyTotalResp:
    return await service.get_ranked_fantasy_totals(count=count)


@router.get(
    "/goal-line-backs",
    response_model=GoalLineBackResp,
    summary="Running backs ranked by touchdowns per 100 rushing yards",
    responses={
        200: {"description": "Running backs retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_goal_line_backs(
    request: Request,
    min_tds: int = Query(5, ge=0, description="Minimum rushing touchdowns in the season"),
    min_games: int = Query(8, ge=1, description="Minimum games with 3+ carries"),
    service: PlayerStatsService = Depends(get_player_stats_service),
) -> GoalLineBackResp:
    return await service.get_goal_line_backs(min_tds=min_tds, min_games=min_games)


@router.get(
    "/consistent-scorers",
    response_model=ConsistentScorerResp,
    summary="Steadiest PPR scorers at a position",
    responses={
        200: {"description": "Players retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_consistent_scorers(
    request: Request,
    position: str = Query(..., min_length=1, description="Roster position (e.g. QB, RB, WR, TE)"),
    service: PlayerStatsService = Depends(get_player_stats_service),
) -> ConsistentScorerResp:
    return await service.get_consistent_scorers(position=position)


@router.get(
    "/performance-tiers/{position}",
    response_model=PerformanceTierResp,
    summary="Performance tiers for a position",
    description=(
        "Scores every player-season with the position's weighted formula, "
        "labels it Elite, Above Average, Average or Below Average, and "
        "summarizes each tier. Positions other than QB, RB and WR have no tiers."
    ),
    responses={
        200: {"description": "Tiers computed successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_performance_tiers(
    request: Request,
    position: str = Path(..., min_length=1, description="QB, RB or WR"),
    season_floor: Optional[int] = Query(None, ge=1920, le=2100, description="Earliest season included"),
    min_players: int = Query(1, ge=1, description="Minimum player-seasons for a tier to be reported"),
    service: PlayerStatsService = Depends(get_player_stats_service),
) -> PerformanceTierResp:
    return await service.get_performance_tiers(
        position=position,
        season_floor=season_floor,
        min_players=min_players,
    )
