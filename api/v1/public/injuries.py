"""
Public API routes for injury views.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request

from schemas.injuries import InjuryProbabilityResp, InjuryResilienceResp
from services.injury_service import InjuryService
from core.dependencies import get_injury_service
from core.rate_limit import limiter, PUBLIC_RATE_LIMIT

router = APIRouter(prefix="/injuries", tags=["Injuries"])


@router.get(
    "/resilience",
    response_model=InjuryResilienceResp,
    summary="Injuries per season played",
    responses={
        200: {"description": "Players retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_injury_resilience(
    request: Request,
    position: Optional[str] = Query(None, description="Restrict to one roster position"),
    service: InjuryService = Depends(get_injury_service),
) -> InjuryResilienceResp:
    return await service.get_injury_resilience(position=position)


@router.get(
    "/followup-probability",
    response_model=InjuryProbabilityResp,
    summary="Probability of injury after adverse weather, and of re-injury",
    description=(
        "An 'Out' injury counts when an adverse-weather week of the same season "
        "lies within `window` weeks of it. Probabilities are null when their "
        "denominator is zero."
    ),
    responses={
        200: {"description": "Probabilities computed successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_injury_followup_probability(
    request: Request,
    window: Optional[int] = Query(None, ge=0, le=17, description="Week window half-width"),
    min_seasons: int = Query(1, ge=1, description="Distinct seasons with weather-linked injuries"),
    season: Optional[int] = Query(None, ge=1920, le=2100, description="Restrict exposure to one season"),
    service: InjuryService = Depends(get_injury_service),
) -> InjuryProbabilityResp:
    return await service.get_injury_followup_probability(
        window_half_width=window,
        min_seasons=min_seasons,
        season=season,
    )


@router.get(
    "/probability/{season}",
    response_model=InjuryProbabilityResp,
    summary="Injury probabilities for one season",
    responses={
        200: {"description": "Probabilities computed successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_season_injury_probability(
    request: Request,
    season: int = Path(..., ge=1920, le=2100),
    window: Optional[int] = Query(None, ge=0, le=17, description="Week window half-width"),
    service: InjuryService = Depends(get_injury_service),
) -> InjuryProbabilityResp:
    return await service.get_injury_followup_probability(window_half_width=window, season=season)
