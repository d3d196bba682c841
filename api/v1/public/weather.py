"""
Public API routes for weather-conditioned views.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from schemas.weather import (
    ColdWeatherQBResp,
    TeamWeatherResp,
    WeatherAverageResp,
    WindyDeltaResp,
)
from services.weather_service import WeatherService
from core.dependencies import get_weather_service
from core.rate_limit import limiter, PUBLIC_RATE_LIMIT

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get(
    "/average-stats",
    response_model=WeatherAverageResp,
    summary="Average QB passing yards by weather",
    description=(
        "Groups quarterback game-weeks by the weather category of their week "
        "(Rainy, Snowy, Foggy, Cloudy, Clear/Sunny, Windy, Other) and returns "
        "the average passing yards of categories with more than five game-weeks."
    ),
    responses={
        200: {"description": "Averages computed successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_weather_average_stats(
    request: Request,
    weather_condition: Optional[str] = Query(None, description="Restrict to one weather category"),
    season: Optional[int] = Query(None, ge=1920, le=2100, description="Restrict to one season"),
    service: WeatherService = Depends(get_weather_service),
) -> WeatherAverageResp:
    return await service.get_weather_conditioned_average(
        weather_condition=weather_condition,
        season=season,
    )


@router.get(
    "/adverse-performance",
    response_model=WindyDeltaResp,
    summary="Players who improve in windy weeks",
    responses={
        200: {"description": "Players retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_adverse_weather_performance(
    request: Request,
    min_wind_speed: float = Query(15, ge=0, description="Minimum wind speed (mph) for a windy week"),
    limit: int = Query(10, ge=1, le=500, description="Maximum players to return"),
    service: WeatherService = Depends(get_weather_service),
) -> WindyDeltaResp:
    return await service.get_adverse_weather_delta(min_wind_speed=min_wind_speed, limit=limit)


@router.get(
    "/team-comparison",
    response_model=TeamWeatherResp,
    summary="Compare team margins across weather conditions",
    responses={
        200: {"description": "Comparison computed successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team_weather_comparison(
    request: Request,
    teams: str = Query(..., min_length=1, description="Comma separated team abbreviations (e.g. KC,BUF)"),
    limit: int = Query(5, ge=1, le=32, description="Maximum teams to return"),
    service: WeatherService = Depends(get_weather_service),
) -> TeamWeatherResp:
    return await service.get_team_weather_comparison(team_codes=teams.split(","), limit=limit)


@router.get(
    "/cold-quarterbacks",
    response_model=ColdWeatherQBResp,
    summary="Quarterbacks in sub-freezing weeks",
    responses={
        200: {"description": "Quarterbacks retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_cold_weather_quarterbacks(
    request: Request,
    min_games: int = Query(3, ge=1, description="Minimum sub-freezing games played"),
    service: WeatherService = Depends(get_weather_service),
) -> ColdWeatherQBResp:
    return await service.get_cold_weather_quarterbacks(min_games=min_games)
