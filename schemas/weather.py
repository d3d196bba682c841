from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BaseResponse


class WeatherAverageRow(BaseModel):
    """Average QB passing output for one weather category."""
    weather_condition: str
    avg_passing_yards: float
    row_count: int = Field(..., description="QB game-weeks contributing to the average")


class WindyDeltaRow(BaseModel):
    name: str
    avg_fantasy_windy: float
    avg_fantasy_normal: float
    performance_difference: float


class TeamWeatherRow(BaseModel):
    """Average margin of victory per game condition; null when never played in it."""
    team: str
    avg_margin_rain_snow: Optional[float] = None
    avg_margin_cold: Optional[float] = None
    avg_margin_windy: Optional[float] = None
    avg_margin_normal: Optional[float] = None
    performance_difference: float


class ColdWeatherQBRow(BaseModel):
    player_name: str
    games_played: int
    avg_rating: Optional[float] = None
    avg_passing_yards: Optional[float] = None
    avg_tds: Optional[float] = None


class WeatherAverageResp(BaseResponse):
    data: List[WeatherAverageRow] = []


class WindyDeltaResp(BaseResponse):
    data: List[WindyDeltaRow] = []


class TeamWeatherResp(BaseResponse):
    data: List[TeamWeatherRow] = []


class ColdWeatherQBResp(BaseResponse):
    data: List[ColdWeatherQBRow] = []
