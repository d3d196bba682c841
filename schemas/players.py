from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BaseResponse


class FantasyTotalRow(BaseModel):
    name: str
    position: Optional[str] = None
    total_fantasy_points: float


class GoalLineBackRow(BaseModel):
    player_name: str
    season: int
    games_played: int
    td_count: int
    avg_rushing_yards: Optional[float] = None
    td_per_100_yards: Optional[float] = Field(
        None, description="Rushing TDs per 100 rushing yards; null when no yards were gained"
    )


class ConsistentScorerRow(BaseModel):
    player_name: str
    position: str
    games_played: int
    avg_points: Optional[float] = None
    point_variability: Optional[float] = None
    lowest_score: Optional[float] = None
    highest_score: Optional[float] = None


class PerformanceTierRow(BaseModel):
    performance_tier: str
    position: str
    player_count: int = Field(..., description="Player-seasons in the tier")
    avg_tier_performance: float
    avg_performance_volatility: float
    cross_calc: float
    comparison_count: int
    avg_fantasy_points: Optional[float] = None
    improved_players: Optional[str] = Field(
        None, description="Comma separated players who beat their previous season's score"
    )


class FantasyTotalResp(BaseResponse):
    data: List[FantasyTotalRow] = []


class GoalLineBackResp(BaseResponse):
    data: List[GoalLineBackRow] = []


class ConsistentScorerResp(BaseResponse):
    data: List[ConsistentScorerRow] = []


class PerformanceTierResp(BaseResponse):
    data: List[PerformanceTierRow] = []
