from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BaseResponse


class InjuryResilienceRow(BaseModel):
    player_name: str
    position: str
    seasons_played: int
    total_games: int
    total_injuries: int
    injuries_per_season: Optional[float] = None


class InjuryProbabilityRow(BaseModel):
    """Ratios are null when their denominator is zero."""
    player_number: int
    injured_number: int
    injured_again: int
    injury_prob: Optional[float] = Field(None, description="injured_number / player_number")
    another_injury_prob: Optional[float] = Field(None, description="injured_again / injured_number")


class InjuryResilienceResp(BaseResponse):
    data: List[InjuryResilienceRow] = []


class InjuryProbabilityResp(BaseResponse):
    data: List[InjuryProbabilityRow] = []
