from db.models.nfl import (
    Player,
    WeeklyStats,
    QuarterbackStats,
    RunningbackStats,
    WideoutStats,
    GameWeather,
    Injury,
)
from db.models.usr.users import User

__all__ = [
    "Player",
    "WeeklyStats",
    "QuarterbackStats",
    "RunningbackStats",
    "WideoutStats",
    "GameWeather",
    "Injury",
    "User",
]
