"""
NFL Schema Models

Read-only models over the tables the analytics views query.
"""

from db.models.nfl.players import Player
from db.models.nfl.weekly_stats import WeeklyStats
from db.models.nfl.position_stats import QuarterbackStats, RunningbackStats, WideoutStats
from db.models.nfl.weather import GameWeather
from db.models.nfl.injuries import Injury

__all__ = [
    # Dimension tables
    "Player",
    # Fact tables
    "WeeklyStats",
    "QuarterbackStats",
    "RunningbackStats",
    "WideoutStats",
    "GameWeather",
    "Injury",
]
