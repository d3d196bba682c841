"""
FastAPI dependencies that hand each request its own service instances.
"""

from db.base import db
from services.dataset import DatasetAccessor
from services.injury_service import InjuryService
from services.player_stats_service import PlayerStatsService
from services.weather_service import WeatherService


def get_dataset_accessor() -> DatasetAccessor:
    return DatasetAccessor(db)


def get_weather_service() -> WeatherService:
    return WeatherService(get_dataset_accessor())


def get_player_stats_service() -> PlayerStatsService:
    return PlayerStatsService(get_dataset_accessor())


def get_injury_service() -> InjuryService:
    return InjuryService(get_dataset_accessor())
