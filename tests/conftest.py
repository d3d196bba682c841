"""Shared fixtures: record builders, a file-backed SQLite database and an API client."""

import pytest
from peewee import SqliteDatabase

from core.rate_limit import limiter
from db.base import close_db, db, init_db
from db.models.nfl import (
    GameWeather,
    Injury,
    Player,
    QuarterbackStats,
    RunningbackStats,
    WeeklyStats,
    WideoutStats,
)
from services.dataset import (
    DatasetSnapshot,
    InjuryRecord,
    PlayerRecord,
    QuarterbackStatRecord,
    RunningbackStatRecord,
    WeatherRecord,
    WeeklyStatRecord,
    WideoutStatRecord,
)

NFL_TABLES = [
    Player,
    WeeklyStats,
    QuarterbackStats,
    RunningbackStats,
    WideoutStats,
    GameWeather,
    Injury,
]


def player(name, position):
    return PlayerRecord(name=name, position=position)


def weekly(name, season, week, points=None, ppr=None):
    return WeeklyStatRecord(
        name=name, season=season, week=week, fantasy_points=points, fantasy_points_ppr=ppr
    )


def qb(name, season, week, **fields):
    return QuarterbackStatRecord(name=name, season=season, week=week, **fields)


def rb(name, season, week, **fields):
    return RunningbackStatRecord(name=name, season=season, week=week, **fields)


def wr(name, season, week, **fields):
    return WideoutStatRecord(name=name, season=season, week=week, **fields)


def game(season, week, home="KC", away="BUF", weather=None, temperature=None, wind=None,
         home_score=None, away_score=None):
    return WeatherRecord(
        season=season,
        week=week,
        home_team=home,
        away_team=away,
        weather_text=weather,
        temperature_text=temperature,
        wind_text=wind,
        home_score=home_score,
        away_score=away_score,
    )


def injury(name, season, week, status="Out"):
    return InjuryRecord(player=name, season=season, week=week, game_status=status)


def snapshot(**tables):
    return DatasetSnapshot(**{k: tuple(v) for k, v in tables.items()})


@pytest.fixture()
def sqlite_db(tmp_path):
    """Bind the model proxy to a temporary SQLite file with the NFL tables created."""
    database = SqliteDatabase(str(tmp_path / "nfl.db"))
    init_db(database)
    with db.connection_context():
        db.create_tables(NFL_TABLES)
    yield database
    close_db()


@pytest.fixture()
def client(sqlite_db):
    from fastapi.testclient import TestClient
    from main import app

    limiter.enabled = False
    yield TestClient(app)
    limiter.enabled = True
