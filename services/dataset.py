"""
Dataset Accessor

Read-only access to the NFL tables. Rows are converted into frozen records
and gathered into a `DatasetSnapshot` that the analytics views compute over;
nothing downstream touches peewee models or mutates the snapshot.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

from peewee import Database, PeeweeException, fn
from playhouse.pool import MaxConnectionsExceeded

from core.exceptions import DataAccessError
from core.logging import get_logger
from db.models.nfl import (
    GameWeather,
    Injury,
    Player,
    QuarterbackStats,
    RunningbackStats,
    WeeklyStats,
    WideoutStats,
)

WEEK_MIN = 1
WEEK_MAX = 18

_INT_RE = re.compile(r"^\s*(\d+)\s*$")


def is_regular_week(week: Optional[int]) -> bool:
    """True when `week` falls inside the regular-season week domain."""
    return week is not None and WEEK_MIN <= week <= WEEK_MAX


def _to_int(value) -> Optional[int]:
    """Parse an integer column that may be stored as text; malformed -> None."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    match = _INT_RE.match(str(value))
    return int(match.group(1)) if match else None


# ------------------------------ Records ------------------------------ #


@dataclass(frozen=True)
class PlayerRecord:
    name: str
    position: Optional[str]


@dataclass(frozen=True)
class WeeklyStatRecord:
    name: str
    season: int
    week: int
    fantasy_points: Optional[float] = None
    fantasy_points_ppr: Optional[float] = None
    target_share: Optional[float] = None
    air_yards_share: Optional[float] = None

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.name, self.season, self.week)


@dataclass(frozen=True)
class QuarterbackStatRecord:
    name: str
    season: int
    week: int
    passing_yards: float = 0.0
    passing_tds: int = 0
    interceptions: int = 0
    rushing_yards: float = 0.0
    rushing_tds: int = 0
    passer_rating: Optional[float] = None

    position = "QB"

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.name, self.season, self.week)


@dataclass(frozen=True)
class RunningbackStatRecord:
    name: str
    season: int
    week: int
    carries: int = 0
    rushing_yards: float = 0.0
    rushing_tds: int = 0
    receiving_yards: float = 0.0
    receiving_tds: int = 0

    position = "RB"

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.name, self.season, self.week)


@dataclass(frozen=True)
class WideoutStatRecord:
    name: str
    season: int
    week: int
    receptions: int = 0
    targets: int = 0
    receiving_yards: float = 0.0
    receiving_tds: int = 0

    position = "WR"

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.name, self.season, self.week)


PositionStatRecord = Union[QuarterbackStatRecord, RunningbackStatRecord, WideoutStatRecord]


@dataclass(frozen=True)
class WeatherRecord:
    season: int
    week: int
    home_team: str
    away_team: str
    weather_text: Optional[str] = None
    temperature_text: Optional[str] = None
    wind_text: Optional[str] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    @property
    def key(self) -> tuple[int, int, str]:
        return (self.season, self.week, self.home_team)


@dataclass(frozen=True)
class InjuryRecord:
    player: str
    season: Optional[int]
    week: Optional[int]
    game_status: Optional[str]


class Table(str, Enum):
    PLAYERS = "players"
    WEEKLY_STATS = "weekly_stats"
    QB_STATS = "quarterback_stats"
    RB_STATS = "runningback_stats"
    WR_STATS = "wideout_stats"
    WEATHER = "weather"
    INJURIES = "injuries"


@dataclass(frozen=True)
class DatasetSnapshot:
    """Immutable view over the tables a single request needs."""

    players: tuple[PlayerRecord, ...] = ()
    weekly_stats: tuple[WeeklyStatRecord, ...] = ()
    qb_stats: tuple[QuarterbackStatRecord, ...] = ()
    rb_stats: tuple[RunningbackStatRecord, ...] = ()
    wr_stats: tuple[WideoutStatRecord, ...] = ()
    weather: tuple[WeatherRecord, ...] = ()
    injuries: tuple[InjuryRecord, ...] = ()
    tables: frozenset[Table] = field(default_factory=frozenset)

    def position_stats(self) -> tuple[PositionStatRecord, ...]:
        return self.qb_stats + self.rb_stats + self.wr_stats

    def positions_by_name(self) -> dict[str, Optional[str]]:
        return {p.name: p.position for p in self.players}


# ------------------------------ Accessor ------------------------------ #


class DatasetAccessor:
    """
    Reads NFL tables through an explicitly passed peewee database.

    Every `snapshot()` call acquires one connection from the pool for the
    duration of the read and releases it before returning.
    """

    def __init__(self, database: Database):
        self.database = database
        self.log = get_logger("dataset")

    def snapshot(
        self,
        tables: Iterable[Table],
        season: Optional[int] = None,
        position: Optional[str] = None,
    ) -> DatasetSnapshot:
        """
        Read the requested tables into an immutable snapshot.

        Args:
            tables: Tables the calling view needs
            season: Optional season filter for weekly/position/weather/injury rows
            position: Optional roster position filter for the players table, case-insensitive

        Raises:
            DataAccessError: If any read fails
        """
        tables = frozenset(tables)
        readers = {
            Table.PLAYERS: ("players", lambda: self.players(position=position)),
            Table.WEEKLY_STATS: ("weekly_stats", lambda: self.weekly_stats(season=season)),
            Table.QB_STATS: ("qb_stats", lambda: self.quarterback_stats(season=season)),
            Table.RB_STATS: ("rb_stats", lambda: self.runningback_stats(season=season)),
            Table.WR_STATS: ("wr_stats", lambda: self.wideout_stats(season=season)),
            Table.WEATHER: ("weather", lambda: self.weather(season=season)),
            Table.INJURIES: ("injuries", self.injuries),
        }

        values: dict[str, tuple] = {}
        current = None
        try:
            with self.database.connection_context():
                for table in Table:
                    if table not in tables:
                        continue
                    current = table
                    attr, reader = readers[table]
                    values[attr] = reader()
        except (PeeweeException, MaxConnectionsExceeded) as e:
            table_name = current.value if current else "connection"
            self.log.error("dataset_read_failed", table=table_name, error=str(e))
            raise DataAccessError(table_name, e) from e

        self.log.debug(
            "dataset_snapshot_read",
            tables=sorted(t.value for t in tables),
            rows={k: len(v) for k, v in values.items()},
        )
        return DatasetSnapshot(tables=tables, **values)

    # Individual readers expect an open connection (see snapshot()).

    def players(self, position: Optional[str] = None) -> tuple[PlayerRecord, ...]:
        query = Player.select()
        if position is not None:
            query = query.where(fn.UPPER(Player.position) == position.upper())
        return tuple(PlayerRecord(name=p.name, position=p.position) for p in query)

    def weekly_stats(self, season: Optional[int] = None) -> tuple[WeeklyStatRecord, ...]:
        query = WeeklyStats.select()
        if season is not None:
            query = query.where(WeeklyStats.season == season)
        return tuple(
            WeeklyStatRecord(
                name=row.name,
                season=row.season,
                week=row.week,
                fantasy_points=row.fantasy_points,
                fantasy_points_ppr=row.fantasy_points_ppr,
                target_share=row.target_share,
                air_yards_share=row.air_yards_share,
            )
            for row in query
        )

    def quarterback_stats(self, season: Optional[int] = None) -> tuple[QuarterbackStatRecord, ...]:
        query = QuarterbackStats.select()
        if season is not None:
            query = query.where(QuarterbackStats.season == season)
        return tuple(
            QuarterbackStatRecord(
                name=row.name,
                season=row.season,
                week=row.week,
                passing_yards=row.passing_yards or 0.0,
                passing_tds=row.passing_tds or 0,
                interceptions=row.interceptions or 0,
                rushing_yards=row.rushing_yards or 0.0,
                rushing_tds=row.rushing_tds or 0,
                passer_rating=row.passer_rating,
            )
            for row in query
        )

    def runningback_stats(self, season: Optional[int] = None) -> tuple[RunningbackStatRecord, ...]:
        query = RunningbackStats.select()
        if season is not None:
            query = query.where(RunningbackStats.season == season)
        return tuple(
            RunningbackStatRecord(
                name=row.name,
                season=row.season,
                week=row.week,
                carries=row.carries or 0,
                rushing_yards=row.rushing_yards or 0.0,
                rushing_tds=row.rushing_tds or 0,
                receiving_yards=row.receiving_yards or 0.0,
                receiving_tds=row.receiving_tds or 0,
            )
            for row in query
        )

    def wideout_stats(self, season: Optional[int] = None) -> tuple[WideoutStatRecord, ...]:
        query = WideoutStats.select()
        if season is not None:
            query = query.where(WideoutStats.season == season)
        return tuple(
            WideoutStatRecord(
                name=row.name,
                season=row.season,
                week=row.week,
                receptions=row.receptions or 0,
                targets=row.targets or 0,
                receiving_yards=row.receiving_yards or 0.0,
                receiving_tds=row.receiving_tds or 0,
            )
            for row in query
        )

    def weather(self, season: Optional[int] = None) -> tuple[WeatherRecord, ...]:
        records = []
        for row in GameWeather.select():
            row_season = _to_int(row.season)
            row_week = _to_int(row.week)
            # Text season/week that doesn't parse cannot be joined to anything
            if row_season is None or row_week is None:
                continue
            if season is not None and row_season != season:
                continue
            records.append(
                WeatherRecord(
                    season=row_season,
                    week=row_week,
                    home_team=row.home_team,
                    away_team=row.away_team,
                    weather_text=row.weather,
                    temperature_text=row.temperature,
                    wind_text=row.wind,
                    home_score=row.home_score,
                    away_score=row.away_score,
                )
            )
        return tuple(records)

    def injuries(self) -> tuple[InjuryRecord, ...]:
        # Never season filtered: recurrence looks past the exposure season
        query = Injury.select()
        return tuple(
            InjuryRecord(
                player=row.player,
                season=row.season,
                week=row.week,
                game_status=row.game_status,
            )
            for row in query
        )
