from peewee import CharField, FloatField, IntegerField, CompositeKey

from db.base import BaseModel


class PositionStatsBase(BaseModel):
    """Columns shared by every per-position stat table."""

    name = CharField(max_length=100)
    season = IntegerField()
    week = IntegerField()


class QuarterbackStats(PositionStatsBase):
    passing_yards = FloatField(null=True)
    passing_tds = IntegerField(null=True)
    interceptions = IntegerField(null=True)
    rushing_yards = FloatField(null=True)
    rushing_tds = IntegerField(null=True)
    passer_rating = FloatField(null=True)

    class Meta:
        table_name = "quarterback_stats"
        primary_key = CompositeKey("name", "season", "week")


class RunningbackStats(PositionStatsBase):
    carries = IntegerField(null=True)
    rushing_yards = FloatField(null=True)
    rushing_tds = IntegerField(null=True)
    receiving_yards = FloatField(null=True)
    receiving_tds = IntegerField(null=True)

    class Meta:
        table_name = "runningback_stats"
        primary_key = CompositeKey("name", "season", "week")


class WideoutStats(PositionStatsBase):
    receptions = IntegerField(null=True)
    targets = IntegerField(null=True)
    receiving_yards = FloatField(null=True)
    receiving_tds = IntegerField(null=True)

    class Meta:
        table_name = "wideout_stats"
        primary_key = CompositeKey("name", "season", "week")
