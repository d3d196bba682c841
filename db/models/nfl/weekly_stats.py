from peewee import CharField, FloatField, IntegerField, CompositeKey

from db.base import BaseModel


class WeeklyStats(BaseModel):
    """One row per player per game-week."""

    name = CharField(max_length=100)
    season = IntegerField()
    week = IntegerField()
    fantasy_points = FloatField(null=True)
    fantasy_points_ppr = FloatField(null=True)
    target_share = FloatField(null=True)
    air_yards_share = FloatField(null=True)

    class Meta:
        table_name = "weekly_stats"
        primary_key = CompositeKey("name", "season", "week")
