from peewee import CharField, IntegerField

from db.base import BaseModel


class GameWeather(BaseModel):
    """
    Weather and final score for a single regular-season game.

    Season and week are stored as text in the source table; the dataset
    accessor parses them and drops rows that are not numeric.
    """

    season = CharField(max_length=8)
    week = CharField(max_length=8)
    weather = CharField(null=True)
    temperature = CharField(null=True)
    wind = CharField(null=True)
    home_team = CharField(max_length=5, column_name="Home Team")
    away_team = CharField(max_length=5, column_name="Away Team")
    home_score = IntegerField(null=True, column_name="Home Team Score")
    away_score = IntegerField(null=True, column_name="Away Team Score")

    class Meta:
        table_name = "weather_nfl_all_games_noplayoffs"
        primary_key = False
