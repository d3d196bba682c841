from peewee import CharField, IntegerField

from db.base import BaseModel


class Injury(BaseModel):
    player = CharField(max_length=100)
    season = IntegerField(null=True)
    week = IntegerField(null=True)
    game_status = CharField(max_length=30, null=True)

    class Meta:
        table_name = "injuries"
        primary_key = False
