from peewee import CharField

from db.base import BaseModel


class Player(BaseModel):
    name = CharField(max_length=100, primary_key=True)
    position = CharField(max_length=5, null=True)

    class Meta:
        table_name = "players"

    def __repr__(self):
        return f"<Player(name='{self.name}', position={self.position})>"
