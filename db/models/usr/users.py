from peewee import AutoField, CharField, DateTimeField

from db.base import BaseModel


class User(BaseModel):
    id = AutoField()
    username = CharField(max_length=255, unique=True)
    password = CharField(max_length=255)  # bcrypt hash
    created_at = DateTimeField(null=True)

    class Meta:
        table_name = "users"

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
