from peewee import DatabaseProxy, Database, Model
from playhouse.pool import PooledPostgresqlDatabase

from core.settings import settings

# Bound at startup by init_db(); tests bind a SQLite database instead
db = DatabaseProxy()


class BaseModel(Model):
    class Meta:
        database = db


def build_database() -> Database:
    """Create the pooled Postgres database from settings."""
    return PooledPostgresqlDatabase(
        settings.db_name,
        user=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        max_connections=settings.db_max_connections,
        stale_timeout=settings.db_stale_timeout,
        timeout=settings.db_timeout,
    )


def init_db(database: Database | None = None) -> None:
    """
    Bind the model proxy and create the account table if it doesn't exist.

    The NFL tables are read-only for this service and are never created here.
    """
    if db.obj is None or database is not None:
        db.initialize(database or build_database())

    from db.models.usr.users import User

    with db.connection_context():
        db.create_tables([User], safe=True)


def close_db() -> None:
    """Close the current connection and release pooled connections."""
    if db.obj is None:
        return
    if not db.is_closed():
        db.close()
    if isinstance(db.obj, PooledPostgresqlDatabase):
        db.close_all()
