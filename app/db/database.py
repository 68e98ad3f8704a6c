# /halaqat-backend/app/db/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


def build_engine(database_url: str) -> Engine:
    """
    Creates the process-wide SQLAlchemy engine for a relational DATABASE_URL.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    # The 'check_same_thread' argument is only needed for SQLite.
    engine_args = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session sees its own empty database.
        engine_args["poolclass"] = StaticPool
    engine = create_engine(database_url, **engine_args)

    # SQLite ignores foreign keys unless asked per connection.
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine
