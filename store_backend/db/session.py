# File: store_backend/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


def build_engine(database_url: str, *, ssl: bool = True) -> Engine:
    """
    Create the SQLAlchemy engine (and with it the connection pool).

    PostgreSQL connections ask for TLS without verifying the server
    certificate, which is what managed hosts with self-signed chains need.
    An in-memory SQLite URL gets a single shared connection so every
    request sees the same database.
    """
    connect_args: dict = {}
    engine_kwargs: dict = {"pool_pre_ping": True}

    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs = {"poolclass": StaticPool}
    elif database_url.startswith("postgresql"):
        connect_args["connect_timeout"] = 10
        if ssl:
            connect_args["sslmode"] = "require"

    return create_engine(database_url, connect_args=connect_args, **engine_kwargs)
