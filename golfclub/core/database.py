# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and connection helpers."""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine

from golfclub.core.config import settings


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _configure_sqlite_connection(dbapi_conn, _record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()
    # SQLite's built-in lower() folds ASCII only; match str.lower() like PostgreSQL does.
    dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine; pool tuning applies only to server databases."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        eng = create_engine(url, **kwargs)
        event.listen(eng, "connect", _configure_sqlite_connection)
        return eng
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
        **kwargs,
    )


@contextmanager
def connection_scope(eng: Engine, conn: Optional[Connection] = None) -> Iterator[Connection]:
    """Reuse the caller's connection (and its transaction) or open a new one."""
    if conn is not None:
        yield conn
        return
    with eng.connect() as new_conn:
        yield new_conn


engine = build_engine(settings.DATABASE_URL)
