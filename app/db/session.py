from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings

Base = declarative_base()


def get_database_uri(elevated: bool = True) -> str:
    """
    Pick the connection string for the API.

    The service-role URI is used when configured, otherwise the restricted
    (row-level-security bound) URI.
    """
    if elevated and settings.DATABASE_SERVICE_URI:
        return settings.DATABASE_SERVICE_URI
    return settings.DATABASE_URI


def enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(uri: str) -> Engine:
    if uri.startswith("sqlite"):
        engine = create_engine(uri, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", enable_sqlite_foreign_keys)
        return engine
    return create_engine(uri, pool_pre_ping=True)


engine = build_engine(get_database_uri())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
