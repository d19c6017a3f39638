from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings
from models.sqlite_config import (
    apply_sqlite_pragmas,
    is_memory_sqlite_url,
    is_sqlite_url,
    sqlite_connect_args,
)


class Base(DeclarativeBase):
    pass


def _engine_options(url: str) -> dict:
    options = {"connect_args": sqlite_connect_args(url), "echo": settings.debug}
    if is_memory_sqlite_url(url):
        # an in-memory database lives on a single connection
        options["poolclass"] = StaticPool
    return options


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

if is_sqlite_url(settings.database_url):

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        apply_sqlite_pragmas(dbapi_connection)


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    from models import domain  # noqa: F401

    Base.metadata.create_all(bind=engine)
