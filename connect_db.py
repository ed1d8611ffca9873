from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings

Base = declarative_base()

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")

def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """Create a SQLAlchemy engine for the given URL (defaults to settings.DATABASE_URL)."""
    database_url = database_url or settings.DATABASE_URL

    if database_url.startswith("sqlite"):
        # Requests are served from a worker thread, not the one that opened the connection
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in IN_MEMORY_SQLITE_URLS:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **engine_kwargs)

    return create_engine(database_url, pool_pre_ping=True)

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(engine: Engine):
    """Create all tables known to the models module."""
    import models.models  # noqa: F401 - registers tables on Base.metadata
    Base.metadata.create_all(bind=engine)
