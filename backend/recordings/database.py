"""Database engine, session factory and request dependency."""
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

Base = declarative_base()


def create_db_engine(url: str) -> Engine:
    """Create an engine configured for the store behind ``url``."""
    if url.startswith("sqlite"):
        # SQLite: no pool settings needed
        options = {"connect_args": {"check_same_thread": False}}
    else:
        options = {
            "pool_pre_ping": True,
            "pool_size": 10,
            "max_overflow": 20,
        }
    return create_engine(url, **options)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the albums, artists and labels tables if missing."""
    # Register models on Base.metadata
    import recordings.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Dependency that provides a database session."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
