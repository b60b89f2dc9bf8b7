import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

from contacts.exceptions import StoreUnavailable

log = logging.getLogger(__name__)

# Base class for all SQLAlchemy models
Base = declarative_base()


# ============================================================
# ENGINE + SESSION FACTORY
# ============================================================

def create_db_engine(url: str, pool_size: int = 10) -> Engine:
    """
    Build the engine that owns the connection pool.
    The pool is capped at pool_size connections (no overflow).
    """
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ============================================================
# SCHEMA
# ============================================================

def init_schema(engine: Engine) -> None:
    """Create the contacts table and its indexes if missing."""
    # Register the models on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    log.info("DB ready (contacts table)")


def ping(engine: Engine) -> None:
    """Run a trivial query, raising StoreUnavailable when the DB is unreachable."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise StoreUnavailable(str(e)) from e


# ============================================================
# FASTAPI DEPENDENCY
# ============================================================

def get_db(request: Request):
    """
    FastAPI-compatible database dependency.
    Opens a session from the app's own pool and closes it automatically.
    """
    db = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()
