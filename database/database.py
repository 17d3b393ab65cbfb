import os
import contextlib
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from database.models import Base

logger = logging.getLogger(__name__)

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///matching.db")

# Bound lazily by init_engine so importing this module never connects
SessionLocal = sessionmaker(autoflush=False)

_engine: Optional[Engine] = None


def init_engine(url: Optional[str] = None, echo: bool = False) -> Engine:
    """Create the engine and bind SessionLocal to it."""
    global _engine
    url = url or DATABASE_URL

    connect_args = {}
    if url.startswith("sqlite"):
        # Sessions are opened from evaluation worker threads
        connect_args["check_same_thread"] = False

    _engine = create_engine(url, echo=echo, connect_args=connect_args)
    SessionLocal.configure(bind=_engine)
    logger.info(f"Database engine initialized ({_engine.url.render_as_string(hide_password=True)})")
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        return init_engine()
    return _engine


def create_tables(engine: Optional[Engine] = None) -> None:
    Base.metadata.create_all(engine or get_engine())


@contextlib.contextmanager
def db_session_scope(session_factory: Optional[sessionmaker] = None):
    """Provide a transactional scope around a series of operations."""
    if session_factory is None:
        get_engine()
        session_factory = SessionLocal

    session: Session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
