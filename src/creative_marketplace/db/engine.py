"""
Database engine and session management

The engine is created lazily so tooling and tests can import the package
without a database. When DATABASE_URL is missing or the engine cannot be
created, get_db yields None and callers degrade: queries return empty
results, mutations raise DatabaseUnavailableError.
"""
import logging
import threading
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..config import config

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None
_engine_lock = threading.Lock()
_unavailable_logged = False


def _build_engine(url: str) -> Engine:
    """Create a SQLAlchemy engine with pool settings suited to the backend"""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {}
    if url.startswith("postgresql"):
        connect_args = {
            "connect_timeout": 10,
            "application_name": "creative_marketplace",
        }

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
        pool_recycle=900,
        pool_timeout=30,
        echo=False,
        connect_args=connect_args,
    )


def get_engine() -> Optional[Engine]:
    """Return the shared engine, creating it on first use; None when unavailable"""
    global _engine, _session_factory, _unavailable_logged

    if _engine is not None:
        return _engine

    if not config.DATABASE_URL:
        if not _unavailable_logged:
            logger.warning("[Database] DATABASE_URL not set - database features are disabled")
            _unavailable_logged = True
        return None

    with _engine_lock:
        if _engine is None:
            try:
                _engine = _build_engine(config.DATABASE_URL)
                _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
                logger.info("[Database] Engine created")
            except Exception as e:
                logger.warning(f"[Database] Failed to connect: {e}")
                _engine = None
                _session_factory = None
    return _engine


def get_session_factory() -> Optional[sessionmaker]:
    if get_engine() is None:
        return None
    return _session_factory


def reset_engine() -> None:
    """Dispose the shared engine so the next call rebuilds it from config"""
    global _engine, _session_factory, _unavailable_logged
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
        _engine = None
        _session_factory = None
        _unavailable_logged = False


def get_db() -> Generator[Optional[Session], None, None]:
    """
    Get a database session, or None when no database is configured.
    Use as FastAPI dependency: db: Optional[Session] = Depends(get_db)
    """
    factory = get_session_factory()
    if factory is None:
        yield None
        return

    db = factory()
    try:
        yield db
    except Exception:
        try:
            db.rollback()
        except Exception as rollback_error:
            logger.warning(f"Error rolling back database session: {rollback_error}")
        raise
    finally:
        db.close()


def test_connection() -> bool:
    """Test database connection"""
    engine = get_engine()
    if engine is None:
        return False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection test successful")
        return True
    except Exception as e:
        logger.error(f"Database connection test failed: {e}", exc_info=True)
        return False


def init_db() -> bool:
    """Create tables that don't exist yet (dev convenience; deployments use Alembic)"""
    from .base import Base
    from . import models  # noqa: F401  (register tables on Base.metadata)

    engine = get_engine()
    if engine is None:
        return False
    Base.metadata.create_all(bind=engine)
    return True
