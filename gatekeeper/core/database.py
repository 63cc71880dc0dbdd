"""Database connection and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from gatekeeper.core.config import settings
from gatekeeper.models import Base


def _build_engine(url: str, echo: bool = False) -> Engine:
    """Create the engine; SQLite needs thread sharing since handlers run in a pool."""
    if url.startswith("sqlite://"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        # In-memory databases are per-connection; keep a single one alive.
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, pool_pre_ping=True, echo=echo)


engine = _build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create every table known to Base.metadata (no-op for existing tables)."""
    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Engine | None = None) -> None:
    """Drop every table known to Base.metadata."""
    Base.metadata.drop_all(bind=bind or engine)


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
