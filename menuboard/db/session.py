"""Engine and sessions for the snapshot store."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from menuboard.core.config import settings


def _connect_args(database_url: str) -> dict[str, bool]:
    # SQLite connections are shared between the request threads.
    return {"check_same_thread": False} if database_url.startswith("sqlite") else {}


engine = create_engine(settings.database_url, connect_args=_connect_args(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session used to read and store sheet snapshots."""
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
