"""
In-process record store.

All records live in a private in-memory SQLite database owned by a
RecordStore instance. Nothing is written to disk; a process restart loses
everything except the sample data re-applied at startup.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the store keeps naive UTC)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalise an incoming datetime to naive UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


class RecordStore:
    """
    Owns the in-memory database for one application instance.

    Sessions are handed out one at a time: the store lock is held for the
    lifetime of a session, so every request sees and writes a consistent
    snapshot.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock: Clock = clock or utcnow
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        # Import all models so every table is registered on Base.metadata
        from .. import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
            info={"clock": self.clock},
        )
        # Plain Lock: FastAPI may enter and exit a dependency on different threads
        self._lock = threading.Lock()

    def now(self) -> datetime:
        return self.clock()

    @contextmanager
    def session(self) -> Iterator[Session]:
        with self._lock:
            db = self._session_factory()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.debug("Record store disposed")


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session on the application's store."""
    with get_store(request).session() as db:
        yield db
