# mynetwrk/models/base.py
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

# Base class for all ORM models
Base = declarative_base()


def _uuid() -> str:
    return str(uuid.uuid4())


def utc_naive(dt: datetime) -> datetime:
    """All timestamps are stored as naive UTC so SQLite and Postgres compare alike."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def _now() -> datetime:
    return utc_naive(datetime.now(timezone.utc))
