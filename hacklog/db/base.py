# hacklog/db/base.py
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def touch(obj) -> None:
    """
    Refresca obj.updated_at garantizando que siempre crece, aunque dos
    mutaciones caigan en el mismo microsegundo.
    """
    now = utcnow()
    prev = obj.updated_at
    if prev is not None:
        # SQLite devuelve datetimes naive (en UTC)
        if prev.tzinfo is None:
            prev = prev.replace(tzinfo=timezone.utc)
        if now <= prev:
            now = prev + timedelta(microseconds=1)
    obj.updated_at = now
