from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    # Client-side clock keeps sub-second ordering on backends whose now() is coarse.
    return datetime.now(timezone.utc)
