"""Reusable SQLAlchemy column mixins and UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops the offset on the way back)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class TimestampMixin:
    """Adds CreatedAt (set once) and LastEdited (set on every update) columns."""

    created_at: Mapped[datetime] = mapped_column(
        "CreatedAt", DateTime(timezone=True), default=utcnow, nullable=False
    )
    last_edited: Mapped[Optional[datetime]] = mapped_column(
        "LastEdited", DateTime(timezone=True), nullable=True, default=None
    )

    def touch(self) -> datetime:
        """Refresh LastEdited, never moving it backwards."""
        now = utcnow()
        previous = as_utc(self.last_edited)
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        self.last_edited = now
        return now
