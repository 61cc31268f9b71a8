from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def start_of_year_millis(now: datetime | None = None) -> int:
    """Epoch millis of Jan 1 00:00 UTC of the year ``now`` falls in.

    Payments dated at or after this instant belong to the "current year",
    future-dated ones included.
    """
    now = now or now_utc()
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return to_epoch_millis(datetime(now.year, 1, 1, tzinfo=timezone.utc))
