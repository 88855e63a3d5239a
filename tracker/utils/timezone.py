"""
UTC time utilities
"""
from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    """Current UTC time, truncated to millisecond resolution"""
    return truncate_to_millis(datetime.now(timezone.utc))


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop sub-millisecond precision"""
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive values and convert aware values to UTC"""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_utc_millis(dt: Optional[datetime]) -> Optional[datetime]:
    """ensure_utc + millisecond truncation, for values supplied by callers"""
    if dt is None:
        return None
    return truncate_to_millis(ensure_utc(dt))
