"""UTC datetime utilities."""

from datetime import datetime, timedelta, timezone


def ms_to_datetime(ms: int) -> datetime:
    """Unix milliseconds -> timezone-aware UTC datetime (exact, no float rounding)."""
    return datetime.fromtimestamp(ms // 1000, tz=timezone.utc) + timedelta(milliseconds=ms % 1000)
