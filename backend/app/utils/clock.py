from datetime import date, datetime, timezone
from typing import Any, Callable, Optional

# Every timestamp in the database is naive UTC; clocks follow the same convention.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def fixed_clock(instant: datetime) -> Clock:
    """Clock that always answers ``instant``; used by tests and replays."""
    return lambda: instant


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort conversion to a naive UTC datetime; ``None`` when unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
