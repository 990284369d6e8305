"""
Date helpers shared by order creation and reporting.

All timestamps are stored as naive UTC datetimes.
"""
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

BARE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date or datetime string, None when it is missing or invalid"""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return to_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def parse_range_end(value: Optional[str]) -> Optional[datetime]:
    """
    Inclusive upper bound. A bare calendar date (YYYY-MM-DD) covers the
    whole day, up to 23:59:59.999.
    """
    parsed = parse_datetime(value)
    if parsed is None:
        return None
    if BARE_DATE_PATTERN.match(value.strip()):
        return datetime.combine(parsed.date(), time(23, 59, 59, 999000))
    return parsed


def combine_date_time(day: Optional[str], clock: Optional[str]) -> Optional[datetime]:
    """Requested delivery time from separate `date` and `time` form fields"""
    if not day:
        return None
    return parse_datetime(f"{day.strip()}T{(clock or '00:00').strip()}")


def last_n_days(n: int, today: Optional[date] = None) -> List[date]:
    """The n most recent UTC dates, oldest first, ending today"""
    today = today or datetime.utcnow().date()
    return [today - timedelta(days=offset) for offset in range(n - 1, -1, -1)]
