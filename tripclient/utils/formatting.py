from datetime import date, time, timedelta
from typing import List, Union


def format_time(value: Union[str, time, None]) -> str:
    """Trim a backend time of day to HH:mm, "10:00:00" -> "10:00"."""
    if not value:
        return ""
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return value[:5]


def format_date(value: Union[str, date]) -> str:
    # e.g. "Saturday, June 1, 2024"
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def date_range(start: date, end: date) -> List[date]:
    """Every calendar date from start to end, both inclusive."""
    if end < start:
        return []
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]
