"""Clock helpers used for time slot status."""

from __future__ import annotations

from datetime import datetime, time


def current_local_datetime() -> datetime:
    """Return the current local wall-clock time."""
    return datetime.now()


def iso_weekday(value: datetime) -> int:
    """Weekday number with Monday = 1 and Sunday = 7."""
    return value.isoweekday()


def minutes_since_midnight(value: datetime) -> int:
    return value.hour * 60 + value.minute


def parse_hhmm_time(value: str) -> time:
    """Parse time from HH:MM format string (single-digit hours allowed)."""
    text = value.strip()
    if len(text) == 4 and text[1] == ":":
        text = f"0{text}"
    parsed: time = time.fromisoformat(text)
    return time(hour=parsed.hour, minute=parsed.minute)


def hhmm_to_minutes(value: str) -> int | None:
    """Minutes since midnight of an ``HH:MM`` cell; None when it is not a clock time."""
    try:
        parsed = parse_hhmm_time(value)
    except ValueError:
        return None
    return parsed.hour * 60 + parsed.minute
