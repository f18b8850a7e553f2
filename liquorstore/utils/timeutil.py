# utils/timeutil.py
from datetime import date, datetime, time, timezone


def parse_hhmm(text) -> time | None:
    # "17:00" -> time(17, 0). Anything unparseable means "not set".
    if isinstance(text, time):
        return text
    if not text or not isinstance(text, str):
        return None
    try:
        hour, minute = text.strip().split(":")[:2]
        return time(int(hour), int(minute))
    except ValueError:
        return None


def format_hhmm(t: time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"


def format_12h(t: time) -> str:
    # time(8, 5) -> "8:05 AM", time(0, 30) -> "12:30 AM"
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d} {suffix}"


def readable_timestamp(dt: datetime) -> str:
    # US-English form stored next to createdAt, e.g. "Mon, Oct 19, 2026, 3:45 PM"
    return f"{dt:%a, %b} {dt.day}, {dt.year}, {format_12h(dt.time())}"


def parse_timestamp(value) -> datetime | None:
    """
    Normalise a stored createdAt value into a datetime.

    Accepts datetime objects, ISO-8601 strings, Firestore-style
    {"seconds": n} mappings and objects exposing to_datetime()
    (Firestore DatetimeWithNanoseconds already is a datetime).
    Returns None when the value cannot be interpreted.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if isinstance(value, dict) and "seconds" in value:
        return datetime.fromtimestamp(int(value["seconds"]), tz=timezone.utc)
    if hasattr(value, "to_datetime"):
        return value.to_datetime()
    return None


def align_tz(dt: datetime, reference: datetime) -> datetime:
    # Naive values are read as UTC when compared against aware ones.
    if dt.tzinfo is not None and reference.tzinfo is None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    if dt.tzinfo is None and reference.tzinfo is not None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
