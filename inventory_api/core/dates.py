from datetime import date, datetime, time, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_date(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            return date.fromisoformat(value_text[:10])
        except ValueError:
            return None
    return None


def start_of_day(value) -> datetime | None:
    day = normalize_date(value)
    if day is None:
        return None
    return datetime.combine(day, time.min)


def end_of_day(value) -> datetime | None:
    day = normalize_date(value)
    if day is None:
        return None
    return datetime.combine(day, time.max)
