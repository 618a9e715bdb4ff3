from datetime import datetime, timezone
from typing import Optional, Union


class InvalidDateError(ValueError):
    """Raised when a value cannot be read as a point in time."""


def _to_utc(dt: datetime) -> datetime:
    # Naive values are taken as UTC already
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_utmify_date(date: Union[datetime, str, None]) -> Optional[str]:
    """
    Formats a datetime (or ISO-8601 text) as 'YYYY-MM-DD HH:MM:SS' in UTC,
    the only date format Utmify accepts. Sub-second precision is truncated.
    Returns None for None or an empty string.
    """
    if date is None or date == "":
        return None

    if isinstance(date, str):
        try:
            dt = datetime.fromisoformat(date.strip())
        except ValueError:
            raise InvalidDateError(f"Could not parse date: {date!r}")
    elif isinstance(date, datetime):
        dt = date
    else:
        raise InvalidDateError(
            f"Unsupported date type {type(date).__name__}: {date!r}"
        )

    try:
        utc = _to_utc(dt).replace(tzinfo=None, microsecond=0)
    except OverflowError as e:
        raise InvalidDateError(f"Date out of range in UTC: {date!r}") from e
    return utc.isoformat(sep=" ")
