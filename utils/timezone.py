"""Invoice dates are shown in Indonesian local time (WIB by default)."""

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "Asia/Jakarta"


def to_local(dt: datetime, tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """
    Convert an aware datetime to a local timezone for display.

    Args:
        dt: Timezone-aware datetime
        tz_name: IANA timezone name (e.g., "Asia/Makassar")

    Raises:
        ValueError: If datetime is naive or timezone name is invalid
    """
    if dt.tzinfo is None:
        raise ValueError(
            "Cannot convert naive datetime. Datetime must be timezone-aware."
        )

    try:
        local_tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {tz_name}")

    return dt.astimezone(local_tz)


def local_date(value: date | datetime, tz_name: str = DEFAULT_TIMEZONE) -> date:
    """
    Calendar date of a document date as seen in tz_name.

    Plain dates and naive datetimes are taken as already local.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return to_local(value, tz_name).date()
    return value
