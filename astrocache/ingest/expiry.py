"""Expiry computation: the next local midnight at a remote location."""

import re
from datetime import UTC, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from astrocache.errors import MalformedLocalTime, UnknownTimeZone
from astrocache.models.common import LOCAL_TIME_FORMAT

LOCAL_TIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")


def compute_expiry(local_time_text: str, timezone_id: str) -> datetime:
    """Return the instant of the next midnight in ``timezone_id``.

    ``local_time_text`` is the location's own clock reading, formatted
    ``YYYY-MM-DD HH:MM`` (24-hour). The result is an aware UTC datetime so
    it compares correctly against any aware "now".
    """
    zone = _load_zone(timezone_id)
    if not isinstance(local_time_text, str) or not LOCAL_TIME_RE.fullmatch(local_time_text):
        raise MalformedLocalTime(
            f"local time {local_time_text!r} is not YYYY-MM-DD HH:MM"
        )
    try:
        local = datetime.strptime(local_time_text, LOCAL_TIME_FORMAT)
    except ValueError as e:
        raise MalformedLocalTime(
            f"cannot parse local time {local_time_text!r}: {e}"
        ) from e

    next_day = local.date() + timedelta(days=1)
    midnight = datetime.combine(next_day, time.min, tzinfo=zone)
    return midnight.astimezone(UTC)


def _load_zone(timezone_id: str) -> ZoneInfo:
    if not timezone_id:
        raise UnknownTimeZone("empty time zone identifier")
    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownTimeZone(f"unknown time zone {timezone_id!r}") from e
