"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

CacheKey: TypeAlias = str

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"


def utc_now() -> datetime:
    return datetime.now(UTC)


def normalize_location(location: str) -> str:
    return location.strip().casefold()


def make_cache_key(location: str, now: datetime) -> CacheKey:
    """Key a lookup by normalized location and the caller's calendar day."""
    return f"{normalize_location(location)}:{now.strftime(DATE_FORMAT)}"
