"""Astro domain records served to callers and held in the cache."""

from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass(frozen=True)
class AstroData:
    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    moon_phase: str
    moon_illumination: int  # percent, 0-100


@dataclass(frozen=True)
class AstroRecord:
    name: str
    region: str
    country: str
    date: str  # forecast date as reported by the provider
    astro: AstroData
    expires_at: datetime

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "name": self.name,
            "region": self.region,
            "country": self.country,
            "astro": asdict(self.astro),
            "expires_at": self.expires_at.isoformat(),
        }


@dataclass(frozen=True)
class CacheEntry:
    record: AstroRecord
    expires_at: datetime  # next local midnight at the queried location

    def is_fresh(self, now: datetime) -> bool:
        return now < self.expires_at


@dataclass(frozen=True)
class ApiError:
    code: int
    type: str
    info: str


@dataclass(frozen=True)
class CacheStats:
    entries: int
    hits: int
    misses: int
    expired: int
    errors: int
