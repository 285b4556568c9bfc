"""Astro cache: serves provider data until the location's next local midnight."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from astrocache.cache.clock import Clock, SystemClock
from astrocache.errors import UpstreamApiError, ValidationError
from astrocache.ingest.expiry import compute_expiry
from astrocache.ingest.response_parser import ProviderFailure, parse_response
from astrocache.ingest.weatherstack_client import WeatherstackClient
from astrocache.models.astro import AstroRecord, CacheEntry, CacheStats
from astrocache.models.common import CacheKey, make_cache_key

logger = logging.getLogger(__name__)

ExpiryCalculator = Callable[[str, str], datetime]


class AstroCache:
    """Process-lifetime cache of astro records keyed by location and day.

    The lock guards the entry map and counters only; it is not held
    while the provider request is in flight, so two concurrent misses
    for the same key may both fetch. The store step re-checks the map
    and keeps an entry that is already fresh.
    """

    def __init__(
        self,
        client: WeatherstackClient,
        clock: Clock | None = None,
        expiry_calculator: ExpiryCalculator = compute_expiry,
    ):
        self.client = client
        self.clock = clock or SystemClock()
        self.expiry_calculator = expiry_calculator
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._expired = 0
        self._errors = 0

    def get_astro(self, location: str) -> AstroRecord:
        """Resolve astro data for a location, fetching on miss or expiry.

        Raises ValidationError for a blank location and another AstroError
        subclass for any upstream, decode or expiry failure. Failures are
        never cached and never fall back to a stale entry.
        """
        if location is None or not location.strip():
            raise ValidationError("location must not be empty")

        now = self.clock.now()
        key = make_cache_key(location, now)

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.is_fresh(now):
                self._hits += 1
                logger.info("Served %s from cache", key)
                return entry.record
            if entry is None:
                self._misses += 1
            else:
                self._expired += 1
                logger.info(
                    "Cached value for %s expired at %s (now %s)",
                    key, entry.expires_at.isoformat(), now.isoformat(),
                )

        try:
            record = self._fetch(location)
        except Exception:
            with self._lock:
                self._errors += 1
            raise

        return self._store(key, record)

    def _fetch(self, location: str) -> AstroRecord:
        response = self.client.get_forecast(location)
        result = parse_response(response.status_code, response.body)
        if isinstance(result, ProviderFailure):
            err = result.api_error
            logger.warning(
                "Provider error for %r: status=%d code=%d type=%s info=%s",
                location, result.status_code, err.code, err.type, err.info,
            )
            raise UpstreamApiError(err, result.status_code)

        expires_at = self.expiry_calculator(result.localtime, result.timezone_id)
        return AstroRecord(
            name=result.name,
            region=result.region,
            country=result.country,
            date=result.date,
            astro=result.astro,
            expires_at=expires_at,
        )

    def _store(self, key: CacheKey, record: AstroRecord) -> AstroRecord:
        with self._lock:
            current = self._entries.get(key)
            if current is not None and current.is_fresh(self.clock.now()):
                logger.info("Concurrent fetch already refreshed %s", key)
                return current.record
            self._entries[key] = CacheEntry(record=record, expires_at=record.expires_at)
        logger.info("Served %s from fresh API request", key)
        return record

    def peek(self, key: CacheKey) -> CacheEntry | None:
        """Inspection hook: the stored entry for a key, fresh or stale."""
        with self._lock:
            return self._entries.get(key)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                entries=len(self._entries),
                hits=self._hits,
                misses=self._misses,
                expired=self._expired,
                errors=self._errors,
            )

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        """Inspection hook: number of stored entries, fresh or stale."""
        with self._lock:
            return len(self._entries)
