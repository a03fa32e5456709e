"""In-memory, time-boxed holder for the last fetched value."""

import logging
import os
from datetime import datetime, timedelta
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=5)

T = TypeVar("T")


def get_cache_ttl() -> timedelta:
    """Get cache validity window from env or default (5 minutes)."""
    val = os.environ.get("PRICE_CACHE_TTL_SECONDS")
    if not val:
        return DEFAULT_TTL
    try:
        seconds = float(val)
    except ValueError:
        logger.warning("PRICE_CACHE_TTL_SECONDS=%r is not a number, using default", val)
        return DEFAULT_TTL
    return timedelta(seconds=max(seconds, 0))


class PriceCache(Generic[T]):
    """
    Holds one value and the time it was stored.

    The value is served only while ``now - fetched_at < ttl``; an expired
    entry is reported as absent but kept until replaced or invalidated.
    """

    def __init__(
        self,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.ttl = ttl if ttl is not None else get_cache_ttl()
        self._clock = clock
        self._value: T | None = None
        self._fetched_at: datetime | None = None

    def get(self) -> T | None:
        if self._value is None or self._fetched_at is None:
            return None
        if self._clock() - self._fetched_at < self.ttl:
            return self._value
        return None

    def set(self, value: T) -> None:
        self._value = value
        self._fetched_at = self._clock()

    def invalidate(self) -> None:
        self._value = None
        self._fetched_at = None
        logger.debug("Price cache cleared")
