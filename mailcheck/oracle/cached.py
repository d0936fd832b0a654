"""Cached domain oracle decorator."""

from datetime import datetime, timedelta

from mailcheck.core.datetime_utils import utc_now

from .base import BaseDomainOracle


class CachedOracle(BaseDomainOracle):
    """
    Decorator that caches oracle answers to reduce lookups.

    Only caches positive answers (a domain without records may get them later).
    Failures are never cached.
    """

    def __init__(
        self,
        oracle: BaseDomainOracle,
        cache_ttl_hours: int = 24,
    ) -> None:
        """
        Initialize cached oracle.

        Args:
            oracle: The underlying oracle to wrap
            cache_ttl_hours: How long to cache positive answers
        """
        self._oracle = oracle
        self._mail_cache: dict[str, datetime] = {}
        self._registered_cache: dict[str, datetime] = {}
        self._ttl = timedelta(hours=cache_ttl_hours)

    @property
    def cache_ttl(self) -> timedelta:
        """How long positive answers are kept."""
        return self._ttl

    @property
    def provider_name(self) -> str:  # type: ignore[override]
        """Return combined provider name."""
        return f"cached:{self._oracle.provider_name}"

    async def has_mail_record(self, domain: str) -> bool:
        """Check for a mail record, using cache if available."""
        cache_key = domain.lower().strip()
        if self._is_cached(self._mail_cache, cache_key):
            return True

        result = await self._oracle.has_mail_record(domain)
        if result:
            self._prune()
            self._mail_cache[cache_key] = utc_now()
            # A domain with a mail record is registered too
            self._registered_cache[cache_key] = utc_now()
        return result

    async def is_registered(self, domain: str) -> bool:
        """Check registration, using cache if available."""
        cache_key = domain.lower().strip()
        if self._is_cached(self._registered_cache, cache_key):
            return True

        result = await self._oracle.is_registered(domain)
        if result:
            self._prune()
            self._registered_cache[cache_key] = utc_now()
        return result

    def _is_cached(self, cache: dict[str, datetime], cache_key: str) -> bool:
        """Check for an unexpired cache entry."""
        cached_at = cache.get(cache_key)
        if cached_at is None:
            return False
        if utc_now() - cached_at < self._ttl:
            return True
        # Expired - remove from cache
        del cache[cache_key]
        return False

    def _prune(self) -> None:
        """Drop every expired entry."""
        now = utc_now()
        for cache in (self._mail_cache, self._registered_cache):
            expired = [key for key, cached_at in cache.items() if now - cached_at >= self._ttl]
            for key in expired:
                del cache[key]

    def clear_cache(self) -> None:
        """Clear all cached answers."""
        self._mail_cache.clear()
        self._registered_cache.clear()

    def cache_size(self) -> int:
        """Return number of cached domains."""
        return len(self._mail_cache.keys() | self._registered_cache.keys())
