"""Tests for the result cache."""

from gd_client.cache import ResultCache

from conftest import FakeClock


class TestResultCache:
    """TTL semantics and lazy purge."""

    def test_miss(self, cache: ResultCache):
        """Unknown keys are absent."""
        assert cache.get("k") is None

    def test_fresh_hit(self, cache: ResultCache, clock: FakeClock):
        """Entries are served before their ttl elapses."""
        cache.put("k", "v", ttl=10)
        clock.advance(9.9)
        entry = cache.get("k")
        assert entry is not None
        assert entry.value == "v"

    def test_expired_at_ttl(self, cache: ResultCache, clock: FakeClock):
        """An entry is stale once now - created >= ttl."""
        cache.put("k", "v", ttl=10)
        clock.advance(10)
        assert cache.get("k") is None

    def test_expired_entry_purged(self, cache: ResultCache, clock: FakeClock):
        """The lookup that finds a stale entry removes it."""
        cache.put("k", "v", ttl=10)
        clock.advance(11)
        assert len(cache) == 1
        cache.get("k")
        assert len(cache) == 0

    def test_cached_none_is_a_hit(self, cache: ResultCache):
        """None values are distinguishable from misses."""
        cache.put("k", None, ttl=10)
        entry = cache.get("k")
        assert entry is not None
        assert entry.value is None

    def test_zero_ttl_stores_nothing(self, cache: ResultCache):
        """A ttl of zero disables caching."""
        cache.put("k", "v", ttl=0)
        assert len(cache) == 0

    def test_overwrite_restarts_ttl(self, cache: ResultCache, clock: FakeClock):
        """The last write wins with its own ttl window."""
        cache.put("k", "old", ttl=10)
        clock.advance(8)
        cache.put("k", "new", ttl=10)
        clock.advance(8)
        entry = cache.get("k")
        assert entry is not None
        assert entry.value == "new"

    def test_clear(self, cache: ResultCache):
        """clear() drops everything."""
        cache.put("a", 1, ttl=10)
        cache.put("b", 2, ttl=10)
        cache.clear()
        assert len(cache) == 0
