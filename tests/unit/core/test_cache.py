"""Tests for the per-process response cache."""

from app.core.cache import ResponseCache


class TestResponseCache:

    def test_miss_returns_none(self, clock):
        cache = ResponseCache(300, clock=clock)
        assert cache.get("p1") is None

    def test_hit_within_ttl(self, clock):
        cache = ResponseCache(300, clock=clock)
        cache.set("p1", {"name": "Ana"})
        clock.advance(299)
        assert cache.get("p1") == {"name": "Ana"}

    def test_expires_at_ttl(self, clock):
        cache = ResponseCache(300, clock=clock)
        cache.set("p1", {"name": "Ana"})
        clock.advance(300)
        assert cache.get("p1") is None

    def test_expired_entry_is_evicted_on_read(self, clock):
        cache = ResponseCache(10, clock=clock)
        cache.set("p1", 1)
        clock.advance(11)
        cache.get("p1")
        assert len(cache) == 0

    def test_set_restarts_window(self, clock):
        cache = ResponseCache(10, clock=clock)
        cache.set("p1", 1)
        clock.advance(8)
        cache.set("p1", 2)
        clock.advance(8)
        assert cache.get("p1") == 2

    def test_invalidate_and_clear(self, clock):
        cache = ResponseCache(10, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.invalidate("a")
        assert "a" not in cache
        assert "b" in cache
        cache.clear()
        assert len(cache) == 0

    def test_alias_reads_canonical_entry(self, clock):
        cache = ResponseCache(300, clock=clock)
        cache.set("c1", {"date": "2024-01-08"}, aliases=("p1-c1",))
        assert cache.get("p1-c1") == {"date": "2024-01-08"}
        assert len(cache) == 1

    def test_invalidating_canonical_drops_alias(self, clock):
        cache = ResponseCache(300, clock=clock)
        cache.set("c1", 1, aliases=("p1-c1",))
        cache.invalidate("c1")
        assert cache.get("p1-c1") is None

    def test_invalidate_by_alias(self, clock):
        cache = ResponseCache(300, clock=clock)
        cache.set("c1", 1, aliases=("legacy-1",))
        cache.invalidate("legacy-1")
        assert "c1" not in cache
