"""
Tests for the observance cache.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from federal_workdays.core.cache import (
    ObservanceCache,
    ObservanceKey,
    configure_default_cache,
    get_default_cache,
    reset_default_cache,
)
from federal_workdays.core.registry import USFederalHoliday
from federal_workdays.core.rules import observance_for


class TestObservanceKey:
    """Tests for the composite cache key."""

    def test_equal_when_both_fields_equal(self):
        a = ObservanceKey(USFederalHoliday.LABOR_DAY, 2018)
        b = ObservanceKey(USFederalHoliday.LABOR_DAY, 2018)
        assert a == b
        assert hash(a) == hash(b)

    def test_differs_by_year_or_holiday(self):
        key = ObservanceKey(USFederalHoliday.LABOR_DAY, 2018)
        assert key != ObservanceKey(USFederalHoliday.LABOR_DAY, 2019)
        assert key != ObservanceKey(USFederalHoliday.MEMORIAL_DAY, 2018)


class TestObservanceCache:
    """Tests for ObservanceCache."""

    def test_miss_then_hit(self, cache):
        first = cache.get(USFederalHoliday.NEW_YEARS_DAY, 2011)
        second = cache.get(USFederalHoliday.NEW_YEARS_DAY, 2011)

        assert first == second == date(2010, 12, 31)
        assert cache.stats() == {"hits": 1, "misses": 1, "size": 1}

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.get(USFederalHoliday.LABOR_DAY, 2018)

        clock.advance(599)
        cache.get(USFederalHoliday.LABOR_DAY, 2018)
        assert cache.stats()["hits"] == 1

        clock.advance(1)
        assert cache.get(USFederalHoliday.LABOR_DAY, 2018) == date(2018, 9, 3)
        assert cache.stats()["misses"] == 2

    def test_expiry_counts_from_write(self, cache, clock):
        """Reads do not extend an entry's lifetime."""
        cache.get(USFederalHoliday.LABOR_DAY, 2018)
        for _ in range(5):
            clock.advance(100)
            cache.get(USFederalHoliday.LABOR_DAY, 2018)
        clock.advance(100)
        cache.get(USFederalHoliday.LABOR_DAY, 2018)

        assert cache.stats()["misses"] == 2

    def test_least_recently_used_evicted(self, clock):
        cache = ObservanceCache(max_size=2, clock=clock)
        cache.get(USFederalHoliday.NEW_YEARS_DAY, 2018)
        cache.get(USFederalHoliday.LABOR_DAY, 2018)
        cache.get(USFederalHoliday.NEW_YEARS_DAY, 2018)
        cache.get(USFederalHoliday.CHRISTMAS_DAY, 2018)

        assert len(cache) == 2
        cache.get(USFederalHoliday.NEW_YEARS_DAY, 2018)
        assert cache.stats()["hits"] == 2
        cache.get(USFederalHoliday.LABOR_DAY, 2018)
        assert cache.stats()["misses"] == 4

    def test_expired_entries_evicted_first(self, clock):
        cache = ObservanceCache(max_size=2, ttl_seconds=10, clock=clock)
        cache.get(USFederalHoliday.NEW_YEARS_DAY, 2018)
        clock.advance(5)
        cache.get(USFederalHoliday.LABOR_DAY, 2018)
        clock.advance(6)
        cache.get(USFederalHoliday.CHRISTMAS_DAY, 2018)

        assert len(cache) == 2
        cache.get(USFederalHoliday.LABOR_DAY, 2018)
        assert cache.stats()["hits"] == 1

    def test_size_never_exceeds_bound(self, clock):
        cache = ObservanceCache(max_size=1000, clock=clock)
        for year in range(1900, 2050):
            for holiday in USFederalHoliday:
                cache.get(holiday, year)
        assert len(cache) == 1000

    def test_zero_size_stores_nothing(self, clock):
        cache = ObservanceCache(max_size=0, clock=clock)
        assert cache.get(USFederalHoliday.MEMORIAL_DAY, 2011) == date(2011, 5, 30)
        assert len(cache) == 0

    def test_zero_ttl_always_recomputes(self, clock):
        cache = ObservanceCache(ttl_seconds=0, clock=clock)
        cache.get(USFederalHoliday.MEMORIAL_DAY, 2011)
        cache.get(USFederalHoliday.MEMORIAL_DAY, 2011)
        assert cache.stats()["hits"] == 0
        assert cache.stats()["misses"] == 2

    @pytest.mark.parametrize("kwargs", [{"max_size": -1}, {"ttl_seconds": -1}])
    def test_negative_settings_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ObservanceCache(**kwargs)

    def test_clear(self, cache):
        cache.get(USFederalHoliday.MEMORIAL_DAY, 2011)
        cache.clear()
        assert cache.stats() == {"hits": 0, "misses": 0, "size": 0}

    def test_computation_errors_propagate(self, cache):
        with pytest.raises(ValueError):
            cache.get(USFederalHoliday.CHRISTMAS_DAY, 10000)
        assert len(cache) == 0

    def test_concurrent_access(self, clock):
        cache = ObservanceCache(max_size=25, clock=clock)
        keys = [(holiday, year) for year in range(2000, 2010) for holiday in USFederalHoliday]

        def lookup(key):
            holiday, year = key
            return key, cache.get(holiday, year)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lookup, keys * 5))

        for (holiday, year), value in results:
            assert value == observance_for(holiday.rule, year)
        assert len(cache) <= 25
        stats = cache.stats()
        assert stats["hits"] + stats["misses"] == len(keys) * 5


class TestDefaultCache:
    """Tests for the process-wide cache lifecycle."""

    def test_created_lazily_and_shared(self):
        assert get_default_cache() is get_default_cache()

    def test_reset_creates_new_cache(self):
        first = get_default_cache()
        reset_default_cache()
        assert get_default_cache() is not first

    def test_configure_installs_cache(self, clock):
        installed = configure_default_cache(max_size=5, ttl_seconds=1, clock=clock)
        assert get_default_cache() is installed
        assert installed.max_size == 5
        assert installed.ttl_seconds == 1

    def test_default_limits(self):
        cache = get_default_cache()
        assert cache.max_size == 1000
        assert cache.ttl_seconds == 600
