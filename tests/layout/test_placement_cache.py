"""
Unit tests for memoized placements and stable seeds.
"""

import random

import pytest

from timeline_toolkit.layout import (
    PlacementCache,
    ScatterConfig,
    generate_positions,
    stable_seed,
)


class TestStableSeed:
    """Tests for stable_seed()."""
    
    def test_same_identity_gives_same_seed(self):
        assert stable_seed("event-42") == stable_seed("event-42")
    
    def test_different_identities_give_different_seeds(self):
        assert stable_seed("event-42") != stable_seed("event-43")
    
    def test_seed_is_non_negative_int(self):
        seed = stable_seed("")
        assert isinstance(seed, int)
        assert seed >= 0


class TestPlacementCache:
    """Tests for PlacementCache."""
    
    def test_when_same_key_then_returns_same_tuple(self):
        cache = PlacementCache()
        
        first = cache.get_or_generate(5, seed=7)
        second = cache.get_or_generate(5, seed=7)
        
        assert second is first
        assert cache.size == 1
    
    def test_generated_layout_matches_seeded_generator(self):
        cache = PlacementCache()
        
        cached = cache.get_or_generate(6, seed=11)
        
        assert list(cached) == generate_positions(6, random.Random(11))
    
    def test_when_different_seed_then_generates_new_layout(self):
        cache = PlacementCache()
        
        first = cache.get_or_generate(5, seed=1)
        second = cache.get_or_generate(5, seed=2)
        
        assert first != second
        assert cache.size == 2
    
    def test_when_config_differs_then_cached_separately(self):
        cache = PlacementCache()
        
        cache.get_or_generate(3, seed=1)
        cache.get_or_generate(3, seed=1, config=ScatterConfig(min_distance=10))
        
        assert cache.size == 2
    
    def test_when_full_then_evicts_least_recently_used(self):
        cache = PlacementCache(max_entries=2)
        
        a = cache.get_or_generate(3, seed=1)
        cache.get_or_generate(3, seed=2)
        cache.get_or_generate(3, seed=1)  # Touch seed 1
        cache.get_or_generate(3, seed=3)  # Evicts seed 2
        
        assert cache.size == 2
        assert cache.get_or_generate(3, seed=1) is a
    
    def test_get_for_identity_uses_stable_seed(self):
        cache = PlacementCache()
        
        by_identity = cache.get_for_identity("event-9", 4)
        
        assert by_identity is cache.get_or_generate(4, stable_seed("event-9"))
    
    def test_clear_empties_cache(self):
        cache = PlacementCache()
        cache.get_or_generate(2, seed=1)
        
        cache.clear()
        
        assert cache.size == 0
    
    def test_when_max_entries_not_positive_then_raises(self):
        with pytest.raises(ValueError, match="max_entries must be positive"):
            PlacementCache(max_entries=0)
