"""
Unit tests for the scattered card placement.

Covers the separation constraint, the bounded attempt loop and the
grid fallback (including single-row grids).
"""

import logging
import math
import random

import pytest

from timeline_toolkit.layout import (
    ScatterConfig,
    generate_positions,
)


class TestGeneratePositionsCount:
    """Tests for the number of placements returned."""
    
    def test_when_count_zero_then_returns_empty_list(self, seeded_rng):
        assert generate_positions(0, seeded_rng) == []
    
    def test_when_count_negative_then_returns_empty_list(self, seeded_rng):
        assert generate_positions(-3, seeded_rng) == []
    
    @pytest.mark.parametrize("count", [1, 2, 3, 6, 9, 16, 30])
    def test_when_count_given_then_returns_exactly_count(self, count, seeded_rng):
        assert len(generate_positions(count, seeded_rng)) == count
    
    def test_when_no_rng_given_then_still_generates(self):
        """Default random source is created internally."""
        assert len(generate_positions(4)) == 4


class TestGeneratePositionsRanges:
    """Tests for value ranges of every placement."""
    
    @pytest.mark.parametrize("seed", range(10))
    def test_when_many_cards_then_all_values_in_range(self, seed):
        """Ranges hold for scattered and fallback placements alike."""
        placements = generate_positions(25, random.Random(seed))
        
        for p in placements:
            assert 15 <= p.x <= 85
            assert 15 <= p.y <= 85
            assert -10 <= p.rotation <= 10
            assert 0.8 <= p.scale <= 1.2
            assert 0 <= p.float_offset < 2 * math.pi


class TestSeparation:
    """Tests for the minimum separation constraint."""
    
    @pytest.mark.parametrize("seed", range(10))
    def test_when_scattered_then_far_from_every_earlier_card(self, seed):
        placements = generate_positions(12, random.Random(seed))
        
        for j, p in enumerate(placements):
            if p.is_fallback:
                continue
            for earlier in placements[:j]:
                assert p.distance_to(earlier) >= 25
    
    def test_when_too_many_cards_then_fallback_is_used(self, seeded_rng):
        """30 cards cannot all keep 25% apart inside a 70% square."""
        placements = generate_positions(30, seeded_rng)
        
        assert any(p.is_fallback for p in placements)
    
    def test_when_first_card_then_never_fallback(self, constant_rng):
        placements = generate_positions(3, constant_rng)
        
        assert placements[0].is_fallback is False


class TestDeterminism:
    """Tests for injected random sources."""
    
    def test_same_seed_produces_identical_placements(self):
        first = generate_positions(8, random.Random(99))
        second = generate_positions(8, random.Random(99))
        
        assert first == second
    
    def test_different_seeds_produce_different_placements(self):
        first = generate_positions(8, random.Random(1))
        second = generate_positions(8, random.Random(2))
        
        assert first != second


class TestGridFallback:
    """Tests for the deterministic grid fallback."""
    
    def test_when_constant_rng_then_later_cards_use_grid_cells(self, constant_rng):
        """
        Every sample lands on (50, 50), so cards after the first fall back.
        
        4 cards -> 2 columns, 2 rows: cells at 20/80 on each axis.
        """
        placements = generate_positions(4, constant_rng)
        
        first = placements[0]
        assert first.is_fallback is False
        assert (first.x, first.y) == pytest.approx((50.0, 50.0))
        
        cells = [(p.x, p.y) for p in placements[1:]]
        assert cells == [
            pytest.approx((80.0, 20.0)),
            pytest.approx((20.0, 80.0)),
            pytest.approx((80.0, 80.0)),
        ]
        assert all(p.is_fallback for p in placements[1:])
    
    def test_when_constant_rng_then_jitter_at_interval_midpoints(self, constant_rng):
        placements = generate_positions(2, constant_rng)
        
        for p in placements:
            assert p.rotation == pytest.approx(0.0)
            assert p.scale == pytest.approx(1.0)
            assert p.float_offset == pytest.approx(math.pi)
    
    def test_when_single_row_grid_then_centres_y_and_warns(self, constant_rng, caplog):
        """
        2 cards -> 2 columns but a single row; the row spacing has a
        zero denominator, so the fallback card is centred vertically.
        """
        with caplog.at_level(logging.WARNING):
            placements = generate_positions(2, constant_rng)
        
        fallback = placements[1]
        assert fallback.is_fallback is True
        assert fallback.x == pytest.approx(80.0)
        assert fallback.y == pytest.approx(50.0)
        assert "single row" in caplog.text
    
    def test_when_samples_rejected_then_stops_after_max_attempts(self, constant_rng):
        """
        Card 0: 2 samples + 3 jitter draws.
        Card 1: 50 attempts * 2 samples + 2 noise + 3 jitter draws.
        """
        generate_positions(2, constant_rng)
        
        assert constant_rng.calls == 5 + 105
    
    def test_when_custom_attempt_cap_then_respected(self, constant_rng):
        config = ScatterConfig(max_attempts=3)
        
        generate_positions(2, constant_rng, config)
        
        assert constant_rng.calls == 5 + (3 * 2 + 2 + 3)


class TestCustomConfig:
    """Tests for non-default scatter configuration."""
    
    def test_when_zero_min_distance_then_no_fallback(self, seeded_rng):
        config = ScatterConfig(min_distance=0)
        
        placements = generate_positions(40, seeded_rng, config)
        
        assert not any(p.is_fallback for p in placements)
    
    def test_when_narrow_bounds_then_scattered_cards_stay_inside(self, seeded_rng):
        config = ScatterConfig(min_coord=40, max_coord=60, min_distance=1)
        
        placements = generate_positions(10, seeded_rng, config)
        
        for p in placements:
            if not p.is_fallback:
                assert 40 <= p.x <= 60
                assert 40 <= p.y <= 60
