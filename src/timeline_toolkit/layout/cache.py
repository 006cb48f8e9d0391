"""
Module: layout.cache

Purpose:
    Memoize scattered placements so a layout stays fixed across
    re-renders. Each entry is generated once from a seeded random
    source and returned unchanged on later lookups.

Key Classes:
    - PlacementCache: LRU cache of placement tuples

Key Functions:
    - stable_seed(): Derive a seed from an identity string

Dependencies:
    - hashlib (std): Process-independent seeds
    - layout.scatter: generate_positions

Used By:
    - Rendering layer: per-event card layouts
"""

from __future__ import annotations

import hashlib
import logging
import random
from typing import Dict, Tuple

from .config import ScatterConfig, DEFAULT_SCATTER_CONFIG
from .models import Placement
from .scatter import generate_positions

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, int, ScatterConfig]


def stable_seed(identity: str) -> int:
    """
    Derive an integer seed from an identity string.
    
    Unlike ``hash()``, the result does not change between interpreter
    runs, so the same event id always yields the same layout.
    
    Args:
        identity: Stable identifier such as an event id
        
    Returns:
        Non-negative 64-bit integer seed
        
    Example:
        >>> stable_seed("event-42") == stable_seed("event-42")
        True
    """
    digest = hashlib.sha256(identity.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class PlacementCache:
    """
    LRU cache for generated placements.
    
    Keyed by (count, seed, config). A hit returns the same tuple
    instance that was generated on the miss.
    
    Attributes:
        max_entries: Maximum number of layouts to keep.
        
    Example:
        >>> cache = PlacementCache(max_entries=8)
        >>> first = cache.get_or_generate(5, seed=1)
        >>> cache.get_or_generate(5, seed=1) is first  # Cache hit
        True
    """
    
    def __init__(self, max_entries: int = 64):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive: {max_entries}")
        self._cache: Dict[CacheKey, Tuple[Placement, ...]] = {}
        self._max_entries = max_entries
        self._access_order: list = []  # For LRU eviction
    
    def get_or_generate(
        self,
        count: int,
        seed: int,
        config: ScatterConfig = DEFAULT_SCATTER_CONFIG,
    ) -> Tuple[Placement, ...]:
        """
        Get cached placements or generate and store them.
        
        Args:
            count: Number of cards
            seed: Seed for the random source
            config: Scatter configuration
            
        Returns:
            Tuple of ``count`` Placements
        """
        key = (count, seed, config)
        
        if key in self._cache:
            self._access_order.remove(key)
            self._access_order.append(key)
            logger.debug(f"Cache HIT: {count} cards, seed {seed}")
            return self._cache[key]
        
        placements = tuple(generate_positions(count, random.Random(seed), config))
        
        if len(self._cache) >= self._max_entries:
            oldest = self._access_order.pop(0)
            del self._cache[oldest]
            logger.debug(f"Cache EVICT: {oldest[0]} cards, seed {oldest[1]}")
        
        self._cache[key] = placements
        self._access_order.append(key)
        logger.debug(f"Cache MISS: generated {count} cards, seed {seed}")
        
        return placements
    
    def get_for_identity(
        self,
        identity: str,
        count: int,
        config: ScatterConfig = DEFAULT_SCATTER_CONFIG,
    ) -> Tuple[Placement, ...]:
        """Placements for ``count`` cards seeded by ``identity``."""
        return self.get_or_generate(count, stable_seed(identity), config)
    
    def clear(self) -> None:
        """Clear the cache."""
        self._cache.clear()
        self._access_order.clear()
        logger.debug("Cache cleared")
    
    @property
    def size(self) -> int:
        """Number of layouts currently cached."""
        return len(self._cache)
