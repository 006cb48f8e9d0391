"""
Module: layout.scatter

Purpose:
    Scatter opinion cards across the timeline surface without overlap.
    Falls back to a jittered grid when random sampling cannot satisfy
    the minimum separation.

Key Functions:
    - generate_positions(): Main placement function

Algorithm:
    For each card:
    1. Sample up to max_attempts random points inside the bounds
    2. Accept the first point at least min_distance from every placed card
    3. Otherwise use the card's grid cell, perturbed by small noise
    4. Draw rotation, scale and float phase for the card

Dependencies:
    - layout.models: Placement
    - layout.config: ScatterConfig

Used By:
    - layout.cache: Memoized placements
    - Rendering layer (organic presentation mode)
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Tuple

from .config import ScatterConfig, DEFAULT_SCATTER_CONFIG
from .models import Placement

logger = logging.getLogger(__name__)


def generate_positions(
    count: int,
    rng: Optional[random.Random] = None,
    config: ScatterConfig = DEFAULT_SCATTER_CONFIG,
) -> List[Placement]:
    """
    Generate ``count`` scattered card placements.
    
    Placements are returned in card order. Scattered placements keep
    ``config.min_distance`` from every earlier placement; fallback
    placements are not distance-checked.
    
    Args:
        count: Number of cards to place
        rng: Random source (a fresh unseeded one if None)
        config: Scatter configuration
        
    Returns:
        List of exactly ``count`` Placements (empty for count <= 0)
        
    Example:
        >>> placements = generate_positions(4, random.Random(7))
        >>> len(placements)
        4
    """
    if count <= 0:
        return []
    if rng is None:
        rng = random.Random()
    
    placements: List[Placement] = []
    fallback_count = 0
    
    for i in range(count):
        position = _sample_position(placements, rng, config)
        is_fallback = position is None
        if is_fallback:
            fallback_count += 1
            position = _grid_position(i, count, rng, config)
        
        x, y = position
        placements.append(Placement(
            x=x,
            y=y,
            rotation=rng.uniform(-config.max_rotation, config.max_rotation),
            scale=rng.uniform(config.min_scale, config.max_scale),
            float_offset=rng.random() * 2 * math.pi,
            is_fallback=is_fallback,
        ))
    
    logger.debug(
        f"Generated {count} placements ({fallback_count} from grid fallback)"
    )
    return placements


def _sample_position(
    placed: List[Placement],
    rng: random.Random,
    config: ScatterConfig,
) -> Optional[Tuple[float, float]]:
    """
    Try to find a point far enough from every placed card.
    
    Returns:
        (x, y) of the first accepted sample, or None after max_attempts
    """
    attempts = 0
    while attempts < config.max_attempts:
        x = config.min_coord + rng.random() * config.coord_range
        y = config.min_coord + rng.random() * config.coord_range
        attempts += 1
        
        if all(
            math.hypot(x - p.x, y - p.y) >= config.min_distance
            for p in placed
        ):
            return x, y
    
    return None


def _grid_position(
    index: int,
    count: int,
    rng: random.Random,
    config: ScatterConfig,
) -> Tuple[float, float]:
    """
    Fallback grid cell for card ``index``, with noise on both axes.
    
    The grid has ceil(sqrt(count)) columns. An axis with a single grid
    line (one column, or all cards in one row) has no spacing to divide
    by; the card is centred on that axis instead.
    """
    cols = config.grid_columns(count)
    row = index // cols
    col = index % cols
    col_steps = cols - 1
    row_steps = math.ceil(count / cols - 1)
    
    if col_steps > 0:
        x = config.grid_origin + col * config.grid_span / col_steps
    else:
        logger.warning(
            f"Grid fallback for card {index} of {count} has a single column; centring on x"
        )
        x = config.grid_center
    
    if row_steps > 0:
        y = config.grid_origin + row * config.grid_span / row_steps
    else:
        logger.warning(
            f"Grid fallback for card {index} of {count} has a single row; centring on y"
        )
        y = config.grid_center
    
    x += rng.uniform(-config.grid_jitter, config.grid_jitter)
    y += rng.uniform(-config.grid_jitter, config.grid_jitter)
    return x, y
