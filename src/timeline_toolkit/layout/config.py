"""
Module: layout.config

Purpose:
    Configuration for the organic card scatter.
    Defines the placement surface bounds, separation constraint,
    grid fallback geometry and jitter ranges.

Key Classes:
    - ScatterConfig: Immutable scatter configuration

Dependencies:
    - dataclasses (std)

Used By:
    - layout.scatter: Position generation
    - layout.cache: Memoized placements
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# Percentage bounds keeping cards away from the surface edges
DEFAULT_MIN_COORD = 15.0
DEFAULT_MAX_COORD = 85.0

# Minimum centre-to-centre distance between scattered cards (percent)
DEFAULT_MIN_DISTANCE = 25.0
DEFAULT_MAX_ATTEMPTS = 50


@dataclass(frozen=True)
class ScatterConfig:
    """
    Configuration for scattered card placement (immutable).
    
    All coordinates are percentages of the bounding surface.
    
    Attributes:
        min_coord: Lowest x/y value a scattered card may take
        max_coord: Highest x/y value a scattered card may take
        min_distance: Minimum Euclidean distance between scattered cards
        max_attempts: Random samples tried per card before grid fallback
        grid_origin: First grid line of the fallback layout
        grid_span: Distance from first to last grid line
        grid_jitter: Half-width of the noise added to grid cells
        max_rotation: Rotation is drawn from [-max_rotation, max_rotation]
        min_scale: Lower scale bound
        max_scale: Upper scale bound
        
    Example:
        >>> config = ScatterConfig()
        >>> config.coord_range
        70.0
    """
    
    # Surface bounds
    min_coord: float = DEFAULT_MIN_COORD
    max_coord: float = DEFAULT_MAX_COORD
    
    # Separation constraint
    min_distance: float = DEFAULT_MIN_DISTANCE
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    
    # Grid fallback
    grid_origin: float = 20.0
    grid_span: float = 60.0
    grid_jitter: float = 5.0
    
    # Visual jitter
    max_rotation: float = 10.0
    min_scale: float = 0.8
    max_scale: float = 1.2
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not 0 <= self.min_coord < self.max_coord <= 100:
            raise ValueError(
                f"coordinate bounds must satisfy 0 <= min < max <= 100: "
                f"{self.min_coord}, {self.max_coord}"
            )
        if self.min_distance < 0:
            raise ValueError(f"min_distance must be non-negative: {self.min_distance}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive: {self.max_attempts}")
        if self.grid_span < 0 or self.grid_jitter < 0:
            raise ValueError("grid_span and grid_jitter must be non-negative")
        if self.grid_origin - self.grid_jitter < 0 or self.grid_far_edge > 100:
            raise ValueError("Grid fallback exceeds the percentage surface")
        if self.max_rotation < 0:
            raise ValueError(f"max_rotation must be non-negative: {self.max_rotation}")
        if not 0 < self.min_scale <= self.max_scale:
            raise ValueError(
                f"scale bounds must satisfy 0 < min <= max: "
                f"{self.min_scale}, {self.max_scale}"
            )
    
    @property
    def coord_range(self) -> float:
        """Width of the sampling interval on each axis."""
        return self.max_coord - self.min_coord
    
    @property
    def grid_far_edge(self) -> float:
        """Furthest coordinate a jittered grid cell can reach."""
        return self.grid_origin + self.grid_span + self.grid_jitter
    
    @property
    def grid_center(self) -> float:
        """Midpoint of the grid, used for degenerate single-cell axes."""
        return self.grid_origin + self.grid_span / 2
    
    @staticmethod
    def grid_columns(count: int) -> int:
        """Number of fallback grid columns for ``count`` cards."""
        return math.ceil(math.sqrt(count))


DEFAULT_SCATTER_CONFIG = ScatterConfig()
