"""
Module: layout

Purpose:
    Card placement for the timeline event view.
    Two independent strategies, chosen by presentation mode:
    organic scatter and fixed canonical slots.

Key Functions:
    - generate_positions(): Scatter cards with minimum separation
    - assign_slots(): Map up to six items onto canonical slots
    - stable_seed(): Seed derived from an identity string

Key Classes:
    - ScatterConfig: Configuration for scattering
    - Placement: Scattered card position
    - SlotPosition: Canonical compass slot
    - SlotAssignment: Item bound to a slot
    - PlacementCache: Memoized placements across re-renders

Used By:
    - utils.visualizer: Debug previews
    - Rendering layer
"""

from .config import ScatterConfig, DEFAULT_SCATTER_CONFIG
from .models import Placement, SlotPosition, SlotAssignment
from .scatter import generate_positions
from .slots import assign_slots, MAX_SLOTS, SLOT_ORDER
from .cache import PlacementCache, stable_seed

__all__ = [
    # Config
    "ScatterConfig",
    "DEFAULT_SCATTER_CONFIG",
    # Models
    "Placement",
    "SlotPosition",
    "SlotAssignment",
    # Functions
    "generate_positions",
    "assign_slots",
    "stable_seed",
    "MAX_SLOTS",
    "SLOT_ORDER",
    # Cache
    "PlacementCache",
]
