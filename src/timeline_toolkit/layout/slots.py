"""
Module: layout.slots

Purpose:
    Assign secondary opinions to the six canonical slots around the
    central fact card. Used when the layout must be predictable rather
    than organically scattered.

Key Functions:
    - assign_slots(): Map up to six items onto canonical slots

Dependencies:
    - layout.models: SlotPosition, SlotAssignment

Used By:
    - Rendering layer (fixed-grid presentation mode)
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from .models import SlotAssignment, SlotPosition

logger = logging.getLogger(__name__)

# Assignment order: two on top, two at the sides, two at the bottom
SLOT_ORDER: tuple[SlotPosition, ...] = tuple(SlotPosition)
MAX_SLOTS = len(SLOT_ORDER)


def assign_slots(
    items: Sequence[Any],
    is_desktop: bool = True,
    is_tablet: bool = False,
) -> List[SlotAssignment]:
    """
    Map items, in order, onto the canonical slot cycle.
    
    Items past the sixth are dropped. The breakpoint flags are accepted
    for breakpoint-specific slot sets but every breakpoint currently
    uses the same six slots.
    
    Args:
        items: Ordered opaque payloads
        is_desktop: Desktop breakpoint flag
        is_tablet: Tablet breakpoint flag
        
    Returns:
        min(6, len(items)) SlotAssignments in input order
        
    Example:
        >>> [a.position.value for a in assign_slots(["a", "b", "c"])]
        ['top-left', 'top-right', 'left']
    """
    admitted = min(MAX_SLOTS, len(items))
    if len(items) > MAX_SLOTS:
        logger.debug(f"Dropping {len(items) - MAX_SLOTS} items beyond {MAX_SLOTS} slots")
    logger.debug(
        f"Assigning {admitted} slots (desktop={is_desktop}, tablet={is_tablet})"
    )
    
    return [
        SlotAssignment(item=items[i], position=SLOT_ORDER[i], index=i)
        for i in range(admitted)
    ]
