"""
Module: layout.models

Purpose:
    Data models for card layout.
    Immutable dataclasses and enums describing where cards go.

Key Classes:
    - Placement: Scattered card position with visual jitter
    - SlotPosition: One of six canonical compass slots
    - SlotAssignment: Item bound to a canonical slot

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.scatter: Creates Placements
    - layout.slots: Creates SlotAssignments
    - utils.visualizer: Draws Placements
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class Placement:
    """
    A card positioned on the scatter surface.
    
    Coordinates are percentages of the bounding surface; the rendering
    layer maps them to pixels.
    
    Attributes:
        x: Horizontal centre (percent)
        y: Vertical centre (percent)
        rotation: Tilt in degrees
        scale: Size multiplier
        float_offset: Phase in [0, 2π) for idle float animation
        is_fallback: True if placed by the grid fallback
    
    Invariants:
        - 0 <= x <= 100
        - 0 <= y <= 100
    
    Example:
        >>> a = Placement(x=20, y=20, rotation=0, scale=1, float_offset=0)
        >>> b = Placement(x=50, y=60, rotation=0, scale=1, float_offset=0)
        >>> a.distance_to(b)
        50.0
    """
    
    x: float
    y: float
    rotation: float
    scale: float
    float_offset: float
    is_fallback: bool = False
    
    def __post_init__(self) -> None:
        """Validate coordinates on construction."""
        if not 0 <= self.x <= 100:
            raise ValueError(f"x must be within [0, 100]: {self.x}")
        if not 0 <= self.y <= 100:
            raise ValueError(f"y must be within [0, 100]: {self.y}")
    
    def distance_to(self, other: Placement) -> float:
        """Euclidean distance between card centres (percent units)."""
        return math.hypot(self.x - other.x, self.y - other.y)
    
    def to_dict(self) -> dict:
        """
        Serialize for the rendering layer.
        
        Returns:
            Dict with x, y, rotation, scale, floatOffset
        """
        return {
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "scale": self.scale,
            "floatOffset": self.float_offset,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> Placement:
        """Deserialize from a rendering-layer record."""
        return cls(
            x=data["x"],
            y=data["y"],
            rotation=data.get("rotation", 0.0),
            scale=data.get("scale", 1.0),
            float_offset=data.get("floatOffset", 0.0),
        )


class SlotPosition(Enum):
    """
    Canonical compass slots around the central fact card.
    
    Values are the tags the front end uses. Declaration order is the
    order items are assigned in.
    
    Example:
        >>> SlotPosition.LEFT.row
        'middle'
        >>> SlotPosition.BOTTOM_RIGHT.column
        'right'
    """
    
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    
    @property
    def row(self) -> str:
        """Row of the slot: top, middle or bottom."""
        if self.value.startswith("top"):
            return "top"
        if self.value.startswith("bottom"):
            return "bottom"
        return "middle"
    
    @property
    def column(self) -> str:
        """Column of the slot: left or right."""
        return "left" if self.value.endswith("left") else "right"
    
    def to_dict(self) -> dict:
        return {"side": self.value, "row": self.row, "column": self.column}


@dataclass(frozen=True)
class SlotAssignment:
    """
    An item bound to a canonical slot.
    
    Attributes:
        item: Caller payload, never inspected
        position: Assigned slot
        index: Position of the item in the input sequence
    """
    
    item: Any
    position: SlotPosition
    index: int
    
    def to_dict(self) -> dict:
        return {
            "item": self.item,
            "position": self.position.to_dict(),
            "index": self.index,
        }
