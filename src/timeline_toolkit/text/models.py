"""
Module: text.models

Purpose:
    Result types for text fitting.

Key Classes:
    - FittedText: One or two display lines for an event card
    - MilestoneLabel: Truncated milestone title with its date
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class FittedText:
    """
    Event title split into at most two display lines.
    
    Attributes:
        line1: First line (always present)
        line2: Second line, or None when the title fits on one line
        
    Example:
        >>> FittedText("Short title").lines
        ('Short title',)
    """
    
    line1: str
    line2: Optional[str] = None
    
    @property
    def lines(self) -> tuple[str, ...]:
        """Present lines in display order."""
        if self.line2 is None:
            return (self.line1,)
        return (self.line1, self.line2)
    
    def to_dict(self) -> dict:
        """Serialize, omitting line2 when absent."""
        d = {"line1": self.line1}
        if self.line2 is not None:
            d["line2"] = self.line2
        return d


@dataclass(frozen=True, slots=True)
class MilestoneLabel:
    """Milestone card content: truncated title and untouched date."""
    
    content: str
    date: str
    
    def to_dict(self) -> dict:
        return {"content": self.content, "date": self.date}
