"""
Module: text

Purpose:
    Text fitting for fixed-size timeline cards.

Key Functions:
    - truncate_text(), clip_text(): Ellipsis truncation
    - fit_milestone(), fit_event(): Card labels
    - wrap_text(): Two-line word wrap
"""

from .models import FittedText, MilestoneLabel
from .fitting import (
    truncate_text,
    clip_text,
    fit_milestone,
    fit_event,
    wrap_text,
    EVENT_BREAKPOINTS,
)

__all__ = [
    "FittedText",
    "MilestoneLabel",
    "truncate_text",
    "clip_text",
    "fit_milestone",
    "fit_event",
    "wrap_text",
    "EVENT_BREAKPOINTS",
]
