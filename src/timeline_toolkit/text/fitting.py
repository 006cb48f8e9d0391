"""
Module: text.fitting

Purpose:
    Fit arbitrary-length titles into fixed-size timeline cards.
    Punctuation-aware line breaking plus ellipsis truncation.

Key Functions:
    - truncate_text(): Bounded truncation at a late word boundary
    - clip_text(): Hard clip with ellipsis
    - fit_milestone(): Milestone card label
    - fit_event(): One- or two-line event card label
    - wrap_text(): Greedy two-line word wrap

Dependencies:
    - text.models: FittedText, MilestoneLabel

Used By:
    - utils.visualizer: Card labels in previews
    - Rendering layer
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .models import FittedText, MilestoneLabel

logger = logging.getLogger(__name__)

# Constants
ELLIPSIS = "..."
WORD_BOUNDARY_RATIO = 0.7  # A space earlier than this is too early to cut at
MILESTONE_MAX_LENGTH = 35
EVENT_LINE_MAX_LENGTH = 40
EVENT_MIN_LINE1_LENGTH = 20
BREAK_SEARCH_START = 15  # Avoids a degenerate first line
BREAK_SEARCH_END = 50
PROGRESS_LABEL_MAX_LENGTH = 28
DEFAULT_WRAP_WIDTH = 28
MAX_WRAP_LINES = 2

# Candidate split points, highest priority first
EVENT_BREAKPOINTS: Tuple[str, ...] = (
    ". ", "? ", "! ", ", ",
    " and ", " but ", " or ", " with ", " from ", " to ",
)


def truncate_text(text: str, max_length: int) -> str:
    """
    Truncate text to ``max_length`` characters plus an ellipsis.
    
    Cuts at the last space of the prefix when that space lies past
    70% of ``max_length``; otherwise cuts mid-word at ``max_length``.
    
    Args:
        text: Text to shorten
        max_length: Maximum characters kept before the ellipsis
        
    Returns:
        ``text`` unchanged if short enough, else at most
        ``max_length + 3`` characters ending in "..."
        
    Example:
        >>> truncate_text("The quick brown fox jumps", 10)
        'The quick...'
    """
    if len(text) <= max_length:
        return text
    
    truncated = text[:max(0, max_length)]
    last_space = truncated.rfind(" ")
    if last_space > max_length * WORD_BOUNDARY_RATIO:
        return text[:last_space] + ELLIPSIS
    
    return truncated + ELLIPSIS


def clip_text(text: str, max_length: int = PROGRESS_LABEL_MAX_LENGTH) -> str:
    """
    Clip text at exactly ``max_length`` characters, no word boundary search.
    
    Used for the compact timeline progress list.
    
    Example:
        >>> clip_text("Ceasefire negotiations resume in Cairo", 20)
        'Ceasefire negotiatio...'
    """
    if len(text) <= max_length:
        return text
    return text[:max(0, max_length)] + ELLIPSIS


def fit_milestone(title: str, date: str) -> MilestoneLabel:
    """Milestone label: title truncated to 35 characters, date unchanged."""
    return MilestoneLabel(
        content=truncate_text(title, MILESTONE_MAX_LENGTH),
        date=date,
    )


def fit_event(title: str) -> FittedText:
    """
    Fit an event title onto one or two card lines.
    
    Titles of up to 40 characters stay on one line. Longer titles split
    after the earliest breakpoint starting in [15, 50); without one they
    split at the word midpoint, nudged right if the first line would be
    under 20 characters.
    
    Args:
        title: Event title
        
    Returns:
        FittedText with line2 set only when the title was split
        
    Example:
        >>> fit_event("A and B")
        FittedText(line1='A and B', line2=None)
    """
    if len(title) <= EVENT_LINE_MAX_LENGTH:
        return FittedText(line1=title)
    
    split_at = _find_breakpoint(title)
    if split_at is not None:
        index, length = split_at
        end = index + length
        return FittedText(
            line1=title[:end].strip(),
            line2=truncate_text(title[end:].strip(), EVENT_LINE_MAX_LENGTH),
        )
    
    logger.debug(f"No breakpoint in event title, splitting by words: {title!r}")
    words = title.split(" ")
    midpoint = len(words) // 2
    
    line1 = " ".join(words[:midpoint])
    line2 = " ".join(words[midpoint:])
    
    if len(line1) < EVENT_MIN_LINE1_LENGTH and len(words) > 3:
        midpoint += 1
        line1 = " ".join(words[:midpoint])
        line2 = " ".join(words[midpoint:])
    
    return FittedText(
        line1=truncate_text(line1, EVENT_LINE_MAX_LENGTH),
        line2=truncate_text(line2, EVENT_LINE_MAX_LENGTH) if line2 else None,
    )


def _find_breakpoint(title: str) -> Optional[Tuple[int, int]]:
    """
    Find the earliest breakpoint starting in [15, 50).
    
    Collects (index, priority, length) for every breakpoint occurring in
    range and picks the smallest index; list priority breaks ties.
    
    Returns:
        (start index, breakpoint length), or None if nothing qualifies
    """
    candidates = []
    for priority, marker in enumerate(EVENT_BREAKPOINTS):
        index = title.find(marker, BREAK_SEARCH_START)
        if 0 <= index < BREAK_SEARCH_END:
            candidates.append((index, priority, len(marker)))
    
    if not candidates:
        return None
    
    index, _, length = min(candidates)
    return index, length


def wrap_text(text: str, max_chars_per_line: int = DEFAULT_WRAP_WIDTH) -> List[str]:
    """
    Greedy word wrap limited to two lines.
    
    A word longer than the line width gets a line of its own, cut to
    ``max_chars_per_line - 3`` characters plus "...". Lines beyond the
    second are discarded.
    
    Args:
        text: Text to wrap
        max_chars_per_line: Maximum characters per line
        
    Returns:
        Up to two lines
        
    Example:
        >>> wrap_text("Experts disagree on the long term economic impact")
        ['Experts disagree on the long', 'term economic impact']
    """
    lines: List[str] = []
    current = ""
    
    for word in text.split():
        if len(word) > max_chars_per_line:
            if current:
                lines.append(current)
                current = ""
            lines.append(word[:max(0, max_chars_per_line - 3)] + ELLIPSIS)
            continue
        
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_chars_per_line:
            current = candidate
        else:
            lines.append(current)
            current = word
    
    if current:
        lines.append(current)
    
    if len(lines) > MAX_WRAP_LINES:
        logger.debug(f"Discarding {len(lines) - MAX_WRAP_LINES} wrapped lines")
    return lines[:MAX_WRAP_LINES]
