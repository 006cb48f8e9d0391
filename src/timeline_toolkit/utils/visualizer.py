"""
Module: utils.visualizer

Purpose:
    Debug visualization for card layouts. Draws each placement as a
    rotated, scaled card outline with its index and optional label
    lines, to eyeball separation and fallback behaviour.

Key Functions:
    - placement_to_pixels(): Map a percentage placement to a pixel centre
    - render_preview(): Create preview image for a layout
    - save_preview(): Save preview to disk

Dependencies:
    - PIL: Image drawing
    - layout.models: Placement

Used By:
    - scripts/generate_layout_preview.py: Manual layout inspection
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..layout.models import Placement

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    "scatter": (37, 99, 235, 200),     # Blue - randomly scattered
    "fallback": (234, 88, 12, 200),    # Orange - grid fallback
}

BACKGROUND_COLOR = (250, 250, 250)
CARD_FILL_COLOR = (255, 255, 255, 230)
LABEL_TEXT_COLOR = (30, 30, 30)
CARD_LINE_WIDTH = 3
FONT_SIZE = 14

# Card footprint at scale 1.0, as a fraction of the surface
CARD_WIDTH_RATIO = 0.18
CARD_HEIGHT_RATIO = 0.12


def placement_to_pixels(
    placement: Placement,
    width: int,
    height: int,
) -> Tuple[int, int]:
    """
    Convert a placement's percentage centre to pixel coordinates.
    
    Example:
        >>> p = Placement(x=50, y=25, rotation=0, scale=1, float_offset=0)
        >>> placement_to_pixels(p, 800, 400)
        (400, 100)
    """
    return (
        int(round(placement.x / 100 * width)),
        int(round(placement.y / 100 * height)),
    )


def render_preview(
    placements: Sequence[Placement],
    labels: Optional[Sequence[Sequence[str]]] = None,
    size: Tuple[int, int] = (1200, 800),
) -> Image.Image:
    """
    Render a layout preview.
    
    Scattered cards are outlined in blue, fallback cards in orange.
    Each card shows its index and, if given, its label lines.
    
    Args:
        placements: Placements to draw
        labels: Optional per-card lines (e.g. from wrap_text)
        size: (width, height) of the preview in pixels
        
    Returns:
        New RGB image
        
    Example:
        >>> img = render_preview(generate_positions(5))
        >>> img.save("layout.png")
    """
    width, height = size
    preview = Image.new("RGBA", size, BACKGROUND_COLOR + (255,))
    overlay = Image.new("RGBA", size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)
    
    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()
    
    for index, placement in enumerate(placements):
        lines: List[str] = [f"#{index}"]
        if labels is not None and index < len(labels):
            lines.extend(labels[index])
        _draw_card(draw, placement, width, height, lines, font)
    
    preview = Image.alpha_composite(preview, overlay)
    return preview.convert("RGB")


def _card_corners(
    placement: Placement,
    width: int,
    height: int,
) -> List[Tuple[float, float]]:
    """Corners of the rotated, scaled card in pixel space."""
    cx, cy = placement_to_pixels(placement, width, height)
    half_w = CARD_WIDTH_RATIO * width * placement.scale / 2
    half_h = CARD_HEIGHT_RATIO * height * placement.scale / 2
    angle = math.radians(placement.rotation)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    
    corners = []
    for dx, dy in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)):
        corners.append((cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a))
    return corners


def _draw_card(
    draw: ImageDraw.ImageDraw,
    placement: Placement,
    width: int,
    height: int,
    lines: List[str],
    font: ImageFont.FreeTypeFont,
) -> None:
    """
    Draw a single card outline with its text.
    
    Text is drawn unrotated, centred on the card.
    """
    color = COLORS["fallback"] if placement.is_fallback else COLORS["scatter"]
    corners = _card_corners(placement, width, height)
    draw.polygon(corners, fill=CARD_FILL_COLOR, outline=color, width=CARD_LINE_WIDTH)
    
    text = "\n".join(lines)
    text_bbox = draw.multiline_textbbox((0, 0), text, font=font)
    text_width = text_bbox[2] - text_bbox[0]
    text_height = text_bbox[3] - text_bbox[1]
    cx, cy = placement_to_pixels(placement, width, height)
    draw.multiline_text(
        (cx - text_width / 2, cy - text_height / 2),
        text,
        fill=LABEL_TEXT_COLOR,
        font=font,
        align="center",
    )


def save_preview(
    placements: Sequence[Placement],
    output_dir: Path,
    name: str,
    labels: Optional[Sequence[Sequence[str]]] = None,
    size: Tuple[int, int] = (1200, 800),
) -> Path:
    """
    Render and save a layout preview.
    
    Creates ``output_dir`` if needed.
    
    Args:
        placements: Placements to draw
        output_dir: Directory for the PNG
        name: File stem
        labels: Optional per-card lines
        size: Preview size in pixels
        
    Returns:
        Path to the saved PNG ({name}_layout.png)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    preview = render_preview(placements, labels=labels, size=size)
    output_path = output_dir / f"{name}_layout.png"
    preview.save(output_path)
    logger.info(f"Saved layout preview: {output_path}")
    return output_path
