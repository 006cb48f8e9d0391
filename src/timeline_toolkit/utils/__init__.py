"""Debug utilities for inspecting layouts."""

from .visualizer import placement_to_pixels, render_preview, save_preview

__all__ = ["placement_to_pixels", "render_preview", "save_preview"]
