"""
Utility functions for the division builder.

This module provides:
- I/O utilities (directory creation, JSON reading)
- Plotting utilities (matplotlib configuration, text contrast)
"""

from .io import ensure_dir, ensure_parent_dir, read_json

from .plotting import (
    set_map_style,
    hex_to_rgb,
    contrast_color,
    figure_size,
    add_panel_label,
)

__all__ = [
    # I/O
    "ensure_dir",
    "ensure_parent_dir",
    "read_json",
    # Plotting
    "set_map_style",
    "hex_to_rgb",
    "contrast_color",
    "figure_size",
    "add_panel_label",
]
