"""
Plotting utilities and color helpers.

Contains:
- set_map_style: Configure matplotlib for partition maps
- hex_to_rgb / contrast_color: Readable text color over a group color
- figure_size: Figure dimensions for single/double width output
- add_panel_label: Corner label on an axes
"""

from __future__ import annotations

from typing import Tuple


def set_map_style(font_size: int = 10, font_family: str = "sans-serif") -> None:
    """
    Configure matplotlib for partition maps.

    Parameters
    ----------
    font_size : int
        Base font size
    font_family : str
        Font family ('serif', 'sans-serif', 'monospace')
    """
    import matplotlib.pyplot as plt

    plt.rcParams.update({
        'font.size': font_size,
        'font.family': font_family,
        'axes.titlesize': font_size + 1,
        'legend.fontsize': font_size - 1,

        'figure.figsize': (7.0, 7.0),
        'figure.dpi': 100,
        'savefig.dpi': 200,
        'savefig.bbox': 'tight',
        'savefig.pad_inches': 0.05,

        # Maps carry no grid or ticks
        'axes.grid': False,
        'xtick.bottom': False,
        'ytick.left': False,
        'xtick.labelbottom': False,
        'ytick.labelleft': False,

        'legend.framealpha': 0.9,
        'legend.fancybox': False,
    })


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """
    Parse ``#rrggbb`` (or ``#rgb``) into integer channels.

    Raises
    ------
    ValueError
        If ``color`` is not a hex color.
    """
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Not a hex color: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def contrast_color(background: str) -> str:
    """
    Text color readable over ``background``.

    Uses perceived luminance ``(0.299 r + 0.587 g + 0.114 b) / 255``:
    black text above 0.5, white text otherwise.

    Returns
    -------
    str
        ``"#000000"`` or ``"#ffffff"``
    """
    r, g, b = hex_to_rgb(background)
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > 0.5 else "#ffffff"


def figure_size(width: str = "single", aspect: float = 1.0) -> Tuple[float, float]:
    """
    Get figure size in inches.

    Parameters
    ----------
    width : str
        'single', 'double' or 'half'
    aspect : float
        Height/width aspect ratio

    Returns
    -------
    Tuple[float, float]
        (width, height) in inches
    """
    widths = {
        "single": 3.5,
        "double": 7.0,
        "half": 1.75,
    }
    w = widths.get(width, 3.5)
    return (w, w * aspect)


def add_panel_label(ax, label: str, loc: str = "upper left", fontsize: int = 12) -> None:
    """Write ``label`` in a corner of ``ax``."""
    loc_coords = {
        "upper left": (0.02, 0.98),
        "upper right": (0.98, 0.98),
        "lower left": (0.02, 0.02),
        "lower right": (0.98, 0.02),
    }
    x, y = loc_coords.get(loc, (0.02, 0.98))
    ha = "left" if "left" in loc else "right"
    va = "top" if "upper" in loc else "bottom"
    ax.text(x, y, label, transform=ax.transAxes, fontsize=fontsize, fontweight="bold", ha=ha, va=va)
