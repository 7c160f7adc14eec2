"""
Plotting functions for division outputs.

Contains:
- plot_division_sizes: Bar chart of per-division count / population
- save_partition_map: Partition choropleth written to disk (geopandas)
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

import numpy as np

from ..evaluation.aggregator import AggregateRow
from ..partition.store import Group
from ..utils.io import ensure_parent_dir
from ..utils.plotting import figure_size, set_map_style


logger = logging.getLogger(__name__)


def plot_division_sizes(
    groups: List[Group],
    rows: List[AggregateRow],
    metric: str = "count",
    ax=None,
    title: Optional[str] = None,
) -> Any:
    """
    Plot one aggregate per division as a bar chart.

    Parameters
    ----------
    groups : List[Group]
        Divisions in index order (names and colors)
    rows : List[AggregateRow]
        Aggregates aligned with ``groups``
    metric : str
        'count', 'area_total', 'population_total' or 'density'
    ax : Optional[matplotlib.axes.Axes]
        Axes to plot on. If None, creates new figure.
    title : Optional[str]
        Plot title

    Returns
    -------
    matplotlib.axes.Axes
        The axes object
    """
    import matplotlib.pyplot as plt

    if metric not in ("count", "area_total", "population_total", "density"):
        raise ValueError(f"Unknown metric: {metric!r}")

    if ax is None:
        fig, ax = plt.subplots(figsize=figure_size("double", aspect=0.4))

    values = np.array([getattr(r, metric) for r in rows], dtype=float)
    x = np.arange(len(groups))
    ax.bar(x, values, color=[g.color for g in groups], edgecolor="black", linewidth=0.5)

    ax.set_ylabel(metric.replace("_", " ").capitalize())
    ax.set_xticks(x)
    ax.set_xticklabels([g.name for g in groups], rotation=45, ha='right', fontsize=8)

    if title:
        ax.set_title(title)

    plt.tight_layout()

    return ax


def save_partition_map(session, out_path: str, boundary_path: Optional[str] = None, title: str = "") -> str:
    """
    Render the session's partition and save it.

    Parameters
    ----------
    session : DivisionSession
        Source of unit styles
    out_path : str
        Image path; the format follows the extension
    boundary_path : str, optional
        Polygon file; defaults to the session's GeoJSON path
    title : str
        Figure title

    Returns
    -------
    str
        ``out_path``
    """
    import matplotlib.pyplot as plt

    from ..geo.shapefile import get_outer_border, load_unit_geometries, plot_partition_panel

    boundary_path = boundary_path or session.config.files.geojson_path
    units = load_unit_geometries(boundary_path)
    border = get_outer_border(units)

    set_map_style()
    fig, ax = plt.subplots()
    plot_partition_panel(ax, units, session.map_styles(), border=border, title=title)

    handles = [
        plt.Rectangle((0, 0), 1, 1, color=g.color, label=f"{g.name} ({g.count})")
        for g in session.store.groups()
    ]
    if handles:
        ax.legend(handles=handles, loc="lower left")

    ensure_parent_dir(out_path)
    fig.savefig(out_path, bbox_inches='tight')
    plt.close(fig)
    logger.info("Saved partition map to %s", os.path.abspath(out_path))
    return out_path
