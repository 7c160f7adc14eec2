"""Unit boundary loading and partition map panel rendering.

Provides utilities for loading the unit polygons (GeoJSON or shapefile)
as a GeoDataFrame and rendering a partition on matplotlib axes.

Requires ``geopandas >= 0.12``.  Install via::

    pip install geopandas

or::

    pip install -e ".[geo]"
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Mapping, Optional

if TYPE_CHECKING:
    import geopandas as gpd
    from ..session import UnitStyle


# ---------------------------------------------------------------------------
# Boundary loading
# ---------------------------------------------------------------------------

def _require_geopandas():
    try:
        import geopandas as gpd
    except ImportError:
        raise ImportError(
            "geopandas is required for map rendering. "
            "Install it with:  pip install geopandas"
        )
    return gpd


def load_unit_geometries(path: str, code_key: str = "cde") -> "gpd.GeoDataFrame":
    """Load unit polygons.

    Parameters
    ----------
    path : str
        GeoJSON, shapefile or GeoPackage readable by geopandas.
    code_key : str
        Attribute holding the unit code.

    Returns
    -------
    gpd.GeoDataFrame
        Unit polygons with a string ``code`` column.

    Raises
    ------
    ImportError
        If *geopandas* is not installed.
    FileNotFoundError
        If *path* does not exist.
    KeyError
        If no code column is found.
    """
    gpd = _require_geopandas()

    if not os.path.isfile(path):
        raise FileNotFoundError(f"Boundary file not found: {path}")

    gdf = gpd.read_file(path)

    code_col: Optional[str] = None
    for candidate_col in (code_key, "cde", "code", "link", "CDE"):
        if candidate_col in gdf.columns:
            code_col = candidate_col
            break

    if code_col is None:
        raise KeyError(
            f"Could not find a unit code column in {path}. "
            f"Available columns: {list(gdf.columns)}."
        )

    gdf["code"] = gdf[code_col].astype(str).str.strip()
    return gdf


def get_outer_border(units: "gpd.GeoDataFrame") -> "gpd.GeoSeries":
    """Dissolve unit polygons into a single outer boundary.

    Parameters
    ----------
    units : gpd.GeoDataFrame
        Output of :func:`load_unit_geometries`.

    Returns
    -------
    gpd.GeoSeries
        Single-row GeoSeries with the dissolved outline.
    """
    dissolved = units.dissolve()
    return dissolved.geometry


# ---------------------------------------------------------------------------
# Panel rendering
# ---------------------------------------------------------------------------

def plot_partition_panel(
    ax,
    units: "gpd.GeoDataFrame",
    styles: Mapping[str, "UnitStyle"],
    border: Optional["gpd.GeoSeries"] = None,
    title: str = "",
    border_color: str = "black",
    border_linewidth: float = 0.6,
    fontsize: int = 9,
) -> None:
    """Render a partition on *ax*.

    Parameters
    ----------
    ax : matplotlib.axes.Axes
        Target axes.
    units : gpd.GeoDataFrame
        Unit polygons (must have a ``code`` column).
    styles : mapping
        ``code -> UnitStyle`` as produced by ``DivisionSession.map_styles``.
        Units without a style are skipped.
    border : gpd.GeoSeries, optional
        Outer boundary overlay (from :func:`get_outer_border`).
    title : str
        Panel title.
    border_color : str
        Stroke colour for the outer boundary.
    border_linewidth : float
        Linewidth for the outer boundary.
    fontsize : int
        Title font size.
    """
    styled = units[units["code"].isin(set(styles))]

    # Pool units first so group fills and selections draw on top
    order = sorted(
        styled.index,
        key=lambda i: styles[styled.at[i, "code"]].fill_opacity,
    )
    for i in order:
        style = styles[styled.at[i, "code"]]
        row = styled.loc[[i]]
        if style.fill_opacity > 0:
            row.plot(
                ax=ax, color=style.fill_color, alpha=style.fill_opacity,
                edgecolor="none",
            )
        row.boundary.plot(
            ax=ax, color=style.edge_color, linewidth=style.edge_weight * 0.5,
            alpha=style.edge_opacity,
        )

    if border is not None:
        border.boundary.plot(
            ax=ax, color=border_color, linewidth=border_linewidth,
        )

    ax.set_title(title, fontsize=fontsize, pad=4)
    ax.set_axis_off()
    ax.set_aspect("equal")
