"""
Geographic units module.

This module provides:
- UnitCatalog: registry of partitionable units with bounding boxes
- Geometry query: bounding-rectangle containment for polygon selection
- Boundary loading and map panels (optional, requires geopandas)
"""

from .catalog import (
    SpatialExtent,
    Unit,
    UnitCatalog,
    build_unit_catalog,
)

from .query import (
    Rectangle,
    bounding_rectangle,
    rectangle_contains,
    units_in_rectangle,
)

from .shapefile import (
    load_unit_geometries,
    get_outer_border,
    plot_partition_panel,
)

__all__ = [
    # Catalog
    "SpatialExtent",
    "Unit",
    "UnitCatalog",
    "build_unit_catalog",
    # Query
    "Rectangle",
    "bounding_rectangle",
    "rectangle_contains",
    "units_in_rectangle",
    # Boundaries (geopandas imported on first use)
    "load_unit_geometries",
    "get_outer_border",
    "plot_partition_panel",
]
