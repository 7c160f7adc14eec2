"""
Data loading and preprocessing module.

This module provides:
- Loaders: GeoJSON unit catalog, attribute table, region table
- load_all: concurrent loading of the three sources
- Preprocessing: column resolution, number parsing, code normalization
"""

from .preprocessing import (
    resolve_column,
    normalize_code,
    standardize_attribute_frame,
    flatten_coordinates,
)

from .loaders import (
    LoadedData,
    load_geojson_catalog,
    load_attribute_table,
    attribute_frame_from_mapping,
    load_region_table,
    region_table_from_mapping,
    load_all,
)

__all__ = [
    # Preprocessing
    "resolve_column",
    "normalize_code",
    "standardize_attribute_frame",
    "flatten_coordinates",
    # Loaders
    "LoadedData",
    "load_geojson_catalog",
    "load_attribute_table",
    "attribute_frame_from_mapping",
    "load_region_table",
    "region_table_from_mapping",
    "load_all",
]
