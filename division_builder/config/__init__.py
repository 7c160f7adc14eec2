"""
Configuration module for the division builder.

This module provides:
- Configuration dataclasses for files, partition and selection settings
- Engine constants (division limits, palette, highlighted codes, labels)
- build_base_config: assemble a SessionConfig from plain arguments
"""

import os

from .dataclasses import (
    FilesConfig,
    PartitionConfig,
    SelectionConfig,
    SessionConfig,
)

from .constants import (
    # Division count
    MIN_DIVISIONS,
    MAX_DIVISIONS,
    DEFAULT_DIVISIONS,
    DEFAULT_DIVISION_NAME,
    # Palette
    DIVISION_COLORS,
    # Highlighted category
    GBA_CODES,
    # Polygon selection
    MIN_POLYGON_POINTS,
    MAX_POLYGON_POINTS,
    # Attributes
    AREA_ATTRIBUTE,
    POPULATION_ATTRIBUTE,
    ATTRIBUTE_ALIASES,
)


DEBUG_ENV_VAR = "DIVISION_BUILDER_DEBUG"


def build_base_config(
    data_dir: str = "data",
    geojson_path: str = "",
    attributes_path: str = "",
    regions_path: str = "",
    output_dir: str = "out",
    initial_divisions: int = DEFAULT_DIVISIONS,
    debug: bool = False,
) -> SessionConfig:
    """
    Build a session configuration.

    Parameters
    ----------
    data_dir : str
        Directory containing the input files
    geojson_path, attributes_path, regions_path : str
        Explicit file paths; empty strings fall back to ``data_dir`` defaults
    output_dir : str
        Output directory for tables and images
    initial_divisions : int
        Division count at startup
    debug : bool
        Force debug logging; also enabled by ``DIVISION_BUILDER_DEBUG=1``

    Returns
    -------
    SessionConfig
    """
    env_debug = os.environ.get(DEBUG_ENV_VAR, "0").lower() in ("1", "true", "yes")
    files_cfg = FilesConfig(
        data_dir=data_dir,
        geojson_path=geojson_path,
        attributes_path=attributes_path,
        regions_path=regions_path,
        output_dir=output_dir,
    )
    return SessionConfig(
        files=files_cfg,
        partition=PartitionConfig(initial_divisions=initial_divisions),
        selection=SelectionConfig(),
        debug=debug or env_debug,
    )


__all__ = [
    "FilesConfig",
    "PartitionConfig",
    "SelectionConfig",
    "SessionConfig",
    "build_base_config",
    "DEBUG_ENV_VAR",
    "MIN_DIVISIONS",
    "MAX_DIVISIONS",
    "DEFAULT_DIVISIONS",
    "DEFAULT_DIVISION_NAME",
    "DIVISION_COLORS",
    "GBA_CODES",
    "MIN_POLYGON_POINTS",
    "MAX_POLYGON_POINTS",
    "AREA_ATTRIBUTE",
    "POPULATION_ATTRIBUTE",
    "ATTRIBUTE_ALIASES",
]
