"""
Component-level configuration dataclasses.

Contains configuration structures for the engine components:
- File paths for the three input sources
- Partition defaults (division count limits, palette, naming)
- Selection and highlight settings
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from .constants import (
    ATTRIBUTES_FILE,
    DEFAULT_DIVISION_NAME,
    DEFAULT_DIVISIONS,
    DIVISION_COLORS,
    GBA_CODES,
    GEOJSON_FILE,
    MAX_DIVISIONS,
    MAX_POLYGON_POINTS,
    MIN_DIVISIONS,
    MIN_POLYGON_POINTS,
    REGIONS_FILE,
)


@dataclass
class FilesConfig:
    """
    File and directory path configuration.

    Attributes
    ----------
    data_dir : str
        Root directory for input data files
    geojson_path : str
        Unit catalog (GeoJSON FeatureCollection)
    attributes_path : str
        Per-unit attribute table (JSON)
    regions_path : str
        Predefined-region table (JSON)
    output_dir : str
        Directory for tables and map images written by the CLI
    """
    data_dir: str = "data"
    geojson_path: str = ""
    attributes_path: str = ""
    regions_path: str = ""
    output_dir: str = "out"

    def __post_init__(self):
        """Set default file paths if not specified."""
        if not self.geojson_path:
            self.geojson_path = os.path.join(self.data_dir, GEOJSON_FILE)
        if not self.attributes_path:
            self.attributes_path = os.path.join(self.data_dir, ATTRIBUTES_FILE)
        if not self.regions_path:
            self.regions_path = os.path.join(self.data_dir, REGIONS_FILE)


@dataclass
class PartitionConfig:
    """
    Partition defaults.

    Attributes
    ----------
    initial_divisions : int
        K at startup and after reset
    min_divisions, max_divisions : int
        Inclusive bounds accepted for K
    palette : Tuple[str, ...]
        Group colors, indexed by ``(index - 1) % len(palette)``
    name_template : str
        Default group name; formatted with ``index``
    """
    initial_divisions: int = DEFAULT_DIVISIONS
    min_divisions: int = MIN_DIVISIONS
    max_divisions: int = MAX_DIVISIONS
    palette: Tuple[str, ...] = DIVISION_COLORS
    name_template: str = DEFAULT_DIVISION_NAME

    def __post_init__(self):
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if not (self.min_divisions <= self.initial_divisions <= self.max_divisions):
            raise ValueError(
                f"initial_divisions={self.initial_divisions} outside "
                f"[{self.min_divisions}, {self.max_divisions}]"
            )

    def color_for(self, index: int) -> str:
        """Palette color for a 1-based group index."""
        return self.palette[(index - 1) % len(self.palette)]

    def default_name(self, index: int) -> str:
        return self.name_template.format(index=index)


@dataclass
class SelectionConfig:
    """
    Polygon selection and highlight settings.

    Attributes
    ----------
    min_points : int
        Minimum boundary points for a polygon selection
    max_points : int
        Drawing auto-finalizes once this many points were added
    highlighted_codes : FrozenSet[str]
        Unit codes flagged as the highlighted category
    """
    min_points: int = MIN_POLYGON_POINTS
    max_points: int = MAX_POLYGON_POINTS
    highlighted_codes: FrozenSet[str] = field(default_factory=lambda: frozenset(GBA_CODES))


@dataclass
class SessionConfig:
    """Top-level configuration assembled by :func:`build_base_config`."""
    files: FilesConfig = field(default_factory=FilesConfig)
    partition: PartitionConfig = field(default_factory=PartitionConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    debug: bool = False
    region_type: Optional[str] = None
