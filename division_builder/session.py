"""
Division session.

A DivisionSession owns the catalog, the partition, the active selection,
the attribute and region tables, and translates UI gestures (drag end,
polygon finalize, count change, rename, region-type change, reset) into
engine calls. All reads and writes go through one reentrant lock.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from .config.constants import (
    ASSIGNED_EDGE_COLOR,
    HIGHLIGHTED_EDGE_WEIGHT,
    POOL_EDGE_COLOR,
    POOL_EDGE_WEIGHT,
    POOL_FILL_COLOR,
    SELECTED_EDGE_COLOR,
    SELECTED_FILL_COLOR,
)
from .config.dataclasses import SessionConfig
from .data.loaders import RegionTable, load_all
from .evaluation.aggregator import AggregateRow, Aggregator
from .evaluation.table import ComparisonTable, comparison_table
from .exceptions import RegionDataUnavailable
from .geo.catalog import UnitCatalog
from .partition.regions import apply_region_table
from .partition.selection import PolygonDraft, SelectionResult, SelectionSet
from .partition.store import POOL, Location, PartitionStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitStyle:
    """Map style for one unit."""
    fill_color: str
    fill_opacity: float
    edge_color: str
    edge_weight: float
    edge_opacity: float = 1.0


class DivisionSession:
    """
    Interactive division session.

    Parameters
    ----------
    catalog : UnitCatalog
        Units to partition
    attributes : DataFrame or mapping, optional
        Attribute table; ``None`` until loaded
    regions : dict, optional
        Predefined-region table; ``None`` if unavailable
    config : SessionConfig, optional
        Partition and selection settings

    Attributes
    ----------
    store : PartitionStore
    selection : SelectionSet
    aggregator : Aggregator
    region_type : str or None
        Region type of the last applied predefined partition; cleared by
        any manual edit
    """

    def __init__(
        self,
        catalog: UnitCatalog,
        attributes=None,
        regions: Optional[RegionTable] = None,
        config: Optional[SessionConfig] = None,
    ):
        self.config = config or SessionConfig()
        self.catalog = catalog
        self.store = PartitionStore(catalog, self.config.partition)
        self.selection = SelectionSet(catalog, self.config.selection)
        self.aggregator = Aggregator(attributes)
        self.regions = regions
        self.region_type: Optional[str] = None
        self.draft: Optional[PolygonDraft] = None
        self._lock = threading.RLock()
        self._rows: List[AggregateRow] = []
        self.store.subscribe(self._on_change)
        self._on_change(self.store)

    @classmethod
    async def load(cls, config: Optional[SessionConfig] = None) -> "DivisionSession":
        """
        Load the three input files concurrently and build a session.

        The catalog must load; missing attribute or region tables leave the
        session usable with the loading placeholder / no region types.
        """
        config = config or SessionConfig()
        files = config.files
        data = await load_all(
            files.geojson_path,
            files.attributes_path,
            files.regions_path,
            highlighted_codes=config.selection.highlighted_codes,
        )
        session = cls(data.catalog, data.attributes, data.regions, config)
        if config.region_type:
            session.load_existing_regions(config.region_type)
        return session

    @classmethod
    def load_sync(cls, config: Optional[SessionConfig] = None) -> "DivisionSession":
        """Blocking wrapper around :meth:`load`."""
        return asyncio.run(cls.load(config))

    def __repr__(self) -> str:
        return f"DivisionSession({self.store!r}, selected={len(self.selection)})"

    # ---- State queries ----

    @property
    def is_ready(self) -> bool:
        """Whether attribute data is available for aggregates."""
        return self.aggregator.data_available

    @property
    def region_types(self) -> List[str]:
        return sorted(self.regions) if self.regions else []

    def remaining_count(self) -> int:
        with self._lock:
            return self.store.remaining_count()

    def location_of(self, unit_id: str) -> Location:
        with self._lock:
            return self.store.location_of(unit_id)

    # ---- Gestures ----

    def set_division_count(self, n: int) -> None:
        """Change the number of divisions (1..12)."""
        with self._lock:
            self.store.resize(n)
            self.region_type = None

    def drag_end(self, unit_id: str, destination: Location) -> List[str]:
        """
        Handle a unit dropped on a list.

        If the unit is part of a non-empty selection, the whole selection
        moves; otherwise only the unit moves. The selection is cleared
        afterwards.

        Returns
        -------
        List[str]
            Ids that changed location.
        """
        with self._lock:
            self.catalog.get(unit_id)
            if unit_id in self.selection:
                ids = self.selection.ids()
            else:
                ids = [unit_id]
            moved = self.store.move_batch(ids, destination)
            self.selection.clear()
            self.region_type = None
            logger.debug("Drag end: %d of %d units moved to %s", len(moved), len(ids), destination)
            return moved

    def start_polygon(self) -> PolygonDraft:
        """Enter drawing mode with a fresh draft and an empty selection."""
        with self._lock:
            self.selection.clear()
            sel = self.config.selection
            self.draft = PolygonDraft(sel.min_points, sel.max_points)
            return self.draft

    def add_polygon_point(self, x: float, y: float) -> Optional[SelectionResult]:
        """
        Add a point to the current draft.

        Returns
        -------
        SelectionResult or None
            The selection result if the draft hit its point limit and was
            finalized, else None.
        """
        with self._lock:
            if self.draft is None:
                self.start_polygon()
            if self.draft.add_point(x, y):
                return self.finalize_polygon()
            return None

    def cancel_polygon(self) -> None:
        with self._lock:
            self.draft = None

    def finalize_polygon(self, points=None) -> SelectionResult:
        """
        Select the units inside a boundary.

        Parameters
        ----------
        points : sequence of (x, y), optional
            Boundary; defaults to the current draft's points

        Raises
        ------
        TooFewPointsError
            With fewer than three points; the previous selection and the
            draft are kept.
        """
        with self._lock:
            if points is None:
                if self.draft is None:
                    self.start_polygon()
                points = self.draft.finalize()
            result = self.selection.select_by_polygon(points, self.store)
            self.draft = None
            return result

    def clear_selection(self) -> None:
        with self._lock:
            self.selection.clear()

    def rename_division(self, index: int, name: str) -> None:
        with self._lock:
            self.store.rename(index, name)
            self.region_type = None

    def load_existing_regions(self, region_type: str) -> List[str]:
        """
        Replace the partition with a predefined region type.

        Raises
        ------
        RegionDataUnavailable
            If no region table was loaded.
        KeyError
            If the region type is unknown.
        """
        with self._lock:
            if not self.regions:
                raise RegionDataUnavailable("Predefined regions are not loaded")
            names = apply_region_table(self.store, self.regions, region_type)
            self.selection.clear()
            self.region_type = region_type
            return names

    def reset(self) -> None:
        """Back to the initial division count, every unit in the pool."""
        with self._lock:
            self.store.reset()
            self.selection.clear()
            self.draft = None
            self.region_type = None

    # ---- Projections ----

    def unit_style(self, unit_id: str) -> UnitStyle:
        """Map style for a unit: selected, assigned to a group, or in the pool."""
        with self._lock:
            unit = self.catalog.get(unit_id)
            if unit_id in self.selection:
                return UnitStyle(SELECTED_FILL_COLOR, 0.7, SELECTED_EDGE_COLOR, 3.0)
            location = self.store.location_of(unit_id)
            if location is not POOL:
                color = self.store.group(location).color
                return UnitStyle(color, 0.8, ASSIGNED_EDGE_COLOR, HIGHLIGHTED_EDGE_WEIGHT)
            weight = HIGHLIGHTED_EDGE_WEIGHT if unit.is_highlighted else POOL_EDGE_WEIGHT
            return UnitStyle(POOL_FILL_COLOR, 0.0, POOL_EDGE_COLOR, weight, 0.8)

    def map_styles(self) -> Dict[str, UnitStyle]:
        """Style of every unit, in catalog order."""
        with self._lock:
            return {uid: self.unit_style(uid) for uid in self.catalog.ids}

    def aggregate_rows(self) -> List[AggregateRow]:
        """Aggregates for groups 1..K, as of the last mutation."""
        with self._lock:
            return list(self._rows)

    def comparison_table(self) -> ComparisonTable:
        with self._lock:
            return comparison_table(self.store, self.aggregator)

    def summary_frame(self) -> pd.DataFrame:
        with self._lock:
            return self.aggregator.to_frame(self.store)

    def set_attributes(self, attributes) -> None:
        """Install an attribute table that finished loading late."""
        with self._lock:
            self.aggregator.set_attributes(attributes)
            self._on_change(self.store)

    # ---- Internals ----

    def _on_change(self, store: PartitionStore) -> None:
        self._rows = self.aggregator.compute_all(store)
