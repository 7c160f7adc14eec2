"""
Selection set and polygon drawing.

A selection is a transient subset of unit codes, independent of where
those units sit in the partition. It is filled by a polygon query or by
manual picks, read by the move handler, and cleared after a move.

Contains:
- SelectionResult: Outcome of a polygon selection
- SelectionSet: The active selection
- PolygonDraft: Accumulates boundary points while the user draws
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config.dataclasses import SelectionConfig
from ..exceptions import TooFewPointsError
from ..geo.catalog import UnitCatalog
from ..geo.query import Rectangle, bounding_rectangle, units_in_rectangle
from .store import PartitionStore


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class SelectionResult:
    """
    Outcome of a polygon selection.

    Attributes
    ----------
    ids : Tuple[str, ...]
        Selected unit codes in catalog order (possibly empty)
    rectangle : Rectangle
        Bounding rectangle that was tested
    """
    ids: Tuple[str, ...]
    rectangle: Rectangle

    @property
    def count(self) -> int:
        return len(self.ids)

    @property
    def empty(self) -> bool:
        return not self.ids

    @property
    def message(self) -> str:
        if self.empty:
            return "No units found inside the polygon"
        return f"Selected {self.count} units"


class SelectionSet:
    """
    The active selection of unit codes.

    Parameters
    ----------
    catalog : UnitCatalog
        Used to validate codes and to run polygon queries
    config : SelectionConfig, optional
        Polygon point limits
    """

    def __init__(self, catalog: UnitCatalog, config: Optional[SelectionConfig] = None):
        self.catalog = catalog
        self.config = config or SelectionConfig()
        self._members: set = set()

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())

    def __repr__(self) -> str:
        return f"SelectionSet(n_selected={len(self)})"

    def contains(self, unit_id: str) -> bool:
        return unit_id in self._members

    def ids(self) -> List[str]:
        """Selected codes in catalog order."""
        return self.catalog.in_catalog_order(self._members)

    def select_by_polygon(
        self,
        boundary: Sequence[Sequence[float]],
        store: Optional[PartitionStore] = None,
    ) -> SelectionResult:
        """
        Replace the selection with the units inside a drawn boundary.

        A unit qualifies when its centroid is inside the boundary's
        axis-aligned bounding rectangle.

        Parameters
        ----------
        boundary : sequence of (x, y)
            Ordered boundary points, at least ``config.min_points``
        store : PartitionStore, optional
            If given and the selection is non-empty, selected units are
            brought to the front of the list they currently sit in.

        Returns
        -------
        SelectionResult

        Raises
        ------
        TooFewPointsError
            If the boundary has too few points; the prior selection is
            kept.
        """
        points = list(boundary)
        if len(points) < self.config.min_points:
            raise TooFewPointsError(len(points), self.config.min_points)

        rect = bounding_rectangle(points)
        ids = units_in_rectangle(self.catalog, rect)
        self._members = set(ids)

        if ids:
            logger.info("Polygon selection: %d units", len(ids))
            if store is not None:
                store.bring_to_front(ids)
        else:
            logger.info("Polygon selection found no units")
        return SelectionResult(ids=ids, rectangle=rect)

    def select(self, unit_ids: Iterable[str]) -> None:
        """Replace the selection with the given codes."""
        self._members = set(self.catalog.validate(unit_ids))

    def toggle(self, unit_id: str) -> bool:
        """
        Add or remove a single code.

        Returns
        -------
        bool
            True if the unit is selected afterwards.
        """
        self.catalog.get(unit_id)
        if unit_id in self._members:
            self._members.discard(unit_id)
            return False
        self._members.add(unit_id)
        return True

    def clear(self) -> None:
        self._members = set()


class PolygonDraft:
    """
    Boundary points collected while the user draws a selection polygon.

    Parameters
    ----------
    min_points : int
        Points needed before the polygon can be finalized
    max_points : int
        ``add_point`` reports the draft as full at this many points
    """

    def __init__(self, min_points: int = 3, max_points: int = 100):
        self.min_points = min_points
        self.max_points = max_points
        self.points: List[Point] = []

    def __len__(self) -> int:
        return len(self.points)

    @property
    def ready(self) -> bool:
        """Whether enough points were added to finalize."""
        return len(self.points) >= self.min_points

    @property
    def full(self) -> bool:
        return len(self.points) >= self.max_points

    def add_point(self, x: float, y: float) -> bool:
        """
        Append a boundary point.

        Returns
        -------
        bool
            True when the point limit is reached and the draft should be
            finalized.
        """
        if self.full:
            return True
        self.points.append((float(x), float(y)))
        return self.full

    def finalize(self) -> List[Point]:
        """
        Return the collected points and start a fresh draft.

        Raises
        ------
        TooFewPointsError
            If fewer than ``min_points`` were added; the points are kept.
        """
        if not self.ready:
            raise TooFewPointsError(len(self.points), self.min_points)
        points, self.points = self.points, []
        return points

    def cancel(self) -> None:
        self.points = []
