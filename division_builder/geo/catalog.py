"""
Unit catalog.

Contains:
- SpatialExtent: Bounding box and representative centroid of a unit
- Unit: A partitionable geographic unit (partido / department)
- UnitCatalog: Immutable registry of every unit loaded for a session
- build_unit_catalog: Build a catalog from plain records
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..exceptions import UnknownUnitError


@dataclass(frozen=True)
class SpatialExtent:
    """
    Axis-aligned bounding box of a unit.

    The representative centroid is the center of the box, which is what
    the polygon selection tests against.

    Attributes
    ----------
    min_x, min_y, max_x, max_y : float
        Box corners in the catalog's coordinate system (lon/lat for
        GeoJSON sources).
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def centroid(self) -> Tuple[float, float]:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_coordinates(cls, coords: Sequence[Sequence[float]]) -> "SpatialExtent":
        """
        Build an extent from a flat sequence of (x, y) positions.

        Parameters
        ----------
        coords : array-like
            Shape (n, 2) or wider; extra ordinates (z) are ignored.

        Returns
        -------
        SpatialExtent
        """
        arr = np.asarray(coords, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] < 2:
            raise ValueError(f"Expected a non-empty (n, 2) coordinate array, got shape {arr.shape}")
        xy = arr[:, :2]
        lo = xy.min(axis=0)
        hi = xy.max(axis=0)
        return cls(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


@dataclass(frozen=True)
class Unit:
    """
    A partitionable geographic unit.

    Attributes
    ----------
    id : str
        Stable unique code (e.g. INDEC ``cde`` code ``"06028"``)
    name : str
        Display name
    extent : SpatialExtent
        Bounding box and centroid
    is_highlighted : bool
        Member of the highlighted category (e.g. Greater Buenos Aires)
    """
    id: str
    name: str
    extent: SpatialExtent
    is_highlighted: bool = False

    @property
    def centroid(self) -> Tuple[float, float]:
        return self.extent.centroid

    @property
    def sort_key(self) -> Tuple[str, str]:
        """Case-insensitive display order, ties broken by code."""
        return (self.name.casefold(), self.id)


class UnitCatalog:
    """
    Immutable registry of all partitionable units.

    Units are kept in display order (case-insensitive by name). The
    catalog is created once at load time and only read afterwards.

    Attributes
    ----------
    ids : Tuple[str, ...]
        Unit codes in catalog (display) order
    """

    def __init__(self, units: Iterable[Unit]):
        ordered = sorted(units, key=lambda u: u.sort_key)
        by_id: Dict[str, Unit] = {}
        for unit in ordered:
            if unit.id in by_id:
                raise ValueError(f"Duplicate unit code: {unit.id!r}")
            by_id[unit.id] = unit
        self._units: Tuple[Unit, ...] = tuple(ordered)
        self._by_id = by_id
        self._position = {u.id: i for i, u in enumerate(ordered)}
        self._centroids: Optional[np.ndarray] = None
        self.ids: Tuple[str, ...] = tuple(u.id for u in ordered)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._by_id

    def __repr__(self) -> str:
        return f"UnitCatalog(n_units={len(self)}, n_highlighted={len(self.highlighted_ids())})"

    @property
    def N(self) -> int:
        """Total number of units."""
        return len(self._units)

    def get(self, unit_id: str) -> Unit:
        """Return the unit for a code, raising :class:`UnknownUnitError` if absent."""
        try:
            return self._by_id[unit_id]
        except KeyError:
            raise UnknownUnitError(unit_id) from None

    def name_of(self, unit_id: str) -> str:
        return self.get(unit_id).name

    def code_for_name(self, name: str) -> Optional[str]:
        """Look up a unit code by exact display name."""
        for unit in self._units:
            if unit.name == name:
                return unit.id
        return None

    def position(self, unit_id: str) -> int:
        """Index of a unit in catalog order."""
        try:
            return self._position[unit_id]
        except KeyError:
            raise UnknownUnitError(unit_id) from None

    def validate(self, unit_ids: Iterable[str]) -> List[str]:
        """
        Check that every id is cataloged.

        Returns
        -------
        List[str]
            The ids as a list, in the given order.

        Raises
        ------
        UnknownUnitError
            On the first id that is not in the catalog.
        """
        out = list(unit_ids)
        for unit_id in out:
            if unit_id not in self._by_id:
                raise UnknownUnitError(unit_id)
        return out

    def in_catalog_order(self, unit_ids: Iterable[str]) -> List[str]:
        """Sort cataloged ids by catalog order."""
        return sorted(set(unit_ids), key=self.position)

    def highlighted_ids(self) -> Tuple[str, ...]:
        return tuple(u.id for u in self._units if u.is_highlighted)

    def centroid_array(self) -> np.ndarray:
        """Centroids of all units in catalog order, shape (N, 2)."""
        if self._centroids is None:
            if not self._units:
                self._centroids = np.empty((0, 2), dtype=np.float64)
            else:
                self._centroids = np.array([u.centroid for u in self._units], dtype=np.float64)
            self._centroids.setflags(write=False)
        return self._centroids


def build_unit_catalog(
    records: Iterable[Mapping[str, Any]],
    highlighted_codes: Iterable[str] = (),
) -> UnitCatalog:
    """
    Build a UnitCatalog from plain records.

    Parameters
    ----------
    records : iterable of mappings
        Each record needs ``code`` and ``name`` plus either ``extent``
        (a :class:`SpatialExtent`), ``bbox`` (``min_x, min_y, max_x,
        max_y``), ``coordinates`` (an (n, 2) array) or ``centroid``
        (a single point, giving a zero-size box).
    highlighted_codes : iterable of str
        Codes flagged as the highlighted category.

    Returns
    -------
    UnitCatalog
    """
    highlighted = {str(c) for c in highlighted_codes}
    units = []
    for rec in records:
        code = str(rec["code"]).strip()
        name = str(rec.get("name") or code)
        if rec.get("extent") is not None:
            extent = rec["extent"]
        elif rec.get("bbox") is not None:
            extent = SpatialExtent(*(float(v) for v in rec["bbox"]))
        elif rec.get("coordinates") is not None:
            extent = SpatialExtent.from_coordinates(rec["coordinates"])
        elif rec.get("centroid") is not None:
            extent = SpatialExtent.from_coordinates([rec["centroid"]])
        else:
            raise ValueError(f"Record {code!r} has no spatial information")
        units.append(Unit(id=code, name=name, extent=extent, is_highlighted=code in highlighted))
    return UnitCatalog(units)
