"""
Geometry query for polygon selection.

Containment is approximated: a unit is inside a boundary when its
representative centroid lies inside the boundary's axis-aligned bounding
rectangle. The boundary's actual shape is not tested.

Contains:
- Rectangle: Axis-aligned rectangle with inclusive edges
- bounding_rectangle: Rectangle enclosing a sequence of points
- rectangle_contains: Point-in-rectangle test
- units_in_rectangle: Catalog scan for units whose centroid is inside
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .catalog import UnitCatalog


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle; edges are inside."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def intersects(self, other: "Rectangle") -> bool:
        return not (
            other.min_x > self.max_x
            or other.max_x < self.min_x
            or other.min_y > self.max_y
            or other.max_y < self.min_y
        )


def bounding_rectangle(points: Sequence[Sequence[float]]) -> Rectangle:
    """
    Axis-aligned bounding rectangle of a point sequence.

    Parameters
    ----------
    points : array-like
        Shape (n, 2) of (x, y) positions, n >= 1

    Returns
    -------
    Rectangle
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] != 2:
        raise ValueError(f"Expected (n, 2) points, got shape {arr.shape}")
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return Rectangle(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


def rectangle_contains(rect: Rectangle, point: Sequence[float]) -> bool:
    """Whether ``point = (x, y)`` lies inside ``rect`` (edges included)."""
    return rect.contains(float(point[0]), float(point[1]))


def units_in_rectangle(catalog: UnitCatalog, rect: Rectangle) -> Tuple[str, ...]:
    """
    Codes of the units whose centroid lies in ``rect``.

    A linear scan over the catalog's centroid array; the result is in
    catalog order.
    """
    centroids = catalog.centroid_array()
    if centroids.shape[0] == 0:
        return ()
    x = centroids[:, 0]
    y = centroids[:, 1]
    mask = (x >= rect.min_x) & (x <= rect.max_x) & (y >= rect.min_y) & (y <= rect.max_y)
    return tuple(catalog.ids[i] for i in np.flatnonzero(mask))
