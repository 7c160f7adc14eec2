"""
Exception types raised by the division builder.

Input-validation failures subclass ``ValueError`` and leave state
unchanged. Unknown unit codes subclass ``KeyError``.
"""

from __future__ import annotations


class TooFewPointsError(ValueError):
    """A polygon boundary had fewer points than required."""

    def __init__(self, n_points: int, min_points: int = 3):
        self.n_points = n_points
        self.min_points = min_points
        super().__init__(
            f"At least {min_points} points are needed to build a polygon, got {n_points}"
        )


class DivisionCountError(ValueError):
    """A division count or group index outside the accepted range."""

    def __init__(self, value: int, low: int, high: int):
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"Division {value} outside [{low}, {high}]")


class UnknownUnitError(KeyError):
    """A unit id that is not in the catalog."""


class RegionDataUnavailable(RuntimeError):
    """The predefined-region table was not loaded."""
