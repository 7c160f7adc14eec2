"""
Per-group aggregate statistics.

Contains:
- AggregateRow: count, area, population and density of one group
- Aggregator: sums attribute values over group members
- format_count: thousands-grouped number text
- density_text: one-decimal density text with the "0.0" sentinel
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from ..config.constants import (
    AREA_ATTRIBUTE,
    DENSITY_SENTINEL,
    MISSING_VALUE_TEXT,
    POPULATION_ATTRIBUTE,
    THOUSANDS_SEPARATOR,
)
from ..data.preprocessing import normalize_code
from ..partition.store import PartitionStore


logger = logging.getLogger(__name__)

AttributeSource = Union[pd.DataFrame, Mapping[str, Mapping[str, Any]]]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def format_count(value: Any, decimals: int = 1) -> str:
    """
    Format a number with ``.`` as the thousands separator.

    Integral values are printed without decimals. Other values get
    ``decimals`` digits after a ``,`` decimal separator.

    Examples
    --------
    >>> format_count(1234567)
    '1.234.567'
    >>> format_count(0)
    '0'
    >>> format_count(None)
    '-'
    """
    if _is_missing(value):
        return MISSING_VALUE_TEXT
    number = float(value)
    if number == 0:
        return "0"
    if number.is_integer():
        return f"{int(number):,}".replace(",", THOUSANDS_SEPARATOR)
    text = f"{number:,.{decimals}f}"
    whole, _, frac = text.partition(".")
    whole = whole.replace(",", THOUSANDS_SEPARATOR)
    return f"{whole},{frac}" if frac else whole


def density_text(population: float, area: float) -> str:
    """Population per area with one decimal, ``"0.0"`` unless both are positive."""
    if population > 0 and area > 0:
        return f"{population / area:.1f}"
    return DENSITY_SENTINEL


@dataclass(frozen=True)
class AggregateRow:
    """
    Aggregate statistics for one group.

    Attributes
    ----------
    group_index : int
        1-based group index (0 for catalog totals)
    count : int
        Number of member units
    area_total : float
        Sum of member areas (km²), missing entries skipped
    population_total : float
        Sum of member populations, missing entries skipped
    density : float
        ``population_total / area_total`` when both are positive, else 0.0
    """
    group_index: int
    count: int
    area_total: float
    population_total: float
    density: float

    @property
    def density_text(self) -> str:
        return density_text(self.population_total, self.area_total)

    def as_dict(self) -> dict:
        return {
            "group_index": self.group_index,
            "count": self.count,
            "area_total": self.area_total,
            "population_total": self.population_total,
            "density": self.density,
        }


class Aggregator:
    """
    Sum attribute values over group members.

    Never raises for missing data: units without an attribute entry, or
    with a missing value, contribute nothing.

    Parameters
    ----------
    attributes : DataFrame or mapping, optional
        Indexed by unit code with columns ``area`` and
        ``population_total``, or a ``code -> {attribute: value}`` mapping.
        ``None`` means the table has not been loaded.
    area_column, population_column : str
        Column names to sum
    """

    def __init__(
        self,
        attributes: Optional[AttributeSource] = None,
        area_column: str = AREA_ATTRIBUTE,
        population_column: str = POPULATION_ATTRIBUTE,
    ):
        self.area_column = area_column
        self.population_column = population_column
        self._table = self._coerce(attributes)

    def _coerce(self, attributes: Optional[AttributeSource]) -> Optional[pd.DataFrame]:
        if attributes is None:
            return None
        if isinstance(attributes, pd.DataFrame):
            df = attributes.copy()
        else:
            df = pd.DataFrame.from_dict(dict(attributes), orient="index")
        df.index = df.index.map(normalize_code)
        for col in (self.area_column, self.population_column):
            if col not in df.columns:
                df[col] = np.nan
            df[col] = pd.to_numeric(df[col], errors="coerce")
        return df[[self.area_column, self.population_column]]

    @property
    def data_available(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> Optional[pd.DataFrame]:
        return self._table

    def set_attributes(self, attributes: Optional[AttributeSource]) -> None:
        self._table = self._coerce(attributes)

    def sum_over(self, unit_ids: Iterable[str], group_index: int = 0) -> AggregateRow:
        """Aggregate an arbitrary set of units."""
        ids = list(unit_ids)
        area = population = 0.0
        if self._table is not None and ids:
            sub = self._table.reindex(ids)
            area = float(sub[self.area_column].sum(skipna=True))
            population = float(sub[self.population_column].sum(skipna=True))
        density = population / area if population > 0 and area > 0 else 0.0
        return AggregateRow(
            group_index=group_index,
            count=len(ids),
            area_total=area,
            population_total=population,
            density=density,
        )

    def compute_row(self, store: PartitionStore, group_index: int) -> AggregateRow:
        """Aggregate the members of one group."""
        return self.sum_over(store.members(group_index), group_index)

    def compute_all(self, store: PartitionStore) -> List[AggregateRow]:
        """Rows for groups 1..K."""
        return [self.compute_row(store, g.index) for g in store.groups()]

    def totals(self, store: PartitionStore) -> AggregateRow:
        """Aggregate over the whole catalog."""
        return self.sum_over(store.catalog.ids, 0)

    def to_frame(self, store: PartitionStore) -> pd.DataFrame:
        """
        Aggregate rows as a DataFrame indexed by group name.

        Returns
        -------
        pd.DataFrame
            Columns: group_index, color, count, area_total,
            population_total, density.
        """
        records = []
        names = []
        for group, row in zip(store.groups(), self.compute_all(store)):
            rec = row.as_dict()
            rec["color"] = group.color
            records.append(rec)
            names.append(group.name)
        columns = ["group_index", "color", "count", "area_total", "population_total", "density"]
        df = pd.DataFrame.from_records(records, columns=columns)
        df.index = pd.Index(names, name="division")
        return df


def rows_to_text(row: AggregateRow) -> List[str]:
    """Formatted cells for one row: count, area, population, density."""
    return [
        format_count(row.count),
        format_count(row.area_total),
        format_count(row.population_total),
        row.density_text,
    ]
