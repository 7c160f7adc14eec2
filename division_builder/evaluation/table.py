"""
Division comparison table.

Builds the labels, headers and formatted cells of the table that
compares divisions side by side. Rendering is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from ..config.constants import (
    LOADING_MESSAGE,
    ROW_LABEL_AREA,
    ROW_LABEL_COUNT,
    ROW_LABEL_DENSITY,
    ROW_LABEL_POPULATION,
    TABLE_VARIABLE_HEADER,
)
from ..partition.store import PartitionStore
from ..utils.plotting import contrast_color
from .aggregator import Aggregator, rows_to_text


@dataclass(frozen=True)
class ColumnHeader:
    """Header cell for one division."""
    group_index: int
    name: str
    color: str
    text_color: str


@dataclass
class ComparisonTable:
    """
    Comparison table contents.

    Attributes
    ----------
    headers : List[ColumnHeader]
        One per division, in index order
    rows : List[List[str]]
        Each row is ``[label, cell_1, ..., cell_K]``
    message : str, optional
        Placeholder shown instead of the rows while data is missing
    """
    headers: List[ColumnHeader] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def ready(self) -> bool:
        return self.message is None

    def to_frame(self) -> pd.DataFrame:
        """Rows as a DataFrame indexed by row label, one column per division."""
        columns = [h.name for h in self.headers]
        if not self.ready:
            return pd.DataFrame(columns=columns)
        df = pd.DataFrame([row[1:] for row in self.rows], columns=columns)
        df.index = pd.Index([row[0] for row in self.rows], name=TABLE_VARIABLE_HEADER)
        return df

    def to_text(self) -> str:
        """Plain-text rendering, columns padded to width."""
        head = [TABLE_VARIABLE_HEADER] + [h.name for h in self.headers]
        if not self.ready:
            return "\t".join(head) + "\n" + str(self.message)
        body = [head] + self.rows
        widths = [max(len(r[i]) for r in body) for i in range(len(head))]
        lines = []
        for r in body:
            cells = [r[0].ljust(widths[0])] + [c.rjust(w) for c, w in zip(r[1:], widths[1:])]
            lines.append("  ".join(cells))
        return "\n".join(lines)


def comparison_table(store: PartitionStore, aggregator: Aggregator) -> ComparisonTable:
    """
    Build the comparison table for the current partition.

    Without an attribute table the rows are replaced by the loading
    placeholder; headers are always filled.
    """
    headers = [
        ColumnHeader(
            group_index=g.index,
            name=g.name,
            color=g.color,
            text_color=contrast_color(g.color),
        )
        for g in store.groups()
    ]
    if not aggregator.data_available:
        return ComparisonTable(headers=headers, message=LOADING_MESSAGE)

    cells = [rows_to_text(row) for row in aggregator.compute_all(store)]
    labels = [ROW_LABEL_COUNT, ROW_LABEL_AREA, ROW_LABEL_POPULATION, ROW_LABEL_DENSITY]
    rows = [[label] + [c[i] for c in cells] for i, label in enumerate(labels)]
    return ComparisonTable(headers=headers, rows=rows)
