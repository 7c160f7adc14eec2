"""Table export utilities."""

from __future__ import annotations

import logging

import pandas as pd

from ..evaluation.table import ComparisonTable
from ..utils.io import ensure_parent_dir


logger = logging.getLogger(__name__)


def write_comparison_csv(table: ComparisonTable, path: str) -> str:
    """
    Write the formatted comparison table as CSV.

    Parameters
    ----------
    table : ComparisonTable
        Output of ``comparison_table``
    path : str
        Destination file

    Returns
    -------
    str
        ``path``

    Raises
    ------
    ValueError
        If the table has no rows because attribute data is missing.
    """
    if not table.ready:
        raise ValueError(f"Comparison table is not ready: {table.message}")
    ensure_parent_dir(path)
    table.to_frame().to_csv(path, encoding="utf-8")
    logger.info("Wrote comparison table to %s", path)
    return path


def write_summary_csv(summary: pd.DataFrame, path: str) -> str:
    """Write the numeric per-division summary (``Aggregator.to_frame``) as CSV."""
    ensure_parent_dir(path)
    summary.to_csv(path, encoding="utf-8", float_format="%.3f")
    logger.info("Wrote division summary to %s", path)
    return path


def write_assignment_csv(session, path: str) -> str:
    """Write one row per unit: code, name, division index (0 for the pool) and name."""
    rows = []
    for uid, location in session.store.assignment().items():
        if isinstance(location, int):
            index, division = location, session.store.group(location).name
        else:
            index, division = 0, ""
        rows.append({
            "code": uid,
            "name": session.catalog.name_of(uid),
            "division_index": index,
            "division": division,
        })
    ensure_parent_dir(path)
    pd.DataFrame(rows, columns=["code", "name", "division_index", "division"]).to_csv(
        path, index=False, encoding="utf-8"
    )
    logger.info("Wrote assignment of %d units to %s", len(rows), path)
    return path
