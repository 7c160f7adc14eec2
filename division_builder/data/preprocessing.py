"""
Data preprocessing utilities.

Contains:
- Column name resolution
- es-AR number formatting conversion
- Unit code normalization
- Attribute frame standardization
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..config.constants import ATTRIBUTE_ALIASES


logger = logging.getLogger(__name__)

CODE_WIDTH = 5


def resolve_column(
    df: pd.DataFrame,
    candidates: Sequence[str],
    required: bool = True,
) -> Optional[str]:
    """
    Find the first matching column name from a list of candidates.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to search
    candidates : Sequence[str]
        Candidate column names (in priority order)
    required : bool
        If True, raise error if no match found

    Returns
    -------
    Optional[str]
        Matched column name or None

    Raises
    ------
    KeyError
        If required=True and no match found
    """
    for col in candidates:
        if col in df.columns:
            return col

    if required:
        raise KeyError(f"None of {list(candidates)} found in columns: {list(df.columns)}")

    return None


def _es_to_float(s: Union[str, float, int, None]) -> float:
    """
    Convert an es-AR formatted number to float.

    es-AR format: "1.234,56" (period for thousands, comma for decimal).
    Plain numbers pass through; blanks and "-" become NaN.
    """
    if s is None:
        return np.nan

    if isinstance(s, (int, float)):
        return float(s)

    s = str(s).strip()

    if not s or s.lower() in ('nan', 'null', '-'):
        return np.nan

    if ',' in s:
        s = s.replace('.', '').replace(',', '.')

    try:
        return float(s)
    except ValueError:
        return np.nan


def normalize_code(code: Any) -> str:
    """
    Normalize a unit code to its string form.

    Integers are zero-padded to five digits (``6028 -> "06028"``);
    strings are stripped.
    """
    if isinstance(code, (int, np.integer)):
        return str(int(code)).zfill(CODE_WIDTH)
    if isinstance(code, float) and code.is_integer():
        return str(int(code)).zfill(CODE_WIDTH)
    return str(code).strip()


def standardize_attribute_frame(
    df: pd.DataFrame,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> pd.DataFrame:
    """
    Rename source columns to canonical attribute names and coerce to float.

    Parameters
    ----------
    df : pd.DataFrame
        Indexed by unit code
    aliases : mapping, optional
        ``canonical -> candidate source names``; defaults to
        ``ATTRIBUTE_ALIASES``

    Returns
    -------
    pd.DataFrame
        Same index (normalized codes) with one float column per canonical
        attribute that was found; other source columns are kept as they are.
    """
    aliases = aliases or ATTRIBUTE_ALIASES
    out = df.copy()
    out.index = pd.Index([normalize_code(c) for c in out.index], name="code")

    for canonical, candidates in aliases.items():
        if resolve_column(out, list(candidates), required=False) is None:
            logger.warning("Attribute %r not found in columns %s", canonical, list(out.columns))
            continue
        # Rows may use different source names; first non-missing wins.
        present = [c for c in candidates if c in out.columns]
        values = out[present[0]].map(_es_to_float)
        for extra in present[1:]:
            values = values.fillna(out[extra].map(_es_to_float))
        out = out.drop(columns=[c for c in present if c != canonical])
        out[canonical] = values.astype(float)

    if out.index.has_duplicates:
        dupes = out.index[out.index.duplicated()].unique().tolist()
        logger.warning("Duplicate attribute codes %s; keeping the first entry", dupes)
        out = out[~out.index.duplicated(keep="first")]
    return out


def flatten_coordinates(coords: Any) -> List[List[float]]:
    """
    Flatten nested GeoJSON coordinate arrays into a list of positions.

    Works for every geometry type: a position is the innermost list of
    numbers.
    """
    out: List[List[float]] = []
    stack = [coords]
    while stack:
        item = stack.pop()
        if not isinstance(item, (list, tuple)) or not item:
            continue
        if isinstance(item[0], (int, float)):
            out.append([float(item[0]), float(item[1])])
        else:
            stack.extend(reversed(item))
    return out
