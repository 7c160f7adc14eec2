"""
Input file loaders.

Contains:
- load_geojson_catalog: Unit catalog from a GeoJSON FeatureCollection
- load_attribute_table: Per-unit attribute table (area, population)
- attribute_frame_from_mapping: Attribute table from an in-memory mapping
- load_region_table: Predefined-region table
- load_all: Load the three sources concurrently

The catalog is required; failures propagate. The attribute and region
tables are optional: on failure the loaders log a warning and return
``None``.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from ..config.constants import GBA_CODES
from ..geo.catalog import SpatialExtent, Unit, UnitCatalog
from ..utils.io import read_json
from .preprocessing import flatten_coordinates, normalize_code, standardize_attribute_frame


logger = logging.getLogger(__name__)

RegionTable = Dict[str, Dict[str, List[Dict[str, str]]]]


def load_geojson_catalog(
    path: str,
    code_key: str = "cde",
    name_key: str = "nam",
    highlighted_codes: Iterable[str] = GBA_CODES,
) -> UnitCatalog:
    """
    Load the unit catalog from a GeoJSON FeatureCollection.

    Parameters
    ----------
    path : str
        Path to the GeoJSON file
    code_key, name_key : str
        Feature property holding the unit code / display name
    highlighted_codes : iterable of str
        Codes flagged as the highlighted category

    Returns
    -------
    UnitCatalog

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the file is not a FeatureCollection, or a feature lacks a code
        or coordinates
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"GeoJSON file not found: {path}")

    doc = read_json(path)
    if not isinstance(doc, Mapping) or doc.get("type") != "FeatureCollection":
        raise ValueError(f"{path} is not a GeoJSON FeatureCollection")

    highlighted = {normalize_code(c) for c in highlighted_codes}
    units = []
    for i, feature in enumerate(doc.get("features") or []):
        props = feature.get("properties") or {}
        if props.get(code_key) is None:
            raise ValueError(f"Feature {i} in {path} has no {code_key!r} property")
        code = normalize_code(props[code_key])
        name = str(props.get(name_key) or code)
        geometry = feature.get("geometry") or {}
        coords = flatten_coordinates(geometry.get("coordinates"))
        if not coords:
            raise ValueError(f"Feature {code!r} in {path} has no coordinates")
        units.append(Unit(
            id=code,
            name=name,
            extent=SpatialExtent.from_coordinates(coords),
            is_highlighted=code in highlighted,
        ))

    catalog = UnitCatalog(units)
    logger.info("Loaded %d units from %s (%d highlighted)", len(catalog), path, len(catalog.highlighted_ids()))
    return catalog


def attribute_frame_from_mapping(data: Mapping[str, Any]) -> pd.DataFrame:
    """
    Build the attribute table from ``{code: {attribute: value}}``.

    The ``{"variables": ..., "datos": {...}}`` envelope is unwrapped.
    Source column names are mapped to ``area`` / ``population_total``.
    """
    if "datos" in data and isinstance(data["datos"], Mapping):
        data = data["datos"]
    records = {k: v for k, v in data.items() if isinstance(v, Mapping)}
    df = pd.DataFrame.from_dict(records, orient="index")
    return standardize_attribute_frame(df)


def load_attribute_table(path: str) -> Optional[pd.DataFrame]:
    """
    Load the per-unit attribute table.

    Returns
    -------
    pd.DataFrame or None
        Indexed by unit code, with ``area`` and ``population_total``
        columns; ``None`` if the file is missing or unreadable.
    """
    try:
        df = attribute_frame_from_mapping(read_json(path))
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Attribute table unavailable (%s): %s", path, e)
        return None
    logger.info("Loaded attributes for %d units from %s", len(df), path)
    return df


def region_table_from_mapping(data: Mapping[str, Any]) -> RegionTable:
    """
    Normalize ``{region_type: {region_name: [member, ...]}}``.

    Members become ``{"code": ..., "name": ...}``; source keys ``cde`` and
    ``municipio_nombre`` are accepted.
    """
    table: RegionTable = {}
    for region_type, regions in data.items():
        if not isinstance(regions, Mapping):
            raise ValueError(f"Region type {region_type!r} is not a mapping")
        table[str(region_type)] = {}
        for region_name, members in regions.items():
            normalized = []
            for member in members:
                if isinstance(member, Mapping):
                    code = member.get("code", member.get("cde"))
                    name = member.get("name", member.get("municipio_nombre", ""))
                else:
                    code, name = member, ""
                if code is None:
                    raise ValueError(f"Member of {region_type}/{region_name} has no code")
                normalized.append({"code": normalize_code(code), "name": str(name)})
            table[str(region_type)][str(region_name)] = normalized
    return table


def load_region_table(path: str) -> Optional[RegionTable]:
    """
    Load the predefined-region table.

    Returns
    -------
    dict or None
        ``region_type -> region_name -> [{"code", "name"}]``; ``None`` if
        the file is missing or unreadable.
    """
    try:
        data = read_json(path)
        if not isinstance(data, Mapping):
            raise ValueError("top level is not an object")
        table = region_table_from_mapping(data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Region table unavailable (%s): %s", path, e)
        return None
    logger.info("Loaded %d region types from %s", len(table), path)
    return table


@dataclass
class LoadedData:
    """Result of :func:`load_all`."""
    catalog: UnitCatalog
    attributes: Optional[pd.DataFrame]
    regions: Optional[RegionTable]


async def load_all(
    geojson_path: str,
    attributes_path: str,
    regions_path: str,
    highlighted_codes: Iterable[str] = GBA_CODES,
) -> LoadedData:
    """
    Load the catalog, attribute table and region table concurrently.

    Each file is read in a worker thread; all three are joined before
    returning. A catalog failure propagates, the other two degrade to
    ``None``.
    """
    catalog, attributes, regions = await asyncio.gather(
        asyncio.to_thread(load_geojson_catalog, geojson_path, highlighted_codes=tuple(highlighted_codes)),
        asyncio.to_thread(load_attribute_table, attributes_path),
        asyncio.to_thread(load_region_table, regions_path),
    )
    return LoadedData(catalog=catalog, attributes=attributes, regions=regions)
