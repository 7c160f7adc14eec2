"""
Predefined-region loading.

A region table maps a region type (e.g. electoral sections) to its
regions, and each region to the units it contains. Applying a region
type replaces the whole partition with one group per region.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence

from .store import POOL, PartitionStore


logger = logging.getLogger(__name__)

RegionTable = Mapping[str, Mapping[str, Sequence[Mapping[str, Any]]]]


def _member_code(member: Any) -> str:
    if isinstance(member, Mapping):
        for key in ("code", "cde"):
            if member.get(key) is not None:
                return str(member[key]).strip()
        raise ValueError(f"Region member has no code: {member!r}")
    return str(member).strip()


def apply_region_table(
    store: PartitionStore,
    table: RegionTable,
    region_type: str,
) -> List[str]:
    """
    Replace the partition with the regions of one region type.

    Region names are sorted ascending; region ``i`` becomes group ``i``
    and the group is renamed after it. All units are returned to the pool
    first, so units not listed in any region stay unassigned.

    Parameters
    ----------
    store : PartitionStore
        Partition to overwrite
    table : mapping
        ``region_type -> region_name -> [member, ...]``; members are
        mappings with ``code`` (or ``cde``) or bare code strings
    region_type : str
        Key of ``table`` to apply

    Returns
    -------
    List[str]
        Region names in group order.

    Raises
    ------
    KeyError
        If ``region_type`` is not in the table.
    DivisionCountError
        If the region type has more regions than the store allows; the
        partition is left unchanged.
    """
    if region_type not in table:
        raise KeyError(f"Unknown region type: {region_type!r}")
    regions = table[region_type]
    names = sorted(regions)

    # Resolve every member before touching the store.
    plan: Dict[int, List[str]] = {}
    skipped = 0
    for index, name in enumerate(names, start=1):
        codes = []
        for member in regions[name]:
            code = _member_code(member)
            if code in store.catalog:
                codes.append(code)
            else:
                skipped += 1
                logger.warning("Region %r lists unknown unit %r; skipped", name, code)
        plan[index] = codes

    with store.batch():
        store.resize(len(names))
        store.move_batch(store.catalog.ids, POOL)
        for index, name in enumerate(names, start=1):
            store.move_batch(plan[index], index)
            store.rename(index, name)

    logger.info(
        "Applied region type %r: %d regions, %d units assigned%s",
        region_type,
        len(names),
        store.catalog.N - store.remaining_count(),
        f", {skipped} unknown codes skipped" if skipped else "",
    )
    return names


def region_summary(table: RegionTable) -> Dict[str, Dict[str, int]]:
    """Region sizes per region type, names sorted."""
    return {
        region_type: {name: len(regions[name]) for name in sorted(regions)}
        for region_type, regions in sorted(table.items())
    }
