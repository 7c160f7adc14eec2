"""
Partition and selection engine.

This module provides:
- PartitionStore: assignment of every unit to the pool or one group
- SelectionSet / PolygonDraft: transient selection and polygon drawing
- apply_region_table: load a predefined partition
"""

from .store import POOL, Group, PartitionStore, PoolLocation
from .selection import PolygonDraft, SelectionResult, SelectionSet
from .regions import apply_region_table, region_summary

__all__ = [
    "POOL",
    "PoolLocation",
    "Group",
    "PartitionStore",
    "SelectionSet",
    "SelectionResult",
    "PolygonDraft",
    "apply_region_table",
    "region_summary",
]
