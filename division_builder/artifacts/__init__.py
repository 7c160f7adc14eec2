"""
Artifact generation module for division tables and maps.

This module provides:
- Plot functions for division sizes and partition maps
- Table writers for CSV output
"""

from .plots import plot_division_sizes, save_partition_map

from .tables import (
    write_comparison_csv,
    write_summary_csv,
    write_assignment_csv,
)

__all__ = [
    "plot_division_sizes",
    "save_partition_map",
    "write_comparison_csv",
    "write_summary_csv",
    "write_assignment_csv",
]
