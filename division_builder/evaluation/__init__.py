"""
Evaluation module for division statistics.

This module provides:
- Aggregator / AggregateRow: per-division count, area, population, density
- format_count / density_text: number formatting for display
- comparison_table: labelled, formatted table across divisions
"""

from .aggregator import (
    AggregateRow,
    Aggregator,
    density_text,
    format_count,
    rows_to_text,
)

from .table import (
    ColumnHeader,
    ComparisonTable,
    comparison_table,
)

__all__ = [
    "AggregateRow",
    "Aggregator",
    "density_text",
    "format_count",
    "rows_to_text",
    "ColumnHeader",
    "ComparisonTable",
    "comparison_table",
]
