"""
Unit and integration tests for the division_builder package.

Test suite covers:
- Partition store: invariant, resize, moves, pool ordering
- Selection: catalog, bounding-rectangle query, polygon drafts
- Aggregates, number formatting and the comparison table
- Predefined regions, loaders, session gestures and the CLI
"""
