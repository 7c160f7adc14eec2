"""
Division Builder Package
========================

Partition the partidos of a province into named, colored divisions and
compare their area, population and density.

This package provides:

- **config**: Configuration dataclasses and engine constants
- **geo**: Unit catalog, bounding-rectangle queries, boundary maps
- **partition**: Partition store, selection set, predefined regions
- **evaluation**: Per-division aggregates and the comparison table
- **data**: Loaders for the GeoJSON, attribute and region files
- **session**: DivisionSession, the controller for UI gestures
- **artifacts**: CSV tables and map images
- **cli**: Command-line interface

Quick Start
-----------

1. Inspect the input data:

   ```bash
   python -m division_builder --data-dir data info
   ```

2. Compare the divisions of a predefined region type:

   ```bash
   python -m division_builder summary --region-type "Secciones electorales"
   ```

3. Select the units inside a polygon and move them to division 1:

   ```bash
   python -m division_builder select --points "-59,-35;-58,-35;-58,-34" --move-to 1
   ```

Programmatic Usage
------------------

```python
from division_builder.config import build_base_config
from division_builder.session import DivisionSession

session = DivisionSession.load_sync(build_base_config(data_dir="data"))
session.set_division_count(4)
session.finalize_polygon([(-59, -35), (-58, -35), (-58, -34)])
session.drag_end(session.selection.ids()[0], 1)
print(session.comparison_table().to_text())
```
"""

__version__ = "0.1.0"
__author__ = "Division Builder Authors"

# Lazy imports for top-level convenience
def __getattr__(name):
    """Lazy import submodules."""
    if name == "config":
        from . import config
        return config
    elif name == "geo":
        from . import geo
        return geo
    elif name == "partition":
        from . import partition
        return partition
    elif name == "evaluation":
        from . import evaluation
        return evaluation
    elif name == "data":
        from . import data
        return data
    elif name == "artifacts":
        from . import artifacts
        return artifacts
    elif name == "cli":
        from . import cli
        return cli
    elif name == "DivisionSession":
        from .session import DivisionSession
        return DivisionSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "config",
    "geo",
    "partition",
    "evaluation",
    "data",
    "artifacts",
    "cli",
    "DivisionSession",
    "__version__",
]
