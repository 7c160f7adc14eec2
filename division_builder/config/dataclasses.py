"""
Configuration dataclasses for the division builder.

Re-export facade: all dataclasses are defined in sub-modules and
re-exported here so that ``from .config.dataclasses import …`` keeps
working if the sub-modules are split further.

Sub-modules
-----------
_dc_components : Component-level configs (Files, Partition, Selection,
                 Session)
"""

from ._dc_components import (
    FilesConfig,
    PartitionConfig,
    SelectionConfig,
    SessionConfig,
)

__all__ = [
    "FilesConfig",
    "PartitionConfig",
    "SelectionConfig",
    "SessionConfig",
]
