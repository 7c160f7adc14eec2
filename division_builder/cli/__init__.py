"""CLI interface for division_builder.

All implementation lives in the cli subpackage modules. This __init__
re-exports every public name so that imports such as

    from division_builder.cli import cli
    from division_builder.cli import main

work without knowing the module layout.
"""

from __future__ import annotations

from ._config import (
    session_config_from_args,
    configure_logging,
    _parse_points,
    _parse_assignments,
)

from ._commands import (
    cmd_info,
    cmd_regions,
    cmd_summary,
    cmd_select,
    cmd_map,
)

from ._main import main, cli

__all__ = [
    # config helpers
    "session_config_from_args",
    "configure_logging",
    "_parse_points",
    "_parse_assignments",
    # command handlers
    "cmd_info",
    "cmd_regions",
    "cmd_summary",
    "cmd_select",
    "cmd_map",
    # main entry points
    "main",
    "cli",
]

if __name__ == "__main__":
    cli()
