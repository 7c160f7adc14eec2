"""Main entry point and argparse setup for the CLI."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..config import DEBUG_ENV_VAR, MAX_DIVISIONS, MIN_DIVISIONS
from ._commands import cmd_info, cmd_map, cmd_regions, cmd_select, cmd_summary
from ._config import configure_logging, session_config_from_args


def _add_partition_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--region-type", default=None,
                        help="Start from a predefined region type")
    parser.add_argument("--divisions", type=int, default=None, metavar="K",
                        help=f"Number of divisions ({MIN_DIVISIONS}-{MAX_DIVISIONS})")
    parser.add_argument("--assign", action="append", default=None, metavar="CODE=INDEX",
                        help="Move a unit to a division (repeatable)")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.
    """
    parser = argparse.ArgumentParser(
        prog="division-builder",
        description="Partition geographic units into named divisions",
        epilog=f"Set {DEBUG_ENV_VAR}=1 for debug logging.",
    )

    # Global input/output options
    parser.add_argument("--data-dir", default="data",
                        help="Data directory containing input files")
    parser.add_argument("--geojson", default=None,
                        help="Unit boundaries (default: <data-dir>/PBA.geojson)")
    parser.add_argument("--attributes", default=None,
                        help="Attribute table JSON (default: <data-dir>/datos/datos_partidos.json)")
    parser.add_argument("--regions", default=None,
                        help="Region table JSON (default: <data-dir>/regiones/regiones_existentes.json)")
    parser.add_argument("--output-dir", default="out",
                        help="Output directory")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # info command
    info_parser = subparsers.add_parser("info", help="Show loaded units and data availability")
    info_parser.set_defaults(func=cmd_info)

    # regions command
    regions_parser = subparsers.add_parser("regions", help="List predefined region types")
    regions_parser.set_defaults(func=cmd_regions)

    # summary command
    summary_parser = subparsers.add_parser("summary", help="Print the division comparison table")
    _add_partition_options(summary_parser)
    summary_parser.add_argument("--csv", default=None,
                                help="Write the comparison table to this CSV file")
    summary_parser.add_argument("--assignment-csv", default=None,
                                help="Write the unit-to-division assignment to this CSV file")
    summary_parser.set_defaults(func=cmd_summary)

    # select command
    select_parser = subparsers.add_parser("select", help="Select units inside a polygon")
    select_parser.add_argument("--points", required=True,
                               help="Boundary as 'x,y;x,y;x,y;...' (at least 3 points)")
    select_parser.add_argument("--move-to", type=int, default=None, metavar="INDEX",
                               help="Move the selection to this division")
    _add_partition_options(select_parser)
    select_parser.set_defaults(func=cmd_select)

    # map command
    map_parser = subparsers.add_parser("map", help="Render the partition as an image")
    _add_partition_options(map_parser)
    map_parser.add_argument("-o", "--output", default=None,
                            help="Image path (default: <output-dir>/partition.png)")
    map_parser.add_argument("--title", default=None, help="Figure title")
    map_parser.set_defaults(func=cmd_map)

    # Parse and execute
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose, session_config_from_args(args).debug)
    return args.func(args)


def cli():
    """Entry point for console script."""
    sys.exit(main())
