"""All cmd_* command handlers for the CLI."""

from __future__ import annotations

import argparse
import os

from ..artifacts.tables import write_assignment_csv, write_comparison_csv
from ..exceptions import RegionDataUnavailable
from ..partition.regions import region_summary
from ..session import DivisionSession

from ._config import _parse_assignments, _parse_points, session_config_from_args


INPUT_ERRORS = (FileNotFoundError, ValueError, KeyError, RegionDataUnavailable)


def _load_session(args: argparse.Namespace, tag: str) -> DivisionSession:
    cfg = session_config_from_args(args)
    print(f"[{tag}] Loading units from {cfg.files.geojson_path}")
    return DivisionSession.load_sync(cfg)


def _apply_partition_options(session: DivisionSession, args: argparse.Namespace, tag: str) -> None:
    """Apply --region-type, --divisions and --assign in that order."""
    if getattr(args, "region_type", None):
        names = session.load_existing_regions(args.region_type)
        print(f"[{tag}] Loaded region type '{args.region_type}' ({len(names)} regions)")
    if getattr(args, "divisions", None) is not None:
        session.set_division_count(args.divisions)
    for code, index in _parse_assignments(getattr(args, "assign", None)):
        session.drag_end(code, index)


def cmd_info(args: argparse.Namespace) -> int:
    """
    Show what was loaded.
    """
    try:
        session = _load_session(args, "info")
    except INPUT_ERRORS as e:
        print(f"[info] Error: {e}")
        return 1

    catalog = session.catalog
    print(f"[info] Units: {catalog.N}")
    print(f"[info] Highlighted units: {len(catalog.highlighted_ids())}")
    print(f"[info] Attribute data: {'available' if session.is_ready else 'unavailable'}")
    if session.region_types:
        print(f"[info] Region types: {', '.join(session.region_types)}")
    else:
        print("[info] Region types: unavailable")
    return 0


def cmd_regions(args: argparse.Namespace) -> int:
    """
    List predefined region types and the size of each region.
    """
    try:
        session = _load_session(args, "regions")
    except INPUT_ERRORS as e:
        print(f"[regions] Error: {e}")
        return 1

    if not session.regions:
        print("[regions] No predefined regions available")
        return 1

    for region_type, sizes in region_summary(session.regions).items():
        print(f"{region_type} ({len(sizes)} regions)")
        for name, size in sizes.items():
            print(f"  {name:<40} {size:>4}")
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """
    Print the division comparison table.
    """
    try:
        session = _load_session(args, "summary")
        _apply_partition_options(session, args, "summary")
    except INPUT_ERRORS as e:
        print(f"[summary] Error: {e}")
        return 1

    table = session.comparison_table()
    print(table.to_text())
    print(f"[summary] Unassigned units: {session.remaining_count()}")

    try:
        if args.csv:
            write_comparison_csv(table, args.csv)
            print(f"[summary] Saved table to {args.csv}")
        if args.assignment_csv:
            write_assignment_csv(session, args.assignment_csv)
            print(f"[summary] Saved assignment to {args.assignment_csv}")
    except (OSError, ValueError) as e:
        print(f"[summary] Error: {e}")
        return 1
    return 0


def cmd_select(args: argparse.Namespace) -> int:
    """
    Select units inside a polygon, optionally moving them to a division.
    """
    try:
        points = _parse_points(args.points) or []
        session = _load_session(args, "select")
        _apply_partition_options(session, args, "select")
        result = session.finalize_polygon(points)
    except INPUT_ERRORS as e:
        print(f"[select] Error: {e}")
        return 1

    print(f"[select] {result.message}")
    for uid in result.ids:
        print(f"  {uid}  {session.catalog.name_of(uid)}")

    if args.move_to is not None and result.ids:
        try:
            moved = session.drag_end(result.ids[0], args.move_to)
        except INPUT_ERRORS as e:
            print(f"[select] Error: {e}")
            return 1
        print(f"[select] Moved {len(moved)} units to {args.move_to}")
        print(session.comparison_table().to_text())
    return 0


def cmd_map(args: argparse.Namespace) -> int:
    """
    Render the partition to an image (requires geopandas).
    """
    from ..artifacts.plots import save_partition_map

    try:
        session = _load_session(args, "map")
        _apply_partition_options(session, args, "map")
    except INPUT_ERRORS as e:
        print(f"[map] Error: {e}")
        return 1

    out_path = args.output or os.path.join(session.config.files.output_dir, "partition.png")
    try:
        save_partition_map(session, out_path, title=args.title or "")
    except ImportError as e:
        print(f"[map] {e}")
        return 1
    except (OSError, KeyError) as e:
        print(f"[map] Error: {e}")
        return 1

    print(f"[map] Saved map to {out_path}")
    return 0
