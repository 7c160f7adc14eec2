"""Configuration building helpers for the CLI."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from ..config import build_base_config
from ..config.dataclasses import SessionConfig


def session_config_from_args(args: argparse.Namespace) -> SessionConfig:
    """
    Build a session configuration from the global CLI options.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments with ``data_dir``, ``geojson``, ``attributes``,
        ``regions``, ``output_dir`` and ``verbose``

    Returns
    -------
    SessionConfig
    """
    return build_base_config(
        data_dir=args.data_dir,
        geojson_path=args.geojson or "",
        attributes_path=args.attributes or "",
        regions_path=args.regions or "",
        output_dir=args.output_dir,
        debug=args.verbose >= 2,
    )


def configure_logging(verbose: int, debug: bool = False) -> None:
    """``-v`` shows INFO, ``-vv`` (or debug mode) shows DEBUG."""
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_points(s: Optional[str]) -> Optional[List[Tuple[float, float]]]:
    """Parse ``"x,y;x,y;..."`` into a list of points."""
    if not s:
        return None
    out: List[Tuple[float, float]] = []
    for part in str(s).split(";"):
        part = part.strip()
        if not part:
            continue
        xy = [p.strip() for p in part.split(",")]
        if len(xy) != 2:
            raise ValueError(f"Expected 'x,y', got {part!r}")
        out.append((float(xy[0]), float(xy[1])))
    return out


def _parse_assignments(values: Optional[List[str]]) -> List[Tuple[str, int]]:
    """Parse repeated ``CODE=INDEX`` options."""
    out: List[Tuple[str, int]] = []
    for item in values or []:
        code, sep, index = item.partition("=")
        if not sep or not code.strip():
            raise ValueError(f"Expected CODE=INDEX, got {item!r}")
        out.append((code.strip(), int(index)))
    return out
