"""
I/O utility functions.
"""

import json
import os
from typing import Any


def ensure_dir(path: str) -> str:
    """
    Create directory if it doesn't exist.

    Parameters
    ----------
    path : str
        Directory path to create

    Returns
    -------
    str
        The same path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


def ensure_parent_dir(path: str) -> str:
    """Create the directory that will hold ``path``; returns ``path``."""
    parent = os.path.dirname(os.path.abspath(path))
    ensure_dir(parent)
    return path


def read_json(path: str) -> Any:
    """Parse a UTF-8 JSON file (a leading BOM is tolerated)."""
    with open(path, "r", encoding="utf-8-sig") as fh:
        return json.load(fh)
