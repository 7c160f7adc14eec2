"""
Install script for division_builder.

Usage
-----
From the repository root::

    pip install -e .            # core
    pip install -e ".[dev]"     # + pytest
    pip install -e ".[geo]"     # + geopandas for map rendering
"""

from setuptools import setup
import os

here = os.path.abspath(os.path.dirname(__file__))
pkg_root = os.path.join(here, "division_builder")

# Discover all sub-packages (directories containing __init__.py)
packages = ["division_builder"]
for dirpath, dirnames, filenames in os.walk(pkg_root):
    # Skip hidden, __pycache__, .git, etc.
    dirnames[:] = [
        d for d in dirnames
        if not d.startswith((".", "__pycache__"))
    ]
    if "__init__.py" in filenames and dirpath != pkg_root:
        rel = os.path.relpath(dirpath, pkg_root).replace(os.sep, ".")
        packages.append(f"division_builder.{rel}")

setup(
    name="division-builder",
    version="0.1.0",
    description=(
        "Partition geographic units into named divisions and compare "
        "their area, population and density"
    ),
    packages=packages,
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
        "pandas>=1.3",
        "matplotlib>=3.4",
    ],
    extras_require={
        "dev": ["pytest>=7.0", "pytest-cov"],
        "geo": ["geopandas>=0.12"],
    },
    entry_points={
        "console_scripts": [
            "division-builder=division_builder.cli:cli",
        ],
    },
)
