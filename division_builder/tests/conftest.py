"""
Pytest configuration and fixtures for division_builder tests.
"""

import json

import pytest


# Five units; names mix case so that case-insensitive ordering matters.
#   A (5, 5)   B (20, 20)   C (8, 2)   D (30, 5)   E (1, 9)
UNIT_RECORDS = [
    {"code": "D", "name": "delta", "centroid": (30.0, 5.0)},
    {"code": "B", "name": "bravo", "centroid": (20.0, 20.0)},
    {"code": "A", "name": "Alpha", "centroid": (5.0, 5.0)},
    {"code": "E", "name": "echo", "centroid": (1.0, 9.0)},
    {"code": "C", "name": "Charlie", "centroid": (8.0, 2.0)},
]

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


@pytest.fixture
def catalog():
    """Catalog of units A..E; A is highlighted."""
    from division_builder.geo.catalog import build_unit_catalog

    return build_unit_catalog(UNIT_RECORDS, highlighted_codes=["A"])


@pytest.fixture
def attributes():
    """Attribute entries for A, B and C; D and E have none."""
    return {
        "A": {"area": 100, "population_total": 50},
        "B": {"area": 200, "population_total": 100},
        "C": {"area": 50, "population_total": 1000},
    }


@pytest.fixture
def region_table():
    """Two region types; 'Secciones' lists an unknown code."""
    return {
        "Secciones": {
            "Sur": [{"code": "C", "name": "Charlie"}, {"code": "ZZZ", "name": "Nowhere"}],
            "Norte": [{"code": "A", "name": "Alpha"}, {"code": "B", "name": "bravo"}],
        },
        "Salud": {
            "Region I": ["A"],
            "Region II": ["B", "C"],
            "Region III": ["D", "E"],
        },
    }


@pytest.fixture
def store(catalog):
    from division_builder.partition.store import PartitionStore

    return PartitionStore(catalog)


@pytest.fixture
def session(catalog, attributes, region_table):
    from division_builder.session import DivisionSession

    return DivisionSession(catalog, attributes, region_table)


def _square(x0, y0, size):
    return [[
        [x0, y0], [x0 + size, y0], [x0 + size, y0 + size], [x0, y0 + size], [x0, y0],
    ]]


@pytest.fixture
def data_dir(tmp_path):
    """
    On-disk input files in the layout the loaders expect.

    Units: 06007 "Adolfo Alsina" centroid (11, 11), 06014 "adolfo
    gonzales chaves" (MultiPolygon) centroid (6, 1), 06028 "Almirante
    Brown" centroid (1, 1).
    """
    geojson = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"cde": "06028", "nam": "Almirante Brown"},
                "geometry": {"type": "Polygon", "coordinates": _square(0, 0, 2)},
            },
            {
                "type": "Feature",
                "properties": {"cde": "06007", "nam": "Adolfo Alsina"},
                "geometry": {"type": "Polygon", "coordinates": _square(10, 10, 2)},
            },
            {
                "type": "Feature",
                "properties": {"cde": "06014", "nam": "adolfo gonzales chaves"},
                "geometry": {
                    "type": "MultiPolygon",
                    "coordinates": [_square(4, 0, 2), _square(6, 0, 2)],
                },
            },
        ],
    }
    attributes = {
        "variables": ["superficie", "poblacion_total"],
        "datos": {
            "06028": {"superficie": 130, "poblacion_total": 580000},
            "06007": {"superficie": 5877, "poblacion_total": 17000},
        },
    }
    regions = {
        "Secciones electorales": {
            "Primera": [{"cde": "06028", "municipio_nombre": "Almirante Brown"}],
            "Sexta": [
                {"cde": "06007", "municipio_nombre": "Adolfo Alsina"},
                {"cde": "06014", "municipio_nombre": "Adolfo Gonzales Chaves"},
            ],
        },
    }

    (tmp_path / "datos").mkdir()
    (tmp_path / "regiones").mkdir()
    (tmp_path / "PBA.geojson").write_text(json.dumps(geojson), encoding="utf-8")
    (tmp_path / "datos" / "datos_partidos.json").write_text(json.dumps(attributes), encoding="utf-8")
    (tmp_path / "regiones" / "regiones_existentes.json").write_text(json.dumps(regions), encoding="utf-8")
    return tmp_path
