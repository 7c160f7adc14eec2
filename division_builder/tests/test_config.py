"""
Configuration tests.
"""

import os

import pytest


class TestBuildBaseConfig:

    def test_default_paths(self):
        from division_builder.config import build_base_config

        cfg = build_base_config(data_dir="somewhere")
        assert cfg.files.geojson_path == os.path.join("somewhere", "PBA.geojson")
        assert cfg.files.attributes_path == os.path.join("somewhere", "datos/datos_partidos.json")
        assert cfg.files.regions_path == os.path.join("somewhere", "regiones/regiones_existentes.json")
        assert cfg.partition.initial_divisions == 3

    def test_explicit_paths_win(self):
        from division_builder.config import build_base_config

        cfg = build_base_config(geojson_path="x.geojson")
        assert cfg.files.geojson_path == "x.geojson"

    def test_debug_env(self, monkeypatch):
        from division_builder.config import DEBUG_ENV_VAR, build_base_config

        monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
        assert build_base_config().debug is False
        monkeypatch.setenv(DEBUG_ENV_VAR, "1")
        assert build_base_config().debug is True


class TestPartitionConfig:

    def test_invalid_initial(self):
        from division_builder.config import PartitionConfig

        with pytest.raises(ValueError):
            PartitionConfig(initial_divisions=0)
        with pytest.raises(ValueError):
            PartitionConfig(palette=())

    def test_color_and_name(self):
        from division_builder.config import PartitionConfig

        cfg = PartitionConfig(palette=("#111111", "#222222"))
        assert cfg.color_for(3) == "#111111"
        assert cfg.default_name(7) == "Division 7"

    def test_initial_divisions_drive_store(self, catalog):
        from division_builder.config import PartitionConfig
        from division_builder.partition.store import PartitionStore

        store = PartitionStore(catalog, PartitionConfig(initial_divisions=5))
        store.resize(2)
        store.reset()
        assert store.K == 5
