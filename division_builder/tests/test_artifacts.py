"""
Artifact tests: CSV writers and plots.
"""

import pandas as pd
import pytest


class TestTables:

    def test_comparison_csv(self, session, tmp_path):
        from division_builder.artifacts.tables import write_comparison_csv

        session.drag_end("A", 1)
        path = tmp_path / "nested" / "table.csv"
        write_comparison_csv(session.comparison_table(), str(path))
        df = pd.read_csv(path, index_col=0, dtype=str)
        assert df.loc["Total area (km²)", "Division 1"] == "100"

    def test_comparison_csv_requires_data(self, catalog, tmp_path):
        from division_builder.artifacts.tables import write_comparison_csv
        from division_builder.session import DivisionSession

        table = DivisionSession(catalog).comparison_table()
        with pytest.raises(ValueError):
            write_comparison_csv(table, str(tmp_path / "t.csv"))

    def test_summary_csv(self, session, tmp_path):
        from division_builder.artifacts.tables import write_summary_csv

        session.drag_end("B", 2)
        path = tmp_path / "summary.csv"
        write_summary_csv(session.summary_frame(), str(path))
        df = pd.read_csv(path, index_col=0)
        assert df.loc["Division 2", "area_total"] == 200

    def test_assignment_csv(self, session, tmp_path):
        from division_builder.artifacts.tables import write_assignment_csv

        session.load_existing_regions("Secciones")
        path = tmp_path / "assignment.csv"
        write_assignment_csv(session, str(path))
        df = pd.read_csv(path).set_index("code")
        assert df.loc["A", "division"] == "Norte"
        assert df.loc["C", "division_index"] == 2
        assert df.loc["D", "division_index"] == 0


class TestPlots:

    def test_division_sizes(self, session):
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from division_builder.artifacts.plots import plot_division_sizes

        session.drag_end("A", 1)
        ax = plot_division_sizes(session.store.groups(), session.aggregate_rows(), metric="population_total")
        heights = [p.get_height() for p in ax.patches]
        assert heights == [50.0, 0.0, 0.0]
        plt.close(ax.figure)

    def test_unknown_metric(self, session):
        from division_builder.artifacts.plots import plot_division_sizes

        with pytest.raises(ValueError):
            plot_division_sizes(session.store.groups(), session.aggregate_rows(), metric="nope")

    def test_partition_panel(self, data_dir):
        pytest.importorskip("geopandas")
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from division_builder.config import build_base_config
        from division_builder.geo.shapefile import load_unit_geometries, plot_partition_panel
        from division_builder.session import DivisionSession

        session = DivisionSession.load_sync(build_base_config(data_dir=str(data_dir)))
        session.drag_end("06028", 1)
        units = load_unit_geometries(str(data_dir / "PBA.geojson"))
        assert sorted(units["code"]) == ["06007", "06014", "06028"]
        fig, ax = plt.subplots()
        plot_partition_panel(ax, units, session.map_styles(), title="test")
        assert ax.get_title() == "test"
        plt.close(fig)
