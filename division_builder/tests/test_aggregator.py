"""
Aggregate, formatting and comparison-table tests.
"""

import numpy as np
import pandas as pd
import pytest


class TestComputeRow:
    """Sums skip units without data; density needs both totals positive."""

    def test_two_units(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator

        store.move_batch(["A", "B"], 1)
        row = Aggregator(attributes).compute_row(store, 1)
        assert row.count == 2
        assert row.area_total == 300
        assert row.population_total == 150
        np.testing.assert_allclose(row.density, 0.5)
        assert row.density_text == "0.5"

    def test_missing_entry_skipped(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator

        store.move_batch(["A", "D"], 2)
        row = Aggregator(attributes).compute_row(store, 2)
        assert row.count == 2
        assert row.area_total == 100
        assert row.population_total == 50

    def test_only_missing_entries(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator

        store.move_batch(["D", "E"], 3)
        row = Aggregator(attributes).compute_row(store, 3)
        assert row.count == 2
        assert row.area_total == 0
        assert row.density == 0.0
        assert row.density_text == "0.0"

    def test_empty_group(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator

        row = Aggregator(attributes).compute_row(store, 1)
        assert (row.count, row.area_total, row.population_total) == (0, 0.0, 0.0)
        assert row.density_text == "0.0"

    def test_missing_values_skipped(self, store):
        from division_builder.evaluation.aggregator import Aggregator

        attrs = {
            "A": {"area": None, "population_total": 40},
            "B": {"area": 10, "population_total": float("nan")},
        }
        store.move_batch(["A", "B"], 1)
        row = Aggregator(attrs).compute_row(store, 1)
        assert row.area_total == 10
        assert row.population_total == 40
        assert row.density_text == "4.0"

    def test_dataframe_source(self, store):
        from division_builder.evaluation.aggregator import Aggregator

        df = pd.DataFrame(
            {"area": [100.0, 200.0], "population_total": [50.0, 100.0]},
            index=["A", "B"],
        )
        store.move_batch(["A", "B", "C"], 1)
        row = Aggregator(df).compute_row(store, 1)
        assert row.count == 3
        assert row.area_total == 300

    def test_numeric_keys_match_padded_codes(self):
        from division_builder.evaluation.aggregator import Aggregator
        from division_builder.geo.catalog import build_unit_catalog
        from division_builder.partition.store import PartitionStore

        catalog = build_unit_catalog([
            {"code": "06028", "name": "Almirante Brown", "centroid": (1.0, 1.0)},
        ])
        store = PartitionStore(catalog)
        store.move_unit("06028", 1)
        row = Aggregator({6028: {"area": 130, "population_total": 580000}}).compute_row(store, 1)
        assert row.area_total == 130
        assert row.population_total == 580000

    def test_compute_all_and_totals(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator

        store.move_unit("C", 2)
        agg = Aggregator(attributes)
        rows = agg.compute_all(store)
        assert [r.group_index for r in rows] == [1, 2, 3]
        assert rows[1].population_total == 1000
        total = agg.totals(store)
        assert total.count == 5
        assert total.area_total == 350
        assert total.population_total == 1150

    def test_no_table(self, store):
        from division_builder.evaluation.aggregator import Aggregator

        store.move_unit("A", 1)
        agg = Aggregator(None)
        assert not agg.data_available
        row = agg.compute_row(store, 1)
        assert row.count == 1
        assert row.area_total == 0

    def test_to_frame(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator

        store.rename(1, "Norte")
        store.move_batch(["A", "B"], 1)
        df = Aggregator(attributes).to_frame(store)
        assert list(df.index) == ["Norte", "Division 2", "Division 3"]
        assert df.loc["Norte", "count"] == 2
        assert df.loc["Norte", "area_total"] == 300


class TestFormatCount:

    @pytest.mark.parametrize("value,expected", [
        (1234567, "1.234.567"),
        (999, "999"),
        (1000, "1.000"),
        (300.0, "300"),
        (0, "0"),
        (0.0, "0"),
        (1234.5, "1.234,5"),
        (None, "-"),
        ("", "-"),
        (float("nan"), "-"),
    ])
    def test_values(self, value, expected):
        from division_builder.evaluation.aggregator import format_count

        assert format_count(value) == expected

    def test_density_text(self):
        from division_builder.evaluation.aggregator import density_text

        assert density_text(150, 300) == "0.5"
        assert density_text(580000, 130) == "4461.5"
        assert density_text(0, 300) == "0.0"
        assert density_text(100, 0) == "0.0"


class TestContrastColor:
    """Luminance above one half gets black text."""

    @pytest.mark.parametrize("background,expected", [
        ("#ffffff", "#000000"),
        ("#000000", "#ffffff"),
        ("#1f77b4", "#ffffff"),
        ("#bcbd22", "#000000"),
        ("#ff7f0e", "#000000"),
        ("#fff", "#000000"),
    ])
    def test_contrast(self, background, expected):
        from division_builder.utils.plotting import contrast_color

        assert contrast_color(background) == expected

    def test_bad_color(self):
        from division_builder.utils.plotting import hex_to_rgb

        with pytest.raises(ValueError):
            hex_to_rgb("#12345")


class TestComparisonTable:

    def test_rows_and_headers(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator
        from division_builder.evaluation.table import comparison_table

        store.move_batch(["A", "B"], 1)
        store.move_unit("C", 2)
        table = comparison_table(store, Aggregator(attributes))
        assert table.ready
        assert [h.name for h in table.headers] == ["Division 1", "Division 2", "Division 3"]
        assert table.headers[0].text_color == "#ffffff"
        assert [r[0] for r in table.rows] == [
            "Number of partidos", "Total area (km²)", "Total population", "Density (inhab/km²)",
        ]
        assert [r[1] for r in table.rows] == ["2", "300", "150", "0.5"]
        assert [r[2] for r in table.rows] == ["1", "50", "1.000", "20.0"]
        assert [r[3] for r in table.rows] == ["0", "0", "0", "0.0"]

    def test_loading_placeholder(self, store):
        from division_builder.evaluation.aggregator import Aggregator
        from division_builder.evaluation.table import comparison_table

        table = comparison_table(store, Aggregator(None))
        assert not table.ready
        assert table.message == "Loading area and population data..."
        assert table.rows == []
        assert len(table.headers) == 3
        assert "Loading" in table.to_text()

    def test_to_frame_and_text(self, store, attributes):
        from division_builder.evaluation.aggregator import Aggregator
        from division_builder.evaluation.table import comparison_table

        store.move_batch(["A", "B"], 1)
        table = comparison_table(store, Aggregator(attributes))
        df = table.to_frame()
        assert df.loc["Total population", "Division 1"] == "150"
        text = table.to_text()
        assert text.splitlines()[0].startswith("Variable")
        assert "Number of partidos" in text
