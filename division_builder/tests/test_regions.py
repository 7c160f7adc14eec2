"""
Predefined-region loading tests.
"""

import pytest


class TestApplyRegionTable:
    """A region type replaces the partition, one group per region."""

    def test_regions_become_groups(self, store, region_table):
        from division_builder.partition.regions import apply_region_table
        from division_builder.partition.store import POOL

        names = apply_region_table(store, region_table, "Secciones")
        assert names == ["Norte", "Sur"]
        assert store.K == 2
        assert store.group(1).name == "Norte"
        assert store.group(2).name == "Sur"
        assert store.members(1) == ("A", "B")
        assert store.members(2) == ("C",)
        assert store.location_of("D") is POOL
        assert store.pool_units() == ("D", "E")
        store.check_invariant()

    def test_unknown_codes_skipped_with_warning(self, store, region_table, caplog):
        from division_builder.partition.regions import apply_region_table

        with caplog.at_level("WARNING", logger="division_builder.partition.regions"):
            apply_region_table(store, region_table, "Secciones")
        assert "ZZZ" in caplog.text

    def test_previous_assignment_cleared(self, store, region_table):
        from division_builder.partition.regions import apply_region_table
        from division_builder.partition.store import POOL

        store.move_unit("D", 1)
        store.move_unit("E", 3)
        apply_region_table(store, region_table, "Secciones")
        assert store.location_of("D") is POOL
        assert store.location_of("E") is POOL

    def test_bare_code_members(self, store, region_table):
        from division_builder.partition.regions import apply_region_table

        names = apply_region_table(store, region_table, "Salud")
        assert names == ["Region I", "Region II", "Region III"]
        assert store.members(2) == ("B", "C")
        assert store.remaining_count() == 0

    def test_unknown_region_type(self, store, region_table):
        from division_builder.partition.regions import apply_region_table

        with pytest.raises(KeyError):
            apply_region_table(store, region_table, "Nope")

    def test_too_many_regions(self, store):
        from division_builder.exceptions import DivisionCountError
        from division_builder.partition.regions import apply_region_table

        table = {"Many": {f"R{i:02d}": [] for i in range(13)}}
        store.move_unit("A", 1)
        with pytest.raises(DivisionCountError):
            apply_region_table(store, table, "Many")
        assert store.K == 3
        assert store.members(1) == ("A",)

    def test_single_notification(self, store, region_table):
        from division_builder.partition.regions import apply_region_table

        calls = []
        store.subscribe(lambda s: calls.append(1))
        apply_region_table(store, region_table, "Salud")
        assert calls == [1]


class TestRegionSummary:

    def test_sizes(self, region_table):
        from division_builder.partition.regions import region_summary

        summary = region_summary(region_table)
        assert list(summary) == ["Salud", "Secciones"]
        assert summary["Secciones"] == {"Norte": 2, "Sur": 2}
