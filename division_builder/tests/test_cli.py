"""
Command-line interface tests.
"""

import pandas as pd
import pytest


def _run(data_dir, *args):
    from division_builder.cli import main

    return main(["--data-dir", str(data_dir), *args])


class TestInfoAndRegions:

    def test_info(self, data_dir, capsys):
        assert _run(data_dir, "info") == 0
        out = capsys.readouterr().out
        assert "[info] Units: 3" in out
        assert "[info] Highlighted units: 1" in out
        assert "Attribute data: available" in out
        assert "Secciones electorales" in out

    def test_info_missing_catalog(self, tmp_path, capsys):
        assert _run(tmp_path, "info") == 1
        assert "[info] Error" in capsys.readouterr().out

    def test_regions(self, data_dir, capsys):
        assert _run(data_dir, "regions") == 0
        out = capsys.readouterr().out
        assert "Secciones electorales (2 regions)" in out
        assert "Sexta" in out

    def test_no_command_prints_help(self, capsys):
        from division_builder.cli import main

        assert main([]) == 0
        assert "division-builder" in capsys.readouterr().out


class TestSummary:

    def test_region_type_table(self, data_dir, capsys):
        assert _run(data_dir, "summary", "--region-type", "Secciones electorales") == 0
        out = capsys.readouterr().out
        assert "Primera" in out and "Sexta" in out
        assert "580.000" in out
        assert "4461.5" in out
        assert "5.877" in out
        assert "2.9" in out
        assert "Unassigned units: 0" in out

    def test_csv_outputs(self, data_dir, tmp_path):
        table_path = tmp_path / "out" / "table.csv"
        assign_path = tmp_path / "out" / "assignment.csv"
        rc = _run(
            data_dir, "summary", "--divisions", "2",
            "--assign", "06028=1", "--assign", "06007=2",
            "--csv", str(table_path), "--assignment-csv", str(assign_path),
        )
        assert rc == 0
        table = pd.read_csv(table_path, index_col=0, dtype=str)
        assert list(table.columns) == ["Division 1", "Division 2"]
        assert table.loc["Number of partidos", "Division 1"] == "1"
        assignment = pd.read_csv(assign_path, dtype={"code": str})
        assert len(assignment) == 3
        row = assignment.set_index("code").loc["06014"]
        assert row["division_index"] == 0

    def test_bad_division_count(self, data_dir, capsys):
        assert _run(data_dir, "summary", "--divisions", "13") == 1
        assert "[summary] Error" in capsys.readouterr().out

    def test_unknown_region_type(self, data_dir, capsys):
        assert _run(data_dir, "summary", "--region-type", "Nope") == 1


class TestSelect:

    def test_select_and_move(self, data_dir, capsys):
        assert _run(data_dir, "select", "--points", "0,0;3,0;3,3", "--move-to", "1") == 0
        out = capsys.readouterr().out
        assert "[select] Selected 1 units" in out
        assert "06028  Almirante Brown" in out
        assert "[select] Moved 1 units to 1" in out

    def test_nothing_selected(self, data_dir, capsys):
        assert _run(data_dir, "select", "--points", "50,50;51,50;51,51") == 0
        assert "No units found" in capsys.readouterr().out

    def test_too_few_points(self, data_dir, capsys):
        assert _run(data_dir, "select", "--points", "0,0;3,3") == 1
        assert "At least 3 points" in capsys.readouterr().out

    def test_parse_points(self):
        from division_builder.cli import _parse_points

        assert _parse_points("0,0; 1.5,2 ;") == [(0.0, 0.0), (1.5, 2.0)]
        assert _parse_points("") is None
        with pytest.raises(ValueError):
            _parse_points("1,2,3")

    def test_parse_assignments(self):
        from division_builder.cli import _parse_assignments

        assert _parse_assignments(["06028=2"]) == [("06028", 2)]
        assert _parse_assignments(None) == []
        with pytest.raises(ValueError):
            _parse_assignments(["06028"])


class TestMap:

    def test_map_written(self, data_dir, tmp_path):
        pytest.importorskip("geopandas")
        import matplotlib
        matplotlib.use("Agg")

        out = tmp_path / "map.png"
        rc = _run(data_dir, "map", "--region-type", "Secciones electorales", "-o", str(out))
        assert rc == 0
        assert out.exists() and out.stat().st_size > 0
