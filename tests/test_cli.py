"""Tests for the CLI demo and graph output."""

import pytest

from cocktail_bac.graph import curve_data, save_bac_graph
from cocktail_bac.main import main


def test_cli_default_screwdriver(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "male, 70.0 kg, 2 ingredient(s)" in out
    assert "Risk: safe" in out


def test_cli_projection(capsys):
    assert main(["--female", "--weight-kg", "10", "--ingredient", "1000:1", "--hours", "2"]) == 0
    out = capsys.readouterr().out
    assert "BAC: 0.1435 (14.35%)" in out
    assert "Risk: danger" in out
    assert "BAC after 2.0h: 0.1135" in out


@pytest.mark.parametrize("argv", [["--weight-kg", "0"], ["--ingredient", "45:1.5"], ["--ingredient", "45"]])
def test_cli_rejects_bad_input(argv, capsys):
    assert main(argv) == 2
    assert "error:" in capsys.readouterr().err


def test_curve_data_capped():
    points = curve_data(0.3, step_hours=1, max_hours=12)
    assert points[-1][0] == 12
    assert len(points) == 13


def test_save_bac_graph(tmp_path):
    pytest.importorskip("matplotlib")
    out = tmp_path / "plots" / "bac.png"
    path = save_bac_graph(0.08, output_path=str(out))
    assert path == str(out)
    assert out.exists()
