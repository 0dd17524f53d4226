from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

import fencing.pricing
from fencing.cli import main
from fencing.grid_utils import parse_grid
from fencing.logging_utils import log_malformed
from fencing.pricing import FenceConfig, price_grid, price_region
from fencing.types import Region

SMALL = "AAAA\nBBCD\nBBCC\nEEEC\n"

LARGE = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

HOLES = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO\n"

E_SHAPE = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"

DIAGONAL = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA\n"


def test_price_small_example():
    report = price_grid(parse_grid(SMALL))
    assert report.perimeter_total == 140
    assert report.sides_total == 80
    summary = [(entry.region.symbol, entry.area, entry.perimeter, entry.sides) for entry in report.regions]
    assert summary == [
        ("A", 4, 10, 4),
        ("B", 4, 8, 4),
        ("C", 4, 10, 8),
        ("D", 1, 4, 4),
        ("E", 3, 8, 4),
    ]


@pytest.mark.parametrize(
    "text,perimeter_total,sides_total",
    [
        (LARGE, 1930, 1206),
        (HOLES, 772, 436),
    ],
)
def test_price_reference_grids(text, perimeter_total, sides_total):
    report = price_grid(parse_grid(text))
    assert report.perimeter_total == perimeter_total
    assert report.sides_total == sides_total


@pytest.mark.parametrize("text,sides_total", [(E_SHAPE, 236), (DIAGONAL, 368)])
def test_price_concave_grids(text, sides_total):
    assert price_grid(parse_grid(text)).sides_total == sides_total


def test_region_price_properties():
    entry = price_region(Region("Z", frozenset({(0, 0), (1, 0)})))
    assert entry.area == 2
    assert entry.perimeter == 6
    assert entry.sides == 4
    assert entry.perimeter_price == 12
    assert entry.bulk_price == 8


def test_perimeter_cross_check_raises_on_mismatch(monkeypatch):
    monkeypatch.setattr(fencing.pricing, "closed_form_perimeter", lambda region: -1)
    region = Region("Z", frozenset({(0, 0)}))
    with pytest.raises(AssertionError, match="perimeter mismatch"):
        price_region(region)
    assert price_region(region, FenceConfig(verify_perimeter=False)).perimeter == 4


def test_cli_prints_both_totals(tmp_path: Path, capsys):
    path = tmp_path / "garden.txt"
    path.write_text(LARGE)
    assert main([str(path)], FenceConfig(fail_log="")) == 0
    assert capsys.readouterr().out == "Part 1: 1930\nPart 2: 1206\n"


def test_cli_defaults_to_input_txt(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text(SMALL)
    assert main([]) == 0
    assert capsys.readouterr().out == "Part 1: 140\nPart 2: 80\n"


def test_cli_reports_malformed_grid(tmp_path: Path, capsys):
    path = tmp_path / "ragged.txt"
    path.write_text("AAA\nAA\n")
    log_path = tmp_path / "fail.jsonl"
    assert main([str(path)], FenceConfig(fail_log=str(log_path))) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("[ERROR]")
    entry = json.loads(log_path.read_text().splitlines()[0])
    assert entry["kind"] == "GridFormatError"
    assert entry["path"] == str(path)
    assert "Inconsistent row lengths" in entry["error"]


def test_cli_reports_missing_file(tmp_path: Path, capsys):
    log_path = tmp_path / "fail.jsonl"
    assert main([str(tmp_path / "missing.txt")], FenceConfig(fail_log=str(log_path))) == 1
    assert "[ERROR]" in capsys.readouterr().err
    entry = json.loads(log_path.read_text())
    assert entry["kind"] == "FileNotFoundError"


def test_log_malformed_appends_and_can_be_disabled(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log_path = tmp_path / "log.jsonl"
    log_malformed("a.txt", ValueError("bad"), str(log_path))
    log_malformed("b.txt", ValueError("worse"), str(log_path))
    lines = log_path.read_text().splitlines()
    assert [json.loads(line)["path"] for line in lines] == ["a.txt", "b.txt"]
    log_malformed("c.txt", ValueError("ignored"), "")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["log.jsonl"]
