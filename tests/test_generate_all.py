"""
Tests for the batch export script.
"""

import json

import generate_all
from difficulty import LEVELS_PER_MODE
from maze_pieces import LevelData


class TestLevelIds:
    """Test id range clamping."""

    def test_plain(self):
        assert generate_all.level_ids(5, 3) == [5, 6, 7]

    def test_clamped(self):
        assert generate_all.level_ids(0, 3) == [1, 2]
        assert generate_all.level_ids(LEVELS_PER_MODE - 1, 10) == [LEVELS_PER_MODE - 1, LEVELS_PER_MODE]
        assert generate_all.level_ids(1, 0) == []


def test_summarize(catalog):
    """Test per-difficulty counts and move ranges."""
    levels = [catalog.get_or_generate(i, "thinking") for i in (1, 2)]
    summary = generate_all.summarize(levels)
    assert list(summary) == ["Easy"]
    moves = [lv.target_moves for lv in levels]
    assert summary["Easy"] == {"count": 2, "min": min(moves), "max": max(moves)}


def test_main_writes_json(tmp_path, catalog, capsys):
    """Test the script writes loadable levels for the requested range."""
    out = tmp_path / "levels.json"
    rc = generate_all.main(["--mode", "relaxing", "--count", "2",
                            "--processes", "1", "--out", str(out)])
    assert rc == 0
    data = json.loads(out.read_text())
    assert [d["id"] for d in data] == [1, 2]
    assert LevelData.from_dict(data[0]) == catalog.get_or_generate(1, "relaxing")
    assert "Total levels: 2" in capsys.readouterr().out
