"""Tests for reading puzzle files."""

import json

import pandas as pd
import pytest

from src.sudoku.grid import Grid
from src.sudoku.loader import load_puzzles

DIGITS = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(str(tmp_path / "nope.csv"))


def test_csv_keeps_leading_zeros(tmp_path):
    path = tmp_path / "kaggle.csv"
    pd.DataFrame({"quizzes": ["0" * 81, DIGITS], "solutions": ["", ""]}).to_csv(path, index=False)

    puzzles = load_puzzles(str(path))
    assert [p["id"] for p in puzzles] == ["kaggle-0", "kaggle-1"]
    assert puzzles[0]["grid"] == [0] * 81
    assert puzzles[1]["grid"][:3] == [5, 3, 0]


def test_json_array_and_notation(tmp_path):
    path = tmp_path / "set.json"
    path.write_text(json.dumps([
        {"id": "empty", "puzzle": "9/9/9/9/9/9/9/9/9"},
        {"id": 7, "board": [0] * 81},
        {"id": "none", "title": "no puzzle here"},
    ]), encoding="utf-8")

    puzzles = load_puzzles(str(path))
    assert [p["id"] for p in puzzles] == ["empty", "7"]
    assert puzzles[0]["grid"] == [0] * 81
    assert puzzles[1]["grid"] == [0] * 81


def test_json_object_and_jsonl_fallback(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps({"puzzle": DIGITS}), encoding="utf-8")
    assert load_puzzles(str(single))[0]["id"] == "one-0"

    lines = tmp_path / "lines.json"
    lines.write_text(
        json.dumps({"id": "a", "puzzle": DIGITS}) + "\n\n{broken\n" + json.dumps({"id": "b", "grid": DIGITS}) + "\n",
        encoding="utf-8",
    )
    assert [p["id"] for p in load_puzzles(str(lines))] == ["a", "b"]


def test_jsonl(tmp_path):
    path = tmp_path / "set.jsonl"
    path.write_text(json.dumps({"id": "x", "notation": "一8/9/9/9/9/9/9/9/9"}) + "\n", encoding="utf-8")
    puzzles = load_puzzles(str(path))
    assert puzzles[0]["grid"][0] == 1
    assert len(puzzles[0]["grid"]) == 81


def test_list_cells_are_not_coerced(tmp_path):
    board = [0] * 81
    board[0], board[1], board[2] = 5.9, True, "7"
    path = tmp_path / "odd.json"
    path.write_text(json.dumps({"id": "odd", "board": board}), encoding="utf-8")

    puzzles = load_puzzles(str(path))
    assert puzzles[0]["grid"][:3] == [5.9, True, "7"]
    assert isinstance(puzzles[0]["grid"][1], bool)
    with pytest.raises(ValueError):
        Grid(puzzles[0]["grid"])
