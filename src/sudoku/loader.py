import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .notation import decode_notation, looks_like_digits, parse_digits

PUZZLE_KEYS = ("puzzle", "quizzes", "quiz", "board", "grid", "notation")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .parquet, .csv, .json and .jsonl formats.
    Returns a list of puzzle dictionaries, each with an `id` and a `grid`
    (list of 81 ints, 0 for empty) next to the raw fields.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = Path(file_path).stem

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _extract_cells(record: Dict[str, Any]) -> Optional[List[Any]]:
        for key in PUZZLE_KEYS:
            raw = record.get(key)
            if raw is None:
                continue
            if hasattr(raw, "tolist"):
                raw = raw.tolist()
            if isinstance(raw, list):
                # Values are checked by Grid, not coerced here.
                return list(raw)
            if _is_nonempty_str(raw):
                if looks_like_digits(raw):
                    return parse_digits(raw)
                return decode_notation(raw)
        return None

    def _normalize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        normalized = []
        for n, record in enumerate(records):
            raw_id = record.get("id")
            if raw_id is None or str(raw_id).strip() == "":
                record["id"] = f"{stem}-{n}"
            else:
                record["id"] = str(raw_id)
            try:
                cells = _extract_cells(record)
            except (TypeError, ValueError) as e:
                print(f"Skipping puzzle {record['id']}: {e}")
                continue
            if cells is None:
                print(f"Skipping puzzle {record['id']}: no puzzle field among {', '.join(PUZZLE_KEYS)}")
                continue
            record["grid"] = cells
            normalized.append(record)
        return normalized

    def _read_lines(f) -> List[Dict[str, Any]]:
        data = []
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                data.append(obj)
        return data

    # Case 1: Parquet File (Binary)
    if file_path.endswith('.parquet'):
        df = pd.read_parquet(file_path)
        return _normalize_records(df.to_dict(orient="records"))

    # Case 2: CSV File; keep everything as text so leading zeros survive
    if file_path.endswith('.csv'):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize_records(df.to_dict(orient="records"))

    # Case 3: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        with open(file_path, "r", encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError:
                # Some sources use ".json" but actually store JSONL.
                f.seek(0)
                return _normalize_records(_read_lines(f))
        if isinstance(payload, list):
            return _normalize_records([p for p in payload if isinstance(p, dict)])
        if isinstance(payload, dict):
            return _normalize_records([payload])
        return []

    # Case 4: JSONL File (Text)
    with open(file_path, 'r', encoding='utf-8') as f:
        return _normalize_records(_read_lines(f))
