"""CLI entrypoint: load puzzle(s), run solver, and report metrics."""

import argparse
import csv
import json
import os
from pathlib import Path
from typing import Optional

from solver import solve_puzzle
from src.sudoku.errors import ShapeError, UnsolvableError
from src.sudoku.grid import Grid
from src.sudoku.loader import load_puzzles
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

SUPPORTED_SUFFIXES = [".json", ".jsonl", ".parquet", ".csv"]


def parse_args():
    parser = argparse.ArgumentParser(description="Solve sudoku puzzles by exhaustive backtracking")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=os.environ.get("SUDOKU_DATA_PATH"),
        help="Path to a puzzle file or directory of puzzles (default: $SUDOKU_DATA_PATH)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write solutions as CSV")
    parser.add_argument(
        "--trace-dir",
        type=Path,
        default=None,
        help="Optional directory; one step trace CSV is written per puzzle.",
    )
    parser.add_argument(
        "--include-status",
        action="store_true",
        help="Include a 'status' column (solved / unsolvable / invalid).",
    )
    parser.add_argument(
        "--no-trace",
        action="store_true",
        help="Do not record search steps; steps are then reported as empty.",
    )
    args = parser.parse_args()
    if args.input is None:
        parser.error("no input given and SUDOKU_DATA_PATH is not set")
    return args


def format_solution(solution: Optional[Grid], status: str, *, include_status: bool = False) -> dict:
    grid = {"digits": solution.to_digits() if solution else "", "rows": solution.rows() if solution else []}
    if include_status:
        return {"status": status, **grid}
    return grid


def format_rows(solution: Grid) -> str:
    """Render rows as text with box separators, for console output."""
    lines = []
    for r, row in enumerate(solution.rows()):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        chunks = [" ".join(str(v or ".") for v in row[c:c + 3]) for c in (0, 3, 6)]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def write_results_csv(results, output_path: Path, include_status: bool = False):
    fieldnames = ["id", "grid_solution", "steps"] + (["status"] if include_status else [])
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(fieldnames)

        for r in results:
            row = [r["id"], r["grid_solution"]["digits"], r["steps"]]
            if include_status:
                row.append(r["grid_solution"]["status"])
            writer.writerow(row)


def main():
    args = parse_args()
    puzzles = []
    results = []

    if args.input.is_file():
        puzzles = load_puzzles(str(args.input))
    elif args.input.is_dir():
        for file_path in sorted(args.input.iterdir()):
            if file_path.suffix in SUPPORTED_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
    else:
        raise ValueError(f"Input path {args.input} is neither file nor directory")

    for puzzle in puzzles:
        reset_tracer()
        enable_tracing(not args.no_trace)
        tracer = get_tracer()
        puzzle_id = puzzle.get("id", "unknown")

        try:
            solution = solve_puzzle(puzzle, tracer=tracer)
            status = "solved"
        except (ShapeError, ValueError) as e:
            print(f"ERROR: Invalid puzzle {puzzle_id}: {e}")
            solution, status = None, "invalid"
        except UnsolvableError as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            solution, status = None, "unsolvable"

        summary = tracer.summary()
        if args.trace_dir and tracer.steps:
            tracer.to_csv(args.trace_dir / f"{puzzle_id}.csv")

        results.append({
            "id": puzzle_id,
            "grid_solution": format_solution(solution, status, include_status=args.include_status),
            # Placements made by the search; givens are not counted.
            "steps": -1 if solution is None else (summary["num_assignments"] if tracer.enabled else None),
        })

    if args.output:
        write_results_csv(results, args.output, include_status=args.include_status)
    else:
        for r in results:
            print(json.dumps({"id": r["id"], "steps": r["steps"], **r["grid_solution"]}, separators=(",", ":")))


if __name__ == "__main__":
    main()
