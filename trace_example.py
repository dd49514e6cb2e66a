"""Example: solve one puzzle with tracing on and write the steps to CSV."""

from pathlib import Path
from typing import Optional

from run import format_rows
from solver import solve_puzzle
from src.sudoku.grid import Grid
from src.utils.trace import get_tracer, reset_tracer


def solve_and_trace(puzzle: Grid, output_trace_csv: Optional[Path] = None) -> Grid:
    """
    Solve a puzzle and log all steps to a trace file.

    Args:
        puzzle: Grid to solve
        output_trace_csv: Path to write trace CSV (optional)

    Returns:
        Solved Grid
    """
    reset_tracer()
    tracer = get_tracer()

    solution = solve_puzzle(puzzle, tracer=tracer)

    summary = tracer.summary()
    print(f"\n{'='*50}")
    print(f"Solver Summary:")
    print(f"  Total steps: {summary['total_steps']}")
    print(f"  Assignments: {summary['num_assignments']}")
    print(f"  Backtracks: {summary['num_backtracks']}")
    print(f"  Deepest stack: {summary['max_stack_depth']}")
    print(f"  Time: {summary['elapsed_time_seconds']:.3f}s")
    print(f"{'='*50}\n")

    if output_trace_csv:
        tracer.to_csv(output_trace_csv)

    return solution


if __name__ == "__main__":
    example_puzzle = Grid(
        "3七五2九1/"
        "九一3三3/"
        "2五四2七2/"
        "4七五1一八/"
        "六7三/"
        "五七1八一4/"
        "2八2四二2/"
        "3二3八六/"
        "1四2九八3"
    )

    trace_output = Path("traces/example_trace.csv")
    solution = solve_and_trace(example_puzzle, trace_output)
    print(format_rows(solution))
