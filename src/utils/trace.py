"""Tracing module: logs backtracking steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the search."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'backtrack', 'solution_found', 'exhausted'
    index: Optional[int] = None  # linear cell index, 0-80
    row: Optional[int] = None
    column: Optional[int] = None
    value: Optional[int] = None
    stack_depth: Optional[int] = None
    filled_cells: Optional[int] = None
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, index: Optional[int] = None, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            index=index,
            row=None if index is None else index // 9,
            column=None if index is None else index % 9,
            **fields,
        ))

    def log_assign(self, index: int, value: int, stack_depth: int):
        """Log a digit placed by the search."""
        if not self.enabled:
            return
        self._record('assign', index, value=value, stack_depth=stack_depth)

    def log_backtrack(self, index: int, stack_depth: int, reason: str = "No digit fits"):
        """Log a cell reset to empty before retrying an earlier one."""
        if not self.enabled:
            return
        self._record('backtrack', index, stack_depth=stack_depth, reason=reason)

    def log_exhausted(self, reason: str):
        """Log the end of a search that found nothing."""
        if not self.enabled:
            return
        self._record('exhausted', reason=reason)

    def log_solution_found(self, filled_cells: int):
        """Log when a solution is found."""
        if not self.enabled:
            return
        self._record('solution_found', filled_cells=filled_cells)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'index', 'row', 'column',
            'value', 'stack_depth', 'filled_cells', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_assignments': action_counts.get('assign', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
            'max_stack_depth': max(
                (s.stack_depth for s in self.steps if s.stack_depth is not None),
                default=0,
            ),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
