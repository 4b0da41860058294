"""Repeated-call statistics for the random PersonRecord methods.

get_description and risky_method each take one branch about half of the
time. run_trials calls both many times and reports how often the absent
or failing branch was taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from person_record.core import PersonRecord, call_risky
from person_record.ui import TRIALS_TASK

if TYPE_CHECKING:
    from rich.progress import Progress

DEFAULT_TRIALS = 10_000
LOW_BOUND = 0.4
HIGH_BOUND = 0.6


@dataclass
class TrialStats:
    """Counts collected by run_trials."""

    trials: int = 0
    description_absent: int = 0
    risky_failures: int = 0

    @property
    def absent_ratio(self) -> float:
        """Fraction of get_description calls that returned None."""
        if self.trials == 0:
            return 0.0
        return self.description_absent / self.trials

    @property
    def failure_ratio(self) -> float:
        """Fraction of risky_method calls that raised."""
        if self.trials == 0:
            return 0.0
        return self.risky_failures / self.trials

    def within(self, low: float = LOW_BOUND, high: float = HIGH_BOUND) -> bool:
        """Check that both ratios fall inside [low, high]."""
        return (
            low <= self.absent_ratio <= high
            and low <= self.failure_ratio <= high
        )


def run_trials(
    record: PersonRecord,
    n: int = DEFAULT_TRIALS,
    progress: Progress | None = None,
) -> TrialStats:
    """Call get_description and risky_method n times each.

    Args:
        record: Record to exercise.
        n: Number of calls per method.
        progress: Optional rich Progress, advanced once per trial with
            the running absent and failure counts.

    Returns:
        TrialStats with the absent and failure counts.

    Raises:
        ValueError: If n is negative, or a description does not mention
            the record's current name and age.
    """
    if n < 0:
        raise ValueError("Trial count must be non-negative")

    task = None
    if progress is not None:
        task = progress.add_task(TRIALS_TASK, total=n, absent=0, failures=0)

    stats = TrialStats(trials=n)
    for _ in range(n):
        description = record.get_description()
        if description is None:
            stats.description_absent += 1
        elif record.name not in description or str(record.age) not in description:
            raise ValueError(f"Unexpected description: {description!r}")

        if not call_risky(record).success:
            stats.risky_failures += 1

        if progress is not None and task is not None:
            progress.update(
                task,
                advance=1,
                absent=stats.description_absent,
                failures=stats.risky_failures,
            )

    return stats
