"""Progress display for trial runs."""

from __future__ import annotations

from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

TRIALS_TASK = "[cyan]Running trials..."


def create_trials_progress() -> Progress:
    """Create a progress bar that also shows the running branch counts.

    Tasks added to it must carry ``absent`` and ``failures`` fields;
    run_trials sets both on every step.
    """
    return Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("absent [yellow]{task.fields[absent]}"),
        TextColumn("failures [red]{task.fields[failures]}"),
    )
