"""Tests for person_record.trials."""

import pytest

from person_record.core import PersonRecord
from person_record.trials import TrialStats, run_trials
from person_record.ui import TRIALS_TASK, create_trials_progress


def test_run_trials_counts(force_draw):
    """High draws: description always present, risky always fails."""
    force_draw(0.9)
    stats = run_trials(PersonRecord("Ann", 30), n=50)
    assert stats == TrialStats(trials=50, description_absent=0, risky_failures=50)
    assert stats.absent_ratio == 0.0
    assert stats.failure_ratio == 1.0
    assert not stats.within()


def test_run_trials_real_split():
    """An unpinned run of the default size lands inside the band."""
    stats = run_trials(PersonRecord("Ann", 30))
    assert stats.trials == 10_000
    assert stats.within()


def test_run_trials_zero():
    """Zero trials give zero ratios."""
    stats = run_trials(PersonRecord("Ann", 30), n=0)
    assert stats.trials == 0
    assert stats.absent_ratio == 0.0
    assert stats.failure_ratio == 0.0


def test_run_trials_negative():
    """A negative count is rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        run_trials(PersonRecord("Ann", 30), n=-1)


def test_run_trials_rejects_bad_description(monkeypatch):
    """A description missing name or age is reported."""
    record = PersonRecord("Ann", 30)
    monkeypatch.setattr(record, "get_description", lambda: "Description: nobody")
    with pytest.raises(ValueError, match="Unexpected description"):
        run_trials(record, n=1)


def test_run_trials_advances_progress():
    """Every trial advances the progress task once."""
    with create_trials_progress() as progress:
        run_trials(PersonRecord("Ann", 30), n=20, progress=progress)
        task = progress.tasks[0]
        assert task.description == TRIALS_TASK
        assert task.total == 20
        assert task.completed == 20


def test_run_trials_progress_shows_counts(force_draw):
    """The progress task carries the running absent and failure counts."""
    force_draw(0.1)
    with create_trials_progress() as progress:
        stats = run_trials(PersonRecord("Ann", 30), n=15, progress=progress)
        fields = progress.tasks[0].fields
    assert fields["absent"] == stats.description_absent == 15
    assert fields["failures"] == stats.risky_failures == 0


def test_within_bounds():
    """within checks both ratios against the band."""
    stats = TrialStats(trials=100, description_absent=45, risky_failures=55)
    assert stats.within()
    assert not stats.within(low=0.5, high=0.6)
