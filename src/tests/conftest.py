"""Shared pytest fixtures for Split Monitor tests."""

from datetime import timedelta
from typing import List, Optional

import pytest

from split_monitor.core.timing import (
    Attempt,
    Run,
    Segment,
    SegmentHistory,
    Time,
    TimerPhase,
    TimerSnapshot,
)


def build_run(
    attempt_count: int = 0,
    completed: int = 0,
    segment_runs: Optional[List[int]] = None,
) -> Run:
    """
    Build a run with the given statistics.

    Parameters:
        attempt_count: The run's attempt counter.
        completed: How many entries of the attempt history have a final time.
        segment_runs: Number of actual runs recorded for each segment.
    """
    history = [
        Attempt(index=i + 1, time=Time(real_time=timedelta(minutes=30 + i)))
        for i in range(completed)
    ]
    history.extend(
        Attempt(index=i + 1) for i in range(completed, attempt_count)
    )
    segments = []
    for number, runs in enumerate(segment_runs or []):
        segment_history = SegmentHistory()
        for attempt_index in range(1, runs + 1):
            segment_history.insert(
                attempt_index, Time(real_time=timedelta(seconds=60 + attempt_index))
            )
        segments.append(Segment(name=f"Split {number + 1}", segment_history=segment_history))
    return Run(segments=segments, attempt_history=history, attempt_count=attempt_count)


@pytest.fixture
def empty_run():
    """A run that has never been attempted, with three empty segments."""
    return build_run(segment_runs=[0, 0, 0])


@pytest.fixture
def sample_run():
    """
    A run with 10 attempts, 3 of them completed, where 7 attempts finished the
    first split, 5 the second and 3 the third.
    """
    return build_run(attempt_count=10, completed=3, segment_runs=[7, 5, 3])


@pytest.fixture
def make_snapshot():
    """Factory fixture creating snapshots for a run, phase and split index."""

    def _make(run: Run, phase: TimerPhase = TimerPhase.NOT_RUNNING, index=None):
        return TimerSnapshot(run=run, phase=phase, current_split_index=index)

    return _make
