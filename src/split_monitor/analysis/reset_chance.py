"""Success counts behind the reset chance.

Calculates how many attempts completed the relevant split out of how many
reached it. Without an active attempt the counts cover the entire run.
"""

from dataclasses import dataclass

from split_monitor.core.timing import Run, TimerPhase, TimerSnapshot


@dataclass
class SuccessCounts:
    """Attempt counts a reset or success chance is derived from."""

    successful_attempts: int = 0
    total_attempts: int = 0


def total_successful_attempts(run: Run) -> int:
    """Count the attempts of the run that were completed."""
    return sum(1 for attempt in run.attempt_history if attempt.is_completed)


def _actual_run_count(run: Run, segment_index: int) -> int:
    history = run.segments[segment_index].segment_history
    return sum(1 for _ in history.iter_actual_runs())


def calculate(timer: TimerSnapshot) -> SuccessCounts:
    """
    Calculate the success counts for a timer snapshot.

    While an attempt is running or paused, the counts are conditional on the
    current split: out of all attempts that reached it, how many completed it.
    The first split is reached by every attempt, so the run's attempt count is
    used as the total there. The successful count is capped at the total so a
    history with more completions of a split than of its predecessor never
    yields a negative reset count.

    When the attempt has just ended it is counted as one more successful
    attempt on top of the run's history, which does not contain it yet.

    Parameters:
        timer (TimerSnapshot): Snapshot to analyze. It is not modified.

    Returns:
        SuccessCounts: The counts. ``total_attempts`` may be 0 when there is no
        data yet.
    """
    phase = timer.current_phase()
    run = timer.run

    if phase in (TimerPhase.RUNNING, TimerPhase.PAUSED):
        current_index = timer.current_split_index or 0
        if current_index == 0:
            total_attempts = run.attempt_count
        else:
            total_attempts = _actual_run_count(run, current_index - 1)
        # Edited or imported histories can list more completions of a split
        # than of the one before it.
        successful_attempts = min(_actual_run_count(run, current_index), total_attempts)
        return SuccessCounts(
            successful_attempts=successful_attempts,
            total_attempts=total_attempts,
        )

    if phase == TimerPhase.ENDED:
        count = 1 + total_successful_attempts(run)
        return SuccessCounts(successful_attempts=count, total_attempts=count)

    return SuccessCounts(
        successful_attempts=total_successful_attempts(run),
        total_attempts=run.attempt_count,
    )
