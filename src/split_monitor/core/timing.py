"""Read-only timing model for Split Monitor.

The timer state machine and the run history storage live outside this package.
These structures describe the snapshot they hand over: the current phase, the
active split and the recorded history of the run.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Dict, Iterator, List, Optional, Protocol, Tuple, runtime_checkable


class TimerPhase(str, Enum):
    """Lifecycle state of the active attempt."""

    NOT_RUNNING = "NotRunning"
    RUNNING = "Running"
    ENDED = "Ended"
    PAUSED = "Paused"


@dataclass(frozen=True)
class Time:
    """A time value measured with both timing methods."""

    real_time: Optional[timedelta] = None
    game_time: Optional[timedelta] = None


@dataclass(frozen=True)
class Attempt:
    """One attempt of the run. ``time`` is unset for abandoned attempts."""

    index: int
    time: Time = field(default_factory=Time)

    @property
    def is_completed(self) -> bool:
        return self.time.real_time is not None


@dataclass
class SegmentHistory:
    """Segment times recorded per attempt index.

    Indices below 1 hold imported or best-segment placeholder entries and are
    not attempts that actually happened.
    """

    entries: Dict[int, Time] = field(default_factory=dict)

    def insert(self, index: int, time: Time) -> None:
        self.entries[index] = time

    def iter_actual_runs(self) -> Iterator[Tuple[int, Time]]:
        """Yield ``(attempt index, time)`` for entries of real attempts."""
        for index, time in sorted(self.entries.items()):
            if index >= 1:
                yield index, time

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class Segment:
    """One split of the run."""

    name: str
    segment_history: SegmentHistory = field(default_factory=SegmentHistory)


@dataclass
class Run:
    """Recorded history of a run.

    ``attempt_count`` is the run's own attempt counter and can be larger than
    the number of entries in ``attempt_history``.
    """

    segments: List[Segment] = field(default_factory=list)
    attempt_history: List[Attempt] = field(default_factory=list)
    attempt_count: int = 0


@dataclass(frozen=True)
class TimerSnapshot:
    """Frozen view of the timer at a single point in time."""

    run: Run
    phase: TimerPhase = TimerPhase.NOT_RUNNING
    current_split_index: Optional[int] = None

    def current_phase(self) -> TimerPhase:
        return self.phase


@runtime_checkable
class SnapshotSource(Protocol):
    """Anything that can hand out a timer snapshot, usually the timer itself."""

    def snapshot(self) -> TimerSnapshot:
        """Take a snapshot of the current timer state."""
        ...
