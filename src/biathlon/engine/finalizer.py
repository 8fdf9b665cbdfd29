"""Final status and metrics derivation for each competitor."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

import numpy as np

from biathlon.engine.registry import CompetitorRegistry
from biathlon.models import CompetitorRecord, RaceConfig
from biathlon.timing import format_clock


class ResultStatus(str, Enum):
    """Reported race status."""

    FINISHED = "finished"
    NOT_FINISHED = "not_finished"
    NOT_STARTED = "not_started"
    UNKNOWN = "unknown"


STATUS_LABELS = {
    ResultStatus.NOT_FINISHED: "[NotFinished]",
    ResultStatus.NOT_STARTED: "[NotStarted]",
    ResultStatus.UNKNOWN: "[Unknown]",
}


@dataclass(frozen=True)
class Split:
    """A timed segment and its average speed.

    ``speed`` is None when the segment lasted zero seconds.
    """

    duration: timedelta
    speed: float | None


@dataclass
class CompetitorResult:
    """Finalized result for one competitor."""

    competitor_id: int
    status: ResultStatus
    elapsed: timedelta | None
    laps_completed: int
    laps: list[Split] = field(default_factory=list)
    penalty_laps: list[Split] = field(default_factory=list)
    hits: int = 0
    hit_capacity: int = 0

    @property
    def display_status(self) -> str:
        """Elapsed time for finishers, bracketed tag otherwise."""
        if self.elapsed is not None:
            return format_clock(self.elapsed)
        return STATUS_LABELS.get(self.status, STATUS_LABELS[ResultStatus.UNKNOWN])


def average_speeds(length: float, durations: list[timedelta]) -> list[float | None]:
    """Distance over duration for each segment, None for zero-length segments."""
    if not durations:
        return []
    seconds = np.array([d.total_seconds() for d in durations], dtype=float)
    speeds = np.full_like(seconds, np.nan)
    np.divide(length, seconds, out=speeds, where=seconds != 0)
    return [None if np.isnan(v) else float(v) for v in speeds]


class ResultFinalizer:
    """Projects competitor records onto reported results."""

    def __init__(self, config: RaceConfig):
        self.config = config

    def status_of(self, record: CompetitorRecord) -> ResultStatus:
        """Derive status; the first matching rule wins."""
        if (
            record.finish_time is None
            or record.disqualified
            or record.laps_completed != self.config.laps
        ):
            return ResultStatus.NOT_FINISHED
        if record.not_started:
            return ResultStatus.NOT_STARTED
        if record.started:
            return ResultStatus.FINISHED
        return ResultStatus.UNKNOWN

    def finalize(self, record: CompetitorRecord) -> CompetitorResult:
        status = self.status_of(record)

        elapsed = None
        if status == ResultStatus.FINISHED and record.scheduled_start is not None:
            elapsed = record.finish_time - record.scheduled_start

        lap_speeds = average_speeds(self.config.lap_length, record.lap_durations)
        penalty_speeds = average_speeds(self.config.penalty_length, record.penalty_durations)

        return CompetitorResult(
            competitor_id=record.competitor_id,
            status=status,
            elapsed=elapsed,
            laps_completed=record.laps_completed,
            laps=[Split(d, s) for d, s in zip(record.lap_durations, lap_speeds)],
            penalty_laps=[Split(d, s) for d, s in zip(record.penalty_durations, penalty_speeds)],
            hits=record.hits,
            hit_capacity=self.config.hit_capacity,
        )

    def finalize_all(self, registry: CompetitorRegistry) -> list[CompetitorResult]:
        """Finalize every competitor in registration order."""
        return [self.finalize(record) for record in registry]
