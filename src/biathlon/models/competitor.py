"""Per-competitor mutable race record."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum


class CompetitorState(str, Enum):
    """Lifecycle of a competitor during processing."""

    REGISTERED = "registered"
    STARTED = "started"
    FINISHED = "finished"
    DID_NOT_START = "did_not_start"
    DISQUALIFIED = "disqualified"


@dataclass
class CompetitorRecord:
    """Accumulated state for one competitor.

    The boolean flags are what the final status is projected from; ``state``
    tracks the lifecycle as transitions are applied.
    """

    competitor_id: int
    state: CompetitorState = CompetitorState.REGISTERED
    started: bool = False
    laps_completed: int = 0
    hits: int = 0
    disqualified: bool = False
    not_started: bool = False
    scheduled_start: timedelta | None = None
    finish_time: timedelta | None = None
    penalty_start: timedelta | None = None
    lap_durations: list[timedelta] = field(default_factory=list)
    penalty_durations: list[timedelta] = field(default_factory=list)

    def mark_not_started(self) -> None:
        """Flag a start-rule violation."""
        self.not_started = True
        if self.state != CompetitorState.DISQUALIFIED:
            self.state = CompetitorState.DID_NOT_START

    def mark_started(self) -> None:
        self.started = True
        if self.state == CompetitorState.REGISTERED:
            self.state = CompetitorState.STARTED

    def mark_lap_completed(self, total_laps: int) -> None:
        self.laps_completed += 1
        if self.laps_completed == total_laps and self.state == CompetitorState.STARTED:
            self.state = CompetitorState.FINISHED

    def disqualify(self) -> None:
        """Permanently disqualify; never cleared."""
        self.disqualified = True
        self.state = CompetitorState.DISQUALIFIED
