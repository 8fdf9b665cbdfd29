"""Timestamped race events as read from the event log."""

from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum


class EventKind(IntEnum):
    """Recognised event kinds, numbered as they appear in the log."""

    REGISTERED = 1
    START_TIME_ASSIGNED = 2
    ON_START_LINE = 3
    STARTED = 4
    ON_FIRING_RANGE = 5
    TARGET_HIT = 6
    LEFT_FIRING_RANGE = 7
    ENTERED_PENALTY_LAPS = 8
    LEFT_PENALTY_LAPS = 9
    ENDED_MAIN_LAP = 10
    CANNOT_CONTINUE = 11


@dataclass(frozen=True)
class RaceEvent:
    """A single event line.

    ``kind`` keeps the raw integer so that unknown kinds survive parsing
    and can be reported during processing.
    """

    timestamp: timedelta
    raw_time: str
    kind: int
    competitor_id: int
    payload: str | None = None

    @property
    def event_kind(self) -> EventKind | None:
        """Recognised kind, or None when outside the known range."""
        try:
            return EventKind(self.kind)
        except ValueError:
            return None

    def to_line(self) -> str:
        """Render back to the ``[HH:MM:SS.mmm] kind id[ payload]`` grammar."""
        line = f"[{self.raw_time}] {self.kind} {self.competitor_id}"
        if self.payload is not None:
            line += f" {self.payload}"
        return line
