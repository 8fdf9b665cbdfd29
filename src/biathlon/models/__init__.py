"""Data models for race result processing."""

from .competitor import CompetitorRecord, CompetitorState
from .config import RaceConfig
from .event import EventKind, RaceEvent

__all__ = [
    "CompetitorRecord",
    "CompetitorState",
    "EventKind",
    "RaceConfig",
    "RaceEvent",
]
