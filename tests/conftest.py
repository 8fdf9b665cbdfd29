"""Shared fixtures for race processing tests."""

import json
from datetime import timedelta
from pathlib import Path

import pytest

from biathlon.engine import CompetitorRegistry, RaceProcessor
from biathlon.models import RaceConfig, RaceEvent
from biathlon.timing import parse_clock


def make_event(raw_time: str, kind: int, competitor_id: int, payload: str | None = None) -> RaceEvent:
    """Build a RaceEvent from its textual fields."""
    return RaceEvent(
        timestamp=parse_clock(raw_time),
        raw_time=raw_time,
        kind=kind,
        competitor_id=competitor_id,
        payload=payload,
    )


def clock(value: str) -> timedelta:
    return parse_clock(value)


@pytest.fixture
def config_data() -> dict:
    """Two-lap race starting at 10:00 with a 90 second start interval."""
    return {
        "laps": 2,
        "lapLen": 3500,
        "penaltyLen": 150,
        "firingLines": 2,
        "start": "10:00:00.000",
        "startDelta": "00:01:30",
    }


@pytest.fixture
def config(config_data) -> RaceConfig:
    return RaceConfig.model_validate(config_data)


@pytest.fixture
def registry() -> CompetitorRegistry:
    return CompetitorRegistry()


@pytest.fixture
def processor(config) -> RaceProcessor:
    return RaceProcessor(config)


@pytest.fixture
def finished_race() -> list[RaceEvent]:
    """Competitor 1 completes both laps with one hit."""
    return [
        make_event("09:00:00.000", 1, 1),
        make_event("09:01:00.000", 2, 1, "10:00:00.000"),
        make_event("10:00:00.000", 4, 1),
        make_event("10:01:00.000", 6, 1, "1"),
        make_event("10:05:00.000", 10, 1),
        make_event("10:10:00.000", 10, 1),
    ]


@pytest.fixture
def race_files(tmp_path: Path, config_data: dict) -> tuple[Path, Path]:
    """Config and event log written to disk, events deliberately unsorted."""
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(config_data))

    events_path = tmp_path / "events"
    events_path.write_text(
        "[09:01:00.000] 2 1 10:00:00.000\n"
        "[09:00:00.000] 1 1\n"
        "[10:00:00.000] 4 1\n"
        "[10:01:00.000] 6 1 1\n"
        "[10:05:00.000] 10 1\n"
        "[10:10:00.000] 10 1\n"
    )
    return config_path, events_path
