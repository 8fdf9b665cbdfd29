"""Reading race configuration and event logs from disk."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from biathlon.errors import ConfigError, EventParseError, EventSourceError
from biathlon.models import RaceConfig, RaceEvent
from biathlon.timing import CLOCK_LENGTH, parse_clock

logger = logging.getLogger(__name__)


def _parse_int(value: str, what: str, line: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise EventParseError(f"{what} must be a non-negative integer, got {value!r}", line=line)
    return int(value)


def parse_event(line: str) -> RaceEvent:
    """Tokenize one ``[HH:MM:SS.mmm] kind id[ payload]`` line.

    Args:
        line: Raw event line without trailing newline

    Returns:
        Parsed RaceEvent; payload is None when absent

    Raises:
        EventParseError: If the line does not match the grammar
    """
    close = CLOCK_LENGTH + 1
    if len(line) < close + 1 or line[0] != "[" or line[close] != "]":
        raise EventParseError("invalid event format, expected [HH:MM:SS.mmm] kind id", line=line)

    raw_time = line[1:close]
    try:
        timestamp = parse_clock(raw_time)
    except EventParseError as e:
        raise EventParseError(str(e), line=line) from e

    rest = line[close + 1:]
    if not rest.startswith(" "):
        raise EventParseError("missing separator after timestamp", line=line)

    fields = rest[1:].split(" ", 2)
    if len(fields) < 2:
        raise EventParseError("missing event kind or competitor id", line=line)

    kind = _parse_int(fields[0], "event kind", line)
    competitor_id = _parse_int(fields[1], "competitor id", line)
    payload = fields[2] if len(fields) == 3 else None

    return RaceEvent(
        timestamp=timestamp,
        raw_time=raw_time,
        kind=kind,
        competitor_id=competitor_id,
        payload=payload,
    )


def parse_events(lines: Iterable[str]) -> list[RaceEvent]:
    """Parse event lines in input order, skipping blank lines.

    Raises:
        EventParseError: On the first malformed line, with its line number
    """
    events: list[RaceEvent] = []
    for number, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            events.append(parse_event(line))
        except EventParseError as e:
            raise EventParseError(str(e), line_number=number, line=line) from e
    return events


def order_events(events: Iterable[RaceEvent]) -> list[RaceEvent]:
    """Sort by timestamp; ties keep their input order."""
    return sorted(events, key=lambda e: e.timestamp)


class RaceDataLoader:
    """Loads a race configuration and its event log."""

    def __init__(self, config_path: str | Path, events_path: str | Path):
        """Initialize the loader.

        Args:
            config_path: JSON race configuration
            events_path: Event log, one event per line
        """
        self.config_path = Path(config_path)
        self.events_path = Path(events_path)

    def load_config(self) -> RaceConfig:
        """Read and validate the race configuration.

        Raises:
            ConfigError: If the file is unreadable or its contents invalid
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"cannot read config {self.config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in config {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"config {self.config_path} must be a JSON object")

        try:
            config = RaceConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"invalid config {self.config_path}: {e}") from e

        logger.info(
            f"Loaded config: {config.laps} laps of {config.lap_length}, "
            f"penalty lap {config.penalty_length}"
        )
        return config

    def load_events(self) -> list[RaceEvent]:
        """Read, parse and order the event log.

        Raises:
            EventParseError: If any line is malformed
            EventSourceError: If the event file cannot be read
        """
        try:
            with open(self.events_path, encoding="utf-8") as f:
                events = parse_events(f)
        except (OSError, UnicodeDecodeError) as e:
            raise EventSourceError(f"cannot read events {self.events_path}: {e}") from e

        logger.info(f"Loaded {len(events)} events from {self.events_path}")
        return order_events(events)

    def load(self) -> tuple[RaceConfig, list[RaceEvent]]:
        """Load both inputs; nothing is processed if either fails."""
        return self.load_config(), self.load_events()
