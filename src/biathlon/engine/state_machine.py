"""Race state machine: applies one event at a time to the registry."""

import logging
from collections.abc import Callable

from biathlon.engine.registry import CompetitorRegistry
from biathlon.errors import (
    EventParseError,
    MissingPenaltyStartError,
    UnknownEventKindError,
)
from biathlon.models import CompetitorRecord, EventKind, RaceConfig, RaceEvent
from biathlon.timing import format_clock, parse_clock

logger = logging.getLogger(__name__)

Transition = Callable[[CompetitorRecord, RaceConfig, CompetitorRegistry, RaceEvent], list[str]]


def _narrate(event: RaceEvent, text: str) -> str:
    return f"[{event.raw_time}] {text}"


def _assign_start_time(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    """Store the drawn start and check the gap to the previous assignment."""
    if event.payload is None:
        raise EventParseError(
            f"competitor {event.competitor_id}: start time assignment without a time"
        )
    scheduled = parse_clock(event.payload.strip())
    record.scheduled_start = scheduled

    baseline = registry.last_scheduled_start
    if baseline is None:
        baseline = config.start
    if scheduled - baseline > config.start_delta:
        record.mark_not_started()
    registry.last_scheduled_start = scheduled

    return [_narrate(
        event,
        f"The start time for the competitor({event.competitor_id}) "
        f"was set by a draw to {format_clock(scheduled)}",
    )]


def _on_start_line(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    return [_narrate(event, f"The competitor({event.competitor_id}) is on the start line")]


def _started(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    """Record the actual start; late if after scheduled start plus the interval."""
    lines = []
    if record.scheduled_start is None:
        logger.warning(
            f"Competitor {event.competitor_id} started at {event.raw_time} "
            "without an assigned start time"
        )
        late = True
    else:
        late = event.timestamp > record.scheduled_start + config.start_delta

    if late:
        record.mark_not_started()
        lines.append(_narrate(
            event, f"The competitor({event.competitor_id}) is disqualified for late start"
        ))
    record.mark_started()
    lines.append(_narrate(event, f"The competitor({event.competitor_id}) has started"))
    return lines


def _on_firing_range(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    return [_narrate(
        event,
        f"The competitor({event.competitor_id}) is on the firing range({event.payload or ''})",
    )]


def _target_hit(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    record.hits += 1
    return [_narrate(
        event,
        f"The target({event.payload or ''}) has been hit by competitor({event.competitor_id})",
    )]


def _left_firing_range(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    return [_narrate(event, f"The competitor({event.competitor_id}) left the firing range")]


def _entered_penalty(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    record.penalty_start = event.timestamp
    return [_narrate(event, f"The competitor({event.competitor_id}) entered the penalty laps")]


def _left_penalty(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    if record.penalty_start is None:
        raise MissingPenaltyStartError(event.competitor_id, event.raw_time)
    record.penalty_durations.append(event.timestamp - record.penalty_start)
    return [_narrate(event, f"The competitor({event.competitor_id}) left the penalty laps")]


def _split_from_start(record: CompetitorRecord, event: RaceEvent) -> None:
    if record.scheduled_start is None:
        logger.warning(
            f"Competitor {event.competitor_id} has no assigned start time, "
            f"split at {event.raw_time} not recorded"
        )
        return
    record.lap_durations.append(event.timestamp - record.scheduled_start)


def _ended_main_lap(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    """Count a lap; the latest lap end is the finish time."""
    record.mark_lap_completed(config.laps)
    # Only one aggregate split is kept, measured from the scheduled start
    if not record.lap_durations and record.laps_completed == config.laps:
        _split_from_start(record, event)
    record.finish_time = event.timestamp
    return [_narrate(event, f"The competitor({event.competitor_id}) ended the main lap")]


def _cannot_continue(
    record: CompetitorRecord,
    config: RaceConfig,
    registry: CompetitorRegistry,
    event: RaceEvent,
) -> list[str]:
    """Withdraw the competitor, keeping a partial split if laps remain."""
    if record.laps_completed != config.laps:
        _split_from_start(record, event)
    record.disqualify()
    return [_narrate(
        event,
        f"The competitor({event.competitor_id}) can't continue: {event.payload or ''}",
    )]


TRANSITIONS: dict[EventKind, Transition] = {
    EventKind.START_TIME_ASSIGNED: _assign_start_time,
    EventKind.ON_START_LINE: _on_start_line,
    EventKind.STARTED: _started,
    EventKind.ON_FIRING_RANGE: _on_firing_range,
    EventKind.TARGET_HIT: _target_hit,
    EventKind.LEFT_FIRING_RANGE: _left_firing_range,
    EventKind.ENTERED_PENALTY_LAPS: _entered_penalty,
    EventKind.LEFT_PENALTY_LAPS: _left_penalty,
    EventKind.ENDED_MAIN_LAP: _ended_main_lap,
    EventKind.CANNOT_CONTINUE: _cannot_continue,
}


def apply_event(
    registry: CompetitorRegistry,
    config: RaceConfig,
    event: RaceEvent,
) -> list[str]:
    """Apply a single event to the registry.

    Args:
        registry: Competitor records, mutated in place
        config: Race configuration
        event: Next event in timestamp order

    Returns:
        Narration lines for the event

    Raises:
        UnknownEventKindError: Kind outside [1, 11]; registry untouched
        UnregisteredCompetitorError: Non-Register event for an unknown id
        MissingPenaltyStartError: Left penalty laps without entering them
        EventParseError: Start time assignment with a malformed time
    """
    kind = event.event_kind
    if kind is None:
        raise UnknownEventKindError(event.kind, event.competitor_id)

    if kind == EventKind.REGISTERED:
        registry.register(event.competitor_id)
        return [_narrate(event, f"The competitor({event.competitor_id}) registered")]

    record = registry.get(event.competitor_id, event.raw_time)
    return TRANSITIONS[kind](record, config, registry, event)
