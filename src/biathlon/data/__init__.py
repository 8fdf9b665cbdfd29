"""Input loading: configuration and event logs."""

from .loader import RaceDataLoader, order_events, parse_event, parse_events

__all__ = ["RaceDataLoader", "order_events", "parse_event", "parse_events"]
