"""Race-wide statistics."""

from .summary import RaceSummary, summarize

__all__ = ["RaceSummary", "summarize"]
