"""Aggregate statistics over finalized race results."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import timedelta

import numpy as np

from biathlon.engine.finalizer import CompetitorResult, ResultStatus


@dataclass
class RaceSummary:
    """Race-wide statistics derived from competitor results."""

    num_competitors: int
    status_counts: dict[ResultStatus, int] = field(default_factory=dict)
    finish_order: list[tuple[int, timedelta]] = field(default_factory=list)
    best_lap_speed: float | None = None
    best_lap_competitor: int | None = None
    mean_hit_rate: float = 0.0

    @property
    def finishers(self) -> int:
        return self.status_counts.get(ResultStatus.FINISHED, 0)

    @property
    def winner(self) -> int | None:
        """Competitor with the shortest elapsed time."""
        return self.finish_order[0][0] if self.finish_order else None


def summarize(results: list[CompetitorResult]) -> RaceSummary:
    """Build a RaceSummary from finalized results.

    Args:
        results: Results in registration order

    Returns:
        RaceSummary; hit rate is a percentage of the display capacity
    """
    counts = Counter(r.status for r in results)

    finish_order = sorted(
        ((r.competitor_id, r.elapsed) for r in results if r.elapsed is not None),
        key=lambda item: item[1],
    )

    best_speed = None
    best_competitor = None
    for result in results:
        speeds = [s.speed for s in result.laps if s.speed is not None]
        if not speeds:
            continue
        top = float(np.max(speeds))
        if best_speed is None or top > best_speed:
            best_speed = top
            best_competitor = result.competitor_id

    rates = np.array(
        [r.hits / r.hit_capacity * 100 for r in results if r.hit_capacity > 0],
        dtype=float,
    )
    mean_hit_rate = float(rates.mean()) if rates.size else 0.0

    return RaceSummary(
        num_competitors=len(results),
        status_counts={status: counts.get(status, 0) for status in ResultStatus},
        finish_order=finish_order,
        best_lap_speed=best_speed,
        best_lap_competitor=best_competitor,
        mean_hit_rate=mean_hit_rate,
    )
