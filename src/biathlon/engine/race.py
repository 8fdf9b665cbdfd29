"""Race processing: runs the state machine over an ordered event batch."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from biathlon.engine.finalizer import CompetitorResult, ResultFinalizer
from biathlon.engine.registry import CompetitorRegistry, ReregistrationPolicy
from biathlon.engine.state_machine import apply_event
from biathlon.errors import UnknownEventKindError
from biathlon.models import RaceConfig, RaceEvent

logger = logging.getLogger(__name__)


@dataclass
class RaceOutcome:
    """Everything produced by processing one race."""

    registry: CompetitorRegistry
    results: list[CompetitorResult]
    narration: list[str] = field(default_factory=list)
    events_applied: int = 0
    events_skipped: int = 0


class RaceProcessor:
    """Processes a complete, timestamp-ordered event batch."""

    def __init__(
        self,
        config: RaceConfig,
        policy: ReregistrationPolicy = ReregistrationPolicy.OVERWRITE,
    ):
        """Initialize the processor.

        Args:
            config: Race configuration
            policy: Re-registration handling for the registry
        """
        self.config = config
        self.policy = policy
        self.finalizer = ResultFinalizer(config)

    def process(self, events: Iterable[RaceEvent]) -> RaceOutcome:
        """Apply every event in order and finalize the results.

        A fresh registry is used on every call. Unknown event kinds are
        logged and skipped; any other RaceError propagates.

        Args:
            events: Events already sorted by timestamp

        Returns:
            RaceOutcome with registry, results and narration
        """
        registry = CompetitorRegistry(policy=self.policy)
        narration: list[str] = []
        applied = 0
        skipped = 0

        for event in events:
            try:
                narration.extend(apply_event(registry, self.config, event))
            except UnknownEventKindError as e:
                logger.warning(f"[{event.raw_time}] {e}")
                skipped += 1
                continue
            applied += 1

        logger.info(
            f"Processed {applied} events ({skipped} skipped) for {len(registry)} competitors"
        )

        return RaceOutcome(
            registry=registry,
            results=self.finalizer.finalize_all(registry),
            narration=narration,
            events_applied=applied,
            events_skipped=skipped,
        )
