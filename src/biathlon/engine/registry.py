"""In-memory registry of competitor records."""

import logging
from collections.abc import Iterator
from datetime import timedelta
from enum import Enum

from biathlon.errors import DuplicateRegistrationError, UnregisteredCompetitorError
from biathlon.models import CompetitorRecord

logger = logging.getLogger(__name__)


class ReregistrationPolicy(str, Enum):
    """What to do when an already known competitor registers again."""

    OVERWRITE = "overwrite"
    REJECT = "reject"


class CompetitorRegistry:
    """Records stored densely in registration order, indexed by competitor id."""

    def __init__(self, policy: ReregistrationPolicy = ReregistrationPolicy.OVERWRITE):
        """Initialize an empty registry.

        Args:
            policy: Handling of repeated Register events for the same id
        """
        self.policy = policy
        self._records: list[CompetitorRecord] = []
        self._index: dict[int, int] = {}
        # Most recently assigned scheduled start across all competitors
        self.last_scheduled_start: timedelta | None = None

    def register(self, competitor_id: int) -> CompetitorRecord:
        """Create a fresh record for a competitor.

        Under OVERWRITE a repeated registration replaces the old record in
        place, keeping its position in registration order.
        """
        record = CompetitorRecord(competitor_id=competitor_id)
        slot = self._index.get(competitor_id)

        if slot is None:
            self._index[competitor_id] = len(self._records)
            self._records.append(record)
            return record

        if self.policy == ReregistrationPolicy.REJECT:
            raise DuplicateRegistrationError(competitor_id)

        logger.warning(f"Competitor {competitor_id} registered again, previous record discarded")
        self._records[slot] = record
        return record

    def get(self, competitor_id: int, raw_time: str | None = None) -> CompetitorRecord:
        """Look up a registered competitor.

        Raises:
            UnregisteredCompetitorError: If no Register event was seen for the id
        """
        slot = self._index.get(competitor_id)
        if slot is None:
            raise UnregisteredCompetitorError(competitor_id, raw_time)
        return self._records[slot]

    def __contains__(self, competitor_id: object) -> bool:
        return competitor_id in self._index

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CompetitorRecord]:
        return iter(self._records)
