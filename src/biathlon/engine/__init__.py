"""Race state machine and result derivation."""

from .finalizer import CompetitorResult, ResultFinalizer, ResultStatus, Split
from .race import RaceOutcome, RaceProcessor
from .registry import CompetitorRegistry, ReregistrationPolicy
from .state_machine import apply_event

__all__ = [
    "CompetitorRegistry",
    "CompetitorResult",
    "RaceOutcome",
    "RaceProcessor",
    "ReregistrationPolicy",
    "ResultFinalizer",
    "ResultStatus",
    "Split",
    "apply_event",
]
