"""Exception hierarchy for race result processing."""


class RaceError(Exception):
    """Base class for all race processing errors."""


class ConfigError(RaceError):
    """Race configuration could not be read or is invalid."""


class EventParseError(RaceError, ValueError):
    """An event line or one of its timestamps does not match the grammar."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DeltaParseError(RaceError, ValueError):
    """Start interval string is not of the form HH:MM:SS[.mmm]."""


class UnknownEventKindError(RaceError):
    """Event kind outside the recognised range. Recoverable."""

    def __init__(self, kind: int, competitor_id: int):
        self.kind = kind
        self.competitor_id = competitor_id
        super().__init__(
            f"Unknown event kind {kind} for competitor {competitor_id}; "
            "kind must be in the range [1, 11]"
        )


class UnregisteredCompetitorError(RaceError):
    """Event references a competitor that was never registered."""

    def __init__(self, competitor_id: int, raw_time: str | None = None):
        self.competitor_id = competitor_id
        self.raw_time = raw_time
        where = f" at {raw_time}" if raw_time else ""
        super().__init__(f"Competitor {competitor_id} is not registered{where}")


class MissingPenaltyStartError(RaceError):
    """Competitor left the penalty laps without having entered them."""

    def __init__(self, competitor_id: int, raw_time: str | None = None):
        self.competitor_id = competitor_id
        self.raw_time = raw_time
        where = f" at {raw_time}" if raw_time else ""
        super().__init__(
            f"Competitor {competitor_id} left the penalty laps{where} "
            "without entering them"
        )


class DuplicateRegistrationError(RaceError):
    """Competitor registered twice while re-registration is rejected."""

    def __init__(self, competitor_id: int):
        self.competitor_id = competitor_id
        super().__init__(f"Competitor {competitor_id} is already registered")


class EventSourceError(RaceError):
    """Event log could not be read."""
