"""Clock time and duration helpers.

Times of day are represented as ``timedelta`` offsets from midnight so that
subtracting two of them yields a duration directly.
"""

from datetime import timedelta

from biathlon.errors import DeltaParseError, EventParseError

CLOCK_LENGTH = len("HH:MM:SS.mmm")


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def parse_clock(value: str) -> timedelta:
    """Parse an ``HH:MM:SS.mmm`` time of day.

    Args:
        value: Clock string with two-digit fields and three-digit milliseconds

    Returns:
        Offset from midnight

    Raises:
        EventParseError: If the string is not a valid time of day
    """
    if (
        len(value) != CLOCK_LENGTH
        or value[2] != ":"
        or value[5] != ":"
        or value[8] != "."
    ):
        raise EventParseError(f"invalid time of day {value!r}, expected HH:MM:SS.mmm")

    fields = (value[0:2], value[3:5], value[6:8], value[9:12])
    if not all(_is_digits(f) for f in fields):
        raise EventParseError(f"invalid time of day {value!r}, expected HH:MM:SS.mmm")

    hours, minutes, seconds, millis = (int(f) for f in fields)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise EventParseError(f"time of day out of range: {value!r}")

    return timedelta(hours=hours, minutes=minutes, seconds=seconds, milliseconds=millis)


def parse_delta(value: str) -> timedelta:
    """Parse an ``HH:MM:SS[.mmm]`` duration.

    Fractions of a second beyond milliseconds are truncated.

    Raises:
        DeltaParseError: On wrong field count or non-numeric components
    """
    parts = value.split(":")
    if len(parts) != 3:
        raise DeltaParseError(f"invalid delta format: {value!r}")

    hours, minutes, seconds = parts
    whole, _, fraction = seconds.partition(".")
    if not (_is_digits(hours) and _is_digits(minutes) and _is_digits(whole)):
        raise DeltaParseError(f"invalid delta format: {value!r}")
    if "." in seconds and not _is_digits(fraction):
        raise DeltaParseError(f"invalid delta format: {value!r}")

    millis = int(fraction[:3].ljust(3, "0")) if fraction else 0
    return timedelta(
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(whole),
        milliseconds=millis,
    )


def format_clock(value: timedelta) -> str:
    """Format a duration or time of day as ``HH:MM:SS.mmm``.

    Hours are not wrapped at 24. Negative values get a leading ``-``.
    """
    total_ms = value // timedelta(milliseconds=1)
    sign = "-" if total_ms < 0 else ""
    total_ms = abs(total_ms)

    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds, millis = divmod(rem, 1000)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
