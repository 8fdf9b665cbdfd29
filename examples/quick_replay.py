#!/usr/bin/env python3
"""Quick replay example using an in-memory event log.

Builds a small two-competitor race without touching the filesystem,
useful for trying out the state machine.

Usage:
    python examples/quick_replay.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from biathlon.analysis import summarize
from biathlon.data import order_events, parse_events
from biathlon.models import RaceConfig
from biathlon.engine import RaceProcessor
from biathlon.output import ConsoleOutput

EVENT_LOG = """\
[09:00:00.000] 1 1
[09:00:00.100] 1 2
[09:01:00.000] 2 1 09:30:00.000
[09:01:00.000] 2 2 09:30:30.000
[09:30:00.500] 4 1
[09:30:30.200] 4 2
[09:40:00.000] 5 1 1
[09:40:02.000] 6 1 1
[09:40:04.000] 6 1 2
[09:40:06.000] 6 1 3
[09:40:10.000] 7 1
[09:40:15.000] 8 1
[09:41:15.000] 9 1
[09:45:00.000] 10 1
[09:47:00.000] 10 2
[09:55:00.000] 10 2
[09:58:30.000] 10 1
"""


def main():
    config = RaceConfig(
        laps=2,
        lap_length=3500,
        penalty_length=150,
        firing_lines=1,
        start="09:30:00.000",
        start_delta="00:00:30",
    )

    events = order_events(parse_events(EVENT_LOG.splitlines()))
    outcome = RaceProcessor(config).process(events)

    ConsoleOutput.print_narration(outcome.narration)
    ConsoleOutput.print_results(outcome.results)
    ConsoleOutput.print_summary(summarize(outcome.results))


if __name__ == "__main__":
    main()
