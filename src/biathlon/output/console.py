"""Console output formatting."""

from biathlon.analysis.summary import RaceSummary
from biathlon.engine.finalizer import CompetitorResult, ResultStatus, Split
from biathlon.timing import format_clock

UNDEFINED_SPEED = "undefined"


class ConsoleOutput:
    """Formats race narration and results for console display."""

    @staticmethod
    def format_split(split: Split) -> str:
        """Render ``{HH:MM:SS.mmm, speed}``."""
        speed = UNDEFINED_SPEED if split.speed is None else f"{split.speed:.3f}"
        return f"{{{format_clock(split.duration)}, {speed}}}"

    @staticmethod
    def format_result(result: CompetitorResult) -> str:
        """Render one line of the final results block."""
        laps = ", ".join(ConsoleOutput.format_split(s) for s in result.laps)
        penalty = ", ".join(ConsoleOutput.format_split(s) for s in result.penalty_laps)
        return (
            f"{result.display_status} Competitor {result.competitor_id}: "
            f"laps count {result.laps_completed}, "
            f"laps [{laps}], "
            f"Penalty [{penalty}], "
            f"Hits {result.hits}/{result.hit_capacity}"
        )

    @staticmethod
    def print_narration(lines: list[str]) -> None:
        """Print the per-event audit trail in processing order."""
        for line in lines:
            print(line)

    @staticmethod
    def print_results(results: list[CompetitorResult]) -> None:
        """Print the final results block.

        Args:
            results: Results in registration order
        """
        print("\nFinal results:")
        for result in results:
            print(ConsoleOutput.format_result(result))

    @staticmethod
    def print_summary(summary: RaceSummary) -> None:
        """Print race-wide statistics."""
        print("\n" + "=" * 50)
        print("RACE SUMMARY")
        print("=" * 50)
        print(f"Competitors:   {summary.num_competitors}")
        print(f"  Finished:    {summary.status_counts.get(ResultStatus.FINISHED, 0)}")
        print(f"  NotFinished: {summary.status_counts.get(ResultStatus.NOT_FINISHED, 0)}")
        print(f"  NotStarted:  {summary.status_counts.get(ResultStatus.NOT_STARTED, 0)}")
        print(f"  Unknown:     {summary.status_counts.get(ResultStatus.UNKNOWN, 0)}")

        if summary.finish_order:
            print("\nFINISH ORDER:")
            print("-" * 50)
            for pos, (competitor_id, elapsed) in enumerate(summary.finish_order, 1):
                print(f"{pos:<4} Competitor {competitor_id:<6} {format_clock(elapsed)}")

        if summary.best_lap_speed is not None:
            print(
                f"\nBest lap speed: {summary.best_lap_speed:.3f} "
                f"(competitor {summary.best_lap_competitor})"
            )
        print(f"Mean hit rate:  {summary.mean_hit_rate:.1f}%")
        print("=" * 50)
