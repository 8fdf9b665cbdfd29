"""Export race results to CSV and JSON."""

import json
from pathlib import Path
from typing import Any

import pandas as pd

from biathlon.engine.finalizer import CompetitorResult, Split
from biathlon.timing import format_clock


def _split_dict(split: Split) -> dict[str, Any]:
    return {
        "time": format_clock(split.duration),
        "seconds": split.duration.total_seconds(),
        "speed": split.speed,
    }


def results_frame(results: list[CompetitorResult]) -> pd.DataFrame:
    """One row per competitor, splits flattened to strings."""
    rows = []
    for result in results:
        rows.append({
            "competitor_id": result.competitor_id,
            "status": result.status.value,
            "display_status": result.display_status,
            "elapsed": format_clock(result.elapsed) if result.elapsed is not None else "",
            "laps_completed": result.laps_completed,
            "lap_splits": ";".join(format_clock(s.duration) for s in result.laps),
            "penalty_splits": ";".join(format_clock(s.duration) for s in result.penalty_laps),
            "penalty_count": len(result.penalty_laps),
            "hits": result.hits,
            "hit_capacity": result.hit_capacity,
        })
    columns = [
        "competitor_id", "status", "display_status", "elapsed", "laps_completed",
        "lap_splits", "penalty_splits", "penalty_count", "hits", "hit_capacity",
    ]
    return pd.DataFrame(rows, columns=columns)


class Exporter:
    """Exports race results to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_results_csv(
        self,
        results: list[CompetitorResult],
        filename: str = "results.csv",
    ) -> Path:
        """Export one row per competitor to CSV.

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename
        results_frame(results).to_csv(filepath, index=False)
        return filepath

    def export_results_json(
        self,
        results: list[CompetitorResult],
        filename: str = "results.json",
    ) -> Path:
        """Export results with full split detail to JSON.

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        data = [
            {
                "competitor_id": result.competitor_id,
                "status": result.status.value,
                "display_status": result.display_status,
                "elapsed": format_clock(result.elapsed) if result.elapsed is not None else None,
                "laps_completed": result.laps_completed,
                "laps": [_split_dict(s) for s in result.laps],
                "penalty_laps": [_split_dict(s) for s in result.penalty_laps],
                "hits": result.hits,
                "hit_capacity": result.hit_capacity,
            }
            for result in results
        ]

        with open(filepath, "w") as f:
            json.dump({"results": data}, f, indent=2)

        return filepath

    def export_all(
        self,
        results: list[CompetitorResult],
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export all result formats.

        Args:
            results: Finalized results
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "csv": self.export_results_csv(results, f"{prefix}results.csv"),
            "json": self.export_results_json(results, f"{prefix}results.json"),
        }
