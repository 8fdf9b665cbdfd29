"""Race configuration model."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from biathlon.timing import parse_clock, parse_delta

SHOTS_PER_LAP = 5


class RaceConfig(BaseModel):
    """Immutable parameters of a single race."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    laps: int = Field(..., gt=0, description="Number of main laps")
    lap_length: float = Field(
        ...,
        gt=0,
        alias="lapLen",
        description="Length of one main lap in distance units",
    )
    penalty_length: float = Field(
        ...,
        gt=0,
        alias="penaltyLen",
        description="Length of one penalty lap in distance units",
    )
    firing_lines: int = Field(
        ...,
        gt=0,
        alias="firingLines",
        description="Number of firing lines on the range",
    )
    start: timedelta = Field(
        ...,
        description="Scheduled race start as an offset from midnight (HH:MM:SS.mmm)",
    )
    start_delta: timedelta = Field(
        ...,
        alias="startDelta",
        description="Maximum gap between scheduled starts and late-start grace (HH:MM:SS[.mmm])",
    )

    @field_validator("start", mode="before")
    @classmethod
    def _parse_start(cls, value):
        if isinstance(value, str):
            return parse_clock(value)
        return value

    @field_validator("start_delta", mode="before")
    @classmethod
    def _parse_start_delta(cls, value):
        if isinstance(value, str):
            return parse_delta(value)
        return value

    @property
    def hit_capacity(self) -> int:
        """Display denominator for hits: five targets per lap."""
        return self.laps * SHOTS_PER_LAP
