"""Tests for status precedence and speed derivation."""

from datetime import timedelta

import pytest

from biathlon.engine import ResultFinalizer, ResultStatus
from biathlon.engine.finalizer import average_speeds
from biathlon.models import CompetitorRecord
from conftest import clock


def finished_record(**overrides) -> CompetitorRecord:
    values = dict(
        competitor_id=1,
        started=True,
        laps_completed=2,
        scheduled_start=clock("10:00:00.000"),
        finish_time=clock("10:10:00.000"),
        lap_durations=[timedelta(minutes=10)],
    )
    values.update(overrides)
    return CompetitorRecord(**values)


class TestStatusPrecedence:
    """First matching rule wins."""

    def test_finished(self, config):
        assert ResultFinalizer(config).status_of(finished_record()) == ResultStatus.FINISHED

    @pytest.mark.parametrize("overrides", [
        {"finish_time": None},
        {"disqualified": True},
        {"laps_completed": 1},
        {"laps_completed": 3},
    ])
    def test_not_finished(self, config, overrides):
        status = ResultFinalizer(config).status_of(finished_record(**overrides))
        assert status == ResultStatus.NOT_FINISHED

    def test_not_finished_beats_not_started(self, config):
        record = finished_record(disqualified=True, not_started=True)
        assert ResultFinalizer(config).status_of(record) == ResultStatus.NOT_FINISHED

    def test_not_started(self, config):
        record = finished_record(not_started=True)
        assert ResultFinalizer(config).status_of(record) == ResultStatus.NOT_STARTED

    def test_unknown(self, config):
        record = finished_record(started=False)
        assert ResultFinalizer(config).status_of(record) == ResultStatus.UNKNOWN


class TestFinalize:
    """Result records."""

    def test_finished_result(self, config):
        result = ResultFinalizer(config).finalize(finished_record(hits=4))

        assert result.elapsed == timedelta(minutes=10)
        assert result.display_status == "00:10:00.000"
        assert result.laps[0].duration == timedelta(minutes=10)
        assert result.laps[0].speed == pytest.approx(3500 / 600)
        assert result.hits == 4
        assert result.hit_capacity == 10

    @pytest.mark.parametrize("overrides, label", [
        ({"finish_time": None}, "[NotFinished]"),
        ({"not_started": True}, "[NotStarted]"),
        ({"started": False}, "[Unknown]"),
    ])
    def test_display_labels(self, config, overrides, label):
        result = ResultFinalizer(config).finalize(finished_record(**overrides))
        assert result.elapsed is None
        assert result.display_status == label

    def test_penalty_speeds(self, config):
        record = finished_record(penalty_durations=[timedelta(minutes=1), timedelta(seconds=50)])
        result = ResultFinalizer(config).finalize(record)

        assert [s.speed for s in result.penalty_laps] == pytest.approx([2.5, 3.0])


class TestAverageSpeeds:
    """Distance over time."""

    def test_empty(self):
        assert average_speeds(3500, []) == []

    def test_zero_duration_is_undefined(self):
        speeds = average_speeds(150, [timedelta(0), timedelta(seconds=30)])
        assert speeds[0] is None
        assert speeds[1] == pytest.approx(5.0)

    def test_returns_plain_floats(self):
        speeds = average_speeds(100, [timedelta(seconds=8)])
        assert type(speeds[0]) is float
        assert speeds == [12.5]
