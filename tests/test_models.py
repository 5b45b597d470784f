"""Tests for request and result models."""
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from cycle_insights.models.cycle import CycleHistoryRequest, CycleRecord
from cycle_insights.models.phase import CyclePhase, PhaseResult
from cycle_insights.models.prediction import PredictionResult


def test_cycle_record_accepts_camel_case():
    cycle = CycleRecord.model_validate({
        "startDate": "2024-02-02T00:00:00.000Z",
        "endDate": "2024-03-01",
        "length": 28,
        "notes": "light flow"
    })
    assert cycle.start_date == date(2024, 2, 2)
    assert cycle.end_date == date(2024, 3, 1)
    assert cycle.length == 28
    assert not cycle.is_open


def test_cycle_record_accepts_snake_case():
    cycle = CycleRecord(start_date="2024-03-01")
    assert cycle.start_date == date(2024, 3, 1)
    assert cycle.end_date is None
    assert cycle.is_open


def test_cycle_record_rejects_malformed_dates():
    with pytest.raises(ValidationError, match="Invalid date"):
        CycleRecord.model_validate({"startDate": "yesterday"})
    with pytest.raises(ValidationError):
        CycleRecord.model_validate({"startDate": "2024-03-01", "endDate": "soon"})


def test_cycle_record_requires_start_date():
    with pytest.raises(ValidationError):
        CycleRecord.model_validate({"length": 28})


def test_cycle_record_accepts_any_numeric_length():
    """Test that unusable lengths are kept and left for the services to skip."""
    assert CycleRecord(start_date=date(2024, 3, 1), length=0).length == 0
    assert CycleRecord.model_validate({"startDate": "2024-03-01", "length": 28.5}).length == 28.5


def test_request_orders_history(regular_payload):
    request = CycleHistoryRequest.model_validate(regular_payload)
    assert request.reference_date == date(2024, 3, 12)
    assert [c.start_date for c in request.history] == [
        date(2024, 3, 1), date(2024, 2, 2), date(2024, 1, 3), date(2023, 12, 8)
    ]


def test_request_defaults():
    """Test that an empty request means no cycles, evaluated today."""
    request = CycleHistoryRequest.model_validate({})
    assert request.cycles == []
    assert request.history == []
    assert request.reference_date == datetime.now(timezone.utc).date()


def test_request_rejects_null_reference_date():
    with pytest.raises(ValidationError):
        CycleHistoryRequest.model_validate({"cycles": [], "referenceDate": None})


def test_results_serialize_with_camel_case():
    phase = PhaseResult(cycle_day=12, cycle_phase=CyclePhase.OVULATION)
    assert phase.model_dump(mode="json", by_alias=True) == {"cycleDay": 12, "cyclePhase": "Ovulation"}
    assert phase.is_known

    prediction = PredictionResult(
        average_cycle_length=28,
        next_period_start=date(2024, 3, 29),
        ovulation_date=date(2024, 3, 15),
        fertile_window_start=date(2024, 3, 10)
    )
    assert prediction.model_dump(mode="json", by_alias=True) == {
        "averageCycleLength": 28,
        "nextPeriodStart": "2024-03-29",
        "ovulationDate": "2024-03-15",
        "fertileWindowStart": "2024-03-10"
    }


def test_phase_result_defaults_to_unknown():
    result = PhaseResult()
    assert result.cycle_day is None
    assert result.cycle_phase == CyclePhase.UNKNOWN
    assert not result.is_known
