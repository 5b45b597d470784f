"""
Pytest configuration and shared fixtures.
"""
import json
from dataclasses import dataclass
from datetime import date
from typing import Dict, List

import pytest

from cycle_insights.models.cycle import CycleRecord


@dataclass
class FakeLambdaContext:
    """Minimal Lambda context accepted by powertools decorators."""
    function_name: str = "cycle-insights-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:cycle-insights-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def regular_history() -> List[CycleRecord]:
    """Open current cycle followed by completed cycles of 28, 30 and 26 days."""
    return [
        CycleRecord(start_date=date(2024, 3, 1)),
        CycleRecord(start_date=date(2024, 2, 2), end_date=date(2024, 3, 1), length=28),
        CycleRecord(start_date=date(2024, 1, 3), end_date=date(2024, 2, 2), length=30),
        CycleRecord(start_date=date(2023, 12, 8), end_date=date(2024, 1, 3), length=26),
    ]


@pytest.fixture
def long_cycle_history() -> List[CycleRecord]:
    """Open current cycle after two completed 35-day cycles."""
    return [
        CycleRecord(start_date=date(2024, 3, 1)),
        CycleRecord(start_date=date(2024, 1, 26), end_date=date(2024, 3, 1), length=35),
        CycleRecord(start_date=date(2023, 12, 22), end_date=date(2024, 1, 26), length=35),
    ]


@pytest.fixture
def make_event():
    """Build an API Gateway proxy event carrying a cycle history."""
    def _make_event(payload: Dict) -> Dict:
        return {
            "httpMethod": "POST",
            "body": json.dumps(payload)
        }
    return _make_event


@pytest.fixture
def regular_payload() -> Dict:
    """Regular history as sent by the app, oldest first and camelCased."""
    return {
        "cycles": [
            {"startDate": "2023-12-08", "endDate": "2024-01-03", "length": 26},
            {"startDate": "2024-01-03", "endDate": "2024-02-02", "length": 30},
            {"startDate": "2024-02-02T00:00:00.000Z", "endDate": "2024-03-01", "length": 28},
            {"startDate": "2024-03-01T09:30:00.000Z"},
        ],
        "referenceDate": "2024-03-12"
    }
