"""
Cycle record model definition.
"""
from datetime import date, datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cycle_insights.services.utils import parse_date, sort_most_recent_first


class CycleRecord(BaseModel):
    """
    A single logged menstrual cycle.

    The most recent record (by start date) is the current cycle. A record
    without an end date is open; ``length`` is only set once the next cycle
    has started.
    """
    model_config = ConfigDict(populate_by_name=True)

    start_date: date = Field(..., alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    length: Optional[float] = None
    notes: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Optional[date]:
        if value is None:
            return None
        return parse_date(value)

    @property
    def is_open(self) -> bool:
        """Check if the cycle has not been marked complete."""
        return self.end_date is None


class CycleHistoryRequest(BaseModel):
    """
    Cycle history sent to the handlers.

    Cycles may arrive in any order; ``history`` returns them
    most-recent-first.
    """
    model_config = ConfigDict(populate_by_name=True)

    cycles: List[CycleRecord] = Field(default_factory=list)
    reference_date: date = Field(default_factory=lambda: datetime.now(timezone.utc).date(),
                                 alias="referenceDate")

    @field_validator("reference_date", mode="before")
    @classmethod
    def coerce_reference_date(cls, value: Any) -> date:
        return parse_date(value)

    @property
    def history(self) -> List[CycleRecord]:
        return sort_most_recent_first(self.cycles)
