"""
Prediction model definitions for future cycle dates.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cycle_insights.models.phase import PhaseResult


class PredictionResult(BaseModel):
    """
    Projected dates for the current cycle.

    All date fields are None whenever ``average_cycle_length`` is None,
    which happens when there is not enough completed history.
    """
    model_config = ConfigDict(populate_by_name=True)

    average_cycle_length: Optional[int] = Field(None, alias="averageCycleLength")
    next_period_start: Optional[date] = Field(None, alias="nextPeriodStart")
    ovulation_date: Optional[date] = Field(None, alias="ovulationDate")
    fertile_window_start: Optional[date] = Field(None, alias="fertileWindowStart")

    @property
    def has_prediction(self) -> bool:
        """Check if there was enough history to predict."""
        return self.average_cycle_length is not None


class UpcomingEvent(BaseModel):
    """A predicted date relative to a reference date."""
    model_config = ConfigDict(populate_by_name=True)

    date: date
    days_away: int = Field(..., alias="daysAway")
    is_future: bool = Field(..., alias="isFuture")


class UpcomingEvents(BaseModel):
    """Predicted dates as shown on the predictions card."""
    model_config = ConfigDict(populate_by_name=True)

    next_period: Optional[UpcomingEvent] = Field(None, alias="nextPeriod")
    fertile_window: Optional[UpcomingEvent] = Field(None, alias="fertileWindow")
    ovulation: Optional[UpcomingEvent] = None


class CycleAverages(BaseModel):
    """
    Personal averages across logged cycles.
    """
    model_config = ConfigDict(populate_by_name=True)

    average_cycle_length: Optional[int] = Field(None, alias="averageCycleLength")
    average_period_length: Optional[int] = Field(None, alias="averagePeriodLength")
    completed_cycles: int = Field(0, alias="completedCycles")


class CycleSummary(BaseModel):
    """Phase, prediction and averages computed for one reference date."""
    model_config = ConfigDict(populate_by_name=True)

    reference_date: date = Field(..., alias="referenceDate")
    phase: PhaseResult
    prediction: PredictionResult
    averages: CycleAverages
