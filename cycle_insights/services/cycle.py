"""
Service module for menstrual cycle predictions.

This module projects the next period, ovulation and fertile window from
the lengths of completed cycles. Ovulation is estimated as a fixed luteal
phase length before the next expected period, regardless of how long the
follicular phase has been in past cycles.

Typical usage:
    history = get_user_cycles(user_id)  # most recent first
    prediction = predict(history)
    upcoming = get_upcoming_events(prediction, date.today())
"""
import math
from datetime import date
from statistics import mean
from typing import List, Optional, Sequence

from aws_lambda_powertools import Logger

from cycle_insights.models.cycle import CycleRecord
from cycle_insights.models.prediction import (
    CycleAverages,
    PredictionResult,
    UpcomingEvent,
    UpcomingEvents
)
from cycle_insights.services.constants import (
    DEFAULT_PERIOD_LENGTH,
    FERTILE_WINDOW_LEAD_DAYS,
    LUTEAL_PHASE_LENGTH
)
from cycle_insights.services.utils import add_days, days_between, js_round

logger = Logger()

def _has_length(cycle: CycleRecord) -> bool:
    # Zero, negative and NaN lengths are treated as not logged
    return cycle.length is not None and math.isfinite(cycle.length) and cycle.length > 0

def get_completed_cycles(cycle_history: Sequence[CycleRecord]) -> List[CycleRecord]:
    """
    Get the completed cycles from a history.

    The first record is the current cycle and is always excluded, even if
    it carries a length.

    Args:
        cycle_history: Cycle records ordered most-recent-first

    Returns:
        Earlier cycles that have a numeric length
    """
    return [c for c in cycle_history[1:] if _has_length(c)]

def calculate_average_cycle_length(cycle_history: Sequence[CycleRecord]) -> Optional[int]:
    """
    Calculate the rounded average length of completed cycles.

    Args:
        cycle_history: Cycle records ordered most-recent-first

    Returns:
        Average length in whole days, or None without completed cycles

    Example:
        >>> history = [current, CycleRecord(start_date=..., length=28),
        ...            CycleRecord(start_date=..., length=30),
        ...            CycleRecord(start_date=..., length=26)]
        >>> calculate_average_cycle_length(history)
        28
    """
    if len(cycle_history) < 2:
        return None

    completed = get_completed_cycles(cycle_history)
    if not completed:
        return None

    return js_round(mean(c.length for c in completed))

def predict(cycle_history: Sequence[CycleRecord]) -> PredictionResult:
    """
    Predict the next period, ovulation and fertile window.

    Args:
        cycle_history: Cycle records ordered most-recent-first. The first
            record is the current cycle and anchors every projected date.

    Returns:
        PredictionResult; all fields are None if fewer than two cycles are
        logged or none of the earlier cycles has a length

    Example:
        >>> prediction = predict(history)
        >>> if prediction.has_prediction:
        ...     print(f"Next period expected on {prediction.next_period_start}")
    """
    average_cycle_length = calculate_average_cycle_length(cycle_history)
    if average_cycle_length is None:
        logger.debug("Not enough completed cycles to predict", extra={
            "cycles": len(cycle_history)
        })
        return PredictionResult()

    last_start = cycle_history[0].start_date
    ovulation_day = js_round(average_cycle_length - LUTEAL_PHASE_LENGTH)
    ovulation_date = add_days(last_start, ovulation_day)

    prediction = PredictionResult(
        average_cycle_length=average_cycle_length,
        next_period_start=add_days(last_start, average_cycle_length),
        ovulation_date=ovulation_date,
        fertile_window_start=add_days(ovulation_date, -FERTILE_WINDOW_LEAD_DAYS)
    )
    logger.debug("Predicted cycle dates", extra={
        "average_cycle_length": average_cycle_length,
        "next_period_start": str(prediction.next_period_start),
        "ovulation_date": str(prediction.ovulation_date)
    })
    return prediction

def _upcoming(target: Optional[date], reference_date: date) -> Optional[UpcomingEvent]:
    if target is None:
        return None
    days_away = days_between(reference_date, target)
    return UpcomingEvent(date=target, days_away=days_away, is_future=days_away > 0)

def get_upcoming_events(prediction: PredictionResult, reference_date: date) -> UpcomingEvents:
    """
    Express predicted dates relative to a reference date.

    Dates that are not after the reference date are still returned, with
    ``is_future`` False, so callers can show "not enough data" for them.

    Args:
        prediction: Result of ``predict``
        reference_date: Date the countdowns are measured from

    Returns:
        UpcomingEvents with days-away countdowns
    """
    return UpcomingEvents(
        next_period=_upcoming(prediction.next_period_start, reference_date),
        fertile_window=_upcoming(prediction.fertile_window_start, reference_date),
        ovulation=_upcoming(prediction.ovulation_date, reference_date)
    )

def calculate_cycle_averages(cycle_history: Sequence[CycleRecord]) -> CycleAverages:
    """
    Calculate personal averages across every cycle with a length.

    Unlike ``predict`` this includes the current cycle when it carries a
    length. Period length is a fixed estimate until daily flow logs are
    taken into account.

    Args:
        cycle_history: Cycle records in any order

    Returns:
        CycleAverages, with None averages when no cycle has a length
    """
    lengths = [c.length for c in cycle_history if _has_length(c)]
    if not lengths:
        return CycleAverages()

    return CycleAverages(
        average_cycle_length=js_round(mean(lengths)),
        average_period_length=DEFAULT_PERIOD_LENGTH,
        completed_cycles=len(lengths)
    )
