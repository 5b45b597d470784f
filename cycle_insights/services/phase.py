"""
Service module for inferring the current cycle day and phase.

Phase boundaries scale with the cycle length: ovulation is placed a fixed
luteal-phase length before the next expected period, and the follicular
and ovulation phases are laid out around it.

Typical usage:
    >>> history = get_user_cycles(user_id)
    >>> result = compute_phase(history[0] if history else None, date.today())
    >>> info = get_phase_info(result.cycle_phase)
"""
import math
from datetime import date
from typing import Optional

from aws_lambda_powertools import Logger

from cycle_insights.models.cycle import CycleRecord
from cycle_insights.models.phase import CyclePhase, PhaseBoundaries, PhaseInfo, PhaseResult
from cycle_insights.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    FOLLICULAR_OVULATION_GAP,
    LUTEAL_PHASE_LENGTH,
    MENSTRUAL_DAYS,
    OVULATION_PHASE_TAIL,
    PHASE_DETAILS
)
from cycle_insights.services.utils import days_between, js_round

logger = Logger()

def compute_phase_boundaries(cycle_length: Optional[float] = None) -> PhaseBoundaries:
    """
    Calculate the last day of each phase for a cycle length.

    Args:
        cycle_length: Average cycle length in days. Missing, non-finite or non-positive
            values fall back to the default 28-day cycle.

    Returns:
        PhaseBoundaries for the effective cycle length

    Example:
        >>> compute_phase_boundaries(28)
        PhaseBoundaries(cycle_length=28, ovulation_day=14, follicular_end=11, ovulation_end=16)
    """
    if cycle_length is None or not math.isfinite(cycle_length) or cycle_length <= 0:
        cycle_length = DEFAULT_CYCLE_LENGTH

    ovulation_day = js_round(cycle_length - LUTEAL_PHASE_LENGTH)
    # Very short cycles would otherwise give an empty or negative follicular window
    if ovulation_day > MENSTRUAL_DAYS:
        follicular_end = ovulation_day - FOLLICULAR_OVULATION_GAP
    else:
        follicular_end = MENSTRUAL_DAYS

    return PhaseBoundaries(
        cycle_length=js_round(cycle_length),
        ovulation_day=ovulation_day,
        follicular_end=follicular_end,
        ovulation_end=ovulation_day + OVULATION_PHASE_TAIL
    )

def classify_cycle_day(cycle_day: int, boundaries: PhaseBoundaries) -> CyclePhase:
    """
    Map a cycle day onto a phase.

    Each boundary day belongs to the earlier phase. The menstrual check
    comes first, so on short cycles where ``follicular_end`` falls inside
    the menstrual days the follicular phase is skipped entirely and day 6
    is already Ovulation.

    Args:
        cycle_day: Day in the cycle (1-based)
        boundaries: Phase boundaries for the cycle length

    Returns:
        Phase the day falls in
    """
    if cycle_day <= MENSTRUAL_DAYS:
        return CyclePhase.MENSTRUAL
    if cycle_day <= boundaries.follicular_end:
        return CyclePhase.FOLLICULAR
    if cycle_day <= boundaries.ovulation_end:
        return CyclePhase.OVULATION
    return CyclePhase.LUTEAL

def compute_phase(
    latest_cycle: Optional[CycleRecord],
    reference_date: date,
    average_cycle_length: Optional[float] = None
) -> PhaseResult:
    """
    Determine the cycle day and phase on a reference date.

    Only an open cycle (no end date) can be placed; anything else reports
    the ``Unknown`` phase instead of raising.

    Args:
        latest_cycle: Most recent cycle record, or None if nothing is logged
        reference_date: Date to evaluate, normally today
        average_cycle_length: Optional historical average used to scale
            the phase boundaries

    Returns:
        PhaseResult with the 1-based cycle day and its phase

    Example:
        >>> cycle = CycleRecord(start_date=date(2024, 1, 1))
        >>> compute_phase(cycle, date(2024, 1, 12)).cycle_phase
        <CyclePhase.OVULATION: 'Ovulation'>
    """
    if latest_cycle is None or latest_cycle.end_date is not None:
        return PhaseResult(cycle_day=None, cycle_phase=CyclePhase.UNKNOWN)

    cycle_day = days_between(latest_cycle.start_date, reference_date) + 1
    if cycle_day <= 0:
        # Start date after the reference date
        logger.debug("Cycle starts after reference date", extra={
            "start_date": str(latest_cycle.start_date),
            "reference_date": str(reference_date)
        })
        return PhaseResult(cycle_day=1, cycle_phase=CyclePhase.MENSTRUAL)

    boundaries = compute_phase_boundaries(average_cycle_length)
    phase = classify_cycle_day(cycle_day, boundaries)

    logger.debug("Computed cycle phase", extra={
        "cycle_day": cycle_day,
        "cycle_phase": phase.value,
        "cycle_length": boundaries.cycle_length
    })
    return PhaseResult(cycle_day=cycle_day, cycle_phase=phase)

def get_phase_info(phase: CyclePhase) -> PhaseInfo:
    """Get display title and description for a phase."""
    details = PHASE_DETAILS[phase]
    return PhaseInfo(phase=phase, title=details["title"], description=details["description"])
